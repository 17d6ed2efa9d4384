"""ファイル操作に関するユーティリティ"""

import os
import random
import shutil
import tempfile
from logging import getLogger
from pathlib import Path
from typing import Iterable, TypeAlias

__all__ = [
    "ReleaseFileError",
    "is_symlink",
    "mkdir_temp",
    "remove_if_exists",
    "remove_symlink_or_dir",
    "write_all",
]

logger = getLogger(__name__)

WriteSpec: TypeAlias = tuple[Path | str, str | bytes] | tuple[Path | str, str | bytes, int]


class ReleaseFileError(Exception):
    """リリースの組み立てに伴うファイル操作に失敗した"""

    def __init__(self, path: Path | str, reason: OSError):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path} の操作に失敗しました: {reason}")


def write_all(files: Iterable[WriteSpec]) -> None:
    """
    複数のファイルを順に書き込む。

    Parameters
    ----------
    files : Iterable[WriteSpec]
        `(パス, 内容)` あるいは `(パス, 内容, パーミッション)` の列。
        パーミッションが指定された場合は書き込み後に設定する。

    Raises
    ------
    ReleaseFileError
        書き込みあるいはパーミッション設定に失敗した場合。以降のファイルは書き込まない。
    """
    for spec in files:
        path = Path(spec[0])
        content = spec[1]
        try:
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
            if len(spec) == 3:
                path.chmod(spec[2])
        except OSError as e:
            raise ReleaseFileError(path, e) from e


_MKDIR_TEMP_MAX_ATTEMPTS = 100


def mkdir_temp() -> Path:
    """
    システムの一時ディレクトリ内に `.tmp_dir<乱数>` という名前の新しいディレクトリを作成する。

    同名のディレクトリが既に存在する場合は別の乱数で作成し直し、既存のディレクトリは返さない。
    """
    tmpdir_path = Path(tempfile.gettempdir())
    for _ in range(_MKDIR_TEMP_MAX_ATTEMPTS):
        unique_num = random.randint(1, 1_000_000_000)
        tmpdir_path = Path(tempfile.gettempdir()) / f".tmp_dir{unique_num}"
        try:
            tmpdir_path.mkdir(mode=0o700)
        except FileExistsError:
            continue
        except OSError as e:
            raise ReleaseFileError(tmpdir_path, e) from e
        return tmpdir_path
    raise ReleaseFileError(
        tmpdir_path, FileExistsError("一時ディレクトリ名の候補が全て使用済みです。")
    )


def is_symlink(path: Path | str) -> bool:
    """パスがシンボリックリンクであるか否かを返す。"""
    return os.path.islink(path)


def remove_if_exists(path: Path | str) -> None:
    """パスが存在する場合はファイルあるいはディレクトリごと削除する。"""
    target = Path(path)
    if not target.exists():
        return
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as e:
        raise ReleaseFileError(target, e) from e


def remove_symlink_or_dir(path: Path | str) -> None:
    """
    パスを削除する。

    リンク先の存在しないシンボリックリンクは `exists()` が偽になるため、リンク自体を削除する。
    """
    target = Path(path)
    try:
        if target.exists():
            remove_if_exists(target)
        elif is_symlink(target):
            logger.debug("Removing dangling symlink %s.", target)
            target.unlink()
    except OSError as e:
        raise ReleaseFileError(target, e) from e
