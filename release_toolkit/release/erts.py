"""同梱するランタイム (ERTS) ディレクトリの検証"""

from pathlib import Path
from typing import Literal, TypeAlias

__all__ = [
    "InvalidErtsError",
    "detect_erts_version",
    "is_erts_lib",
    "validate_erts",
]

ErtsErrorReason: TypeAlias = Literal[
    "missing_directory",
    "too_many",
    "missing_bin",
    "missing_lib",
    "cannot_determine_version",
]

_ERTS_PREFIX = "erts-"


class InvalidErtsError(Exception):
    """ランタイムディレクトリが不正である"""

    def __init__(self, reasons: list[ErtsErrorReason]):
        self.reasons = reasons
        super().__init__(f"ランタイムディレクトリが不正です: {', '.join(reasons)}")


def validate_erts(path: Path | str | bool | None) -> None:
    """
    同梱するランタイムディレクトリを検証する。

    パスが指定されていない場合（None または真偽値）はシステムのランタイムを用いるため検証しない。

    Parameters
    ----------
    path : Path | str | bool | None
        ランタイムディレクトリのパス

    Raises
    ------
    InvalidErtsError
        `erts-*` がちょうど 1 つ存在しない、あるいは `bin` または `lib` が存在しない場合。
        検出した全ての問題を `reasons` に保持する。
    """
    if path is None or isinstance(path, bool):
        return

    root = Path(path)
    reasons: list[ErtsErrorReason] = []

    erts_count = len(list(root.glob(f"{_ERTS_PREFIX}*")))
    if erts_count == 0:
        reasons.append("missing_directory")
    elif erts_count > 1:
        reasons.append("too_many")

    if not (root / "bin").exists():
        reasons.append("missing_bin")
    if not (root / "lib").exists():
        reasons.append("missing_lib")

    if len(reasons) > 0:
        raise InvalidErtsError(reasons)


def detect_erts_version(path: Path | str) -> str:
    """ランタイムディレクトリ内の `erts-<version>` からランタイムのバージョンを検出する。"""
    root = Path(path).expanduser().resolve()
    entries = [entry.name for entry in root.glob(f"{_ERTS_PREFIX}*")]
    if len(entries) != 1:
        raise InvalidErtsError(["cannot_determine_version"])
    return entries[0].removeprefix(_ERTS_PREFIX)


def is_erts_lib(app_dir: Path | str, lib_dir: Path | str) -> bool:
    """アプリケーションディレクトリがランタイムのライブラリディレクトリ配下にあるか否かを返す。"""
    return str(app_dir).startswith(str(lib_dir))
