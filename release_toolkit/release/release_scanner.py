"""リリース出力ディレクトリに存在するリリースバージョンの走査"""

import re
from logging import getLogger
from pathlib import Path
from typing import Final

from ..version.version_sorter import sort_versions

__all__ = ["ReleaseVersionScanner", "get_release_versions"]

RELEASES_DIR_NAME: Final = "releases"
VALID_VERSION_PATTERN: Final = re.compile(r"^\d+.*$")

logger = getLogger(__name__)


def get_release_versions(output_dir: Path | str) -> list[str]:
    """
    リリース出力ディレクトリに存在するリリースバージョンを新しい順に取得する。

    Parameters
    ----------
    output_dir : Path | str
        リリース出力ディレクトリ。直下の `releases` ディレクトリのエントリ名をバージョンとみなす。

    Returns
    -------
    versions : list[str]
        数字で始まるエントリ名の一覧（新しい順）。`releases` ディレクトリが存在しない場合は空。
    """
    releases_dir = Path(output_dir) / RELEASES_DIR_NAME
    if not releases_dir.exists():
        logger.debug("%s does not exist.", releases_dir)
        return []

    # NOTE: 権限不足等の OSError はそのまま呼び出し元へ送出する
    entries = [entry.name for entry in releases_dir.iterdir()]
    versions = [name for name in entries if VALID_VERSION_PATTERN.match(name)]
    logger.debug(
        "Found %d release versions in %s (%d entries).",
        len(versions),
        releases_dir,
        len(entries),
    )
    return sort_versions(versions)


class ReleaseVersionScanner:
    """リリース出力ディレクトリのリリースバージョンの走査"""

    def __init__(self, output_dir: Path | str):
        self.output_dir = Path(output_dir)

    @property
    def releases_dir(self) -> Path:
        """リリースバージョンのディレクトリが置かれるディレクトリ"""
        return self.output_dir / RELEASES_DIR_NAME

    def list_versions(self) -> list[str]:
        """リリースバージョンを新しい順に取得する。"""
        return get_release_versions(self.output_dir)

    def latest_version(self) -> str | None:
        """最新のリリースバージョンを取得する。リリースが存在しない場合は None を返す。"""
        versions = self.list_versions()
        if len(versions) == 0:
            return None
        return versions[0]
