"""バージョン一覧の並び替え"""

from functools import cmp_to_key
from typing import Iterable

from .comparator import VersionSortEntry, compare_entries


class EmptyVersionListError(ValueError):
    """バージョン一覧が空である"""

    pass


def sort_versions(versions: Iterable[str]) -> list[str]:
    """
    バージョン文字列の一覧を新しい順に並び替える。

    セマンティックバージョンの優先順位での比較を試み、解析できないものは文字列として比較する。
    git describe 形式（例: `0.0.1-2-a1d2g3f`）は基底バージョンより新しいものとして扱う。

    Examples
    --------
    >>> sort_versions(["1.0.2", "1.0.1", "1.0.9", "1.0.10"])
    ['1.0.10', '1.0.9', '1.0.2', '1.0.1']
    >>> sort_versions(["0.0.1", "0.0.2", "0.0.1-2-a1d2g3f", "0.0.1-1-deadbeef"])
    ['0.0.2', '0.0.1-2-a1d2g3f', '0.0.1-1-deadbeef', '0.0.1']
    """
    # 比較ごとに解析し直さないよう、各バージョンを一度だけ分類・解析しておく
    entries = [VersionSortEntry.from_raw(version) for version in versions]
    entries.sort(key=cmp_to_key(compare_entries))
    return [entry.raw for entry in entries]


def get_latest_version(versions: Iterable[str]) -> str:
    """一覧の中で最も新しいバージョン文字列を返す。"""
    sorted_versions = sort_versions(versions)
    if len(sorted_versions) == 0:
        raise EmptyVersionListError("versions must be non-empty.")
    return sorted_versions[0]
