"""バージョンの順序付け"""

from dataclasses import dataclass
from typing import Self

from .classifier import classify
from .model import (
    DescribeVersion,
    ParsedVersion,
    SemanticVersion,
    StandardVersion,
    VersionClassification,
)
from .parser import parse_key


@dataclass(frozen=True)
class VersionSortEntry:
    """並び替え対象のバージョン文字列と、その分類・解析結果の組"""

    raw: str
    classification: VersionClassification
    parsed: ParsedVersion

    @classmethod
    def from_raw(cls, raw: str) -> Self:
        """バージョン文字列を分類・解析して並び替え用の値を生成する。"""
        classification = classify(raw)
        return cls(raw=raw, classification=classification, parsed=parse_key(classification))


def _tie_break(a: VersionClassification, b: VersionClassification) -> bool:
    """優先順位の等しい 2 つのバージョンの順序を分類に基づいて決める。"""
    match a, b:
        case StandardVersion(), StandardVersion():
            # 異なる文字列がビルドメタデータを除いて同じ優先順位になった場合にのみ到達する
            return a.raw > b.raw
        case StandardVersion(), DescribeVersion():
            # b は a から進んだ開発版
            return False
        case DescribeVersion(), StandardVersion():
            return True
        case DescribeVersion(), DescribeVersion():
            return a.commits_since > b.commits_since
        case _:
            raise TypeError((a, b))


def entry_precedes(a: VersionSortEntry, b: VersionSortEntry) -> bool:
    """
    降順（新しい順）に並べたとき `a` が `b` より前に来るか否かを返す。

    両者がセマンティックバージョンとして解析できた場合は優先順位で比較し、等しければ分類で決める。
    どちらかが解析できなかった場合は比較用文字列の辞書順で比較する。
    この場合は解析済みのバージョンと混在したリスト全体での推移性を保証しない。
    """
    if isinstance(a.parsed, SemanticVersion) and isinstance(b.parsed, SemanticVersion):
        order = a.parsed.version.compare(b.parsed.version)
        if order > 0:
            return True
        if order < 0:
            return False
        return _tie_break(a.classification, b.classification)
    return a.parsed.key > b.parsed.key


def precedes(a: str, b: str) -> bool:
    """降順（新しい順）に並べたときバージョン文字列 `a` が `b` より前に来るか否かを返す。"""
    return entry_precedes(VersionSortEntry.from_raw(a), VersionSortEntry.from_raw(b))


def compare_entries(a: VersionSortEntry, b: VersionSortEntry) -> int:
    """`functools.cmp_to_key` 向けの三方比較。`a` が前に来るとき負の値を返す。"""
    if entry_precedes(a, b):
        return -1
    if entry_precedes(b, a):
        return 1
    return 0
