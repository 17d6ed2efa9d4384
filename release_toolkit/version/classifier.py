"""バージョン文字列の分類"""

import re
from typing import Final

from .model import DescribeVersion, StandardVersion, VersionClassification

# NOTE: ハッシュの文字クラスは16進数 (`0-9a-fA-F`) ではなく `A-G`/`a-g` を許容する。既存のリリース名との互換性のため変更しない。
GIT_DESCRIBE_PATTERN: Final = re.compile(
    r"(?P<ver>\d+\.\d+\.\d+)-(?P<commits>\d+)-(?P<hash>[A-Ga-g0-9]+)"
)


def classify(raw: str) -> VersionClassification:
    """バージョン文字列を git describe 形式か通常形式かに分類する。"""
    match = GIT_DESCRIBE_PATTERN.search(raw)
    if match is None:
        return StandardVersion(raw=raw)
    return DescribeVersion(
        raw=raw,
        base=match.group("ver"),
        commits_since=int(match.group("commits")),
        hash=match.group("hash"),
    )
