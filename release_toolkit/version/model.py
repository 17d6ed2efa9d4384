"""
バージョン並び替え機能が内部で共有するモデル（データ構造）

分類結果 (`VersionClassification`) と解析結果 (`ParsedVersion`) はどちらも 2 種類の値をとる直和型である。
"""

from dataclasses import dataclass
from typing import TypeAlias

from semver.version import Version


@dataclass(frozen=True)
class StandardVersion:
    """git describe 形式に該当しない通常のバージョン文字列"""

    raw: str


@dataclass(frozen=True)
class DescribeVersion:
    """
    git describe 形式の疑似バージョン文字列

    例: `0.2.1-1-d3adb3f` は基底バージョン `0.2.1` のタグから 1 コミット進んだ状態を表す。
    """

    raw: str
    base: str  # 基底バージョン（例: `0.2.1`）
    commits_since: int  # 基底バージョンのタグ以降のコミット数
    hash: str  # コミットハッシュの断片（`[A-Ga-g0-9]+`）


VersionClassification: TypeAlias = StandardVersion | DescribeVersion


@dataclass(frozen=True)
class SemanticVersion:
    """セマンティックバージョンとして解析できたバージョン"""

    key: str
    version: Version


@dataclass(frozen=True)
class UnsemanticVersion:
    """セマンティックバージョンとして解析できず、文字列として比較されるバージョン"""

    key: str


ParsedVersion: TypeAlias = SemanticVersion | UnsemanticVersion


def comparison_key(classification: VersionClassification) -> str:
    """
    セマンティックバージョンとして解析する比較用の文字列を生成する。

    git describe 形式はコミット数とハッシュをビルドメタデータ (`+{commits}-{hash}`) として基底バージョンへ付与する。
    ビルドメタデータは優先順位に影響しないため、同じ基底バージョンの通常形式とは優先順位が等しくなる。
    """
    if isinstance(classification, DescribeVersion):
        return f"{classification.base}+{classification.commits_since}-{classification.hash}"
    return classification.raw
