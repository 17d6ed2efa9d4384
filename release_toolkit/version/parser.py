"""分類済みバージョンの解析"""

from semver.version import Version

from .model import (
    ParsedVersion,
    SemanticVersion,
    UnsemanticVersion,
    VersionClassification,
    comparison_key,
)


def parse_key(classification: VersionClassification) -> ParsedVersion:
    """
    分類済みバージョンを比較用の値へ変換する。

    Parameters
    ----------
    classification : VersionClassification
        `classify()` による分類結果

    Returns
    -------
    parsed : ParsedVersion
        セマンティックバージョンとして解析できた場合は `SemanticVersion`、
        解析できなかった場合は比較用文字列をそのまま保持する `UnsemanticVersion`
    """
    key = comparison_key(classification)
    try:
        version = Version.parse(key)
    except ValueError:
        return UnsemanticVersion(key=key)
    return SemanticVersion(key=key, version=version)
