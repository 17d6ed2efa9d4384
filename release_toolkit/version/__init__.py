"""バージョン文字列の分類・解析・並び替え"""

from .version_sorter import EmptyVersionListError, get_latest_version, sort_versions

__all__ = [
    "EmptyVersionListError",
    "get_latest_version",
    "sort_versions",
]
