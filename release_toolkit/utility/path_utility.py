"""パスに関する utility"""

from pathlib import Path

from platformdirs import user_data_dir


def get_save_dir() -> Path:
    """設定ファイルの保存先ディレクトリを指すパスを取得する。"""
    return Path(user_data_dir("release-toolkit"))
