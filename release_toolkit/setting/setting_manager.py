"""ツール設定関連の処理"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from ..utility.path_utility import get_save_dir


@dataclass(frozen=True)
class Setting:
    """ツールの設定情報"""

    output_dir: Path | None = None  # リリース出力ディレクトリ
    include_erts: Path | bool | None = None  # 同梱するランタイムディレクトリ


_setting_adapter = TypeAdapter(Setting)


USER_SETTING_PATH: Path = get_save_dir() / "setting.yml"


class SettingLoadError(Exception):
    """設定ファイルの読み込みに失敗した"""

    pass


class SettingHandler:
    def __init__(self, setting_file_path: Path) -> None:
        """
        設定ファイルの管理
        Parameters
        ----------
        setting_file_path : Path
            設定ファイルのパス。存在しない場合はデフォルト値を設定。
        """
        self.setting_file_path = setting_file_path

    def load(self) -> Setting:
        """設定値をファイルから読み込む。"""
        if not self.setting_file_path.is_file():
            # 設定ファイルが存在しないためデフォルト値を取得
            return Setting()

        try:
            setting = yaml.safe_load(self.setting_file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            msg = f"設定ファイル {self.setting_file_path} の形式が不正です。"
            raise SettingLoadError(msg) from e

        # 空のファイルはデフォルト値として扱う
        if setting is None:
            return Setting()

        try:
            return _setting_adapter.validate_python(setting)
        except ValidationError as e:
            msg = f"設定ファイル {self.setting_file_path} の値が不正です。"
            raise SettingLoadError(msg) from e

    def save(self, settings: Setting) -> None:
        """設定値をファイルへ書き込む。"""
        settings_dict: dict[str, Any] = _setting_adapter.dump_python(settings, mode="json")

        with open(self.setting_file_path, mode="w", encoding="utf-8") as f:
            yaml.safe_dump(settings_dict, f)
