from .setting_manager import USER_SETTING_PATH, Setting, SettingHandler, SettingLoadError

__all__ = [
    "USER_SETTING_PATH",
    "Setting",
    "SettingHandler",
    "SettingLoadError",
]
