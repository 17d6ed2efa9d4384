from .file_utility import (
    ReleaseFileError,
    is_symlink,
    mkdir_temp,
    remove_if_exists,
    remove_symlink_or_dir,
    write_all,
)
from .path_utility import get_save_dir
from .text_utility import indent_message, newline

__all__ = [
    "ReleaseFileError",
    "is_symlink",
    "mkdir_temp",
    "remove_if_exists",
    "remove_symlink_or_dir",
    "write_all",
    "get_save_dir",
    "indent_message",
    "newline",
]
