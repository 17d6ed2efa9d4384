from .erts import InvalidErtsError, detect_erts_version, is_erts_lib, validate_erts
from .release_scanner import ReleaseVersionScanner, get_release_versions

__all__ = [
    "InvalidErtsError",
    "detect_erts_version",
    "is_erts_lib",
    "validate_erts",
    "ReleaseVersionScanner",
    "get_release_versions",
]
