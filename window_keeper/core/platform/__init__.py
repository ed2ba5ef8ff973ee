"""Platform detection and OS-specific conventions."""

from window_keeper.core.platform.exceptions import MissingEnvironmentError, PlatformError
from window_keeper.core.platform.provider import (
    PlatformKind,
    classify_os,
    get_app_data_directory,
    get_default_platform,
    get_local_address,
    get_platform,
    get_terminate,
    get_trash_name,
    reset_platform,
)

__all__ = [
    'PlatformKind',
    'PlatformError',
    'MissingEnvironmentError',
    'classify_os',
    'get_platform',
    'get_default_platform',
    'reset_platform',
    'get_app_data_directory',
    'get_terminate',
    'get_trash_name',
    'get_local_address',
]
