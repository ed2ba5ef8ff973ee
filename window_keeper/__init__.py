"""
Window Keeper: persist and restore window geometry across runs, and resolve
OS-specific conventions such as the app-data directory.
"""

from window_keeper.config.__version__ import __version__
from window_keeper.core.geometry import DefaultGeometry, Point, Size, WindowGeometry
from window_keeper.core.platform import PlatformKind, get_platform
from window_keeper.core.window_state import (
    FRAME,
    STAGE,
    MemoryBackend,
    QSettingsBackend,
    StoreNamespace,
    WindowStateStore,
    create_window_state_store,
)

__all__ = [
    '__version__',
    'Size',
    'Point',
    'WindowGeometry',
    'DefaultGeometry',
    'PlatformKind',
    'get_platform',
    'WindowStateStore',
    'create_window_state_store',
    'StoreNamespace',
    'QSettingsBackend',
    'MemoryBackend',
    'FRAME',
    'STAGE',
]
