"""Window geometry persistence."""

from window_keeper.core.window_state.backend import (
    MemoryBackend,
    PersistenceBackend,
    QSettingsBackend,
    Scope,
    StoreNamespace,
)
from window_keeper.core.window_state.config import WindowStateConfig
from window_keeper.core.window_state.exceptions import (
    BackendWriteError,
    ScreenUnavailableError,
    UnknownFlavorError,
    WindowStateError,
)
from window_keeper.core.window_state.flavor import FRAME, STAGE, StoreFlavor, get_flavor
from window_keeper.core.window_state.screen import (
    FixedScreenBounds,
    QtScreenBounds,
    ScreenBoundsProvider,
    get_screen_bounds,
)
from window_keeper.core.window_state.store import WindowStateStore, create_window_state_store
from window_keeper.core.window_state.window import (
    MemoryWindow,
    QtWindowHandle,
    WindowHandle,
    as_window_handle,
)

__all__ = [
    'WindowStateStore',
    'create_window_state_store',
    'WindowStateConfig',
    'StoreFlavor',
    'FRAME',
    'STAGE',
    'get_flavor',
    'PersistenceBackend',
    'QSettingsBackend',
    'MemoryBackend',
    'Scope',
    'StoreNamespace',
    'ScreenBoundsProvider',
    'QtScreenBounds',
    'FixedScreenBounds',
    'get_screen_bounds',
    'WindowHandle',
    'QtWindowHandle',
    'MemoryWindow',
    'as_window_handle',
    'WindowStateError',
    'ScreenUnavailableError',
    'UnknownFlavorError',
    'BackendWriteError',
]
