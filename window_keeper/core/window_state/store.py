# SPDX-License-Identifier: Apache-2.0
#
# Copyright (c) 2026 Window Keeper Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Window state persistence.

A WindowStateStore saves a window's size, position and maximize state to a
persistence backend and applies it back on the next run. When nothing is
stored it falls back to caller defaults, then to a size chosen by the store's
flavor and a position that centers the window on the screen.

Default resolution order: width and height always resolve before x and y,
because the centered position is computed from the resolved size.
"""

import logging
from typing import Optional

from window_keeper.config.constants import STATE_MAXIMIZED_BOTH, STATE_NORMAL
from window_keeper.core.geometry import DefaultGeometry, Point, Size
from window_keeper.core.window_state.backend import (
    PersistenceBackend,
    QSettingsBackend,
    StoreNamespace,
)
from window_keeper.core.window_state.config import WindowStateConfig
from window_keeper.core.window_state.flavor import (
    FRAME,
    FallbackPolicy,
    StateEncoding,
    StoreFlavor,
)
from window_keeper.core.window_state.screen import ScreenBoundsProvider, get_screen_bounds
from window_keeper.core.window_state.window import as_window_handle

logger = logging.getLogger(__name__)


def _is_maximized_mask(state: int) -> bool:
    return (state & STATE_MAXIMIZED_BOTH) == STATE_MAXIMIZED_BOTH


class WindowStateStore:
    """Saves and restores one window's geometry through a persistence backend."""

    def __init__(
        self,
        backend: PersistenceBackend,
        flavor: StoreFlavor = FRAME,
        defaults: Optional[DefaultGeometry] = None,
        screen_bounds: Optional[ScreenBoundsProvider] = None,
    ):
        """
        Initialize the store.

        Args:
            backend: Where the values are persisted
            flavor: Key layout and fallback policy
            defaults: Values used when nothing is stored
            screen_bounds: Screen size source for fallbacks; the process-wide
                Qt provider is used when omitted
        """
        self._backend = backend
        self._flavor = flavor
        self._defaults = defaults or DefaultGeometry()
        self._screen_bounds = screen_bounds

    @classmethod
    def for_path(cls, user_root: bool, first: str, *nodes: str, **kwargs) -> "WindowStateStore":
        """
        Create a store backed by QSettings at an explicit path.

        Args:
            user_root: True for per-user settings, False for system-wide
            first: First path segment (the organization)
            *nodes: Further path segments
            **kwargs: Passed on to the constructor

        Returns:
            WindowStateStore instance
        """
        namespace = StoreNamespace.from_path(user_root, first, *nodes)
        return cls(QSettingsBackend(namespace), **kwargs)

    @classmethod
    def for_type(cls, user_root: bool, owner: type, **kwargs) -> "WindowStateStore":
        """Create a store backed by QSettings at a path derived from a class."""
        namespace = StoreNamespace.for_type(user_root, owner)
        return cls(QSettingsBackend(namespace), **kwargs)

    # ------------------------------------------------------------------ #
    # Collaborators                                                        #
    # ------------------------------------------------------------------ #

    @property
    def backend(self) -> PersistenceBackend:
        return self._backend

    @property
    def namespace(self) -> StoreNamespace:
        return self._backend.namespace

    @property
    def flavor(self) -> StoreFlavor:
        return self._flavor

    # ------------------------------------------------------------------ #
    # Defaults                                                             #
    # ------------------------------------------------------------------ #

    @property
    def defaults(self) -> DefaultGeometry:
        return self._defaults

    @defaults.setter
    def defaults(self, defaults: Optional[DefaultGeometry]) -> None:
        self._defaults = defaults or DefaultGeometry()

    @property
    def default_size(self) -> Optional[Size]:
        """Default size, or None if no complete default size is set."""
        return self._defaults.size

    @default_size.setter
    def default_size(self, size: Optional[Size]) -> None:
        self._defaults = self._defaults.with_size(size)

    @property
    def default_location(self) -> Optional[Point]:
        """Default location, or None if no complete default location is set."""
        return self._defaults.location

    @default_location.setter
    def default_location(self, point: Optional[Point]) -> None:
        self._defaults = self._defaults.with_location(point)

    def set_default_width(self, width: Optional[float]) -> "WindowStateStore":
        self._defaults = DefaultGeometry(width, self._defaults.height, self._defaults.x, self._defaults.y)
        return self

    def set_default_height(self, height: Optional[float]) -> "WindowStateStore":
        self._defaults = DefaultGeometry(self._defaults.width, height, self._defaults.x, self._defaults.y)
        return self

    def set_default_x(self, x: Optional[float]) -> "WindowStateStore":
        self._defaults = DefaultGeometry(self._defaults.width, self._defaults.height, x, self._defaults.y)
        return self

    def set_default_y(self, y: Optional[float]) -> "WindowStateStore":
        self._defaults = DefaultGeometry(self._defaults.width, self._defaults.height, self._defaults.x, y)
        return self

    def _max_screen_size(self) -> Size:
        provider = self._screen_bounds or get_screen_bounds()
        return provider.maximum_size()

    def _fallback_width(self) -> float:
        if self._flavor.fallback_policy is FallbackPolicy.FIXED:
            return self._flavor.fallback_width
        return self._max_screen_size().width / 2

    def _fallback_height(self) -> float:
        if self._flavor.fallback_policy is FallbackPolicy.FIXED:
            return self._flavor.fallback_height
        return self._max_screen_size().height / 2

    # ------------------------------------------------------------------ #
    # Size and position                                                    #
    # ------------------------------------------------------------------ #

    def get_width(self) -> float:
        """
        Get the window width.

        Returns:
            The stored width; otherwise the default width; otherwise the
            flavor's fallback (half the screen width, or a fixed width)
        """
        if self._backend.contains(self._flavor.width_key):
            return self._backend.get_float(self._flavor.width_key, 0.0)
        if self._defaults.width is not None:
            return self._defaults.width
        return self._fallback_width()

    def get_height(self) -> float:
        """Get the window height, resolved like get_width()."""
        if self._backend.contains(self._flavor.height_key):
            return self._backend.get_float(self._flavor.height_key, 0.0)
        if self._defaults.height is not None:
            return self._defaults.height
        return self._fallback_height()

    def get_x(self) -> float:
        """
        Get the window's x position.

        Returns:
            The stored x; otherwise the default x; otherwise the x that
            centers a window of width get_width() on the screen
        """
        if self._backend.contains(self._flavor.x_key):
            return self._backend.get_float(self._flavor.x_key, 0.0)
        if self._defaults.x is not None:
            return self._defaults.x
        return (self._max_screen_size().width / 2) - (self.get_width() / 2)

    def get_y(self) -> float:
        """Get the window's y position, resolved like get_x() using get_height()."""
        if self._backend.contains(self._flavor.y_key):
            return self._backend.get_float(self._flavor.y_key, 0.0)
        if self._defaults.y is not None:
            return self._defaults.y
        return (self._max_screen_size().height / 2) - (self.get_height() / 2)

    def set_width(self, width: float) -> "WindowStateStore":
        self._backend.put_float(self._flavor.width_key, width)
        return self

    def set_height(self, height: float) -> "WindowStateStore":
        self._backend.put_float(self._flavor.height_key, height)
        return self

    def set_x(self, x: float) -> "WindowStateStore":
        self._backend.put_float(self._flavor.x_key, x)
        return self

    def set_y(self, y: float) -> "WindowStateStore":
        self._backend.put_float(self._flavor.y_key, y)
        return self

    def get_size(self) -> Size:
        return Size(self.get_width(), self.get_height())

    def set_size(self, size: Size) -> "WindowStateStore":
        return self.set_width(size.width).set_height(size.height)

    def get_location(self) -> Point:
        return Point(self.get_x(), self.get_y())

    def set_location(self, point: Point) -> "WindowStateStore":
        return self.set_x(point.x).set_y(point.y)

    # ------------------------------------------------------------------ #
    # Window state                                                         #
    # ------------------------------------------------------------------ #

    def get_state(self) -> int:
        """
        Get the extended window state bitmask.

        Boolean-encoded flavors report ``STATE_MAXIMIZED_BOTH`` or
        ``STATE_NORMAL``.
        """
        if self._flavor.state_encoding is StateEncoding.BITMASK:
            return self._backend.get_int(self._flavor.state_key, STATE_NORMAL)
        if self._backend.get_bool(self._flavor.state_key, False):
            return STATE_MAXIMIZED_BOTH
        return STATE_NORMAL

    def set_state(self, state: int) -> "WindowStateStore":
        """
        Set the extended window state bitmask.

        Boolean-encoded flavors keep only whether the mask is maximized.
        """
        if self._flavor.state_encoding is StateEncoding.BITMASK:
            self._backend.put_int(self._flavor.state_key, state)
        else:
            self._backend.put_bool(self._flavor.state_key, _is_maximized_mask(state))
        return self

    def is_maximized(self) -> bool:
        if self._flavor.state_encoding is StateEncoding.BITMASK:
            return _is_maximized_mask(self.get_state())
        return self._backend.get_bool(self._flavor.state_key, False)

    def set_maximized(self, maximized: bool) -> "WindowStateStore":
        if self._flavor.state_encoding is StateEncoding.BITMASK:
            self._backend.put_int(
                self._flavor.state_key,
                STATE_MAXIMIZED_BOTH if maximized else STATE_NORMAL,
            )
        else:
            self._backend.put_bool(self._flavor.state_key, maximized)
        return self

    # ------------------------------------------------------------------ #
    # Save / apply                                                         #
    # ------------------------------------------------------------------ #

    def save(self, window) -> None:
        """
        Save a window's size, position and maximize state.

        The maximize flag is always written. Size and position are left
        untouched while the window is maximized (or iconified, if the flavor
        says so), so the last normal geometry survives.

        Args:
            window: A WindowHandle or a top-level QWidget
        """
        geometry = as_window_handle(window).geometry()
        self.set_maximized(geometry.maximized)

        if geometry.maximized:
            logger.debug(f"Window maximized, keeping stored geometry in {self.namespace}")
            return
        if geometry.iconified and self._flavor.skip_save_when_iconified:
            logger.debug(f"Window iconified, keeping stored geometry in {self.namespace}")
            return

        self.set_width(geometry.width).set_height(geometry.height)
        self.set_x(geometry.x).set_y(geometry.y)
        logger.debug(
            f"Window state saved to {self.namespace}: "
            f"{geometry.width}x{geometry.height} at ({geometry.x}, {geometry.y})"
        )

    def apply(self, window) -> None:
        """
        Apply the stored size, maximize state and position to a window.

        Size is applied first. Position is skipped for a maximized window.

        Args:
            window: A WindowHandle or a top-level QWidget
        """
        handle = as_window_handle(window)
        handle.set_size(self.get_width(), self.get_height())

        maximized = self.is_maximized()
        handle.set_maximized(maximized)
        if maximized:
            logger.debug(f"Window state applied from {self.namespace} (maximized)")
            return

        handle.set_location(self.get_x(), self.get_y())
        logger.debug(f"Window state applied from {self.namespace}")

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._flavor == other._flavor
            and self.namespace == other.namespace
            and self._defaults == other._defaults
        )

    def __hash__(self) -> int:
        return hash((self._flavor, self.namespace, self._defaults))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(namespace={self.namespace}, "
            f"flavor={self._flavor.name!r}, defaults={self._defaults})"
        )


def create_window_state_store(
    name: str,
    config: Optional[WindowStateConfig] = None,
    screen_bounds: Optional[ScreenBoundsProvider] = None,
) -> WindowStateStore:
    """
    Create a QSettings-backed store from configuration.

    The store lives at ``<organization>/<application>/<name>``.

    Args:
        name: Identity of the window, e.g. ``"main_window"``
        config: Store configuration; library defaults when omitted
        screen_bounds: Optional screen bounds provider

    Returns:
        WindowStateStore instance
    """
    config = config or WindowStateConfig()
    namespace = StoreNamespace.from_path(
        config.user_root, config.organization, config.application, name
    )
    return WindowStateStore(
        QSettingsBackend(namespace),
        flavor=config.to_flavor(),
        defaults=config.to_defaults(),
        screen_bounds=screen_bounds,
    )
