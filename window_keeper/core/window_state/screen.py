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
Screen bounds providers used to compute default window geometry.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from window_keeper.core.geometry import Size
from window_keeper.core.qt_imports import QGuiApplication
from window_keeper.core.window_state.exceptions import ScreenUnavailableError

logger = logging.getLogger(__name__)


class ScreenBoundsProvider(ABC):
    """Reports the maximum usable screen area."""

    @abstractmethod
    def maximum_size(self) -> Size:
        pass


class FixedScreenBounds(ScreenBoundsProvider):
    """Screen bounds with a fixed, caller-supplied size."""

    def __init__(self, width: float, height: float):
        self._size = Size(float(width), float(height))

    def maximum_size(self) -> Size:
        return self._size


class QtScreenBounds(ScreenBoundsProvider):
    """
    Available geometry of the primary screen.

    The screen is queried on the first call and the result is kept for the
    lifetime of the provider.
    """

    def __init__(self):
        self._size: Optional[Size] = None

    def maximum_size(self) -> Size:
        """
        Get the usable size of the primary screen.

        Returns:
            Size of the primary screen's available geometry

        Raises:
            ScreenUnavailableError: If no QGuiApplication or screen exists
        """
        if self._size is None:
            if QGuiApplication.instance() is None:
                raise ScreenUnavailableError("no QGuiApplication instance")
            screen = QGuiApplication.primaryScreen()
            if screen is None:
                raise ScreenUnavailableError("no primary screen")
            available = screen.availableGeometry()
            self._size = Size(float(available.width()), float(available.height()))
            logger.debug(f"Maximum screen size: {self._size.width} x {self._size.height}")
        return self._size


# Global instance
_screen_bounds: Optional[QtScreenBounds] = None


def get_screen_bounds() -> ScreenBoundsProvider:
    """
    Get the global screen bounds provider.

    Returns:
        QtScreenBounds instance shared by the process
    """
    global _screen_bounds
    if _screen_bounds is None:
        _screen_bounds = QtScreenBounds()
    return _screen_bounds
