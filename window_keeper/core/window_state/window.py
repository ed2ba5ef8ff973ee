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
Window handles: the view of a live window that state stores read and write.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional

from window_keeper.core.geometry import WindowGeometry
from window_keeper.core.qt_imports import Qt, QWidget


class WindowHandle(ABC):
    """Read/write access to a window's position, size and maximize flag."""

    @abstractmethod
    def geometry(self) -> WindowGeometry:
        """Snapshot of the window's current geometry and state."""

    @abstractmethod
    def set_size(self, width: float, height: float) -> None:
        pass

    @abstractmethod
    def set_location(self, x: float, y: float) -> None:
        pass

    @abstractmethod
    def set_maximized(self, maximized: bool) -> None:
        pass


class MemoryWindow(WindowHandle):
    """A window that only exists as a WindowGeometry."""

    def __init__(self, geometry: Optional[WindowGeometry] = None):
        self._geometry = replace(geometry) if geometry is not None else WindowGeometry()

    def geometry(self) -> WindowGeometry:
        return replace(self._geometry)

    def set_size(self, width: float, height: float) -> None:
        self._geometry.width = width
        self._geometry.height = height

    def set_location(self, x: float, y: float) -> None:
        self._geometry.x = x
        self._geometry.y = y

    def set_maximized(self, maximized: bool) -> None:
        self._geometry.maximized = maximized


class QtWindowHandle(WindowHandle):
    """
    Handle over a top-level QWidget.

    Position is the frame position (``x()``/``move()``), size is the client
    area (``width()``/``resize()``). Stored floats are rounded to whole pixels.
    """

    def __init__(self, widget: QWidget):
        self._widget = widget

    @property
    def widget(self) -> QWidget:
        return self._widget

    def geometry(self) -> WindowGeometry:
        widget = self._widget
        return WindowGeometry(
            x=float(widget.x()),
            y=float(widget.y()),
            width=float(widget.width()),
            height=float(widget.height()),
            maximized=widget.isMaximized(),
            iconified=widget.isMinimized(),
        )

    def set_size(self, width: float, height: float) -> None:
        self._widget.resize(round(width), round(height))

    def set_location(self, x: float, y: float) -> None:
        self._widget.move(round(x), round(y))

    def set_maximized(self, maximized: bool) -> None:
        state = self._widget.windowState()
        if maximized:
            state |= Qt.WindowState.WindowMaximized
        else:
            state &= ~Qt.WindowState.WindowMaximized
        self._widget.setWindowState(state)


def as_window_handle(window) -> WindowHandle:
    """
    Coerce a window object into a WindowHandle.

    Args:
        window: A WindowHandle (returned unchanged) or a QWidget

    Returns:
        WindowHandle for the window

    Raises:
        TypeError: If the object is neither
    """
    if isinstance(window, WindowHandle):
        return window
    if isinstance(window, QWidget):
        return QtWindowHandle(window)
    raise TypeError(f"Cannot manage window state of {type(window).__name__}")
