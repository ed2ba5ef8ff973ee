# SPDX-License-Identifier: Apache-2.0
"""Unit tests for the QWidget window handle."""

import pytest
from PySide6.QtWidgets import QWidget

from window_keeper.core.geometry import WindowGeometry
from window_keeper.core.window_state.window import (
    MemoryWindow,
    QtWindowHandle,
    as_window_handle,
)


@pytest.fixture()
def widget(qapp):
    widget = QWidget()
    yield widget
    widget.deleteLater()


def test_handle_reads_widget_geometry(widget):
    widget.resize(640, 480)
    widget.move(30, 40)

    geometry = QtWindowHandle(widget).geometry()

    assert (geometry.width, geometry.height) == (640.0, 480.0)
    assert (geometry.x, geometry.y) == (30.0, 40.0)
    assert geometry.maximized is False
    assert geometry.iconified is False


def test_handle_rounds_to_whole_pixels(widget):
    handle = QtWindowHandle(widget)

    handle.set_size(800.4, 599.6)
    handle.set_location(10.2, 19.8)

    assert (widget.width(), widget.height()) == (800, 600)
    assert (widget.x(), widget.y()) == (10, 20)


def test_handle_toggles_maximized_flag(widget):
    handle = QtWindowHandle(widget)

    handle.set_maximized(True)
    assert widget.isMaximized()
    assert handle.geometry().maximized is True

    handle.set_maximized(False)
    assert not widget.isMaximized()


def test_as_window_handle(widget):
    memory = MemoryWindow()

    assert as_window_handle(memory) is memory
    wrapped = as_window_handle(widget)
    assert isinstance(wrapped, QtWindowHandle)
    assert wrapped.widget is widget

    with pytest.raises(TypeError):
        as_window_handle("main window")


def test_memory_window_does_not_alias_caller_geometry():
    initial = WindowGeometry(x=1, y=2, width=10, height=20)
    window = MemoryWindow(initial)

    window.set_size(99, 99)
    window.set_location(5, 6)
    window.set_maximized(True)

    assert initial == WindowGeometry(x=1, y=2, width=10, height=20)
    assert window.geometry() == WindowGeometry(x=5, y=6, width=99, height=99, maximized=True)
