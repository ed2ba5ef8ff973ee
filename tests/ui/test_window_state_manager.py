# SPDX-License-Identifier: Apache-2.0
"""
Tests for WindowStateManager.
"""

from PySide6.QtWidgets import QWidget

from window_keeper.core.geometry import Size
from window_keeper.core.window_state.backend import MemoryBackend, StoreNamespace
from window_keeper.core.window_state.screen import FixedScreenBounds
from window_keeper.core.window_state.store import WindowStateStore
from window_keeper.ui.window_state_manager import WindowStateManager


def _make_store():
    backend = MemoryBackend(StoreNamespace.from_path(True, "tests", "ui", "main_window"))
    return WindowStateStore(backend, screen_bounds=FixedScreenBounds(1920, 1080))


def test_restore_applies_stored_size(qtbot):
    widget = QWidget()
    qtbot.addWidget(widget)
    store = _make_store()
    store.set_size(Size(700, 500)).set_maximized(False)

    manager = WindowStateManager(widget, store=store)
    manager.restore_window_state()

    assert (widget.width(), widget.height()) == (700, 500)
    assert not widget.isMaximized()


def test_restore_without_stored_state_uses_half_screen(qtbot):
    widget = QWidget()
    qtbot.addWidget(widget)

    manager = WindowStateManager(widget, store=_make_store())
    manager.restore_window_state()

    assert (widget.width(), widget.height()) == (960, 540)


def test_close_saves_window_state(qtbot):
    widget = QWidget()
    qtbot.addWidget(widget)
    store = _make_store()
    WindowStateManager(widget, store=store)

    widget.resize(720, 430)
    widget.show()
    qtbot.waitExposed(widget)
    widget.close()

    assert store.get_size() == Size(720, 430)
    assert store.is_maximized() is False


def test_close_does_not_save_when_disabled(qtbot):
    widget = QWidget()
    qtbot.addWidget(widget)
    store = _make_store()
    WindowStateManager(widget, store=store, save_on_close=False)

    widget.resize(720, 430)
    widget.close()

    assert store.backend.values == {}


def test_manual_save(qtbot):
    widget = QWidget()
    qtbot.addWidget(widget)
    store = _make_store()
    manager = WindowStateManager(widget, store=store)

    widget.resize(300, 200)
    manager.save_window_state()

    assert store.get_size() == Size(300, 200)
