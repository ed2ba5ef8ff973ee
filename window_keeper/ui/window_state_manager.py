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
Window state management for top-level widgets.

Binds a QWidget to a WindowStateStore: restore before showing the widget,
and the state is saved automatically when the widget is closed.
"""

import logging
from typing import Optional

from window_keeper.core.qt_imports import QEvent, QObject, QWidget
from window_keeper.core.window_state.store import WindowStateStore, create_window_state_store
from window_keeper.core.window_state.window import QtWindowHandle

logger = logging.getLogger(__name__)


class WindowStateManager(QObject):
    """Manages window state persistence for one top-level widget."""

    def __init__(
        self,
        widget: QWidget,
        store: Optional[WindowStateStore] = None,
        save_on_close: bool = True,
    ):
        """
        Initialize window state manager.

        Args:
            widget: The widget to manage state for
            store: Store to use; when omitted a QSettings store named after
                the widget's objectName (or class name) is created
            save_on_close: Save automatically when the widget is closed
        """
        super().__init__(widget)
        self.widget = widget
        if store is None:
            store = create_window_state_store(widget.objectName() or type(widget).__name__)
        self.store = store
        self._handle = QtWindowHandle(widget)
        if save_on_close:
            widget.installEventFilter(self)

    def save_window_state(self) -> None:
        """Save window geometry and state to the store."""
        self.store.save(self._handle)
        logger.debug(f"Window state saved for {self.widget.objectName() or type(self.widget).__name__}")

    def restore_window_state(self) -> None:
        """Restore window geometry and state from the store."""
        self.store.apply(self._handle)
        logger.debug(f"Window state restored for {self.widget.objectName() or type(self.widget).__name__}")

    def eventFilter(self, watched, event) -> bool:
        if watched is self.widget and event.type() == QEvent.Type.Close:
            # Exceptions must not escape into the Qt event loop
            try:
                self.save_window_state()
            except Exception as e:
                logger.error(f"Error saving window state: {e}", exc_info=True)
        return super().eventFilter(watched, event)
