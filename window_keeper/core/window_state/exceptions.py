# SPDX-License-Identifier: Apache-2.0
"""
Exceptions for window state persistence.
"""


class WindowStateError(Exception):
    """Base exception for window state operations."""

    pass


class ScreenUnavailableError(WindowStateError):
    """Raised when the screen bounds cannot be queried."""

    def __init__(self, reason: str):
        super().__init__(f"Screen bounds unavailable: {reason}")
        self.reason = reason


class UnknownFlavorError(WindowStateError, ValueError):
    """Raised when a store flavor name is not recognised."""

    def __init__(self, name: str):
        super().__init__(f"Unknown window state flavor: {name}")
        self.name = name


class BackendWriteError(WindowStateError):
    """Raised when a persistence backend fails to write a value through."""

    def __init__(self, key: str, status):
        super().__init__(f"Failed to persist window state key '{key}': {status}")
        self.key = key
        self.status = status
