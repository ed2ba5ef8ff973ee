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
Platform conventions.

Resolves OS-specific values (app-data directory, trash name, the verb used
for quitting) for one of four platform variants. The variant for the running
process is detected from the OS name on first use and cached for the rest of
the process lifetime.
"""

import logging
import socket
import threading
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional

from window_keeper.config.constants import (
    LOCALHOST,
    RECYCLE_BIN_NAME,
    TERMINATE_EXIT,
    TERMINATE_QUIT,
    TRASH_NAME,
)
from window_keeper.core.platform import environment

logger = logging.getLogger(__name__)


class PlatformKind(Enum):
    """OS classification used to select platform conventions."""

    DEFAULT = "default"
    LINUX = "linux"
    WINDOWS = "windows"
    MAC = "mac"

    def get_app_data_directory(self) -> Path:
        """
        Get the directory applications store per-user data in.

        Returns:
            Path to the app-data directory for this platform

        Raises:
            MissingEnvironmentError: On Windows, if ``appdata`` is not set
        """
        return _APP_DATA_RESOLVERS[self]()

    def get_terminate(self) -> str:
        """Get the label for the quit action ("Exit" or "Quit")."""
        return _TERMINATE_LABELS.get(self, TERMINATE_EXIT)

    def get_trash_name(self) -> str:
        """Get the name of the recycle bin on this platform."""
        return _TRASH_NAMES.get(self, TRASH_NAME)

    def get_local_address(self) -> str:
        """
        Get the IP address of the local host.

        Returns:
            Address string, or ``"localhost"`` if it cannot be resolved
        """
        return _resolve_local_address()


def _default_app_data() -> Path:
    return Path.cwd()


def _linux_app_data() -> Path:
    xdg_data_home = environment.get_optional_env("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home)
    return environment.get_home() / ".local" / "share"


def _windows_app_data() -> Path:
    return Path(environment.get_env("appdata"))


def _mac_app_data() -> Path:
    return environment.get_home() / "Library" / "Application Support"


_APP_DATA_RESOLVERS: Dict[PlatformKind, Callable[[], Path]] = {
    PlatformKind.DEFAULT: _default_app_data,
    PlatformKind.LINUX: _linux_app_data,
    PlatformKind.WINDOWS: _windows_app_data,
    PlatformKind.MAC: _mac_app_data,
}

_TERMINATE_LABELS: Dict[PlatformKind, str] = {
    PlatformKind.MAC: TERMINATE_QUIT,
}

_TRASH_NAMES: Dict[PlatformKind, str] = {
    PlatformKind.WINDOWS: RECYCLE_BIN_NAME,
}

# Checked in order; Python reports macOS as "Darwin"
_OS_MARKERS = (
    ("linux", PlatformKind.LINUX),
    ("windows", PlatformKind.WINDOWS),
    ("mac", PlatformKind.MAC),
    ("darwin", PlatformKind.MAC),
)


def _resolve_local_address() -> str:
    # gethostbyname IDNA-encodes the name, so a bad label raises UnicodeError
    try:
        return socket.gethostbyname(socket.gethostname())
    except (OSError, UnicodeError) as e:
        logger.warning(f"Could not resolve local address, using {LOCALHOST}: {e}", exc_info=True)
        return LOCALHOST


def classify_os(os_name: str) -> PlatformKind:
    """
    Classify an OS name into a platform variant.

    Matching is a case-insensitive substring test; names that match nothing
    fall back to ``PlatformKind.DEFAULT``.

    Args:
        os_name: OS name such as ``"Linux"`` or ``"Windows 10"``

    Returns:
        The matching platform variant
    """
    lowered = (os_name or "").lower()
    for marker, kind in _OS_MARKERS:
        if marker in lowered:
            return kind
    return PlatformKind.DEFAULT


# Single assignment: set once by get_platform(), cleared only by reset_platform()
_platform: Optional[PlatformKind] = None
_platform_lock = threading.Lock()


def get_platform() -> PlatformKind:
    """
    Get the platform variant of the running process.

    The OS name is classified on the first call only; later calls return the
    cached variant.

    Returns:
        The resolved platform variant
    """
    global _platform
    if _platform is None:
        with _platform_lock:
            if _platform is None:
                os_name = environment.get_os_name()
                _platform = classify_os(os_name)
                logger.info(f"Detected platform {_platform.name} (os name: {os_name!r})")
    return _platform


def reset_platform() -> None:
    """Forget the cached platform variant. Intended for test isolation."""
    global _platform
    with _platform_lock:
        _platform = None


def get_default_platform() -> PlatformKind:
    """Get the fallback platform variant."""
    return PlatformKind.DEFAULT


def get_app_data_directory() -> Path:
    """Get the app-data directory of the running platform."""
    return get_platform().get_app_data_directory()


def get_terminate() -> str:
    """Get the quit-action label of the running platform."""
    return get_platform().get_terminate()


def get_trash_name() -> str:
    """Get the recycle bin name of the running platform."""
    return get_platform().get_trash_name()


def get_local_address() -> str:
    """Get the local host address, falling back to ``"localhost"``."""
    return get_platform().get_local_address()
