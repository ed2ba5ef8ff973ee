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
Process environment accessors.

Values are read at the point of need and never cached.
"""

import getpass
import os
import platform
from pathlib import Path
from typing import Optional

from window_keeper.core.platform.exceptions import MissingEnvironmentError


def get_os_name() -> str:
    """Return the operating system name, e.g. ``Linux``, ``Windows``, ``Darwin``."""
    return platform.system()


def get_user() -> str:
    """Return the login name of the current user."""
    return getpass.getuser()


def get_home() -> Path:
    """Return the current user's home directory."""
    return Path.home()


def get_env(name: str) -> str:
    """
    Read a required environment variable.

    The exact name is tried first, then its upper-case spelling, so
    ``appdata`` resolves on Windows where the variable is ``APPDATA``.

    Args:
        name: Variable name

    Returns:
        The variable's value

    Raises:
        MissingEnvironmentError: If the variable is unset or empty
    """
    value = get_optional_env(name)
    if value is None:
        raise MissingEnvironmentError(name)
    return value


def get_optional_env(name: str) -> Optional[str]:
    """
    Read an optional environment variable.

    Looks the name up like get_env(), but returns None instead of raising
    when the variable is unset or empty.
    """
    value = os.environ.get(name) or os.environ.get(name.upper())
    return value or None
