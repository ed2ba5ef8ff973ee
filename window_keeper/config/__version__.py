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
Version management for Window Keeper.

This module is the single source of truth for version information; the
packaging metadata reads ``__version__`` from here.
"""

__version__ = "0.3.0"

VERSION_INFO = {
    "major": 0,
    "minor": 3,
    "patch": 0,
    "pre_release": None,  # e.g., "alpha", "beta", "rc1"
}


def get_version() -> str:
    """
    Get the current library version.

    Returns:
        Version string in semantic versioning format
    """
    return __version__


def get_version_tuple() -> tuple:
    """
    Get version as a tuple for comparison.

    Returns:
        Tuple of (major, minor, patch) integers
    """
    return (VERSION_INFO["major"], VERSION_INFO["minor"], VERSION_INFO["patch"])
