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
Centralized PySide6 imports.

Single location for the PySide6 classes used by the library, keeping the
toolkit dependency in one place.
"""

# Core Qt classes
from PySide6.QtCore import (
    QEvent,
    QObject,
    QSettings,
    Qt,
)

# GUI classes
from PySide6.QtGui import QGuiApplication

# Widget classes
from PySide6.QtWidgets import QWidget

__all__ = [
    "QEvent",
    "QGuiApplication",
    "QObject",
    "QSettings",
    "Qt",
    "QWidget",
]
