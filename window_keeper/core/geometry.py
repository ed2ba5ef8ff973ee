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
Geometry value objects shared by window handles and state stores.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Size:
    """Width and height of a window."""

    width: float
    height: float


@dataclass(frozen=True)
class Point:
    """Top-left position of a window."""

    x: float
    y: float


@dataclass
class WindowGeometry:
    """Observable state of a window at a point in time."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    maximized: bool = False
    iconified: bool = False

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class DefaultGeometry:
    """
    Caller-supplied fallback values for a state store.

    ``None`` means "not set, compute a fallback"; ``0.0`` is a real value.
    """

    width: Optional[float] = None
    height: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def size(self) -> Optional[Size]:
        """Default size, or None unless both width and height are set."""
        if self.width is None or self.height is None:
            return None
        return Size(self.width, self.height)

    @property
    def location(self) -> Optional[Point]:
        """Default location, or None unless both x and y are set."""
        if self.x is None or self.y is None:
            return None
        return Point(self.x, self.y)

    def with_size(self, size: Optional[Size]) -> "DefaultGeometry":
        """Return a copy with the size pair replaced (None clears both)."""
        if size is None:
            return replace(self, width=None, height=None)
        return replace(self, width=size.width, height=size.height)

    def with_location(self, point: Optional[Point]) -> "DefaultGeometry":
        """Return a copy with the location pair replaced (None clears both)."""
        if point is None:
            return replace(self, x=None, y=None)
        return replace(self, x=point.x, y=point.y)
