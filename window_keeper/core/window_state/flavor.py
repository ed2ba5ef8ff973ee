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
Store flavors.

A flavor describes how a WindowStateStore lays out its keys, how it encodes
the maximize state and which fallback it uses when nothing is stored.

Two flavors ship with the library:

- ``FRAME``: ``"window ..."`` keys, an extended-state bitmask under
  ``"window state"`` and a half-screen fallback size.
- ``STAGE``: ``"stage ..."`` keys, a boolean under ``"stage maximize"`` and a
  fixed 800 x 600 fallback size.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from window_keeper.config.constants import (
    FRAME_KEY_PREFIX,
    FRAME_STATE_KEY,
    STAGE_FALLBACK_HEIGHT,
    STAGE_FALLBACK_WIDTH,
    STAGE_KEY_PREFIX,
    STAGE_STATE_KEY,
)
from window_keeper.core.window_state.exceptions import UnknownFlavorError


class FallbackPolicy(Enum):
    """How a size is chosen when neither a stored nor a default value exists."""

    HALF_SCREEN = "half_screen"
    FIXED = "fixed"


class StateEncoding(Enum):
    """How the maximize state is persisted."""

    BITMASK = "bitmask"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class StoreFlavor:
    """Key layout and default policy of a WindowStateStore."""

    name: str
    key_prefix: str
    state_key: str
    state_encoding: StateEncoding
    fallback_policy: FallbackPolicy
    # Only used with FallbackPolicy.FIXED
    fallback_width: float = STAGE_FALLBACK_WIDTH
    fallback_height: float = STAGE_FALLBACK_HEIGHT
    skip_save_when_iconified: bool = True

    @property
    def x_key(self) -> str:
        return f"{self.key_prefix} x"

    @property
    def y_key(self) -> str:
        return f"{self.key_prefix} y"

    @property
    def width_key(self) -> str:
        return f"{self.key_prefix} width"

    @property
    def height_key(self) -> str:
        return f"{self.key_prefix} height"


FRAME = StoreFlavor(
    name="frame",
    key_prefix=FRAME_KEY_PREFIX,
    state_key=FRAME_STATE_KEY,
    state_encoding=StateEncoding.BITMASK,
    fallback_policy=FallbackPolicy.HALF_SCREEN,
)

STAGE = StoreFlavor(
    name="stage",
    key_prefix=STAGE_KEY_PREFIX,
    state_key=STAGE_STATE_KEY,
    state_encoding=StateEncoding.BOOLEAN,
    fallback_policy=FallbackPolicy.FIXED,
)

FLAVORS: Dict[str, StoreFlavor] = {
    FRAME.name: FRAME,
    STAGE.name: STAGE,
}


def get_flavor(name: str) -> StoreFlavor:
    """
    Look up a built-in flavor by name.

    Raises:
        UnknownFlavorError: If no flavor has that name
    """
    try:
        return FLAVORS[name.lower()]
    except (KeyError, AttributeError):
        raise UnknownFlavorError(str(name)) from None
