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
Configuration for window state stores.
"""

from dataclasses import dataclass, replace
from typing import Optional

from window_keeper.config.constants import APP_NAME
from window_keeper.core.geometry import DefaultGeometry
from window_keeper.core.window_state.flavor import StoreFlavor, get_flavor


@dataclass
class WindowStateConfig:
    """Settings used to build a WindowStateStore."""

    # Store layout
    flavor: str = "frame"
    skip_save_when_iconified: bool = True
    # Fixed fallback size, for flavors using the fixed fallback policy
    fallback_width: Optional[float] = None
    fallback_height: Optional[float] = None

    # Persistence location
    scope: str = "user"
    organization: str = APP_NAME
    application: str = APP_NAME

    # Caller defaults (None: compute a fallback)
    default_width: Optional[float] = None
    default_height: Optional[float] = None
    default_x: Optional[float] = None
    default_y: Optional[float] = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "WindowStateConfig":
        """Create a WindowStateConfig instance from a dictionary."""
        from dataclasses import fields

        valid_keys = {f.name for f in fields(cls)}
        filtered_args = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_args)

    @property
    def user_root(self) -> bool:
        return self.scope == "user"

    def to_flavor(self) -> StoreFlavor:
        """Build the store flavor described by this configuration."""
        changes = {"skip_save_when_iconified": self.skip_save_when_iconified}
        if self.fallback_width is not None:
            changes["fallback_width"] = float(self.fallback_width)
        if self.fallback_height is not None:
            changes["fallback_height"] = float(self.fallback_height)
        return replace(get_flavor(self.flavor), **changes)

    def to_defaults(self) -> DefaultGeometry:
        return DefaultGeometry(
            width=self.default_width,
            height=self.default_height,
            x=self.default_x,
            y=self.default_y,
        )
