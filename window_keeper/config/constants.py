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
Library-wide constants for Window Keeper.

This module contains constants used across multiple modules to avoid
hardcoded values throughout the codebase.
"""

# ============================================================================
# Application Constants
# ============================================================================

APP_NAME = "WindowKeeper"
LOG_FILE_NAME = "window_keeper.log"
ENVIRONMENT_VARIABLE = "WINDOW_KEEPER_ENV"

# ============================================================================
# Window State Keys
# ============================================================================

# Frame flavor (extended-state bitmask)
FRAME_KEY_PREFIX = "window"
FRAME_STATE_KEY = "window state"

# Stage flavor (boolean maximize flag)
STAGE_KEY_PREFIX = "stage"
STAGE_STATE_KEY = "stage maximize"

# ============================================================================
# Window State Masks
# ============================================================================

STATE_NORMAL = 0
STATE_ICONIFIED = 1
STATE_MAXIMIZED_HORIZ = 2
STATE_MAXIMIZED_VERT = 4
STATE_MAXIMIZED_BOTH = STATE_MAXIMIZED_HORIZ | STATE_MAXIMIZED_VERT

# ============================================================================
# Default Geometry
# ============================================================================

# Stage flavor falls back to a fixed size when no value is stored
STAGE_FALLBACK_WIDTH = 800.0
STAGE_FALLBACK_HEIGHT = 600.0

# ============================================================================
# Platform Constants
# ============================================================================

TERMINATE_EXIT = "Exit"
TERMINATE_QUIT = "Quit"
TRASH_NAME = "Trash"
RECYCLE_BIN_NAME = "Recycle Bin"
LOCALHOST = "localhost"

# ============================================================================
# Logging Constants
# ============================================================================

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_FILE_BACKUP_COUNT = 3
DEFAULT_LOG_LINES_TO_READ = 100
