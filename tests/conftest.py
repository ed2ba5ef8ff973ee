# SPDX-License-Identifier: Apache-2.0
"""
Pytest configuration for Window Keeper tests.
"""

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Widgets are never shown on a real display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from window_keeper.core.platform import reset_platform


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for PySide6 testing."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_platform():
    """Start every test with an unresolved platform variant."""
    reset_platform()
    yield
    reset_platform()
