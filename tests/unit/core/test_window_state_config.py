# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for WindowStateConfig and store flavors.
"""

import pytest

from window_keeper.core.geometry import DefaultGeometry, Point, Size
from window_keeper.core.window_state.config import WindowStateConfig
from window_keeper.core.window_state.exceptions import UnknownFlavorError
from window_keeper.core.window_state.flavor import (
    FRAME,
    STAGE,
    FallbackPolicy,
    StateEncoding,
    get_flavor,
)


def test_window_state_config_defaults():
    config = WindowStateConfig()

    assert config.flavor == "frame"
    assert config.user_root is True
    assert config.to_flavor() == FRAME
    assert config.to_defaults() == DefaultGeometry()


def test_window_state_config_from_dict_ignores_unknown_keys():
    config = WindowStateConfig.from_dict(
        {"flavor": "stage", "scope": "system", "default_x": 0, "unrelated": True}
    )

    assert config.flavor == "stage"
    assert config.user_root is False
    assert config.to_defaults().x == 0


def test_window_state_config_overrides_fixed_fallback():
    config = WindowStateConfig(flavor="stage", fallback_width=1280, skip_save_when_iconified=False)

    flavor = config.to_flavor()

    assert flavor.fallback_width == 1280.0
    assert flavor.fallback_height == STAGE.fallback_height
    assert flavor.skip_save_when_iconified is False
    assert flavor.width_key == "stage width"


def test_flavor_key_layout():
    assert (FRAME.x_key, FRAME.y_key, FRAME.width_key, FRAME.height_key) == (
        "window x",
        "window y",
        "window width",
        "window height",
    )
    assert FRAME.state_key == "window state"
    assert FRAME.state_encoding is StateEncoding.BITMASK
    assert FRAME.fallback_policy is FallbackPolicy.HALF_SCREEN

    assert STAGE.state_key == "stage maximize"
    assert STAGE.state_encoding is StateEncoding.BOOLEAN
    assert STAGE.fallback_policy is FallbackPolicy.FIXED


def test_get_flavor_is_case_insensitive():
    assert get_flavor("STAGE") is STAGE


def test_get_flavor_rejects_unknown_names():
    with pytest.raises(UnknownFlavorError) as exc_info:
        get_flavor("swing")

    assert exc_info.value.name == "swing"
    assert isinstance(exc_info.value, ValueError)


def test_default_geometry_pairs():
    defaults = DefaultGeometry(width=640)

    assert defaults.size is None
    assert defaults.with_size(Size(1, 2)).size == Size(1, 2)
    assert defaults.with_location(Point(0, 0)).location == Point(0, 0)
    assert defaults.with_size(None) == DefaultGeometry()
