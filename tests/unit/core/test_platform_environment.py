# SPDX-License-Identifier: Apache-2.0
import getpass
import sys

import pytest

from window_keeper.core.platform import environment
from window_keeper.core.platform.exceptions import MissingEnvironmentError, PlatformError


@pytest.mark.skipif(sys.platform == "win32", reason="environment is case-insensitive on Windows")
def test_get_env_prefers_exact_name(monkeypatch):
    monkeypatch.setenv("WK_TEST_VALUE", "upper")
    monkeypatch.setenv("wk_test_value", "lower")

    assert environment.get_env("wk_test_value") == "lower"


def test_get_env_falls_back_to_upper_case(monkeypatch):
    monkeypatch.delenv("wk_test_value", raising=False)
    monkeypatch.setenv("WK_TEST_VALUE", "upper")

    assert environment.get_env("wk_test_value") == "upper"


def test_get_env_rejects_empty_values(monkeypatch):
    monkeypatch.setenv("WK_EMPTY_VALUE", "")

    with pytest.raises(MissingEnvironmentError) as exc_info:
        environment.get_env("WK_EMPTY_VALUE")

    assert isinstance(exc_info.value, PlatformError)
    assert str(exc_info.value) == "Environment variable not set: WK_EMPTY_VALUE"


def test_get_optional_env_returns_none_when_unset(monkeypatch):
    monkeypatch.delenv("WK_OPTIONAL_VALUE", raising=False)
    monkeypatch.setenv("WK_EMPTY_VALUE", "")
    monkeypatch.setenv("WK_PRESENT_VALUE", "set")

    assert environment.get_optional_env("WK_OPTIONAL_VALUE") is None
    assert environment.get_optional_env("WK_EMPTY_VALUE") is None
    assert environment.get_optional_env("WK_PRESENT_VALUE") == "set"


def test_get_user_and_home(monkeypatch, tmp_path):
    monkeypatch.setattr(getpass, "getuser", lambda: "ada")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))

    assert environment.get_user() == "ada"
    assert environment.get_home() == tmp_path
