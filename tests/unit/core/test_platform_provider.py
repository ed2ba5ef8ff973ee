# SPDX-License-Identifier: Apache-2.0
"""Unit tests for platform detection and conventions."""

import logging
import socket
from pathlib import Path
from unittest.mock import Mock

import pytest

from window_keeper.core.platform import environment
from window_keeper.core.platform import provider
from window_keeper.core.platform.exceptions import MissingEnvironmentError
from window_keeper.core.platform.provider import (
    PlatformKind,
    classify_os,
    get_default_platform,
    get_platform,
    get_trash_name,
    reset_platform,
)


@pytest.mark.parametrize(
    "os_name,expected",
    [
        ("Linux", PlatformKind.LINUX),
        ("Windows", PlatformKind.WINDOWS),
        ("Windows 11", PlatformKind.WINDOWS),
        ("Mac OS X", PlatformKind.MAC),
        ("Darwin", PlatformKind.MAC),
        ("SunOS", PlatformKind.DEFAULT),
        ("", PlatformKind.DEFAULT),
    ],
)
def test_classify_os(os_name, expected):
    assert classify_os(os_name) is expected


def test_get_platform_classifies_once(monkeypatch):
    get_os_name = Mock(return_value="Windows 11")
    monkeypatch.setattr(environment, "get_os_name", get_os_name)

    assert get_platform() is PlatformKind.WINDOWS
    assert get_platform() is PlatformKind.WINDOWS
    get_os_name.assert_called_once()


def test_reset_platform_allows_new_detection(monkeypatch):
    monkeypatch.setattr(environment, "get_os_name", lambda: "Linux")
    assert get_platform() is PlatformKind.LINUX

    monkeypatch.setattr(environment, "get_os_name", lambda: "Darwin")
    assert get_platform() is PlatformKind.LINUX

    reset_platform()
    assert get_platform() is PlatformKind.MAC


def test_default_platform():
    assert get_default_platform() is PlatformKind.DEFAULT


def test_trash_names():
    assert PlatformKind.WINDOWS.get_trash_name() == "Recycle Bin"
    assert PlatformKind.DEFAULT.get_trash_name() == "Trash"
    assert PlatformKind.MAC.get_trash_name() == "Trash"
    assert PlatformKind.LINUX.get_trash_name() == "Trash"


def test_terminate_labels():
    assert PlatformKind.MAC.get_terminate() == "Quit"
    assert PlatformKind.DEFAULT.get_terminate() == "Exit"
    assert PlatformKind.WINDOWS.get_terminate() == "Exit"
    assert PlatformKind.LINUX.get_terminate() == "Exit"


def test_module_helpers_use_resolved_platform(monkeypatch):
    monkeypatch.setattr(environment, "get_os_name", lambda: "Windows 10")

    assert get_trash_name() == "Recycle Bin"
    assert provider.get_terminate() == "Exit"


def test_default_app_data_is_working_directory():
    assert PlatformKind.DEFAULT.get_app_data_directory() == Path.cwd()


def test_mac_app_data_is_under_library(monkeypatch, tmp_path):
    monkeypatch.setattr(environment, "get_home", lambda: tmp_path)

    assert PlatformKind.MAC.get_app_data_directory() == tmp_path / "Library" / "Application Support"


def test_windows_app_data_reads_environment(monkeypatch, tmp_path):
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setenv("appdata", str(tmp_path))

    assert PlatformKind.WINDOWS.get_app_data_directory() == tmp_path


def test_windows_app_data_fails_loudly_when_unset(monkeypatch):
    monkeypatch.delenv("appdata", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)

    with pytest.raises(MissingEnvironmentError) as exc_info:
        PlatformKind.WINDOWS.get_app_data_directory()

    assert exc_info.value.name == "appdata"
    assert isinstance(exc_info.value, KeyError)


def test_linux_app_data_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    assert PlatformKind.LINUX.get_app_data_directory() == tmp_path / "data"

    monkeypatch.delenv("XDG_DATA_HOME")
    monkeypatch.setattr(environment, "get_home", lambda: tmp_path)
    assert PlatformKind.LINUX.get_app_data_directory() == tmp_path / ".local" / "share"


def test_local_address_resolves_host_name(monkeypatch):
    monkeypatch.setattr(socket, "gethostname", lambda: "workstation")
    monkeypatch.setattr(socket, "gethostbyname", lambda name: "10.0.0.5")

    assert PlatformKind.DEFAULT.get_local_address() == "10.0.0.5"


def test_local_address_falls_back_to_localhost(monkeypatch, caplog):
    def _unresolvable(name):
        raise socket.gaierror(-2, "Name or service not known")

    monkeypatch.setattr(socket, "gethostname", lambda: "no-such-host.invalid")
    monkeypatch.setattr(socket, "gethostbyname", _unresolvable)

    with caplog.at_level(logging.WARNING, logger="window_keeper"):
        address = PlatformKind.LINUX.get_local_address()

    assert address == "localhost"
    assert "Could not resolve local address" in caplog.text


def test_local_address_survives_unencodable_host_name(monkeypatch, caplog):
    # A DNS label longer than 63 characters fails IDNA encoding
    monkeypatch.setattr(socket, "gethostname", lambda: "a" * 64)

    with caplog.at_level(logging.WARNING, logger="window_keeper"):
        address = PlatformKind.DEFAULT.get_local_address()

    assert address == "localhost"
    assert "Could not resolve local address" in caplog.text


def test_linux_app_data_ignores_empty_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", "")
    monkeypatch.setattr(environment, "get_home", lambda: tmp_path)

    assert PlatformKind.LINUX.get_app_data_directory() == tmp_path / ".local" / "share"


def test_linux_app_data_reads_through_environment_module(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(
        environment,
        "get_optional_env",
        lambda name: str(tmp_path) if name == "XDG_DATA_HOME" else None,
    )

    assert PlatformKind.LINUX.get_app_data_directory() == tmp_path
