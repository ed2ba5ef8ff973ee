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
Persistence backends for window state.

A backend is a flat key-value store living at a hierarchical namespace. The
Qt backend maps the namespace onto ``QSettings``; the memory backend keeps
values in a dict and is meant for tests and headless use.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from window_keeper.core.qt_imports import QSettings
from window_keeper.core.window_state.exceptions import BackendWriteError

logger = logging.getLogger(__name__)


class Scope(Enum):
    """Root of a persistence namespace."""

    USER = "user"
    SYSTEM = "system"


@dataclass(frozen=True)
class StoreNamespace:
    """Opaque address of a persistence location: a scope plus a path."""

    scope: Scope
    path: Tuple[str, ...]

    @classmethod
    def from_path(cls, user_root: bool, first: str, *nodes: str) -> "StoreNamespace":
        """
        Build a namespace from explicit path segments.

        Args:
            user_root: True for the per-user root, False for the system root
            first: First path segment
            *nodes: Any further path segments

        Returns:
            StoreNamespace instance
        """
        scope = Scope.USER if user_root else Scope.SYSTEM
        return cls(scope, (first, *nodes))

    @classmethod
    def for_type(cls, user_root: bool, owner: type) -> "StoreNamespace":
        """
        Build a namespace derived from a class.

        The path is the class's module path followed by its qualified name,
        so ``myapp.ui.MainWindow`` maps to ``("myapp", "ui", "MainWindow")``.
        """
        scope = Scope.USER if user_root else Scope.SYSTEM
        segments = tuple(owner.__module__.split(".")) + (owner.__qualname__,)
        return cls(scope, segments)

    def __str__(self) -> str:
        return f"{self.scope.value}:/{'/'.join(self.path)}"


class PersistenceBackend(ABC):
    """Key-value store the window state is persisted in."""

    @property
    @abstractmethod
    def namespace(self) -> StoreNamespace:
        """Namespace this backend reads and writes."""

    @abstractmethod
    def get_float(self, key: str, default: float) -> float:
        pass

    @abstractmethod
    def put_float(self, key: str, value: float) -> None:
        pass

    @abstractmethod
    def get_int(self, key: str, default: int) -> int:
        pass

    @abstractmethod
    def put_int(self, key: str, value: int) -> None:
        pass

    @abstractmethod
    def get_bool(self, key: str, default: bool) -> bool:
        pass

    @abstractmethod
    def put_bool(self, key: str, value: bool) -> None:
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class QSettingsBackend(PersistenceBackend):
    """
    Backend built on ``QSettings``.

    The first namespace segment is the organization, the second the
    application; any further segments become a key group. Every write is
    followed by ``sync()`` so values reach storage immediately, and a failed
    sync raises BackendWriteError.
    """

    def __init__(self, namespace: StoreNamespace, settings: Optional[QSettings] = None):
        """
        Initialize the backend.

        Args:
            namespace: Where the values live
            settings: Optional QSettings to use instead of one derived from
                the namespace (for example an INI file in tests)
        """
        self._namespace = namespace
        if settings is None:
            settings = self._create_settings(namespace)
        self._settings = settings
        self._group = "/".join(namespace.path[2:])
        logger.debug(f"QSettings backend for {namespace} at {settings.fileName()}")

    @staticmethod
    def _create_settings(namespace: StoreNamespace) -> QSettings:
        scope = (
            QSettings.Scope.UserScope
            if namespace.scope is Scope.USER
            else QSettings.Scope.SystemScope
        )
        organization = namespace.path[0]
        application = namespace.path[1] if len(namespace.path) > 1 else ""
        return QSettings(QSettings.Format.NativeFormat, scope, organization, application)

    @property
    def namespace(self) -> StoreNamespace:
        return self._namespace

    @property
    def settings(self) -> QSettings:
        return self._settings

    def _key(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def _sync(self, key: str) -> None:
        """
        Write pending changes through to storage.

        Raises:
            BackendWriteError: If QSettings reports an access or format error
        """
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            logger.error(f"Could not write '{key}' to {self._settings.fileName()}: {status}")
            raise BackendWriteError(key, status)

    def _put(self, key: str, value: Any) -> None:
        self._settings.setValue(self._key(key), value)
        self._sync(key)

    def get_float(self, key: str, default: float) -> float:
        return self._settings.value(self._key(key), default, type=float)

    def put_float(self, key: str, value: float) -> None:
        self._put(key, float(value))

    def get_int(self, key: str, default: int) -> int:
        return self._settings.value(self._key(key), default, type=int)

    def put_int(self, key: str, value: int) -> None:
        self._put(key, int(value))

    def get_bool(self, key: str, default: bool) -> bool:
        return self._settings.value(self._key(key), default, type=bool)

    def put_bool(self, key: str, value: bool) -> None:
        self._put(key, bool(value))

    def contains(self, key: str) -> bool:
        return self._settings.contains(self._key(key))

    def remove(self, key: str) -> None:
        self._settings.remove(self._key(key))
        self._sync(key)


class MemoryBackend(PersistenceBackend):
    """Dict-backed backend for tests and headless use."""

    def __init__(
        self,
        namespace: Optional[StoreNamespace] = None,
        values: Optional[Dict[str, Any]] = None,
    ):
        self._namespace = namespace or StoreNamespace(Scope.USER, ("memory",))
        self._values: Dict[str, Any] = dict(values or {})

    @property
    def namespace(self) -> StoreNamespace:
        return self._namespace

    @property
    def values(self) -> Dict[str, Any]:
        """Copy of the stored values."""
        return dict(self._values)

    def get_float(self, key: str, default: float) -> float:
        if key not in self._values:
            return default
        return float(self._values[key])

    def put_float(self, key: str, value: float) -> None:
        self._values[key] = float(value)

    def get_int(self, key: str, default: int) -> int:
        if key not in self._values:
            return default
        return int(self._values[key])

    def put_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)

    def get_bool(self, key: str, default: bool) -> bool:
        if key not in self._values:
            return default
        return bool(self._values[key])

    def put_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)

    def contains(self, key: str) -> bool:
        return key in self._values

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
