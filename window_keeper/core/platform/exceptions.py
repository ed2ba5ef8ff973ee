# SPDX-License-Identifier: Apache-2.0
"""
Exceptions for platform convention lookups.
"""


class PlatformError(Exception):
    """Base exception for platform operations."""

    pass


class MissingEnvironmentError(PlatformError, KeyError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str):
        super().__init__(f"Environment variable not set: {name}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
