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
Logging configuration.

Sets up a rotating log file plus optional console output for the
``window_keeper`` logger hierarchy.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from window_keeper.config.app_config import ConfigManager, get_app_dir
from window_keeper.config.constants import (
    DEFAULT_LOG_LINES_TO_READ,
    ENVIRONMENT_VARIABLE,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_FILE_NAME,
)

ROOT_LOGGER_NAME = "window_keeper"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(
    log_dir: Optional[str] = None,
    level: Optional[str] = None,
    console_output: Optional[bool] = None,
    config: Optional[ConfigManager] = None,
) -> logging.Logger:
    """
    Set up library logging.

    Configures a rotating file handler and, optionally, a console handler.
    Arguments left as None are read from the ``logging`` config section.

    Args:
        log_dir: Log file directory, defaults to <app dir>/logs
        level: Log level; DEBUG when WINDOW_KEEPER_ENV is "development",
               otherwise ``logging.level`` from the configuration
        console_output: Whether to also log to stdout; defaults to
               ``logging.console_output`` from the configuration
        config: Configuration to read; loaded from the app dir when needed

    Returns:
        The configured ``window_keeper`` logger
    """
    if log_dir is None:
        log_dir = get_app_dir() / "logs"
    else:
        log_dir = Path(log_dir)

    log_dir.mkdir(parents=True, exist_ok=True)

    log_settings = {}
    if level is None or console_output is None:
        if config is None:
            config = ConfigManager()
        log_settings = config.get("logging", {})

    if level is None:
        env = os.environ.get(ENVIRONMENT_VARIABLE, "production").lower()
        level = "DEBUG" if env == "development" else log_settings.get("level", "INFO")

    if console_output is None:
        console_output = log_settings.get("console_output", True)

    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # handlers do the filtering

    # Avoid duplicate handlers on repeated setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_file = log_dir / LOG_FILE_NAME
    file_handler = RotatingFileHandler(
        log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(log_level)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    logger.info("Logging initialized")
    logger.debug(f"Log file: {log_file}")
    logger.debug(f"Log level: {level}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the library's root logger.

    Args:
        name: Module name (usually ``__name__``)

    Returns:
        Logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("This is an info message")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: str):
    """
    Change the file log level at runtime.

    Args:
        level: Log level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    """
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(log_level)

    logger.info(f"Log level changed to: {level}")


def get_log_file_path() -> Path:
    """Return the path of the active log file, or the default location."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            return Path(handler.baseFilename)

    return get_app_dir() / "logs" / LOG_FILE_NAME


def get_recent_logs(lines: Optional[int] = None) -> List[str]:
    """
    Read the last lines of the log file.

    Args:
        lines: Number of lines, defaults to DEFAULT_LOG_LINES_TO_READ

    Returns:
        List of log lines, empty if there is no log file yet
    """
    if lines is None:
        lines = DEFAULT_LOG_LINES_TO_READ
    if lines <= 0:
        return []
    log_file = get_log_file_path()

    if not log_file.exists():
        return []

    with open(log_file, "r", encoding="utf-8") as f:
        return f.readlines()[-lines:]
