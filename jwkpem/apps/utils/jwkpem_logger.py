#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM logging utilities with colored console output support."""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from jwkpem import (
    JWKPEM_DEBUG_LOG_FILE,
    JWKPEM_DEBUG_LOGGING_DISABLED,
    JWKPEM_USER_CONFIG_DIR,
    __version__,
)
from jwkpem.exceptions import JwkPemError
from jwkpem.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()

LOGGING_CONFIG_FILE_NAME = "logging.yaml"


class ColoredFormatter(logging.Formatter):
    """JWKPEM Colored Logging Formatter.

    Messages of each level get their own color; warnings and errors are extended
    by timing and source location.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT_DEBUG,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()

        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Modified format method.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        fmt = self.formats.get(record.levelno)
        formatter = logging.Formatter(fmt)
        if not self.colored and isinstance(record.msg, str):
            record.msg = re.sub(r"\x1b\[\d{1,3}m", "", record.msg)
        return formatter.format(record)


def load_logging_config(search_paths: Optional[list[str]] = None) -> Optional[str]:
    """Apply user logging configuration when there is one.

    The configuration is a YAML or JSON file in ``logging.config.dictConfig`` schema.

    :param search_paths: Directories to look for the configuration, defaults to ~/.jwkpem
    :raises JwkPemError: The configuration file is invalid.
    :return: Path to the applied configuration file, None if no file was found.
    """
    config_file = find_file(
        LOGGING_CONFIG_FILE_NAME,
        use_cwd=False,
        search_paths=search_paths or [JWKPEM_USER_CONFIG_DIR],
        raise_exc=False,
    )
    if not config_file:
        return None
    try:
        logging.config.dictConfig(load_configuration(config_file))
    except (ValueError, TypeError, AttributeError, ImportError) as exc:
        raise JwkPemError(f"Invalid logging configuration {config_file}: {exc}") from exc
    return config_file


def install(
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install JWKPEM log handler for colored output.

    :param level: logging level, defaults to logging.WARNING
    :param stream: stream to output logging, defaults to current sys.stderr
    :param colored: colored output, always colored if true
    :param logger: defaults to the 'jwkpem' logger
    :param create_debug_logger: create debug log file
    """
    color = True
    if not level:
        level = logging.WARNING
    if stream is None:
        stream = sys.stderr

    target_logger = logger or logging.getLogger("jwkpem")
    # handlers filter by level, the logger itself lets everything through
    target_logger.setLevel(logging.DEBUG)

    config_file = load_logging_config()

    if "NO_COLOR" in os.environ:
        # For details see https://no-color.org/
        color = False
    if not hasattr(stream, "isatty") or not stream.isatty():
        color = False
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)
    target_logger.propagate = True
    if config_file:
        target_logger.debug(f"Logging config loaded from {config_file}")

    if not create_debug_logger or JWKPEM_DEBUG_LOGGING_DISABLED:
        return
    for existing in target_logger.handlers:
        if (
            isinstance(existing, logging.handlers.RotatingFileHandler)
            and existing.baseFilename == os.path.abspath(JWKPEM_DEBUG_LOG_FILE)
        ):
            return
    try:
        os.makedirs(os.path.dirname(JWKPEM_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            JWKPEM_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
    except OSError as exc:
        target_logger.warning(f"Failed to initialize debug logging: {str(exc)}")
        return
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    target_logger.addHandler(debug_handler)

    starter = f"* JWKPEM DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
    padding = len(starter) - 2
    target_logger.debug("*" * len(starter))
    target_logger.debug(starter)
    target_logger.debug(f"* JWKPEM version: {__version__}".ljust(padding) + " *")
    target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
    target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
    target_logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
    target_logger.debug("*" * len(starter))
