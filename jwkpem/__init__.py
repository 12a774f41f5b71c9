#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM - key file converter between JWK and PEM.

Detects whether a key file holds a JSON Web Key, a PEM key or an encrypted PEM
private key, decrypts it when needed and writes the complementary format.

The behavior settings below are read once from environment variables at import.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as _jwkpem_version


def get_jwkpem_version() -> Version:
    """Get JWKPEM version information.

    :return: Parsed version object.
    """
    return parse(_jwkpem_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_jwkpem_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

JWKPEM_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="jwkpem",
    version=version.base_version,
)

JWKPEM_INTERACTIVE_DISABLED = value_to_bool(os.environ.get("JWKPEM_INTERACTIVE_DISABLED"))

JWKPEM_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("JWKPEM_DEBUG_LOGGING_DISABLED"))
JWKPEM_DEBUG_LOG_FILE = os.environ.get(
    "JWKPEM_DEBUG_LOG_FILE", os.path.join(JWKPEM_PLATFORM_DIRS.user_log_dir, "debug.log")
)

JWKPEM_USER_CONFIG_DIR = os.path.expanduser("~/.jwkpem")
