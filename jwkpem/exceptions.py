#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM exception classes.

Every error raised by the library derives from :class:`JwkPemError`, so the
command line front end can catch a single type and report it uniformly.
"""

from typing import Optional


class JwkPemError(Exception):
    """JWKPEM Base Exception.

    Base exception class for all errors raised by the key converter.

    :cvar fmt: Default error message format template.
    """

    fmt = "jwkpem: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base JWKPEM Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class JwkPemIOError(JwkPemError, IOError):
    """JWKPEM standard IO error exception.

    Raised when reading the input key file or writing the converted output fails.
    """
