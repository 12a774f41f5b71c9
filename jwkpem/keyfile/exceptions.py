#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key file exceptions."""

from jwkpem.exceptions import JwkPemError


class KeyFileError(JwkPemError):
    """General key file error."""


class EmptyFileError(KeyFileError):
    """Key file has no content."""


class UnrecognizedFormatError(KeyFileError):
    """First line of the key file doesn't match any supported format."""
