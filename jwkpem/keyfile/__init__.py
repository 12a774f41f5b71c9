#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key file detection, loading and conversion pipeline."""

from jwkpem.keyfile.converter import ConversionRequest, ConversionResult, convert_key_file
from jwkpem.keyfile.formats import KeyFile, KeyFormat, detect_format, read_key_file
from jwkpem.keyfile.loader import load_key

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "KeyFile",
    "KeyFormat",
    "convert_key_file",
    "detect_format",
    "load_key",
    "read_key_file",
]
