#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Conversion of key files between JWK and PEM.

A JWK file is converted to PEM, a PEM file (encrypted or not) to JWK. Conversions
within one format family are not performed.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from jwkpem.crypto.exceptions import ConversionError
from jwkpem.crypto.keys import Key
from jwkpem.keyfile.formats import KeyFormat, read_key_file
from jwkpem.keyfile.loader import load_key
from jwkpem.utils.misc import write_file

logger = logging.getLogger(__name__)


@dataclass
class ConversionRequest:
    """Input of one conversion.

    :param input_path: Key file to convert.
    :param output_path: Where to store the result, None to derive it from the input path.
    :param passphrase: Passphrase of encrypted input, None to prompt for it when needed.
    """

    input_path: str
    output_path: Optional[str] = None
    passphrase: Optional[str] = None


@dataclass
class ConversionResult:
    """Outcome of a finished conversion."""

    input_path: str
    output_path: str
    source_format: KeyFormat
    target_format: KeyFormat


def get_default_output_path(input_path: str, target_format: KeyFormat) -> str:
    """Derive output path from input path by swapping the extension.

    ``/tmp/key.pem`` converted to JWK becomes ``/tmp/key.jwk``.

    :param input_path: Path of the input key file.
    :param target_format: Format of the output.
    :return: Output path in the input's directory.
    """
    return f"{os.path.splitext(input_path)[0]}.{target_format.extension}"


def convert_key(key: Key, target_format: KeyFormat) -> str:
    """Export key into the target format.

    :param key: Loaded key.
    :param target_format: JWK or PEM.
    :raises ConversionError: Target format is not an export format.
    :return: Text of the converted key.
    """
    if target_format == KeyFormat.PEM:
        return key.export_pem()
    if target_format == KeyFormat.JWK:
        return key.export_jwk()
    raise ConversionError(f"Conversion to {target_format.label} is not supported")


def convert_key_file(request: ConversionRequest) -> ConversionResult:
    """Convert key file to the complementary format and store it.

    :param request: Conversion input.
    :raises ConversionError: The output would overwrite the input.
    :return: Paths and formats of the finished conversion.
    """
    key_file = read_key_file(request.input_path)
    target_format = key_file.format.target
    output_path = request.output_path or get_default_output_path(
        request.input_path, target_format
    )
    if os.path.abspath(output_path) == key_file.path:
        raise ConversionError(
            f"Output file {output_path} is the same as the input file, use --output option"
        )

    key = load_key(key_file, request.passphrase)
    logger.info(f"Converting {key!r} from {key_file.format.label} to {target_format.label}")
    write_file(convert_key(key, target_format), output_path)
    return ConversionResult(
        input_path=request.input_path,
        output_path=output_path,
        source_format=key_file.format,
        target_format=target_format,
    )
