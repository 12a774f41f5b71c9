#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM command-line interface.

Converts key files between JWK and PEM formats and reports detected key file formats.
"""

import logging
import sys
from typing import Optional

import click

from jwkpem.apps.utils import jwkpem_logger
from jwkpem.apps.utils.common_cli_options import jwkpem_apps_common_options, jwkpem_input_option
from jwkpem.apps.utils.utils import catch_jwkpem_error
from jwkpem.keyfile.converter import ConversionRequest, convert_key_file
from jwkpem.keyfile.formats import read_key_file

logger = logging.getLogger(__name__)


@click.group(name="jwkpem", no_args_is_help=True)
@jwkpem_apps_common_options
def main(log_level: int) -> int:
    """Utility for conversion of key files between JWK and PEM formats."""
    jwkpem_logger.install(level=log_level or logging.WARNING)
    return 0


@main.command(name="convert", no_args_is_help=True)
@jwkpem_input_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="The output file path. Accepted formats are: JWK and PEM. "
    "If not provided the input filename will be used with a different extension.",
)
@click.option(
    "-p",
    "--passphrase",
    metavar="PASSPHRASE",
    help="Passphrase to open an encrypted PEM. If not provided, it is prompted for.",
)
def convert(input_file: str, output: Optional[str], passphrase: Optional[str]) -> None:
    """Convert key files between PEM and JWK formats.

    A JWK file is converted to PEM, a PEM file (encrypted or not) to JWK.
    """
    result = convert_key_file(
        ConversionRequest(input_path=input_file, output_path=output, passphrase=passphrase)
    )
    logger.info(
        f"Converted {result.source_format.label} key to {result.target_format.label} format"
    )
    click.echo(f'Converted "{result.input_path}" to "{result.output_path}".')


@main.command(name="detect", no_args_is_help=True)
@jwkpem_input_option
def detect(input_file: str) -> None:
    """Print the detected format of a key file: JWK, PEM or ENCRYPTED_PEM."""
    click.echo(read_key_file(input_file).format.label)


@catch_jwkpem_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()  # pragma: no cover
