#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, TypeVar, Union

import click

from jwkpem import __version__ as jwkpem_version

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def jwkpem_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(jwkpem_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def jwkpem_input_option(options: FC) -> FC:
    """Input key file click option decorator.

    Provides: `input_file: str` path to an existing readable file.

    :return: Click decorator
    """
    return click.option(
        "-i",
        "--input",
        "input_file",
        type=click.Path(exists=True, dir_okay=False, readable=True),
        required=True,
        help="The input file path. Accepted formats are: JWK and PEM.",
    )(options)
