#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM application utilities: top level error handling."""

import logging
import sys
from functools import wraps
from typing import Any, Callable

import click

from jwkpem import JWKPEM_DEBUG_LOG_FILE, JWKPEM_DEBUG_LOGGING_DISABLED
from jwkpem.exceptions import JwkPemError

logger = logging.getLogger(__name__)


def catch_jwkpem_error(function: Callable) -> Callable:
    """Catch and handle JwkPemError and other exceptions.

    Decorator for application entry points.

    JwkPemError or AssertionError prints the message, logs the traceback to the
    debug log and exits with code 2. Any other exception, including
    KeyboardInterrupt, is reported as a general error with exit code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except (AssertionError, JwkPemError) as jwkpem_exc:
            click.echo(f"{jwkpem_exc.__class__.__name__}: {jwkpem_exc}", err=True)
            logger.debug(str(jwkpem_exc), exc_info=True)
            if not JWKPEM_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {JWKPEM_DEBUG_LOG_FILE} for more info",
                    fg="yellow",
                    err=True,
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not JWKPEM_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {JWKPEM_DEBUG_LOG_FILE} for more info.",
                    fg="yellow",
                    err=True,
                )
            sys.exit(3)

    return wrapper
