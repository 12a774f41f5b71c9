#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Passphrase resolution for encrypted key files.

A passphrase given on the command line always wins. Without it the user is asked
interactively, with the input hidden, as long as a terminal is available.
"""

import getpass
import logging
import sys
from typing import Optional

from jwkpem import JWKPEM_INTERACTIVE_DISABLED
from jwkpem.crypto.exceptions import MissingPassphraseError

logger = logging.getLogger(__name__)

PASSPHRASE_PROMPT = "Key encrypted. Please, enter the passphrase to decipher it: "


def is_interactive() -> bool:
    """Check whether the standard input is connected to a terminal."""
    return sys.stdin is not None and sys.stdin.isatty()


def prompt_for_passphrase() -> str:
    """Prompt interactively for private key passphrase.

    The entered passphrase is not echoed.

    :raises MissingPassphraseError: The interactive mode is disabled by
        JWKPEM_INTERACTIVE_DISABLED environment variable or there is no terminal.
    :return: The passphrase entered by the user.
    """
    if JWKPEM_INTERACTIVE_DISABLED:
        raise MissingPassphraseError(
            "Passphrase is required for encrypted PEM file. The interactive mode is turned off, "
            "use the --passphrase option or unset the 'JWKPEM_INTERACTIVE_DISABLED' "
            "environment variable"
        )
    if not is_interactive():
        raise MissingPassphraseError(
            "Passphrase is required for encrypted PEM file and no terminal is available "
            "to prompt for it, use the --passphrase option"
        )
    return getpass.getpass(prompt=PASSPHRASE_PROMPT, stream=None)


def resolve_passphrase(passphrase: Optional[str] = None) -> str:
    """Get passphrase from the explicit value or from the user.

    :param passphrase: Passphrase given by caller, None when not provided.
    :return: Passphrase to use.
    """
    if passphrase is not None:
        return passphrase
    logger.debug("No passphrase provided, prompting for it")
    return prompt_for_passphrase()
