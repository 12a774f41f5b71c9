#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM pytest configuration and shared test fixtures.

Key material is generated once per test session; key files are written into a
fresh temporary directory for every test that asks for them.
"""

import logging
import os
from typing import Any, Iterator

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from tests.cli_runner import CliRunner
from tests.misc import create_key_files

os.environ["JWKPEM_DEBUG_LOGGING_DISABLED"] = "True"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    """RSA 2048 private key shared by the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key() -> ec.EllipticCurvePrivateKey:
    """EC P-256 private key shared by the whole session."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ed25519_key() -> ed25519.Ed25519PrivateKey:
    """Ed25519 private key shared by the whole session."""
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def key_files(tmpdir: Any, rsa_key: rsa.RSAPrivateKey) -> dict[str, str]:
    """RSA key stored in every supported format, plus invalid files.

    :return: File paths by file name, see :func:`tests.misc.create_key_files`.
    """
    return create_key_files(str(tmpdir), rsa_key)


@pytest.fixture(autouse=True)
def reset_jwkpem_logger() -> Iterator[None]:
    """Remove handlers installed on the 'jwkpem' logger by a CLI invocation."""
    yield
    jwkpem_logger = logging.getLogger("jwkpem")
    for handler in list(jwkpem_logger.handlers):
        jwkpem_logger.removeHandler(handler)
        handler.close()
    jwkpem_logger.setLevel(logging.NOTSET)
