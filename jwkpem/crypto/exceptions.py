#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM cryptographic exceptions module.

Errors raised while parsing, decrypting or exporting keys.
"""

from jwkpem.exceptions import JwkPemError


class JwkPemCryptoError(JwkPemError):
    """General JWKPEM Crypto Error."""


class KeyParseError(JwkPemCryptoError):
    """Key file content can't be turned into a key.

    Raised for malformed JWK documents, malformed PEM envelopes and key types the
    underlying libraries don't know.
    """


class DecryptionError(JwkPemCryptoError):
    """Encrypted PEM can't be decrypted.

    Raised on a wrong passphrase, an unparseable PEM object or a PEM object kind
    that isn't an encrypted private key.
    """


class MissingPassphraseError(JwkPemCryptoError):
    """Passphrase is needed but it was neither given nor can be prompted for."""


class ConversionError(JwkPemCryptoError):
    """Loaded key can't be exported to the requested format."""
