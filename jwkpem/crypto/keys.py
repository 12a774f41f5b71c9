#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause
"""JWKPEM key handle.

This module wraps keys loaded either from PEM (through the cryptography package) or
from JWK documents (through jwcrypto) into one :class:`Key` object that can be
exported to both text formats.
"""

import json
import logging
from typing import Any

from asn1crypto import pem
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.serialization import (
    load_pem_private_key as crypto_load_pem_private_key,
)
from cryptography.hazmat.primitives.serialization import (
    load_pem_public_key as crypto_load_pem_public_key,
)
from jwcrypto import jwk
from jwcrypto.common import JWException
from typing_extensions import Self

from jwkpem.crypto.exceptions import ConversionError, KeyParseError

logger = logging.getLogger(__name__)


def _load_pem_private_key(data: bytes) -> Any:
    """Load unencrypted PEM private key.

    :param data: PEM encoded private key.
    :raises KeyParseError: The key is encrypted, malformed or of unknown algorithm.
    :return: Private key object of the cryptography package.
    """
    try:
        return crypto_load_pem_private_key(data, password=None)
    except TypeError as exc:
        if "private key is encrypted" in str(exc):
            raise KeyParseError("Private key is encrypted, passphrase is required") from exc
        raise KeyParseError(f"Cannot load PEM private key: {exc}") from exc
    except (UnsupportedAlgorithm, ValueError) as exc:
        raise KeyParseError(f"Cannot load PEM private key: {exc}") from exc


def _load_pem_public_key(data: bytes) -> Any:
    """Load PEM public key.

    :param data: PEM encoded public key.
    :raises KeyParseError: The key is malformed or of unknown algorithm.
    :return: Public key object of the cryptography package.
    """
    try:
        return crypto_load_pem_public_key(data)
    except (UnsupportedAlgorithm, ValueError) as exc:
        raise KeyParseError(f"Cannot load PEM public key: {exc}") from exc


class Key:
    """Cryptographic key, public or private, exportable to PEM and JWK.

    The key material is kept as a jwcrypto ``JWK`` object. Keys parsed from PEM are
    imported into it from their cryptography package representation.
    """

    def __init__(self, key: jwk.JWK) -> None:
        """Create the key handle.

        :param key: Loaded JWK object.
        """
        self.key = key

    @classmethod
    def create(cls, key: Any) -> Self:
        """Create key from a cryptography package key object.

        RSA, EC, Ed25519/Ed448 and X25519/X448 keys are supported, both private and public.

        :param key: Key object of the cryptography package.
        :raises KeyParseError: The key type has no JWK representation.
        :return: Key handle.
        """
        try:
            return cls(jwk.JWK.from_pyca(key))
        except (JWException, ValueError, TypeError) as exc:
            raise KeyParseError(f"Unsupported key type {type(key).__name__}: {exc}") from exc

    @classmethod
    def parse_pem(cls, data: bytes) -> Self:
        """Parse key from unencrypted PEM data.

        The PEM label decides whether a private or a public key is loaded.

        :param data: PEM encoded key.
        :raises KeyParseError: The data can't be parsed into a supported key.
        :return: Key handle.
        """
        try:
            label, _, _ = pem.unarmor(data)
        except (ValueError, TypeError, StopIteration) as exc:
            raise KeyParseError("No PEM object found") from exc
        logger.debug(f"Parsing PEM object '{label}'")
        if label.endswith("PRIVATE KEY"):
            return cls.create(_load_pem_private_key(data))
        if label.endswith("PUBLIC KEY"):
            return cls.create(_load_pem_public_key(data))
        raise KeyParseError(f"Unsupported PEM object: {label}")

    @classmethod
    def parse_jwk(cls, data: str) -> Self:
        """Parse key from JWK JSON document.

        :param data: JSON text of the JWK.
        :raises KeyParseError: The document isn't a valid JWK.
        :return: Key handle.
        """
        try:
            return cls(jwk.JWK.from_json(data))
        except (JWException, ValueError, TypeError) as exc:
            raise KeyParseError(f"Cannot load JWK: {exc}") from exc

    @property
    def key_type(self) -> str:
        """JWK key type: RSA, EC, OKP or oct."""
        return self.key.get("kty")

    @property
    def is_private(self) -> bool:
        """Key contains private (or symmetric secret) material."""
        return bool(self.key.has_private)

    def thumbprint(self) -> str:
        """Get RFC 7638 SHA-256 thumbprint of the key.

        The thumbprint covers only the public members, so a private key and its public
        counterpart share it.

        :return: Base64url encoded thumbprint.
        """
        return self.key.thumbprint()

    def export_pem(self) -> str:
        """Export key into PEM.

        Private keys are exported as unencrypted PKCS#8, public keys as SubjectPublicKeyInfo.

        :raises ConversionError: The key has no PEM representation.
        :return: PEM text.
        """
        if self.key.is_symmetric:
            raise ConversionError("Symmetric (oct) keys can't be exported to PEM")
        try:
            if self.is_private:
                pem = self.key.export_to_pem(private_key=True, password=None)
            else:
                pem = self.key.export_to_pem()
        except (JWException, ValueError, TypeError) as exc:
            raise ConversionError(f"Cannot export {self.key_type} key to PEM: {exc}") from exc
        return pem.decode("ascii")

    def export_jwk(self) -> str:
        """Export key into JWK.

        :return: Single line JSON text of the key, private members included for private keys.
        """
        if self.is_private:
            members = self.key.export_private(as_dict=True)
        else:
            members = self.key.export_public(as_dict=True)
        return json.dumps(members)

    def __eq__(self, obj: Any) -> bool:
        """Keys are equal when their kind and public members match."""
        return (
            isinstance(obj, self.__class__)
            and self.is_private == obj.is_private
            and self.thumbprint() == obj.thumbprint()
        )

    def __repr__(self) -> str:
        return f"{self.key_type} {'Private' if self.is_private else 'Public'} Key"

    def __str__(self) -> str:
        return f"{self.__repr__()} (thumbprint {self.thumbprint()})"
