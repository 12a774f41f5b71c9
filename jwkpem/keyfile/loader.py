#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Loading of keys from detected key files."""

import logging
from typing import Optional

from jwkpem.crypto.decryptor import decrypt_pem, is_legacy_encrypted_pem
from jwkpem.crypto.exceptions import JwkPemCryptoError
from jwkpem.crypto.keys import Key
from jwkpem.crypto.passphrase import resolve_passphrase
from jwkpem.keyfile.formats import KeyFile, KeyFormat

logger = logging.getLogger(__name__)


def decrypt_key_file(key_file: KeyFile, passphrase: Optional[str] = None) -> str:
    """Decrypt encrypted PEM key file.

    The user is prompted for the passphrase only when it's not given.

    :param key_file: Encrypted PEM key file.
    :param passphrase: Passphrase, None to prompt for it.
    :return: Decrypted private key in plain PKCS#8 PEM.
    """
    return decrypt_pem(key_file.text.encode("utf-8"), resolve_passphrase(passphrase))


def load_key(key_file: KeyFile, passphrase: Optional[str] = None) -> Key:
    """Load key from the key file according to its format.

    PEM files protected by the legacy ``Proc-Type: 4,ENCRYPTED`` headers look like
    plain PEM on their first line, they get decrypted as well.

    :param key_file: Key file with detected format.
    :param passphrase: Passphrase for encrypted PEM, None to prompt for it when needed.
    :raises KeyParseError: The key can't be parsed.
    :raises DecryptionError: The key can't be decrypted.
    :raises MissingPassphraseError: The key is encrypted and there is no passphrase.
    :return: Loaded key.
    """
    data = key_file.text.encode("utf-8")
    try:
        if key_file.format == KeyFormat.JWK:
            key = Key.parse_jwk(key_file.text)
        elif key_file.format == KeyFormat.PEM and not is_legacy_encrypted_pem(data):
            key = Key.parse_pem(data)
        else:
            logger.info("Key file is encrypted, decrypting")
            key = Key.parse_pem(decrypt_key_file(key_file, passphrase).encode("ascii"))
    except JwkPemCryptoError as exc:
        raise type(exc)(
            f"Could not process key file at {key_file.path}. {exc.description}"
        ) from exc
    logger.debug(f"Loaded {key!r} from {key_file.path}")
    return key
