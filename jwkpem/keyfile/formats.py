#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key file formats and their detection.

The format of a key file is decided by its first non-empty line only; the content
itself is validated later when the key gets loaded.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

from jwkpem.keyfile.exceptions import EmptyFileError, UnrecognizedFormatError
from jwkpem.utils.jwkpem_enum import JwkPemEnum
from jwkpem.utils.misc import load_binary

logger = logging.getLogger(__name__)

# other PEM labels: https://github.com/openssl/openssl/blob/master/include/openssl/pem.h
JWK_RE = re.compile(r"\{.*")
ENCRYPTED_PEM_RE = re.compile(r"-+BEGIN .*ENCRYPTED PRIVATE KEY-+")
PEM_RES = (
    re.compile(r"-+BEGIN .*PUBLIC KEY-+"),
    re.compile(r"-+BEGIN .*PRIVATE KEY-+"),
)


class KeyFormat(JwkPemEnum):
    """Supported key file formats."""

    JWK = (0, "JWK", "JSON Web Key")
    PEM = (1, "PEM", "PEM encoded public or private key")
    ENCRYPTED_PEM = (2, "ENCRYPTED_PEM", "PEM encoded password protected private key")

    @property
    def extension(self) -> str:
        """Canonical file extension of the format."""
        return "jwk" if self is KeyFormat.JWK else "pem"

    @property
    def target(self) -> "KeyFormat":
        """Complementary format a key file of this format is converted to."""
        return KeyFormat.PEM if self is KeyFormat.JWK else KeyFormat.JWK

    @classmethod
    def get_names(cls) -> str:
        """Get comma separated labels of all formats."""
        return ", ".join(cls.labels())


def detect_format(first_line: Optional[str], path: str = "") -> KeyFormat:
    """Classify key file by its first line.

    The encrypted PEM pattern is tested before the generic private key one, which
    would match it as well.

    :param first_line: First non-empty line of the file, None for an empty file.
    :param path: File path used in error messages.
    :raises EmptyFileError: There is no line.
    :raises UnrecognizedFormatError: The line doesn't match any format.
    :return: Detected format.
    """
    if first_line is None:
        raise EmptyFileError(f"Invalid key file {path}: No lines in file.")
    line = first_line.strip()
    if JWK_RE.fullmatch(line):
        return KeyFormat.JWK
    if ENCRYPTED_PEM_RE.fullmatch(line):
        return KeyFormat.ENCRYPTED_PEM
    if any(pem_re.fullmatch(line) for pem_re in PEM_RES):
        return KeyFormat.PEM
    raise UnrecognizedFormatError(
        f"Invalid key file {path}: Unknown file format (expected {KeyFormat.get_names()})."
    )


def get_first_line(text: str) -> Optional[str]:
    """Get first non-empty line of the text, ignoring a leading byte order mark.

    :param text: Text to look into.
    :return: The line or None if the text holds only whitespace.
    """
    for line in text.lstrip("\ufeff").splitlines():
        if line.strip():
            return line
    return None


@dataclass(frozen=True)
class KeyFile:
    """Content of a key file together with its detected format."""

    path: str
    data: bytes
    format: KeyFormat

    @property
    def text(self) -> str:
        """File content as text."""
        return self.data.decode("utf-8").lstrip("\ufeff")


def read_key_file(path: str) -> KeyFile:
    """Read key file and detect its format.

    The file is read exactly once; the returned object is passed along the whole
    conversion.

    :param path: Path to the key file.
    :raises EmptyFileError: The file is empty.
    :raises UnrecognizedFormatError: The file isn't a text key file of known format.
    :return: Key file with detected format.
    """
    abs_path = os.path.abspath(path)
    data = load_binary(abs_path)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnrecognizedFormatError(
            f"Invalid key file {abs_path}: Not a text file (expected {KeyFormat.get_names()})."
        ) from exc
    key_format = detect_format(get_first_line(text), abs_path)
    logger.info(f"Detected {key_format.label} key file: {abs_path}")
    return KeyFile(path=abs_path, data=data, format=key_format)
