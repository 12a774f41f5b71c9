#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""JWKPEM miscellaneous utilities.

File loading and storing helpers, path searching and configuration file loading.
"""

import contextlib
import json
import logging
import os
import tempfile
from typing import Iterator, Optional, Union

import yaml

from jwkpem.exceptions import JwkPemError, JwkPemIOError

logger = logging.getLogger(__name__)


def load_binary(path: str, search_paths: Optional[list[str]] = None) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :return: Content of the binary file as bytes.
    """
    data = load_file(path, mode="rb", search_paths=search_paths)
    assert isinstance(data, bytes)
    return data


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    text = load_file(path, mode="r", search_paths=search_paths)
    assert isinstance(text, str)
    return text


def load_file(
    path: str, mode: str = "r", search_paths: Optional[list[str]] = None
) -> Union[str, bytes]:
    """Load file content from specified path.

    :param path: Path to the file to be loaded.
    :param mode: File reading mode, 'r' for text or 'rb' for binary.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises JwkPemIOError: The file exists but can't be read.
    :return: File content as string (text mode) or bytes (binary mode).
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading {'binary' if 'b' in mode else 'text'} file from {path}")
    encoding = None if "b" in mode else "utf-8"
    try:
        with open(path, mode, encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise JwkPemIOError(f"Can't read file '{path}': {exc}") from exc


def write_file(
    data: Union[str, bytes],
    path: str,
    mode: str = "w",
    encoding: str = "utf-8",
) -> int:
    """Write data to a file atomically, creating parent directories.

    Data are written into a temporary file next to the target which then replaces
    the target in a single step. An interrupted write never leaves a truncated file
    behind and an already existing target stays untouched until the new content is
    complete. The new file is created with owner-only permissions.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param mode: File writing mode ('w' for text, 'wb' for binary), defaults to 'w'.
    :param encoding: Text encoding used in text mode, defaults to 'utf-8'.
    :raises JwkPemIOError: The file can't be written.
    :return: Number of characters or bytes written to the file.
    """
    path = path.replace("\\", "/")
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing {'binary' if 'b' in mode else 'text'} file at {path}")
    fd, temp_path = tempfile.mkstemp(
        prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=folder or None
    )
    try:
        with os.fdopen(fd, mode, encoding=None if "b" in mode else encoding) as f:
            written = f.write(data)
        os.replace(temp_path, path)
    except BaseException as exc:
        with contextlib.suppress(FileNotFoundError):
            os.remove(temp_path)
        if isinstance(exc, OSError):
            raise JwkPemIOError(f"Can't write file '{path}': {exc}") from exc
        raise
    return written


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Make the path absolute, relative paths are resolved against base_dir or the CWD.

    :param file_path: Relative or absolute file path.
    :param base_dir: Base directory of relative paths, defaults to the current working directory.
    :return: Absolute path with forward slashes.
    """
    if not os.path.isabs(file_path):
        file_path = os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path))
    return file_path.replace("\\", "/")


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file by absolute path, in search paths or in the current working directory.

    Search paths are tried in order before the current working directory.

    :param file_path: File name, part of file path or full path.
    :param use_cwd: Look into the current working directory as well, defaults to True.
    :param search_paths: Directories to look into, defaults to None.
    :param raise_exc: Raise exception when the file is not found, defaults to True.
    :raises JwkPemError: The file is not found and raise_exc is set.
    :return: Absolute path of the file, empty string when not found and raise_exc is not set.
    """
    file_path = file_path.replace("\\", "/")
    if os.path.isabs(file_path):
        candidates = [file_path]
    else:
        base_dirs = [folder for folder in search_paths or [] if folder]
        if use_cwd:
            base_dirs.append(os.getcwd())
        candidates = [get_abs_path(file_path, base_dir=folder) for folder in base_dirs]

    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate

    message = f"Path '{file_path}' not found"
    if not os.path.isabs(file_path):
        message += f", searched in: {', '.join(os.path.dirname(c) for c in candidates)}"
    if raise_exc:
        raise JwkPemError(message)
    logger.debug(message)
    return ""


@contextlib.contextmanager
def use_working_directory(path: str) -> Iterator[None]:
    # pylint: disable=missing-yield-doc
    """Change the working directory for the duration of the block.

    :param path: Directory to work in.
    """
    current_dir = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(current_dir)


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    The file content is parsed as JSON first, YAML is the fallback.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises JwkPemError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise JwkPemError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise JwkPemError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise JwkPemError(f"Invalid configuration file: {path}")

    return config_data
