#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of file helpers and configuration loading."""

import os
from typing import Any
from unittest.mock import patch

import pytest

from jwkpem import value_to_bool
from jwkpem.exceptions import JwkPemError, JwkPemIOError
from jwkpem.utils.misc import (
    find_file,
    get_abs_path,
    load_binary,
    load_configuration,
    load_text,
    use_working_directory,
    write_file,
)


def test_write_and_load(tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "nested", "dir", "file.txt")
    assert write_file("key data", path) == len("key data")
    assert load_text(path) == "key data"
    assert write_file(b"\x00\x01", path, mode="wb") == 2
    assert load_binary(path) == b"\x00\x01"


def test_write_replaces_existing(tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "file.txt")
    write_file("old content which is longer", path)
    write_file("new", path)
    assert load_text(path) == "new"
    assert os.listdir(tmpdir) == ["file.txt"]


def test_write_failure_keeps_original(tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "file.txt")
    write_file("original", path)
    with patch("jwkpem.utils.misc.os.replace", side_effect=PermissionError("denied")):
        with pytest.raises(JwkPemIOError, match="denied"):
            write_file("new", path)
    assert load_text(path) == "original"
    assert os.listdir(tmpdir) == ["file.txt"]


def test_write_interrupted_keeps_no_temp(tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "file.txt")
    with patch("jwkpem.utils.misc.os.replace", side_effect=KeyboardInterrupt):
        with pytest.raises(KeyboardInterrupt):
            write_file("data", path)
    assert os.listdir(tmpdir) == []


def test_load_text_not_utf8(tmpdir: Any) -> None:
    path = os.path.join(tmpdir, "latin.txt")
    write_file(b"\xff\xfe\xfa", path, mode="wb")
    with pytest.raises(JwkPemIOError):
        load_text(path)


def test_find_file(tmpdir: Any) -> None:
    write_file("x", os.path.join(tmpdir, "found.txt"))
    expected = get_abs_path(os.path.join(tmpdir, "found.txt"))
    assert find_file("found.txt", search_paths=[str(tmpdir)]) == expected
    with use_working_directory(str(tmpdir)):
        assert find_file("found.txt") == expected
    assert find_file("missing.txt", search_paths=[str(tmpdir)], raise_exc=False) == ""
    with pytest.raises(JwkPemError, match="not found"):
        find_file("missing.txt", use_cwd=False, search_paths=[str(tmpdir)])


def test_get_abs_path(tmpdir: Any) -> None:
    base = str(tmpdir).replace("\\", "/")
    assert get_abs_path("file.txt", base) == f"{base}/file.txt"
    assert get_abs_path(f"{base}/file.txt") == f"{base}/file.txt"


@pytest.mark.parametrize(
    "content",
    [
        '{"version": 1, "name": "jwkpem"}',
        "version: 1\nname: jwkpem\n",
    ],
)
def test_load_configuration(tmpdir: Any, content: str) -> None:
    path = os.path.join(tmpdir, "config.yaml")
    write_file(content, path)
    assert load_configuration(path) == {"version": 1, "name": "jwkpem"}


@pytest.mark.parametrize("content", ["", "- item\n", "key: [unclosed\n"])
def test_load_configuration_invalid(tmpdir: Any, content: str) -> None:
    path = os.path.join(tmpdir, "config.yaml")
    write_file(content, path)
    with pytest.raises(JwkPemError):
        load_configuration(path)


def test_load_configuration_missing(tmpdir: Any) -> None:
    with pytest.raises(JwkPemError, match="Can't load configuration file"):
        load_configuration(os.path.join(tmpdir, "missing.yaml"))


@pytest.mark.parametrize(
    "value,expected",
    [
        ("True", True),
        ("true", True),
        ("T", True),
        ("1", True),
        ("False", False),
        ("0", False),
        ("yes", False),
        (None, False),
        (1, True),
        (0, False),
    ],
)
def test_value_to_bool(value: Any, expected: bool) -> None:
    assert value_to_bool(value) is expected
