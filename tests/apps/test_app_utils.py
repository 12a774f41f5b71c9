#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the application error handling and exit codes."""

from typing import Any, Optional
from unittest.mock import patch

import pytest

from jwkpem.apps.jwkpem import safe_main
from jwkpem.apps.utils.utils import catch_jwkpem_error
from jwkpem.crypto.exceptions import DecryptionError
from jwkpem.keyfile.exceptions import EmptyFileError


@catch_jwkpem_error
def function_under_test(to_raise: Optional[BaseException] = None) -> int:
    """Return 0 or raise the given exception.

    :param to_raise: Exception to raise, None to return normally.
    :return: 0 when there is nothing to raise.
    """
    if to_raise is None:
        return 0
    raise to_raise


@pytest.mark.parametrize(
    "exception,code",
    [
        (EmptyFileError("no lines"), 2),
        (DecryptionError("bad passphrase"), 2),
        (AssertionError(), 2),
        (IndexError(), 3),
        (KeyboardInterrupt(), 3),
    ],
)
def test_catch_jwkpem_error(exception: BaseException, code: int) -> None:
    with pytest.raises(SystemExit) as exc:
        function_under_test(exception)
    assert exc.value.code == code


def test_catch_jwkpem_error_no_error() -> None:
    assert function_under_test(None) == 0


def test_error_messages(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit):
        function_under_test(DecryptionError("Incorrect passphrase"))
    assert "DecryptionError: jwkpem: Incorrect passphrase" in capsys.readouterr().err

    with pytest.raises(SystemExit):
        function_under_test(ValueError("boom"))
    assert "GENERAL ERROR: ValueError: boom" in capsys.readouterr().err


def run_safe_main(args: list[str]) -> Any:
    """Run the console entry point with given arguments and return its exit code."""
    with patch("sys.argv", ["jwkpem"] + args):
        with pytest.raises(SystemExit) as exc:
            safe_main()
    return exc.value.code


def test_exit_code_success(key_files: dict[str, str]) -> None:
    assert run_safe_main(["detect", "-i", key_files["private.pem"]]) == 0


def test_exit_code_usage_error(tmpdir: Any) -> None:
    assert run_safe_main(["convert", "-i", f"{tmpdir}/missing.pem"]) == 2


def test_exit_code_key_file_error(key_files: dict[str, str]) -> None:
    assert run_safe_main(["convert", "-i", key_files["hello.txt"]]) == 2


def test_exit_code_aborted_prompt(key_files: dict[str, str]) -> None:
    with patch("jwkpem.crypto.passphrase.is_interactive", return_value=True), patch(
        "jwkpem.crypto.passphrase.JWKPEM_INTERACTIVE_DISABLED", False
    ), patch("jwkpem.crypto.passphrase.getpass.getpass", side_effect=KeyboardInterrupt):
        assert run_safe_main(["convert", "-i", key_files["encrypted.pem"]]) == 1
