"""Smoke tests — verify package wiring.

These tests prove that:
* The version is accessible.
* The exception hierarchy is correctly structured.
* Exit codes are defined.
* The ``python -m`` entry point is importable.
"""

from __future__ import annotations

import importlib

import pytest

from classmagic import __version__
from classmagic.cli import exit_codes
from classmagic.exceptions import (
    ClassMagicError,
    EnvironmentError,
    SignatureError,
    SignatureOpenError,
    SignatureReadError,
    TruncatedInputError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            SignatureError,
            SignatureOpenError,
            SignatureReadError,
            TruncatedInputError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ClassMagicError]
    ) -> None:
        assert issubclass(exc_class, ClassMagicError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ClassMagicError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ClassMagicError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ClassMagicError("boom")
        assert err.hint is None

    def test_signature_error_keeps_path_and_cause(self) -> None:
        cause = PermissionError("denied")
        err = SignatureOpenError("no access", path="A.class", cause=cause)
        assert err.path == "A.class"
        assert err.cause is cause

    def test_truncated_input_keeps_size(self) -> None:
        err = TruncatedInputError("too small", path="A.class", size=3)
        assert err.path == "A.class"
        assert err.size == 3
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

class TestMainModule:
    def test_importable_without_running(self) -> None:
        module = importlib.import_module("classmagic.__main__")
        assert callable(module.cli)
