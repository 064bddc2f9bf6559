"""CLI application entry point for classmagic.

Usage::

    classmagic <class_file_path>

This module is the **sole error boundary** for the application.  It
converts :class:`~classmagic.exceptions.ClassMagicError`,
``KeyboardInterrupt`` and any unexpected ``Exception`` into a printed
message and a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — the check is delegated to
  :mod:`classmagic.core.signature`.
* An invalid signature is reported, not treated as a failure: the
  process still exits with :data:`~classmagic.cli.exit_codes.SUCCESS`.
"""

from __future__ import annotations

import argparse
import sys

from classmagic.cli import exit_codes
from classmagic.cli.console import console
from classmagic.core.signature import inspect_class_magic
from classmagic.exceptions import ClassMagicError
from classmagic.version import __version__

PROG: str = "classmagic"

USAGE: str = f"Usage: {PROG} <class_file_path>"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The path is optional at the parser level so that a missing argument
    prints :data:`USAGE` to stdout and exits with ``GENERAL_ERROR``
    instead of argparse's own usage error.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Check whether a file starts with the Java class-file magic number.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path of the file to check.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def _handle_check(path: str) -> int:
    """Check *path* and print the verdict followed by the raw values."""
    try:
        report = inspect_class_magic(path)
    except ClassMagicError as exc:
        console.print(
            f"Error verifying magic number for '{path}': {exc}",
            style="bold red",
        )
        return exit_codes.GENERAL_ERROR

    if report.valid:
        console.print(
            f"Successfully verified magic number for '{path}'. "
            "It is a valid Java class file.",
            style="green",
        )
    else:
        console.print(
            f"Magic number for '{path}' is invalid. "
            "It is NOT a valid Java class file.",
            style="yellow",
        )

    console.print(f"Read raw magic number: {report.value_hex}")
    console.print(f"Expected magic number: {report.expected_hex}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the classmagic CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        console.print(USAGE)
        return exit_codes.GENERAL_ERROR

    return _handle_check(args.path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Checker errors are reported by :func:`_handle_check` itself, so the
    ``ClassMagicError`` branch is a safety net for errors raised anywhere
    else in :func:`main`; it renders the message and hint and exits with
    ``GENERAL_ERROR``.
    """
    try:
        code = main()
        sys.exit(code)
    except ClassMagicError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
