"""Process exit codes returned by ``classmagic``.

A file whose signature does not match is a normal answer, not a
failure: only a missing argument or an unreadable file moves the exit
code off :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The file was read; the verdict (valid or not) was printed."""

GENERAL_ERROR: int = 1
"""No path given, or the file could not be opened, read, or was too short."""

UNEXPECTED_ERROR: int = 2
"""A crash outside the known error kinds."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
