"""Read and verify the magic number at the start of a class file.

A Java class file opens with the four bytes ``CA FE BA BE``.  This
module reads exactly that prefix, decodes it as an unsigned big-endian
32-bit integer and compares it with :data:`MAGIC_NUMBER`.

Guarantees
----------
* The file handle is released on every exit path.
* One ``read`` call per check — a short read is reported, not retried.
* Only :class:`~classmagic.exceptions.ClassMagicError` subclasses escape.
"""

from __future__ import annotations

import os

from classmagic.core.models import MAGIC_NUMBER, SignatureReport
from classmagic.exceptions import (
    SignatureOpenError,
    SignatureReadError,
    TruncatedInputError,
)

MAGIC_SIZE: int = 4
"""Number of leading bytes that make up the signature."""

__all__: list[str] = [
    "MAGIC_NUMBER",
    "MAGIC_SIZE",
    "inspect_class_magic",
    "read_class_magic",
    "verify_class_magic",
]


def read_class_magic(path: str | os.PathLike[str]) -> int:
    """Return the first four bytes of *path* as a big-endian integer.

    Raises
    ------
    SignatureOpenError
        If *path* does not exist or cannot be opened.
    SignatureReadError
        If the read itself fails.
    TruncatedInputError
        If the file holds fewer than :data:`MAGIC_SIZE` bytes.
    """
    display = os.fspath(path)
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise SignatureOpenError(
            f"error opening file '{display}': {exc}",
            path=path,
            cause=exc,
        ) from exc

    with handle:
        try:
            buffer = handle.read(MAGIC_SIZE)
        except OSError as exc:
            raise SignatureReadError(
                f"error reading from file '{display}': {exc}",
                path=path,
                cause=exc,
            ) from exc

    if len(buffer) < MAGIC_SIZE:
        raise TruncatedInputError(
            f"file '{display}' is too small; "
            f"expected at least {MAGIC_SIZE} bytes, got {len(buffer)}",
            path=path,
            size=len(buffer),
        )

    return int.from_bytes(buffer, "big")


def verify_class_magic(path: str | os.PathLike[str]) -> bool:
    """Return ``True`` when *path* starts with :data:`MAGIC_NUMBER`.

    A readable file with a different signature yields ``False``; only
    I/O failures and short files raise, with the error from
    :func:`read_class_magic` propagated unchanged.
    """
    return read_class_magic(path) == MAGIC_NUMBER


def inspect_class_magic(path: str | os.PathLike[str]) -> SignatureReport:
    """Read the signature of *path* once and wrap it in a report."""
    return SignatureReport(path=os.fspath(path), value=read_class_magic(path))
