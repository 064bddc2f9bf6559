"""Custom exception hierarchy for classmagic.

Every error that leaves the core layer inherits from
:class:`ClassMagicError`.  Raw :class:`OSError` instances raised while
opening or reading a file never escape on their own — they are chained
onto a typed subclass defined here, annotated with the offending path.

Hierarchy
---------
ClassMagicError
├── SignatureError
│   ├── SignatureOpenError
│   └── SignatureReadError
├── TruncatedInputError
└── EnvironmentError
"""

from __future__ import annotations

import os


class ClassMagicError(Exception):
    """Base exception for all classmagic errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- File access -----------------------------------------------------------

class SignatureError(ClassMagicError):
    """An I/O failure while fetching the signature of *path*.

    The underlying :class:`OSError` is kept on :attr:`cause` as well as
    in ``__cause__`` once the error is raised ``from`` it.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | os.PathLike[str],
        cause: OSError | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: str = os.fspath(path)
        self.cause: OSError | None = cause


class SignatureOpenError(SignatureError):
    """Raised when the file does not exist or cannot be opened."""


class SignatureReadError(SignatureError):
    """Raised when reading from an opened file fails."""


# --- Content ---------------------------------------------------------------

class TruncatedInputError(ClassMagicError):
    """Raised when the file holds fewer bytes than the signature needs."""

    def __init__(
        self,
        message: str,
        *,
        path: str | os.PathLike[str],
        size: int,
    ) -> None:
        super().__init__(message)
        self.path: str = os.fspath(path)
        self.size: int = size
        """Number of bytes actually obtained."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ClassMagicError):
    """Raised when a required runtime dependency is not available."""
