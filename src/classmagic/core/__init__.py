"""Core layer — the signature check itself.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``.
* The only I/O is the single scoped read in :mod:`classmagic.core.signature`.
"""

from classmagic.core.models import SignatureReport
from classmagic.core.signature import (
    MAGIC_NUMBER,
    MAGIC_SIZE,
    inspect_class_magic,
    read_class_magic,
    verify_class_magic,
)

__all__: list[str] = [
    "MAGIC_NUMBER",
    "MAGIC_SIZE",
    "SignatureReport",
    "inspect_class_magic",
    "read_class_magic",
    "verify_class_magic",
]
