"""Domain models for classmagic.

Frozen dataclasses only — immutable value objects with no behaviour
beyond data access and formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

#: Magic number every Java class file starts with.
MAGIC_NUMBER: int = 0xCAFEBABE


def format_hex(value: int) -> str:
    """Render *value* as uppercase hex with a ``0x`` prefix."""
    return f"0x{value:X}"


@dataclass(frozen=True, slots=True)
class SignatureReport:
    """Outcome of reading the signature of one file."""

    path: str
    """Path the signature was read from."""

    value: int
    """Unsigned 32-bit value decoded big-endian from the first four bytes."""

    expected: int = MAGIC_NUMBER
    """Value the signature is compared against."""

    @property
    def valid(self) -> bool:
        return self.value == self.expected

    @property
    def value_hex(self) -> str:
        return format_hex(self.value)

    @property
    def expected_hex(self) -> str:
        return format_hex(self.expected)
