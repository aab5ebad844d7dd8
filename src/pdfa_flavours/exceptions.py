"""
Exceptions
===========
Errors raised when a caller asks for a flavour, standard, level or series
that is not part of the closed taxonomy.
"""

from __future__ import annotations

from typing import Any


class FlavourError(Exception):
    """Base class for all pdfa-flavours errors."""


class UnknownFlavourError(FlavourError, LookupError):
    """
    A lookup did not match any enumerated member.

    ``kind`` names what was looked up (``"flavour"``, ``"standard"``,
    ``"level"`` or ``"series"``) and ``value`` is the rejected input.
    """

    def __init__(self, kind: str, value: Any) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown PDF/A {kind}: {value!r}")
