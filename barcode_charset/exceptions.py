"""Exceptions raised by the barcode charset codec."""

from __future__ import annotations

from typing import Any


class UnknownCharsetError(LookupError):
    """Raised when a name or ECI number does not resolve to a Charset."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown charset: {value!r}")
        self.value = value
