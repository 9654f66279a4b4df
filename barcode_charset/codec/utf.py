"""UTF-8, UTF-16 and UTF-32 primitives.

Decoders append UTF-16 code units to a caller supplied list and return the
number of substitutions they made. They never raise: malformed UTF-8 bytes
pass through as their own code unit, malformed UTF-16/UTF-32 units become
the configured replacement character.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from ..config import DecodeOptions
from ..const import MAX_CODEPOINT, REPLACEMENT_CHAR
from .wide import (
    WideString,
    append_codepoint,
    is_high_surrogate,
    is_low_surrogate,
    iter_codepoints,
)

ByteOrder = Literal["big", "little"]


def _is_surrogate(codepoint: int) -> bool:
    return is_high_surrogate(codepoint) or is_low_surrogate(codepoint)


def encode_scalar_to_utf8(codepoint: int) -> bytes:
    """Encode one Unicode scalar value as UTF-8.

    Values outside 0..U+10FFFF encode as U+FFFD. len() of the result is
    the number of bytes written (1-4).
    """
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        codepoint = REPLACEMENT_CHAR
    if codepoint <= 0x7F:
        return bytes((codepoint,))
    if codepoint <= 0x7FF:
        return bytes((0xC0 | codepoint >> 6, 0x80 | codepoint & 0x3F))
    if codepoint <= 0xFFFF:
        return bytes(
            (
                0xE0 | codepoint >> 12,
                0x80 | codepoint >> 6 & 0x3F,
                0x80 | codepoint & 0x3F,
            )
        )
    return bytes(
        (
            0xF0 | codepoint >> 18,
            0x80 | codepoint >> 12 & 0x3F,
            0x80 | codepoint >> 6 & 0x3F,
            0x80 | codepoint & 0x3F,
        )
    )


def wide_to_utf8(wide: Iterable[int] | str) -> bytes:
    """Encode a wide string as UTF-8.

    Surrogate pairs are recombined into one scalar before encoding; an
    unpaired surrogate encodes as U+FFFD, so the result is always valid
    UTF-8.

    Args:
        wide: UTF-16 code units (e.g., a WideString), or a Python string.

    Returns:
        UTF-8 bytes.
    """
    if isinstance(wide, str):
        wide = WideString.from_str(wide)
    out = bytearray()
    for codepoint in iter_codepoints(wide):
        if _is_surrogate(codepoint):
            codepoint = REPLACEMENT_CHAR
        out += encode_scalar_to_utf8(codepoint)
    return bytes(out)


# Boundary spelling used by callers of the codec
encode_utf8 = wide_to_utf8


def _utf8_lead(byte: int) -> tuple[int, int, int]:
    """Return (sequence length, initial value bits, smallest legal value)."""
    if 0xC0 <= byte <= 0xDF:
        return 2, byte & 0x1F, 0x80
    if 0xE0 <= byte <= 0xEF:
        return 3, byte & 0x0F, 0x800
    if 0xF0 <= byte <= 0xF4:
        return 4, byte & 0x07, 0x10000
    return 0, 0, 0


def decode_utf8(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode UTF-8 into code units.

    Overlong forms, encoded surrogates, values above U+10FFFF, stray
    continuation bytes and truncated sequences emit the lead byte as a
    code unit and resume at the next byte.
    """
    substituted = 0
    pos = 0
    end = len(data)
    while pos < end:
        lead = data[pos]
        if lead < 0x80:
            units.append(lead)
            pos += 1
            continue
        length, codepoint, minimum = _utf8_lead(lead)
        if length and pos + length <= end:
            for follow in data[pos + 1 : pos + length]:
                if follow & 0xC0 != 0x80:
                    break
                codepoint = codepoint << 6 | follow & 0x3F
            else:
                if minimum <= codepoint <= MAX_CODEPOINT and not _is_surrogate(codepoint):
                    append_codepoint(units, codepoint)
                    pos += length
                    continue
        units.append(lead)
        pos += 1
        substituted += 1
    return substituted


def _decode_utf16(
    data: bytes, units: list[int], options: DecodeOptions, byteorder: ByteOrder
) -> int:
    substituted = 0
    end = len(data) - len(data) % 2
    pos = 0
    while pos < end:
        unit = int.from_bytes(data[pos : pos + 2], byteorder)
        pos += 2
        if is_high_surrogate(unit) and pos < end:
            low = int.from_bytes(data[pos : pos + 2], byteorder)
            if is_low_surrogate(low):
                units.append(unit)
                units.append(low)
                pos += 2
                continue
        if _is_surrogate(unit):
            append_codepoint(units, options.replacement)
            substituted += 1
        else:
            units.append(unit)
    if end != len(data):
        append_codepoint(units, options.replacement)
        substituted += 1
    return substituted


def decode_utf16be(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode big-endian UTF-16; surrogate pairs pass through unchanged."""
    return _decode_utf16(data, units, options, "big")


def decode_utf16le(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode little-endian UTF-16; surrogate pairs pass through unchanged."""
    return _decode_utf16(data, units, options, "little")


def _decode_utf32(
    data: bytes, units: list[int], options: DecodeOptions, byteorder: ByteOrder
) -> int:
    substituted = 0
    end = len(data) - len(data) % 4
    for pos in range(0, end, 4):
        codepoint = int.from_bytes(data[pos : pos + 4], byteorder)
        if codepoint > MAX_CODEPOINT or _is_surrogate(codepoint):
            codepoint = options.replacement
            substituted += 1
        append_codepoint(units, codepoint)
    if end != len(data):
        append_codepoint(units, options.replacement)
        substituted += 1
    return substituted


def decode_utf32be(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode big-endian UTF-32."""
    return _decode_utf32(data, units, options, "big")


def decode_utf32le(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode little-endian UTF-32."""
    return _decode_utf32(data, units, options, "little")
