"""Multi-byte charset decoders.

Each decoder walks the buffer left to right, appends UTF-16 code units to
the caller's list and returns the number of substitutions made. Bytes
below 0x80 are always ASCII. An invalid sequence never aborts decoding:

- a structurally valid lead/trail pair with no mapping consumes both bytes
  and emits one replacement character;
- anything else (bad lead, bad or missing trail) consumes one byte and
  emits one replacement character, so decoding resumes at the next byte.
"""

from __future__ import annotations

from ..charsets.loader import (
    DOUBLE_BYTE_LAYOUTS,
    UNMAPPED,
    get_double_byte_table,
    get_gb18030_four_byte_table,
)
from ..config import DecodeOptions
from ..const import (
    EUC_JP_SS2,
    EUC_JP_SS3,
    GB18030_BMP_POINTERS,
    GB18030_SUPPLEMENTARY_FIRST_POINTER,
    GB18030_SUPPLEMENTARY_LAST_POINTER,
    JIS_X0201_OVERLINE,
    JIS_X0201_YEN,
    KATAKANA_BASE,
    KATAKANA_FIRST_BYTE,
    KATAKANA_LAST_BYTE,
)
from .wide import append_codepoint


def _lookup_pair(data: bytes, pos: int, key: str) -> tuple[int, int | None]:
    """Look up the double-byte sequence starting at pos.

    Returns:
        (bytes consumed, codepoint or None if the sequence is invalid).
    """
    layout = DOUBLE_BYTE_LAYOUTS[key]
    lead = data[pos]
    if pos + 1 < len(data) and layout.is_lead(lead):
        trail = data[pos + 1]
        if layout.is_trail(trail):
            codepoint = get_double_byte_table(key)[lead << 8 | trail]
            return 2, (None if codepoint == UNMAPPED else codepoint)
    return 1, None


def _decode_double_byte(data: bytes, units: list[int], options: DecodeOptions, key: str) -> int:
    substituted = 0
    pos = 0
    end = len(data)
    while pos < end:
        lead = data[pos]
        if lead < 0x80:
            units.append(lead)
            pos += 1
            continue
        consumed, codepoint = _lookup_pair(data, pos, key)
        if codepoint is None:
            append_codepoint(units, options.replacement)
            substituted += 1
        else:
            units.append(codepoint)
        pos += consumed
    return substituted


def decode_big5(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode Big5 (lead bytes 0xA1-0xF9)."""
    return _decode_double_byte(data, units, options, "big5")


def decode_gb2312(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode GB2312 in its EUC-CN form."""
    return _decode_double_byte(data, units, options, "gb2312")


def decode_euc_kr(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode EUC-KR (KS X 1001, including the Euro and registered signs)."""
    return _decode_double_byte(data, units, options, "euc_kr")


def decode_shift_jis(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode Shift_JIS.

    Bytes 0x00-0x7F map straight to ASCII, including 0x5C and 0x7E which
    JIS X 0201 defines as Yen sign and overline; with options.sjis_ascii
    disabled those two take their JIS X 0201 glyphs instead. 0xA1-0xDF are
    half-width katakana, anything else starts a JIS X 0208 pair.
    """
    substituted = 0
    pos = 0
    end = len(data)
    while pos < end:
        byte = data[pos]
        if byte < 0x80:
            if not options.sjis_ascii and byte == 0x5C:
                byte = JIS_X0201_YEN
            elif not options.sjis_ascii and byte == 0x7E:
                byte = JIS_X0201_OVERLINE
            units.append(byte)
            pos += 1
            continue
        if KATAKANA_FIRST_BYTE <= byte <= KATAKANA_LAST_BYTE:
            units.append(KATAKANA_BASE + byte - KATAKANA_FIRST_BYTE)
            pos += 1
            continue
        consumed, codepoint = _lookup_pair(data, pos, "shift_jis")
        if codepoint is None:
            append_codepoint(units, options.replacement)
            substituted += 1
        else:
            units.append(codepoint)
        pos += consumed
    return substituted


def _is_gb18030_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def gb18030_four_byte_codepoint(b1: int, b2: int, b3: int, b4: int) -> int | None:
    """Map a GB18030 four-byte sequence to its codepoint.

    The sequence is turned into a linear pointer; pointers below 39420
    cover the rest of the BMP through a lookup table, pointers from 189000
    map linearly onto U+10000-U+10FFFF.

    Returns:
        Codepoint, or None for bytes outside the four-byte form or
        unassigned pointers.
    """
    if not (0x81 <= b1 <= 0xFE and 0x81 <= b3 <= 0xFE):
        return None
    if not (_is_gb18030_digit(b2) and _is_gb18030_digit(b4)):
        return None
    pointer = (((b1 - 0x81) * 10 + b2 - 0x30) * 126 + b3 - 0x81) * 10 + b4 - 0x30
    if pointer < GB18030_BMP_POINTERS:
        codepoint = get_gb18030_four_byte_table()[pointer]
        return None if codepoint == UNMAPPED else codepoint
    if GB18030_SUPPLEMENTARY_FIRST_POINTER <= pointer <= GB18030_SUPPLEMENTARY_LAST_POINTER:
        return 0x10000 + pointer - GB18030_SUPPLEMENTARY_FIRST_POINTER
    return None


def decode_gb18030(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode GB18030, the only charset with a four-byte step.

    A lead byte is first tried as a two-byte GBK sequence; if that fails
    and the second byte is a digit (0x30-0x39), the four-byte form is
    tried.
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
        consumed, codepoint = _lookup_pair(data, pos, "gb18030")
        if codepoint is None and pos + 3 < end and _is_gb18030_digit(data[pos + 1]):
            codepoint = gb18030_four_byte_codepoint(*data[pos : pos + 4])
            if codepoint is not None:
                consumed = 4
        if codepoint is None:
            append_codepoint(units, options.replacement)
            substituted += 1
        else:
            append_codepoint(units, codepoint)
        pos += consumed
    return substituted


def decode_euc_jp(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Decode EUC-JP.

    0x8E (SS2) introduces a half-width katakana byte, 0x8F (SS3) a JIS X
    0212 pair, and 0xA1-0xFE pairs are JIS X 0208.
    """
    substituted = 0
    pos = 0
    end = len(data)
    while pos < end:
        lead = data[pos]
        codepoint: int | None
        if lead < 0x80:
            units.append(lead)
            pos += 1
            continue
        if lead == EUC_JP_SS2:
            consumed, codepoint = 1, None
            if pos + 1 < end and KATAKANA_FIRST_BYTE <= data[pos + 1] <= KATAKANA_LAST_BYTE:
                consumed, codepoint = 2, KATAKANA_BASE + data[pos + 1] - KATAKANA_FIRST_BYTE
        elif lead == EUC_JP_SS3:
            consumed, codepoint = 1, None
            if pos + 2 < end:
                pair_consumed, codepoint = _lookup_pair(data, pos + 1, "jis_x0212")
                if pair_consumed == 2:
                    consumed = 3
        else:
            consumed, codepoint = _lookup_pair(data, pos, "euc_jp")
        if codepoint is None:
            append_codepoint(units, options.replacement)
            substituted += 1
        else:
            units.append(codepoint)
        pos += consumed
    return substituted
