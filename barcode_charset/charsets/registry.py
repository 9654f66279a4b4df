"""Charset registry: strategy tag and table source of every charset."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import UnknownCharsetError
from .constants import Charset, Strategy
from .eci import charset_from_eci
from .loader import get_high_table
from .names import name_to_charset


@dataclass(frozen=True)
class CharsetInfo:
    """Decode strategy of a charset and, for single-byte sets, its codec."""

    strategy: Strategy
    codec: str | None = None


def _single_byte(codec: str) -> CharsetInfo:
    return CharsetInfo(strategy=Strategy.SINGLE_BYTE, codec=codec)


CHARSET_INFO: dict[Charset, CharsetInfo] = {
    # ASCII accepts non-ASCII bytes and passes them through like BINARY
    Charset.ASCII: CharsetInfo(strategy=Strategy.BINARY),
    Charset.ISO8859_1: _single_byte("iso8859_1"),
    Charset.ISO8859_2: _single_byte("iso8859_2"),
    Charset.ISO8859_3: _single_byte("iso8859_3"),
    Charset.ISO8859_4: _single_byte("iso8859_4"),
    Charset.ISO8859_5: _single_byte("iso8859_5"),
    Charset.ISO8859_6: _single_byte("iso8859_6"),
    Charset.ISO8859_7: _single_byte("iso8859_7"),
    Charset.ISO8859_8: _single_byte("iso8859_8"),
    Charset.ISO8859_9: _single_byte("iso8859_9"),
    Charset.ISO8859_10: _single_byte("iso8859_10"),
    Charset.ISO8859_11: _single_byte("iso8859_11"),
    Charset.ISO8859_13: _single_byte("iso8859_13"),
    Charset.ISO8859_14: _single_byte("iso8859_14"),
    Charset.ISO8859_15: _single_byte("iso8859_15"),
    Charset.ISO8859_16: _single_byte("iso8859_16"),
    Charset.CP437: _single_byte("cp437"),
    Charset.CP1250: _single_byte("cp1250"),
    Charset.CP1251: _single_byte("cp1251"),
    Charset.CP1252: _single_byte("cp1252"),
    Charset.CP1256: _single_byte("cp1256"),
    Charset.SHIFT_JIS: CharsetInfo(strategy=Strategy.SHIFT_JIS),
    Charset.BIG5: CharsetInfo(strategy=Strategy.BIG5),
    Charset.GB2312: CharsetInfo(strategy=Strategy.GB2312),
    Charset.GB18030: CharsetInfo(strategy=Strategy.GB18030),
    Charset.EUC_JP: CharsetInfo(strategy=Strategy.EUC_JP),
    Charset.EUC_KR: CharsetInfo(strategy=Strategy.EUC_KR),
    Charset.UTF16BE: CharsetInfo(strategy=Strategy.UTF16BE),
    Charset.UTF8: CharsetInfo(strategy=Strategy.UTF8),
    Charset.UTF16LE: CharsetInfo(strategy=Strategy.UTF16LE),
    Charset.UTF32BE: CharsetInfo(strategy=Strategy.UTF32BE),
    Charset.UTF32LE: CharsetInfo(strategy=Strategy.UTF32LE),
    Charset.BINARY: CharsetInfo(strategy=Strategy.BINARY),
}


def charset_strategy(charset: Charset) -> Strategy:
    """Return the strategy tag the codec engine dispatches on."""
    return CHARSET_INFO[Charset(charset)].strategy


def single_byte_table(charset: Charset) -> tuple[int, ...]:
    """Get the high (0x80-0xFF) table of a single-byte charset.

    Args:
        charset: A charset whose strategy is SINGLE_BYTE.

    Returns:
        128 codepoints, one per byte value 0x80-0xFF.

    Raises:
        ValueError: If the charset is not a single-byte table charset.
    """
    info = CHARSET_INFO[Charset(charset)]
    if info.strategy is not Strategy.SINGLE_BYTE or info.codec is None:
        raise ValueError(f"{Charset(charset).name} has no single-byte table")
    return get_high_table(info.codec)


def resolve_charset(value: Charset | str | int) -> Charset:
    """Resolve a Charset, charset name or ECI number to a Charset.

    Args:
        value: Charset member, name/alias string, or ECI number.

    Returns:
        Matching Charset.

    Raises:
        UnknownCharsetError: If the value does not resolve.
    """
    if isinstance(value, Charset):
        return value
    if isinstance(value, str):
        return name_to_charset(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return charset_from_eci(value)
    raise UnknownCharsetError(value)
