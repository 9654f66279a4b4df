"""Charset decoding: byte buffer plus charset to wide string.

Decoding is dispatched on the charset's strategy tag to one decoder
function per strategy. Every decoder is total over its byte input:
malformed sequences are substituted, never rejected. The only error is an
unresolvable charset, raised before any byte is processed.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from ..charsets import Charset, Strategy, charset_strategy, resolve_charset, single_byte_table
from ..config import DecodeOptions, TextConfig
from .multibyte import (
    decode_big5,
    decode_euc_jp,
    decode_euc_kr,
    decode_gb2312,
    decode_gb18030,
    decode_shift_jis,
)
from .utf import (
    decode_utf8,
    decode_utf16be,
    decode_utf16le,
    decode_utf32be,
    decode_utf32le,
    wide_to_utf8,
)
from .wide import WideString

_LOGGER = logging.getLogger(__name__)

_DEFAULT_OPTIONS = DecodeOptions()

Decoder = Callable[[bytes, list[int], DecodeOptions], int]


def decode_binary(data: bytes, units: list[int], options: DecodeOptions) -> int:
    """Pass every byte through as the code unit of equal value."""
    units.extend(data)
    return 0


def _decode_single_byte(data: bytes, units: list[int], high: tuple[int, ...]) -> int:
    units.extend(byte if byte < 0x80 else high[byte - 0x80] for byte in data)
    return 0


_DECODERS: dict[Strategy, Decoder] = {
    Strategy.BINARY: decode_binary,
    Strategy.SHIFT_JIS: decode_shift_jis,
    Strategy.BIG5: decode_big5,
    Strategy.GB2312: decode_gb2312,
    Strategy.GB18030: decode_gb18030,
    Strategy.EUC_KR: decode_euc_kr,
    Strategy.EUC_JP: decode_euc_jp,
    Strategy.UTF8: decode_utf8,
    Strategy.UTF16BE: decode_utf16be,
    Strategy.UTF16LE: decode_utf16le,
    Strategy.UTF32BE: decode_utf32be,
    Strategy.UTF32LE: decode_utf32le,
}


def decode(
    data: bytes | bytearray | memoryview,
    charset: Charset | str | int,
    options: DecodeOptions | None = None,
) -> WideString:
    """Decode a complete byte buffer into a wide string.

    Args:
        data: Bytes to decode.
        charset: Charset, charset name, or ECI number.
        options: Decoder options; defaults pin Shift_JIS 0x5C/0x7E to ASCII
            and substitute U+FFFD for invalid multi-byte sequences.

    Returns:
        UTF-16 code units of the decoded text.

    Raises:
        UnknownCharsetError: If charset does not resolve.
    """
    charset = resolve_charset(charset)
    options = options or _DEFAULT_OPTIONS
    data = bytes(data)
    units: list[int] = []

    strategy = charset_strategy(charset)
    if strategy is Strategy.SINGLE_BYTE:
        substituted = _decode_single_byte(data, units, single_byte_table(charset))
    else:
        substituted = _DECODERS[strategy](data, units, options)

    if substituted:
        _LOGGER.debug(
            "Substituted %d malformed sequence(s) decoding %d bytes as %s",
            substituted,
            len(data),
            charset.name,
        )
    return WideString(units)


def decode_text(data: bytes | bytearray | memoryview, config: TextConfig) -> WideString:
    """Decode a byte buffer using the charset and options of a config."""
    return decode(data, config.charset, config.options)


def bytes_to_utf8(
    data: bytes | bytearray | memoryview,
    charset: Charset | str | int,
    options: DecodeOptions | None = None,
) -> bytes:
    """Decode a byte buffer and re-encode the text as UTF-8."""
    return wide_to_utf8(decode(data, charset, options))


def bytes_to_str(
    data: bytes | bytearray | memoryview,
    charset: Charset | str | int,
    options: DecodeOptions | None = None,
) -> str:
    """Decode a byte buffer into a Python string."""
    return str(decode(data, charset, options))
