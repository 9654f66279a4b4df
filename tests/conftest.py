from collections.abc import Callable

import pytest

from barcode_charset import Charset, DecodeOptions, Strategy, charset_strategy


def encode_ascii_range(charset: Charset) -> bytes:
    """Return bytes 0x00-0x7F in the code unit form the charset expects."""
    strategy = charset_strategy(charset)
    if strategy is Strategy.UTF16BE:
        return b"".join(i.to_bytes(2, "big") for i in range(0x80))
    if strategy is Strategy.UTF16LE:
        return b"".join(i.to_bytes(2, "little") for i in range(0x80))
    if strategy is Strategy.UTF32BE:
        return b"".join(i.to_bytes(4, "big") for i in range(0x80))
    if strategy is Strategy.UTF32LE:
        return b"".join(i.to_bytes(4, "little") for i in range(0x80))
    return bytes(range(0x80))


@pytest.fixture
def ascii_range() -> Callable[[Charset], bytes]:
    return encode_ascii_range


@pytest.fixture
def jis_options() -> DecodeOptions:
    """Options restoring the JIS X 0201 Yen sign and overline."""
    return DecodeOptions(sjis_ascii=False)
