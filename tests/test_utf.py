"""Tests for UTF-8/16/32 decoding and UTF-8 encoding."""

import pytest

from barcode_charset import (
    Charset,
    DecodeOptions,
    WideString,
    bytes_to_str,
    bytes_to_utf8,
    decode,
    encode_scalar_to_utf8,
    encode_utf8,
    wide_to_utf8,
)

REPLACEMENT = 0xFFFD
REPLACEMENT_UTF8 = b"\xef\xbf\xbd"


class TestEncodeScalar:
    """Tests for encode_scalar_to_utf8."""

    @pytest.mark.parametrize(
        ("codepoint", "expected"),
        [
            (0x00, b"\x00"),
            (0x7F, b"\x7f"),
            (0x80, b"\xc2\x80"),
            (0x7FF, b"\xdf\xbf"),
            (0x800, b"\xe0\xa0\x80"),
            (0xFFFF, b"\xef\xbf\xbf"),
            (0x10000, b"\xf0\x90\x80\x80"),
            (0x10FFFF, b"\xf4\x8f\xbf\xbf"),
        ],
    )
    def test_boundaries(self, codepoint: int, expected: bytes) -> None:
        assert encode_scalar_to_utf8(codepoint) == expected

    @pytest.mark.parametrize("codepoint", [0x41, 0xE9, 0x20AC, 0x30FB, 0x1F600])
    def test_matches_python(self, codepoint: int) -> None:
        assert encode_scalar_to_utf8(codepoint) == chr(codepoint).encode("utf-8")

    @pytest.mark.parametrize("codepoint", [-1, 0x110000, 0xFFFFFFFF])
    def test_out_of_range(self, codepoint: int) -> None:
        assert encode_scalar_to_utf8(codepoint) == REPLACEMENT_UTF8


class TestWideToUtf8:
    """Tests for wide_to_utf8."""

    def test_surrogate_pair(self) -> None:
        assert wide_to_utf8((0xD800, 0xDC00)) == b"\xf0\x90\x80\x80"

    def test_unpaired_high_surrogate(self) -> None:
        assert wide_to_utf8((0xD800, 0x41)) == REPLACEMENT_UTF8 + b"A"

    def test_trailing_high_surrogate(self) -> None:
        assert wide_to_utf8((0x41, 0xDBFF)) == b"A" + REPLACEMENT_UTF8

    def test_unpaired_low_surrogate(self) -> None:
        assert wide_to_utf8((0xDC00, 0x41)) == REPLACEMENT_UTF8 + b"A"

    def test_accepts_str(self) -> None:
        assert wide_to_utf8("aβ\U0001f600") == "aβ\U0001f600".encode("utf-8")

    def test_encode_utf8_alias(self) -> None:
        assert encode_utf8 is wide_to_utf8

    def test_empty(self) -> None:
        assert wide_to_utf8(WideString()) == b""


class TestWideString:
    """Tests for the WideString type."""

    def test_from_str_splits_supplementary(self) -> None:
        assert WideString.from_str("a\U00010000") == (0x61, 0xD800, 0xDC00)

    def test_str_recombines(self) -> None:
        assert str(WideString((0x61, 0xD83D, 0xDE00))) == "a\U0001f600"

    def test_len_counts_code_units(self) -> None:
        assert len(WideString.from_str("\U0010ffff")) == 2

    def test_codepoints(self) -> None:
        wide = WideString((0xD800, 0xDC00, 0xDC00))
        assert list(wide.codepoints()) == [0x10000, 0xDC00]

    def test_repr(self) -> None:
        assert repr(WideString.from_str("ab")) == "WideString('ab')"


class TestDecodeUtf8:
    """Tests for UTF-8 decoding."""

    def test_valid(self) -> None:
        text = "aé€\U0001f600"
        wide = decode(text.encode("utf-8"), Charset.UTF8)
        assert wide == WideString.from_str(text)

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\xc0\xaf", (0xC0, 0xAF)),  # overlong "/"
            (b"\xe0\x80\xaf", (0xE0, 0x80, 0xAF)),  # overlong "/"
            (b"\xed\xa0\x80", (0xED, 0xA0, 0x80)),  # encoded surrogate
            (b"\xf4\x90\x80\x80", (0xF4, 0x90, 0x80, 0x80)),  # above U+10FFFF
            (b"\xe2\x82", (0xE2, 0x82)),  # truncated
            (b"\x80A", (0x80, 0x41)),  # stray continuation
            (b"\xc3A", (0xC3, 0x41)),  # missing continuation
            (b"\xff", (0xFF,)),
        ],
    )
    def test_malformed_bytes_pass_through(self, data: bytes, expected: tuple[int, ...]) -> None:
        assert decode(data, Charset.UTF8) == expected

    def test_malformed_output_is_valid_utf8(self) -> None:
        assert bytes_to_utf8(b"\xc0\xafA", Charset.UTF8).decode("utf-8") == "À¯A"


class TestDecodeUtf16:
    """Tests for UTF-16 decoding."""

    def test_be_units(self) -> None:
        data = b"\x00\x01\x00\x7f\x00\x80\x00\xff\x01\xff\x10\xff\xff\xfd"
        wide = decode(data, Charset.UTF16BE)
        assert str(wide) == "\u0001\u007f\u0080ÿǿჿ\ufffd"
        assert wide_to_utf8(wide) == "\u0001\u007f\u0080ÿǿჿ\ufffd".encode("utf-8")

    def test_be_surrogate_pair(self) -> None:
        wide = decode(b"\xd8\x00\xdc\x00", Charset.UTF16BE)
        assert wide == (0xD800, 0xDC00)
        assert str(wide) == "\U00010000"
        assert wide_to_utf8(wide) == b"\xf0\x90\x80\x80"

    def test_le_surrogate_pair(self) -> None:
        assert decode(b"\x3d\xd8\x00\xde", Charset.UTF16LE) == (0xD83D, 0xDE00)

    def test_le_text(self) -> None:
        text = "Größe ☃"
        assert bytes_to_str(text.encode("utf-16-le"), Charset.UTF16LE) == text

    def test_unpaired_surrogate(self) -> None:
        assert decode(b"\xd8\x00\x00\x41", Charset.UTF16BE) == (REPLACEMENT, 0x41)
        assert decode(b"\xdc\x00", Charset.UTF16BE) == (REPLACEMENT,)

    def test_odd_trailing_byte(self) -> None:
        assert decode(b"\x00\x41\x00", Charset.UTF16BE) == (0x41, REPLACEMENT)

    def test_byte_order_mark_is_kept(self) -> None:
        assert decode(b"\xfe\xff\x00\x41", Charset.UTF16BE) == (0xFEFF, 0x41)


class TestDecodeUtf32:
    """Tests for UTF-32 decoding."""

    def test_be_supplementary(self) -> None:
        assert decode(b"\x00\x01\xf6\x00", Charset.UTF32BE) == (0xD83D, 0xDE00)

    def test_le_text(self) -> None:
        text = "aβ\U0001f600"
        assert bytes_to_str(text.encode("utf-32-le"), Charset.UTF32LE) == text

    @pytest.mark.parametrize(
        "data",
        [b"\x00\x11\x00\x00", b"\x00\x00\xd8\x00", b"\xff\xff\xff\xff"],
    )
    def test_invalid_scalar(self, data: bytes) -> None:
        assert decode(data, Charset.UTF32BE) == (REPLACEMENT,)

    def test_partial_unit(self) -> None:
        assert decode(b"\x41\x00\x00\x00\x42", Charset.UTF32LE) == (0x41, REPLACEMENT)

    def test_supplementary_replacement(self) -> None:
        options = DecodeOptions(replacement=0x1F4A9)
        assert decode(b"\x00\x11\x00\x00", Charset.UTF32BE, options) == (0xD83D, 0xDCA9)
