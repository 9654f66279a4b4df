"""Tests for charset name and ECI lookups."""

import pytest

from barcode_charset import (
    Charset,
    UnknownCharsetError,
    charset_from_eci,
    charset_from_name,
    charset_to_eci,
    charset_to_name,
    name_to_charset,
    resolve_charset,
)
from barcode_charset.charsets import CHARSET_NAMES


class TestNameToCharset:
    """Tests for name_to_charset."""

    @pytest.mark.parametrize("charset", list(Charset))
    def test_round_trip(self, charset: Charset) -> None:
        assert charset_from_name(charset_to_name(charset)) is charset

    def test_every_charset_has_a_name(self) -> None:
        assert set(CHARSET_NAMES) == set(Charset)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("BINARY", Charset.BINARY),
            ("ASCII", Charset.ASCII),
            ("US-ASCII", Charset.ASCII),
            ("ISO8859_1", Charset.ISO8859_1),
            ("ISO-8859-1", Charset.ISO8859_1),
            ("iso88591", Charset.ISO8859_1),
            ("ISO8859_11", Charset.ISO8859_11),
            ("ISO-8859-16", Charset.ISO8859_16),
            ("Shift_JIS", Charset.SHIFT_JIS),
            ("SJIS", Charset.SHIFT_JIS),
            ("shift-jis", Charset.SHIFT_JIS),
            ("Big5", Charset.BIG5),
            ("GB2312", Charset.GB2312),
            ("EUC-CN", Charset.GB2312),
            ("GB18030", Charset.GB18030),
            ("GBK", Charset.GB18030),
            ("EUC_KR", Charset.EUC_KR),
            ("EUC-JP", Charset.EUC_JP),
            ("UTF8", Charset.UTF8),
            ("utf-8", Charset.UTF8),
            ("UTF16BE", Charset.UTF16BE),
            ("UnicodeBigUnmarked", Charset.UTF16BE),
            ("UTF16LE", Charset.UTF16LE),
            ("UTF32BE", Charset.UTF32BE),
            ("UTF32LE", Charset.UTF32LE),
            ("windows-1252", Charset.CP1252),
            ("IBM437", Charset.CP437),
            ("  Cp437 ", Charset.CP437),
        ],
    )
    def test_accepted_names(self, name: str, expected: Charset) -> None:
        assert name_to_charset(name) is expected

    @pytest.mark.parametrize("name", ["ISO8859_12", "EBCDIC", "", "UTF7"])
    def test_unknown_name_raises(self, name: str) -> None:
        with pytest.raises(UnknownCharsetError) as excinfo:
            name_to_charset(name)
        assert excinfo.value.value == name

    def test_unknown_charset_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            name_to_charset("klingon")

    def test_non_string_raises(self) -> None:
        with pytest.raises(UnknownCharsetError):
            name_to_charset(None)  # type: ignore[arg-type]

    def test_charsets_are_ordered(self) -> None:
        assert Charset.ASCII < Charset.ISO8859_1 < Charset.SHIFT_JIS < Charset.BINARY
        assert sorted(Charset) == list(Charset)


class TestEci:
    """Tests for ECI number lookups."""

    @pytest.mark.parametrize(
        "charset", [c for c in Charset if c is not Charset.EUC_JP]
    )
    def test_round_trip(self, charset: Charset) -> None:
        eci = charset_to_eci(charset)
        assert eci is not None
        assert charset_from_eci(eci) is charset

    def test_euc_jp_has_no_eci(self) -> None:
        assert charset_to_eci(Charset.EUC_JP) is None

    @pytest.mark.parametrize(
        ("eci", "expected"),
        [
            (0, Charset.CP437),
            (1, Charset.ISO8859_1),
            (3, Charset.ISO8859_1),
            (13, Charset.ISO8859_11),
            (15, Charset.ISO8859_13),
            (20, Charset.SHIFT_JIS),
            (26, Charset.UTF8),
            (31, Charset.GB18030),
            (170, Charset.ASCII),
            (899, Charset.BINARY),
        ],
    )
    def test_assignments(self, eci: int, expected: Charset) -> None:
        assert charset_from_eci(eci) is expected

    def test_canonical_numbers(self) -> None:
        assert charset_to_eci(Charset.CP437) == 2
        assert charset_to_eci(Charset.ISO8859_1) == 3
        assert charset_to_eci(Charset.ASCII) == 27
        assert charset_to_eci(Charset.GB18030) == 32

    @pytest.mark.parametrize("eci", [14, 19, 36, -1, 900])
    def test_unassigned_raises(self, eci: int) -> None:
        with pytest.raises(UnknownCharsetError):
            charset_from_eci(eci)


class TestResolveCharset:
    """Tests for resolve_charset."""

    def test_charset_passthrough(self) -> None:
        assert resolve_charset(Charset.BIG5) is Charset.BIG5

    def test_name(self) -> None:
        assert resolve_charset("sjis") is Charset.SHIFT_JIS

    def test_eci_number(self) -> None:
        assert resolve_charset(28) is Charset.BIG5

    def test_bool_is_not_an_eci(self) -> None:
        with pytest.raises(UnknownCharsetError):
            resolve_charset(True)  # type: ignore[arg-type]

    def test_unsupported_type(self) -> None:
        with pytest.raises(UnknownCharsetError):
            resolve_charset(3.0)  # type: ignore[arg-type]
