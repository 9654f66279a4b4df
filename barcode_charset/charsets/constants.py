"""Charset and decode strategy enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Charset(IntEnum):
    """Closed set of character sets a barcode payload can be tagged with.

    Member order is significant: it is the total ordering of charsets.
    ISO-8859-12 was never assigned and has no member.
    """

    ASCII = 0
    ISO8859_1 = auto()
    ISO8859_2 = auto()
    ISO8859_3 = auto()
    ISO8859_4 = auto()
    ISO8859_5 = auto()
    ISO8859_6 = auto()
    ISO8859_7 = auto()
    ISO8859_8 = auto()
    ISO8859_9 = auto()
    ISO8859_10 = auto()
    ISO8859_11 = auto()
    ISO8859_13 = auto()
    ISO8859_14 = auto()
    ISO8859_15 = auto()
    ISO8859_16 = auto()
    CP437 = auto()
    CP1250 = auto()
    CP1251 = auto()
    CP1252 = auto()
    CP1256 = auto()
    SHIFT_JIS = auto()
    BIG5 = auto()
    GB2312 = auto()
    GB18030 = auto()
    EUC_JP = auto()
    EUC_KR = auto()
    UTF16BE = auto()
    UTF8 = auto()
    UTF16LE = auto()
    UTF32BE = auto()
    UTF32LE = auto()
    BINARY = auto()


class Strategy(Enum):
    """Decode algorithm family a Charset is bound to."""

    SINGLE_BYTE = "single_byte"
    SHIFT_JIS = "shift_jis"
    BIG5 = "big5"
    GB2312 = "gb2312"
    GB18030 = "gb18030"
    EUC_KR = "euc_kr"
    EUC_JP = "euc_jp"
    UTF8 = "utf8"
    UTF16BE = "utf16be"
    UTF16LE = "utf16le"
    UTF32BE = "utf32be"
    UTF32LE = "utf32le"
    BINARY = "binary"

