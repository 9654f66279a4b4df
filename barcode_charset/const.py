"""Constants for the barcode charset codec."""

from __future__ import annotations

# Configuration keys
CONF_CHARSET = "charset"
CONF_SJIS_ASCII = "sjis_ascii"
CONF_REPLACEMENT = "replacement"

# Default values
DEFAULT_CHARSET_NAME = "ISO8859_1"  # ECI 3, the barcode default interpretation
DEFAULT_SJIS_ASCII = True
REPLACEMENT_CHAR = 0xFFFD

# Unicode limits
MAX_CODEPOINT = 0x10FFFF
HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

# Shift_JIS / JIS X 0201 glyphs at the two ASCII positions it redefines
JIS_X0201_YEN = 0x00A5
JIS_X0201_OVERLINE = 0x203E

# Half-width katakana block shared by Shift_JIS (single byte) and EUC-JP (SS2)
KATAKANA_FIRST_BYTE = 0xA1
KATAKANA_LAST_BYTE = 0xDF
KATAKANA_BASE = 0xFF61

# EUC-JP single shifts
EUC_JP_SS2 = 0x8E
EUC_JP_SS3 = 0x8F

# GB18030 four-byte form
GB18030_BMP_POINTERS = 39420
GB18030_SUPPLEMENTARY_FIRST_POINTER = 189000
GB18030_SUPPLEMENTARY_LAST_POINTER = 1237575
