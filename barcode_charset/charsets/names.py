"""Charset name mapping.

This module provides the CHARSET_NAMES and CHARSET_ALIASES dictionaries and
the lookup functions converting between charset names and Charset values.
"""

from __future__ import annotations

import logging

from ..exceptions import UnknownCharsetError
from .constants import Charset

_LOGGER = logging.getLogger(__name__)

# Canonical name of every registered charset
CHARSET_NAMES: dict[Charset, str] = {
    Charset.ASCII: "ASCII",
    Charset.ISO8859_1: "ISO8859_1",
    Charset.ISO8859_2: "ISO8859_2",
    Charset.ISO8859_3: "ISO8859_3",
    Charset.ISO8859_4: "ISO8859_4",
    Charset.ISO8859_5: "ISO8859_5",
    Charset.ISO8859_6: "ISO8859_6",
    Charset.ISO8859_7: "ISO8859_7",
    Charset.ISO8859_8: "ISO8859_8",
    Charset.ISO8859_9: "ISO8859_9",
    Charset.ISO8859_10: "ISO8859_10",
    Charset.ISO8859_11: "ISO8859_11",
    Charset.ISO8859_13: "ISO8859_13",
    Charset.ISO8859_14: "ISO8859_14",
    Charset.ISO8859_15: "ISO8859_15",
    Charset.ISO8859_16: "ISO8859_16",
    Charset.CP437: "Cp437",
    Charset.CP1250: "Cp1250",
    Charset.CP1251: "Cp1251",
    Charset.CP1252: "Cp1252",
    Charset.CP1256: "Cp1256",
    Charset.SHIFT_JIS: "Shift_JIS",
    Charset.BIG5: "Big5",
    Charset.GB2312: "GB2312",
    Charset.GB18030: "GB18030",
    Charset.EUC_JP: "EUC_JP",
    Charset.EUC_KR: "EUC_KR",
    Charset.UTF16BE: "UTF16BE",
    Charset.UTF8: "UTF8",
    Charset.UTF16LE: "UTF16LE",
    Charset.UTF32BE: "UTF32BE",
    Charset.UTF32LE: "UTF32LE",
    Charset.BINARY: "BINARY",
}

# Additional names accepted on lookup (matched like canonical names)
CHARSET_ALIASES: dict[str, Charset] = {
    "US-ASCII": Charset.ASCII,
    "ISO646-US": Charset.ASCII,
    "latin1": Charset.ISO8859_1,
    "IBM437": Charset.CP437,
    "windows-1250": Charset.CP1250,
    "windows-1251": Charset.CP1251,
    "windows-1252": Charset.CP1252,
    "windows-1256": Charset.CP1256,
    "SJIS": Charset.SHIFT_JIS,
    "EUC-CN": Charset.GB2312,
    "GBK": Charset.GB18030,
    "UnicodeBig": Charset.UTF16BE,
    "UnicodeBigUnmarked": Charset.UTF16BE,
    "UTF-16": Charset.UTF16BE,
    "UnicodeLittleUnmarked": Charset.UTF16LE,
    "UTF-32": Charset.UTF32BE,
}


def normalize_name(name: str) -> str:
    """Normalize a charset name for comparison.

    Case, dashes, underscores and surrounding whitespace are ignored, so
    "ISO-8859-1", "iso8859_1" and "ISO8859_1" all compare equal.

    Args:
        name: Charset name as supplied by the caller.

    Returns:
        Normalized lookup key.
    """
    return name.strip().replace("-", "").replace("_", "").lower()


_NAME_LOOKUP: dict[str, Charset] = {
    **{normalize_name(name): charset for charset, name in CHARSET_NAMES.items()},
    **{normalize_name(alias): charset for alias, charset in CHARSET_ALIASES.items()},
}


def name_to_charset(name: str) -> Charset:
    """Resolve a canonical or alias charset name.

    Args:
        name: Charset name (e.g., "Shift_JIS", "sjis", "ISO-8859-1").

    Returns:
        Matching Charset.

    Raises:
        UnknownCharsetError: If the name matches no registered charset.
    """
    charset = _NAME_LOOKUP.get(normalize_name(name)) if isinstance(name, str) else None
    if charset is None:
        _LOGGER.debug("Unknown charset name '%s'", name)
        raise UnknownCharsetError(name)
    return charset


def charset_to_name(charset: Charset) -> str:
    """Return the canonical name of a charset."""
    return CHARSET_NAMES[Charset(charset)]


# Boundary spelling used by callers of the codec
charset_from_name = name_to_charset
