"""Extended Channel Interpretation (ECI) number mapping."""

from __future__ import annotations

import logging

from ..exceptions import UnknownCharsetError
from .constants import Charset

_LOGGER = logging.getLogger(__name__)

# AIM ECI assignments. Several numbers share a charset; ECI 14 (ISO-8859-12)
# and 19 are unassigned.
ECI_TO_CHARSET: dict[int, Charset] = {
    0: Charset.CP437,
    1: Charset.ISO8859_1,
    2: Charset.CP437,
    3: Charset.ISO8859_1,
    4: Charset.ISO8859_2,
    5: Charset.ISO8859_3,
    6: Charset.ISO8859_4,
    7: Charset.ISO8859_5,
    8: Charset.ISO8859_6,
    9: Charset.ISO8859_7,
    10: Charset.ISO8859_8,
    11: Charset.ISO8859_9,
    12: Charset.ISO8859_10,
    13: Charset.ISO8859_11,
    15: Charset.ISO8859_13,
    16: Charset.ISO8859_14,
    17: Charset.ISO8859_15,
    18: Charset.ISO8859_16,
    20: Charset.SHIFT_JIS,
    21: Charset.CP1250,
    22: Charset.CP1251,
    23: Charset.CP1252,
    24: Charset.CP1256,
    25: Charset.UTF16BE,
    26: Charset.UTF8,
    27: Charset.ASCII,
    28: Charset.BIG5,
    29: Charset.GB2312,
    30: Charset.EUC_KR,
    31: Charset.GB18030,  # GBK
    32: Charset.GB18030,
    33: Charset.UTF16LE,
    34: Charset.UTF32BE,
    35: Charset.UTF32LE,
    170: Charset.ASCII,  # ISO 646 invariant
    899: Charset.BINARY,
}

# Numbers that are not the canonical ECI of their charset
_NON_CANONICAL_ECIS = frozenset({0, 1, 31, 170})

CHARSET_TO_ECI: dict[Charset, int] = {
    charset: eci
    for eci, charset in ECI_TO_CHARSET.items()
    if eci not in _NON_CANONICAL_ECIS
}


def charset_from_eci(eci: int) -> Charset:
    """Resolve an ECI number to a Charset.

    Args:
        eci: ECI designator value.

    Returns:
        Charset assigned to that ECI.

    Raises:
        UnknownCharsetError: If the number has no charset assignment.
    """
    charset = ECI_TO_CHARSET.get(eci)
    if charset is None:
        _LOGGER.debug("Unknown ECI %s", eci)
        raise UnknownCharsetError(eci)
    return charset


def charset_to_eci(charset: Charset) -> int | None:
    """Return the canonical ECI of a charset, or None if it has none (EUC-JP)."""
    return CHARSET_TO_ECI.get(Charset(charset))
