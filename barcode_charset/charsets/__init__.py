"""Charset registry for the barcode charset codec.

This module provides the closed set of charsets a barcode payload may be
tagged with, lookups between charsets and their names or ECI numbers, and
the strategy tag and decode tables the codec engine dispatches on.
"""

from __future__ import annotations

from .constants import Charset, Strategy
from .eci import CHARSET_TO_ECI, ECI_TO_CHARSET, charset_from_eci, charset_to_eci
from .loader import clear_table_cache
from .names import (
    CHARSET_ALIASES,
    CHARSET_NAMES,
    charset_from_name,
    charset_to_name,
    name_to_charset,
)
from .registry import CHARSET_INFO, charset_strategy, resolve_charset, single_byte_table

__all__ = [
    "CHARSET_ALIASES",
    "CHARSET_INFO",
    "CHARSET_NAMES",
    "CHARSET_TO_ECI",
    "ECI_TO_CHARSET",
    "Charset",
    "Strategy",
    "charset_from_eci",
    "charset_from_name",
    "charset_strategy",
    "charset_to_eci",
    "charset_to_name",
    "clear_table_cache",
    "name_to_charset",
    "resolve_charset",
    "single_byte_table",
]
