"""Multi-charset text codec for barcode payloads.

This package converts byte payloads tagged with a legacy or Unicode
character set into wide strings (UTF-16 code units) and wide strings into
UTF-8.

Error Policy:
-------------
Decoding and encoding are total: malformed byte sequences are substituted
(see the codec modules for the per-strategy rules), never rejected. The
only error raised is UnknownCharsetError, when a charset name or ECI
number does not resolve. It is never replaced by a default charset.
"""

from __future__ import annotations

from .charsets import (
    Charset,
    Strategy,
    charset_from_eci,
    charset_from_name,
    charset_strategy,
    charset_to_eci,
    charset_to_name,
    name_to_charset,
    resolve_charset,
    single_byte_table,
)
from .codec import (
    WideString,
    bytes_to_str,
    bytes_to_utf8,
    decode,
    decode_text,
    encode_scalar_to_utf8,
    encode_utf8,
    wide_to_utf8,
)
from .config import CONFIG_SCHEMA, DecodeOptions, TextConfig, config_from_dict
from .exceptions import UnknownCharsetError

__all__ = [
    "CONFIG_SCHEMA",
    "Charset",
    "DecodeOptions",
    "Strategy",
    "TextConfig",
    "UnknownCharsetError",
    "WideString",
    "bytes_to_str",
    "bytes_to_utf8",
    "charset_from_eci",
    "charset_from_name",
    "charset_strategy",
    "charset_to_eci",
    "charset_to_name",
    "config_from_dict",
    "decode",
    "decode_text",
    "encode_scalar_to_utf8",
    "encode_utf8",
    "name_to_charset",
    "resolve_charset",
    "single_byte_table",
    "wide_to_utf8",
]
