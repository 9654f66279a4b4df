"""Codec engine: charset decoding to wide strings and UTF-8 encoding."""

from __future__ import annotations

from .decoding import bytes_to_str, bytes_to_utf8, decode, decode_text
from .utf import encode_scalar_to_utf8, encode_utf8, wide_to_utf8
from .wide import WideString

__all__ = [
    "WideString",
    "bytes_to_str",
    "bytes_to_utf8",
    "decode",
    "decode_text",
    "encode_scalar_to_utf8",
    "encode_utf8",
    "wide_to_utf8",
]
