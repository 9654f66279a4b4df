"""Decoder configuration dataclasses and validation schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import voluptuous as vol

from .charsets import Charset, resolve_charset
from .const import (
    CONF_CHARSET,
    CONF_REPLACEMENT,
    CONF_SJIS_ASCII,
    DEFAULT_CHARSET_NAME,
    DEFAULT_SJIS_ASCII,
    HIGH_SURROGATE_START,
    LOW_SURROGATE_END,
    MAX_CODEPOINT,
    REPLACEMENT_CHAR,
)
from .exceptions import UnknownCharsetError

DEFAULT_CHARSET = resolve_charset(DEFAULT_CHARSET_NAME)


@dataclass(frozen=True)
class DecodeOptions:
    """Tunable behaviour of the codec engine."""

    # Map Shift_JIS 0x5C/0x7E to ASCII backslash/tilde instead of Yen/overline
    sjis_ascii: bool = DEFAULT_SJIS_ASCII
    # Emitted for invalid multi-byte, UTF-16 and UTF-32 input
    replacement: int = REPLACEMENT_CHAR

    def __post_init__(self) -> None:
        """Reject replacements that are not Unicode scalar values."""
        if not 0 <= self.replacement <= MAX_CODEPOINT:
            raise ValueError(
                f"replacement {self.replacement:#x} is outside 0..{MAX_CODEPOINT:#x}"
            )
        if HIGH_SURROGATE_START <= self.replacement <= LOW_SURROGATE_END:
            raise ValueError(
                f"replacement U+{self.replacement:04X} is a surrogate, not a scalar value"
            )


@dataclass(frozen=True)
class TextConfig:
    """Charset plus decode options for a payload."""

    charset: Charset = DEFAULT_CHARSET
    options: DecodeOptions = field(default_factory=DecodeOptions)


def charset_value(value: Any) -> Charset:
    """Validate and coerce a charset name or ECI number."""
    try:
        return resolve_charset(value)
    except UnknownCharsetError as err:
        raise vol.Invalid(str(err)) from err


def scalar_value(value: int) -> int:
    """Reject surrogate codepoints, which cannot stand alone in text."""
    if HIGH_SURROGATE_START <= value <= LOW_SURROGATE_END:
        raise vol.Invalid(f"U+{value:04X} is a surrogate, not a scalar value")
    return value


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_CHARSET, default=DEFAULT_CHARSET): charset_value,
        vol.Optional(CONF_SJIS_ASCII, default=DEFAULT_SJIS_ASCII): vol.Boolean(),
        vol.Optional(CONF_REPLACEMENT, default=REPLACEMENT_CHAR): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=MAX_CODEPOINT), scalar_value
        ),
    }
)


def config_from_dict(data: Mapping[str, Any] | None = None) -> TextConfig:
    """Build a TextConfig from a configuration mapping.

    Args:
        data: Mapping with optional "charset", "sjis_ascii" and "replacement" keys.

    Returns:
        Validated configuration.

    Raises:
        vol.Invalid: If a value is invalid or an unknown key is present.
    """
    validated = CONFIG_SCHEMA(dict(data or {}))
    return TextConfig(
        charset=validated[CONF_CHARSET],
        options=DecodeOptions(
            sjis_ascii=validated[CONF_SJIS_ASCII],
            replacement=validated[CONF_REPLACEMENT],
        ),
    )
