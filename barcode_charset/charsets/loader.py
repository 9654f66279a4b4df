"""Decode table loader.

Tables are derived once per process from the Python codec registry and
cached as read-only data. Construction is guarded by a lock so concurrent
first use builds each table exactly once; lookups after that are lock free.
"""

from __future__ import annotations

from array import array
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import chain
import logging
import threading
from typing import Any

from ..const import GB18030_BMP_POINTERS

_LOGGER = logging.getLogger(__name__)

_TABLE_CACHE: dict[str, Any] = {}
_TABLE_LOCK = threading.Lock()

# Value stored in double-byte tables for sequences without a mapping
UNMAPPED = 0


@dataclass(frozen=True)
class DoubleByteLayout:
    """Byte ranges of a double-byte character set and its source codec."""

    codec: str
    leads: tuple[range, ...]
    trails: tuple[range, ...]
    prefix: bytes = b""
    lead_bytes: frozenset[int] = field(init=False, repr=False, compare=False)
    trail_bytes: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lead_bytes", frozenset(chain.from_iterable(self.leads)))
        object.__setattr__(self, "trail_bytes", frozenset(chain.from_iterable(self.trails)))

    def is_lead(self, byte: int) -> bool:
        """Return True if byte can start a double-byte sequence."""
        return byte in self.lead_bytes

    def is_trail(self, byte: int) -> bool:
        """Return True if byte can complete a double-byte sequence."""
        return byte in self.trail_bytes


_EUC_ROWS = (range(0xA1, 0xFF),)

DOUBLE_BYTE_LAYOUTS: dict[str, DoubleByteLayout] = {
    "shift_jis": DoubleByteLayout(
        codec="shift_jis",
        leads=(range(0x81, 0xA0), range(0xE0, 0xFD)),
        trails=(range(0x40, 0x7F), range(0x80, 0xFD)),
    ),
    "big5": DoubleByteLayout(
        codec="big5",
        leads=(range(0xA1, 0xFA),),
        trails=(range(0x40, 0x7F), range(0xA1, 0xFF)),
    ),
    "gb2312": DoubleByteLayout(
        codec="gb2312",
        leads=(range(0xA1, 0xF8),),
        trails=_EUC_ROWS,
    ),
    "gb18030": DoubleByteLayout(
        codec="gb18030",
        leads=(range(0x81, 0xFF),),
        trails=(range(0x40, 0x7F), range(0x80, 0xFF)),
    ),
    # CP949 restricted to the EUC-KR ranges is KS X 1001:1998, Euro sign included
    "euc_kr": DoubleByteLayout(codec="cp949", leads=_EUC_ROWS, trails=_EUC_ROWS),
    "euc_jp": DoubleByteLayout(codec="euc_jp", leads=_EUC_ROWS, trails=_EUC_ROWS),
    # JIS X 0212, reached in EUC-JP through the SS3 (0x8F) prefix
    "jis_x0212": DoubleByteLayout(
        codec="euc_jp", leads=_EUC_ROWS, trails=_EUC_ROWS, prefix=b"\x8f"
    ),
}


def _cached(key: str, builder: Callable[[], Any]) -> Any:
    """Return the cached table for key, building it on first use."""
    table = _TABLE_CACHE.get(key)
    if table is None:
        with _TABLE_LOCK:
            table = _TABLE_CACHE.get(key)
            if table is None:
                table = builder()
                _TABLE_CACHE[key] = table
    return table


def _decode_one(data: bytes, codec: str) -> int | None:
    """Decode data with codec, returning its single BMP codepoint or None."""
    try:
        text = data.decode(codec)
    except UnicodeDecodeError:
        return None
    if len(text) != 1 or ord(text) > 0xFFFF:
        return None
    return ord(text)


def _build_high_table(codec: str) -> tuple[int, ...]:
    entries: list[int] = []
    unmapped = 0
    for byte in range(0x80, 0x100):
        codepoint = _decode_one(bytes((byte,)), codec)
        if codepoint is None:
            # Undefined slots pass the raw byte value straight through
            codepoint = byte
            unmapped += 1
        entries.append(codepoint)
    _LOGGER.debug("Built %s high table (%d unmapped slots)", codec, unmapped)
    return tuple(entries)


def _build_double_byte_table(layout: DoubleByteLayout) -> memoryview:
    table = array("H", bytes(2 * 0x10000))
    count = 0
    for lead in chain.from_iterable(layout.leads):
        for trail in chain.from_iterable(layout.trails):
            codepoint = _decode_one(layout.prefix + bytes((lead, trail)), layout.codec)
            if codepoint is None:
                continue
            table[lead << 8 | trail] = codepoint
            count += 1
    _LOGGER.debug(
        "Built %s double-byte table (%d entries, prefix %r)",
        layout.codec,
        count,
        layout.prefix,
    )
    return memoryview(table).toreadonly()


def gb18030_pointer_to_bytes(pointer: int) -> bytes:
    """Return the GB18030 four-byte sequence for a linear pointer."""
    pointer, b4 = divmod(pointer, 10)
    pointer, b3 = divmod(pointer, 126)
    b1, b2 = divmod(pointer, 10)
    return bytes((0x81 + b1, 0x30 + b2, 0x81 + b3, 0x30 + b4))


def _build_gb18030_four_byte_table() -> memoryview:
    table = array("H", bytes(2 * GB18030_BMP_POINTERS))
    count = 0
    for pointer in range(GB18030_BMP_POINTERS):
        codepoint = _decode_one(gb18030_pointer_to_bytes(pointer), "gb18030")
        if codepoint is None:
            continue
        table[pointer] = codepoint
        count += 1
    _LOGGER.debug("Built gb18030 four-byte table (%d entries)", count)
    return memoryview(table).toreadonly()


def get_high_table(codec: str) -> tuple[int, ...]:
    """Get the 0x80-0xFF table of a single-byte codec (cached).

    Args:
        codec: Python codec name (e.g., "iso8859_2", "cp437").

    Returns:
        128 codepoints, one per byte value 0x80-0xFF.
    """
    return _cached(f"high:{codec}", lambda: _build_high_table(codec))  # type: ignore[no-any-return]


def get_double_byte_table(key: str) -> memoryview:
    """Get a double-byte table indexed by lead * 256 + trail (cached).

    Args:
        key: Key into DOUBLE_BYTE_LAYOUTS.

    Returns:
        Read-only view of 65536 codepoints, UNMAPPED where no mapping exists.
    """
    layout = DOUBLE_BYTE_LAYOUTS[key]
    return _cached(f"double:{key}", lambda: _build_double_byte_table(layout))  # type: ignore[no-any-return]


def get_gb18030_four_byte_table() -> memoryview:
    """Get the GB18030 four-byte BMP table indexed by linear pointer (cached)."""
    return _cached("gb18030:four", _build_gb18030_four_byte_table)  # type: ignore[no-any-return]


def clear_table_cache() -> None:
    """Clear all cached tables.

    Useful for testing; tables are rebuilt on next use.
    """
    with _TABLE_LOCK:
        _TABLE_CACHE.clear()
