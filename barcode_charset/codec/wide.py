"""Wide string: the UTF-16 code unit form every charset decodes into."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..const import (
    HIGH_SURROGATE_END,
    HIGH_SURROGATE_START,
    LOW_SURROGATE_END,
    LOW_SURROGATE_START,
)


def is_high_surrogate(unit: int) -> bool:
    """Return True for a UTF-16 high (leading) surrogate."""
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    """Return True for a UTF-16 low (trailing) surrogate."""
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def append_codepoint(units: list[int], codepoint: int) -> None:
    """Append a codepoint to a code unit list, as a surrogate pair above U+FFFF."""
    if codepoint > 0xFFFF:
        codepoint -= 0x10000
        units.append(HIGH_SURROGATE_START | (codepoint >> 10))
        units.append(LOW_SURROGATE_START | (codepoint & 0x3FF))
    else:
        units.append(codepoint)


def iter_codepoints(units: Iterable[int]) -> Iterator[int]:
    """Iterate the codepoints of a code unit sequence.

    Surrogate pairs are recombined. Unpaired surrogates are yielded as-is;
    consumers decide how to render them.
    """
    pending: int | None = None
    for unit in units:
        if pending is not None:
            if is_low_surrogate(unit):
                yield 0x10000 + ((pending - HIGH_SURROGATE_START) << 10) + (
                    unit - LOW_SURROGATE_START
                )
                pending = None
                continue
            yield pending
            pending = None
        if is_high_surrogate(unit):
            pending = unit
        else:
            yield unit
    if pending is not None:
        yield pending


class WideString(tuple):  # type: ignore[type-arg]
    """Immutable sequence of UTF-16 code units.

    Codepoints above U+FFFF occupy two units (a surrogate pair), so len()
    counts code units, not characters.
    """

    __slots__ = ()

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int]) -> WideString:
        """Build a wide string from Unicode scalar values."""
        units: list[int] = []
        for codepoint in codepoints:
            append_codepoint(units, codepoint)
        return cls(units)

    @classmethod
    def from_str(cls, text: str) -> WideString:
        """Build a wide string from a Python string."""
        return cls.from_codepoints(ord(char) for char in text)

    def codepoints(self) -> Iterator[int]:
        """Iterate codepoints, recombining surrogate pairs."""
        return iter_codepoints(self)

    def __str__(self) -> str:
        return "".join(chr(codepoint) for codepoint in self.codepoints())

    def __repr__(self) -> str:
        return f"WideString({str(self)!r})"
