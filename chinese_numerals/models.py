"""
Pydantic models for annotated scanner output.

A scan splits the source text into segments. Rendering every segment in
order reproduces the converted string exactly, so callers can use either
the plain string or the annotated view.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_serializer

Number = Union[int, float]

# str(int) refuses results over sys.get_int_max_str_digits() (4300 by default);
# 13000 bits is under 4000 decimal digits.
_STR_SAFE_BITS = 13_000


def format_number(value: Number) -> str:
    """str(value), also for ints too long for str() to render in one go."""
    if not isinstance(value, int) or value.bit_length() <= _STR_SAFE_BITS:
        return str(value)
    if value < 0:
        return "-" + format_number(-value)
    low_digits = int(value.bit_length() * 0.30103) // 2
    high, low = divmod(value, 10 ** low_digits)
    return format_number(high) + format_number(low).rjust(low_digits, "0")


def json_number(value: Optional[Number]) -> Optional[Union[Number, str]]:
    """JSON-safe value: ints too long for str() become decimal strings."""
    if isinstance(value, int) and value.bit_length() > _STR_SAFE_BITS:
        return format_number(value)
    return value


# ─── Segment Kinds ──────────────────────────────────────────────────


class SegmentKind(str, Enum):
    """What a piece of scanned text turned out to be."""

    NUMERAL = "numeral"  # Parsed run, rendered as its Arabic value
    LITERAL = "literal"  # Ordinary text, passed through
    SEPARATOR = "separator"  # Run of only commas/whitespace, passed through


# ─── Segment ────────────────────────────────────────────────────────


class Segment(BaseModel):
    """One slice of the source text and how it is rendered."""

    kind: SegmentKind
    text: str  # Slice of the source, start:end
    start: int
    end: int
    value: Optional[Number] = None  # Only set for NUMERAL segments
    boundary_before: bool = False  # A space was inserted ahead of this run

    def render(self) -> str:
        rendered = format_number(self.value) if self.kind is SegmentKind.NUMERAL else self.text
        return f" {rendered}" if self.boundary_before else rendered

    @field_serializer("value", when_used="json")
    def _serialize_value(self, value: Optional[Number]):
        return json_number(value)


# ─── Conversion Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Source text, its converted form, and the segments in between."""

    source: str
    converted: str
    segments: list[Segment] = Field(default_factory=list)
    numerals: list[Number] = Field(default_factory=list)

    @field_serializer("numerals", when_used="json")
    def _serialize_numerals(self, numerals: list[Number]):
        return [json_number(n) for n in numerals]
