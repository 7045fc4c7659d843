"""
Find numerals in free text and replace them with Arabic numbers.

    to_arabic_string("價格1000萬800呎")  → "價格10000000 800呎"
    to_arabic_string("共6,000人")        → "共6000人"

A numeral run is a maximal stretch of digits, numeral ideographs, commas
and whitespace. Each run is parsed as one number. One exception: when
Arabic digits (or a separator) directly follow Chinese numerals, the run is
cut there and a space is inserted, so "1000萬800" reads as two quantities
instead of one.

A run made only of commas/whitespace is not a number and is kept verbatim.
Consecutive ordinary characters form one literal segment.
"""

from __future__ import annotations

import logging

from .models import ConversionResult, Segment, SegmentKind
from .parser import NumeralParser
from .symbols import is_chinese_numeral, is_numeral_or_separator, strip_separators

logger = logging.getLogger(__name__)


class _RunBuffer:
    """Accumulates the numeral run currently being read."""

    def __init__(self) -> None:
        self.start = 0
        self.chars: list[str] = []

    def push(self, index: int, character: str) -> None:
        if not self.chars:
            self.start = index
        self.chars.append(character)

    def __bool__(self) -> bool:
        return bool(self.chars)

    def flush(self, boundary_before: bool = False) -> Segment:
        text = "".join(self.chars)
        self.chars = []
        segment = Segment(
            kind=SegmentKind.NUMERAL,
            text=text,
            start=self.start,
            end=self.start + len(text),
            boundary_before=boundary_before,
        )
        if not strip_separators(text):
            segment.kind = SegmentKind.SEPARATOR
        else:
            segment.value = NumeralParser(text).parse()
        return segment


def _literal(text: str, start: int, end: int) -> Segment:
    return Segment(kind=SegmentKind.LITERAL, text=text[start:end], start=start, end=end)


def scan(text: str) -> list[Segment]:
    """Split `text` into numeral, separator and literal segments."""
    segments: list[Segment] = []
    buffer = _RunBuffer()
    prev_was_numeral_or_separator = False
    prev_was_chinese_numeral = False
    # Set when the run in the buffer was opened at a Chinese/Arabic boundary
    boundary_pending = False
    literal_start: int | None = None

    for index, character in enumerate(text):
        if is_numeral_or_separator(character):
            if literal_start is not None:
                segments.append(_literal(text, literal_start, index))
                literal_start = None
            current_is_chinese = is_chinese_numeral(character)
            if prev_was_chinese_numeral and not current_is_chinese:
                segments.append(buffer.flush(boundary_before=boundary_pending))
                boundary_pending = True
            buffer.push(index, character)

            prev_was_numeral_or_separator = True
            prev_was_chinese_numeral = current_is_chinese
        else:
            if prev_was_numeral_or_separator:
                segments.append(buffer.flush(boundary_before=boundary_pending))
            if literal_start is None:
                literal_start = index
            boundary_pending = False
            prev_was_numeral_or_separator = False
            prev_was_chinese_numeral = False

    if buffer:
        segments.append(buffer.flush(boundary_before=boundary_pending))
    if literal_start is not None:
        segments.append(_literal(text, literal_start, len(text)))

    return segments


def _render(segments: list[Segment]) -> str:
    return "".join(segment.render() for segment in segments)


def to_arabic_string(text: str) -> str:
    """Return `text` with every numeral run replaced by its Arabic value."""
    return _render(scan(text))


def scan_text(text: str) -> ConversionResult:
    """Scan `text` and return the converted string with its segments."""
    segments = scan(text)
    converted = _render(segments)
    numerals = [s.value for s in segments if s.kind is SegmentKind.NUMERAL and s.value is not None]
    logger.debug("Converted %d numeral run(s) in %d character(s)", len(numerals), len(text))
    return ConversionResult(
        source=text,
        converted=converted,
        segments=segments,
        numerals=numerals,
    )
