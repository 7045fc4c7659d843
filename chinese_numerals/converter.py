"""
Object-style API around a single source string.

Flow:
  ┌──────────────┐
  │ source text  │
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │   Scanner    │   ← split into numeral / literal runs
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │   Parser     │   ← each numeral run → number
  └──────┬───────┘
         │
  ┌──────▼───────┐
  │   Result     │   ← converted string + segments
  └──────────────┘
"""

from __future__ import annotations

import logging

from .models import ConversionResult, Number
from .parser import parse_numeral
from .scanner import scan_text, to_arabic_string
from .symbols import is_arabic_digit, is_chinese_numeral, is_numeral_or_separator

logger = logging.getLogger(__name__)


class ChineseNumber:
    """A string that contains (or is) a Chinese numeral.

    Usage:
        ChineseNumber("一千萬").to_integer()              # 10000000
        ChineseNumber("1000萬800呎").to_arabic_string()    # "10000000 800呎"
    """

    is_numeral_or_separator = staticmethod(is_numeral_or_separator)
    is_chinese_numeral = staticmethod(is_chinese_numeral)
    is_arabic_digit = staticmethod(is_arabic_digit)

    def __init__(self, source: object):
        self.source = str(source)

    def __repr__(self) -> str:
        return f"ChineseNumber({self.source!r})"

    def to_integer(self) -> Number:
        """Read the whole source as one numeral, e.g. "83萬" → 830000."""
        return parse_numeral(self.source)

    def to_arabic_string(self) -> str:
        """Replace every numeral run in the source with its Arabic value."""
        return to_arabic_string(self.source)

    def scan(self) -> ConversionResult:
        """Like to_arabic_string(), but keep the segments that produced it."""
        result = scan_text(self.source)
        logger.debug("Scanned %r -> %r", self.source, result.converted)
        return result
