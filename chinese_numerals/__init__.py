"""
Chinese Numerals — turn numerals in Chinese text into Arabic numbers.

Architecture: Symbol table → Numeral parser → Text scanner
Handles:     traditional, simplified and financial ideographs, full-width digits,
             mixed forms like "1000萬" and "3.5万".
"""

from .converter import ChineseNumber
from .exceptions import ChineseNumeralError, InvalidInput
from .models import ConversionResult, Segment, SegmentKind
from .parser import NumeralParser, parse_numeral
from .scanner import scan, scan_text, to_arabic_string
from .symbols import (
    NOT_A_NUMERAL,
    SYMBOLS,
    Digit,
    Multiplier,
    NotANumeral,
    classify,
    is_arabic_digit,
    is_chinese_numeral,
    is_numeral_or_separator,
)

__version__ = "1.0.0"

__all__ = [
    "NOT_A_NUMERAL",
    "SYMBOLS",
    "ChineseNumber",
    "ChineseNumeralError",
    "ConversionResult",
    "Digit",
    "InvalidInput",
    "Multiplier",
    "NotANumeral",
    "NumeralParser",
    "Segment",
    "SegmentKind",
    "classify",
    "is_arabic_digit",
    "is_chinese_numeral",
    "is_numeral_or_separator",
    "parse_numeral",
    "scan",
    "scan_text",
    "to_arabic_string",
]
