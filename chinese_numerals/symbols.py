"""
The numeral symbol table and single-character classification.

Every character the parser understands maps to exactly one symbol:

    Digit(n)                          零 一 二 ... 九, financial and colloquial forms, ０-９
    Multiplier(m, carries_scale)      十 廿 卅 卌 百 皕 千, and the scale characters 萬 万 億 亿

The scale characters (10000 and above) carry `carries_scale=True`: when one
appears without a digit in front of it, everything parsed so far becomes its
base ("一千萬" = 1000 × 10000).

The table is built once at import time and exposed read-only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from .exceptions import InvalidInput


# ─── Symbol Types ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Digit:
    """A plain digit, 0-9."""

    value: int


@dataclass(frozen=True)
class Multiplier:
    """A positional multiplier such as 十 (10) or 萬 (10000)."""

    magnitude: int
    carries_scale: bool = False


@dataclass(frozen=True)
class NotANumeral:
    """Classification result for characters outside the table."""


NOT_A_NUMERAL = NotANumeral()

Symbol = Union[Digit, Multiplier]


# ─── Symbol Table ────────────────────────────────────────────────────

_DIGIT_CHARACTERS: dict[int, str] = {
    0: "零〇０洞",
    1: "壹一幺１",
    2: "貳贰二两兩２",
    3: "參叁三仨３",
    4: "肆四４",
    5: "伍五５",
    6: "陸陆六６",
    7: "柒七拐７",
    8: "捌八８",
    9: "玖九勾９",
}

_MULTIPLIER_CHARACTERS: dict[int, str] = {
    10: "拾十呀",
    20: "廿",
    30: "卅",
    40: "卌",
    100: "佰百",
    200: "皕",
    1_000: "仟千",
}

_SCALE_CHARACTERS: dict[int, str] = {
    10_000: "萬万",
    100_000_000: "億亿",
}


def _build_table() -> Mapping[str, Symbol]:
    table: dict[str, Symbol] = {}
    for value, chars in _DIGIT_CHARACTERS.items():
        for char in chars:
            table[char] = Digit(value)
    for magnitude, chars in _MULTIPLIER_CHARACTERS.items():
        for char in chars:
            table[char] = Multiplier(magnitude)
    for magnitude, chars in _SCALE_CHARACTERS.items():
        for char in chars:
            table[char] = Multiplier(magnitude, carries_scale=True)
    return MappingProxyType(table)


SYMBOLS: Mapping[str, Symbol] = _build_table()

CARRY_SCALE_CHARACTERS: frozenset[str] = frozenset(
    char for char, symbol in SYMBOLS.items()
    if isinstance(symbol, Multiplier) and symbol.carries_scale
)

_ARABIC_DIGITS = frozenset("0123456789０１２３４５６７８９")
_ASCII_DIGITS = frozenset("0123456789")

# Commas and whitespace may sit inside a numeral run but carry no value
SEPARATORS = re.compile(r"[,\s]")


# ─── Classification ──────────────────────────────────────────────────


def _require_single_character(character: object, func: str) -> str:
    """Raise InvalidInput unless `character` is a string of length one."""
    if not isinstance(character, str) or len(character) != 1:
        length = len(character) if isinstance(character, str) else None
        raise InvalidInput(
            f"{func}() expects exactly one character, got {character!r}",
            details={"received": repr(character), "length": length},
        )
    return character


def classify(character: str) -> Digit | Multiplier | NotANumeral:
    """Return the symbol for `character`, or NOT_A_NUMERAL.

    Raises:
        InvalidInput: If `character` is not exactly one character long.
    """
    _require_single_character(character, "classify")
    return SYMBOLS.get(character, NOT_A_NUMERAL)


def strip_separators(text: str) -> str:
    """Remove commas and whitespace, e.g. "6,000" → "6000"."""
    return SEPARATORS.sub("", text)


def is_numeral_or_separator(character: str) -> bool:
    """True for anything that may continue a numeral run.

    That is an ASCII digit, a comma, whitespace, or any table symbol.
    Commas and spaces keep a run going so "6,000" and "6 000" stay whole.
    """
    _require_single_character(character, "is_numeral_or_separator")
    return (
        character in _ASCII_DIGITS
        or character == ","
        or character.isspace()
        or character in SYMBOLS
    )


def is_chinese_numeral(character: str) -> bool:
    """True for ideographic numerals and full-width digits (０-９)."""
    _require_single_character(character, "is_chinese_numeral")
    return character in SYMBOLS


def is_arabic_digit(character: str) -> bool:
    """True for ASCII 0-9 and full-width ０-９."""
    _require_single_character(character, "is_arabic_digit")
    return character in _ARABIC_DIGITS
