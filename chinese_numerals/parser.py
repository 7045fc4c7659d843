"""
Convert one isolated Chinese numeral token to its numeric value.

Supported patterns:
    "十二"        → 12         (leading multiplier means an implicit 一)
    "二十二"      → 22
    "三〇〇三"    → 3003       (bare digits concatenate)
    "一千萬"      → 10000000   (萬/億 re-base everything to their left)
    "2千萬"       → 20000000   (Arabic prefix multiplies the rest)
    "3.5萬"       → 35000

Algorithm:
    The token is read left to right into (base, multiplier) pairs whose
    products are summed at the end. A digit opens a pair, a multiplier
    closes it. A scale multiplier (萬, 億) arriving with no open digit
    collapses all pairs so far into a single new base for that scale.

Parsing is lenient: a token that holds nothing parseable yields 0.
Leading decimals use native float arithmetic, so "3.5萬" is computed as
3.5 * 10000.0; results that come out integral are returned as int. A
fractional prefix beyond the float range (about 309 digits) gives
float("inf"). Digit runs without a decimal point are exact ints of any
length.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from .models import Number
from .symbols import SYMBOLS, Digit, Multiplier, strip_separators

logger = logging.getLogger(__name__)

_LEADING_DECIMAL = re.compile(r"^[0-9]+(?:\.[0-9]+)?")


# ─── Parser State ────────────────────────────────────────────────────


class Pair(NamedTuple):
    """A base awaiting multiplication, e.g. (2, 10) for 二十."""

    base: Number
    multiplier: int

    @property
    def product(self) -> Number:
        return self.base * self.multiplier


@dataclass
class _ParseState:
    pending_digits: list[int] = field(default_factory=list)
    pairs: list[Pair] = field(default_factory=list)
    leading: Optional[Number] = None

    def total(self) -> Number:
        try:
            return sum(pair.product for pair in self.pairs)
        except OverflowError:
            # a huge int pair added to a float pair from a decimal prefix
            return math.inf

    def take_base(self) -> Optional[int]:
        """Close the open digit run and return its value, if any."""
        if not self.pending_digits:
            return None
        base = _digits_to_int("".join(map(str, self.pending_digits)))
        self.pending_digits = []
        return base


# ─── Leading Decimal ─────────────────────────────────────────────────


# int() refuses strings longer than sys.get_int_max_str_digits() (4300 by default)
_INT_CHUNK_DIGITS = 4000


def _digits_to_int(digits: str) -> int:
    """int(digits) for runs of any length, split in halves to stay under the limit."""
    if len(digits) <= _INT_CHUNK_DIGITS:
        return int(digits)
    half = len(digits) // 2
    high, low = digits[:half], digits[half:]
    return _digits_to_int(high) * 10 ** len(low) + _digits_to_int(low)


def _split_leading_decimal(token: str) -> tuple[Optional[Number], str]:
    """Split "1000萬" into (1000, "萬"). Returns (None, token) if no prefix."""
    match = _LEADING_DECIMAL.match(token)
    if not match:
        return None, token
    prefix = match.group(0)
    value: Number = float(prefix) if "." in prefix else _digits_to_int(prefix)
    return value, token[match.end():]


def _scale(value: Number, leading: Number) -> Number:
    try:
        return value * leading
    except OverflowError:
        # int too large to convert to float
        return math.inf


# ─── Symbol Handlers ─────────────────────────────────────────────────


def _apply_digit(state: _ParseState, digit: Digit) -> None:
    # 三〇〇三 rather than 三千零三: read the digits as written
    state.pending_digits.append(digit.value)


def _apply_multiplier(state: _ParseState, multiplier: Multiplier, position: int) -> None:
    if position == 0:
        # 千萬 or 2千萬: the first multiplier stands for 一千
        state.pairs.append(Pair(1, multiplier.magnitude))
        return

    base = state.take_base()
    if base is not None:
        state.pairs.append(Pair(base, multiplier.magnitude))
        return

    if multiplier.carries_scale:
        so_far = state.total()
        if state.leading is not None:
            so_far = _scale(so_far, state.leading)
            state.leading = None
        state.pairs = [Pair(so_far, multiplier.magnitude)]
        return

    # 一百十: a bare 十 in the middle still means 一十
    state.pairs.append(Pair(1, multiplier.magnitude))


# ─── Main Parser ─────────────────────────────────────────────────────


def _normalize_result(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class NumeralParser:
    """Parse a single numeral token.

    Usage:
        NumeralParser("一千萬").parse()  # 10000000
    """

    def __init__(self, token: str):
        self.token = token

    def parse(self) -> Number:
        cleaned = strip_separators(self.token)
        state = _ParseState()
        state.leading, remainder = _split_leading_decimal(cleaned)

        for position, character in enumerate(remainder):
            symbol = SYMBOLS.get(character)
            if isinstance(symbol, Digit):
                _apply_digit(state, symbol)
            elif isinstance(symbol, Multiplier):
                _apply_multiplier(state, symbol, position)

        base = state.take_base()
        if base is not None:
            state.pairs.append(Pair(base, 1))

        result = state.total()
        if state.leading is not None:
            # "800" alone has no pairs; multiplying would give 0
            result = state.leading if not state.pairs else _scale(result, state.leading)

        logger.debug("Parsed %d-character numeral into %d pair(s)", len(self.token), len(state.pairs))
        return _normalize_result(result)


def parse_numeral(token: str) -> Number:
    """Convert a numeral token such as "一千二百" or "1000萬" to a number.

    Commas and whitespace inside the token are ignored. Tokens with nothing
    parseable return 0.
    """
    return NumeralParser(token).parse()
