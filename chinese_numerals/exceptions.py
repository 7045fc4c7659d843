"""
Exception hierarchy for numeral conversion.

Numeral parsing itself is lenient (an unparseable run becomes 0), so the
only failure callers normally see is InvalidInput from the single-character
classification helpers.
"""

from __future__ import annotations


class ChineseNumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidInput(ChineseNumeralError, ValueError):
    """A single-character helper received something other than one character."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)
