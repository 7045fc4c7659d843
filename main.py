#!/usr/bin/env python3
"""
Chinese Numerals — Entry Point
==============================

Converts numerals in a few sample sentences (or in the text given on the
command line) and prints each conversion.

Usage:
    python main.py                       # Built-in samples
    python main.py "總價1000萬800呎"      # Your own text
    LOG_LEVEL=DEBUG python main.py       # Show parser decisions
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from chinese_numerals.models import SegmentKind, format_number
from chinese_numerals.scanner import scan_text

load_dotenv()


# ─── Sample Text ─────────────────────────────────────────────────────

SAMPLES = [
    "一千萬",
    "二十二個人",
    "總價1000萬800呎",
    "2千萬",
    "人口約3.5萬",
    "門牌三〇〇三號",
    "共6,000人，另有6 000人",
    "貳佰零伍元",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversion(text: str) -> None:
    """Print one source → converted line with the parsed values."""
    result = scan_text(text)
    print(f"  {text} {_DIM}→{_RESET} {_BOLD}{_GREEN}{result.converted}{_RESET}")
    for segment in result.segments:
        if segment.kind is SegmentKind.NUMERAL:
            print(f"      {_DIM}[{segment.start}:{segment.end}] {segment.text!r} = {format_number(segment.value)}{_RESET}")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Convert the samples (or argv text) and print the results."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())

    texts = sys.argv[1:] or SAMPLES
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  CHINESE NUMERAL CONVERSION{_RESET}")
    print(f"{'=' * _WIDTH}")
    for text in texts:
        print_conversion(text)
    print(f"{'=' * _WIDTH}\n")


if __name__ == "__main__":
    main()
