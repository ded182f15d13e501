"""
Length Parser — feet-and-inches text to inches and back.

Accepted forms: 98, 98.5, 8-2, 8 2, 8'2", 8' 2", 8'. Fractions are not accepted
here; "5/8" style input belongs to fraction_math.parse_fraction.
"""
from __future__ import annotations

import math
import re
from typing import Optional

# Digit runs are capped so oversized input does not match.
_FEET_INCHES_RE = re.compile(r"^(\d{1,9})[\s\-]+(\d{1,9}(?:\.\d{1,15})?)$")
_INCHES_RE = re.compile(r"^(\d{1,9}(?:\.\d{1,15})?)$")
_FEET_ONLY_RE = re.compile(r"^(\d{1,9})-$")

INCHES_PER_FOOT = 12

COMMON_BOARD_LENGTHS = [
    {"feet": 8, "inches": 96},
    {"feet": 10, "inches": 120},
    {"feet": 12, "inches": 144},
    {"feet": 14, "inches": 168},
    {"feet": 16, "inches": 192},
    {"feet": 20, "inches": 240},
]


def parse_length(text: str) -> Optional[float]:
    """Return total inches, or None if the text is not a length."""
    text = text.strip().replace('"', "").replace("'", "-")

    match = _FEET_INCHES_RE.match(text)
    if match:
        feet = int(match.group(1))
        inches = float(match.group(2))
        return feet * INCHES_PER_FOOT + inches

    match = _INCHES_RE.match(text)
    if match:
        return float(match.group(1))

    # 8' on its own, which is also how format_length writes whole feet
    match = _FEET_ONLY_RE.match(text)
    if match:
        return float(int(match.group(1)) * INCHES_PER_FOOT)

    return None


def format_length(inches: float) -> str:
    feet = math.floor(inches / INCHES_PER_FOOT)
    remainder = inches % INCHES_PER_FOOT

    if feet == 0:
        return f'{remainder:.2f}"'
    if remainder == 0:
        return f"{feet}'"
    return f"{feet}'-{remainder:.2f}\""
