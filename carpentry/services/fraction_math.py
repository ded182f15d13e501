"""
Fraction Math — carpentry fractions and the arithmetic on them.

Measurements are whole inches plus a fraction whose denominator is a power of
two no finer than 1/64". Arithmetic goes through floating point and snaps the
result back to the simplest carpentry fraction within 0.001" at every step, so
a chain of operations accumulates rounding the same way a tape measure does.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import (
    FractionDivisionByZeroError,
    InvalidFractionError,
    NegativeMeasurementError,
)

# Searched smallest-first; the first one close enough wins.
CARPENTRY_DENOMINATORS = (2, 4, 8, 16, 32, 64)
SUPPORTED_PRECISIONS = (1,) + CARPENTRY_DENOMINATORS
MAX_DENOMINATOR = 64
SNAP_TOLERANCE = 0.001

# Nine digits per run is plenty for a measurement; longer input is unreadable.
_DECIMAL_RE = re.compile(r"^(\d{1,9}\.\d{0,15}|\.\d{1,15})$")
_MIXED_RE = re.compile(r"^(\d{1,9})[\s\-](\d{1,9})/(\d{1,9})$")
_SIMPLE_RE = re.compile(r"^(\d{1,9})/(\d{1,9})$")
_WHOLE_RE = re.compile(r"^(\d{1,9})$")


@dataclass(frozen=True)
class Fraction:
    whole: int
    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise InvalidFractionError("Denominator cannot be zero")
        if self.whole < 0 or self.numerator < 0 or self.denominator < 0:
            raise NegativeMeasurementError(
                f"Measurements are unsigned: {self.whole} {self.numerator}/{self.denominator}"
            )

    def normalized(self) -> "Fraction":
        """Fold any improper part into the whole and reduce what is left."""
        carry, numerator = divmod(self.numerator, self.denominator)
        if numerator == 0:
            return Fraction(self.whole + carry, 0, 1)
        numerator, denominator = reduce_fraction(numerator, self.denominator)
        return Fraction(self.whole + carry, numerator, denominator)

    def to_dict(self) -> dict:
        return {
            "whole": self.whole,
            "numerator": self.numerator,
            "denominator": self.denominator,
        }

    def __str__(self) -> str:
        return format_fraction(self)


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    if denominator == 0:
        raise InvalidFractionError("Denominator cannot be zero")
    divisor = gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


def _round_half_up(x: float) -> int:
    # round() is banker's rounding; a tape measure reading rounds .5 up
    return math.floor(x + 0.5)


def _snapped(whole: int, numerator: int, denominator: int) -> Fraction:
    if numerator == 0:
        return Fraction(whole, 0, 1)
    if numerator >= denominator:
        return Fraction(whole, numerator, denominator).normalized()
    numerator, denominator = reduce_fraction(numerator, denominator)
    return Fraction(whole, numerator, denominator)


def decimal_to_fraction(value: float, max_denominator: int = MAX_DENOMINATOR) -> Fraction:
    """
    Snap a decimal inch value to the simplest carpentry fraction.

    Denominators are tried in ascending order up to ``max_denominator``; the
    first whose rounded numerator lands within 0.001 of the remainder is used.
    If none does, the remainder is rounded to ``max_denominator`` ths.
    """
    if max_denominator not in SUPPORTED_PRECISIONS:
        raise InvalidFractionError(
            f"Precision must be one of {SUPPORTED_PRECISIONS}, got {max_denominator}"
        )
    if math.isnan(value) or math.isinf(value):
        raise InvalidFractionError(f"Cannot convert {value} to a fraction")
    if value < 0:
        raise NegativeMeasurementError(f"Measurements are unsigned, got {value}")

    whole = math.floor(value)
    remainder = value - whole
    if remainder == 0:
        return Fraction(whole, 0, 1)

    for denom in CARPENTRY_DENOMINATORS:
        if denom > max_denominator:
            break
        num = _round_half_up(remainder * denom)
        if abs(num / denom - remainder) < SNAP_TOLERANCE:
            return _snapped(whole, num, denom)

    return _snapped(whole, _round_half_up(remainder * max_denominator), max_denominator)


def fraction_to_decimal(fraction: Fraction) -> float:
    return fraction.whole + fraction.numerator / fraction.denominator


def parse_fraction(text: str) -> Optional[Fraction]:
    """
    Parse "3.625", "3-5/8", "3 5/8", "5/8" or "3".

    Returns None for anything unreadable, including a zero denominator.
    """
    text = text.strip()

    if "." in text:
        if not _DECIMAL_RE.match(text):
            return None
        return decimal_to_fraction(float(text))

    match = _MIXED_RE.match(text)
    if match:
        whole, numerator, denominator = (int(g) for g in match.groups())
        if denominator == 0:
            return None
        return Fraction(whole, numerator, denominator).normalized()

    match = _SIMPLE_RE.match(text)
    if match:
        numerator, denominator = (int(g) for g in match.groups())
        if denominator == 0:
            return None
        return Fraction(0, numerator, denominator).normalized()

    match = _WHOLE_RE.match(text)
    if match:
        return Fraction(int(match.group(1)), 0, 1)

    return None


def format_fraction(fraction: Fraction) -> str:
    if fraction.numerator == 0:
        return str(fraction.whole)
    if fraction.whole == 0:
        return f"{fraction.numerator}/{fraction.denominator}"
    return f"{fraction.whole}-{fraction.numerator}/{fraction.denominator}"


# ------------------------------------------------------------------ #
# Arithmetic                                                           #
# ------------------------------------------------------------------ #

def add_fractions(a: Fraction, b: Fraction) -> Fraction:
    return decimal_to_fraction(fraction_to_decimal(a) + fraction_to_decimal(b))


def subtract_fractions(a: Fraction, b: Fraction) -> Fraction:
    result = fraction_to_decimal(a) - fraction_to_decimal(b)
    if result < 0:
        raise NegativeMeasurementError(
            f"{format_fraction(a)} - {format_fraction(b)} is negative"
        )
    return decimal_to_fraction(result)


def multiply_fractions(a: Fraction, b: Fraction) -> Fraction:
    return decimal_to_fraction(fraction_to_decimal(a) * fraction_to_decimal(b))


def divide_fractions(a: Fraction, b: Fraction) -> Fraction:
    divisor = fraction_to_decimal(b)
    if divisor == 0:
        raise FractionDivisionByZeroError(f"Cannot divide {format_fraction(a)} by zero")
    return decimal_to_fraction(fraction_to_decimal(a) / divisor)


OPERATIONS: dict[str, Callable[[Fraction, Fraction], Fraction]] = {
    "add": add_fractions,
    "subtract": subtract_fractions,
    "multiply": multiply_fractions,
    "divide": divide_fractions,
}

OPERATION_SYMBOLS = {
    "add": "+",
    "subtract": "−",
    "multiply": "×",
    "divide": "÷",
}

# Sixteenths reference card, 1/16" through 15/16"
COMMON_FRACTIONS: list[Fraction] = [
    Fraction(0, n, 16).normalized() for n in range(1, 16)
]
