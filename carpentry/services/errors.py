"""
Errors raised by the calculation services.

Parsers never raise: they return None for text they cannot read. These
exceptions are for contract violations (bad denominators, cuts longer than the
stock board, empty cut lists) that must not silently produce a wrong answer.
"""
from __future__ import annotations


class CarpentryError(ValueError):
    """Base class for every calculation error."""

    error_type = "carpentry"


class InvalidFractionError(CarpentryError):
    error_type = "invalid_fraction"


class NegativeMeasurementError(InvalidFractionError):
    """Lengths are unsigned; a negative result is a caller error."""

    error_type = "negative_measurement"


class FractionDivisionByZeroError(InvalidFractionError, ZeroDivisionError):
    error_type = "division_by_zero"


class InvalidCutRequestError(CarpentryError):
    error_type = "invalid_cut"


class CutExceedsBoardError(InvalidCutRequestError):
    error_type = "cut_exceeds_board"

    def __init__(self, cut, board_length: float) -> None:
        self.cut = cut
        self.board_length = board_length
        super().__init__(f"{cut.describe()} is longer than the {board_length}\" board")


class EmptyCutListError(InvalidCutRequestError):
    error_type = "empty_cut_list"

    def __init__(self) -> None:
        super().__init__("Add at least one cut before planning")


class UnparsableLengthError(CarpentryError):
    """Raised by the HTTP layer when a required length cannot be read."""

    error_type = "unparsable_length"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not read length {text!r}")
