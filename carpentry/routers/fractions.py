"""POST /api/fractions — fraction conversion and arithmetic."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter

from ..models.plan import FractionResult
from ..models.requests import (
    DecimalConvertRequest,
    FractionCalculateRequest,
    FractionConvertRequest,
)
from ..services import fraction_math
from ..services.errors import InvalidFractionError

router = APIRouter(prefix="/api/fractions")
logger = logging.getLogger(__name__)


def _result(fraction: fraction_math.Fraction) -> FractionResult:
    return FractionResult(
        fraction=fraction.to_dict(),
        formatted=fraction_math.format_fraction(fraction),
        decimal=fraction_math.fraction_to_decimal(fraction),
    )


def _parse_or_raise(text: str) -> fraction_math.Fraction:
    fraction = fraction_math.parse_fraction(text)
    if fraction is None:
        raise InvalidFractionError(f"Could not read fraction {text!r}")
    return fraction


@router.post("/convert")
async def convert_fraction(req: FractionConvertRequest) -> FractionResult:
    return _result(_parse_or_raise(req.value))


@router.post("/from-decimal")
async def convert_decimal(req: DecimalConvertRequest) -> FractionResult:
    fraction = fraction_math.decimal_to_fraction(req.value, max_denominator=req.max_denominator)
    return _result(fraction)


@router.post("/calculate")
async def calculate(req: FractionCalculateRequest) -> dict[str, Any]:
    left = _parse_or_raise(req.left)
    right = _parse_or_raise(req.right)
    fraction = fraction_math.OPERATIONS[req.operation](left, right)
    symbol = fraction_math.OPERATION_SYMBOLS[req.operation]
    result = _result(fraction)
    return {
        **result.model_dump(),
        "expression": (
            f"{fraction_math.format_fraction(left)} {symbol} "
            f"{fraction_math.format_fraction(right)} = {result.formatted}"
        ),
    }


@router.get("/common")
async def common_fractions() -> list[FractionResult]:
    return [_result(f) for f in fraction_math.COMMON_FRACTIONS]
