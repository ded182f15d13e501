"""/api/lengths — feet-inches parsing and formatting."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query

from ..models.requests import LengthParseRequest
from ..services import length_parser

router = APIRouter(prefix="/api/lengths")


@router.post("/parse")
async def parse_length(req: LengthParseRequest) -> dict[str, Any]:
    """Unreadable text is not an error: inches and formatted come back null."""
    inches = length_parser.parse_length(req.text)
    return {
        "text": req.text,
        "inches": inches,
        "formatted": length_parser.format_length(inches) if inches is not None else None,
    }


@router.get("/format")
async def format_length(inches: float = Query(ge=0)) -> dict[str, Any]:
    return {"inches": inches, "formatted": length_parser.format_length(inches)}
