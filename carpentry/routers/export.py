"""POST /api/export — download a cut plan as CSV or plain text."""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, StreamingResponse

from ..models.requests import CutPlanRequest
from ..services import plan_export
from .cut_list import build_plan

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/export/csv")
async def export_csv(req: CutPlanRequest) -> StreamingResponse:
    plan = build_plan(req)
    logger.info(f"CSV export: {plan.total_pieces()} pieces on {plan.total_boards_needed} boards")
    return StreamingResponse(
        iter([plan_export.plan_to_csv(plan)]),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="cut-plan.csv"'},
    )


@router.post("/export/text")
async def export_text(req: CutPlanRequest) -> PlainTextResponse:
    plan = build_plan(req)
    logger.info(f"Text export: {plan.total_pieces()} pieces on {plan.total_boards_needed} boards")
    return PlainTextResponse(
        "\n".join(plan_export.format_cut_sequence(plan)) + "\n",
        headers={"Content-Disposition": 'attachment; filename="cut-plan.txt"'},
    )
