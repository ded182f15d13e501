"""/api/cut-list — plan stock boards for a list of cuts."""
from __future__ import annotations

import logging
from typing import Any, Union

from fastapi import APIRouter

from ..models.plan import CutPlanResponse
from ..models.requests import CutPlanRequest
from ..services import cut_list, length_parser, plan_export
from ..services.errors import UnparsableLengthError

router = APIRouter(prefix="/api/cut-list")
logger = logging.getLogger(__name__)


def _inches(value: Union[float, str]) -> float:
    if isinstance(value, str):
        inches = length_parser.parse_length(value)
        if inches is None:
            raise UnparsableLengthError(value)
        return inches
    return float(value)


def build_plan(req: CutPlanRequest) -> cut_list.CutPlan:
    """Parse the request's lengths, fill in default labels and run the planner."""
    board_length = _inches(req.board_length)
    kerf = req.kerf if req.kerf is not None else cut_list.DEFAULT_KERF

    cuts: list[cut_list.CutRequest] = []
    for i, item in enumerate(req.cuts):
        extra = {"id": item.id} if item.id else {}
        cuts.append(cut_list.CutRequest(
            length=_inches(item.length),
            quantity=item.quantity,
            label=item.label or f"Cut {i + 1}",
            **extra,
        ))

    plan = cut_list.compute_cut_plan(cuts, board_length, kerf)
    logger.info(
        f"Cut plan: {plan.total_pieces()} pieces → {plan.total_boards_needed} boards, "
        f"{plan.waste_percentage:.1f}% waste"
    )
    return plan


def plan_response(plan: cut_list.CutPlan) -> CutPlanResponse:
    boards = []
    for board in plan.boards:
        data = board.to_dict()
        for placement in data["placements"]:
            placement["formatted_length"] = length_parser.format_length(placement["length"])
        data["formatted_waste"] = length_parser.format_length(board.waste_length)
        boards.append(data)

    return CutPlanResponse(
        board_length=plan.board_length,
        kerf=plan.kerf,
        boards=boards,
        total_boards_needed=plan.total_boards_needed,
        total_pieces=plan.total_pieces(),
        total_waste=plan.total_waste,
        formatted_waste=length_parser.format_length(plan.total_waste),
        waste_percentage=plan.waste_percentage,
        instructions=plan_export.format_cut_sequence(plan),
    )


@router.post("/plan")
async def compute_plan(req: CutPlanRequest) -> CutPlanResponse:
    return plan_response(build_plan(req))


@router.get("/presets")
async def presets() -> dict[str, Any]:
    return {
        "board_lengths": length_parser.COMMON_BOARD_LENGTHS,
        "saw_kerfs": cut_list.COMMON_SAW_KERFS,
        "default_kerf": cut_list.DEFAULT_KERF,
        "default_board_length": cut_list.DEFAULT_BOARD_LENGTH,
    }
