"""
Cut List — plan how many stock boards a set of cuts needs.

Greedy, single pass: cuts are expanded by quantity, sorted longest first
(stable, so equal lengths keep their input order) and dropped onto the one
open board while it still has room for the cut plus a saw kerf. When a cut
does not fit, the open board is closed and a new one started. Closed boards
are never revisited.

Every placement charges one kerf. The only time that overdraws a board is
when its first cut is within a kerf of the full board length; the residual is
clamped to zero there and the placement is charged the kerf that actually
fit, so cut lengths + kerf + waste always add up to the stock used.
"""
from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass, field, replace
from typing import Sequence

from .errors import CutExceedsBoardError, EmptyCutListError, InvalidCutRequestError
from .length_parser import format_length

logger = logging.getLogger(__name__)

DEFAULT_KERF = float(os.environ.get("CARPENTRY_DEFAULT_KERF", "0.125"))  # 1/8" blade
DEFAULT_BOARD_LENGTH = float(os.environ.get("CARPENTRY_DEFAULT_BOARD_LENGTH", "144"))  # 12'

COMMON_SAW_KERFS = [
    {"name": 'Thin Kerf (1/16")', "inches": 0.0625},
    {"name": 'Standard (1/8")', "inches": 0.125},
    {"name": 'Thick Blade (3/16")', "inches": 0.1875},
]


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CutRequest:
    length: float            # inches
    quantity: int = 1
    label: str = ""
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not self.length > 0:
            raise InvalidCutRequestError(f"Cut length must be positive, got {self.length}")
        if self.quantity < 1:
            raise InvalidCutRequestError(f"Cut quantity must be at least 1, got {self.quantity}")

    def describe(self) -> str:
        name = self.label or self.id
        return f"{name}: {format_length(self.length)} × {self.quantity}"


@dataclass(frozen=True)
class Placement:
    cut: CutRequest
    position: float          # inches from the left end of the board
    kerf_loss: float


@dataclass
class BoardAssignment:
    board_number: int
    board_length: float
    placements: list[Placement] = field(default_factory=list)
    residual_length: float = 0.0

    @property
    def waste_length(self) -> float:
        return self.residual_length

    @property
    def used_length(self) -> float:
        return sum(p.cut.length for p in self.placements)

    @property
    def kerf_length(self) -> float:
        return sum(p.kerf_loss for p in self.placements)

    def fits(self, length: float, kerf: float) -> bool:
        return self.residual_length >= length + kerf

    def place(self, cut: CutRequest, kerf: float) -> Placement:
        position = self.board_length - self.residual_length
        remaining = self.residual_length - cut.length
        kerf_loss = min(kerf, max(remaining, 0.0))
        placement = Placement(cut=cut, position=position, kerf_loss=kerf_loss)
        self.placements.append(placement)
        self.residual_length = max(remaining - kerf, 0.0)
        return placement

    def to_dict(self) -> dict:
        return {
            "board_number": self.board_number,
            "placements": [
                {
                    "cut_id": p.cut.id,
                    "label": p.cut.label,
                    "length": p.cut.length,
                    "position": p.position,
                    "kerf_loss": p.kerf_loss,
                }
                for p in self.placements
            ],
            "used_length": self.used_length,
            "kerf_length": self.kerf_length,
            "waste_length": self.waste_length,
        }


@dataclass
class CutPlan:
    board_length: float
    kerf: float
    cuts: list[CutRequest]
    boards: list[BoardAssignment]
    total_boards_needed: int
    total_waste: float
    waste_percentage: float

    def total_pieces(self) -> int:
        return sum(len(b.placements) for b in self.boards)

    def to_dict(self) -> dict:
        return {
            "board_length": self.board_length,
            "kerf": self.kerf,
            "cuts": [
                {"id": c.id, "length": c.length, "quantity": c.quantity, "label": c.label}
                for c in self.cuts
            ],
            "boards": [b.to_dict() for b in self.boards],
            "total_boards_needed": self.total_boards_needed,
            "total_waste": self.total_waste,
            "waste_percentage": self.waste_percentage,
        }


def expand_cuts(cuts: Sequence[CutRequest]) -> list[CutRequest]:
    """One single-quantity CutRequest per physical piece, keeping id and label."""
    expanded: list[CutRequest] = []
    for cut in cuts:
        single = replace(cut, quantity=1)
        expanded.extend(single for _ in range(cut.quantity))
    return expanded


def _validate(cuts: Sequence[CutRequest], board_length: float, kerf: float) -> None:
    if not cuts:
        raise EmptyCutListError()
    if not board_length > 0:
        raise InvalidCutRequestError(f"Board length must be positive, got {board_length}")
    if kerf < 0:
        raise InvalidCutRequestError(f"Saw kerf cannot be negative, got {kerf}")
    for cut in cuts:
        if cut.length > board_length:
            raise CutExceedsBoardError(cut, board_length)


def compute_cut_plan(
    cuts: Sequence[CutRequest],
    board_length: float,
    kerf: float = DEFAULT_KERF,
) -> CutPlan:
    """
    Assign every requested piece to a stock board, longest pieces first.

    Raises EmptyCutListError for an empty list and CutExceedsBoardError when
    a cut can never fit on a board.
    """
    _validate(cuts, board_length, kerf)

    pieces = sorted(expand_cuts(cuts), key=lambda c: c.length, reverse=True)

    boards: list[BoardAssignment] = []
    current: BoardAssignment | None = None

    for piece in pieces:
        if current is None or not current.fits(piece.length, kerf):
            current = BoardAssignment(
                board_number=len(boards) + 1,
                board_length=board_length,
                residual_length=board_length,
            )
            boards.append(current)
        current.place(piece, kerf)

    total_boards = len(boards)
    total_waste = sum(b.waste_length for b in boards)
    waste_percentage = total_waste / (total_boards * board_length) * 100

    logger.debug(
        f"Planned {len(pieces)} pieces on {total_boards} × {format_length(board_length)} "
        f"boards (kerf {kerf}), waste {waste_percentage:.1f}%"
    )

    return CutPlan(
        board_length=board_length,
        kerf=kerf,
        cuts=list(cuts),
        boards=boards,
        total_boards_needed=total_boards,
        total_waste=total_waste,
        waste_percentage=waste_percentage,
    )
