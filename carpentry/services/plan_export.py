"""
Plan Export — shop-floor instructions and CSV for a CutPlan.
"""
from __future__ import annotations

import csv
import io

from .cut_list import CutPlan
from .fraction_math import decimal_to_fraction, format_fraction
from .length_parser import format_length

CSV_HEADER = ["Board", "Label", "Length (in)", "Length", "Position (in)", "Kerf (in)"]


def _tape_reading(inches: float) -> str:
    """Nearest sixteenth, the way it is read off a tape."""
    return format_fraction(decimal_to_fraction(inches, max_denominator=16)) + '"'


def format_cut_sequence(plan: CutPlan) -> list[str]:
    """
    Return an ordered list of cutting instructions, one section per board,
    with each cut's mark position measured from the left end.
    """
    instructions: list[str] = [
        f"{plan.total_boards_needed} board{'s' if plan.total_boards_needed != 1 else ''} "
        f"of {format_length(plan.board_length)}, kerf {_tape_reading(plan.kerf)}",
    ]

    for board in plan.boards:
        instructions.append(f"### Board #{board.board_number}")
        for placement in board.placements:
            cut = placement.cut
            instructions.append(
                f"  • {cut.label or 'Cut'}: {format_length(cut.length)} "
                f"({_tape_reading(cut.length)}) at {_tape_reading(placement.position)}"
            )
        instructions.append(f"  Waste: {format_length(board.waste_length)}")

    instructions.append(
        f"Total waste: {format_length(plan.total_waste)} ({plan.waste_percentage:.1f}%)"
    )
    return instructions


def plan_to_csv(plan: CutPlan) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_HEADER)
    for board in plan.boards:
        for placement in board.placements:
            writer.writerow([
                board.board_number,
                placement.cut.label,
                placement.cut.length,
                format_length(placement.cut.length),
                placement.position,
                placement.kerf_loss,
            ])
    return output.getvalue()
