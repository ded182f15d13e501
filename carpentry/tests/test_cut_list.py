"""Unit tests for cut_list.py — greedy stock board planning with kerf."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import pytest

from carpentry.services import cut_list
from carpentry.services.cut_list import (
    CutRequest,
    BoardAssignment,
    CutPlan,
    expand_cuts,
    compute_cut_plan,
    COMMON_SAW_KERFS,
)
from carpentry.services.errors import (
    CutExceedsBoardError,
    EmptyCutListError,
    InvalidCutRequestError,
)


def _two_a_one_b() -> list[CutRequest]:
    """48" × 2 and 30" × 1 — the A/A/B example."""
    return [
        CutRequest(length=48, quantity=2, label="A", id="a"),
        CutRequest(length=30, quantity=1, label="B", id="b"),
    ]


def _material(plan: CutPlan) -> float:
    return sum(
        board.used_length + board.kerf_length + board.waste_length
        for board in plan.boards
    )


# ─────────────────────────────────────────────────────────────────────────────
# Tests: CutRequest
# ─────────────────────────────────────────────────────────────────────────────

class TestCutRequest:
    def test_defaults(self):
        cut = CutRequest(length=24)
        assert cut.quantity == 1
        assert cut.label == ""
        assert cut.id

    def test_ids_are_unique(self):
        assert CutRequest(length=24).id != CutRequest(length=24).id

    def test_zero_length_rejected(self):
        with pytest.raises(InvalidCutRequestError):
            CutRequest(length=0)

    def test_zero_quantity_rejected(self):
        with pytest.raises(InvalidCutRequestError):
            CutRequest(length=10, quantity=0)

    def test_describe(self):
        assert CutRequest(length=98, quantity=3, label="Rail").describe() == "Rail: 8'-2.00\" × 3"


# ─────────────────────────────────────────────────────────────────────────────
# Tests: expand_cuts
# ─────────────────────────────────────────────────────────────────────────────

class TestExpandCuts:
    def test_one_per_piece(self):
        expanded = expand_cuts(_two_a_one_b())
        assert len(expanded) == 3
        assert all(c.quantity == 1 for c in expanded)

    def test_keeps_id_and_label(self):
        expanded = expand_cuts(_two_a_one_b())
        assert [c.id for c in expanded] == ["a", "a", "b"]
        assert [c.label for c in expanded] == ["A", "A", "B"]

    def test_does_not_touch_input(self):
        cuts = _two_a_one_b()
        expand_cuts(cuts)
        assert cuts[0].quantity == 2


# ─────────────────────────────────────────────────────────────────────────────
# Tests: compute_cut_plan
# ─────────────────────────────────────────────────────────────────────────────

class TestComputeCutPlan:
    def test_two_a_one_b_needs_two_boards(self):
        # A + kerf leaves 47.875", not enough for a second A + kerf (48.125")
        plan = compute_cut_plan(_two_a_one_b(), board_length=96, kerf=0.125)
        assert plan.total_boards_needed == 2

        first, second = plan.boards
        assert [p.cut.label for p in first.placements] == ["A"]
        assert [p.position for p in first.placements] == [0]
        assert first.waste_length == pytest.approx(47.875)

        assert [p.cut.label for p in second.placements] == ["A", "B"]
        assert [p.position for p in second.placements] == [0, 48.125]
        assert second.waste_length == pytest.approx(17.75)

        assert plan.total_waste == pytest.approx(65.625)
        assert plan.waste_percentage == pytest.approx(65.625 / 192 * 100)

    def test_board_numbers_count_up(self):
        plan = compute_cut_plan(_two_a_one_b(), board_length=96, kerf=0.125)
        assert [b.board_number for b in plan.boards] == [1, 2]

    def test_longest_first(self):
        cuts = [CutRequest(length=10, label="short"), CutRequest(length=50, label="long")]
        plan = compute_cut_plan(cuts, board_length=96, kerf=0.125)
        assert [p.cut.label for p in plan.boards[0].placements] == ["long", "short"]
        assert plan.boards[0].placements[1].position == 50.125

    def test_equal_lengths_keep_input_order(self):
        cuts = [
            CutRequest(length=30, label="first"),
            CutRequest(length=30, label="second"),
            CutRequest(length=30, label="third"),
        ]
        plan = compute_cut_plan(cuts, board_length=96, kerf=0.125)
        assert [p.cut.label for p in plan.boards[0].placements] == ["first", "second", "third"]

    def test_four_twenties_per_eight_foot_board(self):
        plan = compute_cut_plan([CutRequest(length=20, quantity=12)], board_length=96, kerf=0.125)
        assert plan.total_boards_needed == 3
        assert all(len(b.placements) == 4 for b in plan.boards)
        assert all(b.waste_length == pytest.approx(15.5) for b in plan.boards)
        assert plan.total_pieces() == 12

    def test_zero_kerf(self):
        plan = compute_cut_plan([CutRequest(length=48, quantity=2)], board_length=96, kerf=0)
        assert plan.total_boards_needed == 1
        assert [p.position for p in plan.boards[0].placements] == [0, 48]
        assert plan.total_waste == 0
        assert plan.waste_percentage == 0

    def test_default_kerf(self):
        plan = compute_cut_plan([CutRequest(length=48)], board_length=96)
        assert plan.kerf == cut_list.DEFAULT_KERF

    def test_positions_non_decreasing(self):
        cuts = [CutRequest(length=l, quantity=2) for l in (7.5, 31, 12.25, 22)]
        plan = compute_cut_plan(cuts, board_length=96, kerf=0.125)
        for board in plan.boards:
            positions = [p.position for p in board.placements]
            assert positions == sorted(positions)

    def test_closed_boards_are_not_revisited(self):
        # The 10" piece would fit on board 1 but board 1 is already closed
        cuts = [
            CutRequest(length=80, label="big"),
            CutRequest(length=60, label="mid"),
            CutRequest(length=10, label="small"),
        ]
        plan = compute_cut_plan(cuts, board_length=96, kerf=0.125)
        assert [p.cut.label for p in plan.boards[0].placements] == ["big"]
        assert [p.cut.label for p in plan.boards[1].placements] == ["mid", "small"]

    def test_plan_keeps_requests_by_value(self):
        cuts = _two_a_one_b()
        plan = compute_cut_plan(cuts, board_length=96, kerf=0.125)
        assert plan.cuts == cuts
        assert plan.cuts is not cuts

    def test_to_dict(self):
        plan = compute_cut_plan(_two_a_one_b(), board_length=96, kerf=0.125)
        data = plan.to_dict()
        assert data["total_boards_needed"] == 2
        assert data["boards"][1]["placements"][1]["label"] == "B"
        assert data["boards"][1]["placements"][1]["position"] == 48.125
        assert len(data["cuts"]) == 2


# ─────────────────────────────────────────────────────────────────────────────
# Tests: kerf clamping on a full-length first cut
# ─────────────────────────────────────────────────────────────────────────────

class TestResidualClamp:
    def test_full_length_cut_leaves_no_waste(self):
        plan = compute_cut_plan([CutRequest(length=96)], board_length=96, kerf=0.125)
        board = plan.boards[0]
        assert board.residual_length == 0
        assert board.placements[0].kerf_loss == 0
        assert plan.total_waste == 0

    def test_partial_kerf_charged(self):
        plan = compute_cut_plan([CutRequest(length=95.9375)], board_length=96, kerf=0.125)
        board = plan.boards[0]
        assert board.residual_length == 0
        assert board.placements[0].kerf_loss == pytest.approx(0.0625)

    def test_full_length_cuts_each_get_a_board(self):
        plan = compute_cut_plan([CutRequest(length=96, quantity=3)], board_length=96, kerf=0.125)
        assert plan.total_boards_needed == 3
        assert plan.total_waste == 0


# ─────────────────────────────────────────────────────────────────────────────
# Tests: properties
# ─────────────────────────────────────────────────────────────────────────────

_CUT_LISTS = [
    [(48, 2), (30, 1)],
    [(20, 12)],
    [(96, 1), (95.95, 2), (1, 3)],
    [(7.5, 3), (31, 2), (12.25, 4), (22, 1), (60, 2)],
    [(35.5, 5), (23.75, 7), (11.125, 9)],
]


class TestPlanProperties:
    @pytest.mark.parametrize("spec", _CUT_LISTS)
    @pytest.mark.parametrize("kerf", [0, 0.0625, 0.125, 0.1875])
    def test_material_is_conserved(self, spec, kerf):
        cuts = [CutRequest(length=l, quantity=q) for l, q in spec]
        plan = compute_cut_plan(cuts, board_length=96, kerf=kerf)
        assert _material(plan) == pytest.approx(plan.total_boards_needed * 96)

    @pytest.mark.parametrize("spec", _CUT_LISTS)
    def test_more_pieces_never_need_fewer_boards(self, spec):
        cuts = [CutRequest(length=l, quantity=q) for l, q in spec]
        base = compute_cut_plan(cuts, board_length=96, kerf=0.125).total_boards_needed
        for i, (length, quantity) in enumerate(spec):
            bumped = list(cuts)
            bumped[i] = CutRequest(length=length, quantity=quantity + 1)
            plan = compute_cut_plan(bumped, board_length=96, kerf=0.125)
            assert plan.total_boards_needed >= base

    @pytest.mark.parametrize("spec", _CUT_LISTS)
    def test_waste_is_never_negative(self, spec):
        cuts = [CutRequest(length=l, quantity=q) for l, q in spec]
        plan = compute_cut_plan(cuts, board_length=96, kerf=0.125)
        assert all(b.waste_length >= 0 for b in plan.boards)
        assert 0 <= plan.waste_percentage <= 100


# ─────────────────────────────────────────────────────────────────────────────
# Tests: errors
# ─────────────────────────────────────────────────────────────────────────────

class TestPlanErrors:
    def test_empty_cut_list(self):
        with pytest.raises(EmptyCutListError):
            compute_cut_plan([], board_length=96)

    def test_cut_longer_than_board(self):
        long_cut = CutRequest(length=100, label="Too long")
        with pytest.raises(CutExceedsBoardError) as exc_info:
            compute_cut_plan([CutRequest(length=20), long_cut], board_length=96)
        assert exc_info.value.cut is long_cut
        assert exc_info.value.board_length == 96
        assert "Too long" in str(exc_info.value)
        assert "8'-4.00\"" in str(exc_info.value)

    def test_non_positive_board(self):
        with pytest.raises(InvalidCutRequestError):
            compute_cut_plan([CutRequest(length=20)], board_length=0)

    def test_negative_kerf(self):
        with pytest.raises(InvalidCutRequestError):
            compute_cut_plan([CutRequest(length=20)], board_length=96, kerf=-0.125)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute_cut_plan([], board_length=96)


class TestBoardAssignment:
    def test_fits_needs_room_for_kerf(self):
        board = BoardAssignment(board_number=1, board_length=96, residual_length=30.1)
        assert not board.fits(30, 0.125)
        assert board.fits(30, 0.0625)

    def test_place_appends_at_used_end(self):
        board = BoardAssignment(board_number=1, board_length=96, residual_length=96)
        board.place(CutRequest(length=24), 0.125)
        placement = board.place(CutRequest(length=24), 0.125)
        assert placement.position == 24.125
        assert board.residual_length == pytest.approx(47.75)


class TestCommonSawKerfs:
    def test_standard_is_an_eighth(self):
        assert {"name": 'Standard (1/8")', "inches": 0.125} in COMMON_SAW_KERFS


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
