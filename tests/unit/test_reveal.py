"""
Unit tests for the reveal engine.

Tests flag bookkeeping, mine detonation and the zero-hint cascade.
"""
from typing import Callable, Set

import pytest
from minefield import (
    Action,
    Board,
    FlaggedCellError,
    Hidden,
    InvalidSelectionError,
    Revealed,
    apply_action,
)

MakeBoard = Callable[..., Board]


def revealed_indices(board: Board) -> Set[int]:
    """Indices of every revealed cell."""
    return {i for i, cell in enumerate(board) if isinstance(cell, Revealed)}


# ============================================================================
# Flag Tests
# ============================================================================

class TestToggleFlag:
    """Test flagging and unflagging hidden cells."""

    def test_flag_marks_cell_and_decrements(
        self, make_board: MakeBoard
    ) -> None:
        """Flagging marks the cell and lowers the mine counter."""
        board = make_board(2, 2, [3])
        outcome = apply_action(board, 0, Action.TOGGLE_FLAG)

        assert board.cell(0) == Hidden(flagged=True)
        assert board.mines_remaining == 0
        assert outcome.revealed == []
        assert outcome.hit_mine is False

    def test_unflag_restores_counter(self, make_board: MakeBoard) -> None:
        """Unflagging returns the cell and counter to their start."""
        board = make_board(2, 2, [3])
        apply_action(board, 0, Action.TOGGLE_FLAG)
        apply_action(board, 0, Action.TOGGLE_FLAG)

        assert board.cell(0) == Hidden()
        assert board.mines_remaining == 1

    def test_counter_never_underflows(self, make_board: MakeBoard) -> None:
        """Extra flags past the budget leave the counter at zero."""
        board = make_board(2, 2, [3])
        apply_action(board, 0, Action.TOGGLE_FLAG)
        apply_action(board, 1, Action.TOGGLE_FLAG)
        assert board.mines_remaining == 0

    def test_counter_never_exceeds_budget(
        self, make_board: MakeBoard
    ) -> None:
        """Removing flags never raises the counter past the budget."""
        board = make_board(2, 2, [3])
        apply_action(board, 0, Action.TOGGLE_FLAG)
        apply_action(board, 1, Action.TOGGLE_FLAG)
        apply_action(board, 1, Action.TOGGLE_FLAG)
        assert board.mines_remaining == 1
        apply_action(board, 0, Action.TOGGLE_FLAG)
        assert board.mines_remaining == 1

    def test_flag_on_mine_keeps_mine(self, make_board: MakeBoard) -> None:
        """Flagging a mine does not disarm it."""
        board = make_board(2, 2, [3])
        apply_action(board, 3, Action.TOGGLE_FLAG)
        assert board.cell(3) == Hidden(has_mine=True, flagged=True)

    def test_flag_counts_as_turn(self, make_board: MakeBoard) -> None:
        """A flag toggle advances the turn counter."""
        board = make_board(2, 2, [3])
        apply_action(board, 0, Action.TOGGLE_FLAG)
        assert board.turn == 1


# ============================================================================
# Selection Tests
# ============================================================================

class TestSelection:
    """Test rejected selections."""

    @pytest.mark.parametrize("action", list(Action))
    def test_revealed_cell_is_rejected(
        self, make_board: MakeBoard, action: Action
    ) -> None:
        """Acting on a revealed cell raises and changes nothing."""
        board = make_board(3, 1, [2])
        apply_action(board, 0, Action.REVEAL)
        before = list(board)

        with pytest.raises(InvalidSelectionError, match="already revealed"):
            apply_action(board, 0, action)

        assert list(board) == before
        assert board.turn == 1

    def test_flagged_cell_needs_confirmation(
        self, make_board: MakeBoard
    ) -> None:
        """Revealing a flagged cell without confirmation is refused."""
        board = make_board(2, 2, [3])
        apply_action(board, 0, Action.TOGGLE_FLAG)

        with pytest.raises(FlaggedCellError) as excinfo:
            apply_action(board, 0, Action.REVEAL)

        assert (excinfo.value.row, excinfo.value.col) == (0, 0)
        assert board.cell(0) == Hidden(flagged=True)
        assert board.mines_remaining == 0
        assert board.turn == 1

    def test_confirmed_reveal_clears_flag(
        self, make_board: MakeBoard
    ) -> None:
        """A confirmed reveal drops the flag and restores the counter."""
        board = make_board(2, 2, [3])
        apply_action(board, 0, Action.TOGGLE_FLAG)

        outcome = apply_action(board, 0, Action.REVEAL, confirm=True)

        assert outcome.revealed == [0]
        assert board.cell(0) == Revealed(has_mine=False, hint=1)
        assert board.mines_remaining == 1

    def test_off_board_index_fails_fast(self, make_board: MakeBoard) -> None:
        """Indices past the last cell raise IndexError."""
        board = make_board(2, 2, [3])
        with pytest.raises(IndexError):
            apply_action(board, 4, Action.REVEAL)


# ============================================================================
# Detonation Tests
# ============================================================================

class TestDetonation:
    """Test revealing a mine."""

    def test_mine_reveal_shows_every_mine(
        self, make_board: MakeBoard
    ) -> None:
        """Hitting one mine reveals all of them, the hit one first."""
        board = make_board(3, 3, [0, 2, 8])
        outcome = apply_action(board, 2, Action.REVEAL)

        assert outcome.hit_mine is True
        assert outcome.revealed[0] == 2
        assert set(outcome.revealed) == {0, 2, 8}
        for index in (0, 2, 8):
            assert board.cell(index) == Revealed(has_mine=True)

    def test_flagged_mines_are_shown_too(
        self, make_board: MakeBoard
    ) -> None:
        """Flagged mines are revealed along with the rest."""
        board = make_board(3, 3, [0, 8])
        apply_action(board, 8, Action.TOGGLE_FLAG)
        apply_action(board, 0, Action.REVEAL)
        assert board.cell(8) == Revealed(has_mine=True)

    def test_safe_cells_stay_hidden(self, make_board: MakeBoard) -> None:
        """A detonation does not uncover safe cells."""
        board = make_board(3, 3, [0, 8])
        apply_action(board, 0, Action.REVEAL)
        assert revealed_indices(board) == {0, 8}

    def test_detonation_is_one_turn(self, make_board: MakeBoard) -> None:
        """Revealing every mine still counts as a single turn."""
        board = make_board(3, 3, [0, 2, 8])
        apply_action(board, 0, Action.REVEAL)
        assert board.turn == 1


# ============================================================================
# Cascade Tests
# ============================================================================

class TestCascade:
    """Test the zero-hint flood fill."""

    def test_numbered_cell_does_not_cascade(
        self, make_board: MakeBoard
    ) -> None:
        """Every cell touching a centre mine shows 1 and stands alone."""
        board = make_board(3, 3, [4])
        outcome = apply_action(board, 0, Action.REVEAL)

        assert outcome.revealed == [0]
        assert board.cell(0) == Revealed(has_mine=False, hint=1)

    def test_cascade_reaches_numbered_border(
        self, make_board: MakeBoard
    ) -> None:
        """The cascade uncovers the numbered cells at its edge and stops."""
        board = make_board(5, 1, [4])
        outcome = apply_action(board, 0, Action.REVEAL)

        assert outcome.revealed == [0, 1, 2, 3]
        assert board.cell(2) == Revealed(has_mine=False, hint=0)
        assert board.cell(3) == Revealed(has_mine=False, hint=1)
        assert board.cell(4) == Hidden(has_mine=True)

    def test_cascade_from_corner_clears_safe_region(
        self, make_board: MakeBoard
    ) -> None:
        """A zero corner clears every safe cell it is connected to."""
        board = make_board(3, 3, [8])
        outcome = apply_action(board, 0, Action.REVEAL)

        assert sorted(outcome.revealed) == [0, 1, 2, 3, 4, 5, 6, 7]
        assert board.cell(4) == Revealed(has_mine=False, hint=1)
        assert board.cell(8) == Hidden(has_mine=True)

    def test_cascade_stops_at_wall_of_mines(
        self, make_board: MakeBoard
    ) -> None:
        """A column of mines splits the board; only one side is cleared."""
        board = make_board(5, 3, [2, 7, 12])
        apply_action(board, 0, Action.REVEAL)

        assert revealed_indices(board) == {0, 1, 5, 6, 10, 11}
        assert board.cell(1) == Revealed(has_mine=False, hint=2)
        assert board.cell(6) == Revealed(has_mine=False, hint=3)
        assert board.cell(11) == Revealed(has_mine=False, hint=2)

    def test_cascade_skips_flagged_cells(
        self, make_board: MakeBoard
    ) -> None:
        """Flagged cells are never uncovered by a cascade."""
        board = make_board(5, 5, [])
        apply_action(board, 12, Action.TOGGLE_FLAG)

        outcome = apply_action(board, 0, Action.REVEAL)

        assert len(outcome.revealed) == 24
        assert 12 not in outcome.revealed
        assert board.cell(12) == Hidden(flagged=True)

    def test_cascade_does_not_revisit_revealed_cells(
        self, make_board: MakeBoard
    ) -> None:
        """Cells revealed earlier are not reported again."""
        board = make_board(3, 3, [8])
        apply_action(board, 4, Action.REVEAL)
        outcome = apply_action(board, 0, Action.REVEAL)
        assert sorted(outcome.revealed) == [0, 1, 2, 3, 5, 6, 7]

    def test_cascade_is_one_turn(self, make_board: MakeBoard) -> None:
        """A whole cascade counts as a single turn."""
        board = make_board(5, 5, [])
        apply_action(board, 0, Action.REVEAL)
        assert board.turn == 1

    def test_large_board_cascade_has_no_depth_limit(
        self, make_board: MakeBoard
    ) -> None:
        """A 100x100 empty board clears in a single reveal."""
        board = make_board(100, 100, [])
        outcome = apply_action(board, 0, Action.REVEAL)
        assert len(outcome.revealed) == 10000
        assert len(set(outcome.revealed)) == 10000
