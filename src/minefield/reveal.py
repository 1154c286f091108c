"""
Reveal engine: applies one player action to one hidden cell.

Revealing a zero-hint cell cascades through its connected zero-hint
region and the numbered cells bordering it. The cascade uses an explicit
work queue; a cell leaves the Hidden variant as soon as it is revealed, so
it is never processed twice.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

from .adjacency import hint, neighbors
from .board import Board
from .cell import Hidden
from .errors import FlaggedCellError, InvalidSelectionError

logger = logging.getLogger(__name__)


class Action(Enum):
    """Actions a player can take on a hidden cell."""

    REVEAL = auto()
    TOGGLE_FLAG = auto()


@dataclass
class Outcome:
    """
    What a single action changed on the board.

    Attributes:
        revealed: Indices that became Revealed, in reveal order.
        hit_mine: Whether a mine was revealed.
    """

    revealed: List[int] = field(default_factory=list)
    hit_mine: bool = False


# ============================================================================
# Public Entry Point
# ============================================================================

def apply_action(
    board: Board,
    index: int,
    action: Action,
    confirm: bool = False,
) -> Outcome:
    """
    Apply a reveal or flag toggle to a hidden cell.

    Args:
        board: Board with mines already laid.
        index: Target cell index.
        action: What to do with the cell.
        confirm: Must be True to reveal a flagged cell.

    Returns:
        Outcome describing the revealed cells.

    Raises:
        InvalidSelectionError: If the cell is already revealed.
        FlaggedCellError: If revealing a flagged cell without confirm.
        IndexError: If the index is off the board.
    """
    cell = board.cell(index)
    if not isinstance(cell, Hidden):
        row, col = board.position_of(index)
        raise InvalidSelectionError(
            f"Cell ({row}, {col}) is already revealed", row, col
        )

    if action is Action.TOGGLE_FLAG:
        _toggle_flag(board, index, cell)
        outcome = Outcome()
    else:
        if cell.flagged:
            if not confirm:
                row, col = board.position_of(index)
                raise FlaggedCellError(
                    f"Cell ({row}, {col}) is flagged; confirm to reveal it",
                    row,
                    col,
                )
            _toggle_flag(board, index, cell)
        outcome = _reveal(board, index)

    board.advance_turn()
    return outcome


# ============================================================================
# Flags
# ============================================================================

def _toggle_flag(board: Board, index: int, cell: Hidden) -> None:
    if cell.flagged:
        board.flag_removed()
    else:
        board.flag_added()
    board.set_cell(index, cell.with_flag(not cell.flagged))


# ============================================================================
# Reveal
# ============================================================================

def _reveal(board: Board, index: int) -> Outcome:
    if board.cell(index).has_mine:
        return _detonate(board, index)
    return Outcome(revealed=_flood_reveal(board, index))


def _detonate(board: Board, index: int) -> Outcome:
    """Reveal the tripped mine and then every other hidden mine."""
    revealed = [index]
    board.set_cell(index, board.cell(index).revealed())
    for other in board.mine_indices():
        cell = board.cell(other)
        if isinstance(cell, Hidden):
            board.set_cell(other, cell.revealed())
            revealed.append(other)
    logger.debug("Mine at index %d detonated, %d mines shown",
                 index, len(revealed))
    return Outcome(revealed=revealed, hit_mine=True)


def _is_cascadable(board: Board, index: int) -> bool:
    cell = board.cell(index)
    return isinstance(cell, Hidden) and not cell.flagged and not cell.has_mine


def _flood_reveal(board: Board, start: int) -> List[int]:
    """
    Reveal a safe cell, cascading through zero-hint neighbours.

    Returns:
        Indices revealed, starting with the target cell.
    """
    revealed = []
    queue = deque([start])
    while queue:
        index = queue.popleft()
        if not _is_cascadable(board, index):
            continue
        count = hint(board, index)
        board.set_cell(index, board.cell(index).revealed(count))
        revealed.append(index)
        if count == 0:
            queue.extend(
                n for n in neighbors(board, index) if _is_cascadable(board, n)
            )

    if len(revealed) > 1:
        logger.debug("Cascade from index %d revealed %d cells",
                     start, len(revealed))
    return revealed
