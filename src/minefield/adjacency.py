"""
Neighbourhood and hint computation.

Hints are always computed from the mine layout, never from what the player
can see, and are not cached.
"""
from typing import Set

from .board import Board


def neighbors(board: Board, index: int) -> Set[int]:
    """
    Get the indices touching a cell, diagonals included.

    Args:
        board: Board to look on.
        index: Index of the centre cell.

    Returns:
        Set of 3 (corner), 5 (edge) or 8 (interior) indices on boards of
        at least 2x2; fewer on single-row or single-column boards.
    """
    row, col = board.position_of(index)
    result = set()
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if board.is_valid_position(new_row, new_col):
                result.add(new_row * board.width + new_col)
    return result


def hint(board: Board, index: int) -> int:
    """Count mines adjacent to a cell, hidden or revealed alike."""
    return sum(1 for n in neighbors(board, index) if board.cell(n).has_mine)
