"""
Mine placement for a freshly set-up board.

Mines are laid exactly once per board. The random layout is an unbiased
subset drawn with a Fisher-Yates shuffle of every cell index.
"""
import logging
import random
from typing import Iterable, List, Optional

from .board import Board
from .errors import PlacementError

logger = logging.getLogger(__name__)


def shuffled_indices(total: int, rng: random.Random) -> List[int]:
    """
    Return 0..total-1 in uniformly random order.

    Args:
        total: Number of indices to shuffle.
        rng: Random source.
    """
    indices = list(range(total))
    for i in range(total - 1, 0, -1):
        j = rng.randint(0, i)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


def place_mines(
    board: Board, rng: Optional[random.Random] = None
) -> List[int]:
    """
    Lay the board's mine budget on randomly chosen cells.

    Args:
        board: Board straight out of setup.
        rng: Random source (default: a fresh random.Random).

    Returns:
        Sorted indices that received a mine.

    Raises:
        PlacementError: If mines were already laid on this board.
    """
    rng = rng or random.Random()
    order = shuffled_indices(len(board), rng)
    count = min(board.mine_budget, len(board))
    return place_mines_at(board, order[:count])


def place_mines_at(board: Board, indices: Iterable[int]) -> List[int]:
    """
    Lay mines on an explicit set of cells.

    Raises:
        PlacementError: If mines were already laid, or the index count
            does not match the mine budget.
        IndexError: If an index is off the board.
    """
    if board.mines_laid:
        raise PlacementError("Mines have already been placed on this board")

    chosen = sorted(set(indices))
    if len(chosen) != min(board.mine_budget, len(board)):
        raise PlacementError(
            f"Expected {board.mine_budget} distinct mine positions, "
            f"got {len(chosen)}"
        )
    off_board = [i for i in chosen if not board.is_valid_index(i)]
    if off_board:
        raise IndexError(f"Mine indices {off_board} are off the board")

    for index in chosen:
        board.set_cell(index, board.cell(index).with_mine())
    board.mark_mines_laid()

    logger.debug("Placed %d mines on %dx%d board",
                 len(chosen), board.width, board.height)
    return chosen
