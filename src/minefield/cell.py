"""
Cell module for the mine-clearing engine.

A cell is either Hidden (possibly flagged) or Revealed (carrying its hint).
The two shapes are separate frozen dataclasses so a hidden cell can never
carry a hint and a revealed cell can never carry a flag.
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Union


# ============================================================================
# Constants
# ============================================================================

class CellView(Enum):
    """The four glyph kinds a renderer needs to draw a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    MINE = auto()
    NUMBER = auto()


OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Variants
# ============================================================================

@dataclass(frozen=True)
class Hidden:
    """
    A cell the player has not revealed yet.

    Attributes:
        has_mine: Whether this cell contains a mine.
        flagged: Whether the player has marked this cell.
    """

    has_mine: bool = False
    flagged: bool = False

    def with_mine(self) -> "Hidden":
        """Return a copy of this cell holding a mine."""
        return replace(self, has_mine=True)

    def with_flag(self, flagged: bool) -> "Hidden":
        """Return a copy of this cell with the given flag state."""
        return replace(self, flagged=flagged)

    def revealed(self, hint: Optional[int] = None) -> "Revealed":
        """
        Turn this cell into its revealed form.

        Args:
            hint: Adjacent mine count; ignored for mines.

        Returns:
            The Revealed variant for this cell.
        """
        if self.has_mine:
            return Revealed(has_mine=True)
        return Revealed(has_mine=False, hint=hint or 0)

    @property
    def view(self) -> CellView:
        return CellView.FLAGGED if self.flagged else CellView.HIDDEN

    def to_observation(self) -> int:
        return OBS_FLAGGED if self.flagged else OBS_HIDDEN


@dataclass(frozen=True)
class Revealed:
    """
    A cell the player has uncovered.

    Attributes:
        has_mine: Whether this cell is a mine (only on a lost game).
        hint: Count of mines among the neighbours (0-8), or None for a mine.
    """

    has_mine: bool = False
    hint: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate hint against the mine flag."""
        if self.has_mine:
            if self.hint is not None:
                raise ValueError("A revealed mine carries no hint")
        elif self.hint is None or not 0 <= self.hint <= 8:
            raise ValueError(f"Hint must be in 0..8, got {self.hint!r}")

    @property
    def view(self) -> CellView:
        return CellView.MINE if self.has_mine else CellView.NUMBER

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            9 for a revealed mine, otherwise the hint (0-8).
        """
        if self.has_mine:
            return OBS_MINE
        return self.hint


Cell = Union[Hidden, Revealed]
