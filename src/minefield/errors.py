"""
Exceptions raised by the mine-clearing engine.

Every rejection is raised before any state is mutated, so callers can
re-prompt and carry on with the same game.
"""
from typing import Optional


class MinefieldError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinefieldError, ValueError):
    """Board dimensions or mine budget are not usable."""


class InvalidSelectionError(MinefieldError):
    """Target cell is out of range or no longer hidden."""

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        col: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.col = col


class FlaggedCellError(InvalidSelectionError):
    """Reveal was requested on a flagged cell without confirmation."""


class InvalidPhaseError(MinefieldError):
    """Action submitted after the game has been won or lost."""


class PlacementError(MinefieldError):
    """Mines were already placed on this board."""
