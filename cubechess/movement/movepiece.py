"""Move value types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cubechess.common.coord_utils import CellCoordinates
from cubechess.pieces.piece import Unit


@dataclass(frozen=True, slots=True)
class GameMove:
    """A move from one cell to another; used for commits and inside the search."""
    from_coord: CellCoordinates
    to_coord: CellCoordinates

    def __str__(self) -> str:
        return f"{self.from_coord.display()}->{self.to_coord.display()}"


@dataclass(slots=True)
class MoveOutcome:
    """Result of committing a move.

    ``captured`` is the removed unit (its entity handle lets the caller despawn
    the visual); ``reason`` explains a rejection.
    """
    success: bool
    move: GameMove
    captured: Optional[Unit] = None
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


__all__ = ['GameMove', 'MoveOutcome']
