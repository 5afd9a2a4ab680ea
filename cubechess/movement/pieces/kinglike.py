"""King - one step in any straight or diagonal direction, never over an edge."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import UnitKind
from cubechess.movement.parts import get_diagonals, get_straight
from cubechess.movement.registry import register

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

KING_MAX_DIST = 1
KING_MAX_EDGE_CROSSINGS = 0


@register(UnitKind.KING)
def king_move_dispatcher(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    n = board.side_length
    moves = get_straight(unit.coords, KING_MAX_DIST, KING_MAX_EDGE_CROSSINGS, n, units)
    moves.extend(get_diagonals(unit.coords, KING_MAX_DIST, KING_MAX_EDGE_CROSSINGS, n, units))
    return moves


__all__ = ['king_move_dispatcher', 'KING_MAX_DIST', 'KING_MAX_EDGE_CROSSINGS']
