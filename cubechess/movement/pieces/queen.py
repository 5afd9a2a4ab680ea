"""Queen - rook and bishop lines combined."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import UnitKind
from cubechess.movement.parts import UNLIMITED, get_diagonals, get_straight
from cubechess.movement.registry import register

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

QUEEN_MAX_EDGE_CROSSINGS = 1


@register(UnitKind.QUEEN)
def queen_move_dispatcher(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    n = board.side_length
    moves = get_straight(unit.coords, UNLIMITED, QUEEN_MAX_EDGE_CROSSINGS, n, units)
    moves.extend(get_diagonals(unit.coords, UNLIMITED, QUEEN_MAX_EDGE_CROSSINGS, n, units))
    return moves


__all__ = ['queen_move_dispatcher', 'QUEEN_MAX_EDGE_CROSSINGS']
