"""Knight - L-shaped leaper; ignores blockers and may capture over an edge."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import UnitKind
from cubechess.movement.parts import get_knight_moves
from cubechess.movement.registry import register

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

KNIGHT_MAX_EDGE_CROSSINGS = 1


@register(UnitKind.KNIGHT)
def knight_move_dispatcher(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    return get_knight_moves(unit.coords, KNIGHT_MAX_EDGE_CROSSINGS, board.side_length)


__all__ = ['knight_move_dispatcher', 'KNIGHT_MAX_EDGE_CROSSINGS']
