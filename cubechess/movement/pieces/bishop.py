"""Bishop - unbounded diagonal slider, may fold over one cube edge."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import UnitKind
from cubechess.movement.parts import UNLIMITED, get_diagonals
from cubechess.movement.registry import register

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

BISHOP_MAX_EDGE_CROSSINGS = 1


@register(UnitKind.BISHOP)
def bishop_move_dispatcher(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    return get_diagonals(unit.coords, UNLIMITED, BISHOP_MAX_EDGE_CROSSINGS, board.side_length, units)


__all__ = ['bishop_move_dispatcher', 'BISHOP_MAX_EDGE_CROSSINGS']
