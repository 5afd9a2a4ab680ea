"""Rook - unbounded orthogonal slider, may fold over one cube edge."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import UnitKind
from cubechess.movement.parts import UNLIMITED, get_straight
from cubechess.movement.registry import register

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

ROOK_MAX_EDGE_CROSSINGS = 1


@register(UnitKind.ROOK)
def rook_move_dispatcher(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    return get_straight(unit.coords, UNLIMITED, ROOK_MAX_EDGE_CROSSINGS, board.side_length, units)


__all__ = ['rook_move_dispatcher', 'ROOK_MAX_EDGE_CROSSINGS']
