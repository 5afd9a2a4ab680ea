# pseudo_legal.py
"""Per-unit destination lists and whole-side move lists.

Raw destinations come from the registered dispatchers. They are filtered here:
a destination on the mover's own face (or any destination, for kinds that may
capture over an edge) is kept when empty or held by the enemy; a destination
on another face is kept only when empty. Friendly-occupied cells never
survive. Check is not considered, so these are pseudo-legal moves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import Team
from cubechess.movement.movepiece import GameMove
from cubechess.movement.registry import get_dispatcher

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

logger = logging.getLogger(__name__)


def _keep_destination(unit: Unit, coords: CellCoordinates, units: Units) -> bool:
    occupant = units.get_unit(coords)
    if occupant is None:
        return True
    if occupant.team == unit.team:
        return False
    return unit.coords.is_same_face(coords) or unit.kind.can_capture_over_edge()


def get_unit_moves(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    """Filtered, duplicate-free destinations of one unit (first occurrence wins)."""
    raw = get_dispatcher(unit.kind)(unit, board, units)
    seen = set()
    output: List[CellCoordinates] = []
    for coords in raw:
        if coords in seen:
            continue
        seen.add(coords)
        if _keep_destination(unit, coords, units):
            output.append(coords)
    return output


def get_possible_moves(board: Board, units: Units, team: Team) -> List[GameMove]:
    """Every pseudo-legal move of ``team``, in roster order."""
    moves: List[GameMove] = []
    for unit in units.units_of(team):
        for coords in get_unit_moves(unit, board, units):
            moves.append(GameMove(unit.coords, coords))
    logger.debug(f"{team.name} has {len(moves)} moves")
    return moves


__all__ = ['get_unit_moves', 'get_possible_moves']
