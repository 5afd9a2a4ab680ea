"""Pawn movement.

Forward is the pawn's stored radial direction turned into a cartesian step on
whatever face the pawn currently stands on, so it follows the pawn around
edges. Pushes (one cell, two before the first move) never capture; diagonals
containing the forward direction are only reachable when an enemy stands there.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.geometry import CartesianDirection
from cubechess.common.shared_types import UnitKind
from cubechess.movement.parts import get_cells_in_direction
from cubechess.movement.registry import register

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

logger = logging.getLogger(__name__)

PAWN_MAX_EDGE_CROSSINGS = 2


def pawn_push_distance(has_moved: bool) -> int:
    return 1 if has_moved else 2


@register(UnitKind.PAWN)
def pawn_move_dispatcher(unit: Unit, board: Board, units: Units) -> List[CellCoordinates]:
    coords = unit.coords
    direction = unit.unit_type.direction
    normal = coords.normal_direction()
    forward = direction.to_cartesian_direction(normal)
    if forward is None:
        logger.error(
            f"Pawn has a direction that can't be walked in: coords {coords!r}, direction {direction.name}"
        )
        return []

    output = get_cells_in_direction(
        coords,
        pawn_push_distance(unit.unit_type.has_moved),
        PAWN_MAX_EDGE_CROSSINGS,
        board.side_length,
        units,
        direction,
        False,
    )

    for diagonal in CartesianDirection.diagonals():
        if forward not in diagonal:
            continue
        step = coords.get_diagonal(diagonal, board.side_length)
        if step is None:
            continue
        target = units.get_unit(step[0])
        if target is not None and target.team != unit.team:
            output.append(step[0])
    return output


__all__ = ['pawn_move_dispatcher', 'pawn_push_distance', 'PAWN_MAX_EDGE_CROSSINGS']
