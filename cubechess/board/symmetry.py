# cubechess/board/symmetry.py
"""Starting layout, mirrored between the two teams through the cube centre.

White is placed around the corner (n, n, n) on the +X, +Y and +Z faces; black
is its point reflection around the corner (1, 1, 1). A radial direction keeps
its meaning under point reflection, so mirrored pawns keep their direction.
"""

import logging
from typing import List, Tuple

from cubechess.common.config import MIN_SIDE_LENGTH
from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.geometry import RadialDirection
from cubechess.common.shared_types import Team
from cubechess.pieces.piece import BISHOP, KING, KNIGHT, QUEEN, ROOK, Unit, UnitType
from cubechess.pieces.roster import Units

logger = logging.getLogger(__name__)

Placement = Tuple[UnitType, Team, CellCoordinates]


def white_setup(side_length: int) -> List[Placement]:
    """White's pieces; every pawn faces away from white's corner."""
    if side_length < MIN_SIDE_LENGTH:
        raise ValueError(f"side_length must be at least {MIN_SIDE_LENGTH}")
    n = side_length
    w = Team.WHITE
    return [
        # +Y face
        (KING, w, CellCoordinates(n, 0, n)),
        (BISHOP, w, CellCoordinates(n - 1, 0, n)),
        (KNIGHT, w, CellCoordinates(n, 0, n - 1)),
        (UnitType.pawn(RadialDirection.CLOCKWISE_Z), w, CellCoordinates(n - 2, 0, n)),
        (UnitType.pawn(RadialDirection.COUNTER_X), w, CellCoordinates(n, 0, n - 2)),
        # +X face
        (QUEEN, w, CellCoordinates(0, n, n)),
        (KNIGHT, w, CellCoordinates(0, n - 1, n)),
        (BISHOP, w, CellCoordinates(0, n, n - 1)),
        (UnitType.pawn(RadialDirection.COUNTER_Z), w, CellCoordinates(0, n - 2, n)),
        (UnitType.pawn(RadialDirection.CLOCKWISE_Y), w, CellCoordinates(0, n, n - 2)),
        # +Z face
        (ROOK, w, CellCoordinates(n, n, 0)),
        (BISHOP, w, CellCoordinates(n - 1, n, 0)),
        (KNIGHT, w, CellCoordinates(n, n - 1, 0)),
        (UnitType.pawn(RadialDirection.COUNTER_Y), w, CellCoordinates(n - 2, n, 0)),
        (UnitType.pawn(RadialDirection.CLOCKWISE_X), w, CellCoordinates(n, n - 2, 0)),
    ]


def mirror_placement(placement: Placement, side_length: int) -> Placement:
    unit_type, team, coords = placement
    return unit_type, team.opposite(), coords.opposite(side_length)


def starting_layout(side_length: int) -> List[Placement]:
    """All placements of both teams."""
    white = white_setup(side_length)
    black = [mirror_placement(p, side_length) for p in white]
    return white + black


def place_units(placements: List[Placement]) -> Units:
    units = Units()
    seen = set()
    for unit_type, team, coords in placements:
        if coords in seen:
            raise ValueError(f"Two units placed on {coords!r}")
        seen.add(coords)
        units.add_unit(Unit(unit_type=unit_type, team=team, coords=coords))
    logger.debug(f"Placed {len(units)} units")
    return units


def startpos_units(side_length: int) -> Units:
    return place_units(starting_layout(side_length))


__all__ = ['Placement', 'white_setup', 'mirror_placement', 'starting_layout',
           'place_units', 'startpos_units']
