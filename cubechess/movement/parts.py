"""Building blocks for movement patterns on the cube surface.

Every walker shares the same budget rules: ``max_dist`` limits the number of
steps, ``max_edge_crossings`` the number of cube edges a walk may fold over,
and a walk stops at the first occupied cell it reaches.
"""

from __future__ import annotations

from typing import List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.geometry import CartesianDirection, RadialDirection
from cubechess.pieces.roster import Units

# Effectively unbounded distance for sliders
UNLIMITED = 10 ** 6


def get_cells_in_direction(
    coords: CellCoordinates,
    max_dist: int,
    max_edge_crossings: int,
    side_length: int,
    units: Units,
    direction: RadialDirection,
    include_other_unit_cells: bool,
) -> List[CellCoordinates]:
    """Walk along a radial direction.

    With ``include_other_unit_cells`` the first occupied cell is reported
    (capture or block is decided later); without it the walk stops before it.
    """
    output: List[CellCoordinates] = []
    visited = {coords}
    latest = coords
    dist = 0
    edge_crossings = 0
    while True:
        step = latest.get_cell_in_radial_direction(direction, side_length)
        if step is None:
            break
        next_cell, crossed = step
        if next_cell in visited:
            break

        dist += 1
        if crossed:
            edge_crossings += 1
        if dist > max_dist or edge_crossings > max_edge_crossings:
            break

        occupied = units.is_unit_at(next_cell)
        if occupied and not include_other_unit_cells:
            break

        output.append(next_cell)
        visited.add(next_cell)
        if occupied:
            break
        latest = next_cell
    return output


def get_straight(
    coords: CellCoordinates,
    max_dist: int,
    max_edge_crossings: int,
    side_length: int,
    units: Units,
) -> List[CellCoordinates]:
    """Orthogonal lines along the four radial directions walkable on this face."""
    output: List[CellCoordinates] = []
    for direction in RadialDirection.directions():
        output.extend(get_cells_in_direction(
            coords, max_dist, max_edge_crossings, side_length, units, direction, True,
        ))
    return output


def get_diagonals(
    coords: CellCoordinates,
    max_dist: int,
    max_edge_crossings: int,
    side_length: int,
    units: Units,
) -> List[CellCoordinates]:
    """Diagonal lines along all 12 axis pairs.

    Pairs with a component along the face normal are undefined in the face
    itself, but from an edge cell the first step folds onto the next face and
    the second one then runs along that face.
    """
    output: List[CellCoordinates] = []
    for diagonal in CartesianDirection.diagonals():
        latest = coords
        dist = 0
        edge_crossings = 0
        while True:
            step = latest.get_diagonal(diagonal, side_length)
            if step is None:
                break
            next_cell, crossed = step
            if next_cell == coords or next_cell in output:
                break

            dist += 1
            if crossed:
                edge_crossings += 1
            if dist > max_dist or edge_crossings > max_edge_crossings:
                break

            output.append(next_cell)
            if units.is_unit_at(next_cell):
                break
            latest = next_cell
    return output


def get_knight_moves(
    coords: CellCoordinates,
    max_edge_crossings: int,
    side_length: int,
) -> List[CellCoordinates]:
    """Two steps along a radial direction, then one step to either side."""
    output: List[CellCoordinates] = []
    normal = coords.normal_direction()
    for radial in RadialDirection.directions():
        forward = radial.to_cartesian_direction(normal)
        if forward is None:
            continue

        first = coords.get_cell_in_radial_direction(radial, side_length)
        if first is None:
            continue
        second = first[0].get_cell_in_radial_direction(radial, side_length)
        if second is None:
            continue
        edge_crossings = int(first[1]) + int(second[1])
        if edge_crossings > max_edge_crossings:
            continue

        left_right = forward.get_perpendicular_axis(normal)
        for sideways in (left_right, left_right.opposite()):
            endpoint = second[0].get_cell_in_direction(sideways, side_length)
            if endpoint is None:
                continue
            if endpoint[1] and edge_crossings + 1 > max_edge_crossings:
                continue
            output.append(endpoint[0])
    return output


__all__ = [
    'UNLIMITED', 'get_cells_in_direction', 'get_straight',
    'get_diagonals', 'get_knight_moves',
]
