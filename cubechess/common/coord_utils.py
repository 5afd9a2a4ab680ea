"""Cube-surface cell coordinates.

A cell is addressed by three axis offsets and a sign flag. Exactly one axis is 0:
that axis is the normal of the face the cell lies on, and ``normal_is_positive``
tells the two opposite faces on that axis apart. The other two axes hold
1-based positions in ``[1, side_length]``.

Stepping past ``side_length`` (or below 1) folds the step onto the neighbouring
face: the moving axis becomes the new normal and the old normal axis is pinned
to the boundary row of the new face.
"""

from __future__ import annotations

import logging
import string
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from cubechess.common.geometry import CartesianDirection, RadialDirection

if TYPE_CHECKING:
    from cubechess.board.board import Board

logger = logging.getLogger(__name__)

# A step result: the reached cell and whether the step crossed a cube edge
Step = Tuple['CellCoordinates', bool]


class CoordinateInvariantError(ValueError):
    """A CellCoordinates value does not have exactly one zero axis."""


@dataclass(frozen=True, slots=True, order=True)
class CellCoordinates:
    x: int
    y: int
    z: int
    normal_is_positive: bool = True

    def __post_init__(self):
        axes = (self.x, self.y, self.z)
        if any(v < 0 for v in axes):
            raise CoordinateInvariantError(f"Negative axis value in {self!r}")
        zeros = sum(1 for v in axes if v == 0)
        if zeros != 1:
            raise CoordinateInvariantError(
                f"CellCoordinates needs exactly one zero axis, got {zeros}: {self!r}"
            )

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError("axis index out of range")

    def axes(self) -> List[int]:
        return [self.x, self.y, self.z]

    def normal_direction(self) -> CartesianDirection:
        """Outward normal of the face this cell lies on."""
        if self.z == 0:
            return CartesianDirection.Z if self.normal_is_positive else CartesianDirection.NEG_Z
        if self.y == 0:
            return CartesianDirection.Y if self.normal_is_positive else CartesianDirection.NEG_Y
        if self.x == 0:
            return CartesianDirection.X if self.normal_is_positive else CartesianDirection.NEG_X
        raise CoordinateInvariantError(f"No zero field on CellCoordinates: {self!r}")

    def is_same_face(self, other: 'CellCoordinates') -> bool:
        return self.normal_direction() == other.normal_direction()

    def get_cell_in_direction(
        self, direction: CartesianDirection, side_length: int
    ) -> Optional[Step]:
        """One step along ``direction``; the flag reports an edge crossing.

        Steps along the face normal go into or out of the cube and are undefined.
        """
        normal = self.normal_direction()
        if normal.is_parallel_to(direction):
            return None

        axis = direction.axis_num()
        values = self.axes()
        relevant = values[axis] + direction.value[axis]

        normal_is_positive = self.normal_is_positive
        folded = False
        # Positions start at 1, 0 means "on the plane"
        if relevant <= 0:
            normal_is_positive = False
            relevant = 0
            folded = True
        elif relevant > side_length:
            normal_is_positive = True
            relevant = 0
            folded = True

        if folded:
            values[normal.axis_num()] = side_length if self.normal_is_positive else 1
        values[axis] = relevant

        return CellCoordinates(values[0], values[1], values[2], normal_is_positive), folded

    def get_cell_in_radial_direction(
        self, radial_direction: RadialDirection, side_length: int
    ) -> Optional[Step]:
        cartesian = radial_direction.to_cartesian_direction(self.normal_direction())
        if cartesian is None:
            # The rotation axis pierces this face; no walking direction here
            return None
        return self.get_cell_in_direction(cartesian, side_length)

    def get_diagonal(
        self,
        diagonal: Tuple[CartesianDirection, CartesianDirection],
        side_length: int,
    ) -> Optional[Step]:
        """Cell reached by stepping along both directions in turn.

        If both steps cross an edge we went around a cube corner and ended on a
        true neighbour, which is not a diagonal: None.
        """
        first = self.get_cell_in_direction(diagonal[0], side_length)
        if first is None:
            return None
        second = first[0].get_cell_in_direction(diagonal[1], side_length)
        if second is None:
            return None
        if first[1] and second[1]:
            return None
        return second[0], first[1] or second[1]

    def get_diagonal_radial(
        self, negative_axes: Tuple[bool, bool, bool], side_length: int
    ) -> Optional[Step]:
        """Diagonal picked by a sign per world axis; the normal axis' sign is ignored."""
        directions = [
            CartesianDirection.from_axis_num(axis, negative_axes[axis])
            for axis in range(3)
            if self[axis] != 0
        ]
        if len(directions) != 2:
            logger.error(f"Expected two in-face axes for {self!r}, got {len(directions)}")
            return None
        return self.get_diagonal((directions[0], directions[1]), side_length)

    def get_adjacent(self, side_length: int) -> List['CellCoordinates']:
        """The four orthogonal neighbours."""
        output = []
        for direction in CartesianDirection.directions():
            adjacent = self.get_cell_in_direction(direction, side_length)
            if adjacent is None:
                continue
            output.append(adjacent[0])
        if len(output) != 4:
            logger.warning(f"get_adjacent found {len(output)} neighbours for {self!r}")
        return output

    def opposite(self, side_length: int) -> 'CellCoordinates':
        """Point reflection through the centre of the cube."""
        values = [side_length + 1 - v if v != 0 else 0 for v in self.axes()]
        return CellCoordinates(values[0], values[1], values[2], not self.normal_is_positive)

    def get_cells_max_dist(
        self, max_dist: int, only_walkable: bool, board: 'Board'
    ) -> List['CellCoordinates']:
        """Breadth-first flood over the surface, up to ``max_dist`` steps away.

        The start cell is included. With ``only_walkable`` cells that are missing
        from the board or not walkable are neither reported nor expanded.
        """
        output = [self]
        seen = {self}
        queue = deque([(self, 0)])
        while queue:
            cell, dist = queue.popleft()
            if dist >= max_dist:
                continue
            for adjacent in cell.get_adjacent(board.side_length):
                if adjacent in seen:
                    continue
                seen.add(adjacent)
                if only_walkable:
                    board_cell = board.get_cell(adjacent)
                    if board_cell is None or not board_cell.walkable:
                        continue
                output.append(adjacent)
                queue.append((adjacent, dist + 1))
        return output

    def display(self) -> str:
        """Short label such as ``Yd4``: face axis (upper case if positive), then position."""
        label = "xyz"[self.normal_direction().axis_num()]
        if self.normal_is_positive:
            label = label.upper()
        in_face = [v for v in self.axes() if v != 0]
        return f"{label}{string.ascii_lowercase[in_face[0] - 1]}{in_face[1]}"

    def __str__(self) -> str:
        return self.display()


__all__ = ['CellCoordinates', 'CoordinateInvariantError', 'Step']
