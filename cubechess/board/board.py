# cubechess/board/board.py
"""Board of the cube: one Cell per surface position."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, List, Optional

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import CellColor

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Cell:
    """Static and transient state of one cell.

    ``plane`` is an opaque handle owned by the renderer; it is never
    dereferenced here, only handed back.
    """
    coords: CellCoordinates
    color: CellColor
    plane: Optional[Any] = None
    selected_unit_can_move_to: bool = False
    walkable: bool = True

    def set_plane(self, plane: Any) -> None:
        self.plane = plane


def cell_color_for(coords: CellCoordinates) -> CellColor:
    """Three-colouring: in-face neighbours always differ, faces are offset by their axis."""
    in_face = sum(coords.axes())
    return CellColor((in_face + coords.normal_direction().axis_num()) % 3)


def iter_surface_coords(side_length: int) -> Iterator[CellCoordinates]:
    """Every surface position: 6 faces of side_length**2 cells."""
    for normal_axis in range(3):
        for normal_is_positive in (True, False):
            for a in range(1, side_length + 1):
                for b in range(1, side_length + 1):
                    values = [a, b]
                    values.insert(normal_axis, 0)
                    yield CellCoordinates(values[0], values[1], values[2], normal_is_positive)


class Board:
    """Mapping from coordinates to cells, plus the cube's side length.

    Built once per game; afterwards only the per-cell highlight flags change.
    """
    __slots__ = ('_cells', 'side_length')

    def __init__(self, side_length: int):
        self._cells: Dict[CellCoordinates, Cell] = {}
        self.side_length = side_length

    @classmethod
    def build(cls, side_length: int) -> 'Board':
        """Create a board with every surface cell populated."""
        board = cls(side_length)
        for coords in iter_surface_coords(side_length):
            board.new_cell(coords, Cell(coords=coords, color=cell_color_for(coords)))
        logger.debug(f"Built board with side length {side_length} ({len(board)} cells)")
        return board

    def new_cell(self, coords: CellCoordinates, cell: Cell) -> None:
        self._cells[coords] = cell

    def get_cell(self, coords: CellCoordinates) -> Optional[Cell]:
        """Cell at ``coords`` or None if it is not on this board."""
        return self._cells.get(coords)

    def get_cell_mut(self, coords: CellCoordinates) -> Optional[Cell]:
        """Alias for get_cell(); cells are mutable in place."""
        return self.get_cell(coords)

    def get_all_cells(self) -> List[Cell]:
        return list(self._cells.values())

    def get_all_cells_mut(self) -> List[Cell]:
        """Alias for get_all_cells()."""
        return self.get_all_cells()

    def all_cells_on_same_side(self, coords: CellCoordinates) -> List[CellCoordinates]:
        normal = coords.normal_direction()
        return [c for c in self._cells if c.normal_direction() == normal]

    def clear_highlights(self) -> None:
        for cell in self._cells.values():
            cell.selected_unit_can_move_to = False

    def highlight(self, destinations) -> int:
        """Flag ``destinations`` as reachable; returns how many were on the board."""
        self.clear_highlights()
        count = 0
        for coords in destinations:
            cell = self._cells.get(coords)
            if cell is None:
                logger.warning(f"Cannot highlight {coords!r}: no such cell")
                continue
            cell.selected_unit_can_move_to = True
            count += 1
        return count

    def copy(self) -> 'Board':
        """Independent copy; cells are duplicated, renderer handles are shared."""
        new_board = Board(self.side_length)
        for coords, cell in self._cells.items():
            new_board._cells[coords] = replace(cell)
        return new_board

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coords: CellCoordinates) -> bool:
        return coords in self._cells


__all__ = ['Board', 'Cell', 'cell_color_for', 'iter_surface_coords']
