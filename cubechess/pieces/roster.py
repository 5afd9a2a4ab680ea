"""Roster of live units.

Lookups are linear scans; a game never holds more than a few dozen units.
Capturing is a soft delete (``dead = True``) followed by a sweep with
``remove_dead_units``. The search removes and re-adds units directly.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import KIND_DTYPE, TEAM_DTYPE, Team
from cubechess.pieces.piece import Unit

logger = logging.getLogger(__name__)


class Units:
    __slots__ = ('_units',)

    def __init__(self, units: Optional[List[Unit]] = None):
        self._units: List[Unit] = list(units) if units else []

    def get_unit(self, coords: CellCoordinates) -> Optional[Unit]:
        for unit in self._units:
            if not unit.dead and unit.coords == coords:
                return unit
        return None

    def get_units(self, coords_list: List[CellCoordinates]) -> List[Optional[Unit]]:
        """One entry per requested coordinate, in request order."""
        by_coords = {unit.coords: unit for unit in self._units if not unit.dead}
        return [by_coords.get(coords) for coords in coords_list]

    def get_unit_from_entity(self, entity: Any) -> Optional[Unit]:
        if entity is None:
            return None
        for unit in self._units:
            if unit.entity is not None and unit.entity == entity:
                return unit
        return None

    def is_unit_at(self, coords: CellCoordinates) -> bool:
        return self.get_unit(coords) is not None

    def add_unit(self, unit: Unit) -> None:
        self._units.append(unit)

    def remove_unit(self, coords: CellCoordinates) -> Optional[Unit]:
        """Physically remove and return the live unit at ``coords``, if any."""
        for i, unit in enumerate(self._units):
            if not unit.dead and unit.coords == coords:
                return self._units.pop(i)
        return None

    def index_of(self, coords: CellCoordinates) -> int:
        """Roster position of the live unit at ``coords``, or -1."""
        for i, unit in enumerate(self._units):
            if not unit.dead and unit.coords == coords:
                return i
        return -1

    def insert_unit(self, index: int, unit: Unit) -> None:
        """Put ``unit`` back at a known roster position (undo of a removal)."""
        self._units.insert(index, unit)

    def remove_dead_units(self) -> int:
        before = len(self._units)
        self._units = [unit for unit in self._units if not unit.dead]
        return before - len(self._units)

    def all_units(self) -> Iterator[Unit]:
        return (unit for unit in self._units if not unit.dead)

    def units_of(self, team: Team) -> List[Unit]:
        return [unit for unit in self._units if not unit.dead and unit.team == team]

    def copy(self) -> 'Units':
        """Deep copy; visual handles are shared as opaque values."""
        return Units([replace(unit) for unit in self._units])

    def snapshot(self) -> frozenset:
        """Set of (coords, type, team, dead) tuples for equality checks."""
        return frozenset(unit.snapshot() for unit in self._units)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Kinds and teams of the live units as parallel integer arrays."""
        live = [unit for unit in self._units if not unit.dead]
        kinds = np.fromiter((int(unit.kind) for unit in live), dtype=KIND_DTYPE, count=len(live))
        teams = np.fromiter((int(unit.team) for unit in live), dtype=TEAM_DTYPE, count=len(live))
        return kinds, teams

    def __len__(self) -> int:
        return sum(1 for unit in self._units if not unit.dead)

    def __iter__(self) -> Iterator[Unit]:
        return self.all_units()


__all__ = ['Units']
