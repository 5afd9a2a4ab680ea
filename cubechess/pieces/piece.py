"""Unit model: a kind tag with per-instance pawn payload, and the unit itself."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.geometry import RadialDirection
from cubechess.common.shared_types import Team, UnitKind


@dataclass(frozen=True, slots=True)
class UnitType:
    """Tagged variant. Only pawns carry a payload: their radial forward
    direction and whether they have moved yet. The payload is replaced, never
    mutated, when the pawn moves.
    """
    kind: UnitKind
    direction: Optional[RadialDirection] = None
    has_moved: bool = False

    def __post_init__(self):
        if self.kind == UnitKind.PAWN and self.direction is None:
            raise ValueError("A pawn needs a radial forward direction")
        if self.kind != UnitKind.PAWN and (self.direction is not None or self.has_moved):
            raise ValueError(f"{self.kind.name} carries no pawn payload")

    @classmethod
    def pawn(cls, direction: RadialDirection, has_moved: bool = False) -> 'UnitType':
        return cls(UnitKind.PAWN, direction, has_moved)

    @classmethod
    def of(cls, kind: UnitKind) -> 'UnitType':
        return cls(UnitKind(kind))

    @property
    def is_pawn(self) -> bool:
        return self.kind == UnitKind.PAWN

    def after_move(self) -> 'UnitType':
        """Type of this unit once it has moved."""
        if self.is_pawn and not self.has_moved:
            return replace(self, has_moved=True)
        return self

    def model_name(self) -> str:
        return self.kind.name.lower()


ROOK = UnitType(UnitKind.ROOK)
BISHOP = UnitType(UnitKind.BISHOP)
KING = UnitType(UnitKind.KING)
KNIGHT = UnitType(UnitKind.KNIGHT)
QUEEN = UnitType(UnitKind.QUEEN)


@dataclass(slots=True)
class Unit:
    """One piece on the cube.

    ``entity`` is an opaque handle of the visual representation; it is only
    ever passed back to the renderer.
    """
    unit_type: UnitType
    team: Team
    coords: CellCoordinates
    entity: Optional[Any] = None
    dead: bool = False

    @property
    def kind(self) -> UnitKind:
        return self.unit_type.kind

    def set_entity(self, entity: Any) -> None:
        self.entity = entity

    def move_unit_to(self, coords: CellCoordinates) -> None:
        self.coords = coords

    def snapshot(self) -> tuple:
        """Comparable value of the game-relevant state."""
        return (self.coords, self.unit_type, self.team, self.dead)


__all__ = ['UnitType', 'Unit', 'ROOK', 'BISHOP', 'KING', 'KNIGHT', 'QUEEN']
