"""Direction algebra for the cube surface.

Two value types live here:

* ``CartesianDirection`` - the six signed unit axes.
* ``RadialDirection`` - a rotation about one of the world axes. On any face that
  is not perpendicular to the rotation axis it turns into a concrete cartesian
  step, and following it across edges keeps a piece on the same "ring" of the
  cube. Pawns store their forward direction this way so "forward" survives
  crossing onto another face.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from cubechess.common.shared_types import COORD_DTYPE

logger = logging.getLogger(__name__)

# Tolerance used when snapping float vectors back onto an axis
_AXIS_SNAP_TOLERANCE = 1e-4


class CartesianDirection(Enum):
    """Signed unit axis directions."""
    X = (1, 0, 0)
    NEG_X = (-1, 0, 0)
    Y = (0, 1, 0)
    NEG_Y = (0, -1, 0)
    Z = (0, 0, 1)
    NEG_Z = (0, 0, -1)

    def as_vector(self) -> np.ndarray:
        return np.array(self.value, dtype=COORD_DTYPE)

    def axis_num(self) -> int:
        """0, 1 or 2 for the x, y and z axes."""
        for i, component in enumerate(self.value):
            if component != 0:
                return i
        raise AssertionError("unreachable")

    def is_negative(self) -> bool:
        return sum(self.value) < 0

    def abs(self) -> 'CartesianDirection':
        """The positive direction on the same axis."""
        return CartesianDirection.from_axis_num(self.axis_num(), False)

    def opposite(self) -> 'CartesianDirection':
        return CartesianDirection(tuple(-c for c in self.value))

    def is_parallel_to(self, other: 'CartesianDirection') -> bool:
        return self.axis_num() == other.axis_num()

    def cross(self, other: 'CartesianDirection') -> Optional['CartesianDirection']:
        """Cross product, or None if the two directions share an axis."""
        if self.is_parallel_to(other):
            return None
        return CartesianDirection.from_vector(np.cross(self.as_vector(), other.as_vector()))

    def get_perpendicular_axis(self, other: 'CartesianDirection') -> Optional['CartesianDirection']:
        """Positive direction of the axis perpendicular to both, or None if parallel."""
        product = self.cross(other)
        return product.abs() if product is not None else None

    @staticmethod
    def from_axis_num(axis: int, negative: bool) -> 'CartesianDirection':
        value = [0, 0, 0]
        value[axis] = -1 if negative else 1
        return CartesianDirection(tuple(value))

    @staticmethod
    def from_vector(vector) -> Optional['CartesianDirection']:
        """Snap a (near) unit vector onto an axis direction.

        Returns None when the vector is not close to a single signed axis.
        """
        v = np.asarray(vector, dtype=np.float64)
        if v.shape != (3,):
            return None
        rounded = np.round(v)
        if not np.allclose(v, rounded, atol=_AXIS_SNAP_TOLERANCE):
            return None
        if np.count_nonzero(rounded) != 1 or np.abs(rounded).sum() != 1:
            return None
        return CartesianDirection(tuple(int(c) for c in rounded))

    @staticmethod
    def directions() -> List['CartesianDirection']:
        return list(CartesianDirection)

    @staticmethod
    def diagonals() -> List[Tuple['CartesianDirection', 'CartesianDirection']]:
        """The 12 unordered pairs of non-parallel directions.

        (A, B) and (B, A) reach the same cell, so only the pair whose first
        element comes first in ``directions()`` order is kept.
        """
        return list(_DIAGONALS)


def _build_diagonals() -> Tuple[Tuple[CartesianDirection, CartesianDirection], ...]:
    directions = list(CartesianDirection)
    pairs = []
    for i, first in enumerate(directions):
        for second in directions[i + 1:]:
            if not first.is_parallel_to(second):
                pairs.append((first, second))
    return tuple(pairs)


_DIAGONALS = _build_diagonals()


class RadialDirection(Enum):
    """Rotation about a world axis; the value is the signed rotation axis."""
    CLOCKWISE_X = (1, 0, 0)
    COUNTER_X = (-1, 0, 0)
    CLOCKWISE_Y = (0, 1, 0)
    COUNTER_Y = (0, -1, 0)
    CLOCKWISE_Z = (0, 0, 1)
    COUNTER_Z = (0, 0, -1)

    def rotation_axis(self) -> CartesianDirection:
        return CartesianDirection(self.value)

    def is_counterclockwise(self) -> bool:
        return self.rotation_axis().is_negative()

    def opposite(self) -> 'RadialDirection':
        return RadialDirection(self.rotation_axis().opposite().value)

    def to_cartesian_direction(self, normal: CartesianDirection) -> Optional[CartesianDirection]:
        """Step direction of this rotation on a face with the given outward normal.

        A point on the face moves along ``axis x normal``. Undefined (None) on the
        two faces whose normal is parallel to the rotation axis.
        """
        return self.rotation_axis().cross(normal)

    @staticmethod
    def directions() -> List['RadialDirection']:
        return list(RadialDirection)


def radial_direction_to_cartesian_direction(
    radial_direction: RadialDirection,
    normal: CartesianDirection,
) -> Optional[CartesianDirection]:
    """Checked variant of ``RadialDirection.to_cartesian_direction`` that warns on misuse."""
    if normal.is_parallel_to(radial_direction.rotation_axis()):
        logger.warning(
            f"radial direction {radial_direction.name} is on the same axis as normal {normal.name}"
        )
        return None
    return radial_direction.to_cartesian_direction(normal)


__all__ = [
    'CartesianDirection', 'RadialDirection', 'radial_direction_to_cartesian_direction',
]
