# registry.py - one move generator per unit kind
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List

from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import UnitKind

if TYPE_CHECKING:
    from cubechess.board.board import Board
    from cubechess.pieces.piece import Unit
    from cubechess.pieces.roster import Units

Dispatcher = Callable[["Unit", "Board", "Units"], List[CellCoordinates]]

_REGISTRY: Dict[UnitKind, Dispatcher] = {}


def register(kind: UnitKind):
    def _decorator(fn: Dispatcher) -> Dispatcher:
        if kind in _REGISTRY:
            raise ValueError(f"Dispatcher for {kind.name} already registered.")
        _REGISTRY[kind] = fn
        return fn
    return _decorator


def get_dispatcher(kind: UnitKind) -> Dispatcher:
    try:
        return _REGISTRY[kind]
    except KeyError:
        raise ValueError(f"No dispatcher registered for {kind.name}.") from None


def registered_kinds() -> List[UnitKind]:
    return sorted(_REGISTRY)


__all__ = ["register", "get_dispatcher", "registered_kinds", "Dispatcher"]
