# cubechess/ai/search.py
"""Depth-limited negamax search with alpha-beta pruning.

Scores are always from the point of view of the side to move. The window is
fail-soft: a node may return a value outside (alpha, beta), and the sibling
loop breaks as soon as ``alpha >= beta``. The search mutates its own copy of
the roster with make/unmake; the caller's state is never touched.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from cubechess.ai.evaluation import evaluate_for
from cubechess.board.board import Board
from cubechess.common.config import SearchConfig
from cubechess.common.shared_types import Team, material_table
from cubechess.movement.movepiece import GameMove
from cubechess.movement.pseudo_legal import get_possible_moves
from cubechess.pieces.piece import Unit, UnitType
from cubechess.pieces.roster import Units

logger = logging.getLogger(__name__)

INF = float('inf')

HINT_PRIORITY = 2
CAPTURE_PRIORITY = 1
QUIET_PRIORITY = 0


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


@dataclass
class AICache:
    """Best continuation found by the previous search of this player."""
    last_variation: List[GameMove] = field(default_factory=list)


@dataclass
class UndoRecord:
    """What ``unmake_move`` needs to restore the roster exactly."""
    move: GameMove
    previous_type: UnitType
    captured: Optional[Unit] = None
    captured_index: int = -1


@dataclass
class SearchContext:
    config: SearchConfig
    table: np.ndarray
    stats: SearchStats = field(default_factory=SearchStats)
    hint: List[GameMove] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: SearchConfig, hint: Optional[List[GameMove]] = None) -> 'SearchContext':
        return cls(config, material_table(config.material_values), hint=list(hint or []))

    def hint_at(self, ply: int) -> Optional[GameMove]:
        if ply < len(self.hint):
            return self.hint[ply]
        return None


def make_move(move: GameMove, units: Units) -> Tuple[bool, Optional[UndoRecord]]:
    """Apply ``move`` in place. ``(False, None)`` when no unit stands on ``from``."""
    mover = units.get_unit(move.from_coord)
    if mover is None:
        return False, None

    captured_index = units.index_of(move.to_coord)
    captured = units.remove_unit(move.to_coord) if captured_index >= 0 else None

    record = UndoRecord(move, mover.unit_type, captured, captured_index)
    mover.move_unit_to(move.to_coord)
    mover.unit_type = mover.unit_type.after_move()
    return True, record


def unmake_move(record: UndoRecord, units: Units) -> None:
    mover = units.get_unit(record.move.to_coord)
    if mover is None:
        logger.error(f"unmake_move found no unit on {record.move.to_coord!r} for {record.move}")
        raise RuntimeError(f"Search state corrupted while undoing {record.move}")
    mover.move_unit_to(record.move.from_coord)
    mover.unit_type = record.previous_type
    if record.captured is not None:
        units.insert_unit(record.captured_index, record.captured)


@contextmanager
def applied_move(move: GameMove, units: Units) -> Iterator[bool]:
    """Apply ``move`` for the duration of the block; always undone on exit."""
    ok, record = make_move(move, units)
    try:
        yield ok
    finally:
        if ok:
            unmake_move(record, units)


def sort_moves(
    moves: List[GameMove],
    units: Units,
    hint: Optional[GameMove],
    table: np.ndarray,
) -> List[GameMove]:
    """Hint move first, then captures (most valuable victim first), then quiet moves."""
    def key(move: GameMove) -> Tuple[int, float]:
        if hint is not None and move == hint:
            return HINT_PRIORITY, 0.0
        victim = units.get_unit(move.to_coord)
        if victim is not None:
            return CAPTURE_PRIORITY, float(table[int(victim.kind)])
        return QUIET_PRIORITY, 0.0

    return sorted(moves, key=key, reverse=True)


def eval_recursive(
    board: Board,
    units: Units,
    team: Team,
    depth: int,
    alpha: float,
    beta: float,
    ctx: Optional[SearchContext] = None,
    ply: int = 0,
) -> Tuple[float, List[GameMove]]:
    """Negamax value of the position for ``team`` and the line that achieves it."""
    if ctx is None:
        ctx = SearchContext.from_config(SearchConfig(depth=max(depth, 1)))
    ctx.stats.nodes += 1

    if depth == 0:
        return evaluate_for(units, team, ctx.table), []

    moves = get_possible_moves(board, units, team)
    if ctx.config.use_move_ordering:
        moves = sort_moves(moves, units, ctx.hint_at(ply), ctx.table)

    best_score = -INF
    best_line: List[GameMove] = []
    searched = 0
    for move in moves:
        with applied_move(move, units) as ok:
            if not ok:
                continue
            child_score, child_line = eval_recursive(
                board, units, team.opposite(), depth - 1, -beta, -alpha, ctx, ply + 1,
            )
        searched += 1
        score = -child_score
        if score > best_score:
            best_score = score
            best_line = [move] + child_line
        if score > alpha:
            alpha = score
        if ctx.config.use_pruning and alpha >= beta:
            ctx.stats.cutoffs += 1
            break

    if searched == 0:
        # No playable move: the position is scored as it stands
        return evaluate_for(units, team, ctx.table), []
    return best_score, best_line


def next_move(
    board: Board,
    units: Units,
    team: Team,
    depth: int,
    ai_cache: Optional[AICache] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[GameMove]:
    """Best move for ``team`` searched ``depth`` plies deep, or None without moves."""
    if config is None:
        config = SearchConfig(depth=depth)

    hint: List[GameMove] = []
    if ai_cache is not None and config.use_move_ordering:
        hint = ai_cache.last_variation[2:]
    ctx = SearchContext.from_config(config, hint)

    search_board = board.copy()
    search_units = units.copy()
    score, line = eval_recursive(search_board, search_units, team, depth, -INF, INF, ctx)

    if ai_cache is not None:
        ai_cache.last_variation = line

    best = line[0] if line else None
    logger.info(
        f"{team.name} searched depth {depth}: {ctx.stats.nodes} nodes, "
        f"{ctx.stats.cutoffs} cutoffs, score {score:.1f}, move {best}"
    )
    return best


__all__ = [
    'SearchStats', 'AICache', 'UndoRecord', 'SearchContext',
    'make_move', 'unmake_move', 'applied_move', 'sort_moves',
    'eval_recursive', 'next_move',
]
