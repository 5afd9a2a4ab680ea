import unittest

import numpy as np
import pytest

from cubechess.ai.evaluation import DEFAULT_MATERIAL_TABLE, _material_balance_kernel, evaluate_for, evaluation
from cubechess.ai.search import (
    INF,
    AICache,
    SearchContext,
    UndoRecord,
    applied_move,
    eval_recursive,
    make_move,
    next_move,
    sort_moves,
    unmake_move,
)
from cubechess.board.board import Board
from cubechess.board.symmetry import place_units, startpos_units
from cubechess.common.config import SearchConfig
from cubechess.common.coord_utils import CellCoordinates as C
from cubechess.common.geometry import RadialDirection
from cubechess.common.shared_types import KIND_DTYPE, TEAM_DTYPE, Team, UnitKind
from cubechess.movement.movepiece import GameMove
from cubechess.movement.pseudo_legal import get_possible_moves
from cubechess.pieces.piece import BISHOP, KING, KNIGHT, QUEEN, ROOK, UnitType

W, B = Team.WHITE, Team.BLACK
N = 4
PAWN_PLUS_X = UnitType.pawn(RadialDirection.COUNTER_Z)


def roster_state(units):
    """Roster contents in roster order."""
    return [u.snapshot() for u in units]


def hanging_queen():
    return place_units([
        (ROOK, W, C(2, 0, 2)),
        (KING, W, C(4, 0, 4)),
        (QUEEN, B, C(2, 0, 4)),
        (KING, B, C(1, 0, 1, False)),
    ])


def small_position():
    return place_units([
        (KING, W, C(4, 0, 4)),
        (ROOK, W, C(2, 0, 2)),
        (PAWN_PLUS_X, W, C(1, 0, 3)),
        (KNIGHT, W, C(0, 2, 2)),
        (KING, B, C(1, 0, 1, False)),
        (BISHOP, B, C(2, 0, 4)),
        (KNIGHT, B, C(3, 0, 1)),
        (UnitType.pawn(RadialDirection.CLOCKWISE_Z), B, C(3, 0, 3)),
    ])


class TestEvaluation(unittest.TestCase):
    def test_start_is_balanced(self):
        self.assertEqual(evaluation(startpos_units(N)), 0.0)

    def test_material_difference(self):
        units = startpos_units(N)
        queen = next(u for u in units.units_of(B) if u.kind == UnitKind.QUEEN)
        units.remove_unit(queen.coords)
        self.assertEqual(evaluation(units), 9.0)
        self.assertEqual(evaluate_for(units, W), 9.0)
        self.assertEqual(evaluate_for(units, B), -9.0)

    def test_kernel(self):
        kinds = np.array([UnitKind.KING, UnitKind.PAWN, UnitKind.ROOK], dtype=KIND_DTYPE)
        teams = np.array([W, W, B], dtype=TEAM_DTYPE)
        self.assertEqual(_material_balance_kernel(kinds, teams, DEFAULT_MATERIAL_TABLE), 996.0)

    def test_empty_roster(self):
        self.assertEqual(evaluation(place_units([])), 0.0)


class TestMakeUnmake(unittest.TestCase):
    def test_round_trip_for_every_start_move(self):
        board = Board.build(N)
        units = startpos_units(N)
        before = roster_state(units)
        for team in (W, B):
            for move in get_possible_moves(board, units, team):
                ok, record = make_move(move, units)
                self.assertTrue(ok)
                self.assertTrue(units.is_unit_at(move.to_coord))
                unmake_move(record, units)
                self.assertEqual(roster_state(units), before)

    def test_capture_round_trip(self):
        units = hanging_queen()
        before = units.snapshot()
        ok, record = make_move(GameMove(C(2, 0, 2), C(2, 0, 4)), units)
        self.assertTrue(ok)
        self.assertEqual(record.captured.kind, UnitKind.QUEEN)
        self.assertEqual(len(units), 3)
        self.assertEqual(units.get_unit(C(2, 0, 4)).kind, UnitKind.ROOK)
        unmake_move(record, units)
        self.assertEqual(units.snapshot(), before)

    def test_pawn_payload_is_restored(self):
        units = place_units([(PAWN_PLUS_X, W, C(2, 0, 2))])
        ok, record = make_move(GameMove(C(2, 0, 2), C(4, 0, 2)), units)
        self.assertTrue(ok)
        self.assertTrue(units.get_unit(C(4, 0, 2)).unit_type.has_moved)
        unmake_move(record, units)
        self.assertFalse(units.get_unit(C(2, 0, 2)).unit_type.has_moved)

    def test_move_from_empty_cell_fails(self):
        units = hanging_queen()
        before = roster_state(units)
        self.assertEqual(make_move(GameMove(C(3, 0, 3), C(3, 0, 4)), units), (False, None))
        self.assertEqual(roster_state(units), before)

    def test_unmake_of_missing_unit_raises(self):
        units = hanging_queen()
        record = UndoRecord(GameMove(C(2, 0, 2), C(3, 0, 3)), ROOK)
        with self.assertRaises(RuntimeError):
            unmake_move(record, units)

    def test_applied_move_undoes_on_error(self):
        units = hanging_queen()
        before = roster_state(units)
        with self.assertRaises(KeyError):
            with applied_move(GameMove(C(2, 0, 2), C(2, 0, 4)), units) as ok:
                self.assertTrue(ok)
                self.assertEqual(len(units), 3)
                raise KeyError("boom")
        self.assertEqual(roster_state(units), before)


def test_sort_moves_puts_hint_then_captures_first():
    units = hanging_queen()
    board = Board.build(N)
    moves = get_possible_moves(board, units, W)
    capture = GameMove(C(2, 0, 2), C(2, 0, 4))
    hint = GameMove(C(4, 0, 4), C(3, 0, 3))
    ordered = sort_moves(moves, units, hint, DEFAULT_MATERIAL_TABLE)
    assert ordered[0] == hint
    assert ordered[1] == capture
    assert sorted(ordered, key=str) == sorted(moves, key=str)


@pytest.mark.parametrize("depth", [1, 2])
def test_search_takes_hanging_queen(depth):
    board = Board.build(N)
    units = hanging_queen()
    move = next_move(board, units, W, depth)
    assert move == GameMove(C(2, 0, 2), C(2, 0, 4))


def test_search_does_not_touch_caller_state():
    board = Board.build(N)
    units = small_position()
    before = roster_state(units)
    next_move(board, units, W, 2)
    assert roster_state(units) == before
    assert not any(cell.selected_unit_can_move_to for cell in board.get_all_cells())


def test_cache_keeps_best_line():
    board = Board.build(N)
    units = small_position()
    cache = AICache()
    move = next_move(board, units, W, 2, cache)
    assert len(cache.last_variation) == 2
    assert cache.last_variation[0] == move


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruning_matches_full_minimax(depth):
    board = Board.build(N)
    results = []
    for use_pruning in (True, False):
        units = small_position()
        ctx = SearchContext.from_config(SearchConfig(depth=depth, use_pruning=use_pruning))
        score, line = eval_recursive(board, units, W, depth, -INF, INF, ctx)
        results.append((score, line[0], ctx.stats))
    (pruned_score, pruned_move, pruned_stats), (full_score, full_move, full_stats) = results
    assert pruned_score == full_score
    assert pruned_move == full_move
    assert full_stats.cutoffs == 0
    assert pruned_stats.nodes <= full_stats.nodes


def test_pruning_matches_without_move_ordering():
    board = Board.build(N)
    scores = []
    for config in (SearchConfig(depth=2), SearchConfig(depth=2, use_pruning=False, use_move_ordering=False)):
        ctx = SearchContext.from_config(config)
        scores.append(eval_recursive(board, small_position(), B, 2, -INF, INF, ctx)[0])
    assert scores[0] == scores[1]


def test_depth_zero_is_static_evaluation():
    units = hanging_queen()
    # rook 5 against queen 9, seen from black
    score, line = eval_recursive(Board.build(N), units, B, 0, -INF, INF)
    assert score == 4.0
    assert line == []


def test_side_without_units_scores_statically():
    units = place_units([(KING, W, C(4, 0, 4))])
    score, line = eval_recursive(Board.build(N), units, B, 2, -INF, INF)
    assert line == []
    assert score == -1000.0


if __name__ == '__main__':
    unittest.main()
