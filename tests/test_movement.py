import logging

import pytest

from cubechess.board.board import Board
from cubechess.board.symmetry import place_units, startpos_units
from cubechess.common.coord_utils import CellCoordinates as C
from cubechess.common.geometry import RadialDirection
from cubechess.common.shared_types import Team, UnitKind
from cubechess.movement.pseudo_legal import get_possible_moves, get_unit_moves
from cubechess.movement.registry import register, registered_kinds
from cubechess.pieces.piece import BISHOP, KING, KNIGHT, QUEEN, ROOK, UnitType

W, B = Team.WHITE, Team.BLACK
N = 4

ROOK_FROM_22 = {
    # own face
    C(3, 0, 2), C(4, 0, 2), C(1, 0, 2), C(2, 0, 3), C(2, 0, 4), C(2, 0, 1),
    # over x = n onto +X, then down that face
    C(0, 4, 2, True), C(0, 3, 2, True), C(0, 2, 2, True), C(0, 1, 2, True),
    # over x = 1 onto -X
    C(0, 4, 2, False), C(0, 3, 2, False), C(0, 2, 2, False), C(0, 1, 2, False),
    # over z = n onto +Z
    C(2, 4, 0, True), C(2, 3, 0, True), C(2, 2, 0, True), C(2, 1, 0, True),
    # over z = 1 onto -Z
    C(2, 4, 0, False), C(2, 3, 0, False), C(2, 2, 0, False), C(2, 1, 0, False),
}


def moves_of(placements, coords, side_length=N):
    board = Board.build(side_length)
    units = place_units(placements)
    return get_unit_moves(units.get_unit(coords), board, units)


def test_every_kind_has_a_generator():
    assert registered_kinds() == sorted(UnitKind)


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        register(UnitKind.ROOK)(lambda unit, board, units: [])


# ---------------------------------------------------------------------------
# Sliders
# ---------------------------------------------------------------------------
def test_rook_on_empty_board():
    moves = moves_of([(ROOK, W, C(2, 0, 2))], C(2, 0, 2))
    assert len(moves) == 22
    assert set(moves) == ROOK_FROM_22


def test_rook_blocked_by_friend():
    moves = moves_of([(ROOK, W, C(2, 0, 2)), (KNIGHT, W, C(3, 0, 2))], C(2, 0, 2))
    assert C(3, 0, 2) not in moves
    assert C(4, 0, 2) not in moves
    assert len(moves) == 16


def test_rook_captures_on_its_face():
    moves = moves_of([(ROOK, W, C(2, 0, 2)), (KNIGHT, B, C(2, 0, 4))], C(2, 0, 2))
    assert C(2, 0, 4) in moves
    assert C(2, 4, 0, True) not in moves
    assert len(moves) == 18


def test_bishop_on_empty_board():
    moves = moves_of([(BISHOP, W, C(2, 0, 2))], C(2, 0, 2))
    assert set(moves) == {
        C(3, 0, 3), C(4, 0, 4), C(3, 0, 1), C(1, 0, 3), C(1, 0, 1),
        C(4, 4, 0, False), C(0, 4, 4, False),
    }


def test_bishop_on_edge_folds_over_it():
    # (X, NEG_Y) leaves the +Y face over x = n and steps down the +X face
    moves = moves_of([(BISHOP, W, C(4, 0, 2))], C(4, 0, 2))
    assert C(0, 3, 2, True) in moves
    assert set(moves) == {
        C(0, 3, 2, True), C(0, 4, 3, True), C(0, 4, 1, True),
        C(3, 0, 3), C(2, 0, 4), C(1, 4, 0, True),
        C(3, 0, 1), C(2, 4, 0, False),
    }
    assert len(set(moves)) == len(moves)


def test_bishop_on_edge_cannot_take_over_it():
    moves = moves_of([(BISHOP, W, C(4, 0, 2)), (ROOK, B, C(0, 3, 2, True))], C(4, 0, 2))
    assert C(0, 3, 2, True) not in moves


def test_queen_combines_rook_and_bishop():
    moves = moves_of([(QUEEN, W, C(2, 0, 2))], C(2, 0, 2))
    assert len(moves) == 29
    assert len(set(moves)) == len(moves)
    assert ROOK_FROM_22 <= set(moves)


# ---------------------------------------------------------------------------
# Knight
# ---------------------------------------------------------------------------
def test_knight_on_empty_board():
    moves = moves_of([(KNIGHT, W, C(2, 0, 2))], C(2, 0, 2))
    assert set(moves) == {
        C(4, 0, 3), C(4, 0, 1),
        C(3, 0, 4), C(1, 0, 4),
        C(0, 4, 3, False), C(0, 4, 1, False),
        C(3, 4, 0, False), C(1, 4, 0, False),
    }


def test_only_the_knight_captures_over_an_edge():
    enemy = C(0, 4, 3, False)
    moves = moves_of([(KNIGHT, W, C(2, 0, 2)), (ROOK, B, enemy)], C(2, 0, 2))
    assert enemy in moves

    enemy = C(0, 4, 2, False)
    moves = moves_of([(ROOK, W, C(2, 0, 2)), (ROOK, B, enemy)], C(2, 0, 2))
    assert enemy not in moves
    assert C(1, 0, 2) in moves
    assert C(0, 3, 2, False) not in moves


def test_knight_never_lands_on_a_friend_over_an_edge():
    friend = C(0, 4, 3, False)
    moves = moves_of([(KNIGHT, W, C(2, 0, 2)), (ROOK, W, friend)], C(2, 0, 2))
    assert friend not in moves
    assert len(moves) == 7


# ---------------------------------------------------------------------------
# Pawn
# ---------------------------------------------------------------------------
PAWN_PLUS_X = UnitType.pawn(RadialDirection.COUNTER_Z)


def test_pawn_double_step_before_first_move():
    assert moves_of([(PAWN_PLUS_X, W, C(2, 0, 2))], C(2, 0, 2)) == [C(3, 0, 2), C(4, 0, 2)]


def test_pawn_single_step_after_moving():
    moved = PAWN_PLUS_X.after_move()
    assert moves_of([(moved, W, C(2, 0, 2))], C(2, 0, 2)) == [C(3, 0, 2)]


def test_pawn_push_is_blocked_not_capturing():
    assert moves_of([(PAWN_PLUS_X, W, C(2, 0, 2)), (ROOK, B, C(3, 0, 2))], C(2, 0, 2)) == []
    assert moves_of([(PAWN_PLUS_X, W, C(2, 0, 2)), (ROOK, B, C(4, 0, 2))], C(2, 0, 2)) == [C(3, 0, 2)]


def test_pawn_captures_diagonally_only():
    placements = [
        (PAWN_PLUS_X, W, C(2, 0, 2)),
        (ROOK, B, C(3, 0, 3)),
        (ROOK, W, C(3, 0, 1)),
    ]
    moves = moves_of(placements, C(2, 0, 2))
    assert C(3, 0, 3) in moves
    assert C(3, 0, 1) not in moves
    assert C(1, 0, 3) not in moves


def test_pawn_forward_follows_it_over_the_edge():
    moves = moves_of([(PAWN_PLUS_X, W, C(4, 0, 2))], C(4, 0, 2))
    assert moves == [C(0, 4, 2, True), C(0, 3, 2, True)]


def test_pawn_with_unwalkable_direction_has_no_moves(caplog):
    pawn = UnitType.pawn(RadialDirection.CLOCKWISE_Y)
    with caplog.at_level(logging.ERROR, logger='cubechess.movement.pieces.pawn'):
        assert moves_of([(pawn, W, C(2, 0, 2))], C(2, 0, 2)) == []
    assert "can't be walked" in caplog.text


# ---------------------------------------------------------------------------
# King
# ---------------------------------------------------------------------------
def test_king_on_empty_board():
    moves = moves_of([(KING, W, C(2, 0, 2))], C(2, 0, 2))
    assert len(moves) == 8
    assert all(m.is_same_face(C(2, 0, 2)) for m in moves)


def test_king_never_crosses_an_edge():
    moves = moves_of([(KING, W, C(4, 0, 2))], C(4, 0, 2))
    assert set(moves) == {C(3, 0, 2), C(4, 0, 3), C(4, 0, 1), C(3, 0, 3), C(3, 0, 1)}


def test_king_at_start():
    board = Board.build(N)
    units = startpos_units(N)
    king = units.get_unit(C(4, 0, 4, True))
    assert king.kind == UnitKind.KING and king.team == W
    moves = get_unit_moves(king, board, units)
    assert moves == [C(3, 0, 3, True)]
    assert len(moves) <= 8


# ---------------------------------------------------------------------------
# Whole side
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("team", [W, B])
def test_possible_moves_from_start(team):
    board = Board.build(N)
    units = startpos_units(N)
    moves = get_possible_moves(board, units, team)
    assert moves
    assert len(set(moves)) == len(moves)
    for move in moves:
        assert units.get_unit(move.from_coord).team == team
        target = units.get_unit(move.to_coord)
        assert target is None or target.team != team
        assert move.to_coord in board


def test_start_is_symmetric():
    board = Board.build(N)
    units = startpos_units(N)
    white = get_possible_moves(board, units, W)
    black = get_possible_moves(board, units, B)
    assert len(white) == len(black)
    mirrored = {(m.from_coord.opposite(N), m.to_coord.opposite(N)) for m in white}
    assert mirrored == {(m.from_coord, m.to_coord) for m in black}
