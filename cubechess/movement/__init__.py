"""Import all move generators to register them with the dispatcher."""
# cubechess/movement/__init__.py
from cubechess.movement.pieces.pawn import pawn_move_dispatcher
from cubechess.movement.pieces.knight import knight_move_dispatcher
from cubechess.movement.pieces.bishop import bishop_move_dispatcher
from cubechess.movement.pieces.rook import rook_move_dispatcher
from cubechess.movement.pieces.queen import queen_move_dispatcher
from cubechess.movement.pieces.kinglike import king_move_dispatcher
