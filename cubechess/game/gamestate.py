# gamestate.py
"""Game state owned by the orchestration layer.

Holds the canonical board, roster and side to move. Human selections and
commits, as well as the AI turn, all go through this object; the movement and
search code only ever receive its board and roster as arguments.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from cubechess.ai.search import AICache, next_move
from cubechess.board.board import Board
from cubechess.board.symmetry import startpos_units
from cubechess.common.config import GameConfig
from cubechess.common.coord_utils import CellCoordinates
from cubechess.common.shared_types import Team
from cubechess.movement.movepiece import GameMove, MoveOutcome
from cubechess.movement.pseudo_legal import get_possible_moves, get_unit_moves
from cubechess.pieces.roster import Units

logger = logging.getLogger(__name__)


class GameState:
    __slots__ = ('config', 'board', 'units', 'turn', 'history', 'ai_caches', 'selected')

    def __init__(self, board: Board, units: Units, turn: Team = Team.WHITE,
                 config: Optional[GameConfig] = None):
        if board is None:
            raise ValueError("Board cannot be None")
        self.config = config if config is not None else GameConfig(side_length=board.side_length)
        self.board = board
        self.units = units
        self.turn = Team(turn)
        self.history: List[GameMove] = []
        self.ai_caches: Dict[Team, AICache] = {team: AICache() for team in Team}
        self.selected: Optional[CellCoordinates] = None

    @classmethod
    def new(cls, config: Optional[GameConfig] = None) -> 'GameState':
        """Fresh game in the starting layout; white moves first."""
        config = config if config is not None else GameConfig()
        board = Board.build(config.side_length)
        units = startpos_units(config.side_length)
        logger.info(f"New game: side length {config.side_length}, {len(units)} units")
        return cls(board, units, Team.WHITE, config)

    @classmethod
    def from_startpos(cls, side_length: int = 4) -> 'GameState':
        return cls.new(GameConfig(side_length=side_length))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def legal_moves_for(self, coords: CellCoordinates) -> List[CellCoordinates]:
        """Destinations of the unit on ``coords``; empty if the cell is empty."""
        unit = self.units.get_unit(coords)
        if unit is None:
            return []
        return get_unit_moves(unit, self.board, self.units)

    def legal_moves(self) -> List[GameMove]:
        return get_possible_moves(self.board, self.units, self.turn)

    def select(self, coords: CellCoordinates) -> int:
        """Select the unit on ``coords`` and highlight its destinations.

        Selecting an empty cell or an opposing unit clears the selection.
        Returns the number of highlighted cells.
        """
        unit = self.units.get_unit(coords)
        if unit is None or unit.team != self.turn:
            self.clear_selection()
            return 0
        self.selected = coords
        return self.board.highlight(get_unit_moves(unit, self.board, self.units))

    def clear_selection(self) -> None:
        self.selected = None
        self.board.clear_highlights()

    # ------------------------------------------------------------------
    # Commits
    # ------------------------------------------------------------------
    def _reject(self, move: GameMove, reason: str) -> MoveOutcome:
        logger.debug(f"Rejected {move}: {reason}")
        return MoveOutcome(False, move, reason=reason)

    def make_move(self, move: GameMove) -> MoveOutcome:
        """Validate and apply ``move`` for the side to move."""
        unit = self.units.get_unit(move.from_coord)
        if unit is None:
            return self._reject(move, f"no unit on {move.from_coord.display()}")
        if unit.team != self.turn:
            return self._reject(move, f"it is {self.turn.name}'s turn")
        if move.to_coord not in get_unit_moves(unit, self.board, self.units):
            return self._reject(move, f"{unit.kind.name} cannot move to {move.to_coord.display()}")

        captured = self.units.get_unit(move.to_coord)
        if captured is not None:
            captured.dead = True
            self.units.remove_dead_units()

        unit.move_unit_to(move.to_coord)
        unit.unit_type = unit.unit_type.after_move()
        self.history.append(move)
        self.clear_selection()

        if captured is not None:
            logger.info(f"{self.turn.name} {unit.kind.name} {move} captures {captured.kind.name}")
        else:
            logger.info(f"{self.turn.name} {unit.kind.name} {move}")
        self.turn = self.turn.opposite()
        return MoveOutcome(True, move, captured=captured)

    def ai_move(self, team: Optional[Team] = None) -> Optional[MoveOutcome]:
        """Search for ``team`` (the configured AI team by default) and commit the result.

        Returns None when it is not that team's turn or it has no move.
        """
        team = self.config.ai_team if team is None else Team(team)
        if team != self.turn:
            logger.debug(f"ai_move for {team.name} ignored, {self.turn.name} is to move")
            return None
        move = next_move(self.board, self.units, team, self.config.ai_depth, self.ai_caches[team],
                         self.config.search_config())
        if move is None:
            return None
        return self.make_move(move)

    def clone(self) -> 'GameState':
        clone = GameState(self.board.copy(), self.units.copy(), self.turn, self.config)
        clone.history = list(self.history)
        return clone

    def __str__(self) -> str:
        return (f"GameState(turn={self.turn.name}, units={len(self.units)}, "
                f"moves={len(self.history)})")


__all__ = ['GameState']
