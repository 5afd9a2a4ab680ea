#!/usr/bin/env python3
"""
AI-versus-AI self-play on the cube.
Each ply:
  1. the side to move searches its best move
  2. the move is committed through the same path as a human move
  3. the move (and any capture) is printed
The game ends when a king is captured, a side has no move, or the ply limit is hit.
"""

import argparse
import logging

from cubechess.common.config import GameConfig
from cubechess.common.shared_types import Team, UnitKind
from cubechess.game.gamestate import GameState


def king_alive(state: GameState, team: Team) -> bool:
    return any(unit.kind == UnitKind.KING for unit in state.units.units_of(team))


def play(config: GameConfig, max_plies: int) -> GameState:
    state = GameState.new(config)
    for ply in range(1, max_plies + 1):
        team = state.turn
        outcome = state.ai_move(team)
        if outcome is None or not outcome.success:
            print(f"{team.name} has no move, stopping.")
            break
        line = f"{ply:3d}. {team.name:5s} {outcome.move}"
        if outcome.captured is not None:
            line += f"  x{outcome.captured.kind.name.lower()}"
        print(line)
        if not king_alive(state, team.opposite()):
            print(f"{team.name} captured the king.")
            break
    return state


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--side-length", type=int, default=4,
                        help="cells along one edge of the cube")
    parser.add_argument("--depth", type=int, default=2,
                        help="search depth in plies for both sides")
    parser.add_argument("--max-plies", type=int, default=40,
                        help="stop after this many plies")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        help="logging level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = GameConfig(side_length=args.side_length, ai_depth=args.depth)
    final = play(config, args.max_plies)
    print(final)
