"""Game orchestration: the state object collaborators drive."""
from cubechess.game.gamestate import GameState
