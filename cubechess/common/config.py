# cubechess/common/config.py

"""Configuration settings for games and the search engine."""

from dataclasses import dataclass, field
from typing import Dict

from cubechess.common.shared_types import DEFAULT_MATERIAL_VALUES, Team, UnitKind

# The starting layout needs rows side_length-2 .. side_length on every face
MIN_SIDE_LENGTH = 3


@dataclass
class SearchConfig:
    """Configuration for the minimax search."""
    depth: int = 2
    material_values: Dict[UnitKind, float] = field(
        default_factory=lambda: dict(DEFAULT_MATERIAL_VALUES)
    )
    use_pruning: bool = True
    use_move_ordering: bool = True

    def __post_init__(self):
        if self.depth < 1:
            raise ValueError("depth must be at least 1")
        missing = [kind.name for kind in UnitKind if kind not in self.material_values]
        if missing:
            raise ValueError(f"material_values is missing weights for {', '.join(missing)}")


@dataclass
class GameConfig:
    """Configuration for one game on the cube."""
    side_length: int = 4
    ai_team: Team = Team.BLACK
    ai_depth: int = 2

    def __post_init__(self):
        if self.side_length < MIN_SIDE_LENGTH:
            raise ValueError(f"side_length must be at least {MIN_SIDE_LENGTH}")
        if self.ai_depth < 1:
            raise ValueError("ai_depth must be at least 1")
        self.ai_team = Team(self.ai_team)

    def search_config(self) -> SearchConfig:
        return SearchConfig(depth=self.ai_depth)


__all__ = ['SearchConfig', 'GameConfig', 'MIN_SIDE_LENGTH']
