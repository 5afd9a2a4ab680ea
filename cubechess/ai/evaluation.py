# cubechess/ai/evaluation.py
"""Static material evaluation (white-positive)."""

import logging

import numpy as np
from numba import njit

from cubechess.common.shared_types import DEFAULT_MATERIAL_VALUES, FLOAT_DTYPE, Team, material_table
from cubechess.pieces.roster import Units

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL_TABLE = material_table(DEFAULT_MATERIAL_VALUES)


@njit(cache=True, fastmath=True)
def _material_balance_kernel(kinds: np.ndarray, teams: np.ndarray, table: np.ndarray) -> float:
    """Sum of white material minus black material."""
    total = 0.0
    for i in range(kinds.shape[0]):
        value = table[kinds[i]]
        if teams[i] == 1:
            total += value
        else:
            total -= value
    return total


def evaluation(units: Units, table: np.ndarray = DEFAULT_MATERIAL_TABLE) -> float:
    """Material balance of the live units, positive when white is ahead."""
    kinds, teams = units.to_arrays()
    if kinds.shape[0] == 0:
        return 0.0
    return float(_material_balance_kernel(kinds, teams, table.astype(FLOAT_DTYPE, copy=False)))


def evaluate_for(units: Units, team: Team, table: np.ndarray = DEFAULT_MATERIAL_TABLE) -> float:
    """Evaluation from ``team``'s point of view (negamax convention)."""
    return evaluation(units, table) * team.sign()


__all__ = ['evaluation', 'evaluate_for', 'DEFAULT_MATERIAL_TABLE']
