# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Resonance multiplier from the dominant eigenvector of a fixed slot-interaction matrix.

The eigenvector is approximated by power iteration with a fixed iteration count
(no tolerance check), computed once per engine and reused.
"""

from __future__ import annotations

from typing import Mapping, Optional

import numpy as np

from divinerank.engine.models import SLOT_MAXIMA, ScoreSlot
from divinerank.engine.utils import map_range

POWER_ITERATIONS = 20
MULTIPLIER_LOW = 0.8
MULTIPLIER_HIGH = 1.2

# Rows and columns follow ScoreSlot order.
INTERACTION_MATRIX = np.array(
    [
        [1.0, 0.5, 0.3, 0.6, 0.2, 0.4, 0.1, 0.7, 0.4, 0.3],
        [0.5, 1.0, 0.6, 0.4, 0.3, 0.5, 0.2, 0.3, 0.7, 0.5],
        [0.3, 0.6, 1.0, 0.2, 0.5, 0.6, 0.4, 0.4, 0.8, 0.7],
        [0.6, 0.4, 0.2, 1.0, 0.3, 0.5, 0.1, 0.8, 0.2, 0.1],
        [0.2, 0.3, 0.5, 0.3, 1.0, 0.4, 0.8, 0.5, 0.6, 0.9],
        [0.4, 0.5, 0.6, 0.5, 0.4, 1.0, 0.7, 0.3, 0.6, 0.5],
        [0.1, 0.2, 0.4, 0.1, 0.8, 0.7, 1.0, 0.2, 0.5, 0.8],
        [0.7, 0.3, 0.4, 0.8, 0.5, 0.3, 0.2, 1.0, 0.4, 0.3],
        [0.4, 0.7, 0.8, 0.2, 0.6, 0.6, 0.5, 0.4, 1.0, 0.8],
        [0.3, 0.5, 0.7, 0.1, 0.9, 0.5, 0.8, 0.3, 0.8, 1.0],
    ]
)


def principal_eigenvector(matrix: np.ndarray, iterations: int = POWER_ITERATIONS) -> np.ndarray:
    """Power iteration from the all-ones vector, L2-normalized each step, exactly ``iterations`` steps."""
    vector = np.ones(matrix.shape[0])
    for _ in range(iterations):
        product = matrix @ vector
        vector = product / np.linalg.norm(product)
    return vector


class ResonanceEngine:
    """Projects normalized sub-scores onto the cached eigenvector.

    Parameters
    ----------
    low, high : float
        Multiplier band. The dot product is mapped from [0, 1] into [low, high] and clamped.
    iterations : int
        Power-iteration steps for the eigenvector.
    """

    def __init__(
        self,
        low: float = MULTIPLIER_LOW,
        high: float = MULTIPLIER_HIGH,
        iterations: int = POWER_ITERATIONS,
        matrix: Optional[np.ndarray] = None,
    ) -> None:
        self.low = low
        self.high = high
        self._eigenvector = principal_eigenvector(INTERACTION_MATRIX if matrix is None else matrix, iterations)

    @property
    def eigenvector(self) -> np.ndarray:
        return self._eigenvector.copy()

    def multiplier(self, sub_scores: Mapping[ScoreSlot, float]) -> float:
        """Resonance multiplier in [low, high] for raw sub-scores keyed by slot."""
        normalized = np.array([sub_scores[slot] / SLOT_MAXIMA[slot] for slot in ScoreSlot])
        # Unit eigenvector entries sum to about 3.1, so the projection passes 1 once the
        # mean normalized sub-score exceeds about 0.32; typical passes sit at high.
        projection = float(normalized @ self._eigenvector)
        return map_range(projection, 0.0, 1.0, self.low, self.high)


__all__ = ["INTERACTION_MATRIX", "POWER_ITERATIONS", "ResonanceEngine", "principal_eigenvector"]
