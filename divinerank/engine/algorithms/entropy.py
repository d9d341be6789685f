# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Entropy/chaos score.

Blends five signals, each in [0, 1]:

- Shannon entropy of the seed's hex characters (4 bits max, so divided by 4)
- terminal z of a short Lorenz integration seeded by the timestamp
- Hamming resonance between hashes of the seed and the candidate name
- a spectrum proxy of the mouse-movement entropy
- the raw mouse-movement entropy
"""

from __future__ import annotations

import math
from collections import Counter

from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import map_range, popcount, string_hash

LORENZ_SIGMA = 10.0
LORENZ_RHO = 28.0
LORENZ_BETA = 8.0 / 3.0
LORENZ_DT = 0.01
LORENZ_STEPS = 100


def seed_entropy(seed: str) -> float:
    """Shannon entropy of the character distribution of ``seed``, divided by 4 and capped at 1."""
    if not seed:
        return 0.0
    length = len(seed)
    entropy = 0.0
    for count in Counter(seed).values():
        p = count / length
        entropy -= p * math.log2(p)
    return min(entropy / 4.0, 1.0)


def lorenz_chaos(timestamp_ms: int) -> float:
    """Euler-integrate the Lorenz system for a fixed number of steps; map z from [0, 50] to [0, 1]."""
    x = 0.1 + (timestamp_ms % 1000) / 1000.0 * 0.01
    y = 0.0
    z = 0.0
    for _ in range(LORENZ_STEPS):
        dx = LORENZ_SIGMA * (y - x)
        dy = x * (LORENZ_RHO - z) - y
        dz = x * y - LORENZ_BETA * z
        x += dx * LORENZ_DT
        y += dy * LORENZ_DT
        z += dz * LORENZ_DT
    return map_range(z, 0.0, 50.0, 0.0, 1.0)


def hash_resonance(name: str, seed: str) -> float:
    """1 - popcount(hash(name) ^ hash(seed)) / 32."""
    return 1.0 - popcount(string_hash(name) ^ string_hash(seed)) / 32.0


def mouse_spectrum(entropy: float) -> float:
    """High-frequency share favoured 70/30 over the low-frequency share."""
    return entropy ** 2 * 0.7 + (1.0 - entropy) ** 2 * 0.3


def score_entropy(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Entropy/chaos score in [0, 20]."""
    total = (
        seed_entropy(context.random_seed) * 0.2
        + lorenz_chaos(context.timestamp) * 0.25
        + hash_resonance(candidate.name, context.random_seed) * 0.2
        + mouse_spectrum(context.mouse_entropy) * 0.2
        + context.mouse_entropy * 0.15
    )
    return map_range(total, 0.0, 1.0, 0.0, 20.0)


__all__ = [
    "hash_resonance",
    "lorenz_chaos",
    "mouse_spectrum",
    "score_entropy",
    "seed_entropy",
]
