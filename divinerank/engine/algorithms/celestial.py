# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Celestial-cycle score: aspects between body positions now and at founding.

Positions are a linear function of elapsed time since 2000-01-01 modulo each
body's period, plus a small sinusoidal perturbation. Not an ephemeris.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

from divinerank.core.almanac import date_timestamp_ms
from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import map_range

DAY_MS = 86_400_000
HOUR_MS = 3_600_000
EPOCH_2000_MS = 946_684_800_000

# Orbital periods in days.
BODY_PERIODS: Dict[str, float] = {
    "Sun": 365.25,
    "Moon": 27.32,
    "Mercury": 87.97,
    "Venus": 224.7,
    "Mars": 686.98,
    "Jupiter": 4332.59,
    "Saturn": 10759.22,
    "Uranus": 30688.5,
    "Neptune": 60182.0,
    "Pluto": 90560.0,
}
ASTEROID_PERIODS: Dict[str, float] = {"Ceres": 1680.0, "Pallas": 1686.0, "Juno": 1592.0, "Vesta": 1325.0}
ASTEROID_FACTOR = 0.2
ASTEROID_PROXY = "Mercury"

# (target angle, orb, score): conjunction, opposition, square, trine, sextile.
ASPECTS: Tuple[Tuple[float, float, float], ...] = (
    (0.0, 8.0, 1.0),
    (180.0, 8.0, -1.0),
    (90.0, 7.0, -0.8),
    (120.0, 7.0, 0.9),
    (60.0, 5.0, 0.6),
)

HOUSE_SCORES = {1: 0.8, 2: 0.6, 3: 0.9, 4: 0.5, 5: 0.85, 6: 0.95, 7: 0.7, 8: 0.4, 9: 0.75, 10: 0.9, 11: 0.8, 12: 0.3}
OBLIQUITY_DEG = 23.44


def body_position(period_days: float, timestamp_ms: float) -> float:
    """Angular position in degrees [0, 360) of a body with ``period_days``."""
    cycle = period_days * DAY_MS
    perturbation = math.sin(timestamp_ms / (cycle / 100.0)) * 2.0
    return ((timestamp_ms - EPOCH_2000_MS) / cycle * 360.0 + perturbation) % 360.0


def aspect_score(angle: float) -> float:
    """Score of the first aspect band ``angle`` falls into; 0 when none."""
    for target, orb, score in ASPECTS:
        if abs(angle - target) <= orb or abs(angle - (360.0 - target)) <= orb:
            return score
    return 0.0


def house_score(timestamp_ms: int, longitude: float) -> float:
    """House of a simplified ascendant from local sidereal time."""
    lst = (timestamp_ms % DAY_MS) / HOUR_MS * 15.0 + longitude
    ascendant = math.degrees(
        math.atan(math.tan(math.radians(lst)) * math.cos(math.radians(OBLIQUITY_DEG)))
    )
    ascendant = (ascendant + 360.0) % 360.0
    return HOUSE_SCORES.get(int(ascendant // 30) + 1, 0.5)


def moon_phase_influence(phase: float) -> float:
    """Waxing/waning curve: 0 at new moon, 1 at full moon."""
    return 0.5 + 0.5 * math.sin(phase * 2.0 * math.pi - math.pi / 2.0)


def score_celestial(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Celestial-cycle score in [0, 20]."""
    now_ms = context.timestamp
    founded_ms = date_timestamp_ms(candidate.founding_date)

    planetary = sum(
        aspect_score(abs(body_position(period, now_ms) - body_position(period, founded_ms)))
        for period in BODY_PERIODS.values()
    )

    proxy_now = body_position(BODY_PERIODS[ASTEROID_PROXY], now_ms)
    asteroid = 0.0
    for period in ASTEROID_PERIODS.values():
        founded_pos = ((founded_ms - EPOCH_2000_MS) / (period * DAY_MS) * 360.0) % 360.0
        asteroid += aspect_score(abs(proxy_now - founded_pos)) * ASTEROID_FACTOR

    total = (
        planetary * 0.5
        + asteroid * 0.15
        + house_score(now_ms, context.longitude) * 0.2
        + moon_phase_influence(context.moon_phase) * 0.15
    )
    return map_range(total, -5.0, 10.0, 0.0, 20.0)


__all__ = [
    "ASPECTS",
    "BODY_PERIODS",
    "aspect_score",
    "body_position",
    "house_score",
    "moon_phase_influence",
    "score_celestial",
]
