# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Founder-destiny score from the founder lookup table."""

from __future__ import annotations

import math
import re
from typing import List, Mapping

from divinerank.core.almanac import local_datetime
from divinerank.engine.models import CandidateProfile, ContextBundle, FounderProfile
from divinerank.engine.utils import map_range

NO_FOUNDER_SCORE = 10.0

_HAN_SCRIPT = re.compile(r"[\u4e00-\u9fa5]")


def team_bonus(founder_count: int) -> float:
    if founder_count == 1:
        return 0.8
    if founder_count == 2:
        return 1.0
    if founder_count == 3:
        return 0.95
    return 0.85


def founders_energy(profiles: List[FounderProfile]) -> float:
    """Geometric mean of average charisma and average innovation; 0.7 with no profiles."""
    if not profiles:
        return 0.7
    charisma = sum(p.charisma for p in profiles) / len(profiles)
    innovation = sum(p.innovation for p in profiles) / len(profiles)
    return math.sqrt(charisma * innovation)


def destiny_alignment(profiles: List[FounderProfile], current_path: int) -> float:
    if not profiles:
        return 0.5
    return sum(1.0 - abs(p.life_path - current_path) / 9.0 for p in profiles) / len(profiles)


def leadership_balance(profiles: List[FounderProfile]) -> float:
    if not profiles:
        return 0.5
    charisma = sum(p.charisma for p in profiles) / len(profiles)
    innovation = sum(p.innovation for p in profiles) / len(profiles)
    return (1.0 - abs(charisma - innovation)) * 0.4 + (charisma + innovation) / 2.0 * 0.6


def cultural_diversity(founders) -> float:
    """1.0 when the team mixes Han-script and other names, else 0.85."""
    han = [bool(_HAN_SCRIPT.search(name)) for name in founders]
    return 1.0 if any(han) and not all(han) else 0.85


def score_founder(
    context: ContextBundle,
    candidate: CandidateProfile,
    founders: Mapping[str, FounderProfile],
) -> float:
    """Founder-destiny score in [0, 20]; 10 when the candidate lists no founders.

    Founders missing from ``founders`` count toward team size and diversity only.
    """
    if not candidate.founders:
        return NO_FOUNDER_SCORE

    profiles = [founders[name] for name in candidate.founders if name in founders]
    current_path = local_datetime(context.timestamp, context.timezone).hour % 9 + 1

    total = (
        founders_energy(profiles) * 0.3
        + destiny_alignment(profiles, current_path) * 0.25
        + team_bonus(len(candidate.founders)) * 0.15
        + leadership_balance(profiles) * 0.15
        + cultural_diversity(candidate.founders) * 0.15
    )
    return map_range(total, 0.4, 1.0, 0.0, 20.0)


__all__ = [
    "NO_FOUNDER_SCORE",
    "cultural_diversity",
    "destiny_alignment",
    "founders_energy",
    "leadership_balance",
    "score_founder",
    "team_bonus",
]
