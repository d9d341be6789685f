# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Additive bonus rules keyed by hour label, solar-term season and moon phase.

Unmatched combinations contribute 0. Bonuses are added to the base score before
the resonance multiplier is applied.
"""

from __future__ import annotations

from divinerank.core.almanac import season_for

HOUR_BONUSES = {
    "子": {"xAI": 5.0, "OpenAI": 4.0},
    "寅": {"月之暗面": 5.0},
    "卯": {"Google": 4.5},
    "巳": {"OpenAI": 5.0},
    "午": {"Meta": 4.8},
    "未": {"阿里巴巴": 5.0},
    "申": {"xAI": 4.8},
    "酉": {"Mistral AI": 5.0},
    "亥": {"xAI": 5.0},
}

# season -> (bonus, favoured candidates)
SEASON_BONUSES = {
    "spring": (2.5, ("OpenAI", "xAI", "月之暗面")),
    "summer": (2.8, ("Meta", "字节跳动", "Google")),
    "autumn": (3.0, ("Google", "阿里巴巴", "Anthropic")),
    "winter": (3.2, ("深度求索", "Anthropic", "Mistral AI")),
}

NEW_MOON_BONUS = (2.0, ("OpenAI", "xAI", "月之暗面"))
FULL_MOON_BONUS = (2.5, ("Google", "阿里巴巴", "Meta"))


def hour_bonus(hour_label: str, name: str) -> float:
    return HOUR_BONUSES.get(hour_label, {}).get(name, 0.0)


def solar_term_bonus(term: str, name: str) -> float:
    season = season_for(term)
    if season is None:
        return 0.0
    bonus, favoured = SEASON_BONUSES[season]
    return bonus if name in favoured else 0.0


def moon_phase_bonus(phase: float, name: str) -> float:
    """New moon is phase < 0.05 or > 0.95; full moon is 0.45 < phase < 0.55 (open bounds)."""
    if phase > 0.95 or phase < 0.05:
        bonus, favoured = NEW_MOON_BONUS
    elif 0.45 < phase < 0.55:
        bonus, favoured = FULL_MOON_BONUS
    else:
        return 0.0
    return bonus if name in favoured else 0.0


def total_bonus(hour_label: str, term: str, phase: float, name: str) -> float:
    return hour_bonus(hour_label, name) + solar_term_bonus(term, name) + moon_phase_bonus(phase, name)


__all__ = [
    "HOUR_BONUSES",
    "SEASON_BONUSES",
    "hour_bonus",
    "moon_phase_bonus",
    "solar_term_bonus",
    "total_bonus",
]
