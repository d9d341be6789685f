# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Behavioral score: pointer entropy, click cadence, hover share and OS affinity.

Hover history arrives on the context bundle; this module keeps no state.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional

from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import map_range

HOVER_EXPONENT = 0.7
NEUTRAL_HOVER = 0.5
DEFAULT_OS_AFFINITY = 0.80

OS_AFFINITY = {
    "macOS": {
        "OpenAI": 0.95, "Anthropic": 0.93, "Google": 0.85, "Meta": 0.80,
        "xAI": 0.90, "Mistral AI": 0.88, "Cohere": 0.82, "月之暗面": 0.88,
    },
    "Windows": {
        "OpenAI": 0.90, "Google": 0.92, "Meta": 0.88, "Cohere": 0.85,
        "深度求索": 0.88, "智谱AI": 0.90, "阿里巴巴": 0.92, "字节跳动": 0.94,
    },
    "Linux": {
        "Meta": 0.98, "Mistral AI": 0.95, "Cohere": 0.92, "深度求索": 0.96,
        "xAI": 0.90, "Google": 0.85, "智谱AI": 0.93,
    },
    "iOS": {"字节跳动": 0.95, "Meta": 0.92, "Google": 0.90, "OpenAI": 0.88},
    "Android": {"Google": 0.98, "字节跳动": 0.96, "阿里巴巴": 0.93, "Meta": 0.91},
}


def intention(mouse_entropy: float) -> float:
    """Logistic curve centred on 0.5."""
    return 1.0 / (1.0 + math.exp(-10.0 * (mouse_entropy - 0.5)))


def cadence_tier(click_cadence: float) -> float:
    if click_cadence > 2:
        return 0.7
    if click_cadence > 0.5:
        return 1.0
    return 0.85


def hover_share(hover_history: Optional[Mapping[str, float]], name: str) -> float:
    """Candidate's share of total hover time raised to 0.7; 0.5 without usable history."""
    if not hover_history:
        return NEUTRAL_HOVER
    total = sum(hover_history.values())
    if total <= 0:
        return NEUTRAL_HOVER
    return (hover_history.get(name, 0.0) / total) ** HOVER_EXPONENT


def os_affinity(os_name: str, name: str) -> float:
    return OS_AFFINITY.get(os_name, {}).get(name, DEFAULT_OS_AFFINITY)


def score_behavioral(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Behavioral score in [0, 20]."""
    total = (
        intention(context.mouse_entropy) * 0.25
        + cadence_tier(context.click_cadence) * 0.2
        + hover_share(context.hover_history, candidate.name) * 0.3
        + os_affinity(context.os, candidate.name) * 0.25
    )
    return map_range(total, 0.2, 1.0, 0.0, 20.0)


__all__ = [
    "OS_AFFINITY",
    "cadence_tier",
    "hover_share",
    "intention",
    "os_affinity",
    "score_behavioral",
]
