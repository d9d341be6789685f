# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""DivineRank: deterministic ranking of a fixed candidate registry against a context snapshot."""

from divinerank.collector import build_context
from divinerank.data.registry import CANDIDATES, FOUNDER_PROFILES
from divinerank.engine.models import CandidateResult, ContextBundle, ContextValidationError, ScoreSlot
from divinerank.engine.quota import QuotaExhaustedError
from divinerank.engine.ranking import DivinationEngine

__all__ = [
    "CANDIDATES",
    "FOUNDER_PROFILES",
    "CandidateResult",
    "ContextBundle",
    "ContextValidationError",
    "DivinationEngine",
    "QuotaExhaustedError",
    "ScoreSlot",
    "build_context",
]
