# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Ranking engine: scores every candidate against a context bundle and ranks them.

Per candidate:
  1. Run the ten sub-score algorithms (a failing algorithm scores the fallback value)
  2. Divide each raw score by its slot maximum and take the weighted sum
  3. Scale to 100 and add the hour, season and moon-phase bonuses
  4. Multiply by the resonance multiplier, clamp to [0, 100], round to 2 decimals

Candidates are then sorted by score, descending, with registry order breaking ties,
and ranked 1..N.

Reroll passes check the per-hour-label quota before any scoring and consume one
unit after the pass. Non-reroll passes reset the hover tracker once, after scoring.
"""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Mapping, Optional, Sequence

from divinerank.core.observability import AlgorithmFailureRecorder
from divinerank.core.settings import DivineRankConfig, load_config
from divinerank.data.registry import CANDIDATES, FOUNDER_PROFILES
from divinerank.engine.algorithms import Algorithm, build_algorithms
from divinerank.engine.bonus import total_bonus
from divinerank.engine.hover import HoverTracker
from divinerank.engine.models import (
    SLOT_MAXIMA,
    CandidateProfile,
    CandidateResult,
    ContextBundle,
    FounderProfile,
    ScoreSlot,
)
from divinerank.engine.quota import RerollQuota
from divinerank.engine.resonance import ResonanceEngine
from divinerank.engine.utils import clamp, weighted_sum
from divinerank.engine.weights import weights_for

logger = logging.getLogger(__name__)


def safe_score(
    algorithm: Algorithm,
    context: ContextBundle,
    candidate: CandidateProfile,
    slot: ScoreSlot,
    fallback: float,
    recorder: Optional[AlgorithmFailureRecorder] = None,
) -> float:
    """Run one algorithm; on any Exception record it and return ``fallback``."""
    try:
        return float(algorithm(context, candidate))
    except Exception as e:
        if recorder is not None:
            recorder.record(candidate.name, slot.value, e)
        else:
            logger.warning("Algorithm %s failed for %s: %s", slot.value, candidate.name, e)
        return fallback


def base_score(sub_scores: Mapping[ScoreSlot, float], weights: Mapping[ScoreSlot, float]) -> float:
    """Weighted sum of max-normalized sub-scores, scaled to 0-100."""
    normalized = (sub_scores[slot] / SLOT_MAXIMA[slot] for slot in ScoreSlot)
    return weighted_sum(normalized, (weights[slot] for slot in ScoreSlot)) * 100.0


class DivinationEngine:
    """Owns the reroll quota, the hover tracker and the cached resonance eigenvector.

    Not safe for concurrent ``rank`` calls; one pass at a time.
    """

    def __init__(
        self,
        candidates: Sequence[CandidateProfile] = CANDIDATES,
        founders: Mapping[str, FounderProfile] = FOUNDER_PROFILES,
        config: Optional[DivineRankConfig] = None,
        quota: Optional[RerollQuota] = None,
        hover_tracker: Optional[HoverTracker] = None,
        failure_recorder: Optional[AlgorithmFailureRecorder] = None,
        algorithms: Optional[Mapping[ScoreSlot, Algorithm]] = None,
    ) -> None:
        self.config = config or load_config()
        self.candidates = tuple(candidates)
        self.algorithms: Dict[ScoreSlot, Algorithm] = dict(algorithms or build_algorithms(founders))
        missing = [slot.value for slot in ScoreSlot if slot not in self.algorithms]
        if missing:
            raise ValueError(f"No algorithm for slots: {', '.join(missing)}")
        self.quota = quota or RerollQuota(self.config.quota.max_rerolls)
        self.hover_tracker = hover_tracker or HoverTracker()
        self.failures = failure_recorder or AlgorithmFailureRecorder()
        scoring = self.config.scoring
        self.resonance = ResonanceEngine(
            low=scoring.resonance_low,
            high=scoring.resonance_high,
            iterations=scoring.power_iterations,
        )

    def remaining_rerolls(self, hour_label: str) -> int:
        return self.quota.remaining(hour_label)

    def reset_behavior_tracking(self) -> None:
        self.hover_tracker.reset()

    def score_candidate(
        self,
        context: ContextBundle,
        candidate: CandidateProfile,
        weights: Mapping[ScoreSlot, float],
    ) -> CandidateResult:
        """Final score of one candidate, unranked (rank 0)."""
        fallback = self.config.scoring.fallback_score
        sub_scores = {
            slot: safe_score(self.algorithms[slot], context, candidate, slot, fallback, self.failures)
            for slot in ScoreSlot
        }
        bonus = total_bonus(context.hour_label, context.solar_term, context.moon_phase, candidate.name)
        multiplier = self.resonance.multiplier(sub_scores)
        score = clamp((base_score(sub_scores, weights) + bonus) * multiplier, 0.0, 100.0)
        return CandidateResult(
            candidate=candidate,
            score=round(score, 2),
            rank=0,
            sub_scores=sub_scores,
            resonance=multiplier,
            bonus=bonus,
        )

    def _score_all(self, context: ContextBundle, weights: Mapping[ScoreSlot, float]) -> List[CandidateResult]:
        workers = self.config.scoring.max_workers
        if workers <= 1 or len(self.candidates) <= 1:
            return [self.score_candidate(context, c, weights) for c in self.candidates]
        with ThreadPoolExecutor(max_workers=min(workers, len(self.candidates))) as executor:
            futures = [executor.submit(self.score_candidate, context, c, weights) for c in self.candidates]
            return [future.result() for future in futures]

    def rank(self, context: ContextBundle, is_reroll: bool = False) -> List[CandidateResult]:
        """Score and rank every candidate.

        Raises
        ------
        QuotaExhaustedError
            On a reroll when the context's hour label has no rerolls left. No scoring runs.
        """
        if is_reroll:
            self.quota.check(context.hour_label)
            if context.hover_history is None:
                context = dataclasses.replace(context, hover_history=self.hover_tracker.snapshot())

        overrides = self.config.weights.reroll if is_reroll else self.config.weights.default
        weights = weights_for(is_reroll, overrides)
        scored = self._score_all(context, weights)

        ordered = sorted(scored, key=lambda r: r.score, reverse=True)
        results = [dataclasses.replace(r, rank=i) for i, r in enumerate(ordered, start=1)]

        if is_reroll:
            self.quota.consume(context.hour_label)
        else:
            self.reset_behavior_tracking()

        if results:
            logger.info(
                "Ranked %d candidates (reroll=%s, hour=%s); top: %s %.2f",
                len(results), is_reroll, context.hour_label,
                results[0].candidate.name, results[0].score,
            )
        return results


__all__ = ["DivinationEngine", "base_score", "safe_score"]
