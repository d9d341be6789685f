# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Test fixtures: context bundles, configs and synthetic candidates."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Dict

import pytz

from divinerank.core.almanac import lunar_date, moon_phase, to_timestamp_ms
from divinerank.core.settings import DivineRankConfig, QuotaConfig, ScoringConfig, WeightOverrides
from divinerank.engine.models import CandidateProfile, ContextBundle, Headquarters, ScoreSlot

ZERO_SEED = "0" * 64
EQUINOX_NOON_UTC = datetime(2024, 3, 20, 12, 0, 0, tzinfo=pytz.utc)
EQUINOX_NOON_MS = 1710936000000


def create_test_context(**overrides: Any) -> ContextBundle:
    """Context at 2024-03-20 12:00 UTC (春分, hour 午, Wednesday) with a zero seed."""
    fields: Dict[str, Any] = dict(
        timestamp=EQUINOX_NOON_MS,
        solar_term="春分",
        lunar_date=lunar_date(date(2024, 3, 20)),
        hour_label="午",
        weekday=3,
        moon_phase=moon_phase(date(2024, 3, 20)),
        longitude=116.4074,
        latitude=39.9042,
        timezone="UTC",
        city="北京",
        country="China",
        device_type="desktop",
        os="macOS",
        browser="Chrome",
        screen_resolution=(1920, 1080),
        cpu_cores=8,
        connection_type="4g",
        downlink=10.0,
        random_seed=ZERO_SEED,
        mouse_entropy=0.5,
        click_cadence=1.0,
        hover_history=None,
    )
    fields.update(overrides)
    return ContextBundle(**fields)


def context_at(moment: datetime, **overrides: Any) -> ContextBundle:
    """Test context whose timestamp is ``moment``; other fields as create_test_context."""
    return create_test_context(timestamp=to_timestamp_ms(moment), **overrides)


def create_test_config(
    max_rerolls: int = 7,
    fallback_score: float = 5.0,
    max_workers: int = 1,
    default_weights: Dict[str, float] | None = None,
    reroll_weights: Dict[str, float] | None = None,
) -> DivineRankConfig:
    return DivineRankConfig(
        quota=QuotaConfig(max_rerolls=max_rerolls),
        scoring=ScoringConfig(
            fallback_score=fallback_score,
            resonance_low=0.8,
            resonance_high=1.2,
            power_iterations=20,
            max_workers=max_workers,
        ),
        weights=WeightOverrides(default=default_weights or {}, reroll=reroll_weights or {}),
        default_timezone="UTC",
        log_level="INFO",
        debug=False,
    )


def create_test_candidate(name: str = "Alpha", founders=("Ada Lovelace",), **overrides: Any) -> CandidateProfile:
    fields: Dict[str, Any] = dict(
        name=name,
        model=f"{name}-1",
        founding_year=2020,
        founding_month=6,
        founding_day=15,
        founders=tuple(founders),
        headquarters=Headquarters(city="London", country="UK", longitude=-0.1276, latitude=51.5072),
    )
    fields.update(overrides)
    return CandidateProfile(**fields)


def constant_algorithms(value_by_slot: Dict[ScoreSlot, float] | None = None) -> Dict[ScoreSlot, Callable]:
    """Algorithms returning a fixed value per slot (default: half of the slot maximum)."""
    values = value_by_slot or {}
    return {
        slot: (lambda ctx, cand, v=values.get(slot, slot.max_score / 2): v)
        for slot in ScoreSlot
    }


class FakeClock:
    """Monotonic clock advanced by hand, in seconds."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now
