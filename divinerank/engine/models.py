# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Engine models: immutable dataclasses for candidates, context bundles and results."""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from divinerank.core.almanac import HOUR_LABELS, LunarDate

_HEX_SEED = re.compile(r"^[0-9a-fA-F]{64}$")


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class ContextValidationError(ValueError):
    """Raised when a context bundle is missing or carries an invalid field."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid context field {field_name!r}: {reason}")


class ScoreSlot(str, Enum):
    """The ten sub-score slots, in canonical order.

    Declaration order is the only ordering used for scores, weights and maxima.
    """

    ELEMENTAL = "elemental"
    CELESTIAL = "celestial"
    NUMERIC_REDUCTION = "numeric_reduction"
    SPATIAL = "spatial"
    ENTROPY = "entropy"
    FOUNDER = "founder"
    BEHAVIORAL = "behavioral"
    ORACLE_CAST = "oracle_cast"
    CORRESPONDENCE = "correspondence"
    CARD_DRAW = "card_draw"

    @property
    def max_score(self) -> float:
        return SLOT_MAXIMA[self]


SLOT_MAXIMA: Dict[ScoreSlot, float] = {
    ScoreSlot.ELEMENTAL: 20.0,
    ScoreSlot.CELESTIAL: 20.0,
    ScoreSlot.NUMERIC_REDUCTION: 20.0,
    ScoreSlot.SPATIAL: 20.0,
    ScoreSlot.ENTROPY: 20.0,
    ScoreSlot.FOUNDER: 20.0,
    ScoreSlot.BEHAVIORAL: 20.0,
    ScoreSlot.ORACLE_CAST: 15.0,
    ScoreSlot.CORRESPONDENCE: 10.0,
    ScoreSlot.CARD_DRAW: 10.0,
}


@dataclass(frozen=True)
class Headquarters:
    city: str
    country: str
    longitude: float
    latitude: float


@dataclass(frozen=True)
class CandidateProfile:
    """Static candidate profile. Month/day default to 1 when unknown."""

    name: str
    model: str
    founding_year: int
    founders: Tuple[str, ...]
    headquarters: Headquarters
    founding_month: Optional[int] = None
    founding_day: Optional[int] = None

    @property
    def founding_date(self) -> date:
        return date(self.founding_year, self.founding_month or 1, self.founding_day or 1)


@dataclass(frozen=True)
class FounderProfile:
    """Founder attributes. charisma and innovation are in [0, 1]."""

    life_path: int
    element: str
    charisma: float
    innovation: float
    zodiac: Optional[str] = None


@dataclass(frozen=True)
class ContextBundle:
    """Snapshot of contextual signals for one ranking pass.

    Attributes
    ----------
    timestamp:
        Epoch milliseconds of the request moment.
    hour_label:
        One of the twelve two-hour tokens in ``HOUR_LABELS``.
    random_seed:
        256-bit seed as 64 hex characters.
    hover_history:
        Candidate name -> cumulative hover milliseconds. Only present on reroll passes.
    """

    timestamp: int
    solar_term: str
    lunar_date: LunarDate
    hour_label: str
    weekday: int
    moon_phase: float
    longitude: float
    latitude: float
    timezone: str
    city: str
    country: str
    device_type: str
    os: str
    browser: str
    screen_resolution: Tuple[int, int]
    cpu_cores: int
    connection_type: str
    downlink: float
    random_seed: str
    mouse_entropy: float
    click_cadence: float
    hover_history: Optional[Mapping[str, float]] = None

    def __post_init__(self) -> None:
        """Validate required fields; raise ContextValidationError naming the first bad one."""
        if not _is_integer(self.timestamp) or self.timestamp < 0:
            raise ContextValidationError("timestamp", "must be a non-negative integer of epoch milliseconds")
        for name in ("solar_term", "timezone", "city", "country", "device_type", "os", "browser", "connection_type"):
            if not isinstance(getattr(self, name), str):
                raise ContextValidationError(name, "must be a string")
        if not self.solar_term:
            raise ContextValidationError("solar_term", "is required")
        if not isinstance(self.lunar_date, LunarDate):
            raise ContextValidationError("lunar_date", "must be a LunarDate")
        if self.hour_label not in HOUR_LABELS:
            raise ContextValidationError("hour_label", f"must be one of {''.join(HOUR_LABELS)}, got {self.hour_label!r}")
        if not _is_integer(self.weekday) or not 0 <= self.weekday <= 6:
            raise ContextValidationError("weekday", f"must be an integer in 0..6, got {self.weekday!r}")
        for name in ("moon_phase", "longitude", "latitude", "mouse_entropy", "click_cadence", "downlink"):
            if not _is_number(getattr(self, name)):
                raise ContextValidationError(name, f"must be a number, got {getattr(self, name)!r}")
        if not 0.0 <= self.moon_phase < 1.0:
            raise ContextValidationError("moon_phase", f"must be in [0, 1), got {self.moon_phase}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ContextValidationError("longitude", f"out of range: {self.longitude}")
        if not -90.0 <= self.latitude <= 90.0:
            raise ContextValidationError("latitude", f"out of range: {self.latitude}")
        if not isinstance(self.random_seed, str) or not _HEX_SEED.match(self.random_seed):
            raise ContextValidationError("random_seed", "must be 64 hexadecimal characters")
        if not 0.0 <= self.mouse_entropy <= 1.0:
            raise ContextValidationError("mouse_entropy", f"must be in [0, 1], got {self.mouse_entropy}")
        if self.click_cadence < 0:
            raise ContextValidationError("click_cadence", "must be a non-negative number")
        if self.downlink < 0:
            raise ContextValidationError("downlink", "must be a non-negative number")
        if not _is_integer(self.cpu_cores) or self.cpu_cores < 0:
            raise ContextValidationError("cpu_cores", f"must be a non-negative integer, got {self.cpu_cores!r}")
        resolution = self.screen_resolution
        if not isinstance(resolution, tuple) or len(resolution) != 2 or not all(_is_integer(v) for v in resolution):
            raise ContextValidationError("screen_resolution", f"must be a (width, height) pair of integers, got {resolution!r}")


@dataclass(frozen=True)
class CandidateResult:
    """Final score and rank of one candidate.

    ``sub_scores``, ``resonance`` and ``bonus`` are diagnostics; ranking uses ``score`` only.
    """

    candidate: CandidateProfile
    score: float
    rank: int
    sub_scores: Dict[ScoreSlot, float] = field(default_factory=dict)
    resonance: float = 1.0
    bonus: float = 0.0


__all__ = [
    "HOUR_LABELS",
    "SLOT_MAXIMA",
    "CandidateProfile",
    "CandidateResult",
    "ContextBundle",
    "ContextValidationError",
    "FounderProfile",
    "Headquarters",
    "LunarDate",
    "ScoreSlot",
]
