# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Elemental-cycle score: five-element harmony between the current moment and a founding date.

Each moment is expanded into four pillars (year, month, day, hour), each a
stem/branch pair of the sexagenary cycle. The candidate's element is the element
of its founding year stem; it is compared against the current hour element, the
requester's location element and the requester's device element through a fixed
generation/destruction matrix. Pillar branches that clash or combine shift the
harmony by 0.25 per pillar.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, time

from divinerank.core.almanac import local_datetime
from divinerank.engine.models import HOUR_LABELS, CandidateProfile, ContextBundle
from divinerank.engine.utils import map_range

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
EARTHLY_BRANCHES = HOUR_LABELS

STEM_ELEMENTS = {
    "甲": "木", "乙": "木", "丙": "火", "丁": "火", "戊": "土",
    "己": "土", "庚": "金", "辛": "金", "壬": "水", "癸": "水",
}
BRANCH_ELEMENTS = {
    "子": "水", "丑": "土", "寅": "木", "卯": "木", "辰": "土", "巳": "火",
    "午": "火", "未": "土", "申": "金", "酉": "金", "戌": "土", "亥": "水",
}

# INTERACTION_MATRIX[source][target]: generating > 0, destroying < 0, same element 0.5.
INTERACTION_MATRIX = {
    "木": {"木": 0.5, "火": 1.0, "土": -1.0, "金": -0.8, "水": 0.9},
    "火": {"木": 0.9, "火": 0.5, "土": 1.0, "金": -1.0, "水": -0.8},
    "土": {"木": -1.0, "火": 0.9, "土": 0.5, "金": 1.0, "水": -0.8},
    "金": {"木": -0.8, "火": -1.0, "土": 0.9, "金": 0.5, "水": 1.0},
    "水": {"木": 1.0, "火": -0.8, "土": -1.0, "金": 0.9, "水": 0.5},
}

BRANCH_CLASH = {"子": "午", "丑": "未", "寅": "申", "卯": "酉", "辰": "戌", "巳": "亥"}
BRANCH_COMBINATION = {"子": "丑", "寅": "亥", "卯": "戌", "辰": "酉", "巳": "申", "午": "未"}

DEVICE_ELEMENTS = {"Windows": "金", "macOS": "木", "Linux": "水", "iOS": "火", "Android": "土"}
DEFAULT_DEVICE_ELEMENT = "土"

PILLAR_STEP = 0.25
_PILLAR_EPOCH = datetime(1900, 1, 1)


@dataclass(frozen=True)
class Pillar:
    stem: str
    branch: str


@dataclass(frozen=True)
class FourPillars:
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar

    def pillars(self):
        return (self.year, self.month, self.day, self.hour)


def four_pillars(moment: datetime) -> FourPillars:
    """Four pillars of ``moment``'s wall-clock time (timezone info is ignored)."""
    wall = moment.replace(tzinfo=None)
    year_cycle = (wall.year - 4) % 60
    month_index = wall.month - 1
    day_offset = (wall - _PILLAR_EPOCH).days + 10
    hour_branch = ((wall.hour + 1) % 24) // 2

    return FourPillars(
        year=Pillar(HEAVENLY_STEMS[year_cycle % 10], EARTHLY_BRANCHES[year_cycle % 12]),
        month=Pillar(
            HEAVENLY_STEMS[(year_cycle % 5 * 2 + month_index + 2) % 10],
            EARTHLY_BRANCHES[(month_index + 2) % 12],
        ),
        day=Pillar(HEAVENLY_STEMS[day_offset % 10], EARTHLY_BRANCHES[(day_offset + 10) % 12]),
        hour=Pillar(
            HEAVENLY_STEMS[(day_offset % 5 * 2 + hour_branch) % 10],
            EARTHLY_BRANCHES[hour_branch],
        ),
    )


def _paired(table: dict, a: str, b: str) -> bool:
    return table.get(a) == b or table.get(b) == a


def pillar_adjustment(now: FourPillars, founded: FourPillars) -> float:
    """-0.25 per clashing pillar pair, +0.25 per combining pair."""
    score = 0.0
    for current, origin in zip(now.pillars(), founded.pillars()):
        if _paired(BRANCH_CLASH, current.branch, origin.branch):
            score -= PILLAR_STEP
        if _paired(BRANCH_COMBINATION, current.branch, origin.branch):
            score += PILLAR_STEP
    return score


def location_element(longitude: float, latitude: float) -> str:
    """Element of the polar angle of (longitude, latitude), in eight 45-degree sectors."""
    angle = (math.degrees(math.atan2(latitude, longitude)) + 360.0) % 360.0
    if angle >= 337.5 or angle < 22.5:
        return "水"
    if angle < 67.5:
        return "土"
    if angle < 157.5:
        return "木"
    if angle < 202.5:
        return "火"
    if angle < 247.5:
        return "土"
    return "金"


def device_element(os_name: str) -> str:
    return DEVICE_ELEMENTS.get(os_name, DEFAULT_DEVICE_ELEMENT)


def score_elemental(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Elemental-cycle score in [0, 20]."""
    now = four_pillars(local_datetime(context.timestamp, context.timezone))
    founded = four_pillars(datetime.combine(candidate.founding_date, time()))

    candidate_element = STEM_ELEMENTS[founded.year.stem]
    hour_element = BRANCH_ELEMENTS[now.hour.branch]

    harmony = (
        INTERACTION_MATRIX[hour_element][candidate_element] * 0.3
        + INTERACTION_MATRIX[location_element(context.longitude, context.latitude)][candidate_element] * 0.2
        + INTERACTION_MATRIX[device_element(context.os)][candidate_element] * 0.15
        + pillar_adjustment(now, founded) * 0.35
    )
    return map_range(harmony, -1.5, 1.5, 0.0, 20.0)


__all__ = [
    "FourPillars",
    "Pillar",
    "device_element",
    "four_pillars",
    "location_element",
    "pillar_adjustment",
    "score_elemental",
]
