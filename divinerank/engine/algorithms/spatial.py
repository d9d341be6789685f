# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Spatial-harmony score: bearing sector, flying-star cycle and distance decay
between the requester and the candidate headquarters."""

from __future__ import annotations

import math

from divinerank.core.almanac import local_datetime
from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import map_range

EARTH_RADIUS_KM = 6371.0
DISTANCE_SCALE_KM = 10000.0

# 24 mountains clockwise from north, 15 degrees each.
MOUNTAINS = (
    "子", "癸", "丑", "艮", "寅", "甲", "卯", "乙", "辰", "巽", "巳", "丙",
    "午", "丁", "未", "坤", "申", "庚", "酉", "辛", "戌", "乾", "亥", "壬",
)
MOUNTAIN_SCORES = dict(zip(MOUNTAINS, (0.9, 0.8, 0.7, 0.8, 0.9, 1.0) * 4))
DEFAULT_MOUNTAIN_SCORE = 0.5


def bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial great-circle bearing in degrees [0, 360) from point 1 to point 2."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_lon = math.radians(lon2 - lon1)
    y = math.sin(d_lon) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lon)
    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))


def mountain_for(bearing_deg: float) -> str:
    return MOUNTAINS[int((bearing_deg + 7.5) // 15) % 24]


def flying_star_harmony(current_year: int, founding_year: int) -> float:
    """1 - |year star - founding star| / 8; can go below 0 for distant stars."""
    current_star = (current_year - 2020) % 9 + 5
    founding_star = (founding_year - 1984) % 9 + 1
    return 1.0 - abs(current_star - founding_star) / 8.0


def score_spatial(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Spatial-harmony score in [0, 20]."""
    hq = candidate.headquarters
    sector = mountain_for(bearing(context.latitude, context.longitude, hq.latitude, hq.longitude))
    distance = haversine_km(context.latitude, context.longitude, hq.latitude, hq.longitude)
    current_year = local_datetime(context.timestamp, context.timezone).year

    total = (
        flying_star_harmony(current_year, candidate.founding_year) * 0.5
        + MOUNTAIN_SCORES.get(sector, DEFAULT_MOUNTAIN_SCORE) * 0.3
        + math.exp(-distance / DISTANCE_SCALE_KM) * 0.2
    )
    return map_range(total, 0.2, 1.0, 0.0, 20.0)


__all__ = [
    "MOUNTAINS",
    "bearing",
    "flying_star_harmony",
    "haversine_km",
    "mountain_for",
    "score_spatial",
]
