# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Context-bundle assembly.

Builds a validated ContextBundle from a moment, a location and device strings,
deriving the calendar fields and applying fallbacks for anything the caller
could not observe. Also holds the pointer/click signal reducers and the
user-agent classifiers used to fill the device fields.
"""

from __future__ import annotations

import logging
import math
import re
import secrets
from datetime import datetime
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from divinerank.core.almanac import (
    hour_label,
    local_datetime,
    lunar_date,
    moon_phase,
    solar_term,
    sunday_first_weekday,
    to_timestamp_ms,
)
from divinerank.core.settings import get_default_timezone
from divinerank.engine.models import ContextBundle

logger = logging.getLogger(__name__)

DEFAULT_LATITUDE = 40.7128
DEFAULT_LONGITUDE = -74.0060
DEFAULT_CONNECTION = "unknown"
DEFAULT_DOWNLINK = 50.0
DEFAULT_CPU_CORES = 4
DEFAULT_MOUSE_ENTROPY = 0.5
DEFAULT_CLICK_CADENCE = 1.0
UNKNOWN = "Unknown"

MIN_MOUSE_SAMPLES = 20
CLICK_WINDOW_MS = 2000

_TABLET_UA = re.compile(r"(tablet|ipad|playbook|silk)|(android(?!.*mobi))", re.IGNORECASE)
_MOBILE_UA = re.compile(
    r"Mobile|iP(hone|od)|Android|BlackBerry|IEMobile|Kindle|Silk-Accelerated|(hpw|web)OS|Opera M(obi|ini)"
)


def random_seed() -> str:
    """256-bit seed as 64 lowercase hex characters."""
    return secrets.token_hex(32)


def mouse_entropy(positions: Sequence[Tuple[float, float]]) -> float:
    """Variance of turning angles along a pointer path, divided by 5 and capped at 1.

    Returns 0.5 with fewer than 20 samples.
    """
    if len(positions) < MIN_MOUSE_SAMPLES:
        return DEFAULT_MOUSE_ENTROPY
    angles = []
    for (x1, y1), (x2, y2), (x3, y3) in zip(positions, positions[1:], positions[2:]):
        angles.append(math.atan2(y3 - y2, x3 - x2) - math.atan2(y1 - y2, x1 - x2))
    mean = sum(angles) / len(angles)
    variance = sum((a - mean) ** 2 for a in angles) / len(angles)
    return min(1.0, variance / 5.0)


def click_cadence(click_count: int, ms_since_last_click: Optional[float]) -> float:
    """Clicks per second in the current burst; 1.0 with no recent click."""
    if ms_since_last_click is None or ms_since_last_click >= CLICK_WINDOW_MS:
        return DEFAULT_CLICK_CADENCE
    if ms_since_last_click <= 0:
        return float(click_count)
    return click_count / (ms_since_last_click / 1000.0)


def device_type(user_agent: str) -> str:
    if _TABLET_UA.search(user_agent):
        return "tablet"
    if _MOBILE_UA.search(user_agent):
        return "mobile"
    return "desktop"


def os_name(platform: str, user_agent: str = "") -> str:
    if re.search("Mac", platform, re.IGNORECASE):
        return "macOS"
    if re.search("Win", platform, re.IGNORECASE):
        return "Windows"
    if re.search("Linux", platform, re.IGNORECASE):
        return "Linux"
    if re.search("iPhone|iPad|iPod", user_agent):
        return "iOS"
    if "Android" in user_agent:
        return "Android"
    return UNKNOWN


def browser_name(user_agent: str) -> str:
    """Browser family; checked in order since most user agents mention several."""
    for marker, name in (
        ("Firefox", "Firefox"),
        ("SamsungBrowser", "Samsung Browser"),
        ("Opera", "Opera"),
        ("OPR", "Opera"),
        ("Edge", "Edge"),
        ("Chrome", "Chrome"),
        ("Safari", "Safari"),
    ):
        if marker in user_agent:
            return name
    return UNKNOWN


def build_context(
    moment: Optional[datetime] = None,
    *,
    timezone: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    city: str = UNKNOWN,
    country: str = UNKNOWN,
    device: str = UNKNOWN,
    os: str = UNKNOWN,
    browser: str = UNKNOWN,
    screen_resolution: Tuple[int, int] = (0, 0),
    cpu_cores: Optional[int] = None,
    connection_type: Optional[str] = None,
    downlink: Optional[float] = None,
    seed: Optional[str] = None,
    mouse_positions: Optional[Iterable[Tuple[float, float]]] = None,
    mouse_entropy_value: Optional[float] = None,
    click_cadence_value: Optional[float] = None,
    hover_history: Optional[Mapping[str, float]] = None,
) -> ContextBundle:
    """Assemble a ContextBundle for ``moment`` (default: now).

    Calendar fields (solar term, lunar date, hour label, weekday, moon phase)
    come from the moment in ``timezone`` (default: the configured timezone).
    Unobserved signals fall back to fixed defaults; the seed is drawn from
    ``secrets`` when not given.

    Raises
    ------
    ContextValidationError
        When a supplied value is out of range (e.g. latitude 91).
    """
    tz_name = timezone or get_default_timezone()
    timestamp = to_timestamp_ms(moment) if moment is not None else to_timestamp_ms(datetime.now().astimezone())
    local = local_datetime(timestamp, tz_name)
    local_date = local.date()

    if latitude is None or longitude is None:
        logger.debug("No location supplied; using default %.4f, %.4f", DEFAULT_LATITUDE, DEFAULT_LONGITUDE)
        latitude, longitude = DEFAULT_LATITUDE, DEFAULT_LONGITUDE

    if mouse_entropy_value is None:
        mouse_entropy_value = mouse_entropy(list(mouse_positions)) if mouse_positions is not None else DEFAULT_MOUSE_ENTROPY

    return ContextBundle(
        timestamp=timestamp,
        solar_term=solar_term(local_date),
        lunar_date=lunar_date(local_date),
        hour_label=hour_label(local.hour),
        weekday=sunday_first_weekday(local),
        moon_phase=moon_phase(local_date),
        longitude=float(longitude),
        latitude=float(latitude),
        timezone=tz_name,
        city=city,
        country=country,
        device_type=device,
        os=os,
        browser=browser,
        screen_resolution=tuple(screen_resolution),
        cpu_cores=cpu_cores or DEFAULT_CPU_CORES,
        connection_type=connection_type or DEFAULT_CONNECTION,
        downlink=downlink if downlink is not None else DEFAULT_DOWNLINK,
        random_seed=seed or random_seed(),
        mouse_entropy=float(mouse_entropy_value),
        click_cadence=DEFAULT_CLICK_CADENCE if click_cadence_value is None else float(click_cadence_value),
        hover_history=hover_history,
    )


__all__ = [
    "browser_name",
    "build_context",
    "click_cadence",
    "device_type",
    "mouse_entropy",
    "os_name",
    "random_seed",
]
