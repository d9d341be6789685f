# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Calendar utilities: solar terms, approximate lunar dates, moon phase, hour labels.

All functions are pure. Dates are interpreted in the requester's local time;
``local_datetime`` converts an epoch-millisecond timestamp using pytz.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Tuple

import pytz

logger = logging.getLogger(__name__)

HOUR_LABELS: Tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")


@dataclass(frozen=True)
class LunarDate:
    """Display strings of an approximate lunar date."""

    year: str
    month: str
    day: str


# (month, day, name) for the start of each of the 24 solar terms, from Feb 4.
SOLAR_TERMS: List[Tuple[int, int, str]] = [
    (2, 4, "立春"), (2, 19, "雨水"),
    (3, 5, "惊蛰"), (3, 20, "春分"),
    (4, 4, "清明"), (4, 20, "谷雨"),
    (5, 5, "立夏"), (5, 21, "小满"),
    (6, 5, "芒种"), (6, 21, "夏至"),
    (7, 7, "小暑"), (7, 23, "大暑"),
    (8, 7, "立秋"), (8, 23, "处暑"),
    (9, 7, "白露"), (9, 23, "秋分"),
    (10, 8, "寒露"), (10, 23, "霜降"),
    (11, 7, "立冬"), (11, 22, "小雪"),
    (12, 7, "大雪"), (12, 21, "冬至"),
    (1, 5, "小寒"), (1, 20, "大寒"),
]

_TERMS_BY_DATE = sorted(SOLAR_TERMS)

SEASONS = {
    "spring": ("立春", "雨水", "惊蛰", "春分", "清明", "谷雨"),
    "summer": ("立夏", "小满", "芒种", "夏至", "小暑", "大暑"),
    "autumn": ("立秋", "处暑", "白露", "秋分", "寒露", "霜降"),
    "winter": ("立冬", "小雪", "大雪", "冬至", "小寒", "大寒"),
}

_LUNAR_YEAR_STEMS = ("庚", "辛", "壬", "癸", "甲", "乙", "丙", "丁", "戊", "己")
_LUNAR_YEAR_BRANCHES = ("申", "酉", "戌", "亥", "子", "丑", "寅", "卯", "辰", "巳", "午", "未")
_LUNAR_MONTHS = ("正月", "二月", "三月", "四月", "五月", "六月", "七月", "八月", "九月", "十月", "冬月", "腊月")
_LUNAR_DAYS = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)

SYNODIC_MONTH_DAYS = 29.5305882


def solar_term(d: date) -> str:
    """Return the solar term in effect on ``d``.

    The term is the latest boundary on or before ``d`` in calendar order; dates
    before 小寒 (Jan 5) still belong to the previous year's 冬至.

    Examples:
        >>> solar_term(date(2024, 3, 20))
        '春分'
        >>> solar_term(date(2024, 2, 10))
        '立春'
        >>> solar_term(date(2024, 1, 2))
        '冬至'
    """
    key = (d.month, d.day)
    term = _TERMS_BY_DATE[-1][2]
    for month, day, name in _TERMS_BY_DATE:
        if (month, day) > key:
            break
        term = name
    return term


def season_for(term: str) -> Optional[str]:
    """Return 'spring' | 'summer' | 'autumn' | 'winter' for a solar term, or None."""
    for season, terms in SEASONS.items():
        if term in terms:
            return season
    return None


def lunar_date(d: date) -> LunarDate:
    """Approximate lunar date display strings (year label, month name, day name).

    Day 31 shares the last day name, 三十.

    Examples:
        >>> lunar_date(date(2024, 3, 20))
        LunarDate(year='甲辰年', month='三月', day='二十')
    """
    return LunarDate(
        year=f"{_LUNAR_YEAR_STEMS[d.year % 10]}{_LUNAR_YEAR_BRANCHES[d.year % 12]}年",
        month=_LUNAR_MONTHS[d.month - 1],
        day=_LUNAR_DAYS[min(d.day, len(_LUNAR_DAYS)) - 1],
    )


def moon_phase(d: date) -> float:
    """Fraction of the synodic month elapsed on ``d``, in [0, 1).

    0 is new moon, 0.5 is full moon.
    """
    if d.month < 3:
        c, e = d.year - 1, d.month + 12
    else:
        c, e = d.year, d.month
    jd = math.floor(365.25 * c) + math.floor(30.6 * e) + d.day - 694039.09
    jd /= SYNODIC_MONTH_DAYS
    return jd - math.floor(jd)


def hour_label(hour: int) -> str:
    """Return the two-hour label covering ``hour`` (0-23). 23:00-00:59 is 子."""
    return HOUR_LABELS[((hour + 1) % 24) // 2]


def resolve_timezone(tz_name: Optional[str]) -> pytz.BaseTzInfo:
    """Return the pytz zone for ``tz_name``; unknown or empty names fall back to UTC."""
    if not tz_name:
        return pytz.utc
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone %r; falling back to UTC", tz_name)
        return pytz.utc


def local_datetime(timestamp_ms: int, tz_name: Optional[str]) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz_name``."""
    utc_moment = datetime.fromtimestamp(timestamp_ms / 1000.0, tz=pytz.utc)
    return utc_moment.astimezone(resolve_timezone(tz_name))


def to_timestamp_ms(moment: datetime) -> int:
    """Epoch milliseconds of ``moment``; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return int(round(moment.timestamp() * 1000))


def date_timestamp_ms(d: date) -> int:
    """Epoch milliseconds of midnight UTC on ``d``."""
    return int(pytz.utc.localize(datetime(d.year, d.month, d.day)).timestamp()) * 1000


def sunday_first_weekday(moment: datetime) -> int:
    """Weekday with Sunday = 0 (Python's weekday() has Monday = 0)."""
    return (moment.weekday() + 1) % 7


__all__ = [
    "HOUR_LABELS",
    "LunarDate",
    "SEASONS",
    "SOLAR_TERMS",
    "SYNODIC_MONTH_DAYS",
    "date_timestamp_ms",
    "hour_label",
    "sunday_first_weekday",
    "local_datetime",
    "lunar_date",
    "moon_phase",
    "resolve_timezone",
    "season_for",
    "solar_term",
    "to_timestamp_ms",
]
