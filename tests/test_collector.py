# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tests for context-bundle assembly, signal reducers and user-agent classifiers."""

from __future__ import annotations

import math
import re

import pytest

from divinerank.collector import (
    browser_name,
    build_context,
    click_cadence,
    device_type,
    mouse_entropy,
    os_name,
    random_seed,
)
from divinerank.engine.models import ContextValidationError
from tests.fixtures.context_data import EQUINOX_NOON_MS, EQUINOX_NOON_UTC, ZERO_SEED

IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Mobile/15E148 Safari/604.1"
IPAD_UA = "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Mobile/15E148 Safari/604.1"
ANDROID_PHONE_UA = "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0 Mobile Safari/537.36"
ANDROID_TABLET_UA = "Mozilla/5.0 (Linux; Android 13; SM-X700) AppleWebKit/537.36 Chrome/120.0 Safari/537.36"
DESKTOP_CHROME_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36"
FIREFOX_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"
OPERA_UA = "Mozilla/5.0 (Windows NT 10.0) AppleWebKit/537.36 Chrome/120.0 Safari/537.36 OPR/106.0"
MAC_SAFARI_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_2) AppleWebKit/605.1.15 Version/17.2 Safari/605.1.15"


class TestBuildContext:
    def test_equinox_fields(self):
        ctx = build_context(EQUINOX_NOON_UTC, timezone="UTC", seed=ZERO_SEED)
        assert ctx.timestamp == EQUINOX_NOON_MS
        assert ctx.solar_term == "春分"
        assert ctx.hour_label == "午"
        assert ctx.weekday == 3
        assert ctx.lunar_date.year == "甲辰年"
        assert ctx.moon_phase == pytest.approx(0.2864, abs=1e-3)
        assert ctx.random_seed == ZERO_SEED
        assert ctx.hover_history is None

    def test_fallbacks(self):
        ctx = build_context(EQUINOX_NOON_UTC, timezone="UTC")
        assert (ctx.latitude, ctx.longitude) == (40.7128, -74.0060)
        assert ctx.cpu_cores == 4
        assert ctx.connection_type == "unknown"
        assert ctx.downlink == 50.0
        assert ctx.mouse_entropy == 0.5
        assert ctx.click_cadence == 1.0
        assert ctx.os == "Unknown"
        assert ctx.city == "Unknown"

    def test_calendar_fields_follow_timezone(self):
        ctx = build_context(EQUINOX_NOON_UTC, timezone="Asia/Shanghai", seed=ZERO_SEED)
        assert ctx.timestamp == EQUINOX_NOON_MS
        assert ctx.hour_label == "戌"
        assert ctx.timezone == "Asia/Shanghai"

    def test_supplied_values_are_kept(self):
        ctx = build_context(
            EQUINOX_NOON_UTC,
            timezone="UTC",
            latitude=39.9042,
            longitude=116.4074,
            os="Linux",
            cpu_cores=16,
            downlink=0.0,
            mouse_entropy_value=0.9,
            click_cadence_value=2.5,
            hover_history={"Meta": 120.0},
        )
        assert (ctx.latitude, ctx.longitude) == (39.9042, 116.4074)
        assert ctx.os == "Linux"
        assert ctx.cpu_cores == 16
        assert ctx.downlink == 0.0
        assert ctx.mouse_entropy == 0.9
        assert ctx.click_cadence == 2.5
        assert ctx.hover_history == {"Meta": 120.0}

    def test_mouse_positions_are_reduced(self):
        straight = [(float(i), 0.0) for i in range(30)]
        ctx = build_context(EQUINOX_NOON_UTC, timezone="UTC", mouse_positions=straight)
        assert ctx.mouse_entropy == pytest.approx(0.0)

    def test_random_seed_when_absent(self):
        ctx = build_context(EQUINOX_NOON_UTC, timezone="UTC")
        assert re.fullmatch(r"[0-9a-f]{64}", ctx.random_seed)

    def test_invalid_latitude_rejected(self):
        with pytest.raises(ContextValidationError) as exc_info:
            build_context(EQUINOX_NOON_UTC, timezone="UTC", latitude=91.0, longitude=0.0)
        assert exc_info.value.field_name == "latitude"

    def test_now_when_moment_absent(self):
        ctx = build_context(timezone="UTC", seed=ZERO_SEED)
        assert ctx.timestamp > EQUINOX_NOON_MS


def test_random_seed_format_and_uniqueness():
    seeds = {random_seed() for _ in range(5)}
    assert len(seeds) == 5
    assert all(re.fullmatch(r"[0-9a-f]{64}", s) for s in seeds)


class TestMouseEntropy:
    def test_too_few_samples(self):
        assert mouse_entropy([(0.0, 0.0)] * 19) == 0.5

    def test_straight_line_has_no_variance(self):
        assert mouse_entropy([(float(i), float(i)) for i in range(25)]) == pytest.approx(0.0)

    def test_zigzag(self):
        # Turning angles alternate between +pi/2 and -pi/2.
        zigzag = [(float(i), float(i % 2)) for i in range(22)]
        assert mouse_entropy(zigzag) == pytest.approx((math.pi / 2) ** 2 / 5)

    def test_bounded(self):
        path = []
        for i in range(30):
            path.append((0.0, 0.0) if i % 3 == 0 else ((1.0, 0.0) if i % 3 == 1 else (0.0, 1.0)))
        assert 0.0 <= mouse_entropy(path) <= 1.0


class TestClickCadence:
    def test_no_recent_click(self):
        assert click_cadence(3, None) == 1.0
        assert click_cadence(3, 2000) == 1.0

    def test_clicks_per_second(self):
        assert click_cadence(4, 500) == pytest.approx(8.0)
        assert click_cadence(1, 1000) == pytest.approx(1.0)

    def test_zero_interval(self):
        assert click_cadence(2, 0) == 2.0


class TestUserAgent:
    @pytest.mark.parametrize(
        "ua, expected",
        [
            (IPAD_UA, "tablet"),
            (ANDROID_TABLET_UA, "tablet"),
            (IPHONE_UA, "mobile"),
            (ANDROID_PHONE_UA, "mobile"),
            (DESKTOP_CHROME_UA, "desktop"),
        ],
    )
    def test_device_type(self, ua, expected):
        assert device_type(ua) == expected

    @pytest.mark.parametrize(
        "platform, ua, expected",
        [
            ("MacIntel", MAC_SAFARI_UA, "macOS"),
            ("Win32", DESKTOP_CHROME_UA, "Windows"),
            ("Linux x86_64", FIREFOX_UA, "Linux"),
            ("", IPHONE_UA, "iOS"),
            ("", ANDROID_PHONE_UA, "Android"),
            ("", "", "Unknown"),
        ],
    )
    def test_os_name(self, platform, ua, expected):
        assert os_name(platform, ua) == expected

    @pytest.mark.parametrize(
        "ua, expected",
        [
            (FIREFOX_UA, "Firefox"),
            (OPERA_UA, "Opera"),
            (DESKTOP_CHROME_UA, "Chrome"),
            (MAC_SAFARI_UA, "Safari"),
            ("curl/8.0", "Unknown"),
        ],
    )
    def test_browser_name(self, ua, expected):
        assert browser_name(ua) == expected
