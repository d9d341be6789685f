# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tests for the hover accumulator."""

from __future__ import annotations

import pytest

from divinerank.engine.hover import HoverTracker
from tests.fixtures.context_data import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tracker(clock):
    return HoverTracker(clock=clock)


def test_closed_hover_accumulates_milliseconds(tracker, clock):
    tracker.start_hover("OpenAI")
    clock.advance(1.5)
    tracker.end_hover("OpenAI")
    tracker.start_hover("OpenAI")
    clock.advance(0.5)
    tracker.end_hover("OpenAI")
    assert tracker.snapshot() == {"OpenAI": pytest.approx(2000.0)}


def test_end_without_start_is_noop(tracker, clock):
    clock.advance(3)
    tracker.end_hover("Meta")
    assert tracker.snapshot() == {}


def test_snapshot_counts_open_hover_once(tracker, clock):
    """Open hovers are rolled forward on snapshot, so ending later does not double count."""
    tracker.start_hover("Google")
    clock.advance(1.0)
    assert tracker.snapshot() == {"Google": pytest.approx(1000.0)}
    clock.advance(0.25)
    tracker.end_hover("Google")
    assert tracker.snapshot() == {"Google": pytest.approx(1250.0)}


def test_multiple_candidates(tracker, clock):
    tracker.start_hover("A")
    clock.advance(0.1)
    tracker.start_hover("B")
    clock.advance(0.3)
    tracker.end_hover("A")
    tracker.end_hover("B")
    snap = tracker.snapshot()
    assert snap["A"] == pytest.approx(400.0)
    assert snap["B"] == pytest.approx(300.0)


def test_reset_clears_totals_and_open_hovers(tracker, clock):
    tracker.start_hover("A")
    clock.advance(1)
    tracker.end_hover("A")
    tracker.start_hover("B")
    tracker.reset()
    clock.advance(1)
    tracker.end_hover("B")
    assert tracker.snapshot() == {}


def test_snapshot_is_a_copy(tracker, clock):
    tracker.start_hover("A")
    clock.advance(1)
    tracker.end_hover("A")
    tracker.snapshot()["A"] = 0.0
    assert tracker.snapshot()["A"] == pytest.approx(1000.0)
