# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tests for the weight scheduler."""

from __future__ import annotations

import pytest

from divinerank.engine.models import ScoreSlot
from divinerank.engine.weights import DEFAULT_WEIGHTS, REROLL_WEIGHTS, normalize_weights, weights_for


@pytest.mark.parametrize("is_reroll", [False, True])
def test_weights_cover_every_slot_and_sum_to_one(is_reroll):
    weights = weights_for(is_reroll)
    assert list(weights) == list(ScoreSlot)
    assert sum(weights.values()) == pytest.approx(1.0)
    assert all(w >= 0 for w in weights.values())


def test_presets_already_sum_to_one():
    assert sum(DEFAULT_WEIGHTS.values()) == pytest.approx(1.0)
    assert sum(REROLL_WEIGHTS.values()) == pytest.approx(1.0)


def test_reroll_weights_favour_behavioral():
    """Behavioral is the heaviest slot on a reroll and heavier than on an initial pass."""
    reroll = weights_for(True)
    assert max(reroll, key=reroll.get) is ScoreSlot.BEHAVIORAL
    assert reroll[ScoreSlot.BEHAVIORAL] == pytest.approx(0.40)
    assert reroll[ScoreSlot.BEHAVIORAL] > weights_for(False)[ScoreSlot.BEHAVIORAL]


def test_default_weights_values():
    weights = weights_for(False)
    assert weights[ScoreSlot.ELEMENTAL] == pytest.approx(0.15)
    assert weights[ScoreSlot.CARD_DRAW] == pytest.approx(0.05)


def test_overrides_are_renormalized():
    weights = weights_for(False, {"card_draw": 0.95})
    assert weights[ScoreSlot.CARD_DRAW] == pytest.approx(0.5)
    assert sum(weights.values()) == pytest.approx(1.0)


def test_unknown_override_is_ignored(caplog):
    assert weights_for(False, {"tea_leaves": 3.0}) == weights_for(False)
    assert "tea_leaves" in caplog.text


def test_normalize_fills_missing_slots_with_zero():
    weights = normalize_weights({ScoreSlot.ENTROPY: 2.0})
    assert weights[ScoreSlot.ENTROPY] == 1.0
    assert weights[ScoreSlot.ELEMENTAL] == 0.0


def test_normalize_rejects_negative_weights():
    with pytest.raises(ValueError, match="entropy"):
        normalize_weights({ScoreSlot.ENTROPY: -0.1, ScoreSlot.ELEMENTAL: 1.0})


def test_normalize_rejects_zero_total():
    with pytest.raises(ValueError, match="positive"):
        normalize_weights({})
