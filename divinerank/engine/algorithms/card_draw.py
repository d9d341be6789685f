# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Card-draw score: a past/present/future spread drawn from the last 32 bits of the seed."""

from __future__ import annotations

from typing import Tuple

from divinerank.engine.models import CandidateProfile, ContextBundle
from divinerank.engine.utils import clamp

DECK_SIZE = 78
MAJOR_ARCANA = 22
SUIT_SIZE = 14
# Wands, cups, swords, pentacles.
SUIT_MODIFIERS = (0.9, 1.0, 0.8, 1.1)
SPREAD_WEIGHTS = (0.2, 0.5, 0.3)
SCALE = 10.0


def draw(seed_hex: str) -> Tuple[int, int, int]:
    """Three card indices in [0, 78) from the last eight hex digits of the seed."""
    value = int(seed_hex[-8:], 16)
    return tuple((value >> shift) % DECK_SIZE for shift in (0, 8, 16))


def card_score(card: int) -> float:
    """Major arcana peak mid-deck (x1.2); minor arcana score rank/14 times the suit modifier."""
    if card < MAJOR_ARCANA:
        return (1.0 - abs(10.5 - card) / 10.5) * 1.2
    suit, rank = divmod(card - MAJOR_ARCANA, SUIT_SIZE)
    return (rank + 1) / SUIT_SIZE * SUIT_MODIFIERS[suit]


def score_card_draw(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Card-draw score, clamped to [0, 10]."""
    spread = sum(card_score(card) * w for card, w in zip(draw(context.random_seed), SPREAD_WEIGHTS))
    return clamp(spread * SCALE, 0.0, SCALE)


__all__ = ["DECK_SIZE", "card_score", "draw", "score_card_draw"]
