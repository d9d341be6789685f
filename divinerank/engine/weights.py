# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Weight scheduler: the default and reroll weight presets over the ten slots."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from divinerank.engine.models import ScoreSlot

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: Mapping[ScoreSlot, float] = {
    ScoreSlot.ELEMENTAL: 0.15,
    ScoreSlot.CELESTIAL: 0.13,
    ScoreSlot.NUMERIC_REDUCTION: 0.11,
    ScoreSlot.SPATIAL: 0.10,
    ScoreSlot.ENTROPY: 0.12,
    ScoreSlot.FOUNDER: 0.11,
    ScoreSlot.BEHAVIORAL: 0.08,
    ScoreSlot.ORACLE_CAST: 0.08,
    ScoreSlot.CORRESPONDENCE: 0.07,
    ScoreSlot.CARD_DRAW: 0.05,
}

# Behavioral dominates rerolls.
REROLL_WEIGHTS: Mapping[ScoreSlot, float] = {
    ScoreSlot.ELEMENTAL: 0.10,
    ScoreSlot.CELESTIAL: 0.08,
    ScoreSlot.NUMERIC_REDUCTION: 0.07,
    ScoreSlot.SPATIAL: 0.06,
    ScoreSlot.ENTROPY: 0.10,
    ScoreSlot.FOUNDER: 0.08,
    ScoreSlot.BEHAVIORAL: 0.40,
    ScoreSlot.ORACLE_CAST: 0.04,
    ScoreSlot.CORRESPONDENCE: 0.04,
    ScoreSlot.CARD_DRAW: 0.03,
}


def normalize_weights(weights: Mapping[ScoreSlot, float]) -> Dict[ScoreSlot, float]:
    """Return weights for every slot, in slot order, scaled to sum to 1.

    Missing slots count as 0. Raises ValueError when the total is not positive
    or any weight is negative.
    """
    raw = {slot: float(weights.get(slot, 0.0)) for slot in ScoreSlot}
    negative = [slot.value for slot, w in raw.items() if w < 0]
    if negative:
        raise ValueError(f"Negative weights for {', '.join(negative)}")
    total = sum(raw.values())
    if total <= 0:
        raise ValueError("Weights must sum to a positive value")
    return {slot: w / total for slot, w in raw.items()}


def _apply_overrides(
    preset: Mapping[ScoreSlot, float],
    overrides: Optional[Mapping[str, float]],
) -> Dict[ScoreSlot, float]:
    merged = dict(preset)
    for key, value in (overrides or {}).items():
        try:
            slot = ScoreSlot(key)
        except ValueError:
            logger.warning("Ignoring weight override for unknown slot %r", key)
            continue
        merged[slot] = value
    return merged


def weights_for(is_reroll: bool, overrides: Optional[Mapping[str, float]] = None) -> Dict[ScoreSlot, float]:
    """Normalized weight vector for an initial pass or a reroll.

    Parameters
    ----------
    is_reroll : bool
        Selects the reroll preset.
    overrides : Mapping[str, float], optional
        Slot value (e.g. ``"behavioral"``) -> weight, applied over the preset before normalizing.
    """
    preset = REROLL_WEIGHTS if is_reroll else DEFAULT_WEIGHTS
    weights = normalize_weights(_apply_overrides(preset, overrides))
    logger.debug("Weights (reroll=%s): %s", is_reroll, {s.value: round(w, 4) for s, w in weights.items()})
    return weights


__all__ = ["DEFAULT_WEIGHTS", "REROLL_WEIGHTS", "normalize_weights", "weights_for"]
