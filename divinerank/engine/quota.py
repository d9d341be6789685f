# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Reroll quota: a per-hour-label counter with a fixed ceiling.

Counters live for the process lifetime and are keyed by the label alone, so a
label recurring on a later day keeps consuming the same bucket.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from divinerank.core.settings import get_max_rerolls

logger = logging.getLogger(__name__)


class QuotaExhaustedError(Exception):
    """Raised when a reroll is requested for a label whose quota is used up."""

    def __init__(self, hour_label: str, max_rerolls: int) -> None:
        self.hour_label = hour_label
        self.max_rerolls = max_rerolls
        super().__init__(
            f"Reroll quota for hour {hour_label} exhausted ({max_rerolls} used); wait for the next hour label"
        )


class RerollQuota:
    """Counts consumed rerolls per hour label."""

    def __init__(self, max_rerolls: Optional[int] = None) -> None:
        self.max_rerolls = get_max_rerolls() if max_rerolls is None else max_rerolls
        self._consumed: Dict[str, int] = {}

    def consumed(self, hour_label: str) -> int:
        return self._consumed.get(hour_label, 0)

    def remaining(self, hour_label: str) -> int:
        return max(0, self.max_rerolls - self.consumed(hour_label))

    def check(self, hour_label: str) -> None:
        """Raise QuotaExhaustedError if no reroll remains for ``hour_label``."""
        if self.consumed(hour_label) >= self.max_rerolls:
            logger.info("Reroll refused for %s: quota of %d exhausted", hour_label, self.max_rerolls)
            raise QuotaExhaustedError(hour_label, self.max_rerolls)

    def consume(self, hour_label: str) -> int:
        """Record one reroll for ``hour_label``; returns the remaining count."""
        self._consumed[hour_label] = self.consumed(hour_label) + 1
        remaining = self.remaining(hour_label)
        logger.info("Reroll recorded for %s; %d remaining", hour_label, remaining)
        return remaining

    def snapshot(self) -> Dict[str, int]:
        return dict(self._consumed)


__all__ = ["QuotaExhaustedError", "RerollQuota"]
