# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Algorithm failure recording for ranking passes.

A failing sub-score algorithm never aborts a pass; the ranking engine substitutes
a fallback score and records the failure here so it can be inspected afterwards.
The recorder is in-memory only and bounded.
"""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, Dict, List

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS = 1000


@dataclass(frozen=True)
class AlgorithmFailure:
    """One failed sub-score computation."""

    candidate: str
    slot: str
    error_type: str
    message: str


class AlgorithmFailureRecorder:
    """Collects the most recent algorithm failures across ranking passes.

    Parameters
    ----------
    max_records : int
        Oldest failures are dropped once this many are held.
    """

    def __init__(self, max_records: int = DEFAULT_MAX_RECORDS) -> None:
        self._failures: Deque[AlgorithmFailure] = deque(maxlen=max_records)

    def record(self, candidate: str, slot: str, error: BaseException) -> AlgorithmFailure:
        """Record a failure of ``slot`` for ``candidate`` and return it."""
        failure = AlgorithmFailure(
            candidate=candidate,
            slot=slot,
            error_type=type(error).__name__,
            message=str(error),
        )
        self._failures.append(failure)
        logger.warning(
            "Algorithm %s failed for %s: %s: %s",
            slot, candidate, failure.error_type, failure.message,
        )
        return failure

    def failures(self) -> List[AlgorithmFailure]:
        """Return a copy of recorded failures, oldest first."""
        return list(self._failures)

    def summary(self) -> Dict[str, int]:
        """Failure counts by slot."""
        return dict(Counter(f.slot for f in self._failures))

    def clear(self) -> None:
        self._failures.clear()

    def __len__(self) -> int:
        return len(self._failures)


__all__ = ["AlgorithmFailure", "AlgorithmFailureRecorder"]
