# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Hover accumulator: cumulative hover milliseconds per candidate name.

Reading a snapshot while a hover is open counts the elapsed time so far and
moves the open marker forward, so a later ``end_hover`` never counts it twice.
"""

from __future__ import annotations

import time
from typing import Callable, Dict


class HoverTracker:
    """Tracks hover durations.

    Parameters
    ----------
    clock : Callable[[], float]
        Monotonic clock in seconds. Injectable for tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._totals: Dict[str, float] = {}
        self._open: Dict[str, float] = {}

    def start_hover(self, name: str) -> None:
        self._open[name] = self._clock()

    def end_hover(self, name: str) -> None:
        """Close an open hover; no-op when ``name`` has no matching start."""
        started = self._open.pop(name, None)
        if started is None:
            return
        self._add(name, self._clock() - started)

    def snapshot(self) -> Dict[str, float]:
        """Totals in milliseconds, including open hovers up to now."""
        now = self._clock()
        for name, started in self._open.items():
            self._add(name, now - started)
            self._open[name] = now
        return dict(self._totals)

    def reset(self) -> None:
        self._totals.clear()
        self._open.clear()

    def _add(self, name: str, elapsed_seconds: float) -> None:
        self._totals[name] = self._totals.get(name, 0.0) + max(0.0, elapsed_seconds) * 1000.0


__all__ = ["HoverTracker"]
