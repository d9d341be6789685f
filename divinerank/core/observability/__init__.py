# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Observability: algorithm failure recording."""

from divinerank.core.observability.algorithm_failures import (
    AlgorithmFailure,
    AlgorithmFailureRecorder,
)

__all__ = [
    "AlgorithmFailure",
    "AlgorithmFailureRecorder",
]
