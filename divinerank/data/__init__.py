# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Static reference data."""

from divinerank.data.registry import CANDIDATES, FOUNDER_PROFILES, candidate_by_name

__all__ = ["CANDIDATES", "FOUNDER_PROFILES", "candidate_by_name"]
