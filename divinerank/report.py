# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tabular rendering of a ranking. Stable column order for tests."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from divinerank.engine.models import CandidateResult, ScoreSlot

BASE_COLUMNS = ["rank", "name", "model", "score", "resonance", "bonus"]
REPORT_COLUMNS = BASE_COLUMNS + [slot.value for slot in ScoreSlot]


def _result_row(result: CandidateResult) -> dict:
    row = {
        "rank": result.rank,
        "name": result.candidate.name,
        "model": result.candidate.model,
        "score": result.score,
        "resonance": round(result.resonance, 4),
        "bonus": result.bonus,
    }
    for slot in ScoreSlot:
        value = result.sub_scores.get(slot)
        row[slot.value] = round(value, 4) if value is not None else None
    return row


def results_to_frame(results: Sequence[CandidateResult], top: Optional[int] = None) -> pd.DataFrame:
    """One row per result in rank order, columns in REPORT_COLUMNS order."""
    ordered = sorted(results, key=lambda r: r.rank)
    if top is not None:
        ordered = ordered[:top]
    return pd.DataFrame([_result_row(r) for r in ordered], columns=REPORT_COLUMNS)


def format_table(results: Sequence[CandidateResult], top: Optional[int] = None) -> str:
    """Plain-text table of rank, name, model and score."""
    df = results_to_frame(results, top=top)
    return df[["rank", "name", "model", "score"]].to_string(index=False)


def write_csv(results: Sequence[CandidateResult], path: Union[str, Path]) -> Path:
    """Write the full report frame to ``path`` (UTF-8, no index); returns the path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    results_to_frame(results).to_csv(out, index=False, encoding="utf-8")
    return out


def top_names(results: Sequence[CandidateResult], n: int = 3) -> List[str]:
    return [r.candidate.name for r in sorted(results, key=lambda r: r.rank)[:n]]


__all__ = ["REPORT_COLUMNS", "format_table", "results_to_frame", "top_names", "write_csv"]
