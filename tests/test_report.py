# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Tests for tabular rendering and CSV export of a ranking."""

from __future__ import annotations

import pandas as pd
import pytest

from divinerank.engine.models import ScoreSlot
from divinerank.engine.ranking import DivinationEngine
from divinerank.report import REPORT_COLUMNS, format_table, results_to_frame, top_names, write_csv
from tests.fixtures.context_data import create_test_config, create_test_context


@pytest.fixture(scope="module")
def results():
    return DivinationEngine(config=create_test_config()).rank(create_test_context())


def test_columns_in_stable_order(results):
    df = results_to_frame(results)
    assert list(df.columns) == REPORT_COLUMNS
    assert REPORT_COLUMNS[:6] == ["rank", "name", "model", "score", "resonance", "bonus"]
    assert REPORT_COLUMNS[6:] == [slot.value for slot in ScoreSlot]


def test_rows_in_rank_order(results):
    df = results_to_frame(list(reversed(results)))
    assert df["rank"].tolist() == list(range(1, 13))
    assert df["name"].tolist() == [r.candidate.name for r in results]


def test_top_limits_rows(results):
    df = results_to_frame(results, top=3)
    assert len(df) == 3
    assert df["name"].tolist() == top_names(results)


def test_format_table(results):
    text = format_table(results, top=2)
    lines = text.splitlines()
    assert len(lines) == 3
    assert "name" in lines[0]
    assert results[0].candidate.name in lines[1]


def test_write_csv_round_trips(results, tmp_path):
    path = write_csv(results, tmp_path / "nested" / "ranking.csv")
    assert path.exists()
    df = pd.read_csv(path, encoding="utf-8")
    assert list(df.columns) == REPORT_COLUMNS
    assert len(df) == 12
    assert set(df["name"]) >= {"月之暗面", "深度求索", "OpenAI"}
    assert df["score"].tolist() == [r.score for r in results]


def test_empty_results():
    df = results_to_frame([])
    assert df.empty
    assert list(df.columns) == REPORT_COLUMNS
