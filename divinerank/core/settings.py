# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Centralized configuration loader for DivineRank.

Loads config.yaml from the repository root and provides typed access to settings.
Falls back to built-in defaults if config.yaml is missing or incomplete.
Environment variables (a .env file is honoured) override config.yaml values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Optional["DivineRankConfig"] = None

DEFAULT_MAX_REROLLS = 7
DEFAULT_FALLBACK_SCORE = 5.0
DEFAULT_RESONANCE_LOW = 0.8
DEFAULT_RESONANCE_HIGH = 1.2
DEFAULT_POWER_ITERATIONS = 20


def _repo_root() -> Path:
    """Return the repository root."""
    # divinerank/core/settings.py -> repo root
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class QuotaConfig:
    """Reroll quota configuration."""
    max_rerolls: int


@dataclass(frozen=True)
class ScoringConfig:
    """Ranking pass configuration."""
    fallback_score: float
    resonance_low: float
    resonance_high: float
    power_iterations: int
    max_workers: int


@dataclass(frozen=True)
class WeightOverrides:
    """Optional slot -> weight overrides for the two presets (renormalized on use)."""
    default: Dict[str, float] = field(default_factory=dict)
    reroll: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class DivineRankConfig:
    """Root configuration object."""
    quota: QuotaConfig
    scoring: ScoringConfig
    weights: WeightOverrides
    default_timezone: str
    log_level: str
    debug: bool


def _load_yaml_config(path: Optional[Path] = None) -> dict:
    """Load config.yaml. Returns empty dict if not found or unreadable."""
    config_path = path or Path(os.getenv("DIVINERANK_CONFIG", str(_repo_root() / "config.yaml")))
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", config_path, e)
        return {}
    if not isinstance(loaded, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", config_path)
        return {}
    return loaded


def _env_number(name: str, fallback: Any, cast=float):
    """Return env var ``name`` cast with ``cast``; invalid or unset values give ``cast(fallback)``."""
    raw = os.getenv(name)
    if raw is not None and raw.strip():
        try:
            return cast(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid %s=%r", name, raw)
    return cast(fallback)


def _weight_map(raw: Any) -> Dict[str, float]:
    if not isinstance(raw, dict):
        return {}
    out: Dict[str, float] = {}
    for key, value in raw.items():
        try:
            out[str(key).strip().lower()] = float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric weight %s=%r", key, value)
    return out


def load_config(*, reload: bool = False, path: Optional[Path] = None) -> DivineRankConfig:
    """Load and return the DivineRank configuration.

    Priority order (highest to lowest):
    1. Environment variables (DIVINERANK_MAX_REROLLS, DIVINERANK_FALLBACK_SCORE,
       DIVINERANK_MAX_WORKERS, DIVINERANK_TZ, DIVINERANK_LOG_LEVEL, DIVINERANK_DEBUG)
    2. config.yaml values
    3. Built-in defaults

    Parameters
    ----------
    reload : bool
        If True, force reload from disk. Otherwise use cached config.
    path : Path, optional
        Explicit config file; defaults to DIVINERANK_CONFIG or <repo>/config.yaml.
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not reload:
        return _CONFIG_CACHE

    load_dotenv()
    raw = _load_yaml_config(path)

    quota_raw = raw.get("quota", {}) or {}
    max_rerolls = _env_number(
        "DIVINERANK_MAX_REROLLS", quota_raw.get("max_rerolls", DEFAULT_MAX_REROLLS), int
    )
    quota_config = QuotaConfig(max_rerolls=max(0, max_rerolls))

    scoring_raw = raw.get("scoring", {}) or {}
    resonance_low = float(scoring_raw.get("resonance_low", DEFAULT_RESONANCE_LOW))
    resonance_high = float(scoring_raw.get("resonance_high", DEFAULT_RESONANCE_HIGH))
    if resonance_low > resonance_high:
        logger.warning(
            "resonance_low %.3f > resonance_high %.3f; using defaults", resonance_low, resonance_high
        )
        resonance_low, resonance_high = DEFAULT_RESONANCE_LOW, DEFAULT_RESONANCE_HIGH
    scoring_config = ScoringConfig(
        fallback_score=_env_number(
            "DIVINERANK_FALLBACK_SCORE", scoring_raw.get("fallback_score", DEFAULT_FALLBACK_SCORE)
        ),
        resonance_low=resonance_low,
        resonance_high=resonance_high,
        power_iterations=int(scoring_raw.get("power_iterations", DEFAULT_POWER_ITERATIONS)),
        max_workers=max(1, _env_number("DIVINERANK_MAX_WORKERS", scoring_raw.get("max_workers", 1), int)),
    )

    weights_raw = raw.get("weights", {}) or {}
    weights_config = WeightOverrides(
        default=_weight_map(weights_raw.get("default")),
        reroll=_weight_map(weights_raw.get("reroll")),
    )

    app_raw = raw.get("app", {}) or {}
    default_timezone = os.getenv("DIVINERANK_TZ", app_raw.get("default_timezone", "UTC"))
    log_level = os.getenv("DIVINERANK_LOG_LEVEL", app_raw.get("log_level", "INFO")).upper()
    debug = os.getenv("DIVINERANK_DEBUG", "").lower() in ("true", "1", "yes") or \
        bool(app_raw.get("debug", False))

    config = DivineRankConfig(
        quota=quota_config,
        scoring=scoring_config,
        weights=weights_config,
        default_timezone=default_timezone,
        log_level="DEBUG" if debug else log_level,
        debug=bool(debug),
    )

    _CONFIG_CACHE = config
    return config


def get_max_rerolls() -> int:
    """Convenience: return the per-label reroll ceiling."""
    return load_config().quota.max_rerolls


def get_default_timezone() -> str:
    """Convenience: return the default requester timezone."""
    return load_config().default_timezone


__all__ = [
    "DivineRankConfig",
    "QuotaConfig",
    "ScoringConfig",
    "WeightOverrides",
    "get_default_timezone",
    "get_max_rerolls",
    "load_config",
]
