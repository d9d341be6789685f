#!/usr/bin/env python3
# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""
DivineRank CLI.

Usage:
    python -m divinerank.run_divination
    python -m divinerank.run_divination --at 2024-03-20T12:00:00 --tz Asia/Shanghai --seed 000...0
    python -m divinerank.run_divination --rerolls 3 --csv out/ranking.csv
    python -m divinerank.run_divination --help

Environment variables:
    DIVINERANK_TZ            - Default requester timezone (default: UTC)
    DIVINERANK_MAX_REROLLS   - Rerolls allowed per hour label (default: 7)
    DIVINERANK_MAX_WORKERS   - Threads for per-candidate scoring (default: 1)
    DIVINERANK_LOG_LEVEL     - Log level (default: INFO)
    DIVINERANK_CONFIG        - Path to config.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from divinerank.collector import build_context
from divinerank.core.almanac import resolve_timezone
from divinerank.core.settings import load_config
from divinerank.engine.quota import QuotaExhaustedError
from divinerank.engine.ranking import DivinationEngine
from divinerank.report import format_table, write_csv

logger = logging.getLogger(__name__)


def _parse_moment(value: Optional[str], tz_name: str) -> Optional[datetime]:
    """ISO timestamp; naive values are taken in ``tz_name``."""
    if value is None:
        return None
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = resolve_timezone(tz_name).localize(moment)
    return moment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DivineRank CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--at", default=None, help="ISO timestamp of the request moment (default: now)")
    parser.add_argument("--tz", default=None, help="Requester timezone, e.g. Asia/Shanghai (default: configured)")
    parser.add_argument("--lat", type=float, default=None, help="Requester latitude")
    parser.add_argument("--lon", type=float, default=None, help="Requester longitude")
    parser.add_argument("--os", dest="os_name", default="Unknown", help="Requester OS, e.g. macOS, Windows, Linux")
    parser.add_argument("--seed", default=None, help="64 hex character random seed (default: random)")
    parser.add_argument("--mouse-entropy", type=float, default=None, help="Pointer entropy in [0, 1] (default: 0.5)")
    parser.add_argument(
        "--rerolls",
        type=int,
        default=0,
        help="Reroll passes to run after the initial pass (stops at quota exhaustion)",
    )
    parser.add_argument("--csv", default=None, help="Write the final ranking to this CSV path")
    parser.add_argument("--top", type=int, default=None, help="Only print the top K candidates")
    parser.add_argument("--log-level", default=None, help="Log level (default: configured)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    tz_name = args.tz or config.default_timezone
    try:
        context = build_context(
            _parse_moment(args.at, tz_name),
            timezone=tz_name,
            latitude=args.lat,
            longitude=args.lon,
            os=args.os_name,
            seed=args.seed,
            mouse_entropy_value=args.mouse_entropy,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    engine = DivinationEngine(config=config)
    results = engine.rank(context)
    print(f"Hour {context.hour_label} | {context.solar_term} | {context.lunar_date.year}{context.lunar_date.month}{context.lunar_date.day}")
    print(format_table(results, top=args.top))

    for i in range(args.rerolls):
        try:
            results = engine.rank(context, is_reroll=True)
        except QuotaExhaustedError as e:
            print(f"Reroll {i + 1}: {e}", file=sys.stderr)
            break
        print()
        print(f"Reroll {i + 1} ({engine.remaining_rerolls(context.hour_label)} remaining)")
        print(format_table(results, top=args.top))

    if args.csv:
        path = write_csv(results, args.csv)
        print(f"Wrote {path}")

    if len(engine.failures):
        logger.warning("Algorithm failures by slot: %s", engine.failures.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
