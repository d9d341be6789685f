# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Oracle-cast score: a six-line hexagram cast from the random seed.

The score depends only on the seed, so every candidate in a pass gets the same value.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

from divinerank.engine.models import CandidateProfile, ContextBundle

SCALE = 15.0
DEFAULT_HEXAGRAM_SCORE = 0.5

# Trigram codes: line 1 (bottom) is the most significant bit, yang = 1.
TRIGRAMS = ("坤", "艮", "坎", "巽", "震", "离", "兑", "乾")

# HEXAGRAM_NAMES[lower][upper], both indexed by trigram code.
HEXAGRAM_NAMES: Tuple[Tuple[str, ...], ...] = (
    ("坤", "剥", "比", "观", "豫", "晋", "萃", "否"),
    ("谦", "艮", "蹇", "渐", "小过", "旅", "咸", "遁"),
    ("师", "蒙", "坎", "涣", "解", "未济", "困", "讼"),
    ("升", "蛊", "井", "巽", "恒", "鼎", "大过", "姤"),
    ("复", "颐", "屯", "益", "震", "噬嗑", "随", "无妄"),
    ("明夷", "贲", "既济", "家人", "丰", "离", "革", "同人"),
    ("临", "损", "节", "中孚", "归妹", "睽", "兑", "履"),
    ("泰", "大畜", "需", "小畜", "大壮", "大有", "夬", "乾"),
)

HEXAGRAM_SCORES = {
    "乾": 0.9, "坤": 0.8, "屯": 0.4, "蒙": 0.5, "需": 0.6, "讼": 0.3, "师": 0.5, "比": 0.7,
    "小畜": 0.6, "履": 0.6, "泰": 0.95, "否": 0.25, "同人": 0.8, "大有": 0.95, "谦": 0.9, "豫": 0.7,
    "随": 0.7, "蛊": 0.4, "临": 0.8, "观": 0.6, "噬嗑": 0.5, "贲": 0.6, "剥": 0.2, "复": 0.75,
    "无妄": 0.55, "大畜": 0.8, "颐": 0.6, "大过": 0.35, "坎": 0.2, "离": 0.7, "咸": 0.8, "恒": 0.75,
    "遁": 0.4, "大壮": 0.7, "晋": 0.85, "明夷": 0.3, "家人": 0.75, "睽": 0.4, "蹇": 0.25, "解": 0.7,
    "损": 0.5, "益": 0.9, "夬": 0.55, "姤": 0.4, "萃": 0.75, "升": 0.85, "困": 0.2, "井": 0.6,
    "革": 0.7, "鼎": 0.85, "震": 0.55, "艮": 0.5, "渐": 0.75, "归妹": 0.3, "丰": 0.8, "旅": 0.45,
    "巽": 0.6, "兑": 0.7, "涣": 0.55, "节": 0.6, "中孚": 0.75, "小过": 0.45, "既济": 0.65, "未济": 0.5,
}


class Hexagram(NamedTuple):
    index: int
    name: str
    score: float


def hexagram(index: int) -> Hexagram:
    """Hexagram for a 6-bit pattern whose most significant bit is the bottom line."""
    name = HEXAGRAM_NAMES[index >> 3][index & 0b111]
    return Hexagram(index, name, HEXAGRAM_SCORES.get(name, DEFAULT_HEXAGRAM_SCORE))


def cast_lines(seed_hex: str) -> List[int]:
    """Six line values in {6, 7, 8, 9}, bottom line first.

    Line i reads byte i of the seed counted from the least significant end; its
    three coins take bit pairs 0-1, 2-3 and 4-5 of that byte.
    """
    seed = int(seed_hex, 16)
    lines = []
    for i in range(6):
        byte = (seed >> (8 * i)) & 0xFF
        coins = ((byte >> shift) % 4 + 5 for shift in (0, 2, 4))
        lines.append(sum(2 if coin % 2 == 0 else 3 for coin in coins))
    return lines


def _pattern(bits) -> int:
    index = 0
    for bit in bits:
        index = (index << 1) | bit
    return index


def primary_index(lines: List[int]) -> int:
    return _pattern(line % 2 for line in lines)


def secondary_index(lines: List[int]) -> Optional[int]:
    """Pattern after changing lines (6 and 9) flip; None when no line changes."""
    if not any(line in (6, 9) for line in lines):
        return None
    return _pattern((1 - line % 2) if line in (6, 9) else line % 2 for line in lines)


def score_oracle_cast(context: ContextBundle, candidate: CandidateProfile) -> float:
    """Oracle-cast score in [0, 15]: primary hexagram alone, or primary/secondary blended 60/40."""
    lines = cast_lines(context.random_seed)
    primary = hexagram(primary_index(lines)).score
    secondary = secondary_index(lines)
    if secondary is None:
        return primary * SCALE
    return (primary * 0.6 + hexagram(secondary).score * 0.4) * SCALE


__all__ = [
    "HEXAGRAM_NAMES",
    "HEXAGRAM_SCORES",
    "TRIGRAMS",
    "Hexagram",
    "cast_lines",
    "hexagram",
    "primary_index",
    "score_oracle_cast",
    "secondary_index",
]
