# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Static reference tables: the candidate registry and founder lookup.

Both tables are loaded once at import and never mutated. Registry order is
significant: it is the tie-break order of the final ranking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from divinerank.engine.models import CandidateProfile, FounderProfile, Headquarters

_SAN_FRANCISCO = Headquarters(city="旧金山", country="USA", longitude=-122.4194, latitude=37.7749)
_BEIJING = Headquarters(city="北京", country="China", longitude=116.4074, latitude=39.9042)

CANDIDATES: Tuple[CandidateProfile, ...] = (
    CandidateProfile(
        name="OpenAI", model="GPT-4o", founding_year=2015, founding_month=12, founding_day=11,
        founders=("Sam Altman", "Elon Musk", "Greg Brockman"), headquarters=_SAN_FRANCISCO,
    ),
    CandidateProfile(
        name="Anthropic", model="Claude 3.5", founding_year=2021, founding_month=1, founding_day=1,
        founders=("Dario Amodei", "Daniela Amodei"), headquarters=_SAN_FRANCISCO,
    ),
    CandidateProfile(
        name="Google", model="Gemini 2.5", founding_year=1998, founding_month=9, founding_day=4,
        founders=("Larry Page", "Sergey Brin"),
        headquarters=Headquarters(city="山景城", country="USA", longitude=-122.0840, latitude=37.3861),
    ),
    CandidateProfile(
        name="Meta", model="Llama 3", founding_year=2004, founding_month=2, founding_day=4,
        founders=("Mark Zuckerberg",),
        headquarters=Headquarters(city="门洛帕克", country="USA", longitude=-122.1817, latitude=37.4529),
    ),
    CandidateProfile(
        name="Mistral AI", model="Mixtral 8x22B", founding_year=2023, founding_month=4, founding_day=1,
        founders=("Arthur Mensch",),
        headquarters=Headquarters(city="巴黎", country="France", longitude=2.3522, latitude=48.8566),
    ),
    CandidateProfile(
        name="xAI", model="Grok-2", founding_year=2023, founding_month=7, founding_day=12,
        founders=("Elon Musk",), headquarters=_SAN_FRANCISCO,
    ),
    CandidateProfile(
        name="月之暗面", model="Kimi", founding_year=2023, founding_month=3, founding_day=1,
        founders=("杨植麟",), headquarters=_BEIJING,
    ),
    CandidateProfile(
        name="智谱AI", model="GLM-4", founding_year=2019, founding_month=6, founding_day=1,
        founders=("唐杰",), headquarters=_BEIJING,
    ),
    CandidateProfile(
        name="深度求索", model="DeepSeek-V2", founding_year=2023, founding_month=3, founding_day=1,
        founders=("梁文锋", "张鹏"), headquarters=_BEIJING,
    ),
    CandidateProfile(
        name="阿里巴巴", model="通义千问 2.5", founding_year=1999, founding_month=4, founding_day=4,
        founders=("马云",),
        headquarters=Headquarters(city="杭州", country="China", longitude=120.1551, latitude=30.2741),
    ),
    CandidateProfile(
        name="字节跳动", model="豆包", founding_year=2012, founding_month=3, founding_day=1,
        founders=("张一鸣",), headquarters=_BEIJING,
    ),
    CandidateProfile(
        name="Cohere", model="Command R+", founding_year=2019, founding_month=1, founding_day=1,
        founders=("Aidan Gomez", "Ivan Zhang", "Nick Frosst"),
        headquarters=Headquarters(city="多伦多", country="Canada", longitude=-79.3832, latitude=43.6532),
    ),
)

FOUNDER_PROFILES: Mapping[str, FounderProfile] = MappingProxyType({
    "Sam Altman": FounderProfile(life_path=5, element="火", zodiac="Taurus", charisma=0.95, innovation=0.90),
    "Elon Musk": FounderProfile(life_path=8, element="金", zodiac="Cancer", charisma=1.0, innovation=1.0),
    "Greg Brockman": FounderProfile(life_path=1, element="土", zodiac="Virgo", charisma=0.85, innovation=0.92),
    "Dario Amodei": FounderProfile(life_path=7, element="水", charisma=0.85, innovation=0.95),
    "Daniela Amodei": FounderProfile(life_path=9, element="木", charisma=0.80, innovation=0.88),
    "Larry Page": FounderProfile(life_path=4, element="土", zodiac="Aries", charisma=0.88, innovation=0.98),
    "Sergey Brin": FounderProfile(life_path=3, element="木", zodiac="Leo", charisma=0.86, innovation=0.96),
    "Mark Zuckerberg": FounderProfile(life_path=1, element="火", zodiac="Taurus", charisma=0.90, innovation=0.92),
    "Arthur Mensch": FounderProfile(life_path=6, element="水", charisma=0.75, innovation=0.85),
    "Aidan Gomez": FounderProfile(life_path=11, element="气", charisma=0.82, innovation=0.91),
    "Ivan Zhang": FounderProfile(life_path=3, element="木", charisma=0.78, innovation=0.89),
    "Nick Frosst": FounderProfile(life_path=9, element="水", charisma=0.80, innovation=0.93),
    "梁文锋": FounderProfile(life_path=2, element="金", charisma=0.70, innovation=0.88),
    "张鹏": FounderProfile(life_path=8, element="木", charisma=0.78, innovation=0.82),
    "唐杰": FounderProfile(life_path=5, element="火", charisma=0.80, innovation=0.90),
    "杨植麟": FounderProfile(life_path=9, element="水", charisma=0.82, innovation=0.93),
    "马云": FounderProfile(life_path=3, element="木", zodiac="Libra", charisma=1.0, innovation=0.85),
    "张一鸣": FounderProfile(life_path=7, element="水", zodiac="Aries", charisma=0.88, innovation=0.94),
})


def candidate_by_name(name: str) -> CandidateProfile:
    """Look up a registry candidate by exact name. Raises KeyError when absent."""
    for candidate in CANDIDATES:
        if candidate.name == name:
            return candidate
    raise KeyError(name)


__all__ = ["CANDIDATES", "FOUNDER_PROFILES", "candidate_by_name"]
