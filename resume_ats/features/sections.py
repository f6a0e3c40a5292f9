from __future__ import annotations

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from resume_ats.core.config.scoring import get_scoring_value

_DEFAULT_CORE_SECTIONS = ("summary", "experience", "education", "skills", "projects")


class SectionReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    present: dict[str, bool]
    score: int


@lru_cache(maxsize=1)
def _section_patterns() -> tuple[tuple[str, re.Pattern[str]], ...]:
    raw = get_scoring_value("sections.patterns", {})
    if not isinstance(raw, dict) or not raw:
        raise RuntimeError("Invalid scoring config: 'sections.patterns' must be a non-empty mapping.")
    return tuple((str(name), re.compile(str(pattern))) for name, pattern in raw.items())


def core_sections() -> tuple[str, ...]:
    raw = get_scoring_value("sections.core", list(_DEFAULT_CORE_SECTIONS))
    return tuple(str(name) for name in raw)


def analyze_sections(text: str) -> SectionReport:
    lower = (text or "").lower()
    core = set(core_sections())
    patterns = _section_patterns()

    present: dict[str, bool] = {}
    core_hits = 0
    extra_hits = 0
    for name, pattern in patterns:
        hit = bool(pattern.search(lower))
        present[name] = hit
        if not hit:
            continue
        if name in core:
            core_hits += 1
        else:
            extra_hits += 1

    core_total = sum(1 for name, _ in patterns if name in core)
    extra_total = len(patterns) - core_total
    core_ratio = core_hits / core_total if core_total else 0.0
    extra_ratio = extra_hits / extra_total if extra_total else 0.0

    core_weight = float(get_scoring_value("sections.core_weight", 0.8))
    extra_weight = float(get_scoring_value("sections.extra_weight", 0.2))
    score = round((core_weight * core_ratio + extra_weight * max(0.0, extra_ratio)) * 100)
    return SectionReport(present=present, score=max(0, min(100, score)))
