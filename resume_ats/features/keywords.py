from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from resume_ats.normalize.tokenizer import Tokenizer, extract_keywords, get_default_tokenizer
from resume_ats.taxonomy import ExtractedSkills

_ALPHA_RE = re.compile(r"^[a-z]+$")
_TECHNICAL_MARK_RE = re.compile(r"[0-9.+#]")
_MAX_TECHNICAL_KEYWORDS = 80


class KeywordReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    unique_token_count: int
    richness_score: int
    technical_keywords: list[str]
    technical_score: int


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def is_technical_keyword(keyword: str) -> bool:
    return bool(_TECHNICAL_MARK_RE.search(keyword)) or len(keyword) > 10


def analyze_keywords(text: str, tokenizer: Tokenizer | None = None) -> KeywordReport:
    active = tokenizer or get_default_tokenizer()
    tokens = active.words((text or "").lower())
    unique_alpha = {token for token in tokens if _ALPHA_RE.match(token)}
    richness = _clamp(round(len(unique_alpha) / 400 * 100), 30, 100)

    technical = [keyword for keyword in extract_keywords(text) if is_technical_keyword(keyword)]
    technical_score = _clamp(round(len(technical) / 40 * 100), 20, 100)

    return KeywordReport(
        unique_token_count=len(unique_alpha),
        richness_score=richness,
        technical_keywords=technical[:_MAX_TECHNICAL_KEYWORDS],
        technical_score=technical_score,
    )


def score_technical_keywords(keywords: KeywordReport, skills: ExtractedSkills) -> int:
    """Keyword dimension: technical density boosted by structured skill hits."""
    score = keywords.technical_score
    if len(skills.flat) >= 8:
        score += 10
    if len(skills.flat) >= 15:
        score += 10
    if len(skills.categories) >= 3:
        score += 5
    return _clamp(score, 20, 100)
