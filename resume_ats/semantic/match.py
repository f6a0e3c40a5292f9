from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize.text import normalize_text
from resume_ats.normalize.tokenizer import Tokenizer, extract_keywords
from resume_ats.scoring.general import (
    GeneralScoreResult,
    ProfileOptions,
    compute_general_ats,
    ensure_text,
)
from resume_ats.taxonomy import TaxonomyProvider, extract_skills

from .tfidf import tfidf_cosine

logger = logging.getLogger(__name__)


class MatchDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    jd_coverage_percent: float
    hard_skill_coverage_percent: float
    semantic_score: float
    cosine_similarity: float
    keyword_coverage: float
    resume_keyword_count: int
    jd_keyword_count: int
    matched_keywords: list[str]
    jd_missing_keywords: list[str]
    resume_only_keywords: list[str]
    matched_hard_skills: list[str]
    missing_hard_skills: list[str]


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    general: GeneralScoreResult
    match: MatchDetails


def _percent(value: float) -> float:
    return max(0.0, min(100.0, value * 100))


def _coverage(matched: list[str], reference: list[str]) -> float:
    if not reference:
        return 0.0
    return len(matched) / len(reference)


def compute_match_ats(
    resume_text: str | None,
    jd_text: str | None,
    options: ProfileOptions = None,
    *,
    tokenizer: Tokenizer | None = None,
    taxonomy_provider: TaxonomyProvider | None = None,
) -> MatchResult:
    resume_raw = ensure_text(resume_text, "resume_text")
    resume_clean = normalize_text(resume_raw).flat
    jd_clean = normalize_text(ensure_text(jd_text, "jd_text")).flat

    resume_keywords = extract_keywords(resume_clean)
    jd_keywords = extract_keywords(jd_clean)
    resume_keyword_set = set(resume_keywords)
    jd_keyword_set = set(jd_keywords)
    matched_keywords = [keyword for keyword in jd_keywords if keyword in resume_keyword_set]
    jd_missing_keywords = [keyword for keyword in jd_keywords if keyword not in resume_keyword_set]
    resume_only_keywords = [keyword for keyword in resume_keywords if keyword not in jd_keyword_set]

    resume_skills = set(extract_skills(resume_clean, taxonomy_provider).flat)
    jd_skills = extract_skills(jd_clean, taxonomy_provider).flat
    matched_skills = [skill for skill in jd_skills if skill in resume_skills]
    missing_skills = [skill for skill in jd_skills if skill not in resume_skills]

    jd_coverage = _percent(_coverage(matched_keywords, jd_keywords))
    hard_skill_coverage = _percent(_coverage(matched_skills, jd_skills))
    semantic = _percent(tfidf_cosine(resume_clean, jd_clean))

    match_score = (
        float(get_scoring_value("matching.weights.jd_coverage", 0.4)) * jd_coverage
        + float(get_scoring_value("matching.weights.hard_skill_coverage", 0.35)) * hard_skill_coverage
        + float(get_scoring_value("matching.weights.semantic", 0.25)) * semantic
    )

    general = compute_general_ats(
        resume_raw, options, tokenizer=tokenizer, taxonomy_provider=taxonomy_provider
    )
    blended = round(
        float(get_scoring_value("matching.blend.match", 0.7)) * match_score
        + float(get_scoring_value("matching.blend.general", 0.3)) * general.score
    )
    score = max(0, min(100, blended))
    cap = int(get_scoring_value("matching.max_diagnostics", 50))

    logger.debug(
        "ats_match_scored score=%s coverage=%.1f hard_skills=%.1f semantic=%.1f general=%s",
        score,
        jd_coverage,
        hard_skill_coverage,
        semantic,
        general.score,
    )

    return MatchResult(
        score=score,
        general=general,
        match=MatchDetails(
            jd_coverage_percent=jd_coverage,
            hard_skill_coverage_percent=hard_skill_coverage,
            semantic_score=semantic,
            cosine_similarity=semantic,
            keyword_coverage=jd_coverage,
            resume_keyword_count=len(resume_keywords),
            jd_keyword_count=len(jd_keywords),
            matched_keywords=matched_keywords[:cap],
            jd_missing_keywords=jd_missing_keywords[:cap],
            resume_only_keywords=resume_only_keywords[:cap],
            matched_hard_skills=matched_skills[:cap],
            missing_hard_skills=missing_skills[:cap],
        ),
    )
