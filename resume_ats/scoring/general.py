from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.features.balance import BalanceReport, compute_balance
from resume_ats.features.contact import ContactReport, analyze_contact
from resume_ats.features.keywords import KeywordReport, analyze_keywords, score_technical_keywords
from resume_ats.features.readability import ReadabilityReport, analyze_readability
from resume_ats.features.sections import SectionReport, analyze_sections
from resume_ats.features.structure import StructureReport, analyze_structure
from resume_ats.normalize.text import normalize_text
from resume_ats.normalize.tokenizer import Tokenizer
from resume_ats.taxonomy import ExtractedSkills, TaxonomyProvider, extract_skills

from .enhancements import build_enhancements, flatten_enhancements
from .weights import AnalysisProfile, build_weight_profile

logger = logging.getLogger(__name__)

ProfileOptions = AnalysisProfile | Mapping[str, Any] | None


class GeneralScoreMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    career_level: str
    role: str
    sections: SectionReport
    structure: StructureReport
    readability: ReadabilityReport
    contact: ContactReport
    keywords: KeywordReport
    skills: ExtractedSkills
    balance: BalanceReport
    weights: dict[str, float]


class GeneralScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    breakdown: dict[str, int]
    meta: GeneralScoreMeta
    suggestions: list[str]
    enhancements: dict[str, list[str]]


def resolve_profile(options: ProfileOptions) -> AnalysisProfile:
    if isinstance(options, AnalysisProfile):
        return options
    if not options:
        return AnalysisProfile(career_level=None, role=None)
    level = options.get("career_level", options.get("careerLevel"))
    return AnalysisProfile(career_level=level, role=options.get("role"))


def ensure_text(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def compute_general_ats(
    text: str | None,
    options: ProfileOptions = None,
    *,
    tokenizer: Tokenizer | None = None,
    taxonomy_provider: TaxonomyProvider | None = None,
) -> GeneralScoreResult:
    profile = resolve_profile(options)
    normalized = normalize_text(ensure_text(text, "text"))
    flat = normalized.flat

    sections = analyze_sections(flat)
    structure = analyze_structure(normalized.layout)
    readability = analyze_readability(flat, tokenizer)
    contact = analyze_contact(flat)
    keywords = analyze_keywords(flat, tokenizer)
    skills = extract_skills(flat, taxonomy_provider)

    base = {
        "sections": sections.score,
        "formatting": structure.formatting_score,
        "parseability": structure.parse_score,
        "length": structure.length_score,
        "readability": readability.readability_score,
        "contact": contact.score,
        "richness": keywords.richness_score,
        "keywords": score_technical_keywords(keywords, skills),
    }
    balance = compute_balance(base)
    breakdown = {**base, "balance": balance.score}

    weights = build_weight_profile(profile)
    raw_score = sum(weights[dimension] * breakdown[dimension] for dimension in weights)
    score = round(max(0.0, min(100.0, raw_score)))

    enhancements = build_enhancements(
        sections=sections,
        structure=structure,
        readability=readability,
        contact=contact,
        keywords=keywords,
        skills=skills,
    )
    max_suggestions = int(get_scoring_value("general.max_suggestions", 10))

    logger.debug(
        "ats_general_scored score=%s career_level=%s role=%s words=%s",
        score,
        profile.career_level,
        profile.role or "-",
        structure.word_count,
    )

    return GeneralScoreResult(
        score=score,
        breakdown=breakdown,
        meta=GeneralScoreMeta(
            career_level=profile.career_level,
            role=profile.role,
            sections=sections,
            structure=structure,
            readability=readability,
            contact=contact,
            keywords=keywords,
            skills=skills,
            balance=balance,
            weights=weights,
        ),
        suggestions=flatten_enhancements(enhancements, max_suggestions),
        enhancements=enhancements,
    )
