from __future__ import annotations

import logging
import time

from resume_ats.schemas.ats import (
    GeneralATSRequest,
    GeneralATSResponse,
    MatchATSRequest,
    MatchATSResponse,
)
from resume_ats.scoring import AnalysisProfile, compute_general_ats
from resume_ats.semantic import compute_match_ats

logger = logging.getLogger(__name__)


class EmptyDocumentError(ValueError):
    """Raised when a submitted document has no readable text."""


def _profile(payload: GeneralATSRequest | MatchATSRequest) -> AnalysisProfile:
    return AnalysisProfile(career_level=payload.career_level, role=payload.role)


def run_general_ats(payload: GeneralATSRequest) -> GeneralATSResponse:
    if not payload.resume_text.strip():
        raise EmptyDocumentError("Could not read any text from the resume.")

    started = time.perf_counter()
    result = compute_general_ats(payload.resume_text, _profile(payload))
    logger.info(
        "ats_general score=%s career_level=%s role=%s chars=%s elapsed_ms=%.1f",
        result.score,
        result.meta.career_level,
        result.meta.role or "-",
        len(payload.resume_text),
        (time.perf_counter() - started) * 1000,
    )
    return GeneralATSResponse(**result.model_dump())


def run_match_ats(payload: MatchATSRequest) -> MatchATSResponse:
    if not payload.resume_text.strip() or not payload.jd_text.strip():
        raise EmptyDocumentError("Could not read text from resume or JD.")

    started = time.perf_counter()
    result = compute_match_ats(payload.resume_text, payload.jd_text, _profile(payload))
    logger.info(
        "ats_match score=%s general=%s coverage=%.1f hard_skills=%.1f elapsed_ms=%.1f",
        result.score,
        result.general.score,
        result.match.jd_coverage_percent,
        result.match.hard_skill_coverage_percent,
        (time.perf_counter() - started) * 1000,
    )
    return MatchATSResponse(**result.model_dump())
