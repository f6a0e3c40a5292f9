from __future__ import annotations

from pydantic import BaseModel, Field

from resume_ats.core.settings import settings
from resume_ats.scoring import GeneralScoreResult
from resume_ats.semantic import MatchResult

_MAX_TEXT = settings.ats_max_text_chars


class ATSProfileFields(BaseModel):
    career_level: str | None = Field(default=None, max_length=20)
    role: str | None = Field(default=None, max_length=40)


class GeneralATSRequest(ATSProfileFields):
    resume_text: str = Field(min_length=1, max_length=_MAX_TEXT)


class MatchATSRequest(ATSProfileFields):
    resume_text: str = Field(min_length=1, max_length=_MAX_TEXT)
    jd_text: str = Field(min_length=1, max_length=_MAX_TEXT)


class GeneralATSResponse(GeneralScoreResult):
    ok: bool = True


class MatchATSResponse(MatchResult):
    ok: bool = True
