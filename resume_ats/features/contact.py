from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from resume_ats.core.config.scoring import get_scoring_value

_EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
_PHONE_RE = re.compile(r"\+?\d[\d\s\-]{8,}")
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/", re.IGNORECASE)
_GITHUB_RE = re.compile(r"github\.com/", re.IGNORECASE)
_PORTFOLIO_RE = re.compile(r"behance\.net|dribbble\.com|medium\.com|portfolio|devfolio\.co", re.IGNORECASE)
_DEFAULT_SCORE_TABLE = (20, 45, 65, 85, 100)


class ContactReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_email: bool
    has_phone: bool
    has_linkedin: bool
    has_github: bool
    has_portfolio: bool
    score: int

    @property
    def channel_count(self) -> int:
        return sum(
            (self.has_email, self.has_phone, self.has_linkedin, self.has_github, self.has_portfolio)
        )


def contact_score_for(channel_count: int) -> int:
    table = get_scoring_value("contact.score_by_channel_count", list(_DEFAULT_SCORE_TABLE))
    if not table:
        table = list(_DEFAULT_SCORE_TABLE)
    index = max(0, min(channel_count, len(table) - 1))
    return max(0, min(100, int(table[index])))


def analyze_contact(text: str) -> ContactReport:
    text = text or ""
    flags = {
        "has_email": bool(_EMAIL_RE.search(text)),
        "has_phone": bool(_PHONE_RE.search(text)),
        "has_linkedin": bool(_LINKEDIN_RE.search(text)),
        "has_github": bool(_GITHUB_RE.search(text)),
        "has_portfolio": bool(_PORTFOLIO_RE.search(text)),
    }
    return ContactReport(**flags, score=contact_score_for(sum(flags.values())))
