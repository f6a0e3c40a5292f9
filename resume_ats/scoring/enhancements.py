from __future__ import annotations

from resume_ats.features.contact import ContactReport
from resume_ats.features.keywords import KeywordReport
from resume_ats.features.readability import ReadabilityReport
from resume_ats.features.sections import SectionReport, core_sections
from resume_ats.features.structure import StructureReport
from resume_ats.taxonomy import ExtractedSkills

ENHANCEMENT_SECTIONS = ("global", "summary", "experience", "skills", "projects")

_STRONG_MESSAGE = (
    "Your resume is structurally strong. For each job, keep tailoring your summary "
    "and skills to the exact JD keywords."
)
_CONTACT_LABELS = (
    ("has_email", "professional email"),
    ("has_phone", "phone number"),
    ("has_linkedin", "LinkedIn"),
    ("has_github", "GitHub"),
    ("has_portfolio", "portfolio link"),
)


def build_enhancements(
    *,
    sections: SectionReport,
    structure: StructureReport,
    readability: ReadabilityReport,
    contact: ContactReport,
    keywords: KeywordReport,
    skills: ExtractedSkills,
) -> dict[str, list[str]]:
    out: dict[str, list[str]] = {name: [] for name in ENHANCEMENT_SECTIONS}

    if sections.score < 80:
        missing = [
            name.capitalize()
            for name in core_sections()
            if not sections.present.get(name, False)
        ]
        if missing:
            out["global"].append(
                f"Add or improve clear section headings for: {', '.join(missing)}. "
                "ATS parsers rely heavily on these markers."
            )

    if structure.bullet_ratio < 0.25:
        out["experience"].append(
            "Convert dense paragraphs into bullet points, each describing one measurable "
            "achievement (action + metric)."
        )
    elif structure.bullet_ratio > 0.7:
        out["experience"].append(
            "Group very long bullet lists into short paragraphs with a summary line so key "
            "outcomes stand out."
        )

    if structure.length_score < 70:
        if structure.word_count < 350:
            out["experience"].append(
                "Your resume is quite short. Add more detail on responsibilities, tools, and "
                "outcomes for each role."
            )
        else:
            out["global"].append(
                "Your resume is long for ATS. Trim older or less relevant experience and keep "
                "only what supports the target role."
            )

    if readability.readability_score < 80:
        out["experience"].append(
            "Shorten very long sentences (20+ words) into two lines, each focusing on one "
            "action and one measurable result."
        )

    if contact.score < 80:
        missing_channels = [label for field, label in _CONTACT_LABELS if not getattr(contact, field)]
        if missing_channels:
            out["global"].append(
                f"Add a concise contact row at the top that includes: {', '.join(missing_channels)}. "
                "ATS systems often show this as a header for recruiters."
            )

    if not skills.flat:
        out["skills"].append(
            "List concrete tools and technologies (e.g. React, Node, PostgreSQL, AWS) in a "
            "dedicated Skills section."
        )
    elif len(skills.flat) < 6:
        out["skills"].append(
            "Expand your Skills section with more specific technologies that match your "
            "target role."
        )

    if keywords.technical_score < 70:
        out["skills"].append(
            "Include more role-specific keywords inside your Experience bullets (not only in "
            "the Skills list) to improve ATS keyword ranking."
        )

    if not (out["global"] or out["summary"] or out["experience"]):
        out["global"].append(_STRONG_MESSAGE)

    return {name: list(dict.fromkeys(messages)) for name, messages in out.items()}


def flatten_enhancements(enhancements: dict[str, list[str]], limit: int = 10) -> list[str]:
    flat = [message for name in ENHANCEMENT_SECTIONS for message in enhancements.get(name, [])]
    return flat[: max(0, limit)]
