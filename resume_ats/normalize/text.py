from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from resume_ats.core.config.scoring import get_scoring_value

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_PAGE_OF_RE = re.compile(r"^page \d+ of \d+$", re.IGNORECASE)
_PAGE_NUMBER_RE = re.compile(r"^\d+$")
_WHITESPACE_RE = re.compile(r"\s+")
_DEFAULT_MAX_INPUT_CHARS = 300_000


@dataclass(frozen=True, slots=True)
class NormalizedText:
    # Artifact-free text that keeps its original line breaks.
    layout: str
    # Same text with every whitespace run collapsed to one space.
    flat: str


def is_page_artifact(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return True
    return bool(_PAGE_OF_RE.match(stripped) or _PAGE_NUMBER_RE.match(stripped))


def strip_page_artifacts(text: str) -> str:
    """Drop blank lines, "Page N of M" footers and bare page numbers."""
    lines = _LINE_SPLIT_RE.split(text or "")
    return "\n".join(line for line in lines if not is_page_artifact(line))


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", (text or "").replace("\r\n", "\n")).strip()


def truncate_input(text: str, max_chars: int | None = None) -> str:
    limit = max_chars
    if limit is None:
        limit = int(get_scoring_value("limits.max_input_chars", _DEFAULT_MAX_INPUT_CHARS))
    if limit <= 0 or len(text) <= limit:
        return text
    logger.warning("ats_input_truncated original_chars=%s limit=%s", len(text), limit)
    return text[:limit]


def normalize_text(text: str | None) -> NormalizedText:
    layout = strip_page_artifacts(truncate_input(text or ""))
    return NormalizedText(layout=layout, flat=normalize_whitespace(layout))
