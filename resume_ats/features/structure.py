from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

_BULLET_PREFIXES = ("-", "•", "▪", "*")
_ALL_CAPS_RE = re.compile(r"^[A-Z0-9 .,&/-]+$")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")


class StructureReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int
    bullet_line_count: int
    bullet_ratio: float
    all_caps_heading_count: int
    has_tabs: bool
    has_pipes: bool
    avg_line_length: float
    non_ascii_ratio: float
    length_score: int
    formatting_score: int
    parse_score: int


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def is_bullet_line(line: str) -> bool:
    return line.startswith(_BULLET_PREFIXES)


def is_all_caps_heading(line: str) -> bool:
    if not 3 < len(line) < 60:
        return False
    if line.endswith("."):
        return False
    return bool(_ALL_CAPS_RE.match(line))


def length_score_for(word_count: int) -> int:
    if word_count < 250:
        return 40
    if word_count < 350:
        return 70
    if word_count <= 900:
        return 100
    if word_count <= 1200:
        return 75
    return 40


def analyze_structure(text: str) -> StructureReport:
    """Layout signals for text whose line breaks are still intact."""
    text = text or ""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    word_count = len(text.split())

    bullet_lines = sum(1 for line in lines if is_bullet_line(line))
    bullet_ratio = bullet_lines / len(lines) if lines else 0.0
    all_caps_headings = sum(1 for line in lines if is_all_caps_heading(line))
    has_tabs = "\t" in text
    has_pipes = "|" in text
    non_ascii_ratio = len(_NON_ASCII_RE.findall(text)) / max(1, len(text))
    avg_line_length = sum(len(line) for line in lines) / len(lines) if lines else 0.0

    if lines:
        formatting = 50
        if 0.25 <= bullet_ratio <= 0.7:
            formatting += 20
        if 0.4 <= bullet_ratio <= 0.6:
            formatting += 10
        if all_caps_headings >= 3:
            formatting += 10
        if has_tabs or has_pipes:
            formatting -= 20

        parse = 80
        if non_ascii_ratio > 0.05:
            parse -= 20
        if avg_line_length > 110:
            parse -= 20
        if has_tabs or has_pipes:
            parse -= 10
        if bullet_ratio < 0.1:
            parse -= 10
    else:
        # Nothing to format or parse.
        formatting = 0
        parse = 0

    return StructureReport(
        word_count=word_count,
        bullet_line_count=bullet_lines,
        bullet_ratio=bullet_ratio,
        all_caps_heading_count=all_caps_headings,
        has_tabs=has_tabs,
        has_pipes=has_pipes,
        avg_line_length=avg_line_length,
        non_ascii_ratio=non_ascii_ratio,
        length_score=length_score_for(word_count),
        formatting_score=_clamp(formatting),
        parse_score=_clamp(parse),
    )
