from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from resume_ats.normalize.tokenizer import Tokenizer, get_default_tokenizer


class ReadabilityReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    sentence_count: int
    word_count: int
    avg_sentence_length: float
    readability_score: int


def readability_score_for(avg_words: float) -> int:
    if avg_words < 8:
        return 60
    if avg_words <= 22:
        return 100
    if avg_words <= 30:
        return 80
    return 50


def analyze_readability(text: str, tokenizer: Tokenizer | None = None) -> ReadabilityReport:
    active = tokenizer or get_default_tokenizer()
    sentences = active.sentences(text or "")
    words = active.words(text or "")
    avg_words = len(words) / max(1, len(sentences))
    return ReadabilityReport(
        sentence_count=len(sentences),
        word_count=len(words),
        avg_sentence_length=avg_words,
        readability_score=readability_score_for(avg_words),
    )
