"""
Tokenizer capability used by the analyzers.

The scoring code only depends on the `Tokenizer` protocol. The default
implementation is backed by NLTK tokenizers that need no corpus downloads:
a word-character `RegexpTokenizer` and an untrained `PunktSentenceTokenizer`.

Usage:
    from resume_ats.normalize.tokenizer import get_default_tokenizer

    tokenizer = get_default_tokenizer()
    tokenizer.words("Built APIs. Led a team.")      # ['Built', 'APIs', 'Led', 'a', 'team']
    tokenizer.sentences("Built APIs. Led a team.")  # ['Built APIs.', 'Led a team.']
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Protocol

from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

_KEYWORD_RE = re.compile(r"[a-z0-9][a-z0-9+#./-]*")
_EDGE_PUNCT = ".,;:/-"


class Tokenizer(Protocol):
    def words(self, text: str) -> list[str]:
        """Split text into word tokens."""

    def sentences(self, text: str) -> list[str]:
        """Split text into sentences."""


class NLTKTokenizer(Tokenizer):
    def __init__(self) -> None:
        self._word_tokenizer = RegexpTokenizer(r"[A-Za-z0-9_]+")
        self._sentence_tokenizer = PunktSentenceTokenizer()

    def words(self, text: str) -> list[str]:
        return self._word_tokenizer.tokenize(text or "")

    def sentences(self, text: str) -> list[str]:
        if not (text or "").strip():
            return []
        return [sentence for sentence in self._sentence_tokenizer.tokenize(text) if sentence.strip()]


@lru_cache(maxsize=1)
def get_default_tokenizer() -> Tokenizer:
    return NLTKTokenizer()


def extract_keywords(text: str) -> list[str]:
    """Lower-cased, de-duplicated keyword list with stop words and bare numbers removed.

    Order follows first appearance so results are stable for identical input.
    """
    keywords: list[str] = []
    seen: set[str] = set()
    for raw in _KEYWORD_RE.findall((text or "").lower()):
        token = raw.strip(_EDGE_PUNCT)
        if not token or token in seen:
            continue
        if token in ENGLISH_STOP_WORDS or token.isdigit():
            continue
        seen.add(token)
        keywords.append(token)
    return keywords
