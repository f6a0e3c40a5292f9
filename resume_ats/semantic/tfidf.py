from __future__ import annotations

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity


def tfidf_cosine(left: str, right: str) -> float:
    """Cosine similarity of the two documents' TF-IDF vectors over their joint vocabulary."""
    if not (left or "").strip() or not (right or "").strip():
        return 0.0
    vectorizer = TfidfVectorizer(lowercase=True, stop_words="english")
    try:
        matrix = vectorizer.fit_transform([left, right])
    except ValueError:
        # Raised when both documents contain only stop words or no tokens at all.
        return 0.0
    similarity = float(cosine_similarity(matrix[0], matrix[1])[0][0])
    return max(0.0, min(1.0, similarity))
