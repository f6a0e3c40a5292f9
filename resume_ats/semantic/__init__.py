from .match import MatchDetails, MatchResult, compute_match_ats
from .tfidf import tfidf_cosine

__all__ = ["MatchDetails", "MatchResult", "compute_match_ats", "tfidf_cosine"]
