from .general import GeneralScoreMeta, GeneralScoreResult, compute_general_ats
from .weights import DIMENSIONS, AnalysisProfile, build_weight_profile

__all__ = [
    "AnalysisProfile",
    "DIMENSIONS",
    "GeneralScoreMeta",
    "GeneralScoreResult",
    "build_weight_profile",
    "compute_general_ats",
]
