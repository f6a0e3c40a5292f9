from __future__ import annotations

from collections.abc import Mapping

import numpy as np
from pydantic import BaseModel, ConfigDict


class BalanceReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    stdev: float
    score: int


def balance_score_for(stdev: float) -> int:
    if stdev < 8:
        return 100
    if stdev < 15:
        return 80
    if stdev < 25:
        return 60
    return 40


def compute_balance(scores: Mapping[str, float]) -> BalanceReport:
    """Spread of the base sub-scores; an even profile beats a spiky one at equal mean."""
    if not scores:
        return BalanceReport(mean=0.0, stdev=0.0, score=100)
    values = np.asarray(list(scores.values()), dtype=float)
    mean = float(values.mean())
    stdev = float(values.std())
    return BalanceReport(mean=mean, stdev=stdev, score=balance_score_for(stdev))
