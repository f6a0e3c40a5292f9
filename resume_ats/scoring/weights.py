from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, field_validator

from resume_ats.core.config.scoring import get_scoring_table, get_scoring_value

DIMENSIONS: tuple[str, ...] = (
    "sections",
    "formatting",
    "parseability",
    "length",
    "readability",
    "contact",
    "richness",
    "keywords",
    "balance",
)
BASE_DIMENSIONS: tuple[str, ...] = DIMENSIONS[:-1]


class AnalysisProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    career_level: str = "entry"
    role: str = ""

    @field_validator("career_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        text = str(value or "").strip().lower()
        return text or str(get_scoring_value("general.default_career_level", "entry"))

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: object) -> str:
        return str(value or "").strip().upper()


def base_weights() -> dict[str, float]:
    table = get_scoring_table("general.weights")
    missing = [dimension for dimension in DIMENSIONS if dimension not in table]
    if missing:
        raise RuntimeError(f"Invalid scoring config: 'general.weights' is missing {missing}.")
    return {dimension: table[dimension] for dimension in DIMENSIONS}


def _multipliers(path: str, key: str) -> dict[str, float]:
    tables = get_scoring_value(path, {})
    if not isinstance(tables, dict) or key not in tables:
        return {}
    return get_scoring_table(f"{path}.{key}")


def build_weight_profile(profile: AnalysisProfile) -> dict[str, float]:
    """Base weights x career-level x role multipliers, renormalized to sum to 1."""
    base = base_weights()
    weights = dict(base)
    for path, key in (
        ("general.career_level_adjust", profile.career_level),
        ("general.role_adjust", profile.role),
    ):
        for dimension, multiplier in _multipliers(path, key).items():
            if dimension in weights:
                weights[dimension] *= multiplier

    total = math.fsum(weights.values())
    if total <= 0:
        weights, total = base, math.fsum(base.values())
    return {dimension: value / total for dimension, value in weights.items()}
