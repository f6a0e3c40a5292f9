from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class ExtractedSkills(BaseModel):
    model_config = ConfigDict(frozen=True)

    flat: list[str] = Field(default_factory=list)
    categories: dict[str, list[str]] = Field(default_factory=dict)


class TaxonomyProvider(Protocol):
    version: str

    def categories(self) -> dict[str, tuple[str, ...]]:
        """Return category -> skill names."""

    def extract_skills(self, text: str) -> ExtractedSkills:
        """Return taxonomy skills mentioned in text as whole words."""
