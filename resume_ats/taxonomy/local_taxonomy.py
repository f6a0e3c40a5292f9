from __future__ import annotations

import json
import re
from pathlib import Path

from .provider import ExtractedSkills, TaxonomyProvider


def skill_pattern(name: str) -> re.Pattern[str]:
    # Lookarounds instead of \b so names ending in symbols (c++, c#) still match.
    return re.compile(rf"(?<![\w]){re.escape(name)}(?![\w])", re.IGNORECASE)


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, skills_path: str | Path | None = None) -> None:
        path = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")
        self.version, self._categories, self._aliases = self._load_skills(path)
        self._patterns = [
            (category, self.canonical_name(name), skill_pattern(name))
            for category, names in self._categories.items()
            for name in names
        ]

    @staticmethod
    def _load_skills(path: Path) -> tuple[str, dict[str, tuple[str, ...]], dict[str, str]]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(f"Unable to load skill taxonomy '{path}': {exc}") from exc

        categories = raw.get("categories") if isinstance(raw, dict) else None
        if not isinstance(categories, dict) or not categories:
            raise RuntimeError(f"Invalid skill taxonomy '{path}': expected a 'categories' mapping.")

        aliases = raw.get("aliases") or {}
        if not isinstance(aliases, dict):
            raise RuntimeError(f"Invalid skill taxonomy '{path}': 'aliases' must be a mapping.")

        parsed: dict[str, tuple[str, ...]] = {}
        for category, names in categories.items():
            clean = [str(name).strip().lower() for name in names or []]
            parsed[str(category)] = tuple(dict.fromkeys(name for name in clean if name))
        alias_map = {
            str(alias).strip().lower(): str(target).strip().lower()
            for alias, target in aliases.items()
        }
        return str(raw.get("version", "0")), parsed, alias_map

    def canonical_name(self, name: str) -> str:
        return self._aliases.get(name, name)

    def categories(self) -> dict[str, tuple[str, ...]]:
        return dict(self._categories)

    def extract_skills(self, text: str) -> ExtractedSkills:
        lower = (text or "").lower()
        flat: list[str] = []
        by_category: dict[str, list[str]] = {}
        for category, name, pattern in self._patterns:
            # Aliases share their canonical name, so one mention counts once.
            if name in flat and name in by_category.get(category, []):
                continue
            if not pattern.search(lower):
                continue
            bucket = by_category.setdefault(category, [])
            if name not in bucket:
                bucket.append(name)
            if name not in flat:
                flat.append(name)
        return ExtractedSkills(flat=flat, categories=by_category)
