from functools import lru_cache

from .local_taxonomy import LocalTaxonomy
from .provider import ExtractedSkills, TaxonomyProvider


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> TaxonomyProvider:
    return LocalTaxonomy()


def extract_skills(text: str, taxonomy_provider: TaxonomyProvider | None = None) -> ExtractedSkills:
    provider = taxonomy_provider or get_default_taxonomy_provider()
    return provider.extract_skills(text)


__all__ = [
    "ExtractedSkills",
    "TaxonomyProvider",
    "LocalTaxonomy",
    "get_default_taxonomy_provider",
    "extract_skills",
]
