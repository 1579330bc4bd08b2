"""
Industry catalog for cross-industry scoring.
Loads industry profiles from YAML into immutable Pydantic models.
"""

import os
from typing import Dict, Iterator, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "industries.yaml")


class IndustryProfile(BaseModel):
    """Heuristic vocabulary and weighting for one market vertical."""
    model_config = ConfigDict(frozen=True)

    key: str
    keywords: Tuple[str, ...] = ()
    top_companies: Tuple[str, ...] = ()
    experience_multiplier: float = Field(default=1.0, ge=0)
    seniority_terms: Tuple[str, ...] = ()
    junior_terms: Tuple[str, ...] = ()
    specializations: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    common_skills: Tuple[str, ...] = ()

    def is_top_company(self, company: str) -> bool:
        """True if the company name contains a reputable employer fragment."""
        company_lower = (company or "").lower()
        if not company_lower:
            return False
        return any(c.lower() in company_lower for c in self.top_companies)

    def matching_specializations(self, title: str) -> Iterator[str]:
        """Yield specialization names whose keywords appear in the title."""
        title_lower = (title or "").lower()
        if not title_lower:
            return
        for name, keywords in self.specializations.items():
            if any(kw.lower() in title_lower for kw in keywords):
                yield name

    def has_seniority_term(self, title: str) -> bool:
        title_lower = (title or "").lower()
        return bool(title_lower) and any(t.lower() in title_lower for t in self.seniority_terms)

    def has_junior_term(self, title: str) -> bool:
        title_lower = (title or "").lower()
        return bool(title_lower) and any(t.lower() in title_lower for t in self.junior_terms)


class IndustryCatalog(BaseModel):
    """Ordered, read-only mapping of industry key to profile."""
    model_config = ConfigDict(frozen=True)

    profiles: Dict[str, IndustryProfile]
    default_key: str = "tech"

    @model_validator(mode="after")
    def _check_default(self):
        if not self.profiles:
            raise ValueError("Industry catalog must define at least one industry")
        if self.default_key not in self.profiles:
            raise ValueError(
                f"Default industry '{self.default_key}' is not defined. "
                f"Available industries: {', '.join(self.profiles)}"
            )
        return self

    def __contains__(self, key: object) -> bool:
        return key in self.profiles

    def items(self) -> Iterator[Tuple[str, IndustryProfile]]:
        return iter(self.profiles.items())

    def keys(self) -> Tuple[str, ...]:
        return tuple(self.profiles)

    @property
    def default(self) -> IndustryProfile:
        return self.profiles[self.default_key]

    def get(self, key: Optional[str]) -> IndustryProfile:
        """Return the profile for key, or the default profile if unknown."""
        if key and key in self.profiles:
            return self.profiles[key]
        return self.default

    def resolve_key(self, key: Optional[str]) -> str:
        return key if key and key in self.profiles else self.default_key


def load_catalog(path: Optional[str] = None, default_key: Optional[str] = None) -> IndustryCatalog:
    """
    Load and validate an industry catalog from YAML.

    Args:
        path: Catalog file (default: the bundled industries.yaml)
        default_key: Overrides the default industry declared in the file

    Returns:
        Validated IndustryCatalog

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        ValueError: If the catalog structure is invalid
    """
    path = path or DEFAULT_CATALOG_PATH
    if not os.path.exists(path):
        raise FileNotFoundError(f"Industry catalog not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    industries = data.get("industries") or {}
    if not isinstance(industries, dict):
        raise ValueError(f"Invalid industry catalog in {path}: 'industries' must be a mapping")

    try:
        profiles = {
            str(key): IndustryProfile(key=str(key), **(body or {}))
            for key, body in industries.items()
        }
        return IndustryCatalog(
            profiles=profiles,
            default_key=default_key or data.get("default") or "tech",
        )
    except Exception as e:
        raise ValueError(f"Invalid industry catalog in {path}: {e}")
