"""
Signal extraction module for candidate ranking.
Derives industry, completeness, skills, seniority and tags from candidate
records using the vocabularies of the industry catalog.
"""

import re
from typing import Dict, List, Sequence

from .candidate import CandidateRecord
from .catalog import IndustryCatalog, IndustryProfile
from .signals import SENIORITY_LEVELS
from .text import kebab_case, round_half_up


# Field weights for data completeness, summing to 100
COMPLETENESS_WEIGHTS: Dict[str, int] = {
    "title": 20,
    "company": 20,
    "location": 10,
    "experience": 15,
    "email": 10,
    "linkedin": 5,
    "skills": 10,
    "experience_details": 10,
}

REGIONS = ('usa', 'us', 'uk', 'canada', 'europe', 'apac', 'asia', 'australia')

_EXECUTIVE = re.compile(r"\b(chief|cxo|c-level|ceo|cto|cfo|coo|cio|cmo)\b|(?<!vice )\bpresident\b")
_VP = re.compile(r"\b(vp|svp|evp)\b|vice president")
_DIRECTOR = re.compile(r"\bdirector\b|\bhead of\b")
_MANAGER = re.compile(r"\bmanager\b|\bmanagement\b")
_ASSISTANT = re.compile(r"\b(assistant|associate)\b")
_LEAD = re.compile(r"\blead(er|ing)?\b|\b(principal|staff)\b")
_LOCATION_SPLIT = re.compile(r"[,\s]+")


class SignalExtractor:
    """Extracts ranking signals from candidate records."""

    def __init__(self, catalog: IndustryCatalog):
        """
        Initialize signal extractor with the industry catalog.

        Args:
            catalog: Loaded industry catalog
        """
        self.catalog = catalog

    def detect_industry(self, candidates: Sequence[CandidateRecord], job_description: str = "") -> str:
        """
        Pick the industry whose keywords best match titles and job text.

        Args:
            candidates: Candidate records
            job_description: Optional job description text

        Returns:
            Industry key; the catalog default when nothing matches
        """
        titles = [c.title for c in candidates if c.title]
        corpus = " ".join(titles + [job_description or ""]).lower()

        best_key = self.catalog.default_key
        best_matches = 0
        for key, profile in self.catalog.items():
            matches = sum(1 for kw in profile.keywords if kw.lower() in corpus)
            if matches > best_matches:
                best_key, best_matches = key, matches
        return best_key

    def calculate_completeness(self, candidate: CandidateRecord) -> int:
        """
        Weighted percentage of expected fields present on a record.

        Args:
            candidate: Candidate record

        Returns:
            Completeness in [0, 100]
        """
        present = {
            "title": bool(candidate.title),
            "company": bool(candidate.company),
            "location": bool(candidate.location),
            "experience": candidate.experience > 0,
            "email": bool(candidate.email),
            "linkedin": bool(candidate.linkedin),
            "skills": bool(candidate.skills),
            "experience_details": bool(candidate.experience_details),
        }
        total_weight = sum(COMPLETENESS_WEIGHTS.values())
        score = sum(COMPLETENESS_WEIGHTS[k] for k, has in present.items() if has)
        return max(0, min(100, round_half_up(score / total_weight * 100)))

    def normalize_skills(self, skills: Sequence[str], title: str, profile: IndustryProfile) -> List[str]:
        """
        Merge supplied skills with skills and specializations found in the title.

        Args:
            skills: Raw skills (may be empty)
            title: Current title
            profile: Industry profile

        Returns:
            Skills deduplicated case-insensitively, first occurrence kept
        """
        merged = [s.strip() for s in (skills or []) if s and s.strip()]
        title_lower = (title or "").lower()
        if title_lower:
            known = {s.lower() for s in merged}
            for skill in profile.common_skills:
                if skill.lower() in title_lower and skill.lower() not in known:
                    merged.append(skill)
                    known.add(skill.lower())
            merged.extend(profile.matching_specializations(title))

        seen = set()
        unique = []
        for skill in merged:
            if skill.lower() not in seen:
                seen.add(skill.lower())
                unique.append(skill)
        return unique

    def classify_seniority(self, experience: float, title: str, profile: IndustryProfile) -> str:
        """
        Map title language, then years of experience, to a seniority level.

        Args:
            experience: Years of experience
            title: Current title
            profile: Industry profile

        Returns:
            Seniority level name
        """
        title_lower = (title or "").lower()
        if title_lower:
            if _EXECUTIVE.search(title_lower):
                return "Executive"
            if _VP.search(title_lower):
                return "VP"
            if _DIRECTOR.search(title_lower):
                return "Director"
            if _MANAGER.search(title_lower) and not _ASSISTANT.search(title_lower):
                return "Manager"
            if _LEAD.search(title_lower):
                return "Lead"
            if profile.has_seniority_term(title_lower):
                return "Senior"
            if profile.has_junior_term(title_lower):
                return "Mid-Level" if experience > 3 else "Junior"

        return self._level_from_experience(experience)

    def _level_from_experience(self, experience: float) -> str:
        # Highest-weight bucket whose lower bound is met; earlier wins on equal weight
        if experience <= 0:
            return "Mid-Level"
        best = None
        for seniority in SENIORITY_LEVELS:
            if experience >= seniority.min_years and (best is None or seniority.weight > best.weight):
                best = seniority
        return best.level if best else "Mid-Level"

    def generate_tags(
        self,
        candidate: CandidateRecord,
        skills: Sequence[str],
        seniority_level: str,
        profile: IndustryProfile,
        industry_key: str,
    ) -> List[str]:
        """
        Build the descriptive tag set for a candidate.

        Args:
            candidate: Candidate record
            skills: Normalized skills
            seniority_level: Seniority level name
            profile: Industry profile
            industry_key: Industry used for scoring

        Returns:
            Deduplicated tags in insertion order
        """
        tags: List[str] = []
        location_lower = candidate.location.lower()
        title_lower = candidate.title.lower()

        if seniority_level:
            tags.append(kebab_case(seniority_level))

        if "remote" in location_lower or "remote" in title_lower:
            tags.append("remote")

        if location_lower:
            parts = set(_LOCATION_SPLIT.split(location_lower))
            tags.extend(region for region in REGIONS if region in parts)

        tags.extend(profile.matching_specializations(candidate.title))

        if profile.is_top_company(candidate.company):
            tags.append("top-company")

        for skill in list(skills)[:5]:
            skill_tag = kebab_case(skill)
            if skill_tag:
                tags.append(skill_tag)

        if candidate.source:
            tags.append(candidate.source.lower())

        tags.append(industry_key)

        return list(dict.fromkeys(t for t in tags if t))
