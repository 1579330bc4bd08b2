"""
Result dataclasses for candidate scoring.
Each signal captures one part of the ranking outcome.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .candidate import EmploymentEntry


@dataclass(frozen=True)
class ScoreDetails:
    """Sub-scores for each scoring dimension plus the clamped total."""
    experience_score: int = 0  # 0-25 points
    title_score: int = 0  # 0-20 points
    company_score: int = 0  # 0-15 points
    skills_score: int = 0  # 0-20 points
    job_fit_score: int = 0  # 0-15 points
    contact_info_score: int = 0  # 0-10 points
    data_quality_score: int = 0  # 0-10 points
    score: int = 0  # 0-100 total

    def subtotal(self) -> int:
        return (
            self.experience_score + self.title_score + self.company_score
            + self.skills_score + self.job_fit_score + self.contact_info_score
            + self.data_quality_score
        )


@dataclass(frozen=True)
class SeniorityLevel:
    """Career stage with typical experience range."""
    level: str
    min_years: int
    max_years: int
    weight: int  # ordering weight, higher is more senior
    description: str  # summary sentence


SENIORITY_LEVELS: Tuple[SeniorityLevel, ...] = (
    SeniorityLevel("Entry", 0, 2, 1, "Entry-level professional building initial experience."),
    SeniorityLevel("Junior", 1, 3, 2, "Developing professional with foundational skills."),
    SeniorityLevel("Mid-Level", 3, 6, 3, "Mid-level professional with practical expertise."),
    SeniorityLevel("Senior", 5, 10, 4, "Senior professional with deep industry knowledge."),
    SeniorityLevel("Lead", 7, 15, 5, "Technical leader with strong domain expertise."),
    SeniorityLevel("Manager", 5, 15, 5, "Experienced manager with team leadership capabilities."),
    SeniorityLevel("Director", 10, 20, 6, "Experienced director with team and departmental leadership skills."),
    SeniorityLevel("VP", 12, 25, 7, "Senior leader with extensive management experience."),
    SeniorityLevel("Executive", 15, 30, 8, "Executive leader with significant strategic experience."),
)

SENIORITY_BY_NAME: Dict[str, SeniorityLevel] = {s.level: s for s in SENIORITY_LEVELS}


@dataclass(frozen=True)
class ConfidenceTier:
    level: str
    threshold: int
    label: str


CONFIDENCE_TIERS: Tuple[ConfidenceTier, ...] = (
    ConfidenceTier("Low", 25, "Needs More Information"),
    ConfidenceTier("Medium", 50, "Potential Match"),
    ConfidenceTier("High", 75, "Strong Match"),
    ConfidenceTier("Very High", 90, "Excellent Match"),
)


@dataclass(frozen=True)
class Confidence:
    """Confidence tier chosen for a candidate."""
    level: str
    label: str
    score: float  # score adjusted by data completeness


@dataclass(frozen=True)
class RankedCandidate:
    """Enriched candidate ready for reporting."""
    name: str
    title: str
    company: str
    location: str
    experience: float
    email: str
    linkedin: str
    source: str
    industry: str
    score: int
    score_details: ScoreDetails
    seniority_level: str
    confidence: Confidence
    skills: Tuple[str, ...]
    tags: Tuple[str, ...]
    data_completeness: int
    summary: str
    connection_degree: str = ""
    external_id: str = ""
    experience_details: Tuple[EmploymentEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation for downstream consumers."""
        data = asdict(self)
        data["skills"] = list(self.skills)
        data["tags"] = list(self.tags)
        data["experience_details"] = [e.model_dump() for e in self.experience_details]
        return data


def seniority_description(level: str) -> Optional[str]:
    seniority = SENIORITY_BY_NAME.get(level)
    return seniority.description if seniority else None


def to_dicts(candidates: List[RankedCandidate]) -> List[Dict[str, Any]]:
    return [c.to_dict() for c in candidates]
