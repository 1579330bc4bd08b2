"""
Input schemas for candidate ranking.

Candidate records come from scraping collaborators and may be missing any
field or carry values of the wrong type. Validators coerce everything to a
documented default instead of failing.
"""

import re
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return ""


def _as_years(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        years = float(value)
    elif isinstance(value, str):
        match = _NUMBER.search(value)
        years = float(match.group(0)) if match else 0.0
    else:
        return 0.0
    if years != years or years < 0:  # NaN or negative
        return 0.0
    return years


def _as_text_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        return []
    return [t for t in (_as_text(v) for v in value) if t]


class EmploymentEntry(BaseModel):
    """One position from a candidate's employment history."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    company: str = Field(default="", validation_alias=AliasChoices("company", "employer", "organization_name"))
    title: str = ""
    start_date: str = Field(default="", validation_alias=AliasChoices("start_date", "startDate"))
    end_date: str = Field(default="", validation_alias=AliasChoices("end_date", "endDate"))

    @field_validator("company", "title", "start_date", "end_date", mode="before")
    @classmethod
    def _text(cls, value):
        return _as_text(value)


class CandidateRecord(BaseModel):
    """Raw candidate as supplied by a candidate source."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    title: str = ""
    company: str = ""
    location: str = ""
    experience: float = 0.0
    email: str = ""
    linkedin: str = ""
    skills: List[str] = Field(default_factory=list)
    experience_details: List[EmploymentEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("experience_details", "experienceDetails"),
    )
    connection_degree: str = Field(
        default="", validation_alias=AliasChoices("connection_degree", "connectionDegree")
    )
    source: str = ""
    external_id: str = Field(
        default="", validation_alias=AliasChoices("external_id", "externalId", "apolloId", "apollo_id")
    )

    @field_validator(
        "name", "title", "company", "location", "email", "linkedin",
        "connection_degree", "source", "external_id",
        mode="before",
    )
    @classmethod
    def _text(cls, value):
        return _as_text(value)

    @field_validator("experience", mode="before")
    @classmethod
    def _years(cls, value):
        return _as_years(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills(cls, value):
        return _as_text_list(value)

    @field_validator("experience_details", mode="before")
    @classmethod
    def _history(cls, value):
        if not isinstance(value, (list, tuple)):
            return []
        return [entry for entry in value if isinstance(entry, (dict, EmploymentEntry))]

    @classmethod
    def from_raw(cls, raw: Any) -> "CandidateRecord":
        """Build a record from a dict, an existing record, or anything else."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, dict):
            return cls.model_validate(raw)
        return cls()


class RankingOptions(BaseModel):
    """Per-request ranking options."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_description: str = Field(
        default="", validation_alias=AliasChoices("job_description", "jobDescription")
    )
    industry: Optional[str] = None
    required_experience: float = Field(
        default=0.0, validation_alias=AliasChoices("required_experience", "requiredExperience")
    )
    required_skills: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("required_skills", "requiredSkills")
    )

    @field_validator("job_description", mode="before")
    @classmethod
    def _text(cls, value):
        return _as_text(value)

    @field_validator("industry", mode="before")
    @classmethod
    def _industry(cls, value):
        return _as_text(value).lower() or None

    @field_validator("required_experience", mode="before")
    @classmethod
    def _years(cls, value):
        return _as_years(value)

    @field_validator("required_skills", mode="before")
    @classmethod
    def _skills(cls, value):
        return _as_text_list(value)

    @classmethod
    def from_raw(cls, raw: Any) -> "RankingOptions":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, dict):
            return cls.model_validate(raw)
        return cls()
