"""
Scoring engine for candidate ranking.
Calculates weighted sub-scores, confidence and the enriched candidate record.
"""

import re
from dataclasses import replace
from typing import Optional, Sequence

from config import ScoreCaps
from .candidate import CandidateRecord, RankingOptions
from .catalog import IndustryProfile
from .extractor import SignalExtractor
from .signals import CONFIDENCE_TIERS, Confidence, RankedCandidate, ScoreDetails
from .summary import generate_summary
from .text import parse_required_years, round_half_up, text_relevance


_PRESTIGE = re.compile(r"global|worldwide|international|leading|top", re.IGNORECASE)


def _clamp(value: float, cap: int) -> int:
    return max(0, min(int(value), cap))


class ScoringEngine:
    """Calculates scores and builds ranked candidates."""

    def __init__(self, extractor: SignalExtractor, caps: Optional[ScoreCaps] = None):
        """
        Initialize scoring engine.

        Args:
            extractor: SignalExtractor for completeness, skills, seniority and tags
            caps: Upper bound per scoring dimension
        """
        self.extractor = extractor
        self.caps = caps if caps is not None else ScoreCaps()

    def score_candidate(
        self,
        candidate: CandidateRecord,
        skills: Sequence[str],
        completeness: int,
        profile: IndustryProfile,
        options: RankingOptions,
    ) -> ScoreDetails:
        """
        Calculate the seven sub-scores and the total for a candidate.

        Args:
            candidate: Candidate record
            skills: Normalized skills
            completeness: Data completeness percentage
            profile: Industry profile
            options: Ranking options with job description and requirements

        Returns:
            ScoreDetails with every sub-score capped and total in [0, 100]
        """
        caps = self.caps
        experience = self._experience_score(candidate.experience, profile, options.required_experience)
        title = self._title_score(candidate.title, profile, options.job_description)
        company = self._company_score(candidate.company, profile)
        skills_score = self._skills_score(skills, profile, options.required_skills)
        job_fit = self._job_fit_score(candidate, skills, completeness, options.job_description)
        contact = self._contact_score(candidate)
        quality = round_half_up(completeness / 10)

        details = ScoreDetails(
            experience_score=_clamp(experience, caps.experience),
            title_score=_clamp(title, caps.title),
            company_score=_clamp(company, caps.company),
            skills_score=_clamp(skills_score, caps.skills),
            job_fit_score=_clamp(job_fit, caps.job_fit),
            contact_info_score=_clamp(contact, caps.contact_info),
            data_quality_score=_clamp(quality, caps.data_quality),
        )
        total = _clamp(details.subtotal(), caps.total)
        return replace(details, score=total)

    def _experience_score(self, experience: float, profile: IndustryProfile, required: float) -> int:
        if experience <= 0:
            return 0
        score = round_half_up(min(experience * 2, 20) * profile.experience_multiplier)
        if required > 0 and experience >= required:
            score += 5
        return score

    def _title_score(self, title: str, profile: IndustryProfile, job_description: str) -> int:
        if not title:
            return 0
        title_lower = title.lower()
        score = 5
        if profile.has_seniority_term(title_lower):
            score += 10
        elif 'manager' in title_lower or 'director' in title_lower:
            score += 8
        elif 'specialist' in title_lower or 'analyst' in title_lower:
            score += 5
        elif profile.has_junior_term(title_lower):
            score += 3

        if job_description:
            score += round_half_up(text_relevance(title, job_description) * 5)
        return score

    def _company_score(self, company: str, profile: IndustryProfile) -> int:
        if not company:
            return 0
        score = 5
        if profile.is_top_company(company):
            score += 10
        if _PRESTIGE.search(company):
            score += 3
        return score

    def _skills_score(self, skills: Sequence[str], profile: IndustryProfile, required: Sequence[str]) -> int:
        if not skills:
            return 0
        score = min(len(skills), 5)
        skills_lower = [s.lower() for s in skills]

        if required:
            matched = [r for r in required if any(r.lower() in s for s in skills_lower)]
            score += round_half_up(len(matched) / len(required) * 15)
        elif profile.common_skills:
            common_lower = [c.lower() for c in profile.common_skills]
            matches = sum(1 for s in skills_lower if any(s in c for c in common_lower))
            score += min(matches * 2, 10)
        return score

    def _job_fit_score(
        self,
        candidate: CandidateRecord,
        skills: Sequence[str],
        completeness: int,
        job_description: str,
    ) -> int:
        if not job_description:
            return round_half_up(completeness / 10)
        return round_half_up(self.job_relevance(candidate, skills, job_description) * 15)

    def job_relevance(self, candidate: CandidateRecord, skills: Sequence[str], job_description: str) -> float:
        """
        Blend of title, skills and experience relevance to a job description.

        Returns:
            Relevance in [0, 1]
        """
        if not job_description:
            return 0.0
        job_lower = job_description.lower()

        title_relevance = text_relevance(candidate.title, job_description)

        skills_relevance = 0.0
        if skills:
            matched = [s for s in skills if s.lower() in job_lower]
            skills_relevance = len(matched) / len(skills)

        experience = candidate.experience
        required_years = parse_required_years(job_description) or 0
        if required_years > 0 and experience > 0:
            experience_relevance = 1.0 if experience >= required_years else experience / required_years
        else:
            experience_relevance = 0.7 if experience > 3 else 0.3

        return title_relevance * 0.4 + skills_relevance * 0.4 + experience_relevance * 0.2

    def _contact_score(self, candidate: CandidateRecord) -> int:
        score = 0
        if '@' in candidate.email:
            score += 5
        if '1st' in candidate.connection_degree:
            score += 2
        return score

    def determine_confidence(self, score: int, completeness: int) -> Confidence:
        """
        Confidence tier from score adjusted by data completeness.

        Args:
            score: Total score (0-100)
            completeness: Data completeness percentage

        Returns:
            Confidence with tier, label and adjusted score
        """
        adjusted = score * (completeness / 100)
        for tier in reversed(CONFIDENCE_TIERS):
            if adjusted >= tier.threshold:
                return Confidence(level=tier.level, label=tier.label, score=adjusted)
        lowest = CONFIDENCE_TIERS[0]
        return Confidence(level=lowest.level, label=lowest.label, score=adjusted)

    def enrich(
        self,
        candidate: CandidateRecord,
        profile: IndustryProfile,
        industry_key: str,
        options: RankingOptions,
    ) -> RankedCandidate:
        """
        Score and describe one candidate. Pure: the input record is untouched.

        Args:
            candidate: Candidate record
            profile: Industry profile
            industry_key: Industry used for scoring
            options: Ranking options

        Returns:
            RankedCandidate with scores, seniority, confidence, tags and summary
        """
        completeness = self.extractor.calculate_completeness(candidate)
        skills = self.extractor.normalize_skills(candidate.skills, candidate.title, profile)
        details = self.score_candidate(candidate, skills, completeness, profile, options)
        seniority = self.extractor.classify_seniority(candidate.experience, candidate.title, profile)
        tags = self.extractor.generate_tags(candidate, skills, seniority, profile, industry_key)
        confidence = self.determine_confidence(details.score, completeness)
        summary = generate_summary(candidate, skills, seniority, confidence, details.score)

        return RankedCandidate(
            name=candidate.name,
            title=candidate.title,
            company=candidate.company,
            location=candidate.location,
            experience=candidate.experience,
            email=candidate.email,
            linkedin=candidate.linkedin,
            source=candidate.source,
            industry=industry_key,
            score=details.score,
            score_details=details,
            seniority_level=seniority,
            confidence=confidence,
            skills=tuple(skills),
            tags=tuple(tags),
            data_completeness=completeness,
            summary=summary,
            connection_degree=candidate.connection_degree,
            external_id=candidate.external_id,
            experience_details=tuple(candidate.experience_details),
        )
