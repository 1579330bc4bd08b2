"""
Candidate summaries.

The template summary is always produced and is the fallback whenever the
optional text-generation rewrite is unavailable or fails.
"""

import logging
import threading
import time
from dataclasses import replace
from typing import List, Optional, Sequence

from .candidate import CandidateRecord
from .signals import Confidence, RankedCandidate, seniority_description

logger = logging.getLogger(__name__)

MIN_ENHANCED_LENGTH = 20
JOB_CONTEXT_CHARS = 200


def _format_years(years: float) -> str:
    return f"{years:g}"


def generate_summary(
    candidate: CandidateRecord,
    skills: Sequence[str],
    seniority_level: str,
    confidence: Optional[Confidence],
    score: int,
) -> str:
    """
    Build a deterministic multi-sentence summary.

    Args:
        candidate: Candidate record
        skills: Normalized skills
        seniority_level: Seniority level name
        confidence: Confidence tier, if determined
        score: Total score

    Returns:
        Summary text; always ends with the score out of 100
    """
    parts = []
    title, company = candidate.title, candidate.company

    if candidate.experience > 0:
        intro = f"{_format_years(candidate.experience)}+ years of experience"
        if title and company:
            intro += f", currently as {title} at {company}"
        elif title:
            intro += f" as {title}"
        parts.append(intro + ".")
    elif title and company:
        parts.append(f"Currently {title} at {company}.")
    elif title:
        parts.append(f"Current role: {title}.")

    description = seniority_description(seniority_level)
    if description:
        parts.append(description)

    employers = list(dict.fromkeys(e.company for e in candidate.experience_details if e.company))
    if employers:
        shown = employers[:2]
        if len(shown) == 1:
            history = f"Past experience includes work at {shown[0]}"
        else:
            history = f"Past experience includes roles at {' and '.join(shown)}"
        if len(candidate.experience_details) > len(shown):
            history += " among others"
        parts.append(history + ".")

    if skills:
        more = " and more" if len(skills) > 4 else ""
        parts.append(f"Key skills include {', '.join(skills[:4])}{more}.")

    if confidence:
        parts.append(f"{confidence.label} ({score}/100).")
    else:
        parts.append(f"Candidate score: {score}/100.")

    return " ".join(parts)


def build_enhancement_prompt(candidate: RankedCandidate, job_description: str = "", industry: str = "") -> str:
    """Prompt asking for a short client-ready rewrite of a candidate summary."""
    if job_description:
        context = f"Job Description: {job_description[:JOB_CONTEXT_CHARS]}..."
    else:
        context = f"Industry: {industry or 'Technology'}"

    def value(v) -> str:
        return str(v) if v else "Not specified"

    return (
        "Write a concise, professional candidate summary (2-3 sentences) for a hiring manager.\n"
        "\n"
        "CANDIDATE:\n"
        f"Name: {candidate.name}\n"
        f"Current Title: {value(candidate.title)}\n"
        f"Current Company: {value(candidate.company)}\n"
        f"Years of Experience: {value(candidate.experience and _format_years(candidate.experience))}\n"
        f"Location: {value(candidate.location)}\n"
        f"Skills: {value(', '.join(candidate.skills))}\n"
        f"Seniority Level: {value(candidate.seniority_level)}\n"
        f"Match Score: {candidate.score}/100 ({candidate.confidence.level})\n"
        "\n"
        "CONTEXT:\n"
        f"{context}\n"
        "\n"
        "Requirements:\n"
        "1. Client-ready: professional, concise, objective\n"
        "2. Highlight key strengths and experience level\n"
        "3. Mention the match score and confidence level\n"
        "4. No marketing language, only a factual assessment\n"
        "\n"
        "Return only the summary text without labels or explanations."
    )


class SummaryEnhancer:
    """
    Rewrites the summaries of the top candidates with a text generator.

    Calls run one at a time with a fixed delay in between. Failures are
    logged and the template summary is kept.
    """

    def __init__(self, generator, top_n: int = 5, delay_seconds: float = 1.0):
        """
        Args:
            generator: Object with generate(prompt) -> str
            top_n: Number of leading candidates to rewrite
            delay_seconds: Pause between successive calls
        """
        self.generator = generator
        self.top_n = top_n
        self.delay_seconds = delay_seconds

    def enhance(
        self,
        candidates: List[RankedCandidate],
        job_description: str = "",
        industry: str = "",
        cancel_event: Optional[threading.Event] = None,
    ) -> List[RankedCandidate]:
        """
        Return candidates in the same order, top N with rewritten summaries.

        Args:
            candidates: Candidates sorted by score
            job_description: Job text used as prompt context
            industry: Industry key used when no job text is given
            cancel_event: Set to stop the pass; remaining summaries stay as-is

        Returns:
            New list; candidates past the top N are returned unchanged
        """
        if self.generator is None or not candidates:
            return list(candidates)

        result = list(candidates)
        for index, candidate in enumerate(result[:self.top_n]):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("Summary enhancement cancelled")
                break
            if index > 0 and self.delay_seconds > 0:
                if cancel_event is not None:
                    if cancel_event.wait(self.delay_seconds):
                        logger.info("Summary enhancement cancelled")
                        break
                else:
                    time.sleep(self.delay_seconds)

            try:
                prompt = build_enhancement_prompt(candidate, job_description, industry)
                text = (self.generator.generate(prompt) or "").strip()
            except Exception as e:
                logger.warning(f"Failed to enhance summary for {candidate.name}: {e}")
                continue

            if len(text) > MIN_ENHANCED_LENGTH:
                result[index] = replace(candidate, summary=text)
                logger.info(f"Enhanced summary for {candidate.name}")
            else:
                logger.warning(f"Ignoring short generated summary for {candidate.name}")

        return result
