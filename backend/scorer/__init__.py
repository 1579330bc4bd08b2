"""
Scorer package for candidate ranking.
Provides signal extraction, scoring and the ranking pipeline.
"""

from .candidate import CandidateRecord, EmploymentEntry, RankingOptions
from .catalog import IndustryCatalog, IndustryProfile, load_catalog
from .engine import ScoringEngine
from .extractor import SignalExtractor
from .llm import BaseTextGenerator, ChatCompletionGenerator, TextGenerationError, build_generator
from .ranker import CandidateRanker, NoCandidatesError, RankingError, rank_candidates
from .signals import (
    Confidence,
    RankedCandidate,
    ScoreDetails,
    SeniorityLevel,
)
from .summary import SummaryEnhancer, generate_summary
from .text import text_relevance

__all__ = [
    'CandidateRecord',
    'EmploymentEntry',
    'RankingOptions',
    'IndustryCatalog',
    'IndustryProfile',
    'load_catalog',
    'ScoringEngine',
    'SignalExtractor',
    'BaseTextGenerator',
    'ChatCompletionGenerator',
    'TextGenerationError',
    'build_generator',
    'CandidateRanker',
    'NoCandidatesError',
    'RankingError',
    'rank_candidates',
    'Confidence',
    'RankedCandidate',
    'ScoreDetails',
    'SeniorityLevel',
    'SummaryEnhancer',
    'generate_summary',
    'text_relevance',
]
