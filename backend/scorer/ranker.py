"""
Ranking pipeline.

Validating -> IndustryDetection -> PerCandidateScoring -> Sorting ->
OptionalEnhancement -> Done
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional
import logging
import threading

from config import Config
from .candidate import CandidateRecord, RankingOptions
from .catalog import IndustryCatalog, load_catalog
from .engine import ScoringEngine
from .extractor import SignalExtractor
from .signals import RankedCandidate
from .summary import SummaryEnhancer
from .text import clean_text

logger = logging.getLogger(__name__)


class RankingError(Exception):
    """Base error for the ranking pipeline."""


class NoCandidatesError(RankingError, ValueError):
    """Raised when there is nothing to rank."""


class CandidateRanker:
    """
    Ranks candidate records into an ordered, enriched shortlist.

    Features:
    - Industry auto-detection with explicit override
    - Parallel per-candidate scoring with ThreadPoolExecutor
    - Stable sort by score
    - Optional sequential summary rewrite for the top candidates
    """

    def __init__(
        self,
        catalog: Optional[IndustryCatalog] = None,
        config: Optional[Config] = None,
        generator=None,
    ):
        """
        Initialize ranker.

        Args:
            catalog: Industry catalog (default: bundled catalog)
            config: Config with scoring caps and enhancement settings
            generator: Optional text generator for summary rewrites
        """
        self.config = config if config is not None else Config()
        if catalog is None:
            catalog = load_catalog(self.config.catalog_path, self.config.default_industry)
        self.catalog = catalog
        self.extractor = SignalExtractor(self.catalog)
        self.engine = ScoringEngine(self.extractor, self.config.scoring_caps)
        self.enhancer = None
        if generator is not None:
            settings = self.config.enhancement
            self.enhancer = SummaryEnhancer(generator, settings.top_n, settings.delay_seconds)

    def rank(
        self,
        candidates: Optional[Iterable[Any]],
        options: Any = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[RankedCandidate]:
        """
        Score, enrich and sort candidates.

        Args:
            candidates: Candidate records or raw dicts
            options: RankingOptions or dict with jobDescription, industry,
                requiredExperience, requiredSkills
            cancel_event: Set to skip the rest of the enhancement pass

        Returns:
            RankedCandidate list sorted by score, highest first

        Raises:
            NoCandidatesError: If candidates is empty or None
        """
        records = [CandidateRecord.from_raw(c) for c in (candidates or [])]
        if not records:
            raise NoCandidatesError("No candidates provided for ranking")

        options = RankingOptions.from_raw(options)
        job_description = clean_text(options.job_description)
        if job_description != options.job_description:
            options = options.model_copy(update={"job_description": job_description})

        logger.info(f"Ranking {len(records)} candidates")

        industry_key = self._resolve_industry(records, options)
        profile = self.catalog.get(industry_key)
        logger.info(f"Using industry profile: {industry_key}")

        ranked = self._score_all(records, profile, industry_key, options)

        # sorted() is stable, equal scores keep input order
        ranked = sorted(ranked, key=lambda c: c.score, reverse=True)

        if self.enhancer is not None:
            ranked = self.enhancer.enhance(ranked, options.job_description, industry_key, cancel_event)

        top = ranked[0]
        logger.info(f"Ranking complete. Top candidate: {top.name} ({top.score}/100)")
        return ranked

    def _resolve_industry(self, records: List[CandidateRecord], options: RankingOptions) -> str:
        if options.industry:
            if options.industry not in self.catalog:
                logger.warning(
                    f"Unknown industry '{options.industry}', using '{self.catalog.default_key}'. "
                    f"Available industries: {', '.join(self.catalog.keys())}"
                )
            return self.catalog.resolve_key(options.industry)
        return self.extractor.detect_industry(records, options.job_description)

    def _score_all(self, records, profile, industry_key, options) -> List[RankedCandidate]:
        def enrich(record: CandidateRecord) -> RankedCandidate:
            return self.engine.enrich(record, profile, industry_key, options)

        workers = min(self.config.max_workers, len(records))
        if workers <= 1:
            return [enrich(r) for r in records]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(enrich, records))


def rank_candidates(
    candidates: Optional[Iterable[Any]],
    options: Any = None,
    *,
    catalog: Optional[IndustryCatalog] = None,
    config: Optional[Config] = None,
    generator=None,
    cancel_event: Optional[threading.Event] = None,
) -> List[RankedCandidate]:
    """Rank candidates with a one-off CandidateRanker."""
    ranker = CandidateRanker(catalog=catalog, config=config, generator=generator)
    return ranker.rank(candidates, options, cancel_event=cancel_event)
