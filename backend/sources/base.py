"""
Base interface for candidate sources.

Every source MUST:
1. Return CandidateRecord objects built with CandidateRecord.from_raw
2. Tolerate records with missing or malformed fields
3. Return empty list on failure rather than raising exception (caller handles empty input)
4. Implement timeout-safe HTTP requests (use requests with timeout parameter)
"""

from abc import ABC, abstractmethod
from typing import Any, List
import logging

from scorer.candidate import CandidateRecord

logger = logging.getLogger(__name__)


class BaseCandidateSource(ABC):
    """
    Abstract base class for candidate sources.

    Each source is responsible for loading raw candidate records from one
    location (a file, an API endpoint) and turning them into CandidateRecords.
    """

    def __init__(self, location: str):
        """
        Initialize source.

        Args:
            location: File path or URL to read candidates from
        """
        self.location = location
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def fetch_candidates(self) -> List[CandidateRecord]:
        """
        Load candidates.

        Returns:
            List of CandidateRecord objects. Returns empty list on failure.
        """
        raise NotImplementedError

    def _parse_payload(self, data: Any) -> List[CandidateRecord]:
        """Accept a list of records or an object with a 'candidates' list."""
        items = data.get('candidates', []) if isinstance(data, dict) else data
        if not isinstance(items, list):
            self.logger.warning(f"No candidate list found in {self.location}")
            return []

        candidates = []
        for raw in items:
            if not isinstance(raw, dict):
                self.logger.warning(f"Skipping non-object candidate entry: {raw!r}")
                continue
            candidates.append(CandidateRecord.from_raw(raw))
        return candidates
