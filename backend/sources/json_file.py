"""
JSON file source.

Reads candidates exported by the scraping collaborator, either as a bare
list or wrapped in {"candidates": [...]}.
"""

import json
from typing import List

from scorer.candidate import CandidateRecord
from sources.base import BaseCandidateSource


class JsonFileSource(BaseCandidateSource):
    """Source for candidate JSON files on disk."""

    def fetch_candidates(self) -> List[CandidateRecord]:
        try:
            with open(self.location, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error reading candidates from {self.location}: {e}")
            return []

        candidates = self._parse_payload(data)
        self.logger.info(f"Loaded {len(candidates)} candidates from {self.location}")
        return candidates
