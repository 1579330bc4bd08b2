"""
HTTP source for candidates served as JSON by an upstream service.
"""

import requests
from typing import List

from scorer.candidate import CandidateRecord
from sources.base import BaseCandidateSource


class HttpJsonSource(BaseCandidateSource):
    """Source for a JSON endpoint returning candidate records."""

    timeout = 20

    def fetch_candidates(self) -> List[CandidateRecord]:
        try:
            response = requests.get(
                self.location,
                timeout=self.timeout,
                headers={'User-Agent': 'CandidateRanker/1.0', 'Accept': 'application/json'}
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            self.logger.error(f"Timeout fetching candidates from {self.location}")
            return []
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Network error fetching candidates: {e}")
            return []
        except ValueError as e:
            self.logger.error(f"Invalid JSON from {self.location}: {e}")
            return []

        candidates = self._parse_payload(data)
        self.logger.info(f"Fetched {len(candidates)} candidates from {self.location}")
        return candidates
