"""
Candidate source registry.

Use get_source() to retrieve a source instance for a file path or URL.
"""

from typing import Dict, Optional, Type
from sources.base import BaseCandidateSource
from sources.http_json import HttpJsonSource
from sources.json_file import JsonFileSource


# Maps source kind to source class
SOURCES: Dict[str, Type[BaseCandidateSource]] = {
    "json": JsonFileSource,
    "http": HttpJsonSource,
}


def get_source(location: str, kind: Optional[str] = None) -> BaseCandidateSource:
    """
    Get source instance for a location.

    Args:
        location: File path or http(s) URL
        kind: Explicit source kind; inferred from the location when omitted

    Returns:
        Instantiated source

    Raises:
        ValueError: If the source kind is not registered
    """
    if kind is None:
        kind = "http" if location.lower().startswith(("http://", "https://")) else "json"
    source_class = SOURCES.get(kind)
    if not source_class:
        raise ValueError(
            f"Unknown source: {kind}. "
            f"Available sources: {', '.join(SOURCES.keys())}"
        )
    return source_class(location)
