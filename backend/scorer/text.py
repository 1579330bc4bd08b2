"""
Text helpers shared by the extractor and scoring engine.
"""

import math
import re
from typing import Optional, Set

from bs4 import BeautifulSoup


_WORD_SPLIT = re.compile(r"\W+")
_REQUIRED_YEARS = re.compile(r"(\d+)\+?\s+years?(?:\s+of)?\s+experience", re.IGNORECASE)
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def tokenize(text: str) -> Set[str]:
    """Lowercase word tokens of at least 3 characters."""
    if not text:
        return set()
    return {w for w in _WORD_SPLIT.split(text.lower()) if len(w) > 2}


def text_relevance(text_a: str, text_b: str) -> float:
    """
    Jaccard similarity between the token sets of two texts.

    Args:
        text_a: First text
        text_b: Second text

    Returns:
        Similarity in [0, 1]; 0 when either text is empty
    """
    tokens_a = tokenize(text_a)
    tokens_b = tokenize(text_b)
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def parse_required_years(text: str) -> Optional[int]:
    """Extract a '<N>+ years of experience' requirement from free text."""
    if not text:
        return None
    match = _REQUIRED_YEARS.search(text)
    return int(match.group(1)) if match else None


def kebab_case(text: str) -> str:
    """'Node.js Developer' -> 'node-js-developer'"""
    return _NON_ALNUM.sub("-", (text or "").lower()).strip("-")


def clean_text(text: str) -> str:
    """
    Strip HTML tags and preserve paragraph breaks.
    Plain text passes through with surrounding whitespace removed.

    Args:
        text: Text that may contain HTML markup

    Returns:
        Plain text with preserved paragraph breaks
    """
    if not text:
        return ""
    if "<" not in text:
        return text.strip()
    soup = BeautifulSoup(text, 'html.parser')
    lines = [line.strip() for line in soup.get_text("\n").splitlines()]
    return "\n".join([l for l in lines if l])
