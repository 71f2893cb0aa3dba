from __future__ import annotations

from collections import Counter
import re

_TOKEN_RE = re.compile(r"[a-z][a-z+\-#]{1,}")

# Filler words and resume boilerplate that would otherwise dominate the ranking.
STOP_WORDS = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "from",
        "have",
        "this",
        "your",
        "about",
        "will",
        "into",
        "other",
        "their",
        "they",
        "been",
        "were",
        "which",
        "skills",
        "experience",
        "using",
        "years",
        "worked",
        "work",
        "team",
        "project",
        "projects",
        "including",
        "across",
        "over",
        "management",
        "development",
        "professional",
    }
)

MIN_TOKEN_LENGTH = 3


def tokenize(condensed: str) -> list[str]:
    return [
        token
        for token in _TOKEN_RE.findall(condensed.lower())
        if token not in STOP_WORDS and len(token) >= MIN_TOKEN_LENGTH
    ]


def extract_top_keywords(condensed: str, limit: int) -> list[str]:
    """Rank tokens by frequency and return the top ``limit`` upper-cased.

    Ties keep the order in which tokens first appear in the text: ``Counter``
    preserves insertion order and ``sorted`` is stable.
    """
    if limit <= 0:
        return []
    counts = Counter(tokenize(condensed))
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token.upper() for token, _count in ranked[:limit]]
