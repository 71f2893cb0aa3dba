from __future__ import annotations

import re

_EXPERIENCE_RE = re.compile(
    r"(\d{1,2})\s*(?:\+?\s*)?(?:years?|yrs?)\s+of\s+(?:overall\s+)?experience",
    re.IGNORECASE,
)
_YEARS_MENTION_RE = re.compile(r"(\d{1,2})\s*(?:\+?\s*)?(?:years?|yrs?)", re.IGNORECASE)


def detect_years_experience(condensed: str) -> str | None:
    match = _EXPERIENCE_RE.search(condensed)
    if match:
        return f"{match.group(1)} years of experience"
    mention = _YEARS_MENTION_RE.search(condensed)
    if mention:
        return f"{mention.group(1)} years (matched mention)"
    return None
