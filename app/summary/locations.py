from __future__ import annotations

import re

# Only the trigger phrase ignores case; the location itself must be a run of
# capitalized words. "from" also fires on school and employer names.
_LOCATION_RE = re.compile(
    r"\b(?i:based in|located in|residing in|from)\s+([A-Z][A-Za-z]*(?:\s+[A-Z][A-Za-z]*)*)"
)

MAX_LOCATIONS = 3


def detect_locations(condensed: str) -> list[str]:
    seen: dict[str, None] = {}
    for match in _LOCATION_RE.finditer(condensed):
        candidate = match.group(1).strip()
        if candidate:
            seen.setdefault(candidate, None)
    return list(seen)[:MAX_LOCATIONS]
