from __future__ import annotations

import re

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")

HEADLINE_SENTENCES = 2


def split_sentences(condensed: str) -> list[str]:
    return [part for part in _SENTENCE_SPLIT_RE.split(condensed) if part]


def headline(condensed: str) -> str:
    return " ".join(split_sentences(condensed)[:HEADLINE_SENTENCES])
