from .assembler import (
    KEYWORD_LIMIT,
    SummarySignals,
    build_signals,
    generate_summary,
    truncate_summary,
)
from .experience import detect_years_experience
from .headline import headline, split_sentences
from .keywords import STOP_WORDS, extract_top_keywords
from .locations import MAX_LOCATIONS, detect_locations
from .normalize import condense, normalize, unify_line_endings

__all__ = [
    "KEYWORD_LIMIT",
    "MAX_LOCATIONS",
    "STOP_WORDS",
    "SummarySignals",
    "build_signals",
    "generate_summary",
    "truncate_summary",
    "detect_years_experience",
    "detect_locations",
    "extract_top_keywords",
    "headline",
    "split_sentences",
    "condense",
    "normalize",
    "unify_line_endings",
]
