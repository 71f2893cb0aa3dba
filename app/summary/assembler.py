from __future__ import annotations

from pydantic import BaseModel, Field

from .experience import detect_years_experience
from .headline import headline
from .keywords import extract_top_keywords
from .locations import detect_locations
from .normalize import condense, unify_line_endings

KEYWORD_LIMIT = 8
DEFAULT_SUMMARY_MAX_CHARS = 1200
_ELLIPSIS = "..."


class SummarySignals(BaseModel):
    headline: str = ""
    keywords: list[str] = Field(default_factory=list)
    experience: str | None = None
    locations: list[str] = Field(default_factory=list)

    def to_lines(self) -> list[str]:
        lines: list[str] = []
        if self.headline:
            lines.append(f"Overview: {self.headline}")
        if self.experience:
            lines.append(f"Experience: {self.experience}")
        if self.keywords:
            lines.append(f"Highlighted strengths: {', '.join(self.keywords)}")
        if self.locations:
            lines.append(f"Locations: {', '.join(self.locations)}")
        return lines


def build_signals(condensed: str) -> SummarySignals:
    return SummarySignals(
        headline=headline(condensed),
        keywords=extract_top_keywords(condensed, KEYWORD_LIMIT),
        experience=detect_years_experience(condensed),
        locations=detect_locations(condensed),
    )


def generate_summary(text: str, file_name: str) -> str:
    """Assemble the labeled summary for one extracted CV.

    Sections without a signal are left out. Blank input produces a fixed
    placeholder naming the file instead of an empty string.
    """
    unified = unify_line_endings(text)
    if not unified:
        return f"No readable content detected in {file_name}."

    signals = build_signals(condense(unified))
    return "\n".join(signals.to_lines())


def truncate_summary(summary: str, max_chars: int = DEFAULT_SUMMARY_MAX_CHARS) -> str:
    if len(summary) <= max_chars:
        return summary
    return summary[: max_chars - len(_ELLIPSIS)] + _ELLIPSIS
