from __future__ import annotations

import re

# U+FEFF (byte order mark) counts as whitespace here.
_WHITESPACE_RUN_RE = re.compile(r"[\s\ufeff]+")
_BOM = "\ufeff"


def unify_line_endings(text: str) -> str:
    """CRLF becomes LF, tabs become spaces, outer whitespace is trimmed.

    Line breaks survive this step so sentence boundaries stay intact until
    the text is condensed.
    """
    return text.replace("\r\n", "\n").replace("\t", " ").replace(_BOM, " ").strip()


def condense(text: str) -> str:
    return _WHITESPACE_RUN_RE.sub(" ", text)


def normalize(text: str) -> str:
    return condense(unify_line_endings(text))
