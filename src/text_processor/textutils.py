from __future__ import annotations

import re

MULTIPLE_COMMAS_RE = re.compile(r",{2,}")
WHITESPACE_RUN_RE = re.compile(r"\s+")


def collapse_commas(value: str) -> str:
    return MULTIPLE_COMMAS_RE.sub(",", value)


def collapse_whitespace(value: str) -> str:
    """Replace every whitespace run (newlines included) with a single space."""
    return WHITESPACE_RUN_RE.sub(" ", value)


def clean_sentence(value: str) -> str:
    """Normalize a raw sentence span so it can be stored as-is on a Sentence."""
    return collapse_whitespace(collapse_commas(value)).strip()
