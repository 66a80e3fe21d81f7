from __future__ import annotations

from typing import List

import regex

# Anything but letters, numbers, whitespace, apostrophes and hyphens, plus any
# apostrophe/hyphen that does not sit between two letters.
WORD_STRIP_PATTERN = regex.compile(r"[^\p{L}\p{N}\s'-]|(?<!\p{L})['-]|['-](?!\p{L})")
WHITESPACE_PATTERN = regex.compile(r"\s+")


def capitalize_first(value: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def normalize_tokens(text: str) -> List[str]:
    """Tokenize raw sentence text into normalized word strings in order of appearance."""
    cleaned = WORD_STRIP_PATTERN.sub(" ", text)
    tokens: List[str] = []
    for fragment in WHITESPACE_PATTERN.split(cleaned):
        if not fragment.strip():
            continue
        tokens.append(capitalize_first(fragment.strip()))
    return tokens
