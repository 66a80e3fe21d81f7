from __future__ import annotations

import re
from typing import List

from .models import Sentence
from .textutils import clean_sentence

# Split on whitespace that follows terminal punctuation; the punctuation stays
# with the sentence on the left.
SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")


def split_into_sentences(text: str) -> List[str]:
    """Split text into cleaned, non-blank sentence strings."""
    if not text or text.isspace():
        return []

    sentences: List[str] = []
    for segment in SENTENCE_SPLIT_RE.split(text):
        cleaned = clean_sentence(segment)
        if cleaned:
            sentences.append(cleaned)
    return sentences


def parse(text: str) -> List[Sentence]:
    """Parse raw text into Sentence values. Blank input yields an empty list."""
    return [Sentence(sentence) for sentence in split_into_sentences(text)]
