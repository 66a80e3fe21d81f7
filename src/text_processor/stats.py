from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from .models import Sentence, TextStats, Word

# Per-character storage cost of a UTF-16 backed string.
BYTES_PER_CHAR = 2


def flatten_words(sentences: Iterable[Sentence]) -> List[Word]:
    """Collect words in sentence order, then in-sentence order."""
    words: List[Word] = []
    for sentence in sentences:
        words.extend(sentence.words())
    return words


def calculate(
    sentences: Sequence[Sentence], bytes_per_char: int = BYTES_PER_CHAR
) -> TextStats:
    """Compute counts, the word frequency map and a memory estimate."""
    words = flatten_words(sentences)
    frequencies: Counter[str] = Counter(word.text for word in words)
    return TextStats(
        word_count=len(words),
        char_count=sum(len(word.text) for word in words),
        unique_word_count=len(frequencies),
        word_meeting_rate=dict(frequencies),
        memory_used=sum(len(sentence.text) * bytes_per_char for sentence in sentences),
        sentence_count=len(sentences),
    )


def merge_stats(first: TextStats, second: TextStats) -> TextStats:
    """Combine two snapshots by counter addition; order of arguments does not matter."""
    frequencies: Counter[str] = Counter(first.word_meeting_rate)
    frequencies.update(second.word_meeting_rate)
    return TextStats(
        word_count=first.word_count + second.word_count,
        char_count=first.char_count + second.char_count,
        unique_word_count=len(frequencies),
        word_meeting_rate=dict(frequencies),
        memory_used=first.memory_used + second.memory_used,
        sentence_count=first.sentence_count + second.sentence_count,
    )
