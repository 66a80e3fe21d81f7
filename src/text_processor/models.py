from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping

from .tokenization import normalize_tokens


@dataclass(frozen=True, slots=True)
class Word:
    """A normalized token: never blank, first character uppercased."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Word text must be a string, got {type(self.text)!r}.")
        if not self.text.strip():
            raise ValueError("Word text must not be blank.")

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Sentence:
    """One cleaned sentence; words are derived from the raw text on demand."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(
                f"Sentence text must be a string, got {type(self.text)!r}."
            )

    def words(self) -> List[Word]:
        """Return the normalized words of the sentence in order of appearance."""
        return normalize_words(self.text)

    def __str__(self) -> str:
        return self.text


def normalize_words(sentence: Sentence | str) -> List[Word]:
    """Tokenize a sentence into normalized words in order of appearance."""
    text = sentence.text if isinstance(sentence, Sentence) else sentence
    return [Word(token) for token in normalize_tokens(text)]


@dataclass(frozen=True, slots=True)
class TextStats:
    """Immutable statistics snapshot for a sequence of sentences."""

    word_count: int = 0
    char_count: int = 0
    unique_word_count: int = 0
    word_meeting_rate: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    memory_used: int = 0
    sentence_count: int = 0

    def __post_init__(self) -> None:
        # Stored as a read-only view over a private copy.
        if not isinstance(self.word_meeting_rate, MappingProxyType):
            object.__setattr__(
                self, "word_meeting_rate", MappingProxyType(dict(self.word_meeting_rate))
            )

    @property
    def average_word_length(self) -> float:
        if self.word_count == 0:
            return 0.0
        return self.char_count / self.word_count

    @property
    def average_sentence_length(self) -> float:
        if self.sentence_count == 0:
            return 0.0
        return self.word_count / self.sentence_count

    def percentage(self, count: int) -> float:
        """Share of the total word count, as a percentage (0 when there are no words)."""
        if self.word_count == 0:
            return 0.0
        return count / self.word_count * 100.0

    def to_dict(self) -> dict[str, object]:
        return {
            "word_count": self.word_count,
            "char_count": self.char_count,
            "unique_word_count": self.unique_word_count,
            "memory_used": self.memory_used,
            "sentence_count": self.sentence_count,
            "word_meeting_rate": dict(sorted(self.word_meeting_rate.items())),
        }


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class AnalysisResult:
    """Sentences and statistics computed for a single document."""

    doc_id: str
    sentences: List[Sentence]
    stats: TextStats
