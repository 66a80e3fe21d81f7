from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

from .models import Sentence, TextStats

DEFAULT_TOP_N = 10
DEFAULT_WORDS_PER_LINE = 5
MIN_WORD_COLUMN_WIDTH = 8
INDENT = "   "
NO_WORDS_MESSAGE = "No word data."


class ReportMode(str, Enum):
    """Layouts the formatter can render."""

    SUMMARY = "summary"
    FULL = "full"
    MARKDOWN = "markdown"
    TEXT = "text"

    @classmethod
    def parse(cls, value: "ReportMode | str") -> "ReportMode":
        if isinstance(value, ReportMode):
            return value
        normalized = str(value).lower().strip()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(f"Unknown report mode '{value}'.")


@dataclass(frozen=True, slots=True)
class _ReportOptions:
    top_n: int
    words_per_line: int
    min_word_column_width: int


def default_extension(mode: ReportMode | str) -> str:
    """File extension a report in the given mode is saved with."""
    return ".md" if ReportMode.parse(mode) is ReportMode.MARKDOWN else ".txt"


def rank_words(
    frequencies: Mapping[str, int], limit: int | None = None
) -> List[Tuple[str, int]]:
    """
    Order frequency entries by count descending, then by word ascending.

    Ties are resolved lexically so the ranking never depends on mapping order.
    """
    ranked = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        return ranked[: max(0, limit)]
    return ranked


def format_report(
    stats: TextStats,
    mode: ReportMode | str = ReportMode.SUMMARY,
    sentences: Sequence[Sentence] | None = None,
    *,
    top_n: int = DEFAULT_TOP_N,
    words_per_line: int = DEFAULT_WORDS_PER_LINE,
    min_word_column_width: int = MIN_WORD_COLUMN_WIDTH,
) -> str:
    """Render stats (and optionally the sentences) as a human-readable report."""
    options = _ReportOptions(
        top_n=top_n,
        words_per_line=max(1, words_per_line),
        min_word_column_width=min_word_column_width,
    )
    renderer = _RENDERERS[ReportMode.parse(mode)]
    return renderer(stats, list(sentences or []), options)


def _format_kilobytes(memory_used: int) -> str:
    return f"{memory_used / 1024.0:.2f} KB"


def _render_summary(
    stats: TextStats, sentences: List[Sentence], options: _ReportOptions
) -> str:
    separator = "=" * 50
    top_words = rank_words(stats.word_meeting_rate, options.top_n)
    rows = [(word, str(count)) for word, count in top_words]
    lines = [
        separator,
        "TEXT STATISTICS".center(50).rstrip(),
        separator,
        "",
        "OVERVIEW:",
        f"{INDENT}- Words: {stats.word_count}",
        f"{INDENT}- Characters: {stats.char_count}",
        f"{INDENT}- Unique words: {stats.unique_word_count}",
        f"{INDENT}- Memory used: {_format_kilobytes(stats.memory_used)}",
        "",
        f"TOP {options.top_n} WORDS:",
        _box_table(rows, ("WORD", "COUNT"), options.min_word_column_width),
        "",
        separator,
    ]
    return "\n".join(lines) + "\n"


def _render_full(
    stats: TextStats, sentences: List[Sentence], options: _ReportOptions
) -> str:
    separator = "=" * 60
    rows = [
        (word, f"{count} ({stats.percentage(count):.1f}%)")
        for word, count in rank_words(stats.word_meeting_rate)
    ]
    lines = [
        separator,
        "FULL TEXT STATISTICS".center(60).rstrip(),
        separator,
        "",
        "OVERVIEW:",
        f"{INDENT}- Sentences: {stats.sentence_count}",
        f"{INDENT}- Words: {stats.word_count}",
        f"{INDENT}- Characters: {stats.char_count}",
        f"{INDENT}- Unique words: {stats.unique_word_count}",
        f"{INDENT}- Memory used: {_format_kilobytes(stats.memory_used)}",
        f"{INDENT}- Average word length: {stats.average_word_length:.1f} characters",
        f"{INDENT}- Average sentence length: {stats.average_sentence_length:.1f} words",
        "",
        f"WORD FREQUENCY ({stats.unique_word_count} unique words):",
        _box_table(rows, ("WORD", "OCCURRENCES"), options.min_word_column_width),
        "",
        separator,
    ]
    return "\n".join(lines) + "\n"


def _render_markdown(
    stats: TextStats, sentences: List[Sentence], options: _ReportOptions
) -> str:
    lines = [
        "# Text Analysis",
        "",
        "## Document Statistics",
        "",
        f"- **Sentences:** {stats.sentence_count}",
        f"- **Words:** {stats.word_count}",
        f"- **Unique words:** {stats.unique_word_count}",
        f"- **Characters:** {stats.char_count}",
        f"- **Memory used:** {_format_kilobytes(stats.memory_used)}",
        f"- **Average word length:** {stats.average_word_length:.1f}",
        f"- **Average sentence length:** {stats.average_sentence_length:.1f}",
        "",
        f"### Word Frequency (top {options.top_n})",
        "",
    ]
    top_words = rank_words(stats.word_meeting_rate, options.top_n)
    if top_words:
        lines.append("| # | Word | Count |")
        lines.append("|---|------|-------|")
        for rank, (word, count) in enumerate(top_words, start=1):
            lines.append(f"| {rank} | `{word}` | {count} |")
    else:
        lines.append(f"_{NO_WORDS_MESSAGE}_")

    lines.extend(["", "## Content", ""])
    if sentences:
        for index, sentence in enumerate(sentences, start=1):
            lines.append(f"{index}. {sentence.text}")
    else:
        lines.append("_No sentences._")

    lines.extend(["", "## Unique Words", ""])
    unique_words = sorted(stats.word_meeting_rate)
    if unique_words:
        lines.append(_wrap_word_listing(unique_words, options.words_per_line))
    else:
        lines.append(f"_{NO_WORDS_MESSAGE}_")
    return "\n".join(lines) + "\n"


def _render_text(
    stats: TextStats, sentences: List[Sentence], options: _ReportOptions
) -> str:
    lines = ["=== TEXT ===", ""]
    for sentence in sentences:
        lines.append(" ".join(word.text for word in sentence.words()))
    lines.extend(
        [
            "",
            "=== TEXT STATISTICS ===",
            "",
            "OVERVIEW:",
            f"- Sentences: {stats.sentence_count}",
            f"- Words: {stats.word_count}",
            f"- Unique words: {stats.unique_word_count}",
            f"- Characters (excluding spaces): {stats.char_count}",
            "",
            f"WORD FREQUENCY (TOP {options.top_n}):",
        ]
    )
    top_words = rank_words(stats.word_meeting_rate, options.top_n)
    for rank, (word, count) in enumerate(top_words, start=1):
        lines.append(f"{rank}. {word} - {count} {'time' if count == 1 else 'times'}")
    if not top_words:
        lines.append(NO_WORDS_MESSAGE)
    lines.extend(
        [
            "",
            "AVERAGES:",
            f"- Average sentence length: {stats.average_sentence_length:.1f} words",
            f"- Average word length: {stats.average_word_length:.1f} characters",
        ]
    )
    return "\n".join(lines) + "\n"


def _box_table(
    rows: List[Tuple[str, str]], headers: Tuple[str, str], min_word_width: int
) -> str:
    if not rows:
        return f"{INDENT}{NO_WORDS_MESSAGE}"

    longest_word = max(len(word) for word, _ in rows)
    word_width = max(longest_word, min_word_width, len(headers[0])) + 2
    count_width = max(max(len(cell) for _, cell in rows), len(headers[1])) + 2

    def _row(left: str, right: str) -> str:
        return f"{INDENT}│ {left.ljust(word_width - 1)}│ {right.ljust(count_width - 1)}│"

    lines = [
        f"{INDENT}┌{'─' * word_width}┬{'─' * count_width}┐",
        _row(*headers),
        f"{INDENT}├{'─' * word_width}┼{'─' * count_width}┤",
    ]
    lines.extend(_row(word, cell) for word, cell in rows)
    lines.append(f"{INDENT}└{'─' * word_width}┴{'─' * count_width}┘")
    return "\n".join(lines)


def _wrap_word_listing(words: List[str], words_per_line: int) -> str:
    """Comma-separated `word` listing, breaking the line after every N words."""
    chunks = [
        ", ".join(f"`{word}`" for word in words[start : start + words_per_line])
        for start in range(0, len(words), words_per_line)
    ]
    return ",\n".join(chunks)


_RENDERERS: Dict[
    ReportMode, Callable[[TextStats, List[Sentence], _ReportOptions], str]
] = {
    ReportMode.SUMMARY: _render_summary,
    ReportMode.FULL: _render_full,
    ReportMode.MARKDOWN: _render_markdown,
    ReportMode.TEXT: _render_text,
}
