from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .reporting import (
    DEFAULT_TOP_N,
    DEFAULT_WORDS_PER_LINE,
    MIN_WORD_COLUMN_WIDTH,
    ReportMode,
)
from .stats import BYTES_PER_CHAR

_INT_FIELDS = ("bytes_per_char", "top_n", "words_per_line", "min_word_column_width")
_STR_FIELDS = ("report_mode", "encoding", "console_terminator")


@dataclass(slots=True)
class TextProcessorConfig:
    """Configuration options for the text statistics pipeline."""

    bytes_per_char: int = BYTES_PER_CHAR
    top_n: int = DEFAULT_TOP_N
    words_per_line: int = DEFAULT_WORDS_PER_LINE
    min_word_column_width: int = MIN_WORD_COLUMN_WIDTH
    report_mode: str = ReportMode.SUMMARY.value
    encoding: str = "utf-8"
    console_terminator: str = ""

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}.")
        for name in _STR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}.")
        if self.bytes_per_char < 1:
            raise ValueError("bytes_per_char must be at least 1.")
        if self.top_n < 1:
            raise ValueError("top_n must be at least 1.")
        if self.words_per_line < 1:
            raise ValueError("words_per_line must be at least 1.")
        # Store the canonical name; raises ValueError for unknown modes.
        self.report_mode = ReportMode.parse(self.report_mode).value

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(TextProcessorConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> TextProcessorConfig:
    """Build a TextProcessorConfig from a dictionary-like input."""
    if data is None:
        return TextProcessorConfig()
    return TextProcessorConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TextProcessorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TextProcessorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TextProcessorConfig()
    return config_from_yaml(path)
