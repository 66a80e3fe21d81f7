"""
text_processor package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import TextProcessorConfig, config_from_dict, config_from_yaml, load_config
from .models import AnalysisResult, Document, Sentence, TextStats, Word, normalize_words
from .pipeline import process_corpus, process_document, process_text
from .reporting import ReportMode, format_report, rank_words
from .segmentation import parse
from .stats import BYTES_PER_CHAR, calculate, merge_stats

__all__ = [
    "TextProcessorConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "AnalysisResult",
    "Document",
    "Sentence",
    "TextStats",
    "Word",
    "process_corpus",
    "process_document",
    "process_text",
    "ReportMode",
    "format_report",
    "rank_words",
    "parse",
    "BYTES_PER_CHAR",
    "calculate",
    "merge_stats",
    "normalize_words",
]

__version__ = "0.1.0"
