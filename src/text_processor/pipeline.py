from __future__ import annotations

import logging
from functools import reduce
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from .config import TextProcessorConfig
from .models import AnalysisResult, Document, Sentence, TextStats
from .reporting import ReportMode, format_report
from .segmentation import parse
from .sinks import ReportSink
from .stats import calculate, merge_stats

logger = logging.getLogger(__name__)


def process_text(
    text: str, config: TextProcessorConfig
) -> Tuple[List[Sentence], TextStats]:
    """Segment text and aggregate statistics over the resulting sentences."""
    sentences = parse(text)
    stats = calculate(sentences, bytes_per_char=config.bytes_per_char)
    return sentences, stats


def process_document(doc: Document, config: TextProcessorConfig) -> AnalysisResult:
    """Run the segmentation and aggregation pipeline for a single document."""
    sentences, stats = process_text(doc.text, config)
    logger.info(
        "Processed doc=%s sentences=%d words=%d unique=%d",
        doc.doc_id,
        len(sentences),
        stats.word_count,
        stats.unique_word_count,
    )
    return AnalysisResult(doc_id=doc.doc_id, sentences=sentences, stats=stats)


def process_corpus(
    documents: List[Document], config: TextProcessorConfig
) -> Dict[str, AnalysisResult]:
    """Process all documents and return the per-document results."""
    results: Dict[str, AnalysisResult] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, config)
    return results


def corpus_totals(results: Iterable[AnalysisResult]) -> TextStats:
    """Roll per-document statistics up into a single snapshot."""
    return reduce(merge_stats, (result.stats for result in results), TextStats())


def render_result(
    result: AnalysisResult,
    mode: ReportMode | str,
    config: TextProcessorConfig,
) -> str:
    """Format an analysis result using the report settings in config."""
    return format_report(
        result.stats,
        mode,
        result.sentences,
        top_n=config.top_n,
        words_per_line=config.words_per_line,
        min_word_column_width=config.min_word_column_width,
    )


def export_report(
    result: AnalysisResult,
    mode: ReportMode | str,
    sink: ReportSink,
    destination: str | Path,
    config: TextProcessorConfig,
) -> bool:
    """Render a result and hand it to sink; returns the sink's success flag."""
    report = render_result(result, mode, config)
    saved = sink.save(report, destination)
    if not saved:
        logger.warning("Report for doc=%s was not saved to %s", result.doc_id, destination)
    return saved
