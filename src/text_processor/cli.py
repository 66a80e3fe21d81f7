from __future__ import annotations

import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Any, Dict, Iterable, List

import typer
import yaml

from .config import TextProcessorConfig, load_config
from .models import AnalysisResult, Document
from .pipeline import (
    corpus_totals,
    export_report,
    process_corpus,
    process_document,
    render_result,
)
from .reporting import ReportMode, default_extension
from .sinks import FileReportSink
from .sources import ConsoleTextSource, FileTextSource

app = typer.Typer(help="Text statistics processor CLI.", no_args_is_help=True)

# File types the CLI expands a directory input into.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}
CORPUS_TOTALS_STEM = "corpus-totals"

MODE_HELP = "Report layout: summary, full, markdown or text."


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output_path: Path | None = typer.Option(
        None,
        "--output-path",
        "-o",
        help="Report file (single input) or directory (directory input).",
    ),
    mode: str | None = typer.Option(None, "--mode", "-m", help=MODE_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    top_n: int | None = typer.Option(
        None, "--top-n", help="Number of words in top-N tables."
    ),
    words_per_line: int | None = typer.Option(
        None, "--words-per-line", help="Unique words per line in Markdown listings."
    ),
    bytes_per_char: int | None = typer.Option(
        None, "--bytes-per-char", help="Bytes per character for the memory estimate."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging verbosity."),
) -> None:
    """Analyze a text file (or every .txt file in a directory) and report statistics."""
    _configure_logging(log_level)
    cfg = _resolve_config(config, mode, top_n, words_per_line, bytes_per_char)
    report_mode = ReportMode.parse(cfg.report_mode)
    source = FileTextSource(encoding=cfg.encoding)
    sink = FileReportSink(encoding=cfg.encoding)

    if output_path is not None:
        _check_output_path(input_path, output_path)
    documents = _load_documents(input_path, source)
    if not documents:
        typer.echo(f"No supported text files found under {input_path}.", err=True)
        raise typer.Exit(code=1)
    results = process_corpus(documents, cfg)

    if input_path.is_file():
        result = results[documents[0].doc_id]
        if output_path is None:
            typer.echo(render_result(result, report_mode, cfg), nl=False)
            return
        if not export_report(result, report_mode, sink, output_path, cfg):
            typer.echo(f"Failed to save report to {output_path}.", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote report to {output_path}")
        return

    totals = _totals_result(list(results.values()))
    if output_path is None:
        for doc_id, result in results.items():
            typer.echo(f"--- {doc_id} ---")
            typer.echo(render_result(result, report_mode, cfg), nl=False)
        typer.echo(f"--- {CORPUS_TOTALS_STEM} ---")
        typer.echo(render_result(totals, report_mode, cfg), nl=False)
        return

    extension = default_extension(report_mode)
    destinations = {
        doc_id: output_path / Path(doc_id).with_suffix(extension) for doc_id in results
    }
    totals_path = _totals_path(output_path, extension, destinations.values())
    failures = 0
    for doc_id, result in results.items():
        if not export_report(result, report_mode, sink, destinations[doc_id], cfg):
            failures += 1
    if not export_report(totals, report_mode, sink, totals_path, cfg):
        failures += 1
    if failures:
        typer.echo(f"Failed to save {failures} report(s) under {output_path}.", err=True)
        raise typer.Exit(code=1)
    typer.echo(
        f"Wrote {len(results)} report(s) to {output_path} and totals to {totals_path}"
    )


@app.command()
def interactive(
    terminator: str | None = typer.Option(
        None,
        "--terminator",
        "-t",
        help="Line that ends input (default: an empty line).",
    ),
    output_path: Path | None = typer.Option(
        None, "--output-path", "-o", help="Save the report here instead of printing it."
    ),
    mode: str | None = typer.Option(None, "--mode", "-m", help=MODE_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    top_n: int | None = typer.Option(None, "--top-n"),
    words_per_line: int | None = typer.Option(None, "--words-per-line"),
    bytes_per_char: int | None = typer.Option(None, "--bytes-per-char"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging verbosity."),
) -> None:
    """Read text from standard input until the terminator line and report on it."""
    _configure_logging(log_level)
    cfg = _resolve_config(config, mode, top_n, words_per_line, bytes_per_char)
    report_mode = ReportMode.parse(cfg.report_mode)
    end_marker = cfg.console_terminator if terminator is None else terminator

    typer.echo(
        "Enter text to analyze; finish with "
        + (f"a line containing '{end_marker}'." if end_marker else "an empty line."),
        err=True,
    )
    text = ConsoleTextSource().read_interactive(end_marker)
    result = process_document(Document(doc_id="console", text=text), cfg)

    if output_path is None:
        typer.echo(render_result(result, report_mode, cfg), nl=False)
        return
    sink = FileReportSink(encoding=cfg.encoding)
    if not export_report(result, report_mode, sink, output_path, cfg):
        typer.echo(f"Failed to save report to {output_path}.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote report to {output_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TextProcessorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{level_name}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_config(
    config_path: Path | None,
    mode: str | None,
    top_n: int | None,
    words_per_line: int | None,
    bytes_per_char: int | None,
) -> TextProcessorConfig:
    """Load the configuration and apply CLI overrides when provided."""
    try:
        cfg = load_config(config_path)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    overrides: Dict[str, Any] = {}
    if mode is not None:
        overrides["report_mode"] = mode
    if top_n is not None:
        overrides["top_n"] = top_n
    if words_per_line is not None:
        overrides["words_per_line"] = words_per_line
    if bytes_per_char is not None:
        overrides["bytes_per_char"] = bytes_per_char
    if not overrides:
        return cfg
    try:
        # replace() re-runs validation on the overridden values.
        return dc_replace(cfg, **overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path, source: FileTextSource) -> List[Document]:
    """Expand the input path into documents; unreadable files come back empty."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name, source)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix(), source)
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str, source: FileTextSource) -> Document:
    text = source.read(path)
    if not text:
        typer.echo(f"No text read from {path}; reporting empty statistics.", err=True)
    return Document(doc_id=doc_id, text=text)


def _check_output_path(input_path: Path, output_path: Path) -> None:
    """Refuse output locations that would overwrite or mix with the input text."""
    source = input_path.resolve()
    target = output_path.resolve()
    if input_path.is_file():
        clashes = target == source
    else:
        clashes = target == source or source in target.parents
    if clashes:
        raise typer.BadParameter(
            f"Output path {output_path} must not be or lie inside the input path {input_path}.",
            param_hint="--output-path",
        )


def _totals_path(output_path: Path, extension: str, taken: Iterable[Path]) -> Path:
    """Name the corpus totals file so it never replaces a per-document report."""
    used = set(taken)
    candidate = output_path / f"{CORPUS_TOTALS_STEM}{extension}"
    suffix = 1
    while candidate in used:
        candidate = output_path / f"{CORPUS_TOTALS_STEM}-{suffix}{extension}"
        suffix += 1
    return candidate


def _totals_result(results: List[AnalysisResult]) -> AnalysisResult:
    sentences = [sentence for result in results for sentence in result.sentences]
    return AnalysisResult(
        doc_id=CORPUS_TOTALS_STEM, sentences=sentences, stats=corpus_totals(results)
    )


if __name__ == "__main__":
    main()
