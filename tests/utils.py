from __future__ import annotations

from pathlib import Path

SCENARIO_A_TEXT = "Hello,,,, words!! Это тестовый текст... Как дела?"


def write_sample_corpus(root: Path) -> Path:
    """Create a small corpus directory with nested .txt files and a non-text file."""
    corpus_dir = root / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm rolled over the bay. Sailors watched the storm.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "chapter2.txt").write_text(
        "The captain stood on deck!  Was the storm over?",
        encoding="utf-8",
    )
    (corpus_dir / "notes.bin").write_bytes(b"\x00\x01ignored")
    return corpus_dir


def write_undecodable_file(path: Path) -> Path:
    """Write bytes that are not valid UTF-8."""
    path.write_bytes(b"\xff\xfe\xfa broken")
    return path
