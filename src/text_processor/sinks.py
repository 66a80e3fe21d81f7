from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class ReportSink(ABC):
    """Abstract destination for formatted reports."""

    @abstractmethod
    def save(self, formatted_text: str, destination: str | Path) -> bool:
        """Persist formatted_text; return False instead of raising on failure."""
        raise NotImplementedError


class FileReportSink(ReportSink):
    """Writes reports to disk, creating parent directories as needed."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def save(self, formatted_text: str, destination: str | Path) -> bool:
        path = Path(destination)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(formatted_text, encoding=self._encoding)
        except OSError as exc:
            LOGGER.error("Failed to save report to %s: %s", path, exc)
            return False
        LOGGER.info("Saved report to %s", path)
        return True
