from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

LOGGER = logging.getLogger(__name__)


class TextSource(ABC):
    """Abstract provider of raw text."""

    @abstractmethod
    def read(self, locator: str) -> str:
        """Return the text behind locator, or an empty string when it cannot be read."""
        raise NotImplementedError


class FileTextSource(TextSource):
    """Reads whole text files; failures are logged and yield an empty string."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, locator: str | Path) -> str:
        path = Path(locator)
        if not path.is_file():
            LOGGER.error("Cannot read %s: file does not exist.", path)
            return ""
        try:
            text = path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as exc:
            LOGGER.error("Cannot decode %s as %s: %s", path, self._encoding, exc)
            return ""
        except OSError as exc:
            LOGGER.error("Failed to read %s: %s", path, exc)
            return ""
        LOGGER.info("Read %d characters from %s", len(text), path)
        return text


class ConsoleTextSource(TextSource):
    """Accumulates lines from an interactive stream until a terminator line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def read(self, locator: str = "") -> str:
        """Console input has no locator; it is treated as the terminator line."""
        return self.read_interactive(locator)

    def read_interactive(self, terminator: str = "") -> str:
        """
        Read lines until one equals terminator (the empty line by default) or EOF.

        The terminator line itself is not part of the returned text.
        """
        lines: list[str] = []
        for raw_line in self._stream:
            line = raw_line.rstrip("\r\n")
            if line == terminator:
                break
            lines.append(line + "\n")
        return "".join(lines)
