"""Reader of blank-line separated text records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _file_lines(handle: TextIO) -> Iterator[str]:
    with handle:
        yield from handle


class TextReader:
    """Yields records as lists of lines; records are separated by empty lines."""

    def __init__(self, lines: Iterable[str], lang: str) -> None:
        self._lines = iter(lines)
        self.lang = lang

    @classmethod
    def open(cls, src: str | Path, lang: str) -> "TextReader":
        """Read ``<src>/<lang>.txt``; raises OSError if it cannot be opened."""
        path = Path(src) / f"{lang}.txt"
        handle = open(path, encoding="utf-8")
        return cls(_file_lines(handle), lang)

    def __iter__(self) -> Iterator[list[str]]:
        record: list[str] = []
        for raw in self._lines:
            line = _strip_eol(raw)
            if not line:
                yield record
                record = []
            else:
                record.append(line)
        if record:
            yield record