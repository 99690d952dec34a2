"""Rotating file writer for text."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

_SEPARATOR = b"\n\n"


class TextWriter:
    """Rotating text file writer with a size limit in bytes.

    Each write is followed by a blank line that separates documents. A new
    file is started when a write would go past ``size_limit``, unless the
    current file is still empty: a single write larger than the limit
    still goes to its own file. The separators are not counted in the size.

    ``first_write_on_document`` is set whenever a new file is started, so
    that a companion metadata writer can rotate as well.
    """

    def __init__(self, dst: str | Path, lang: str, size_limit: int | None = None) -> None:
        self.lang = lang
        self.dst = Path(dst)
        self.size_limit = size_limit
        self.size = 0
        self.nb_files = 0
        self.first_write_on_document = False
        self._text: BinaryIO | None = None

    def create_next_file(self) -> None:
        """Rotate to a new file.

        The first file is ``<lang>.txt``; when a second one is created, the
        first is renamed ``<lang>_part_1.txt``.
        """
        if self.nb_files == 0:
            filename = f"{self.lang}.txt"
        else:
            filename = f"{self.lang}_part_{self.nb_files + 1}.txt"

        path = self.dst / filename
        logger.info("creating %s", path)
        new_file = open(path, "a+b")

        if self._text is not None:
            self._text.close()
            self._text = None

        if self.nb_files == 1:
            src = self.dst / f"{self.lang}.txt"
            target = self.dst / f"{self.lang}_part_1.txt"
            logger.debug("renaming %s to %s", src, target)
            try:
                os.replace(src, target)
            except OSError:
                new_file.close()
                raise

        self._text = new_file
        self.size = 0
        self.nb_files += 1
        self.first_write_on_document = True

    def get_reset_first_write(self) -> bool:
        """Return ``first_write_on_document`` and reset it to False."""
        ret = self.first_write_on_document
        self.first_write_on_document = False
        return ret

    def get_free_space(self) -> int | None:
        """Return the bytes left in the current file, or None without a limit."""
        if self.size_limit is None:
            return None
        return max(0, self.size_limit - self.size)

    def write(self, data: bytes) -> int:
        """Write ``data`` followed by a blank line, rotating files if needed.

        Returns the number of bytes of ``data`` written.
        """
        if self._text is None:
            self.create_next_file()

        if (
            self.size_limit is not None
            and self.size + len(data) > self.size_limit
            and self.size > 0
        ):
            self.create_next_file()

        assert self._text is not None
        written = self._text.write(data)
        self._text.write(_SEPARATOR)
        self.size += written
        return written

    def flush(self) -> None:
        """Flush the current file, if any."""
        if self._text is not None:
            self._text.flush()

    def close(self) -> None:
        """Close the current file, if any."""
        if self._text is not None:
            self._text.close()
            self._text = None

    def __enter__(self) -> "TextWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()