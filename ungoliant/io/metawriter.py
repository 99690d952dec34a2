"""Rotating file writer for metadata."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


class MetaWriter:
    """Rotating metadata file writer.

    Unlike the text writer there is no size limit: a new file is only
    started by calling :meth:`create_next_file`, or on the first write.
    Nothing is created until something is written.
    """

    def __init__(self, dst: str | Path, lang: str) -> None:
        self.lang = lang
        self.dst = Path(dst)
        self.file: BinaryIO | None = None
        self.nb_files = 0

    def close_file(self) -> None:
        """Close the current file, warning if none is open."""
        if self.file is not None:
            self.file.close()
            self.file = None
        else:
            logger.warning("%s: trying to close an unopened MetaWriter.", self.lang)

    def create_next_file(self) -> None:
        """Rotate to a new file.

        The first file is ``<lang>_meta.jsonl``; when a second one is
        created, the first is renamed ``<lang>_meta_part_1.jsonl``.
        """
        if self.nb_files == 0:
            filename = f"{self.lang}_meta.jsonl"
        else:
            filename = f"{self.lang}_meta_part_{self.nb_files + 1}.jsonl"

        fd = os.open(self.dst / filename, os.O_RDWR | os.O_CREAT, 0o666)
        new_file = os.fdopen(fd, "r+b")

        if self.file is not None:
            self.file.close()
            self.file = None

        if self.nb_files == 1:
            src = self.dst / f"{self.lang}_meta.jsonl"
            target = self.dst / f"{self.lang}_meta_part_1.jsonl"
            logger.debug("renaming %s to %s", src, target)
            try:
                os.replace(src, target)
            except OSError:
                new_file.close()
                raise

        self.file = new_file
        self.nb_files += 1

    def write(self, data: bytes) -> int:
        """Write ``data`` to the current file, opening one if needed."""
        if self.file is None:
            self.create_next_file()
        assert self.file is not None
        return self.file.write(data)

    def flush(self) -> None:
        """Flush the current file, if any."""
        if self.file is not None:
            self.file.flush()