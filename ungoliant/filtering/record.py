"""Document-level filters."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import Filter
from .sentence import Length


def _lines(text: str) -> list[str]:
    """Split into lines on ``\\n``, dropping a trailing ``\\r`` and a final empty line."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


@dataclass
class PFilter(Filter):
    """Rejects documents whose content is not mostly in long lines.

    Line lengths (in code points) are put in two buckets depending on
    whether they reach the sentence filter's minimum size. The document is
    kept when the long-line bucket holds at least ``sentence_threshold`` of
    the total. Defaults to 60% and a 100 code point minimum.
    """

    sentence_threshold: float = 0.6
    sentence_filter: Length = field(default_factory=Length)

    def detect(self, body: bytes | str) -> bool:
        if isinstance(body, (bytes, bytearray)):
            body = bytes(body).decode("utf-8", errors="replace")

        min_size = self.sentence_filter.min_size
        bucket_lower = 0
        bucket_upper = 0
        for line in _lines(body):
            count = len(line)
            if count < min_size:
                bucket_lower += count
            else:
                bucket_upper += count

        threshold = self.sentence_threshold * float(bucket_lower + bucket_upper)
        return not float(bucket_upper) < threshold