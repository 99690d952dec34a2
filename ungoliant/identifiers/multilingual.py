"""Detection of multilingual documents.

A document is multilingual when it has lines in several languages in
reasonable proportions. For example, 30 English, 30 Spanish and 30 French
lines make a multilingual document, while 99 English lines and a single
French one do not.

Two criteria are available:

- :class:`Multilingual` ranks languages by line count and requires that
  ``C_(n+1) > C_n / q``, with ``C_0`` the count of the most frequent language.
- :class:`StrictMultilingual` requires each present language to hold at least
  ``C_tot / (n + 1)`` lines (or bytes), and unidentified lines not to hold
  more than that.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ..filtering.base import Filter
from ..lang import Lang
from .identification import Identification

logger = logging.getLogger(__name__)


def _label(ident: Identification | None) -> Lang | None:
    return None if ident is None else ident.label


def _nb_langs(counts: Mapping[Lang | None, object]) -> int:
    return sum(1 for lang in counts if lang is not None)


@dataclass(frozen=True)
class StrictMultilingual(Filter):
    """Strict multilingual detector.

    * ``min_sentences``: minimal number of lines in the document
    * ``threshold_confidence``: minimal confidence for a line to count as confident
    * ``max_langs``: maximal number of languages (None for no limit)
    * ``min_confident_pctg``: share of confident lines that must be exceeded
    """

    min_sentences: int = 10
    threshold_confidence: float = 0.8
    max_langs: int | None = 5
    min_confident_pctg: float = 0.8

    def _confident_enough(self, idents: list[Identification | None]) -> bool:
        nb_confident = sum(
            1
            for ident in idents
            if ident is not None and ident.prob >= self.threshold_confidence
        )
        return nb_confident / len(idents) > self.min_confident_pctg

    def _lang_count_ok(self, counts: Mapping[Lang | None, object]) -> bool:
        nb_langs = _nb_langs(counts)
        max_langs = math.inf if self.max_langs is None else self.max_langs
        return 2 <= nb_langs <= max_langs

    @staticmethod
    def _balanced(counts: Mapping[Lang | None, int], threshold: int) -> bool:
        for lang, count in counts.items():
            if lang is None:
                if count > threshold:
                    logger.debug(
                        "doc has too many unknown lines (has %d, max %d)", count, threshold
                    )
                    return False
            elif count < threshold:
                logger.debug(
                    "%s has not enough lines (has %d, must have %d)", lang, count, threshold
                )
                return False
        return True

    def detect(self, items: Iterable[Identification | None]) -> bool:
        """Decide on per-line identifications, weighting every line equally."""
        idents = list(items)
        if not idents or len(idents) < self.min_sentences:
            return False
        if not self._confident_enough(idents):
            return False

        counts = Counter(_label(ident) for ident in idents)
        logger.debug("sentences per lang: %s", dict(counts))
        if not self._lang_count_ok(counts):
            return False

        threshold = math.floor(len(idents) / len(counts))
        logger.debug("count threshold is %d", threshold)
        return self._balanced(counts, threshold)

    def detect_weighted(self, items: Iterable[tuple[Identification | None, int]]) -> bool:
        """Decide on ``(identification, byte_count)`` pairs, weighting lines by bytes."""
        pairs = list(items)
        if not pairs or len(pairs) < self.min_sentences:
            return False
        if not self._confident_enough([ident for ident, _ in pairs]):
            return False

        nb_bytes = sum(nb for _, nb in pairs)
        bytes_per_lang: dict[Lang | None, int] = {}
        for ident, nb in pairs:
            key = _label(ident)
            # the first line seen for a language is counted twice
            bytes_per_lang[key] = bytes_per_lang.get(key, nb) + nb

        if not self._lang_count_ok(bytes_per_lang):
            return False

        threshold = math.floor(nb_bytes / len(bytes_per_lang))
        return self._balanced(bytes_per_lang, threshold)


@dataclass(frozen=True)
class Multilingual(Filter):
    """Less restrictive multilinguality conditions.

    * at least ``min_sentences`` lines (10 by default)
    * at least two identified languages
    * ranked by line count, among the ``limit`` first languages each count
      must exceed the previous one divided by ``q`` (4 by default)

    With 60 English lines out of 100, another language needs more than 15.
    """

    min_sentences: int = 10
    limit: int = 2
    q: float = 4.0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be at least 1")

    def detect(self, items: Iterable[Identification | None]) -> bool:
        idents = list(items)
        if len(idents) < self.min_sentences:
            return False

        counts = Counter(_label(ident) for ident in idents)
        logger.debug("sentences per lang: %s", dict(counts))
        if _nb_langs(counts) < 2:
            logger.debug("not enough languages")
            return False

        ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        if ordered[0][0] is None:
            logger.debug("first language is none")
            return False

        langs = [kv for kv in ordered if kv[0] is not None][: self.limit]
        first_lang, first_count = langs[0]
        logger.debug("%s is first with %d lines", first_lang, first_count)
        threshold = first_count / self.q

        for lang, count in langs[1:]:
            if count <= threshold:
                logger.debug("%s(%d) does not meet the threshold %f", lang, count, threshold)
                return False
            threshold = count / self.q

        return True