"""Line-level language identification with byte-weighted document scores."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Protocol

from ..lang import Lang
from .identification import Identification, Identifier, Prediction

_LABEL_PREFIX_LEN = len("__label__")

# Code point range of the Thai script letters and marks that are counted.
_THAI_FIRST = 3585
_THAI_LAST = 3656


class Predictor(Protocol):
    """A classifier returning up to ``k`` predictions above ``threshold``."""

    def predict(self, text: str, k: int, threshold: float) -> Sequence[Prediction]:
        ...


def clean_prediction(prediction: Prediction) -> Prediction:
    """Turn a ``__label__xx`` prediction label into ``xx``.

    Only the first nine characters are skipped, without further parsing.
    Raises ValueError if the label is too short to be cleaned.
    """
    if len(prediction.label) < _LABEL_PREFIX_LEN:
        raise ValueError(f"Label is too short to be cleaned: {prediction.label}")
    return Prediction(prob=prediction.prob, label=prediction.label[_LABEL_PREFIX_LEN:])


class FastText(Identifier):
    """Language identifier backed by a prediction model.

    ``k`` is the number of predicted languages per sentence and
    ``threshold`` the minimum probability of a prediction.
    """

    def __init__(self, predictor: Predictor, k: int = 1, threshold: float = 0.8) -> None:
        self._predictor = predictor
        self.k = k
        self.threshold = threshold

    def predict(self, sentence: str) -> list[Prediction] | None:
        """Predict labels for ``sentence``; None if nothing is reliable.

        Labels are cleaned of their ``__label__`` prefix where possible.
        """
        predictions = self._predictor.predict(sentence, self.k, self.threshold)
        if not predictions:
            return None

        cleaned = []
        for prediction in predictions:
            try:
                cleaned.append(clean_prediction(prediction))
            except ValueError:
                cleaned.append(prediction)
        return cleaned

    def identify(self, sentence: str) -> Identification | None:
        """Identify ``sentence`` as Thai, with the share of Thai characters as probability."""
        thai_count = sum(1 for ch in sentence if _THAI_FIRST <= ord(ch) <= _THAI_LAST)
        prob = thai_count / len(sentence) if sentence else 0.0
        return Identification(Lang.TH, prob)

    def get_weighted_ids(
        self, lines: Iterable[str]
    ) -> tuple[list[Identification | None], dict[Lang | None, tuple[int, float]], int]:
        """Identify each line and aggregate by language.

        Returns the per-line identifications, a mapping from language (None
        for unidentified lines) to ``(byte_count, sum(byte_count * prob) /
        total_bytes)``, and the total byte count. Null characters are removed
        from lines before identification.
        """
        lang_count: dict[Lang | None, tuple[int, float]] = {}
        total_count = 0
        ids: list[Identification | None] = []

        for raw in lines:
            line = raw.replace("\0", "")
            ident = self.identify(line)

            label = ident.label if ident is not None else None
            prob = ident.prob if ident is not None else 1.0
            byte_count = len(line.encode("utf-8"))

            count, weighted = lang_count.get(label, (0, 0.0))
            lang_count[label] = (count + byte_count, weighted + byte_count * prob)
            total_count += byte_count
            ids.append(ident)

        normalised = {
            label: (count, weighted / total_count if total_count else math.nan)
            for label, (count, weighted) in lang_count.items()
        }
        return ids, normalised, total_count