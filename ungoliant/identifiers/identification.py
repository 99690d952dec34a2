"""Language identification results and the identifier interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..lang import Lang

_LABEL_PREFIX_LEN = len("__label__")


@dataclass(frozen=True)
class Prediction:
    """A raw classifier prediction: a probability and a label string."""

    prob: float
    label: str


@dataclass(frozen=True)
class Identification:
    """A language label with the probability the identifier gave it."""

    label: Lang
    prob: float

    @classmethod
    def from_prediction(cls, prediction: Prediction) -> "Identification":
        """Build from a ``__label__xx`` prediction.

        Raises UnknownLangError if the label is not a supported language.
        """
        code = prediction.label[_LABEL_PREFIX_LEN:]
        return cls(label=Lang.parse(code), prob=prediction.prob)

    def to_dict(self) -> dict[str, Any]:
        """Serialise as ``{"label": ..., "prob": ...}``."""
        return {"label": str(self.label), "prob": self.prob}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Identification":
        """Inverse of :meth:`to_dict`; raises UnknownLangError on bad labels."""
        return cls(label=Lang.parse(data["label"]), prob=float(data["prob"]))


class Identifier(ABC):
    """Anything that can identify the language of a sentence."""

    @abstractmethod
    def identify(self, sentence: Any) -> Identification | None:
        """Return an identification, or None if none is reliable."""