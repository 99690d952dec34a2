"""Sentence-level filters."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .base import Filter, FilterMut


@dataclass(frozen=True)
class Length(Filter):
    """Keeps sentences longer than ``min_size`` Unicode code points.

    The default minimum is 100 code points.
    """

    min_size: int = 100

    def detect(self, sentence: str) -> bool:
        return len(sentence) > self.min_size


class MeanLength(Filter, FilterMut):
    """Tracks the mean and standard deviation of sentence lengths.

    A sentence is detected when its length lies strictly within one
    standard deviation of the running mean.
    """

    def __init__(self) -> None:
        self._nb_measures = 0
        self._sum_lengths = 0.0
        self._pow_lengths = 0.0
        self._mean = 0.0
        self._std = 0.0

    def _update(self, length: int) -> None:
        self._nb_measures += 1
        self._sum_lengths += float(length)
        self._pow_lengths += float(length * length)

        self._mean = self._sum_lengths / self._nb_measures
        pow_div = self._pow_lengths / self._nb_measures
        sum_div = self._sum_lengths / self._nb_measures
        variance = pow_div - sum_div**2
        self._std = math.sqrt(variance) if variance >= 0 else math.nan

    def _within(self, length: int) -> bool:
        return abs(float(length) - self._mean) < self._std

    def detect_mut(self, sentence: str) -> bool:
        length = len(sentence)
        self._update(length)
        return self._within(length)

    def detect(self, sentence: str) -> bool:
        return self._within(len(sentence))

    def mean(self) -> float:
        """Return the running mean length."""
        return self._mean

    def std(self) -> float:
        """Return the running standard deviation of lengths."""
        return self._std