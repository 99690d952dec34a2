"""Interface shared by the per-language writers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class WriterTrait(ABC, Generic[T]):
    """A writer of items for one language.

    Used as a context manager, the metadata file is closed on exit.
    """

    @abstractmethod
    def write(self, vals: list[T]) -> None:
        """Write several items at once."""

    @abstractmethod
    def write_single(self, val: T) -> None:
        """Write a single item."""

    @abstractmethod
    def close_meta(self) -> None:
        """Close the current metadata file."""

    def __enter__(self) -> "WriterTrait[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_meta()