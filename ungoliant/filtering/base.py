"""Filtering interfaces.

Filters work at sentence or record level. A :class:`Filter` is pure: two
equal inputs always give the same answer. A :class:`FilterMut` holds state
that evolves with what it sees, which lets a filter be "trained" with
:meth:`FilterMut.detect_mut` and then used read-only through
:meth:`Filter.detect`. A filter may implement both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Filter(ABC):
    """Stateless filter: ``detect`` returns True when the item is kept."""

    @abstractmethod
    def detect(self, item: Any) -> bool:
        """Return True if ``item`` passes the filter."""


class FilterMut(ABC):
    """Stateful filter: ``detect_mut`` may update the filter's state."""

    @abstractmethod
    def detect_mut(self, item: Any) -> bool:
        """Update the filter with ``item`` and return True if it passes."""