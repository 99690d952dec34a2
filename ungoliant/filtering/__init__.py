"""Filter interfaces and sentence- and document-level filters."""

__all__ = ["base", "record", "sentence"]