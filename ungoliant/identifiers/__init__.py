"""Language identification results, identifiers and multilinguality checks."""

__all__ = ["fasttext", "identification", "multilingual"]