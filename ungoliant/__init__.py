"""Corpus generation tools: languages, filters, identification, I/O and downloading."""

__version__ = "0.1.0"