"""Exceptions raised by the corpus tools."""

from __future__ import annotations


class UngoliantError(Exception):
    """Base class for every error raised by this package."""


class UnknownLangError(UngoliantError, ValueError):
    """Raised when a language code is not one of the supported languages."""

    def __init__(self, lang: str) -> None:
        self.lang = lang
        super().__init__(f"unknown language: {lang!r}")