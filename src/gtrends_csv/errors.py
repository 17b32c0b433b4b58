"""Exception hierarchy for the Google Trends CSV parser."""

from __future__ import annotations


class GtrendsCsvError(Exception):
    """Base class for errors raised by :mod:`gtrends_csv`."""


class ConfigurationError(GtrendsCsvError, ValueError):
    """Raised when the configuration cannot supply a usable value."""


class SectionReadError(GtrendsCsvError):
    """Raised when a section cannot be read or split into lines/fields."""

    def __init__(self, section: str, message: str):
        super().__init__(f"{section}: {message}")
        self.section = section
