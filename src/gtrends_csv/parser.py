"""Section extraction for the CSV reports downloaded from Google Trends.

A report is a sequence of sections separated by a single blank line::

    Web Search interest: foo
    Worldwide; 2004 - present

    Interest over time
    Week,foo
    2004-01-04 - 2004-01-10,64
    ...

    Top searches for foo
    foo bar,100
    foo baz,45

Each section starts with a line naming it. :class:`SectionedCsvParser` finds
that line, returns the lines that follow it up to the next blank line and
optionally splits them on a field separator. Quoting and escaping are not
interpreted.

A parser instance is not thread-safe: the separator is plain instance state.
Confine an instance to one thread or guard it externally.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Tuple

from .config import GtrendsConfig, load_config
from .errors import ConfigurationError, SectionReadError
from .types import SectionFound, SectionNotFound, SectionResult, SectionSpan

SECTION_TOP_SEARCHES_FOR = "Top searches for"

# Line terminators recognised when a section is read line by line.
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines; a final terminator does not add an empty line."""

    if not text:
        return []
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _strip_header_row(text: str) -> str:
    newline = text.find("\n")
    if newline == -1:
        return ""
    return text[newline + 1 :]


class SectionedCsvParser:
    """Expose the named sections of a Google Trends CSV export."""

    def __init__(
        self,
        csv: str,
        separator: Optional[str] = None,
        *,
        config: Optional[GtrendsConfig] = None,
    ):
        if config is None:
            config = load_config() if separator is None else GtrendsConfig()
        if separator is None:
            separator = config.csv.separator
        if not separator:
            raise ConfigurationError("No CSV field separator configured")
        try:
            re.compile(separator)
        except re.error as exc:
            raise ConfigurationError(f"Invalid CSV field separator {separator!r}: {exc}") from exc
        self._csv = csv
        self._separator = separator
        self._logger = logging.getLogger(config.logging.logger_name)

    @property
    def csv(self) -> str:
        """The whole document, unchanged."""
        return self._csv

    @property
    def separator(self) -> str:
        return self._separator

    @separator.setter
    def separator(self, value: str) -> None:
        self._separator = value

    def find_section(self, name: str, has_header: bool = False) -> SectionResult:
        """Locate ``name`` and return its body, or :class:`SectionNotFound`.

        ``name`` is a regular expression matched at the start of a line. Only
        line feeds start a new line here; a bare carriage return does not. The
        body is everything after the matching line up to the next blank line
        or the end of the document. With ``has_header`` the first body line is
        dropped.
        """

        self._logger.debug("Parsing CSV for section: %s", name)
        span = self._locate(name)
        if span is None:
            return SectionNotFound(name=name)
        text = self._csv[span.start : span.end]
        if has_header:
            text = _strip_header_row(text)
        return SectionFound(name=name, text=text, span=span)

    def get_section_text(self, name: str, has_header: bool = False) -> str:
        result = self.find_section(name, has_header)
        if not result.found:
            self._logger.warning("Section not found: %s", name)
        return result.text

    def get_section_lines(
        self,
        name: str,
        has_header: bool = False,
        field_sep: Optional[str] = None,
    ) -> List[str]:
        """Return the lines of a section.

        ``field_sep`` is accepted so the signature mirrors
        :meth:`get_section_rows`; lines are not split.
        """

        return split_lines(self.get_section_text(name, has_header))

    def get_section_rows(
        self,
        name: str,
        has_header: bool = False,
        field_sep: Optional[str] = None,
    ) -> List[List[str]]:
        """Return the lines of a section split on ``field_sep``.

        ``field_sep`` is a regular expression and defaults to the current
        separator. Rows keep empty fields and may differ in length.
        """

        pattern = self._compile_separator(name, field_sep)
        return [pattern.split(line) for line in self.get_section_lines(name, has_header)]

    def get_top_searches(self, max_items: int) -> List[str]:
        """Return up to ``max_items`` terms from the top searches section.

        The term is the part of each line before the first separator. Errors
        while reading the section are logged and yield an empty list.
        """

        searches: List[str] = []
        if max_items <= 0:
            return searches
        try:
            pattern = self._compile_separator(SECTION_TOP_SEARCHES_FOR, self._separator)
            lines = self.get_section_lines(SECTION_TOP_SEARCHES_FOR)
        except SectionReadError:
            self._logger.warning("Cannot read the top searches section", exc_info=True)
            return searches
        for line in lines:
            searches.append(pattern.split(line, maxsplit=1)[0])
            if len(searches) >= max_items:
                break
        return searches

    def _compile_separator(self, name: str, field_sep: Optional[str]) -> re.Pattern[str]:
        separator = self._separator if field_sep is None else field_sep
        try:
            return re.compile(separator)
        except (re.error, TypeError) as exc:
            raise SectionReadError(name, f"invalid field separator {separator!r}: {exc}") from exc

    def _iter_lines(self) -> Iterator[Tuple[str, int]]:
        # Yields (line, offset of its terminating newline or document end).
        document = self._csv
        offset = 0
        while True:
            newline = document.find("\n", offset)
            if newline == -1:
                if offset < len(document) or offset == 0:
                    yield document[offset:], len(document)
                return
            yield document[offset:newline], newline
            offset = newline + 1

    def _body_end(self, newline: int) -> int:
        document = self._csv
        while 0 <= newline < len(document):
            if document.startswith(("\n", "\r\n"), newline + 1):
                return newline
            newline = document.find("\n", newline + 1)
        return len(document)

    def _locate(self, name: str) -> Optional[SectionSpan]:
        try:
            pattern = re.compile(name)
        except re.error as exc:
            raise SectionReadError(name, f"invalid section pattern: {exc}") from exc
        size = len(self._csv)
        for line, line_end in self._iter_lines():
            if not pattern.match(line):
                continue
            start = min(line_end + 1, size)
            end = max(self._body_end(line_end), start)
            return SectionSpan(name=name, header_line=line, start=start, end=end)
        return None
