"""Public data structures describing located sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class SectionSpan:
    """Location of a section body inside the document.

    ``start`` and ``end`` are character offsets of the body, i.e. the text
    between the line following ``header_line`` and the next blank line (or the
    end of the document). Header-row stripping is not reflected here.
    """

    name: str
    header_line: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class SectionFound:
    """A section that was located in the document."""

    name: str
    text: str
    span: SectionSpan

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class SectionNotFound:
    """No line of the document starts with the requested section name."""

    name: str

    @property
    def found(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return ""


SectionResult = Union[SectionFound, SectionNotFound]
