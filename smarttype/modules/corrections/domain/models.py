from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CorrectionKind(str, Enum):
    SPELLING = "spelling"
    GRAMMAR = "grammar"
    PUNCTUATION = "punctuation"
    STYLE = "style"
    TONE = "tone"


@dataclass(frozen=True)
class Correction:
    """A single edit over the half-open span ``[start, end)`` of a text.

    ``original`` is the exact slice being replaced; an empty ``original``
    marks a pure insertion at ``start == end``.
    """

    original: str
    corrected: str
    kind: CorrectionKind
    start: int
    end: int
    explanation: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")
        if self.original and self.end - self.start != len(self.original):
            raise ValueError(f"Span [{self.start}, {self.end}) does not match {self.original!r}")
        if not self.original and self.start != self.end:
            raise ValueError("Insertion must have start == end")
        if not self.explanation:
            raise ValueError("Correction explanation must not be empty")

    @property
    def is_insertion(self) -> bool:
        return not self.original

    def dedupe_key(self) -> tuple[int, int, str]:
        return self.start, self.end, self.corrected.lower()
