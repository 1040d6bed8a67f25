from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class WordCorrection:
    word: str
    start: int
    end: int
    suggestions: Tuple[str, ...]
    confidence: float


@dataclass(frozen=True)
class SpellingResult:
    text: str
    words: Tuple[WordCorrection, ...] = field(default_factory=tuple)

    @property
    def has_errors(self) -> bool:
        return bool(self.words)
