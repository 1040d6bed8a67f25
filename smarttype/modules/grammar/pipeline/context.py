from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, MutableMapping

from ...corrections.domain.models import Correction
from ..domain.models import SuggestionCategory


@dataclass
class GrammarContext:
    text: str
    language: str = "en"
    category: SuggestionCategory = SuggestionCategory.GENERAL
    corrections: List[Correction] = field(default_factory=list)
    stats: MutableMapping[str, int] = field(default_factory=dict)

    @property
    def is_english(self) -> bool:
        return self.language.strip().lower() == "en"

    def add_correction(self, correction: Correction, *, stat: str | None = None) -> None:
        self.corrections.append(correction)
        if stat:
            self.add_stat(stat, 1)

    def add_stat(self, key: str, value: int) -> None:
        self.stats[key] = self.stats.get(key, 0) + value

    def get_stat(self, key: str, default: int = 0) -> int:
        return int(self.stats.get(key, default))
