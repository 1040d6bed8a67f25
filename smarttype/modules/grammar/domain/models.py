from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from ...corrections.domain.models import Correction

logger = logging.getLogger(__name__)


class SuggestionCategory(str, Enum):
    GENERAL = "GENERAL"
    EMAIL = "EMAIL"
    SOCIAL = "SOCIAL"
    PROFESSIONAL = "PROFESSIONAL"
    CASUAL = "CASUAL"
    FORMAL = "FORMAL"
    TECHNICAL = "TECHNICAL"
    MEDICAL = "MEDICAL"
    LEGAL = "LEGAL"

    @classmethod
    def parse(cls, value: Union["SuggestionCategory", str, None]) -> "SuggestionCategory":
        if isinstance(value, cls):
            return value
        if not value:
            return cls.GENERAL
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            logger.debug("Unknown category %r, using GENERAL", value)
            return cls.GENERAL


@dataclass(frozen=True)
class GrammarResult:
    original_text: str
    corrected_text: str
    corrections: Tuple[Correction, ...] = field(default_factory=tuple)
    confidence: float = 1.0

    @property
    def has_corrections(self) -> bool:
        return bool(self.corrections)
