from __future__ import annotations

from .domain.models import SpellingResult, WordCorrection
from .services.checker import SpellingChecker, confidence_for_distance
from .services.dictionary import BASE_VOCABULARY, Dictionary, DictionarySnapshot
from .utils.distance import levenshtein_distance

__all__ = [
    "BASE_VOCABULARY",
    "Dictionary",
    "DictionarySnapshot",
    "SpellingChecker",
    "SpellingResult",
    "WordCorrection",
    "confidence_for_distance",
    "levenshtein_distance",
]
