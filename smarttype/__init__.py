from __future__ import annotations

from .app.config import AppConfig
from .app.di import AppContainer
from .app.main import create_app
from .modules.corrections import Correction, CorrectionKind, apply_corrections, merge_corrections
from .modules.grammar import GrammarEngine, GrammarResult, SuggestionCategory, suggest_completions
from .modules.spelling import Dictionary, SpellingChecker, SpellingResult, WordCorrection, levenshtein_distance
from .modules.text import TextAnalysisReport, TextAnalysisService
from .modules.tone import (
    DEFAULT_TONES,
    ToneChange,
    ToneEngine,
    ToneId,
    ToneResult,
    ToneStyle,
    UnknownToneError,
)

__all__ = [
    "AppConfig",
    "AppContainer",
    "Correction",
    "CorrectionKind",
    "DEFAULT_TONES",
    "Dictionary",
    "GrammarEngine",
    "GrammarResult",
    "SpellingChecker",
    "SpellingResult",
    "SuggestionCategory",
    "TextAnalysisReport",
    "TextAnalysisService",
    "ToneChange",
    "ToneEngine",
    "ToneId",
    "ToneResult",
    "ToneStyle",
    "UnknownToneError",
    "WordCorrection",
    "apply_corrections",
    "create_app",
    "levenshtein_distance",
    "merge_corrections",
    "suggest_completions",
]
