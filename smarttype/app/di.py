from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import AppConfig
from ..modules.grammar.services.engine import GrammarEngine
from ..modules.spelling.services.checker import SpellingChecker
from ..modules.spelling.services.dictionary import BASE_VOCABULARY, Dictionary
from ..modules.text.services.analysis import TextAnalysisService
from ..modules.tone.services.engine import ToneEngine

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    config: AppConfig
    dictionary: Dictionary
    spelling: SpellingChecker
    grammar: GrammarEngine
    tone: ToneEngine
    text_service: TextAnalysisService

    @classmethod
    def build(cls, config: AppConfig) -> "AppContainer":
        dictionary = Dictionary(BASE_VOCABULARY)
        for word in config.custom_words:
            dictionary.add(word)
        spelling = SpellingChecker(
            dictionary,
            max_suggestions=config.max_suggestions,
            max_edit_distance=config.max_edit_distance,
        )
        grammar = GrammarEngine()
        tone = ToneEngine()
        text_service = TextAnalysisService(
            spelling,
            grammar,
            tone,
            language=config.language,
            category=config.category,
        )
        logger.info(
            "Analyzers ready: %d dictionary words, language=%s, category=%s",
            len(dictionary),
            config.language,
            config.category.value,
        )
        return cls(
            config=config,
            dictionary=dictionary,
            spelling=spelling,
            grammar=grammar,
            tone=tone,
            text_service=text_service,
        )
