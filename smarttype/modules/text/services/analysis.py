from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ...grammar.domain.models import GrammarResult, SuggestionCategory
from ...grammar.services.engine import GrammarEngine
from ...spelling.domain.models import SpellingResult
from ...spelling.services.checker import SpellingChecker
from ...tone.domain.models import ToneResult
from ...tone.services.engine import ToneEngine, ToneSelector
from ..utils.diff import stage_diff
from ..utils.stats import format_corrections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextAnalysisReport:
    text: str
    final_text: str
    spelling: SpellingResult
    grammar: GrammarResult
    tone: Optional[ToneResult]
    summary: str


class TextAnalysisService:
    """Runs the analyzers for one piece of text.

    Tone, when requested, is applied to the grammar-corrected text. The
    analyzers are synchronous; this facade only gives callers an awaitable
    entry point.
    """

    def __init__(
        self,
        spelling: SpellingChecker,
        grammar: GrammarEngine,
        tone: ToneEngine,
        *,
        language: str = "en",
        category: SuggestionCategory = SuggestionCategory.GENERAL,
    ) -> None:
        self._spelling = spelling
        self._grammar = grammar
        self._tone = tone
        self._language = language
        self._category = category

    async def process(
        self,
        text: str,
        *,
        tone: Optional[ToneSelector] = None,
        category: Union[SuggestionCategory, str, None] = None,
        language: Optional[str] = None,
    ) -> TextAnalysisReport:
        language = language or self._language
        category = SuggestionCategory.parse(category) if category is not None else self._category

        spelling = self._spelling.check_spelling(text)
        grammar = self._grammar.check_grammar(text, language=language, category=category)
        tone_result = None
        final_text = grammar.corrected_text
        stages = [text, final_text]
        if tone is not None:
            tone_result = self._tone.transform_tone(final_text, tone, language=language)
            if not tone_result.recognized:
                logger.warning("Tone %r is not recognized; text left unchanged", tone_result.tone.id)
            final_text = tone_result.transformed_text
            stages.append(final_text)

        diff = stage_diff(*stages)
        if diff.changed:
            summary = f"{format_corrections(grammar.corrections)} Words: {diff.to_summary()}."
        elif spelling.has_errors:
            summary = f"Found {len(spelling.words)} possible misspelling(s)."
        else:
            summary = format_corrections(grammar.corrections)

        return TextAnalysisReport(
            text=text,
            final_text=final_text,
            spelling=spelling,
            grammar=grammar,
            tone=tone_result,
            summary=summary,
        )
