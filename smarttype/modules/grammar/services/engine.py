from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Union

from ...corrections.domain.models import Correction, CorrectionKind
from ...corrections.services.apply import apply_corrections, merge_corrections
from ..domain.models import GrammarResult, SuggestionCategory
from ..pipeline import GrammarPipeline, get_default_pipeline

logger = logging.getLogger(__name__)

KIND_WEIGHTS: Mapping[CorrectionKind, float] = {
    CorrectionKind.GRAMMAR: 0.25,
    CorrectionKind.SPELLING: 0.20,
    CorrectionKind.PUNCTUATION: 0.15,
    CorrectionKind.STYLE: 0.10,
    CorrectionKind.TONE: 0.10,
}
MAX_DEDUCTION = 0.9
MIN_CONFIDENCE = 0.5


def grammar_confidence(corrections: Sequence[Correction]) -> float:
    deduction = min(sum(KIND_WEIGHTS[c.kind] for c in corrections), MAX_DEDUCTION)
    return round(min(max(1.0 - deduction, MIN_CONFIDENCE), 1.0), 4)


class GrammarEngine:
    def __init__(self, pipeline: Optional[GrammarPipeline] = None) -> None:
        self._pipeline = pipeline

    @property
    def pipeline(self) -> GrammarPipeline:
        return self._pipeline or get_default_pipeline()

    def check_grammar(
        self,
        text: str,
        language: str = "en",
        category: Union[SuggestionCategory, str] = SuggestionCategory.GENERAL,
    ) -> GrammarResult:
        if not text.strip():
            return GrammarResult(original_text=text, corrected_text=text, corrections=(), confidence=1.0)

        trimmed = text.strip()
        outcome = self.pipeline.run(trimmed, language=language, category=SuggestionCategory.parse(category))
        corrections = merge_corrections(outcome.corrections)
        corrected = apply_corrections(trimmed, corrections)
        logger.debug("Grammar check produced %d corrections: %s", len(corrections), outcome.stats)
        return GrammarResult(
            original_text=trimmed,
            corrected_text=corrected,
            corrections=tuple(corrections),
            confidence=grammar_confidence(corrections),
        )
