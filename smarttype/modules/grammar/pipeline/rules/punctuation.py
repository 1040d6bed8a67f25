from __future__ import annotations

from ....corrections.domain.models import Correction, CorrectionKind
from ..context import GrammarContext
from ..pipeline import GrammarRule

TERMINAL_MARKS = (".", "!", "?")


class TerminalPunctuationRule(GrammarRule):
    name = "terminal_punctuation"

    def apply(self, context: GrammarContext) -> None:
        text = context.text
        if not text or text.endswith(TERMINAL_MARKS):
            return
        end = len(text)
        context.add_correction(
            Correction(
                original="",
                corrected=".",
                kind=CorrectionKind.PUNCTUATION,
                start=end,
                end=end,
                explanation="Missing period at end of sentence.",
            ),
            stat=self.name,
        )
