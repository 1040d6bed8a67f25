from __future__ import annotations

import re

from ....corrections.domain.models import Correction, CorrectionKind
from ..context import GrammarContext
from ..pipeline import GrammarRule


class CapitalizationRule(GrammarRule):
    name = "capitalization"

    def apply(self, context: GrammarContext) -> None:
        first = context.text[:1]
        if not (first.isascii() and first.islower()):
            return
        context.add_correction(
            Correction(
                original=first,
                corrected=first.upper(),
                kind=CorrectionKind.GRAMMAR,
                start=0,
                end=1,
                explanation="Capitalize the first letter of the sentence.",
            ),
            stat=self.name,
        )


class StandalonePronounRule(GrammarRule):
    name = "pronoun"

    RE_PRONOUN = re.compile(r"\bi\b")

    def apply(self, context: GrammarContext) -> None:
        if not context.is_english:
            return
        for match in self.RE_PRONOUN.finditer(context.text):
            context.add_correction(
                Correction(
                    original=match.group(0),
                    corrected="I",
                    kind=CorrectionKind.GRAMMAR,
                    start=match.start(),
                    end=match.end(),
                    explanation='The pronoun "I" is always capitalized.',
                ),
                stat=self.name,
            )
