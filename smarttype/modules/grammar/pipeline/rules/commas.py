from __future__ import annotations

import re

from ....corrections.domain.models import Correction, CorrectionKind
from ..context import GrammarContext
from ..pipeline import GrammarRule
from ...domain.models import SuggestionCategory


class OxfordCommaRule(GrammarRule):
    name = "oxford_comma"

    RE_SERIES = re.compile(r"\b([A-Za-z]+), ([A-Za-z]+) and ([A-Za-z]+)\b")

    def apply(self, context: GrammarContext) -> None:
        if not context.is_english or context.category is not SuggestionCategory.FORMAL:
            return
        # Only the first series is corrected.
        match = self.RE_SERIES.search(context.text)
        if match is None:
            return
        position = match.end(2)
        context.add_correction(
            Correction(
                original="",
                corrected=",",
                kind=CorrectionKind.STYLE,
                start=position,
                end=position,
                explanation='Add a serial comma before "and" in a list.',
            ),
            stat=self.name,
        )
