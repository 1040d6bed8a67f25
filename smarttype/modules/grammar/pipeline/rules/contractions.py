from __future__ import annotations

import re
from typing import Dict

from ....corrections.domain.models import Correction, CorrectionKind
from ..context import GrammarContext
from ..pipeline import GrammarRule
from ...domain.models import SuggestionCategory

CONTRACTIONS: Dict[str, str] = {
    "can't": "cannot",
    "won't": "will not",
    "don't": "do not",
}


class ContractionRule(GrammarRule):
    """Expands contractions unless the category asks for a casual register."""

    name = "contractions"

    RE_CONTRACTION = re.compile(
        r"\b(?:" + "|".join(re.escape(key).replace("'", "['’]") for key in CONTRACTIONS) + r")\b",
        re.IGNORECASE,
    )

    def apply(self, context: GrammarContext) -> None:
        if not context.is_english or context.category is SuggestionCategory.CASUAL:
            return
        for match in self.RE_CONTRACTION.finditer(context.text):
            found = match.group(0)
            expanded = CONTRACTIONS[found.lower().replace("’", "'")]
            if found[0].isupper():
                expanded = expanded[0].upper() + expanded[1:]
            context.add_correction(
                Correction(
                    original=found,
                    corrected=expanded,
                    kind=CorrectionKind.TONE,
                    start=match.start(),
                    end=match.end(),
                    explanation="Use the full form for a formal tone.",
                ),
                stat=self.name,
            )
