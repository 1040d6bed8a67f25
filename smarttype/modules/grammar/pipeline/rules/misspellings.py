from __future__ import annotations

import re
from typing import Dict

from ....corrections.domain.models import Correction, CorrectionKind
from ..context import GrammarContext
from ..pipeline import GrammarRule

COMMON_MISSPELLINGS: Dict[str, str] = {
    "recieve": "receive",
    "seperate": "separate",
    "definately": "definitely",
    "occured": "occurred",
    "accomodate": "accommodate",
    "begining": "beginning",
    "beleive": "believe",
    "calender": "calendar",
    "cemetary": "cemetery",
    "concious": "conscious",
}


class CommonMisspellingsRule(GrammarRule):
    name = "misspellings"

    RE_MISSPELLING = re.compile(r"\b(?:" + "|".join(COMMON_MISSPELLINGS) + r")\b", re.IGNORECASE)

    def apply(self, context: GrammarContext) -> None:
        if not context.is_english:
            return
        for match in self.RE_MISSPELLING.finditer(context.text):
            found = match.group(0)
            fixed = COMMON_MISSPELLINGS[found.lower()]
            if found[0].isupper():
                fixed = fixed[0].upper() + fixed[1:]
            context.add_correction(
                Correction(
                    original=found,
                    corrected=fixed,
                    kind=CorrectionKind.SPELLING,
                    start=match.start(),
                    end=match.end(),
                    explanation="Common spelling error",
                ),
                stat=self.name,
            )
