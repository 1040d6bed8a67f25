from __future__ import annotations

import re

from ....corrections.domain.models import Correction, CorrectionKind
from ..context import GrammarContext
from ..pipeline import GrammarRule


class RepeatedWhitespaceRule(GrammarRule):
    name = "whitespace"

    RE_RUN = re.compile(r"\s{2,}")

    def apply(self, context: GrammarContext) -> None:
        for match in self.RE_RUN.finditer(context.text):
            context.add_correction(
                Correction(
                    original=match.group(0),
                    corrected=" ",
                    kind=CorrectionKind.STYLE,
                    start=match.start(),
                    end=match.end(),
                    explanation="Collapse repeated whitespace into a single space.",
                ),
                stat=self.name,
            )
