from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ...corrections.domain.models import Correction
from ..domain.models import SuggestionCategory
from .context import GrammarContext


@dataclass
class PipelineResult:
    corrections: List[Correction]
    stats: dict[str, int]
    context: GrammarContext


class GrammarRule:
    name: str

    def apply(self, context: GrammarContext) -> None:
        raise NotImplementedError


class GrammarPipeline:
    """Runs every rule against the same text and collects their corrections."""

    def __init__(self, rules: Sequence[GrammarRule]):
        self._rules: List[GrammarRule] = list(rules)

    @property
    def rules(self) -> Sequence[GrammarRule]:
        return tuple(self._rules)

    def run(
        self,
        text: str,
        *,
        language: str = "en",
        category: SuggestionCategory = SuggestionCategory.GENERAL,
    ) -> PipelineResult:
        ctx = GrammarContext(text=text, language=language, category=category)
        for rule in self._rules:
            rule.apply(ctx)
        return PipelineResult(corrections=list(ctx.corrections), stats=dict(ctx.stats), context=ctx)

    def replace(self, rules: Iterable[GrammarRule]) -> "GrammarPipeline":
        return GrammarPipeline(rules=list(rules))
