from __future__ import annotations

from .domain.models import GrammarResult, SuggestionCategory
from .services.completions import suggest_completions
from .services.engine import GrammarEngine, grammar_confidence

__all__ = [
    "GrammarEngine",
    "GrammarResult",
    "SuggestionCategory",
    "grammar_confidence",
    "suggest_completions",
]
