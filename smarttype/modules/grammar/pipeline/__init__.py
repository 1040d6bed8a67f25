from __future__ import annotations

from typing import Sequence

from .context import GrammarContext
from .pipeline import GrammarPipeline, GrammarRule, PipelineResult
from .registry import RuleRegistry, default_registry
from .rules.casing import CapitalizationRule, StandalonePronounRule
from .rules.commas import OxfordCommaRule
from .rules.contractions import ContractionRule
from .rules.misspellings import CommonMisspellingsRule
from .rules.punctuation import TerminalPunctuationRule
from .rules.spacing import RepeatedWhitespaceRule

BUILTIN_RULES = (
    CapitalizationRule,
    CommonMisspellingsRule,
    StandalonePronounRule,
    RepeatedWhitespaceRule,
    ContractionRule,
    OxfordCommaRule,
    TerminalPunctuationRule,
)


def _register_builtin_rules(registry: RuleRegistry = default_registry) -> None:
    names = set(registry.list_rule_names())
    for rule in BUILTIN_RULES:
        if rule.name not in names:
            registry.register(rule)


_register_builtin_rules()


def create_registry() -> RuleRegistry:
    """A fresh registry holding only the built-in rules."""
    registry = RuleRegistry()
    _register_builtin_rules(registry)
    return registry


_PIPELINE_CACHE: tuple[int, GrammarPipeline] | None = None


def get_default_pipeline() -> GrammarPipeline:
    global _PIPELINE_CACHE
    version = default_registry.version
    if _PIPELINE_CACHE is None or _PIPELINE_CACHE[0] != version:
        pipeline = default_registry.create_pipeline()
        _PIPELINE_CACHE = (version, pipeline)
    return _PIPELINE_CACHE[1]


def run_rules(text: str, rules: Sequence[GrammarRule], **kwargs) -> PipelineResult:
    return GrammarPipeline(rules).run(text, **kwargs)


__all__ = [
    "BUILTIN_RULES",
    "GrammarContext",
    "GrammarPipeline",
    "GrammarRule",
    "PipelineResult",
    "RuleRegistry",
    "create_registry",
    "default_registry",
    "get_default_pipeline",
    "run_rules",
]
