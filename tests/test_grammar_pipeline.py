from __future__ import annotations

import re

import pytest

from smarttype.modules.corrections import Correction, CorrectionKind
from smarttype.modules.grammar import GrammarEngine
from smarttype.modules.grammar.pipeline import (
    GrammarContext,
    GrammarRule,
    RuleRegistry,
    create_registry,
    get_default_pipeline,
    run_rules,
)
from smarttype.modules.grammar.pipeline.rules.punctuation import TerminalPunctuationRule


class TehRule(GrammarRule):
    name = "teh"

    def apply(self, context: GrammarContext) -> None:
        for match in re.finditer(r"\bteh\b", context.text):
            context.add_correction(
                Correction("teh", "the", CorrectionKind.SPELLING, match.start(), match.end(), "Typo"),
                stat=self.name,
            )


class AdnRule(TehRule):
    name = "adn"


class NamelessRule(GrammarRule):
    name = ""

    def apply(self, context: GrammarContext) -> None:
        return None


def test_builtin_rule_order() -> None:
    assert create_registry().list_rule_names() == [
        "capitalization",
        "misspellings",
        "pronoun",
        "whitespace",
        "contractions",
        "oxford_comma",
        "terminal_punctuation",
    ]


def test_duplicate_rule_name_rejected() -> None:
    registry = create_registry()
    with pytest.raises(ValueError):
        registry.register(TerminalPunctuationRule)
    registry.register(TerminalPunctuationRule, before="capitalization", replace=True)
    assert registry.list_rule_names()[0] == "terminal_punctuation"
    assert len(registry.rules) == 7


def test_insert_before_and_after_bump_version() -> None:
    registry = RuleRegistry()
    registry.register(TerminalPunctuationRule)
    version = registry.version
    registry.register(TehRule, before="terminal_punctuation")
    registry.register(AdnRule, after="teh")
    assert registry.list_rule_names() == ["teh", "adn", "terminal_punctuation"]
    assert registry.version == version + 2

    registry.unregister("adn")
    assert registry.list_rule_names() == ["teh", "terminal_punctuation"]
    registry.unregister("missing")
    assert registry.version == version + 3


@pytest.mark.parametrize(
    "rule,kwargs,error",
    [
        (NamelessRule, {}, ValueError),
        (str, {}, TypeError),
        (TehRule(), {}, TypeError),
        (TehRule, {"before": "nowhere"}, ValueError),
        (TehRule, {"before": "terminal_punctuation", "after": "terminal_punctuation"}, ValueError),
    ],
)
def test_invalid_registrations_rejected(rule: object, kwargs: dict, error: type) -> None:
    registry = RuleRegistry()
    registry.register(TerminalPunctuationRule)
    with pytest.raises(error):
        registry.register(rule, **kwargs)  # type: ignore[arg-type]
    assert registry.list_rule_names() == ["terminal_punctuation"]


def test_custom_rule_runs_in_engine() -> None:
    registry = create_registry()
    registry.register(TehRule, before="terminal_punctuation")
    engine = GrammarEngine(registry.create_pipeline())
    assert engine.check_grammar("teh end").corrected_text == "The end."


def test_run_rules_collects_stats() -> None:
    result = run_rules("teh cat saw teh dog", [TehRule(), TerminalPunctuationRule()])
    assert len(result.corrections) == 3
    assert result.stats == {"teh": 2, "terminal_punctuation": 1}


def test_default_pipeline_is_cached() -> None:
    assert get_default_pipeline() is get_default_pipeline()
