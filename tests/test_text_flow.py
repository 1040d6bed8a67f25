from __future__ import annotations

import pytest

from smarttype.app.config import AppConfig
from smarttype.app.di import AppContainer
from smarttype.modules.text import TextAnalysisService, stage_diff


@pytest.fixture()
def service() -> TextAnalysisService:
    config = AppConfig(SMARTTYPE_CUSTOM_WORDS="here, hello, there")
    return AppContainer.build(config).text_service


@pytest.mark.asyncio
async def test_text_flow_produces_summary(service: TextAnalysisService) -> None:
    report = await service.process("i don't know")
    assert report.final_text == "I do not know."
    assert report.tone is None
    assert report.summary.startswith("Fixed grammar: 1, punctuation: 1, tone: 1.")


@pytest.mark.asyncio
async def test_tone_runs_on_grammar_corrected_text(service: TextAnalysisService) -> None:
    report = await service.process("hi there", tone="professional")
    assert report.grammar.corrected_text == "Hi there."
    assert report.tone is not None
    assert report.final_text == "Hello there."


@pytest.mark.asyncio
async def test_unknown_tone_leaves_grammar_output(service: TextAnalysisService) -> None:
    report = await service.process("hello there", tone="pirate")
    assert report.tone is not None and not report.tone.recognized
    assert report.final_text == "Hello there."


@pytest.mark.asyncio
async def test_summary_when_no_changes_needed(service: TextAnalysisService) -> None:
    report = await service.process("All good here.")
    assert not report.spelling.has_errors
    assert report.final_text == "All good here."
    assert report.summary == "Nothing to fix, the text already looks good."


@pytest.mark.asyncio
async def test_summary_mentions_misspellings(service: TextAnalysisService) -> None:
    report = await service.process("All goood here.")
    assert report.spelling.words[0].word == "goood"
    assert report.summary == "Found 1 possible misspelling(s)."


@pytest.mark.asyncio
async def test_category_override(service: TextAnalysisService) -> None:
    casual = await service.process("don't go", category="casual")
    formal = await service.process("don't go", category="formal")
    assert casual.final_text == "Don't go."
    assert formal.final_text == "Do not go."


def test_stage_diff_sums_each_step() -> None:
    diff = stage_diff("the cat sat", "the dog sat", "the dog sat down")
    assert (diff.replaced, diff.inserted, diff.deleted) == (1, 1, 0)
    assert [step.to_summary() for step in diff.steps] == ["1 word(s) updated", "1 added"]
    assert diff.to_summary() == "1 word(s) updated, 1 added"


@pytest.mark.parametrize(
    "stages,summary",
    [
        (("the cat sat", "the sat"), "1 removed"),
        (("the cat sat", "the cat sat", "the cat sat"), "no changes"),
        (("alone",), "no changes"),
    ],
)
def test_stage_diff_edge_cases(stages: tuple, summary: str) -> None:
    diff = stage_diff(*stages)
    assert diff.to_summary() == summary
    assert diff.changed == (summary != "no changes")
