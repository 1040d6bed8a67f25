from __future__ import annotations

import pytest

from smarttype.modules.tone import (
    DEFAULT_TONES,
    TONE_PROFILES,
    ToneChange,
    ToneEngine,
    ToneId,
    UnknownToneError,
    tone_confidence,
)


@pytest.fixture()
def engine() -> ToneEngine:
    return ToneEngine()


def test_unknown_tone_passes_through(engine: ToneEngine) -> None:
    result = engine.transform_tone("hello", "unknown_tone_xyz")
    assert result.transformed_text == "hello"
    assert result.changes == ()
    assert result.recognized is False
    assert result.tone.id == "unknown_tone_xyz"


def test_unknown_tone_strict_raises(engine: ToneEngine) -> None:
    with pytest.raises(UnknownToneError):
        engine.transform_tone("hello", "unknown_tone_xyz", strict=True)
    with pytest.raises(ValueError):
        engine.transform_tone("hello", "pirate", strict=True)


def test_professional(engine: ToneEngine) -> None:
    result = engine.transform_tone("hi, I can't come and won't stay", ToneId.PROFESSIONAL)
    assert result.transformed_text == "Hello, I cannot come and will not stay"
    assert result.changes == (
        ToneChange("won't", "will not", "Professional tone requires full words"),
        ToneChange("can't", "cannot", "Professional tone requires full words"),
        ToneChange("hi", "Hello", "Professional greeting"),
    )
    assert result.tone.name == "Professional"


def test_professional_greeting_needs_whole_word(engine: ToneEngine) -> None:
    result = engine.transform_tone("history is fun", "professional")
    assert result.transformed_text == "history is fun"
    assert result.changes == ()


def test_casual(engine: ToneEngine) -> None:
    result = engine.transform_tone("Hello, I do not know", "casual")
    assert result.transformed_text == "Hey, I don't know"
    assert [c.transformed for c in result.changes] == ["don't", "Hey"]


def test_polite_request_and_closing(engine: ToneEngine) -> None:
    result = engine.transform_tone("can you send it", "polite")
    assert result.transformed_text == "Could you please send it Thank you."
    assert result.changes[-1] == ToneChange("", "Thank you.", "Polite closing")

    thanked = engine.transform_tone("thanks, can you send it", "polite")
    assert thanked.transformed_text == "thanks, Could you please send it"
    assert len(thanked.changes) == 1


def test_friendly(engine: ToneEngine) -> None:
    result = engine.transform_tone("The food was good", "friendly")
    assert result.transformed_text == "The food was great!"
    assert [c.reason for c in result.changes] == ["Friendly exclamation", "More friendly word choice"]


def test_confident(engine: ToneEngine) -> None:
    assert engine.transform_tone("Maybe we could win", "confident").transformed_text == "definitely we can win"


def test_empathetic(engine: ToneEngine) -> None:
    assert engine.transform_tone("This is hard", "empathetic").transformed_text == (
        "I understand that this is hard I'm here to help."
    )
    assert engine.transform_tone("I am tired", "empathetic").transformed_text == (
        "I understand that I am tired I'm here to help."
    )
    untouched = engine.transform_tone("I understand this is difficult", "empathetic")
    assert untouched.transformed_text == "I understand this is difficult"
    assert untouched.changes == ()


def test_persuasive(engine: ToneEngine) -> None:
    result = engine.transform_tone("The offer is good", "persuasive")
    assert result.transformed_text == "The offer is excellent Don't miss out!"
    assert result.confidence == 0.9


def test_concise_strips_fillers(engine: ToneEngine) -> None:
    result = engine.transform_tone("I think this is very really good", "concise")
    assert result.transformed_text == "this is good"
    assert [c.original for c in result.changes] == ["very", "really", "I think"]
    assert engine.transform_tone("Check every item", "concise").changes == ()


@pytest.mark.parametrize(
    "tone,text,expected",
    [
        ("detailed", "a big house", "a substantially large house"),
        ("creative", "a small dog", "a tiny dog"),
        ("technical", "small bad idea", "minimal suboptimal idea"),
        ("romantic", "I like you", "I cherish you"),
        ("humorous", "That was funny", "That was funny \U0001F604"),
        ("humorous", "That was funny!", "That was funny!"),
        ("sarcastic", "Great job", "Great job (not really)"),
        ("sarcasm", "Great job", "Great job (not really)"),
        ("genZ", "That is cool", "That is fire"),
        ("gen_z", "That is cool", "That is fire"),
    ],
)
def test_substitution_tables(engine: ToneEngine, tone: str, text: str, expected: str) -> None:
    assert engine.transform_tone(text, tone).transformed_text == expected


def test_aliases_resolve_to_canonical_style(engine: ToneEngine) -> None:
    result = engine.transform_tone("ok", "Sarcastic")
    assert result.tone.id == "sarcasm"
    assert result.tone.name == "Sarcastic"
    assert result.recognized


def test_tone_style_selector(engine: ToneEngine) -> None:
    assert engine.transform_tone("hi there", DEFAULT_TONES[0]).transformed_text == "Hello there"


def test_no_match_keeps_text(engine: ToneEngine) -> None:
    result = engine.transform_tone("nothing to see", "technical")
    assert result.transformed_text == "nothing to see"
    assert result.changes == ()
    assert result.confidence == 0.6


@pytest.mark.parametrize(
    "original,transformed,expected",
    [
        ("abcd", "abcdefg", 0.9),
        ("abcdefghij", "abcdefghijklm", 0.8),
        ("abcdefghij", "abcdefghijkl", 0.7),
        ("abcdefghij", "abcdefghij", 0.6),
        ("abcdefghij", "abc", 0.6),
        ("", "grown", 0.6),
    ],
)
def test_tone_confidence(original: str, transformed: str, expected: float) -> None:
    assert tone_confidence(original, transformed) == expected


def test_catalogue_covers_every_tone() -> None:
    assert len(DEFAULT_TONES) == 15
    assert {ToneId(style.id) for style in DEFAULT_TONES} == set(ToneId)
    assert set(TONE_PROFILES) == set(ToneId)


def test_deterministic(engine: ToneEngine) -> None:
    assert engine.transform_tone("good and bad", "creative") == engine.transform_tone("good and bad", "creative")
