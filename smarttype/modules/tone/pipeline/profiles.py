from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Tuple

from ..domain.models import ToneChange, ToneId
from .steps import Append, CollapseWhitespace, Prepend, ReplaceLeading, Substitute, ToneStep

EXPANDED_FORMS: Tuple[Tuple[str, str], ...] = (
    ("don't", "do not"),
    ("won't", "will not"),
    ("can't", "cannot"),
    ("isn't", "is not"),
    ("aren't", "are not"),
    ("wasn't", "was not"),
    ("weren't", "were not"),
    ("haven't", "have not"),
    ("hasn't", "has not"),
    ("hadn't", "had not"),
    ("wouldn't", "would not"),
    ("couldn't", "could not"),
    ("shouldn't", "should not"),
)

CONTRACTED_FORMS: Tuple[Tuple[str, str], ...] = tuple((full, short) for short, full in EXPANDED_FORMS)

FILLER_PHRASES: Tuple[str, ...] = (
    "very", "really", "quite", "rather", "somewhat", "pretty",
    "I think", "I believe", "in my opinion", "it seems like",
)


@dataclass(frozen=True)
class ToneProfile:
    tone: ToneId
    steps: Tuple[ToneStep, ...]

    def apply(self, text: str) -> Tuple[str, List[ToneChange]]:
        changes: List[ToneChange] = []
        result = text
        for step in self.steps:
            result = step.apply(result, changes)
        return result, changes


TONE_PROFILES: Mapping[ToneId, ToneProfile] = {
    ToneId.PROFESSIONAL: ToneProfile(
        ToneId.PROFESSIONAL,
        (
            Substitute(EXPANDED_FORMS, "Professional tone requires full words"),
            ReplaceLeading("hi", "Hello", "Professional greeting"),
        ),
    ),
    ToneId.CASUAL: ToneProfile(
        ToneId.CASUAL,
        (
            Substitute(CONTRACTED_FORMS, "Casual tone uses contractions"),
            ReplaceLeading("Hello", "Hey", "Casual greeting"),
        ),
    ),
    ToneId.POLITE: ToneProfile(
        ToneId.POLITE,
        (
            Substitute((("can you", "Could you please"),), "More polite request", unless_contains=("please",)),
            Append(" Thank you.", "Polite closing", unless_contains=("thank you", "thanks")),
        ),
    ),
    ToneId.FRIENDLY: ToneProfile(
        ToneId.FRIENDLY,
        (
            Append("!", "Friendly exclamation", unless_contains=("!",)),
            Substitute(
                (("good", "great"), ("okay", "awesome"), ("fine", "fantastic")),
                "More friendly word choice",
            ),
        ),
    ),
    ToneId.CONFIDENT: ToneProfile(
        ToneId.CONFIDENT,
        (
            Substitute(
                (
                    ("maybe", "definitely"),
                    ("perhaps", "certainly"),
                    ("might", "will"),
                    ("could", "can"),
                    ("possibly", "absolutely"),
                ),
                "More confident language",
            ),
        ),
    ),
    ToneId.EMPATHETIC: ToneProfile(
        ToneId.EMPATHETIC,
        (
            Prepend("I understand that ", "Empathetic opening", unless_contains=("understand",)),
            Append(" I'm here to help.", "Supportive closing", unless_contains=("difficult", "challenging")),
        ),
    ),
    ToneId.PERSUASIVE: ToneProfile(
        ToneId.PERSUASIVE,
        (
            Substitute(
                (("good", "excellent"), ("nice", "outstanding"), ("okay", "remarkable")),
                "More persuasive language",
            ),
            Append(" Don't miss out!", "Call to action", unless_contains=("!",)),
        ),
    ),
    ToneId.CONCISE: ToneProfile(
        ToneId.CONCISE,
        (
            Substitute(
                tuple((phrase, "") for phrase in FILLER_PHRASES),
                "Removed unnecessary word for conciseness",
                whole_words=True,
            ),
            CollapseWhitespace(),
        ),
    ),
    ToneId.DETAILED: ToneProfile(
        ToneId.DETAILED,
        (
            Substitute(
                (
                    ("good", "exceptionally good"),
                    ("bad", "significantly problematic"),
                    ("big", "substantially large"),
                    ("small", "considerably small"),
                ),
                "More detailed description",
            ),
        ),
    ),
    ToneId.CREATIVE: ToneProfile(
        ToneId.CREATIVE,
        (
            Substitute(
                (("good", "brilliant"), ("bad", "terrible"), ("big", "enormous"), ("small", "tiny")),
                "More creative word choice",
            ),
        ),
    ),
    ToneId.TECHNICAL: ToneProfile(
        ToneId.TECHNICAL,
        (
            Substitute(
                (("good", "optimal"), ("bad", "suboptimal"), ("big", "large-scale"), ("small", "minimal")),
                "Technical terminology",
            ),
        ),
    ),
    ToneId.ROMANTIC: ToneProfile(
        ToneId.ROMANTIC,
        (
            Substitute(
                (("love", "adore"), ("like", "cherish"), ("good", "wonderful"), ("beautiful", "stunning")),
                "More romantic language",
            ),
        ),
    ),
    ToneId.HUMOROUS: ToneProfile(
        ToneId.HUMOROUS,
        (Append(" \U0001F604", "Added humor", unless_contains=("!",)),),
    ),
    ToneId.SARCASM: ToneProfile(
        ToneId.SARCASM,
        (Append(" (not really)", "Sarcastic addition", unless_contains=("!",)),),
    ),
    ToneId.GEN_Z: ToneProfile(
        ToneId.GEN_Z,
        (
            Substitute(
                (("good", "slaps"), ("bad", "mid"), ("cool", "fire"), ("awesome", "no cap")),
                "Gen Z slang",
            ),
        ),
    ),
}
