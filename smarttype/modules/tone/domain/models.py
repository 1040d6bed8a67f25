from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class UnknownToneError(ValueError):
    def __init__(self, tone_id: str) -> None:
        super().__init__(f"Unknown tone '{tone_id}'")
        self.tone_id = tone_id


class ToneId(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    POLITE = "polite"
    FRIENDLY = "friendly"
    CONFIDENT = "confident"
    EMPATHETIC = "empathetic"
    PERSUASIVE = "persuasive"
    CONCISE = "concise"
    DETAILED = "detailed"
    CREATIVE = "creative"
    TECHNICAL = "technical"
    ROMANTIC = "romantic"
    HUMOROUS = "humorous"
    SARCASM = "sarcasm"
    GEN_Z = "gen_z"

    @classmethod
    def parse(cls, value: str) -> Optional["ToneId"]:
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return TONE_ALIASES.get(key)


TONE_ALIASES: Dict[str, ToneId] = {
    "sarcastic": ToneId.SARCASM,
    "genz": ToneId.GEN_Z,
    "gen-z": ToneId.GEN_Z,
    "gen z": ToneId.GEN_Z,
}


@dataclass(frozen=True)
class ToneStyle:
    id: str
    name: str
    description: str = ""
    is_custom: bool = False


DEFAULT_TONES: Tuple[ToneStyle, ...] = (
    ToneStyle(ToneId.PROFESSIONAL.value, "Professional", "Formal, business-appropriate tone"),
    ToneStyle(ToneId.CASUAL.value, "Casual", "Relaxed, friendly tone"),
    ToneStyle(ToneId.POLITE.value, "Polite", "Courteous and respectful"),
    ToneStyle(ToneId.FRIENDLY.value, "Friendly", "Warm and approachable"),
    ToneStyle(ToneId.CONFIDENT.value, "Confident", "Assured and decisive"),
    ToneStyle(ToneId.EMPATHETIC.value, "Empathetic", "Understanding and compassionate"),
    ToneStyle(ToneId.PERSUASIVE.value, "Persuasive", "Convincing and compelling"),
    ToneStyle(ToneId.CONCISE.value, "Concise", "Brief and to the point"),
    ToneStyle(ToneId.DETAILED.value, "Detailed", "Comprehensive and thorough"),
    ToneStyle(ToneId.CREATIVE.value, "Creative", "Imaginative and original"),
    ToneStyle(ToneId.TECHNICAL.value, "Technical", "Precise and specialized"),
    ToneStyle(ToneId.ROMANTIC.value, "Romantic", "Loving and affectionate"),
    ToneStyle(ToneId.HUMOROUS.value, "Humorous", "Funny and entertaining"),
    ToneStyle(ToneId.SARCASM.value, "Sarcastic", "Ironically mocking"),
    ToneStyle(ToneId.GEN_Z.value, "Gen Z", "Modern, trendy language"),
)

TONE_STYLES: Mapping[ToneId, ToneStyle] = {ToneId(style.id): style for style in DEFAULT_TONES}


@dataclass(frozen=True)
class ToneChange:
    original: str
    transformed: str
    reason: str


@dataclass(frozen=True)
class ToneResult:
    original_text: str
    transformed_text: str
    tone: ToneStyle
    confidence: float
    changes: Tuple[ToneChange, ...] = field(default_factory=tuple)
    recognized: bool = True
