from __future__ import annotations

from .domain.models import (
    DEFAULT_TONES,
    TONE_STYLES,
    ToneChange,
    ToneId,
    ToneResult,
    ToneStyle,
    UnknownToneError,
)
from .pipeline.profiles import TONE_PROFILES, ToneProfile
from .services.engine import ToneEngine, resolve_tone, tone_confidence

__all__ = [
    "DEFAULT_TONES",
    "TONE_PROFILES",
    "TONE_STYLES",
    "ToneChange",
    "ToneEngine",
    "ToneId",
    "ToneProfile",
    "ToneResult",
    "ToneStyle",
    "UnknownToneError",
    "resolve_tone",
    "tone_confidence",
]
