from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from ..domain.models import TONE_STYLES, ToneId, ToneResult, ToneStyle, UnknownToneError
from ..pipeline.profiles import TONE_PROFILES, ToneProfile

logger = logging.getLogger(__name__)

ToneSelector = Union[ToneId, ToneStyle, str]


def tone_confidence(original: str, transformed: str) -> float:
    """Crude proxy: the more the text grew, the more confident the rewrite."""
    ratio = (len(transformed) - len(original)) / len(original) if original else 0.0
    if ratio > 0.5:
        return 0.9
    if ratio > 0.2:
        return 0.8
    if ratio > 0.1:
        return 0.7
    return 0.6


def resolve_tone(target: ToneSelector) -> tuple[Optional[ToneId], ToneStyle]:
    if isinstance(target, ToneId):
        return target, TONE_STYLES[target]
    if isinstance(target, ToneStyle):
        return ToneId.parse(target.id), target
    tone_id = ToneId.parse(target)
    if tone_id is None:
        return None, ToneStyle(id=target, name=target, is_custom=True)
    return tone_id, TONE_STYLES[tone_id]


class ToneEngine:
    def __init__(self, profiles: Optional[Mapping[ToneId, ToneProfile]] = None) -> None:
        self._profiles = dict(profiles) if profiles is not None else dict(TONE_PROFILES)

    def transform_tone(
        self,
        text: str,
        target_tone: ToneSelector,
        language: str = "en",
        *,
        strict: bool = False,
    ) -> ToneResult:
        tone_id, style = resolve_tone(target_tone)
        profile = self._profiles.get(tone_id) if tone_id is not None else None
        if profile is None:
            if strict:
                raise UnknownToneError(style.id)
            logger.debug("No tone profile for %r, passing text through", style.id)
            return ToneResult(
                original_text=text,
                transformed_text=text,
                tone=style,
                confidence=tone_confidence(text, text),
                changes=(),
                recognized=False,
            )

        transformed, changes = profile.apply(text)
        return ToneResult(
            original_text=text,
            transformed_text=transformed,
            tone=style,
            confidence=tone_confidence(text, transformed),
            changes=tuple(changes),
        )
