from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from ..domain.models import ToneChange


@lru_cache(maxsize=256)
def _phrase_pattern(phrase: str, whole_words: bool) -> re.Pattern[str]:
    body = re.escape(phrase)
    if whole_words:
        body = rf"\b{body}\b"
    return re.compile(body, re.IGNORECASE)


def _contains_any(text: str, needles: Tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(needle.lower() in lowered for needle in needles)


class ToneStep:
    def apply(self, text: str, changes: List[ToneChange]) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Substitute(ToneStep):
    """Case-insensitive replacement of every occurrence, one change per table entry hit."""

    table: Tuple[Tuple[str, str], ...]
    reason: str
    whole_words: bool = False
    unless_contains: Tuple[str, ...] = ()

    def apply(self, text: str, changes: List[ToneChange]) -> str:
        if self.unless_contains and _contains_any(text, self.unless_contains):
            return text
        result = text
        for source, target in self.table:
            pattern = _phrase_pattern(source, self.whole_words)
            if not pattern.search(result):
                continue
            result = pattern.sub(lambda _m, value=target: value, result)
            changes.append(ToneChange(source, target, self.reason))
        return result


@dataclass(frozen=True)
class ReplaceLeading(ToneStep):
    source: str
    target: str
    reason: str

    def apply(self, text: str, changes: List[ToneChange]) -> str:
        pattern = re.compile(rf"^{re.escape(self.source)}\b", re.IGNORECASE)
        if not pattern.search(text):
            return text
        changes.append(ToneChange(self.source, self.target, self.reason))
        return pattern.sub(lambda _m: self.target, text, count=1)


@dataclass(frozen=True)
class Append(ToneStep):
    addition: str
    reason: str
    unless_contains: Tuple[str, ...] = ()

    def apply(self, text: str, changes: List[ToneChange]) -> str:
        if self.unless_contains and _contains_any(text, self.unless_contains):
            return text
        changes.append(ToneChange("", self.addition.strip(), self.reason))
        if not text:
            return self.addition.lstrip()
        return text + self.addition


@dataclass(frozen=True)
class Prepend(ToneStep):
    """Adds an opening clause; the old first word is lower-cased unless it is the pronoun "I"."""

    prefix: str
    reason: str
    unless_contains: Tuple[str, ...] = ()

    RE_PRONOUN_I = re.compile(r"^I\b")

    def apply(self, text: str, changes: List[ToneChange]) -> str:
        if self.unless_contains and _contains_any(text, self.unless_contains):
            return text
        body = text
        if body and not self.RE_PRONOUN_I.match(body):
            body = body[0].lower() + body[1:]
        changes.append(ToneChange("", self.prefix, self.reason))
        return self.prefix + body


@dataclass(frozen=True)
class CollapseWhitespace(ToneStep):
    RE_SPACES = re.compile(r"\s+")

    def apply(self, text: str, changes: List[ToneChange]) -> str:
        return self.RE_SPACES.sub(" ", text).strip()
