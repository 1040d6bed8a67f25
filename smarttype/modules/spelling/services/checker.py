from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..domain.models import SpellingResult, WordCorrection
from ..utils.distance import levenshtein_distance
from .dictionary import Dictionary, DictionarySnapshot

RE_WORD = re.compile(r"[a-zA-Z]+")

MAX_SUGGESTIONS = 5
MAX_EDIT_DISTANCE = 2


def confidence_for_distance(distance: Optional[int]) -> float:
    if distance is None:
        return 0.0
    if distance == 1:
        return 0.9
    if distance == 2:
        return 0.7
    return 0.5


class SpellingChecker:
    def __init__(
        self,
        dictionary: Optional[Dictionary] = None,
        *,
        max_suggestions: int = MAX_SUGGESTIONS,
        max_edit_distance: int = MAX_EDIT_DISTANCE,
    ) -> None:
        self._dictionary = dictionary if dictionary is not None else Dictionary()
        self._max_suggestions = max_suggestions
        self._max_edit_distance = max_edit_distance

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    def check_spelling(self, text: str) -> SpellingResult:
        snapshot = self._dictionary.snapshot()
        words: List[WordCorrection] = []
        for match in RE_WORD.finditer(text):
            token = match.group(0)
            if self._is_correct(token, snapshot):
                continue
            ranked = self._rank(token, snapshot)
            words.append(
                WordCorrection(
                    word=token,
                    start=match.start(),
                    end=match.end(),
                    suggestions=tuple(_capitalize(word) for word, _ in ranked),
                    confidence=confidence_for_distance(ranked[0][1] if ranked else None),
                )
            )
        return SpellingResult(text=text, words=tuple(words))

    check = check_spelling

    def is_word_correct(self, word: str) -> bool:
        return self._is_correct(word, self._dictionary.snapshot())

    def add_to_dictionary(self, word: str) -> None:
        self._dictionary.add(word)

    def check_word(self, word: str, context: str = "", position: int = 0) -> Optional[WordCorrection]:
        """Single-word check; ``None`` when the word is known or nothing is close enough."""
        snapshot = self._dictionary.snapshot()
        if self._is_correct(word, snapshot):
            return None
        word = word.strip()
        ranked = self._rank(word, snapshot)
        if not ranked:
            return None
        return WordCorrection(
            word=word,
            start=position,
            end=position + len(word),
            suggestions=tuple(_capitalize(candidate) for candidate, _ in ranked),
            confidence=confidence_for_distance(ranked[0][1]),
        )

    def suggestions(self, word: str) -> Sequence[str]:
        return [_capitalize(candidate) for candidate, _ in self._rank(word, self._dictionary.snapshot())]

    @staticmethod
    def _is_correct(word: str, snapshot: DictionarySnapshot) -> bool:
        normalized = word.strip().lower()
        if not normalized:
            return True
        if normalized in snapshot:
            return True
        return normalized.isdigit()

    def _rank(self, word: str, snapshot: DictionarySnapshot) -> List[Tuple[str, int]]:
        normalized = word.lower()
        candidates: List[Tuple[str, int]] = []
        for entry in snapshot:
            distance = levenshtein_distance(normalized, entry)
            if 0 < distance <= self._max_edit_distance:
                candidates.append((entry, distance))
        candidates.sort(key=lambda item: item[1])
        return candidates[: self._max_suggestions]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]
