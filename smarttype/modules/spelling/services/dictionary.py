from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Tuple

logger = logging.getLogger(__name__)

BASE_VOCABULARY: Tuple[str, ...] = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
    "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
    "when", "make", "can", "like", "time", "no", "just", "him", "know", "take",
    "people", "into", "year", "your", "good", "some", "could", "them", "see", "other",
    "than", "then", "now", "look", "only", "come", "its", "over", "think", "also",
    "back", "after", "use", "two", "how", "our", "work", "first", "well", "way",
    "even", "new", "want", "because", "any", "these", "give", "day", "most", "us",
)


@dataclass(frozen=True)
class DictionarySnapshot:
    words: Tuple[str, ...]
    index: FrozenSet[str]

    def __contains__(self, word: object) -> bool:
        return word in self.index

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)


class Dictionary:
    """Lower-cased known words in insertion order.

    Additions build a new snapshot and swap it in under a lock; readers work
    on whichever snapshot they picked up, so a check never sees a partial set.
    """

    def __init__(self, words: Iterable[str] = BASE_VOCABULARY) -> None:
        ordered: dict[str, None] = {}
        for word in words:
            normalized = word.strip().lower()
            if normalized:
                ordered.setdefault(normalized, None)
        self._lock = threading.Lock()
        self._snapshot = DictionarySnapshot(words=tuple(ordered), index=frozenset(ordered))

    def snapshot(self) -> DictionarySnapshot:
        return self._snapshot

    def add(self, word: str) -> bool:
        normalized = word.strip().lower()
        if not normalized:
            return False
        with self._lock:
            current = self._snapshot
            if normalized in current.index:
                return False
            self._snapshot = DictionarySnapshot(
                words=current.words + (normalized,),
                index=current.index | {normalized},
            )
        logger.debug("Added word to dictionary: %s", word)
        return True

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
