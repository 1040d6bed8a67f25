from __future__ import annotations

from typing import Iterable, List, Sequence

from ..domain.models import Correction


def order_for_application(corrections: Sequence[Correction]) -> List[Correction]:
    # Highest offset first; on equal starts the wider span goes first so a
    # narrower edit at the same offset lands on the replacement text.
    indexed = list(enumerate(corrections))
    indexed.sort(key=lambda item: (-item[1].start, -item[1].end, item[0]))
    return [correction for _, correction in indexed]


def apply_corrections(text: str, corrections: Sequence[Correction]) -> str:
    if not corrections:
        return text
    result = text
    for correction in order_for_application(corrections):
        length = len(result)
        start = min(max(correction.start, 0), length)
        end = min(max(correction.end, start), length)
        result = result[:start] + correction.corrected + result[end:]
    return result


def merge_corrections(*groups: Iterable[Correction]) -> List[Correction]:
    """Concatenate correction groups, keeping the first of each ``(start, end, corrected)`` key."""
    seen: set[tuple[int, int, str]] = set()
    merged: List[Correction] = []
    for group in groups:
        for correction in group:
            key = correction.dedupe_key()
            if key in seen:
                continue
            seen.add(key)
            merged.append(correction)
    return merged
