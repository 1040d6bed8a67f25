from __future__ import annotations

from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import Dict, Tuple


@dataclass(frozen=True)
class DiffStats:
    inserted: int = 0
    deleted: int = 0
    replaced: int = 0
    steps: Tuple["DiffStats", ...] = field(default=(), compare=False, repr=False)

    @property
    def changed(self) -> bool:
        return bool(self.inserted or self.deleted or self.replaced)

    def to_summary(self) -> str:
        parts: list[str] = []
        if self.replaced:
            parts.append(f"{self.replaced} word(s) updated")
        if self.inserted:
            parts.append(f"{self.inserted} added")
        if self.deleted:
            parts.append(f"{self.deleted} removed")
        return ", ".join(parts) if parts else "no changes"


def _count_step(before: str, after: str) -> DiffStats:
    tally: Dict[str, int] = {"insert": 0, "delete": 0, "replace": 0}
    matcher = SequenceMatcher(None, before.split(), after.split(), autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag in tally:
            tally[tag] += max(i2 - i1, j2 - j1)
    return DiffStats(inserted=tally["insert"], deleted=tally["delete"], replaced=tally["replace"])


def stage_diff(*stages: str) -> DiffStats:
    """Word-level changes across consecutive text stages (input, grammar, tone, ...).

    Totals are summed per step; identical neighbouring stages contribute nothing.
    """
    steps = tuple(_count_step(before, after) for before, after in zip(stages, stages[1:]))
    return DiffStats(
        inserted=sum(step.inserted for step in steps),
        deleted=sum(step.deleted for step in steps),
        replaced=sum(step.replaced for step in steps),
        steps=steps,
    )
