from __future__ import annotations

from collections import Counter
from typing import Iterable

from ...corrections.domain.models import Correction, CorrectionKind

KIND_LABELS = {
    CorrectionKind.SPELLING: "spelling",
    CorrectionKind.GRAMMAR: "grammar",
    CorrectionKind.PUNCTUATION: "punctuation",
    CorrectionKind.STYLE: "style",
    CorrectionKind.TONE: "tone",
}


def format_corrections(corrections: Iterable[Correction]) -> str:
    counts = Counter(correction.kind for correction in corrections)
    parts = [f"{label}: {counts[kind]}" for kind, label in KIND_LABELS.items() if counts.get(kind)]
    if not parts:
        return "Nothing to fix, the text already looks good."
    return "Fixed " + ", ".join(parts) + "."
