from __future__ import annotations

from .services.analysis import TextAnalysisReport, TextAnalysisService
from .utils.diff import DiffStats, stage_diff
from .utils.stats import format_corrections

__all__ = [
    "DiffStats",
    "TextAnalysisReport",
    "TextAnalysisService",
    "format_corrections",
    "stage_diff",
]
