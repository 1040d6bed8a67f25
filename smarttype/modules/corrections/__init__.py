from __future__ import annotations

from .domain.models import Correction, CorrectionKind
from .services.apply import apply_corrections, merge_corrections, order_for_application

__all__ = [
    "Correction",
    "CorrectionKind",
    "apply_corrections",
    "merge_corrections",
    "order_for_application",
]
