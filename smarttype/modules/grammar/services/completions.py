from __future__ import annotations

from typing import Dict, List, Tuple

COMMON_PHRASES: Dict[str, Tuple[str, ...]] = {
    "thank you": ("Thank you for your time", "Thank you for the opportunity", "Thank you for your help"),
    "i would like": ("I would like to", "I would like to know", "I would like to discuss"),
    "please let me": ("Please let me know", "Please let me know if", "Please let me know when"),
    "i hope": ("I hope this helps", "I hope you're doing well", "I hope to hear from you soon"),
}


def suggest_completions(text: str, limit: int = 5) -> List[str]:
    """Canned completions for every known phrase the text contains."""
    if limit <= 0:
        return []
    lowered = text.lower()
    suggestions: List[str] = []
    for phrase, completions in COMMON_PHRASES.items():
        if phrase in lowered:
            suggestions.extend(completions)
    return suggestions[:limit]
