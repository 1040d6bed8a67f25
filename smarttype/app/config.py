from __future__ import annotations

import re

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..modules.grammar.domain.models import SuggestionCategory


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    language: str = Field("en", alias="SMARTTYPE_LANGUAGE")
    category: SuggestionCategory = Field(SuggestionCategory.GENERAL, alias="SMARTTYPE_CATEGORY")
    max_suggestions: int = Field(5, ge=1, le=10, alias="SMARTTYPE_MAX_SUGGESTIONS")
    max_edit_distance: int = Field(2, ge=1, le=3, alias="SMARTTYPE_MAX_EDIT_DISTANCE")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="LOG_LEVEL")

    # Keep the raw env value as a string to avoid dotenv provider attempting JSON decode
    custom_words_raw: Optional[str] = Field(None, alias="SMARTTYPE_CUSTOM_WORDS")

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: object) -> SuggestionCategory:
        if isinstance(value, str) or value is None:
            return SuggestionCategory.parse(value)
        return value  # type: ignore[return-value]

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        return value.strip().lower() or "en"

    @property
    def custom_words(self) -> list[str]:
        raw = self.custom_words_raw
        if not raw:
            return []
        # Support comma/space/semicolon separation
        return [token for token in re.split(r"[\s,;]+", raw.strip()) if token]
