"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings loaded from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    APP_LOG_LEVEL: Optional[str] = None  # Overrides LOG_LEVEL for docspell.* loggers
    SYMSPELLPY_LOG_LEVEL: Optional[str] = None

    # Spell-check session defaults (overridable per session)
    SPELLCHECK_MAX_SUGGESTIONS: int = 30  # Unique words to compute suggestions for
    SPELLCHECK_IGNORE_LITERAL: bool = True  # Skip quoted/verbatim words
    SPELLCHECK_IGNORE_DIGITS: bool = True  # Skip digit-only and clock-time words
    SPELLCHECK_NORMALIZE_APOSTROPHES: bool = True  # Treat ’ as '

    # SymSpell engine
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # Max edit distance for suggestions (1-3)
    SPELLCHECK_PREFIX_LENGTH: int = 7  # SymSpell optimization parameter

    # Diagnostics
    SPELLCHECK_SOURCE: str = "docspell"
    SPELLCHECK_DOCS_URL: str = "https://github.com/docspell/docspell#readme"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
