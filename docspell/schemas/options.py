"""
Per-session spell-check options.
"""
from collections.abc import Mapping
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from docspell.config import settings
from docspell.services.spellcheck_base import SpellConfigurationError


class SpellOptions(BaseModel):
    """
    Immutable configuration for one spell-check session.

    Accepts both snake_case names and the camelCase spellings used by
    upstream document pipelines (``ignoreLiteral``, ``ignoreDigits``,
    ``normalizeApostrophes``).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    dictionary: Any = Field(description="Dictionary loader, payload or checker")
    ignore: Tuple[str, ...] = Field(default=(), description="Exact words never to flag")
    ignore_literal: bool = Field(default_factory=lambda: settings.SPELLCHECK_IGNORE_LITERAL)
    ignore_digits: bool = Field(default_factory=lambda: settings.SPELLCHECK_IGNORE_DIGITS)
    normalize_apostrophes: bool = Field(
        default_factory=lambda: settings.SPELLCHECK_NORMALIZE_APOSTROPHES
    )
    max: int = Field(
        default_factory=lambda: settings.SPELLCHECK_MAX_SUGGESTIONS,
        description="Unique misspellings to compute suggestions for",
    )
    personal: Optional[Union[str, bytes]] = Field(default=None, description="Personal word list")

    @field_validator("dictionary")
    @classmethod
    def _require_dictionary(cls, value: Any) -> Any:
        if value is None:
            raise SpellConfigurationError("Missing `dictionary` in options")
        return value

    @field_validator("ignore", mode="before")
    @classmethod
    def _default_ignore(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("ignore_literal", "ignore_digits", "normalize_apostrophes", mode="before")
    @classmethod
    def _default_flag(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default_factory()
        return value

    @field_validator("max", mode="before")
    @classmethod
    def _default_max(cls, value: Any) -> Any:
        # Zero means "use the default", as in the upstream option format
        if not value:
            return settings.SPELLCHECK_MAX_SUGGESTIONS
        if isinstance(value, (int, float)) and value < 0:
            raise ValueError("max must be a positive number")
        return value

    @classmethod
    def from_value(cls, value: Any) -> "SpellOptions":
        """
        Normalize the accepted option shapes into SpellOptions.

        Args:
            value: SpellOptions, a mapping of options, or a bare dictionary
                (loader callable, dictionary payload or checker)

        Returns:
            Validated SpellOptions

        Raises:
            SpellConfigurationError: If no dictionary was supplied
        """
        if isinstance(value, cls):
            return value

        if value is None:
            raise SpellConfigurationError("Missing `dictionary` in options")

        if isinstance(value, Mapping):
            if value.get("dictionary") is None:
                # A raw dictionary payload passed in place of options
                if "dic" in value:
                    return cls(dictionary=value)
                raise SpellConfigurationError("Missing `dictionary` in options")
            return cls.model_validate(dict(value))

        return cls(dictionary=value)
