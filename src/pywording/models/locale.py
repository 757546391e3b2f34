"""Supported locale list with a designated base locale."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class SupportedLocales(BaseModel):
    """Ordered, fixed set of supported locale codes.

    ``base`` is the fallback of last resort and must be one of ``locales``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    locales: tuple[str, ...]
    base: str

    @field_validator("locales")
    @classmethod
    def _normalize_locales(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        locales = tuple(code.strip() for code in value)
        if not locales:
            raise ValueError("at least one locale is required")
        if any(not code for code in locales):
            raise ValueError("locale codes must be non-empty")
        if len(set(locales)) != len(locales):
            raise ValueError(f"duplicate locale codes in {list(locales)}")
        return locales

    @field_validator("base")
    @classmethod
    def _normalize_base(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def _base_is_supported(self) -> SupportedLocales:
        if self.base not in self.locales:
            raise ValueError(f"base locale {self.base!r} is not in {list(self.locales)}")
        return self

    def __contains__(self, locale: object) -> bool:
        return locale in self.locales

    def base_first(self) -> list[str]:
        """Base locale, then the remaining locales in declared order."""
        return self.first(self.base)

    def first(self, locale: str) -> list[str]:
        """*locale*, then the remaining locales in declared order."""
        return [locale, *(code for code in self.locales if code != locale)]
