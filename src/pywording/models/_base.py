"""Base model for wording payloads.

Every wording schema inherits from :class:`WordingModel` which provides:

* ``alias_generator=to_camel`` so camelCase wording keys map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that drops ``None`` values so a
  missing key and an explicit ``null`` mean the same thing.
* :meth:`WordingModel.mutate`, the in-place fallback overlay used when a
  freshly loaded wording is completed from already cached ones.

A field is *present* when its value is not ``None``. Overlaying never
replaces a present value; it only fills absent ones.
"""

from __future__ import annotations

import copy
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

W = TypeVar("W", bound="WordingModel")


def _fill_missing(target: dict[str, Any], fallback: dict[str, Any]) -> None:
    """Fill keys absent from *target* with deep copies from *fallback*."""
    for key, value in fallback.items():
        if value is None:
            continue
        existing = target.get(key)
        if existing is None:
            target[key] = copy.deepcopy(value)
        else:
            _overlay_value(existing, value)


def _overlay_value(existing: Any, fallback: Any) -> None:
    """Recurse into containers that can be completed in place."""
    if isinstance(existing, WordingModel) and isinstance(fallback, WordingModel):
        existing.mutate(using=fallback)
    elif isinstance(existing, dict) and isinstance(fallback, dict):
        _fill_missing(existing, fallback)


class WordingModel(BaseModel):
    """Base for wording schemas.

    Subclasses declare their wording keys as optional fields::

        class AppWording(WordingModel):
            title: str | None = None
            errors: ErrorsWording | None = None
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}

    def mutate(self, *, using: WordingModel) -> None:
        """Overlay *using* onto this wording as fallback values.

        Fields this wording already has are kept; absent ones are copied
        from *using*. Nested wordings and dicts are completed recursively.
        The overlay is not commutative: the receiver always wins.
        """
        for name in type(self).model_fields:
            fallback = getattr(using, name, None)
            if fallback is None:
                continue
            existing = getattr(self, name)
            if existing is None:
                setattr(self, name, copy.deepcopy(fallback))
            else:
                _overlay_value(existing, fallback)

        extra = self.__pydantic_extra__
        other_extra = using.__pydantic_extra__
        if extra is not None and other_extra:
            _fill_missing(extra, other_extra)

    def present_fields(self) -> set[str]:
        """Names of declared fields and extra keys that carry a value."""
        names = {name for name in type(self).model_fields if getattr(self, name) is not None}
        if self.__pydantic_extra__:
            names.update(key for key, value in self.__pydantic_extra__.items() if value is not None)
        return names
