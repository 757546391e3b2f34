"""JSON codec between wording payload bytes and wording models."""

from __future__ import annotations

from typing import Generic

from pydantic import ValidationError

from pywording.exceptions import WordingDecodeError
from pywording.models._base import W


class WordingCodec(Generic[W]):
    """Decode and encode one wording schema."""

    def __init__(self, model_type: type[W]) -> None:
        self._model_type = model_type

    @property
    def model_type(self) -> type[W]:
        return self._model_type

    def decode(self, data: bytes) -> W:
        try:
            return self._model_type.model_validate_json(data)
        except ValidationError as exc:
            raise WordingDecodeError(
                f"Invalid {self._model_type.__name__} payload: {exc.error_count()} error(s)"
            ) from exc

    def encode(self, wording: W) -> bytes:
        return wording.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
