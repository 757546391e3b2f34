"""Inbound commands that can trigger a wording refresh."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

#: Command id that asks the manager to re-fetch all remote wording.
FETCH_AND_UPDATE_WORDING = "localization.fetch_and_update_wording"


class WordingEvent(BaseModel):
    """An external command delivered to :meth:`WordingManager.receive`."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Command identifier")
    received_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        command = value.strip()
        if not command:
            raise ValueError("id must be non-empty")
        return command

    @field_validator("received_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
