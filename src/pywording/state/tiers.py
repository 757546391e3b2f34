"""Wording source tiers."""

from __future__ import annotations

from enum import StrEnum


class WordingSource(StrEnum):
    BUNDLED = "bundled"
    PERSISTED = "persisted"
    REMOTE = "remote"
