from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from pywording.exceptions import WordingTransportError
from pywording.models._base import WordingModel


class ErrorsWording(WordingModel):
    network: str | None = None
    generic: str | None = None


class AppWording(WordingModel):
    title: str | None = None
    greeting: str | None = None
    sign_in: str | None = None
    errors: ErrorsWording | None = None


def payload(**values: Any) -> bytes:
    return json.dumps(values).encode("utf-8")


class FakeProvider:
    """Provider backed by a tmp directory and an in-memory remote."""

    def __init__(self, root: Path) -> None:
        self.bundled_dir = root / "bundled"
        self.persisted_dir = root / "persisted"
        self.bundled_dir.mkdir(parents=True, exist_ok=True)
        self.remote: dict[str, bytes | Exception] = {}
        self.fetched: list[str] = []
        self.bundled_reads: list[str] = []
        self.persisted_reads: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}

    def bundled_path(self, locale: str) -> Path:
        self.bundled_reads.append(locale)
        return self.bundled_dir / f"{locale}.json"

    def persisted_path(self, locale: str) -> Path:
        self.persisted_reads.append(locale)
        return self.persisted_dir / f"{locale}.json"

    def write_bundled(self, locale: str, data: bytes) -> None:
        (self.bundled_dir / f"{locale}.json").write_bytes(data)

    def write_persisted(self, locale: str, data: bytes) -> None:
        self.persisted_dir.mkdir(parents=True, exist_ok=True)
        (self.persisted_dir / f"{locale}.json").write_bytes(data)

    def read_persisted(self, locale: str) -> dict[str, Any]:
        return json.loads((self.persisted_dir / f"{locale}.json").read_bytes())

    async def fetch_remote(self, locale: str) -> bytes:
        self.fetched.append(locale)
        gate = self.gates.get(locale)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(0)
        result = self.remote.get(locale)
        if result is None:
            raise WordingTransportError(f"no remote wording for {locale}", status_code=404)
        if isinstance(result, Exception):
            raise result
        return result
