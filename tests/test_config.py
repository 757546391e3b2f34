from __future__ import annotations

from pathlib import Path

import pytest

from pywording.config import WordingConfig
from pywording.exceptions import WordingConfigError


def _set_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WORDING_BUNDLED_DIR", str(tmp_path / "bundled"))
    monkeypatch.setenv("WORDING_PERSISTED_DIR", str(tmp_path / "persisted"))
    monkeypatch.setenv("WORDING_LOCALES", "en, fr ,de")
    monkeypatch.setenv("WORDING_BASE_LOCALE", "en")


def test_from_env_reads_required_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _set_env(monkeypatch, tmp_path)
    monkeypatch.setenv("WORDING_REMOTE_URL", "https://cdn.example.com/wording/{locale}.json")
    monkeypatch.setenv("WORDING_REQUEST_TIMEOUT", "3.5")
    monkeypatch.setenv("WORDING_STRICT_BUNDLED", "yes")

    config = WordingConfig.from_env()

    assert config.bundled_dir == tmp_path / "bundled"
    assert config.locales == ("en", "fr", "de")
    assert config.base_locale == "en"
    assert config.request_timeout == 3.5
    assert config.strict_bundled is True
    assert config.remote_url_for("fr") == "https://cdn.example.com/wording/fr.json"


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _set_env(monkeypatch, tmp_path)
    monkeypatch.setenv("WORDING_REMOTE_URL", "https://cdn.example.com/wording/{locale}.json")

    config = WordingConfig.from_env(remote_url=None, active_locale="fr")

    assert config.remote_url is None
    assert config.remote_url_for("fr") is None
    assert config.active_locale == "fr"


def test_missing_required_values(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WORDING_BUNDLED_DIR", "WORDING_PERSISTED_DIR", "WORDING_LOCALES", "WORDING_BASE_LOCALE"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(WordingConfigError, match="bundled_dir"):
        WordingConfig.from_env()


def test_invalid_timeout(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _set_env(monkeypatch, tmp_path)
    monkeypatch.setenv("WORDING_REQUEST_TIMEOUT", "soon")

    with pytest.raises(WordingConfigError):
        WordingConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"locales": (), "base_locale": "en"},
        {"locales": ("fr",), "base_locale": "en"},
        {"locales": ("en",), "base_locale": "en", "active_locale": "fr"},
        {"locales": ("en",), "base_locale": "en", "remote_url": "https://cdn.example.com/en.json"},
    ],
)
def test_invalid_config(tmp_path: Path, kwargs: dict) -> None:
    with pytest.raises(WordingConfigError):
        WordingConfig(bundled_dir=tmp_path, persisted_dir=tmp_path, **kwargs)
