"""Manager configuration for pywording."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pywording._constants import DEFAULT_FILE_SUFFIX, DEFAULT_REQUEST_TIMEOUT, LOCALE_PLACEHOLDER
from pywording.exceptions import WordingConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_locales(value: str | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    locales = tuple(part.strip() for part in value.split(",") if part.strip())
    return locales or None


@dataclasses.dataclass(frozen=True)
class WordingConfig:
    """Manager configuration.

    Parameters
    ----------
    bundled_dir : Path
        Directory holding the wording files shipped with the build.
    persisted_dir : Path
        Directory where remotely fetched wording is persisted.
    locales : tuple of str
        Supported locale codes in declared order.
    base_locale : str
        Locale used as the fallback of last resort. Must be in ``locales``.
    remote_url : str or None
        URL template containing ``{locale}``. ``None`` disables the remote
        source entirely (every sync run stops immediately).
    active_locale : str or None
        Initially active locale. Defaults to ``base_locale``.
    file_suffix : str
        Suffix of bundled and persisted wording files.
    request_timeout : float
        Total timeout in seconds for one remote request.
    strict_bundled : bool
        Treat a missing bundled file for any locale as fatal, not only for
        the base locale.
    """

    bundled_dir: Path
    persisted_dir: Path
    locales: tuple[str, ...]
    base_locale: str
    remote_url: str | None = None
    active_locale: str | None = None
    file_suffix: str = DEFAULT_FILE_SUFFIX
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    strict_bundled: bool = False

    def __post_init__(self) -> None:
        if not self.locales:
            raise WordingConfigError("At least one locale must be configured")
        if self.base_locale not in self.locales:
            raise WordingConfigError(f"Base locale {self.base_locale!r} is not in {list(self.locales)}")
        if self.active_locale is not None and self.active_locale not in self.locales:
            raise WordingConfigError(f"Active locale {self.active_locale!r} is not in {list(self.locales)}")
        if self.remote_url is not None and LOCALE_PLACEHOLDER not in self.remote_url:
            raise WordingConfigError(f"remote_url must contain {LOCALE_PLACEHOLDER!r}")
        if self.request_timeout <= 0:
            raise WordingConfigError("request_timeout must be positive")

    def remote_url_for(self, locale: str) -> str | None:
        if self.remote_url is None:
            return None
        return self.remote_url.replace(LOCALE_PLACEHOLDER, locale)

    @classmethod
    def from_env(cls, **overrides: Any) -> WordingConfig:
        """Create configuration from environment variables.

        Reads ``WORDING_BUNDLED_DIR``, ``WORDING_PERSISTED_DIR``,
        ``WORDING_LOCALES`` (comma separated), ``WORDING_BASE_LOCALE`` and the
        optional ``WORDING_*`` variables. Explicit keyword arguments override
        environment values.

        Raises
        ------
        WordingConfigError
            If a required value is missing or a numeric value is malformed.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        _ENV_CONFIG_MAP = {
            "WORDING_BUNDLED_DIR": "bundled_dir",
            "WORDING_PERSISTED_DIR": "persisted_dir",
            "WORDING_BASE_LOCALE": "base_locale",
            "WORDING_REMOTE_URL": "remote_url",
            "WORDING_ACTIVE_LOCALE": "active_locale",
            "WORDING_FILE_SUFFIX": "file_suffix",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None and val.strip():
                config_kwargs[field_name] = val.strip()

        locales = _env_locales(env.get("WORDING_LOCALES"))
        if locales is not None:
            config_kwargs["locales"] = locales

        timeout_env = env.get("WORDING_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise WordingConfigError(f"Invalid WORDING_REQUEST_TIMEOUT: {timeout_env!r}") from exc

        if "strict_bundled" not in overrides:
            config_kwargs["strict_bundled"] = _env_bool(env.get("WORDING_STRICT_BUNDLED"), False)

        config_kwargs.update(overrides)

        missing = [name for name in ("bundled_dir", "persisted_dir", "locales", "base_locale") if name not in config_kwargs]
        if missing:
            raise WordingConfigError(f"Missing wording configuration: {', '.join(missing)}")

        config_kwargs["bundled_dir"] = Path(config_kwargs["bundled_dir"]).expanduser()
        config_kwargs["persisted_dir"] = Path(config_kwargs["persisted_dir"]).expanduser()
        config_kwargs["locales"] = tuple(config_kwargs["locales"])

        return cls(**config_kwargs)
