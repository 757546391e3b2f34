"""Constants shared across pywording modules."""

from __future__ import annotations

#: Logging domain tag for everything the wording manager reports.
LOG_DOMAIN = "wording"

#: Default on-disk suffix for bundled and persisted wording files.
DEFAULT_FILE_SUFFIX = ".json"

#: Default HTTP timeout (seconds) for remote wording requests.
DEFAULT_REQUEST_TIMEOUT = 15.0

#: Placeholder substituted in the remote URL template.
LOCALE_PLACEHOLDER = "{locale}"

USER_AGENT = "pywording/1 (+aiohttp)"
