"""pywording - Locale-keyed wording cache with bundled, persisted and remote sources."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pywording")
except PackageNotFoundError:
    __version__ = "0+local"
from pywording.codec import WordingCodec
from pywording.config import WordingConfig
from pywording.events import FETCH_AND_UPDATE_WORDING, WordingEvent
from pywording.exceptions import (
    WordingBundledError,
    WordingCacheError,
    WordingConfigError,
    WordingDecodeError,
    WordingError,
    WordingRemoteUnsupportedError,
    WordingTransportError,
)
from pywording.localization import LocaleSource, LocalizationManager
from pywording.manager import WordingManager
from pywording.models import CatalogWording, SupportedLocales, WordingModel
from pywording.provider import HttpWordingProvider, WordingProvider
from pywording.state.cache import WordingCache
from pywording.state.tiers import WordingSource
from pywording.subject import MutableValueSubject, Subscription, ValueSubject

__all__ = [
    "__version__",
    "FETCH_AND_UPDATE_WORDING",
    "CatalogWording",
    "HttpWordingProvider",
    "LocaleSource",
    "LocalizationManager",
    "MutableValueSubject",
    "Subscription",
    "SupportedLocales",
    "ValueSubject",
    "WordingBundledError",
    "WordingCache",
    "WordingCacheError",
    "WordingCodec",
    "WordingConfig",
    "WordingConfigError",
    "WordingDecodeError",
    "WordingError",
    "WordingEvent",
    "WordingManager",
    "WordingModel",
    "WordingProvider",
    "WordingRemoteUnsupportedError",
    "WordingSource",
    "WordingTransportError",
]
