"""Wording models."""

from pywording.models._base import WordingModel
from pywording.models.locale import SupportedLocales
from pywording.models.wording import CatalogWording

__all__ = [
    "CatalogWording",
    "SupportedLocales",
    "WordingModel",
]
