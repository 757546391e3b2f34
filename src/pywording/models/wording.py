"""Schema-less wording catalog."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from pywording.models._base import WordingModel


class CatalogWording(WordingModel):
    """Wording whose keys are not declared up front.

    Every top-level key of the payload is kept as an extra field; nested
    objects stay plain dicts and are completed key-wise by ``mutate``.
    """

    model_config = ConfigDict(extra="allow")

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key (``"errors.network"``) in the catalog."""
        node: Any = self.__pydantic_extra__ or {}
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return default if node is None else node
