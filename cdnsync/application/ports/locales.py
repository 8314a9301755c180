"""
Locale bundle port: fetch {base}/locales/{locale}.json
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol


class LocaleBundleFetcher(Protocol):

    @abstractmethod
    def fetch(self, locale: str) -> dict[str, Any]:
        """Bundle for locale. Raises LocaleFetchError on any failure."""
        ...
