"""
Locale domain errors: pure Python
"""
from __future__ import annotations


class LocaleFetchError(Exception):
    """Locale bundle could not be fetched (network error, non-2xx, bad JSON)."""

    def __init__(self, locale: str, reason: str) -> None:
        super().__init__(f"failed to fetch locale bundle {locale!r}: {reason}")
        self.locale = locale
        self.reason = reason
