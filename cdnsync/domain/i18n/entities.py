"""
Locale entities: pure Python
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

DEFAULT_LOCALE = "en"
LOCALE_COOKIE = "locale"


@dataclass(frozen=True)
class LocaleMessages:
    locale: str
    messages: dict[str, Any] = field(default_factory=dict)


def locale_from_cookies(cookies: Optional[Mapping[str, str]], default: str = DEFAULT_LOCALE) -> str:
    """'locale' cookie value, or the default when absent/empty."""
    if not cookies:
        return default
    return (cookies.get(LOCALE_COOKIE) or "").strip() or default
