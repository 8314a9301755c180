"""
Locale resolution: requested locale, then exactly one fallback to the default.

requested ok   -> (requested, bundle)
requested fail -> default ok   -> (default, bundle)
               -> default fail -> LocaleFetchError

A failed request for the default locale itself still gets its one fallback
attempt, so a transient error on `en` is retried once.
"""
from __future__ import annotations

import logging
from typing import Optional

from cdnsync.application.ports.locales import LocaleBundleFetcher
from cdnsync.domain.i18n.entities import DEFAULT_LOCALE, LocaleMessages
from cdnsync.domain.i18n.errors import LocaleFetchError

logger = logging.getLogger("cdnsync.i18n")


def resolve_messages(
    fetcher: LocaleBundleFetcher,
    requested_locale: Optional[str] = None,
    default_locale: str = DEFAULT_LOCALE,
) -> LocaleMessages:
    locale = (requested_locale or "").strip() or default_locale

    try:
        return LocaleMessages(locale=locale, messages=fetcher.fetch(locale))
    except LocaleFetchError as e:
        logger.error("Error fetching locales for %s, falling back to %s: %s", locale, default_locale, e)

    return LocaleMessages(locale=default_locale, messages=fetcher.fetch(default_locale))
