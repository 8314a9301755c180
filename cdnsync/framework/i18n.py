"""
Request-time locale shim: cookie -> locale -> bundle from the CDN.
"""
from __future__ import annotations

from typing import Mapping, Optional

from cdnsync.adapters.http.locale_fetcher import HttpLocaleBundleFetcher
from cdnsync.application.use_cases.i18n.resolve_messages import resolve_messages
from cdnsync.domain.i18n.entities import LocaleMessages, locale_from_cookies
from cdnsync.framework.config import LocaleConfig, load_locale_config


def request_messages(
    cookies: Optional[Mapping[str, str]],
    cfg: Optional[LocaleConfig] = None,
    fetcher: Optional[HttpLocaleBundleFetcher] = None,
) -> LocaleMessages:
    cfg = cfg or load_locale_config()
    locale = locale_from_cookies(cookies, default=cfg.DEFAULT_LOCALE)

    if fetcher is not None:
        return resolve_messages(fetcher, locale, default_locale=cfg.DEFAULT_LOCALE)

    owned = HttpLocaleBundleFetcher(cfg.CDN_URL, timeout_seconds=cfg.HTTP_TIMEOUT_SECONDS)
    try:
        return resolve_messages(owned, locale, default_locale=cfg.DEFAULT_LOCALE)
    finally:
        owned.close()
