# PATH: cdnsync/adapters/http/locale_fetcher.py
#
# PURPOSE:
# - GET {base_url}/locales/{locale}.json
# - any failure (network, non-2xx, bad JSON) -> LocaleFetchError
#
# DESIGN:
# - explicit timeout
# - no retry, no cache (fallback is the resolver's job)

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from cdnsync.domain.i18n.errors import LocaleFetchError

logger = logging.getLogger("cdnsync.i18n.http")


class HttpLocaleBundleFetcher:

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = str(base_url).rstrip("/")
        self._timeout = float(timeout_seconds or 10.0)
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    def url_for(self, locale: str) -> str:
        return f"{self._base_url}/locales/{locale}.json"

    def fetch(self, locale: str) -> Dict[str, Any]:
        url = self.url_for(locale)
        try:
            resp = self._session.get(url, headers=self._headers, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise LocaleFetchError(locale, f"HTTP {status}") from e
        except requests.RequestException as e:
            raise LocaleFetchError(locale, str(e)) from e
        except ValueError as e:
            raise LocaleFetchError(locale, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise LocaleFetchError(locale, "bundle is not a JSON object")
        return data
