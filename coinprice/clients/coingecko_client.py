# coinprice/clients/coingecko_client.py

"""Blocking client for the CoinGecko reference and price endpoints."""

import json
import logging
from types import TracebackType
from typing import Any

from curl_cffi import requests as curl_requests

from coinprice.config.settings import Settings
from coinprice.models.errors import TransportError
from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier


class CoinGeckoClient:
    """Reference-data fetcher and shared transport for price requests.

    Every call performs exactly one round trip. Failures are never
    retried; they surface as :class:`TransportError`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: int | None = None,
        session: curl_requests.Session | None = None,
    ) -> None:
        self.logger = logging.getLogger("coinprice.client")
        self.settings = Settings()
        self.base_url = (
            base_url or self.settings.API_BASE_URL
        ).rstrip("/")
        self._api_key = api_key or self.settings.API_KEY
        self._timeout = (
            timeout if timeout is not None
            else self.settings.REQUEST_TIMEOUT
        )
        self.session = session or curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def __enter__(self) -> "CoinGeckoClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    def _headers(self) -> dict[str, str]:
        """Default headers plus the API key header when one is configured."""
        headers: dict[str, str] = dict(self.settings.DEFAULT_HEADERS)
        if self._api_key:
            if self.settings.PRO_API_HOST in self.base_url:
                headers["x-cg-pro-api-key"] = self._api_key
            else:
                headers["x-cg-demo-api-key"] = self._api_key
        return headers

    def get_json(
        self,
        path: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """GET ``path`` relative to the base URL and decode the JSON body."""
        url = f"{self.base_url}{path}"
        self.logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(
                url,
                headers=self._headers(),
                params=params,
                timeout=self._timeout,
            )
        except Exception as exc:
            self.logger.warning(
                "Request to %s failed: %s", url, exc, exc_info=True
            )
            raise TransportError(url, str(exc)) from exc

        if resp.status_code != 200:
            self.logger.warning(
                "HTTP %d from %s", resp.status_code, url
            )
            raise TransportError(url, f"HTTP {resp.status_code}")

        try:
            return json.loads(resp.text)
        except ValueError as exc:
            self.logger.warning(
                "Unparseable body from %s: %s", url, exc
            )
            raise TransportError(url, "response is not valid JSON") from exc

    def fetch_crypto_list(self) -> list[CryptoIdentifier]:
        """Return every known asset id in the order the service sent them."""
        path = self.settings.CRYPTO_LIST_PATH
        records = self.get_json(path)
        if not isinstance(records, list):
            raise TransportError(
                self.base_url + path, "expected a JSON array of coins"
            )

        ids: list[CryptoIdentifier] = []
        for record in records:
            coin_id = (
                record.get("id") if isinstance(record, dict) else None
            )
            if not isinstance(coin_id, str):
                raise TransportError(
                    self.base_url + path,
                    f"coin record without a string id: {record!r}",
                )
            ids.append(CryptoIdentifier(coin_id))

        self.logger.info("Fetched %d crypto ids", len(ids))
        return ids

    def fetch_currency_list(self) -> list[CurrencyIdentifier]:
        """Return every supported vs-currency code."""
        path = self.settings.CURRENCY_LIST_PATH
        codes = self.get_json(path)
        if not isinstance(codes, list) or not all(
            isinstance(code, str) for code in codes
        ):
            raise TransportError(
                self.base_url + path, "expected a JSON array of strings"
            )

        self.logger.info("Fetched %d target currencies", len(codes))
        return [CurrencyIdentifier(code) for code in codes]
