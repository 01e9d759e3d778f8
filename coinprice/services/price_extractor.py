# coinprice/services/price_extractor.py

"""Price request and field extraction for a single crypto/currency pair."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from coinprice.clients.coingecko_client import CoinGeckoClient
from coinprice.models.errors import ExtractionError
from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier
from coinprice.models.price_snapshot import PriceSnapshot

logger = logging.getLogger("coinprice.extractor")


@dataclass(frozen=True)
class PriceKeys:
    """The three response keys the service derives from a currency code."""

    price: str
    volume: str
    change: str

    @classmethod
    def for_currency(cls, currency: str) -> "PriceKeys":
        return cls(
            price=currency,
            volume=f"{currency}_24h_vol",
            change=f"{currency}_24h_change",
        )


def _number(
    quote: Mapping[str, Any],
    key: str,
    crypto: CryptoIdentifier,
    currency: CurrencyIdentifier,
) -> float:
    """Look up ``key`` and return it as a float, or raise ExtractionError."""
    value = quote.get(key)
    # bool is an int subclass but never a valid price field
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning(
            "Price response for %s/%s has %r=%r",
            crypto,
            currency,
            key,
            value,
        )
        raise ExtractionError(crypto, currency, key)
    return float(value)


def extract_snapshot(
    payload: Any,
    crypto: CryptoIdentifier,
    currency: CurrencyIdentifier,
) -> PriceSnapshot:
    """Build a PriceSnapshot from a ``/simple/price`` response body.

    Values are taken verbatim. A missing or non-numeric field is an
    error; no default is ever substituted.
    """
    quote = payload.get(crypto) if isinstance(payload, Mapping) else None
    if not isinstance(quote, Mapping):
        raise ExtractionError(crypto, currency, crypto)

    keys = PriceKeys.for_currency(currency)
    return PriceSnapshot(
        crypto=crypto,
        currency=currency,
        current_price=_number(quote, keys.price, crypto, currency),
        volume_24h=_number(quote, keys.volume, crypto, currency),
        change_24h=_number(quote, keys.change, crypto, currency),
    )


def fetch_price(
    client: CoinGeckoClient,
    crypto: CryptoIdentifier,
    currency: CurrencyIdentifier,
) -> PriceSnapshot:
    """Request the current price with 24h volume and change included."""
    payload = client.get_json(
        client.settings.PRICE_PATH,
        params={
            "ids": crypto,
            "vs_currencies": currency,
            "include_24hr_vol": "true",
            "include_24hr_change": "true",
        },
    )
    snapshot = extract_snapshot(payload, crypto, currency)
    logger.info(
        "Price for %s/%s: %s (vol %s, change %s)",
        crypto,
        currency,
        snapshot.current_price,
        snapshot.volume_24h,
        snapshot.change_24h,
    )
    return snapshot
