# coinprice/services/price_lookup.py

"""Validate-then-price pipeline for one lookup."""

import logging

from coinprice.clients.coingecko_client import CoinGeckoClient
from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier
from coinprice.models.price_snapshot import PriceSnapshot
from coinprice.services.price_extractor import fetch_price
from coinprice.validation.identifier_validator import (
    validate_crypto,
    validate_currency,
)

logger = logging.getLogger("coinprice.lookup")


class PriceLookup:
    """Coordinates reference-list validation and the price request.

    Steps run strictly in sequence, and the first failure propagates
    to the caller: an unknown crypto id is reported before the
    currency list or the price endpoint is ever requested.
    """

    def __init__(self, client: CoinGeckoClient) -> None:
        self.client = client

    def lookup(
        self,
        crypto: CryptoIdentifier,
        currency: CurrencyIdentifier,
    ) -> PriceSnapshot:
        """Validate both identifiers, then fetch their price snapshot."""
        logger.info("Looking up %s in %s", crypto, currency)

        validate_crypto(self.client.fetch_crypto_list(), crypto)
        validate_currency(self.client.fetch_currency_list(), currency)

        return fetch_price(self.client, crypto, currency)

    def crypto_list(self) -> list[CryptoIdentifier]:
        return self.client.fetch_crypto_list()

    def currency_list(self) -> list[CurrencyIdentifier]:
        return self.client.fetch_currency_list()
