# coinprice/models/price_snapshot.py

"""Current price observation for a single crypto/currency pair."""

from dataclasses import dataclass

from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier


@dataclass(frozen=True)
class PriceSnapshot:
    """Price, 24h volume and 24h change exactly as the service reported them."""

    crypto: CryptoIdentifier
    currency: CurrencyIdentifier
    current_price: float
    volume_24h: float
    change_24h: float

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for JSON output."""
        return {
            "crypto": self.crypto,
            "currency": self.currency,
            "price": self.current_price,
            "24h_vol": self.volume_24h,
            "24h_change": self.change_24h,
        }
