# coinprice/models/errors.py

"""Error hierarchy for price lookups."""


class CoinPriceError(Exception):
    """Base error for every failure a lookup can report."""


class TransportError(CoinPriceError):
    """Raised when the pricing service cannot be reached or answers badly.

    Covers network failures, non-200 statuses and bodies that do not
    parse into the expected shape.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class IdentifierLookupError(CoinPriceError):
    """Raised when an identifier is missing from its reference list."""

    kind: str = "identifier"

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Unknown {self.kind}: {identifier!r}")


class UnknownCryptoError(IdentifierLookupError):
    """The crypto id is not in the ``/coins/list`` reference list."""

    kind = "crypto id"


class UnknownCurrencyError(IdentifierLookupError):
    """The currency is not in the supported vs-currencies list."""

    kind = "target currency"


class ExtractionError(CoinPriceError):
    """Raised when a price response lacks a field for the requested pair."""

    def __init__(self, crypto: str, currency: str, key: str) -> None:
        self.crypto = crypto
        self.currency = currency
        self.key = key
        super().__init__(
            f"no numeric {key!r} for {crypto}/{currency} in price response"
        )
