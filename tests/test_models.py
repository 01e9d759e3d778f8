# tests/test_models.py

"""Tests for the snapshot dataclass and the error hierarchy."""

import dataclasses
import unittest

from coinprice.models.errors import (
    CoinPriceError,
    ExtractionError,
    IdentifierLookupError,
    TransportError,
    UnknownCryptoError,
    UnknownCurrencyError,
)
from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier
from coinprice.models.price_snapshot import PriceSnapshot


class TestPriceSnapshot(unittest.TestCase):
    """PriceSnapshot dataclass unit tests."""

    def setUp(self) -> None:
        self.snapshot = PriceSnapshot(
            crypto=CryptoIdentifier("bitcoin"),
            currency=CurrencyIdentifier("usd"),
            current_price=50000.0,
            volume_24h=123.0,
            change_24h=-1.5,
        )

    def test_immutable(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.snapshot.current_price = 1.0  # type: ignore[misc]

    def test_to_dict(self) -> None:
        self.assertEqual(
            self.snapshot.to_dict(),
            {
                "crypto": "bitcoin",
                "currency": "usd",
                "price": 50000.0,
                "24h_vol": 123.0,
                "24h_change": -1.5,
            },
        )


class TestErrors(unittest.TestCase):
    """Error taxonomy."""

    def test_all_errors_share_base(self) -> None:
        for exc in [
            TransportError("u", "r"),
            UnknownCryptoError("x"),
            UnknownCurrencyError("y"),
            ExtractionError("bitcoin", "usd", "usd_24h_vol"),
        ]:
            with self.subTest(exc=type(exc).__name__):
                self.assertIsInstance(exc, CoinPriceError)

    def test_lookup_errors_identify_list(self) -> None:
        crypto = UnknownCryptoError("dogecoin")
        currency = UnknownCurrencyError("xyz")
        self.assertIsInstance(crypto, IdentifierLookupError)
        self.assertIsInstance(currency, IdentifierLookupError)
        self.assertEqual(str(crypto), "Unknown crypto id: 'dogecoin'")
        self.assertEqual(str(currency), "Unknown target currency: 'xyz'")

    def test_lookup_error_is_not_builtin_lookup_error(self) -> None:
        """Callers catching KeyError/IndexError never see these."""
        self.assertNotIsInstance(UnknownCryptoError("x"), LookupError)

    def test_extraction_error_names_key(self) -> None:
        exc = ExtractionError("bitcoin", "usd", "usd_24h_vol")
        self.assertEqual(exc.key, "usd_24h_vol")
        self.assertIn("usd_24h_vol", str(exc))
        self.assertIn("bitcoin/usd", str(exc))


if __name__ == "__main__":
    unittest.main()
