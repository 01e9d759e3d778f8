# coinprice/models/identifiers.py

"""Identifier types for crypto assets and target currencies."""

from typing import NewType

# A CoinGecko asset id such as "bitcoin"; compared lexicographically.
CryptoIdentifier = NewType("CryptoIdentifier", str)

# A vs-currency code such as "usd"; exact-match equality only.
CurrencyIdentifier = NewType("CurrencyIdentifier", str)
