# coinprice/validation/identifier_validator.py

"""Membership checks against the fetched reference lists."""

import logging
from collections.abc import Sequence
from typing import Protocol, TypeVar

from coinprice.models.errors import UnknownCryptoError, UnknownCurrencyError
from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier

logger = logging.getLogger("coinprice.validation")


class _Comparable(Protocol):
    def __lt__(self, other: "_Comparable", /) -> bool: ...


T = TypeVar("T", bound=_Comparable)


def bisect_contains(items: Sequence[T], value: T) -> bool:
    """Return True if ``value`` occurs in the ascending ``items``.

    Searches the half-open range ``[low, high)``; the compared midpoint
    is always excluded from the next range, so the loop ends once
    ``low == high``.
    """
    low, high = 0, len(items)
    while low < high:
        mid = (low + high) // 2
        probe = items[mid]
        if probe == value:
            return True
        if value < probe:
            high = mid
        else:
            low = mid + 1
    return False


def is_sorted(items: Sequence[T]) -> bool:
    """Return True if ``items`` is in non-descending order."""
    return all(
        not items[i + 1] < items[i] for i in range(len(items) - 1)
    )


def validate_crypto(
    crypto_list: Sequence[CryptoIdentifier],
    candidate: CryptoIdentifier,
) -> None:
    """Raise :class:`UnknownCryptoError` unless ``candidate`` is listed.

    Bisection is only trusted when the list really is sorted; an
    unsorted list falls back to a set lookup.
    """
    if is_sorted(crypto_list):
        found = bisect_contains(crypto_list, candidate)
    else:
        logger.warning(
            "Crypto list of %d ids is not sorted, "
            "using set membership instead of bisection",
            len(crypto_list),
        )
        found = candidate in set(crypto_list)

    if not found:
        logger.info("Rejected unknown crypto id %r", candidate)
        raise UnknownCryptoError(candidate)
    logger.debug("Crypto id %r validated", candidate)


def validate_currency(
    currency_list: Sequence[CurrencyIdentifier],
    candidate: CurrencyIdentifier,
) -> None:
    """Raise :class:`UnknownCurrencyError` unless ``candidate`` is listed."""
    # Order is not guaranteed, so scan rather than bisect
    if not any(code == candidate for code in currency_list):
        logger.info("Rejected unknown target currency %r", candidate)
        raise UnknownCurrencyError(candidate)
    logger.debug("Target currency %r validated", candidate)
