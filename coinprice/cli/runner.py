# coinprice/cli/runner.py

"""Headless CLI runner: price lookups and reference-list dumps."""

import json
import logging
import sys
from collections.abc import Callable, Iterable
from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from coinprice.clients.coingecko_client import CoinGeckoClient
from coinprice.models.errors import (
    CoinPriceError,
    ExtractionError,
    IdentifierLookupError,
    TransportError,
)
from coinprice.models.identifiers import CryptoIdentifier, CurrencyIdentifier
from coinprice.models.price_snapshot import PriceSnapshot
from coinprice.services.price_lookup import PriceLookup

logger = logging.getLogger("coinprice.cli")

# Stderr console for diagnostics so stdout stays clean for results
_err = Console(stderr=True)

COLUMN_LABELS = ("Price", "24h_vol", "24h_change")


def format_price(value: float) -> str:
    """Render a price at full precision without exponent or trailing ``.0``."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_row(snapshot: PriceSnapshot) -> tuple[str, str, str]:
    """Formatted price, volume (0 dp) and change (2 dp) strings."""
    return (
        format_price(snapshot.current_price),
        f"{snapshot.volume_24h:.0f}",
        f"{snapshot.change_24h:.2f}",
    )


def render_plain(snapshot: PriceSnapshot) -> str:
    """Two-line pipe-separated table, each column as wide as its widest cell."""
    values = format_row(snapshot)
    widths = [
        max(len(label), len(value))
        for label, value in zip(COLUMN_LABELS, values)
    ]
    lines = [
        " | ".join(
            cell.ljust(width) for cell, width in zip(row, widths)
        ).rstrip()
        for row in (COLUMN_LABELS, values)
    ]
    return "\n".join(lines) + "\n"


def _print_table(snapshot: PriceSnapshot) -> None:
    """Render a Rich table of the snapshot to stdout."""
    price, volume, change = format_row(snapshot)
    table = Table(
        title=f"{snapshot.crypto} / {snapshot.currency}",
        title_style="bold cyan",
    )
    table.add_column(COLUMN_LABELS[0], justify="right", style="green")
    table.add_column(COLUMN_LABELS[1], justify="right")
    change_style = "red" if snapshot.change_24h < 0 else "green"
    table.add_column(COLUMN_LABELS[2], justify="right", style=change_style)
    table.add_row(price, volume, change)
    Console().print(table)


def _report_failure(exc: CoinPriceError) -> None:
    """Log a lookup failure and print a one-line diagnostic to stderr."""
    logger.error("Lookup failed: %s", exc)
    logger.debug("Failure detail", exc_info=exc)
    if isinstance(exc, IdentifierLookupError):
        message = f"Unknown {exc.kind}: {exc.identifier!r}"
    elif isinstance(exc, TransportError):
        message = f"Request failed: {exc}"
    elif isinstance(exc, ExtractionError):
        message = f"Malformed price response: {exc}"
    else:
        message = str(exc)
    _err.print(f"[red]{escape(message)}[/red]", highlight=False)


def run_lookup(
    crypto: str,
    currency: str,
    output_format: str = "plain",
    client: CoinGeckoClient | None = None,
    base_url: str | None = None,
) -> int:
    """Validate, fetch and print one price; return an exit code (0=ok, 1=fail)."""
    owned = client is None
    api = client if client is not None else CoinGeckoClient(base_url=base_url)
    try:
        snapshot = PriceLookup(api).lookup(
            CryptoIdentifier(crypto), CurrencyIdentifier(currency)
        )
    except CoinPriceError as exc:
        _report_failure(exc)
        return 1
    finally:
        if owned:
            api.close()

    if output_format == "table":
        _print_table(snapshot)
    elif output_format == "json":
        json.dump(snapshot.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        sys.stdout.write(render_plain(snapshot))
    return 0


def _run_listing(
    fetch: Callable[[PriceLookup], Iterable[str]],
    client: CoinGeckoClient | None,
    base_url: str | None,
) -> int:
    """Print every identifier a reference list holds, one per line."""
    owned = client is None
    api = client if client is not None else CoinGeckoClient(base_url=base_url)
    try:
        identifiers = list(fetch(PriceLookup(api)))
    except CoinPriceError as exc:
        _report_failure(exc)
        return 1
    finally:
        if owned:
            api.close()

    for identifier in identifiers:
        sys.stdout.write(f"{identifier}\n")
    return 0


def run_crypto_list(
    client: CoinGeckoClient | None = None,
    base_url: str | None = None,
) -> int:
    """Print all known crypto ids."""
    return _run_listing(PriceLookup.crypto_list, client, base_url)


def run_target_list(
    client: CoinGeckoClient | None = None,
    base_url: str | None = None,
) -> int:
    """Print all supported target currencies."""
    return _run_listing(PriceLookup.currency_list, client, base_url)
