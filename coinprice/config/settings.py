# coinprice/config/settings.py

"""Central configuration for the coinprice lookup tool."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int, errors: list[str]) -> int:
    """Read a positive integer from ``name``.

    An unusable value is recorded in ``errors`` and ``default`` is
    returned, so the CLI can report it once arguments are parsed.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        errors.append(f"{name} must be a whole number of seconds, got {raw!r}")
        return default
    if value <= 0:
        errors.append(f"{name} must be positive, got {raw!r}")
        return default
    return value


def _default_logs_dir() -> Path:
    """Per-user log location, overridable with COINPRICE_LOGS_DIR."""
    override = os.getenv("COINPRICE_LOGS_DIR")
    if override:
        return Path(override).expanduser()
    state_home = os.getenv("XDG_STATE_HOME")
    base = (
        Path(state_home) if state_home
        else Path.home() / ".local" / "state"
    )
    return base / "coinprice" / "logs"


class Settings:
    """Central configuration for the coinprice lookup tool."""

    # Problems found while reading the environment
    CONFIG_ERRORS: list[str] = []

    # --- Remote service ---
    API_BASE_URL: str = os.getenv(
        "COINPRICE_API_URL", "https://api.coingecko.com/api/v3"
    )
    PRO_API_HOST: str = "pro-api.coingecko.com"
    API_KEY: str | None = os.getenv("COINGECKO_API_KEY") or None
    REQUEST_TIMEOUT: int = _env_int(
        "COINPRICE_TIMEOUT", 15, CONFIG_ERRORS
    )                                   # Seconds before a request times out

    # --- Endpoints ---
    CRYPTO_LIST_PATH: str = "/coins/list"
    CURRENCY_LIST_PATH: str = "/simple/supported_vs_currencies"
    PRICE_PATH: str = "/simple/price"

    # --- Lookup defaults ---
    DEFAULT_CRYPTO: str = "bitcoin"
    DEFAULT_CURRENCY: str = "usd"

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths ---
    PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
    LOGS_DIR: Path = _default_logs_dir()
