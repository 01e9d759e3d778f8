# coinprice/main.py

"""Entry point for the coinprice lookup CLI."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from coinprice.config.logging_config import setup_logging
from coinprice.config.settings import Settings

logger = logging.getLogger("coinprice.main")

_DEFAULT_COMMAND = "price"
_COMMANDS = (_DEFAULT_COMMAND, "crypto-list", "target-list")
# Options whose value is the following token
_VALUE_OPTIONS = ("--base-url", "-f", "--format")


def _version() -> str:
    try:
        return version("coinprice")
    except PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--base-url",
        default=None,
        dest="base_url",
        help=f"Pricing API base URL (default: {Settings.API_BASE_URL}).",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Echo debug logging to stderr.",
    )

    parser = argparse.ArgumentParser(
        prog="coinprice",
        description=(
            "Look up the current price, 24h volume and 24h change "
            "of a cryptocurrency."
        ),
        epilog=(
            "With no command, 'price' is assumed: "
            "coinprice ethereum eur"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_version()}"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    price = commands.add_parser(
        _DEFAULT_COMMAND,
        parents=[common],
        help="Validate both identifiers and print the price (default).",
    )
    price.add_argument(
        "crypto",
        nargs="?",
        default=Settings.DEFAULT_CRYPTO,
        help=f"Crypto id (default: {Settings.DEFAULT_CRYPTO}).",
    )
    price.add_argument(
        "target_currency",
        nargs="?",
        default=Settings.DEFAULT_CURRENCY,
        help=f"Target currency (default: {Settings.DEFAULT_CURRENCY}).",
    )
    price.add_argument(
        "-f",
        "--format",
        choices=["plain", "table", "json"],
        default="plain",
        dest="output_format",
        help="Output format (default: plain).",
    )

    commands.add_parser(
        "crypto-list",
        parents=[common],
        help="Print every known crypto id, one per line.",
    )
    commands.add_parser(
        "target-list",
        parents=[common],
        help="Print every supported target currency, one per line.",
    )
    return parser


def _normalise_argv(argv: list[str]) -> list[str]:
    """Put the command first, adding the implicit ``price`` when absent.

    Shared options may precede the command (``-v crypto-list``); the
    first token that is neither an option nor an option's value is
    taken as the command candidate.
    """
    skip_next = False
    for index, token in enumerate(argv):
        if skip_next:
            skip_next = False
            continue
        if token == "--":
            break
        if token in ("-h", "--help", "--version"):
            return argv
        if token.startswith("-") and len(token) > 1:
            skip_next = token in _VALUE_OPTIONS
            continue
        if token in _COMMANDS:
            return [token, *argv[:index], *argv[index + 1:]]
        break
    return [_DEFAULT_COMMAND, *argv]


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, route to the requested command and exit."""
    parser = _build_parser()
    args = parser.parse_args(
        _normalise_argv(sys.argv[1:] if argv is None else argv)
    )

    if Settings.CONFIG_ERRORS:
        parser.error("; ".join(Settings.CONFIG_ERRORS))

    try:
        log_file = setup_logging(verbose=args.verbose)
    except OSError as exc:
        parser.error(
            f"cannot write logs to {Settings.LOGS_DIR} ({exc.strerror}); "
            "set COINPRICE_LOGS_DIR to a writable directory"
        )
    logger.info("coinprice %s starting, log file: %s", args.command, log_file)

    from coinprice.cli.runner import run_crypto_list, run_lookup, run_target_list

    try:
        if args.command == "crypto-list":
            exit_code = run_crypto_list(base_url=args.base_url)
        elif args.command == "target-list":
            exit_code = run_target_list(base_url=args.base_url)
        else:
            exit_code = run_lookup(
                args.crypto,
                args.target_currency,
                output_format=args.output_format,
                base_url=args.base_url,
            )
    except Exception:
        logger.critical("Unexpected failure", exc_info=True)
        raise
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
