# coinprice/config/logging_config.py

"""Per-run logging configuration for coinprice.

Every invocation writes a timestamped log file under ``logs/``
(e.g. ``logs/run_20261019_101500.log``) that captures each request
the lookup makes, so a failed lookup can be traced after the fact.
Only warnings and errors reach the terminal unless ``verbose`` is set,
keeping stdout free for the price table and list output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from coinprice.config.settings import Settings

ROOT_LOGGER_NAME = "coinprice"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    verbose: bool = False,
    logs_dir: Path | None = None,
) -> Path:
    """Attach file and console handlers to the ``coinprice`` logger.

    Args:
        verbose: Lower the console threshold from WARNING to DEBUG.
        logs_dir: Directory for the run log; defaults to
            ``Settings.LOGS_DIR``.

    Returns:
        The path of the log file for this run.
    """
    target_dir = logs_dir if logs_dir is not None else Settings.LOGS_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = target_dir / f"run_{stamp}.log"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Already configured earlier in this process
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.debug("Logging initialised, run log: %s", log_file)

    return log_file
