"""
Process-wide logging setup.

One pipe-separated line per record on stdout, so container log
collectors can split fields without a JSON parser. Server and driver
chatter (uvicorn access lines, pymongo topology and command events) is
held at WARNING; application modules log through
`logging.getLogger(__name__)` at the configured level.

Connection strings and raw documents are never passed to a logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "pymongo")


def resolve_level(level: str) -> int:
    """Translate a level name such as "debug" into its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout handler on the root logger, replacing any other.

    An unknown level name fails at startup instead of silently
    falling back to INFO.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
