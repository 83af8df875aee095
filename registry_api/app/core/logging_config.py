"""
Logging setup shared by the users and people apps.

Both app factories call ``setup_logging``, and an ASGI server or test
runner may already have attached handlers of its own.  Handlers added
here are tagged, so a repeated call is a no-op while foreign handlers
neither block nor get replaced.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_TAG = "_registry_api_handler"


def _level(name: str) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def _tagged(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    setattr(handler, _TAG, True)
    return handler


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Attach a console handler, and optionally a file handler, to ``logger``.

    ``logger`` defaults to the root logger.  Unknown level names fall
    back to ``INFO``.  Returns the configured logger.
    """
    target = logger if logger is not None else logging.getLogger()
    if any(getattr(handler, _TAG, False) for handler in target.handlers):
        return target

    target.setLevel(_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    target.addHandler(_tagged(logging.StreamHandler(), formatter))
    if logfile:
        log_path = Path(logfile).resolve()
        target.addHandler(_tagged(logging.FileHandler(log_path, encoding="utf-8"), formatter))
    return target
