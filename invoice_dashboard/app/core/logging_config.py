"""
Logging setup for the dashboard process.

``setup_logging`` attaches one console handler (and optionally a file
handler) to the root logger, tagged so a second call finds it and
leaves the configuration alone.  The dashboard's own loggers, all
children of ``invoice_dashboard``, follow the configured level; the
per-request access log of the server and the connection chatter of
``urllib3`` stay at ``WARNING`` unless the dashboard runs at ``DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "invoice_dashboard"
HANDLER_NAME = "invoice_dashboard"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NOISY_LOGGERS = ("uvicorn.access", "urllib3")


def _is_configured(root: logging.Logger) -> bool:
    return any(handler.get_name() == HANDLER_NAME for handler in root.handlers)


def _handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the dashboard.

    Parameters
    ----------
    level : str
        Level name for the dashboard's loggers.  Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Also write records to this file.  Parent directories are
        created as needed.
    """
    root = logging.getLogger()
    if _is_configured(root):
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root.setLevel(numeric_level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
    quiet_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.addHandler(_handler(logging.StreamHandler(), formatter))

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_handler(logging.FileHandler(log_path, encoding="utf-8"), formatter))
