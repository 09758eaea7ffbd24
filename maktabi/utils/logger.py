# maktabi/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to console and to a rotating file (LOG_DIR/maktabi.log).

Services prefix their messages with a channel tag so one grep isolates a concern:
  [Permit]  checkout / check-in, reversed odometer readings (WARNING)
  [Fuel]    refuelling entries, report runs, expenses of deleted permits (WARNING)
  [Ledger]  odometer regressions (DEBUG), expenses of unknown vehicles (WARNING)
  [Leave]   submissions and status changes
  [AUDIT]   activity-trail writes; a failed write is logged at ERROR
  [AUTHZ]   refused capability checks (WARNING)
  [Correspondence]  reference numbers issued
  [Settings]  lookup-list and Ramadan date updates
  [Dashboard]  summary counts served
  [CRUD]    generic create / update / delete
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from maktabi.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()
LOG_DIR = settings.LOG_DIR or os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")

_configured = False


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True
    os.makedirs(LOG_DIR, exist_ok=True)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    console = logging.StreamHandler()
    console.setLevel(LOG_LEVEL)
    console.setFormatter(fmt)

    # Rotating file handler, keeps last 10 × 5MB log files
    file_handler = RotatingFileHandler(
        filename=os.path.join(LOG_DIR, "maktabi.log"),
        maxBytes=5 * 1024 * 1024,
        backupCount=10,
        encoding="utf-8",
    )
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    root.addHandler(console)
    root.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
