"""Package logging utilities that honour `RuntimeConfig`."""

from __future__ import annotations

import logging
from typing import Optional

from . import config as ps_config

_PACKAGE_LOGGER = "pstructs"

# Library code: records go nowhere unless the application configures
# logging, and never reach the "last resort" stderr handler.
logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a `pstructs` logger at the configured level.

    Parameters
    ----------
    name : str, optional
        Dotted suffix below the package logger, e.g. ``"max_heap"``.
    """

    logger_name = (
        _PACKAGE_LOGGER if name is None else f"{_PACKAGE_LOGGER}.{name}"
    )
    logger = logging.getLogger(logger_name)
    logger.setLevel(ps_config.runtime_config().log_level)
    return logger
