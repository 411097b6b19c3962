"""Logging setup."""

import logging

from hl_exchange.core.config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(config: Config) -> None:
    """Configure root logging at ``config.monitoring.log_level``."""
    logging.basicConfig(level=config.monitoring.log_level, format=LOG_FORMAT)
    logging.getLogger("hl_exchange").setLevel(config.monitoring.log_level)
