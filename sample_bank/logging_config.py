"""
Logging setup for the service.

Modules log through ``logging.getLogger(__name__)``; this configures the root
logger once and applies the configured level. SQL statements are logged by
raising the ``sqlalchemy.engine`` logger to INFO rather than through the
engine's ``echo`` flag, which would attach a second handler.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)
