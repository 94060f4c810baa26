"""
Logging setup for processes that embed the data access layer.
"""

import logging
from typing import Optional

from lightbnb.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging with a consistent format.

    Args:
        level: Log level name; defaults to the configured LOG_LEVEL
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )

    # SQL echo is controlled by the engine, keep the SQLAlchemy logger quiet otherwise
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
