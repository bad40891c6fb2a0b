import logging
from functools import lru_cache

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@lru_cache()
def configure_logging(level: str = "INFO") -> None:
    """Set up root logging. Repeat calls with the same level are no-ops."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
