"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys

def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logger with a stdout handler.

    Args:
        level: Logging level, as an int or a name such as "DEBUG".
    """
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    # httpx logs every request URL at INFO, which would leak the api key query param
    logging.getLogger("httpx").setLevel(logging.WARNING)
