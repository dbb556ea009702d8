import os
import logging
from typing import List, Optional

from constants import LOG_FORMAT


def setup_logging(log_path: Optional[str] = None, level: int = logging.INFO,
                  console: bool = True) -> List[logging.Handler]:
    """
    Attach a file handler (when ``log_path`` is given) and/or a stderr handler
    to the root logger, both using LOG_FORMAT.

    Returns the installed handlers so the caller can remove them again.
    """
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []

    if log_path:
        log_dir = os.path.dirname(os.path.abspath(log_path))
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    if console:
        handlers.append(logging.StreamHandler())

    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        root.addHandler(h)

    return handlers
