"""
Application wide settings.

Kept as module constants. Only the log level can be changed from the outside (environment variable).
"""

import logging
import os
from typing import Optional

from src.core.shared_types import Color

# Red moves first and starts on the top rows (indices 0-11)
STARTING_COLOR = Color.RED

LOG_LEVEL = os.environ.get("CHECKERS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set up the root logger for the application.

    The library itself never calls this: modules only create loggers. A process hosting `CheckersService`
    (a web app or a script) calls it once at startup. Without it, the standard `logging` defaults apply.
    """
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
