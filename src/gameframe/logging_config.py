import logging
import sys
from typing import Optional, Union

from gameframe.config import get_settings, normalize_log_level

_HANDLER_NAME = "gameframe-console"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Handler:
    """
    Install one console handler on the root logger.

    Uses the configured ``log_level`` when ``level`` is omitted. Calling it
    again replaces the handler instead of stacking a second one.

    :param level: Level name or number.
    :return: The installed handler.
    :raises ValueError: If ``level`` names no standard level.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(normalize_log_level(level))

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    return handler
