"""Logging setup for the tritri logger family.

Library code only ever calls logging.getLogger(__name__); the package root
logger carries a NullHandler until an application opts in here. The process
root logger is never touched.
"""
from __future__ import annotations

import logging
import sys
from typing import Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')

ROOT_LOGGER_NAME = 'tritri'


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: Union[str, int] = 'WARNING', stream=None) -> logging.Logger:
    """Attach a single stream handler to the 'tritri' logger and set its level.

    Calling it again only updates the level and stream; handlers never pile up.

    Raises:
        ValueError: If the level name is unknown.
    """
    lvl = _to_level(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(_FORMAT)
    root.addHandler(handler)
    root.setLevel(lvl)
    root.propagate = False
    return root
