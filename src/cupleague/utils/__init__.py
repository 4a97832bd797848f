"""Shared helpers for Cup League: logging and small utilities."""

# Cup League
# Copyright (C) 2025  Cup League developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from typing import Optional

PACKAGE_LOGGER_NAME = "cupleague"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Library code stays silent unless the application configures logging.
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger under the ``cupleague`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module
        level: Optional explicit level; otherwise ``CUPLEAGUE_LOG_LEVEL``
            from the environment is honoured when set

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if level is None:
        env_level = os.environ.get("CUPLEAGUE_LOG_LEVEL")
        if env_level:
            level = logging.getLevelName(env_level.upper())
            if not isinstance(level, int):
                level = None
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_console_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the package logger (used by the CLI)."""
    root = logging.getLogger(PACKAGE_LOGGER_NAME)
    if any(getattr(h, "_cupleague_console", False) for h in root.handlers):
        root.setLevel(level)
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._cupleague_console = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
