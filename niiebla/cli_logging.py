"""Logging set-up for command-line tools."""

from __future__ import annotations

import logging
import sys

__all__ = ["setup_logging_for_cli"]

_HANDLER_NAME = "niiebla-cli"
_FORMAT = "%(levelname)5s %(name)s: %(message)s"


def setup_logging_for_cli() -> logging.Handler:
    """Install a timestamp-free stderr handler on the root logger at INFO level.

    Raises ``RuntimeError`` if it has already been installed.
    """
    root = logging.getLogger()
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        raise RuntimeError("logging for the command line has already been set up")

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    return handler