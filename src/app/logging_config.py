# src/app/logging_config.py
"""
Central logging configuration for the export ingest tools.

Call configure_logging() from your main entrypoint once, for example:

    from app.logging_config import configure_logging
    configure_logging()

After that, semantics.loader / semantics.groups logs (document summaries,
skipped tags at DEBUG) will be visible on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: default logging level (e.g., logging.INFO, logging.DEBUG)
        stream: handler stream; defaults to stdout
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
