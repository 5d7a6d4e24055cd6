# tests/test_app_logging_config.py

import io
import logging

from app.logging_config import configure_logging


def test_configure_logging_installs_single_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)

    stream = io.StringIO()
    configure_logging(logging.DEBUG, stream=stream)
    configure_logging(logging.DEBUG, stream=stream)

    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG

    logging.getLogger("semantics.loader").debug("Loaded %d groups", 3)
    assert "[DEBUG] semantics.loader: Loaded 3 groups" in stream.getvalue()


def test_configure_logging_respects_existing_handlers(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    monkeypatch.setattr(root, "level", logging.WARNING)

    configure_logging(logging.INFO)

    assert root.handlers == [existing]
    assert root.level == logging.INFO
