# src/app/__init__.py
"""
Application helpers for the Docs export tools.

Exposes:
- configure_logging: one-shot root logger setup
- build_summary / export_to_dict / render_summary: views over an ExportDB
"""

from __future__ import annotations

from .logging_config import configure_logging
from .runtime import build_summary, export_to_dict, render_summary

__all__ = [
    "configure_logging",
    "build_summary",
    "export_to_dict",
    "render_summary",
]
