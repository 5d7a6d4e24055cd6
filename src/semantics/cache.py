# src/semantics/cache.py
"""
Process-local cache for the decoded export.

Usage:

    from semantics.cache import get_export_db

    db = get_export_db()
    recipe = db.get_recipe("Recipe_SteelBeam_C")

The first call resolves the active ingest profile and reads the export from
disk; later calls return the same ExportDB. Tests patch
semantics.cache.load_ingest_profile / semantics.cache.ExportDB.
"""

from typing import Optional

from env.loader import load_ingest_profile

from .loader import ExportDB


_export_db: Optional[ExportDB] = None


def get_export_db() -> ExportDB:
    """
    Return a process-local ExportDB singleton.

    First call constructs the DB from the configured export_path, subsequent
    calls return the same instance.
    """
    global _export_db
    if _export_db is None:
        profile = load_ingest_profile()
        _export_db = ExportDB.from_path(profile.export_path, encoding=profile.encoding)
    return _export_db


def _reset_caches_for_tests() -> None:
    """
    Internal helper used by tests to hard-reset the singleton.

    Do not use this in normal code; it's only meant for test isolation.
    """
    global _export_db
    _export_db = None
