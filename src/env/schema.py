# IngestProfile dataclass
# src/env/schema.py

from dataclasses import dataclass
from pathlib import Path


@dataclass
class IngestProfile:
    """Resolved ingest settings for one profile in ingest.yaml."""
    name: str
    export_path: Path   # absolute; relative paths resolve against the project root
    encoding: str       # "auto" or a codec name ("utf-16", "utf-8")
    log_level: str      # logging level name ("INFO", "DEBUG", ...)
