from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .schema import IngestProfile


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Default config directory; tests monkeypatch this to point at a temp dir.
CONFIG_DIR = PROJECT_ROOT / "config"

CONFIG_FILE = "ingest.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML config file and return its top-level mapping."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _select_profile(
    cfg: Dict[str, Any],
    name: Optional[str],
) -> Tuple[str, Dict[str, Any]]:
    """Return (profile_name, profile_mapping); explicit name beats cfg['profile']."""
    profile_name = name or cfg.get("profile")
    if not profile_name:
        raise ValueError(f"{CONFIG_FILE} must define a 'profile' key.")
    profiles = cfg.get("profiles")
    if not isinstance(profiles, dict):
        raise ValueError(f"{CONFIG_FILE} must define a 'profiles' mapping.")
    if profile_name not in profiles:
        raise KeyError(f"Profile '{profile_name}' not found in {CONFIG_FILE} profiles.")
    profile = profiles[profile_name] or {}
    if not isinstance(profile, dict):
        raise ValueError(f"Profile '{profile_name}' must be a mapping.")
    return profile_name, profile


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_ingest_profile(
    name: Optional[str] = None,
    config_dir: Optional[Path] = None,
) -> IngestProfile:
    """Main entry point: returns a fully resolved IngestProfile."""
    cfg = _load_yaml((config_dir or CONFIG_DIR) / CONFIG_FILE)
    profile_name, raw = _select_profile(cfg, name)

    if "export_path" not in raw:
        raise ValueError(f"Profile '{profile_name}' must define 'export_path'.")
    export_path = Path(raw["export_path"])
    if not export_path.is_absolute():
        export_path = PROJECT_ROOT / export_path

    profile = IngestProfile(
        name=profile_name,
        export_path=export_path,
        encoding=str(raw.get("encoding", "auto")),
        log_level=str(raw.get("log_level", "INFO")).upper(),
    )

    validate_profile(profile)
    return profile


def log_level_value(profile: IngestProfile) -> int:
    """Map the profile's level name to a logging constant."""
    return getattr(logging, profile.log_level)


def validate_profile(profile: IngestProfile) -> None:
    """Minimal sanity checks for the profile."""
    if profile.log_level not in _LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {profile.log_level}")

    if profile.encoding != "auto":
        try:
            codecs.lookup(profile.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {profile.encoding}") from exc
