# src/cli/ingest_docs.py

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from app.logging_config import configure_logging
from app.runtime import export_to_dict, render_summary
from env.loader import load_ingest_profile, log_level_value, validate_profile
from semantics.errors import IngestError
from semantics.loader import ExportDB

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode a FactoryGame Docs export into typed records."
    )
    parser.add_argument("--profile", default=None, help="Profile name (from ingest.yaml)")
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding ingest.yaml (default: <project>/config)",
    )
    parser.add_argument("--export", type=Path, default=None, help="Override export_path")
    parser.add_argument("--encoding", default=None, help="Override encoding ('auto', 'utf-16', ...)")
    parser.add_argument("--log-level", default=None, help="Override log_level")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print all decoded records as JSON instead of a summary table",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        profile = load_ingest_profile(args.profile, config_dir=args.config_dir)
        if args.export is not None:
            profile.export_path = args.export
        if args.encoding is not None:
            profile.encoding = args.encoding
        if args.log_level is not None:
            profile.log_level = args.log_level.upper()
        validate_profile(profile)
    except (FileNotFoundError, KeyError, ValueError) as exc:
        # logging is not configured until the profile resolves
        print(f"Ingest config invalid: {exc}", file=sys.stderr)
        return 1

    # stdout is reserved for the report
    configure_logging(log_level_value(profile), stream=sys.stderr)

    try:
        db = ExportDB.from_path(profile.export_path, encoding=profile.encoding)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except IngestError as exc:
        logger.error("Export %s rejected: %s", profile.export_path, exc)
        return 1

    if args.json:
        print(json.dumps(export_to_dict(db), indent=2, sort_keys=True))
    else:
        render_summary(db, Console(), title=str(profile.export_path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
