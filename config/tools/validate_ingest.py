# tools/validate_ingest.py

import sys           # for exit codes
from pprint import pprint  # for structured printing

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_ingest.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from env.loader import load_ingest_profile  # import our loader


def main() -> None:
    """Load and print the resolved ingest profile, failing fast on errors."""
    profile_name = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        profile = load_ingest_profile(profile_name)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print("Ingest config validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        sys.exit(1)                          # non-zero exit: CI will mark as failed

    print("Ingest config validation OK.")
    print("\nActive profile:", profile.name)
    pprint(profile)
    if not profile.export_path.exists():
        # config is fine; the export itself is produced by the game install
        print(f"\nNote: export file not present yet: {profile.export_path}")


if __name__ == "__main__":
    main()  # run main() only when script is executed directly
