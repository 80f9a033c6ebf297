# scripts/desanitize_student_profiles.py
"""
Desanitize student profile fields that were HTML-escaped before saving.

Usage (from project root or scripts/ — this file bootstraps sys.path):
  Apply:
    python scripts/desanitize_student_profiles.py
  Dry-run (detect and count only, nothing written):
    python scripts/desanitize_student_profiles.py --preview
  Print progress every 500 profiles instead of 100:
    python scripts/desanitize_student_profiles.py --batch-size 500
"""
from __future__ import annotations
import os, sys, argparse

# --- bootstrap project root so "from db import ..." works even if run from /scripts
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(THIS_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from db import get_db, DB_NAME, MIGRATION_BATCH_SIZE  # noqa: E402
from utils.profiles_store import StudentProfilesStore  # noqa: E402
from utils.profile_migration import ProfileSanitizationMigration  # noqa: E402


def main(argv=None):
    ap = argparse.ArgumentParser(description="Desanitize HTML-escaped fields in student profiles.")
    ap.add_argument("--preview", action="store_true", help="Detect and count only. Nothing is written.")
    ap.add_argument("--batch-size", type=int, default=MIGRATION_BATCH_SIZE,
                    help=f"Print progress every N profiles (default {MIGRATION_BATCH_SIZE}).")
    args = ap.parse_args(argv)

    get_db()  # pings the server; raises if unreachable
    print(f"Connected to database: {DB_NAME}")

    migration = ProfileSanitizationMigration(StudentProfilesStore(), batch_size=args.batch_size)
    report = migration.run(preview=args.preview)
    return report


if __name__ == "__main__":
    main()
