# utils/profile_migration.py
"""
Desanitize student profiles.

short_name, email, institute, nationality, gender and more_info are no longer
HTML-escaped before saving, so stored values are expected in their plain form.
Older profiles may still hold the escaped form; this walks every profile and
rewrites those fields back to plain text. Running it again is harmless: a
profile that is already plain is skipped.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List

from utils.loop_helper import LoopHelper
from utils.profile_validation import get_invalidity_info
from utils.profiles_store import PROFILE_FIELDS, ProfileStoreError
from utils.sanitization import get_desanitized_if_sanitized, is_sanitized_html

TRACKED_FIELDS = PROFILE_FIELDS
DEFAULT_BATCH_SIZE = 100
PROGRESS_MESSAGE = "student profiles processed."

# per-record outcomes
SKIPPED = "skipped"
UPDATED = "updated"
WOULD_UPDATE = "would_update"
INVALID = "invalid"
STORE_FAILED = "store_failed"
FAILED_OUTCOMES = (INVALID, STORE_FAILED)


@dataclass
class ProfileResult:
    google_id: str
    outcome: str
    reasons: List[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.outcome in FAILED_OUTCOMES


@dataclass
class MigrationReport:
    preview: bool = False
    scanned: int = 0
    affected: int = 0
    updated: int = 0
    results: List[ProfileResult] = field(default_factory=list)  # affected profiles only

    @property
    def failures(self) -> List[ProfileResult]:
        return [r for r in self.results if r.failed]


def is_profile_sanitized(profile: dict) -> bool:
    return any(is_sanitized_html(profile.get(f)) for f in TRACKED_FIELDS)


def desanitize_profile(profile: dict) -> dict:
    """Return a copy of `profile` with every tracked field desanitized where needed."""
    out = dict(profile)
    for f in TRACKED_FIELDS:
        if f in out:
            out[f] = get_desanitized_if_sanitized(out[f])
    return out


class ProfileSanitizationMigration:
    def __init__(self, store, batch_size: int = DEFAULT_BATCH_SIZE,
                 out: Callable[[str], None] = print):
        self.store = store
        self.batch_size = batch_size
        self.out = out

    def run(self, preview: bool = False) -> MigrationReport:
        report = MigrationReport(preview=preview)
        loop = LoopHelper(self.batch_size, PROGRESS_MESSAGE, out=self.out)

        self.out("Running data migration for sanitization on student profiles...")
        self.out(f"Preview: {preview}")

        # connection / fetch errors abort the run
        profiles = self.store.fetch_all()

        for profile in profiles:
            loop.record_loop()
            if not is_profile_sanitized(profile):
                continue
            report.affected += 1
            result = self._migrate_one(profile, preview)
            report.results.append(result)
            if result.failed:
                self.out(f"Problem desanitizing profile with google id {result.google_id}")
                for reason in result.reasons:
                    self.out(reason)
            else:
                report.updated += 1

        report.scanned = loop.count
        self._print_summary(report)
        return report

    def _migrate_one(self, profile: dict, preview: bool) -> ProfileResult:
        gid = profile.get("google_id")
        candidate = desanitize_profile(profile)

        reasons = get_invalidity_info(candidate)
        if reasons:
            return ProfileResult(gid, INVALID, reasons)

        if preview:
            return ProfileResult(gid, WOULD_UPDATE)

        try:
            self.store.update_by_identifier(candidate)
        except ProfileStoreError as e:
            return ProfileResult(gid, STORE_FAILED, [str(e)])
        return ProfileResult(gid, UPDATED)

    def _print_summary(self, report: MigrationReport):
        self.out(f"Total number of profiles: {report.scanned}")
        self.out(f"Number of affected profiles: {report.affected}")
        self.out(f"Number of updated profiles: {report.updated}")
        if report.failures:
            self.out(f"Number of failed profiles: {len(report.failures)}")
        if report.preview:
            self.out("(preview) No changes written. Run without --preview to apply.")
