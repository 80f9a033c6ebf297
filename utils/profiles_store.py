# utils/profiles_store.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import List

from pymongo.errors import PyMongoError

from db import col, PROFILES_COLLECTION

PROFILE_FIELDS = ("short_name", "email", "institute", "nationality", "gender", "more_info")


class ProfileStoreError(Exception):
    """A single profile write failed; the rest of the run can carry on."""


class ProfileNotFoundError(ProfileStoreError):
    pass


class ProfileUpdateError(ProfileStoreError):
    pass


class StudentProfilesStore:
    """fetch-all / update-one access to the student profiles collection."""

    def __init__(self, collection=None):
        self._collection = collection

    @property
    def collection(self):
        if self._collection is None:
            self._collection = col(PROFILES_COLLECTION)
        return self._collection

    def fetch_all(self) -> List[dict]:
        projection = {"google_id": 1, **{f: 1 for f in PROFILE_FIELDS}}
        return list(self.collection.find({}, projection))

    def update_by_identifier(self, profile: dict) -> None:
        gid = profile.get("google_id")
        updates = {f: profile[f] for f in PROFILE_FIELDS if f in profile}
        updates["updated_at"] = datetime.now(timezone.utc)
        try:
            res = self.collection.update_one({"google_id": gid}, {"$set": updates})
        except PyMongoError as e:
            raise ProfileUpdateError(f"Update failed for google id {gid}: {e}") from e
        if res.matched_count == 0:
            raise ProfileNotFoundError(f"Trying to update non-existent student profile: {gid}")
