import copy

import pytest

from utils.profiles_store import ProfileNotFoundError, PROFILE_FIELDS


class FakeProfilesStore:
    """In-memory stand-in for StudentProfilesStore."""

    def __init__(self, profiles, missing_on_update=()):
        self.profiles = {p["google_id"]: copy.deepcopy(p) for p in profiles}
        self._order = [p["google_id"] for p in profiles]
        self.missing_on_update = set(missing_on_update)
        self.writes = []

    def fetch_all(self):
        return [copy.deepcopy(self.profiles[g]) for g in self._order]

    def update_by_identifier(self, profile):
        gid = profile["google_id"]
        if gid not in self.profiles or gid in self.missing_on_update:
            raise ProfileNotFoundError(f"Trying to update non-existent student profile: {gid}")
        self.writes.append(gid)
        for f in PROFILE_FIELDS:
            if f in profile:
                self.profiles[gid][f] = profile[f]

    def snapshot(self):
        return copy.deepcopy(self.profiles)


def make_profile(google_id, **fields):
    doc = {
        "google_id": google_id,
        "short_name": "Alice",
        "email": "alice@example.com",
        "institute": "National University",
        "nationality": "Singaporean",
        "gender": "female",
        "more_info": "Likes chess.",
    }
    doc.update(fields)
    return doc


@pytest.fixture
def lines():
    return []
