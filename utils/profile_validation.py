# utils/profile_validation.py
# Same rules the profile edit page enforces; the migration only asks "is it valid?".
from __future__ import annotations
import re
from typing import List

GOOGLE_ID_MAX_LENGTH = 254
SHORT_NAME_MAX_LENGTH = 20
EMAIL_MAX_LENGTH = 254
INSTITUTE_MAX_LENGTH = 64
NATIONALITY_MAX_LENGTH = 55
GENDERS = ("male", "female", "other")

_GOOGLE_ID_RE = re.compile(r"^[A-Za-z0-9_.@-]+$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
# starts with a letter/digit, and no "|" or "%" anywhere
_NAME_RE = re.compile(r"^[^\W_][^|%]*$")


def _name_problems(label: str, value, max_len: int) -> List[str]:
    if not value:
        return []
    problems = []
    if len(value) > max_len:
        problems.append(f'"{value}" is not acceptable to TEAMMATES as a/an {label} '
                        f"because it is too long. The value of a/an {label} should be "
                        f"no longer than {max_len} characters.")
    if not _NAME_RE.match(value):
        problems.append(f'"{value}" is not acceptable to TEAMMATES as a/an {label} '
                        f"because it contains invalid characters. A/An {label} must start "
                        f'with an alphanumeric character, and cannot contain "|" or "%".')
    return problems


def get_invalidity_info(profile: dict) -> List[str]:
    """Return a list of reasons `profile` cannot be saved; empty when it can."""
    info: List[str] = []

    gid = profile.get("google_id") or ""
    if not gid:
        info.append("The field 'Google ID' is empty.")
    elif len(gid) > GOOGLE_ID_MAX_LENGTH or not _GOOGLE_ID_RE.match(gid):
        info.append(f'"{gid}" is not acceptable to TEAMMATES as a Google ID.')

    info += _name_problems("short name", profile.get("short_name"), SHORT_NAME_MAX_LENGTH)

    email = profile.get("email")
    if email:
        if len(email) > EMAIL_MAX_LENGTH:
            info.append(f'"{email}" is not acceptable to TEAMMATES as an email '
                        f"because it is too long (max {EMAIL_MAX_LENGTH} characters).")
        elif not _EMAIL_RE.match(email):
            info.append(f'"{email}" is not acceptable to TEAMMATES as an email '
                        "because it is not in the correct format.")

    info += _name_problems("institute name", profile.get("institute"), INSTITUTE_MAX_LENGTH)
    info += _name_problems("nationality", profile.get("nationality"), NATIONALITY_MAX_LENGTH)

    gender = profile.get("gender")
    if gender and gender not in GENDERS:
        info.append(f'"{gender}" is not an accepted gender. '
                    f"Values have to be one of: {', '.join(GENDERS)}.")

    return info


def is_valid(profile: dict) -> bool:
    return not get_invalidity_info(profile)
