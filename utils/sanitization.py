# utils/sanitization.py
"""
Detect and undo the HTML escaping that older profile-saving code applied
before writing to the database.

Only the entities the old escaper produced are recognised; anything else
that merely looks like an entity (``&nbsp;``, ``&#60;``) is plain text.
"""
from __future__ import annotations
import re
from typing import Optional

# entity -> character, exactly the set the legacy escaper emitted
HTML_ENTITIES = {
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#x2f;": "/",
    "&#39;": "'",
    "&amp;": "&",
}

_ENTITY_RE = re.compile("|".join(re.escape(e) for e in HTML_ENTITIES))
# a bare "&" the escaper would have turned into "&amp;"
_BARE_AMP_RE = re.compile(r"&(?!amp;|lt;|gt;|quot;|#x2f;|#39;)")


def sanitize_for_html(text: Optional[str]) -> Optional[str]:
    """The legacy escaper, kept so fixtures can produce real legacy values."""
    if not text:
        return text
    out = (text.replace("<", "&lt;")
               .replace(">", "&gt;")
               .replace('"', "&quot;")
               .replace("/", "&#x2f;")
               .replace("'", "&#39;"))
    return _BARE_AMP_RE.sub("&amp;", out)


def is_sanitized_html(text: Optional[str]) -> bool:
    if not text:
        return False
    return _ENTITY_RE.search(text) is not None


def desanitize_from_html(text: Optional[str]) -> Optional[str]:
    """Decode the legacy entities in a single pass (so ``&amp;lt;`` -> ``&lt;``)."""
    if not text:
        return text
    return _ENTITY_RE.sub(lambda m: HTML_ENTITIES[m.group(0)], text)


def get_desanitized_if_sanitized(text: Optional[str]) -> Optional[str]:
    if is_sanitized_html(text):
        return desanitize_from_html(text)
    return text
