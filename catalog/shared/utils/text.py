"""Text helpers for identifiers derived from user input."""

import re

_NON_SLUG_CHARS = re.compile(r"[\W_]+")


def slugify(value: str) -> str:
    """Lowercase and collapse every run of non-word characters to '-'.

    'Power Tools & Drills' -> 'power-tools-drills'. Unicode letters are
    kept as-is; callers must reject titles that slugify to ''.
    """
    return _NON_SLUG_CHARS.sub("-", value.strip().lower()).strip("-")
