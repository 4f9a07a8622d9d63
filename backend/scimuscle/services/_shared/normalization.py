"""Exercise-name normalization shared by every import source and the matcher."""

from __future__ import annotations

import re

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)")


def clean_exercise_name(name: str | None) -> str:
    """
    Strip every parenthetical segment from an exercise name.

    >>> clean_exercise_name("Bicep Curl (Dumbbell) (Single Arm)")
    'Bicep Curl'

    :param name: Raw exercise name; ``None`` and ``""`` are accepted.
    :returns: Cleaned, trimmed name (``""`` for empty input).
    """
    if not name:
        return ""
    return _PARENTHETICAL.sub("", name).strip()


def normalize_id(name: str | None) -> str:
    """
    Convert an exercise name to its kebab-case identifier.

    >>> normalize_id("Bench Press (Dumbbell)")
    'bench-press'
    """
    cleaned = clean_exercise_name(name)
    if not cleaned:
        return ""
    return "-".join(cleaned.lower().split())


__all__ = ["clean_exercise_name", "normalize_id"]
