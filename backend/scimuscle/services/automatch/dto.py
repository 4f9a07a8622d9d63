# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AutoMatchSuggestion:
    """
    Best canonical candidate proposed for one unmapped exercise.

    :param unmapped_exercise_name: Name as imported.
    :type unmapped_exercise_name: str
    :param unmapped_normalized_name: Normalized key of the unmapped record.
    :type unmapped_normalized_name: str
    :param suggested_canonical_id: Canonical exercise ID.
    :type suggested_canonical_id: str
    :param suggested_canonical_name: Canonical display name.
    :type suggested_canonical_name: str
    :param confidence: Score in ``[0, 1]``; always >= ``MIN_CONFIDENCE``.
    :type confidence: float
    :param match_reason: Human-readable justification.
    :type match_reason: str
    """

    unmapped_exercise_name: str
    unmapped_normalized_name: str
    suggested_canonical_id: str
    suggested_canonical_name: str
    confidence: float
    match_reason: str
