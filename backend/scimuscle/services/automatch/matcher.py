"""
Rule-based matching of free-text exercise names onto the canonical list.

Names are lowercased, stripped of parentheticals, abbreviation-expanded and
cleaned of gym markers. The remaining "core words" (no position, unilateral
or equipment words) are compared in both substring directions.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from scimuscle.models.mapping import UnmappedExercise
from scimuscle.services._shared.normalization import clean_exercise_name
from scimuscle.services.automatch.dto import AutoMatchSuggestion
from scimuscle.services.catalog.dto import CanonicalExercise
from scimuscle.services.catalog.index import get_all_canonical_exercises

MIN_CONFIDENCE = 0.6

GYM_MARKERS = ("domar", "brama", "italy", "gym", "fitness", "squeeze")

ABBREVIATIONS: dict[str, str] = {
    "ext": "extension",
    "db": "dumbbell",
    "bb": "barbell",
    "ez": "ez bar",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
    "cgbp": "close grip bench press",
}

POSITION_PREFIXES = (
    "seated",
    "standing",
    "incline",
    "decline",
    "flat",
    "lying",
    "prone",
    "supine",
    "kneeling",
)

UNILATERAL_MARKERS = (
    "single arm",
    "one arm",
    "single hand",
    "one hand",
    "unilateral",
    "single leg",
    "one leg",
)

EQUIPMENT_VARIATIONS = (
    "machine",
    "cable",
    "dumbbell",
    "barbell",
    "kettlebell",
    "band",
    "bodyweight",
)

STOPWORDS = frozenset(
    {"no", "the", "and", "or", "of", "to", "in", "on", "at", "for", "with", "from"}
)

MIN_CORE_WORD_LENGTH = 3


def _word_patterns(words: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"\b{re.escape(w)}\b", re.IGNORECASE) for w in words)


_GYM_MARKER_PATTERNS = _word_patterns(GYM_MARKERS)
# Multi-word unilateral markers are stripped before single words.
_CORE_STRIP_PATTERNS = (
    _word_patterns(UNILATERAL_MARKERS)
    + _word_patterns(POSITION_PREFIXES)
    + _word_patterns(EQUIPMENT_VARIATIONS)
)


def normalize_for_matching(name: str | None) -> str:
    """
    Normalize an exercise name for comparison.

    >>> normalize_for_matching("Lateral Raise Domar (Machine)")
    'lateral raise'
    """
    normalized = clean_exercise_name((name or "").lower().strip())
    normalized = " ".join(ABBREVIATIONS.get(word, word) for word in normalized.split())
    for pattern in _GYM_MARKER_PATTERNS:
        normalized = pattern.sub("", normalized)
    return " ".join(normalized.split())


def extract_core_words(normalized_name: str) -> list[str]:
    """Return the words that identify the movement itself."""
    name = normalized_name
    for pattern in _CORE_STRIP_PATTERNS:
        name = pattern.sub("", name)
    return [
        word
        for word in name.split()
        if len(word) >= MIN_CORE_WORD_LENGTH and word.lower() not in STOPWORDS
    ]


def _words_match(a: str, b: str) -> bool:
    return a in b or b in a


def matched_core_words(unmapped_words: Sequence[str], canonical_words: Sequence[str]) -> list[str]:
    """Unmapped core words that match at least one canonical core word."""
    return [w for w in unmapped_words if any(_words_match(w, c) for c in canonical_words)]


def calculate_match_confidence(unmapped_normalized: str, canonical_normalized: str) -> float:
    """
    Confidence that two normalized names denote the same exercise.

    Scoring
    -------
    - identical strings: ``1.0``
    - every core word on both sides matches: ``0.9``
    - match ratio >= 0.8: ``0.7 + 0.2 * ratio``
    - match ratio >= 0.5: ``0.5 + 0.2 * ratio``
    - otherwise: ``0.3 * ratio`` (``0`` when nothing matches)

    The ratio is matched words over the shorter core-word list.
    """
    if unmapped_normalized == canonical_normalized:
        return 1.0

    unmapped_words = extract_core_words(unmapped_normalized)
    canonical_words = extract_core_words(canonical_normalized)
    if not unmapped_words or not canonical_words:
        return 0.0

    matched = len(matched_core_words(unmapped_words, canonical_words))
    if matched == 0:
        return 0.0

    ratio = matched / min(len(unmapped_words), len(canonical_words))
    if matched == len(unmapped_words) and matched == len(canonical_words):
        return 0.9
    if ratio >= 0.8:
        return 0.7 + 0.2 * ratio
    if ratio >= 0.5:
        return 0.5 + 0.2 * ratio
    return 0.3 * ratio


def _match_reason(unmapped_normalized: str, canonical_normalized: str) -> str:
    words = matched_core_words(
        extract_core_words(unmapped_normalized), extract_core_words(canonical_normalized)
    )
    if words:
        return f"Core words match: {', '.join(words)}"
    return "Names match after normalization"


def generate_auto_match_suggestions(
    unmapped: Iterable[UnmappedExercise],
    canonical: Sequence[CanonicalExercise] | None = None,
) -> list[AutoMatchSuggestion]:
    """
    Propose at most one canonical exercise per unmapped record.

    The first candidate reaching the best score wins; suggestions below
    :data:`MIN_CONFIDENCE` and records whose name normalizes to ``""`` are
    omitted.

    :param unmapped: Unmapped exercise records.
    :param canonical: Candidate list; defaults to the bundled catalog.
    :returns: Suggestions in input order.
    """
    candidates = [
        (ex, normalize_for_matching(ex.name))
        for ex in (get_all_canonical_exercises() if canonical is None else canonical)
    ]
    suggestions: list[AutoMatchSuggestion] = []

    for record in unmapped:
        unmapped_normalized = normalize_for_matching(record.original_name)
        if not unmapped_normalized:
            continue

        best: CanonicalExercise | None = None
        best_normalized = ""
        best_confidence = 0.0
        for exercise, exercise_normalized in candidates:
            confidence = calculate_match_confidence(unmapped_normalized, exercise_normalized)
            if confidence > best_confidence:
                best, best_normalized, best_confidence = exercise, exercise_normalized, confidence

        if best is None or best_confidence < MIN_CONFIDENCE:
            continue
        suggestions.append(
            AutoMatchSuggestion(
                unmapped_exercise_name=record.original_name,
                unmapped_normalized_name=record.normalized_name,
                suggested_canonical_id=best.id,
                suggested_canonical_name=best.name,
                confidence=best_confidence,
                match_reason=_match_reason(unmapped_normalized, best_normalized),
            )
        )
    return suggestions


__all__ = [
    "MIN_CONFIDENCE",
    "normalize_for_matching",
    "extract_core_words",
    "calculate_match_confidence",
    "generate_auto_match_suggestions",
]
