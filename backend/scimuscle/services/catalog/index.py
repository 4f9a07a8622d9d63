"""In-memory index over the bundled canonical exercise list."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import replace
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from scimuscle.models.mapping import ContributionTable, contribution_table
from scimuscle.services._shared.errors import CatalogError
from scimuscle.services._shared.normalization import normalize_id
from scimuscle.services.catalog.dto import CanonicalExercise

log = logging.getLogger(__name__)

EXERCISE_LIST_PATH = Path(__file__).resolve().parents[2] / "data" / "exercise_list.json"

# Token expansions applied to search queries only.
SEARCH_ABBREVIATIONS: dict[str, str] = {
    "db": "dumbbell",
    "bb": "barbell",
}


@lru_cache(maxsize=1)
def load_canonical_exercises() -> tuple[CanonicalExercise, ...]:
    """
    Load the canonical exercise list once per process.

    Keys starting with ``_`` are metadata and skipped. Contribution tables
    are validated against the muscle taxonomy.

    :returns: Immutable tuple in asset order.
    :raises CatalogError: When the asset is unreadable or malformed.
    """
    try:
        raw = json.loads(EXERCISE_LIST_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Cannot read exercise list: {exc}") from exc
    if not isinstance(raw, dict):
        raise CatalogError("Exercise list must be a JSON object")

    exercises: list[CanonicalExercise] = []
    for name, muscles in raw.items():
        if name.startswith("_"):
            continue
        if not isinstance(muscles, dict):
            raise CatalogError(f"Invalid entry for {name!r}", details={"exercise": name})
        try:
            table = contribution_table(muscles)
        except ValueError as exc:
            raise CatalogError(str(exc), details={"exercise": name}) from exc
        exercises.append(
            CanonicalExercise(
                id=normalize_id(name),
                name=name,
                contributions=MappingProxyType(table),
            )
        )
    log.debug("catalog.loaded", extra={"count": len(exercises)})
    return tuple(exercises)


def get_all_canonical_exercises() -> tuple[CanonicalExercise, ...]:
    """Return every canonical exercise in stable asset order."""
    return load_canonical_exercises()


def get_canonical_contributions(canonical_id: str) -> ContributionTable | None:
    """Return the contribution table of ``canonical_id`` or ``None``."""
    return canonical_mapping_table().get(canonical_id)


@lru_cache(maxsize=1)
def canonical_mapping_table() -> Mapping[str, ContributionTable]:
    """Map every canonical ID to its contribution table (read-only, cached)."""
    return MappingProxyType({ex.id: ex.contributions for ex in load_canonical_exercises()})


def expand_abbreviations(query: str) -> str:
    words = query.lower().split()
    return " ".join(SEARCH_ABBREVIATIONS.get(word, word) for word in words)


def calculate_search_score(exercise_name: str, query: str) -> float:
    """
    Score how well ``exercise_name`` answers ``query``.

    Scoring
    -------
    - exact (case-insensitive) match: ``1.0``
    - name starts with the query: ``0.9``
    - every query word found: ``0.7 + 0.1 * ratio``
    - some query words found: ``0.3 + 0.3 * ratio``
    - nothing found: ``0``

    A query word is found when it and some word of the name contain one
    another.
    """
    name = exercise_name.lower()
    normalized_query = query.lower().strip()
    if not normalized_query:
        return 0.0
    if name == normalized_query:
        return 1.0
    if name.startswith(normalized_query):
        return 0.9

    query_words = normalized_query.split()
    name_words = name.split()
    matched = sum(
        1 for q in query_words if any(q in word or word in q for word in name_words)
    )
    if matched == 0:
        return 0.0
    ratio = matched / len(query_words)
    if matched == len(query_words):
        return 0.7 + 0.1 * ratio
    return 0.3 + 0.3 * ratio


def search_exercises(query: str, limit: int = 10) -> list[CanonicalExercise]:
    """
    Search the canonical list.

    :param query: Free text; ``db``/``bb`` are expanded first.
    :param limit: Maximum number of results.
    :returns: Matches sorted by score (desc) then name.
    """
    expanded = expand_abbreviations(query)
    scored = [
        replace(ex, score=score)
        for ex in load_canonical_exercises()
        if (score := calculate_search_score(ex.name, expanded)) > 0
    ]
    scored.sort(key=lambda ex: (-ex.score, ex.name.lower(), ex.name))
    return scored[: max(limit, 0)]


__all__ = [
    "EXERCISE_LIST_PATH",
    "load_canonical_exercises",
    "get_all_canonical_exercises",
    "get_canonical_contributions",
    "canonical_mapping_table",
    "calculate_search_score",
    "search_exercises",
]
