"""Bookkeeping for imported exercise names that have no mapping yet."""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Iterable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Protocol

from scimuscle.models.mapping import UnmappedExercise, UserExerciseMapping


class NamedSet(Protocol):
    exercise_id: str
    original_name: str


def sort_unmapped(records: Iterable[UnmappedExercise]) -> list[UnmappedExercise]:
    """Most frequent first, then by normalized name."""
    return sorted(records, key=lambda r: (-r.occurrence_count, r.normalized_name))


def track_unmapped_exercises(
    existing: Iterable[UnmappedExercise],
    sets: Iterable[NamedSet],
    known_ids: Collection[str],
    profile_id: str,
    now: datetime | None = None,
) -> list[UnmappedExercise]:
    """
    Fold newly imported sets into the profile's unmapped records.

    Every set whose exercise ID is neither canonical nor user-mapped counts
    once. New names create a record stamped ``now``; known ones have their
    count increased. ``existing`` is never mutated.

    :param existing: Current unmapped records of the profile.
    :param sets: Imported sets (``exercise_id`` and ``original_name``).
    :param known_ids: IDs that already resolve.
    :param profile_id: Owner of new records.
    :param now: Timestamp for new records (defaults to current UTC time).
    :returns: Updated records, sorted.
    """
    now = now or datetime.now(timezone.utc)
    counts: Counter[str] = Counter()
    first_names: dict[str, str] = {}
    for s in sets:
        exercise_id = s.exercise_id
        if not exercise_id or exercise_id in known_ids:
            continue
        counts[exercise_id] += 1
        first_names.setdefault(exercise_id, s.original_name)

    records = {r.normalized_name: r for r in existing}
    for exercise_id, count in counts.items():
        current = records.get(exercise_id)
        if current is None:
            records[exercise_id] = UnmappedExercise(
                profile_id=profile_id,
                original_name=first_names[exercise_id],
                normalized_name=exercise_id,
                first_seen_at=now,
                occurrence_count=count,
            )
        else:
            records[exercise_id] = replace(
                current, occurrence_count=current.occurrence_count + count
            )
    return sort_unmapped(records.values())


def prune_resolved(
    unmapped: Iterable[UnmappedExercise],
    user_mappings: Iterable[UserExerciseMapping],
) -> list[UnmappedExercise]:
    """Drop records whose normalized name now has a user mapping."""
    mapped = {m.original_pattern for m in user_mappings}
    return sort_unmapped(r for r in unmapped if r.normalized_name not in mapped)
