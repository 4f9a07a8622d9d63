"""Per-muscle volume from logged sets and roll-up into functional groups."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping

from scimuscle.models.mapping import ContributionTable
from scimuscle.models.taxonomy import (
    FUNCTIONAL_GROUPS,
    SCIENTIFIC_MUSCLES,
    FunctionalGroup,
    ScientificMuscle,
    parse_muscle,
)
from scimuscle.models.workout import WorkoutSet


def calculate_muscle_volume(
    sets: Iterable[WorkoutSet],
    exercise_mappings: Mapping[str, ContributionTable],
) -> dict[ScientificMuscle, float]:
    """
    Sum fractional set volume per muscle.

    Warmup sets are skipped and exercises without a mapping contribute
    nothing. Every other set credits each mapped muscle with its full
    contribution weight, regardless of load or reps.

    Parameters
    ----------
    sets : Iterable[WorkoutSet]
        Logged sets, in any order.
    exercise_mappings : Mapping[str, ContributionTable]
        Effective contribution table per exercise ID.

    Returns
    -------
    dict[ScientificMuscle, float]
        Volume for every muscle that received a contribution.

    Notes
    -----
    Totals are computed with :func:`math.fsum`, so any permutation of
    ``sets`` yields identical floats.
    """
    parts: dict[ScientificMuscle, list[float]] = defaultdict(list)
    for workout_set in sets:
        if workout_set.is_warmup:
            continue
        mapping = exercise_mappings.get(workout_set.exercise_id)
        if not mapping:
            continue
        for muscle, contribution in mapping.items():
            parts[parse_muscle(muscle)].append(float(contribution))
    return {m: math.fsum(parts[m]) for m in SCIENTIFIC_MUSCLES if m in parts}


def aggregate_to_functional_groups(
    scientific_volume: Mapping[ScientificMuscle, float],
    muscle_mapping: Mapping[ScientificMuscle, FunctionalGroup],
) -> dict[FunctionalGroup, float]:
    """Sum muscle volumes per functional group; unmapped muscles are dropped."""
    parts: dict[FunctionalGroup, list[float]] = defaultdict(list)
    for muscle, volume in scientific_volume.items():
        group = muscle_mapping.get(muscle)
        if group is not None:
            parts[group].append(float(volume))
    return {g: math.fsum(parts[g]) for g in FUNCTIONAL_GROUPS if g in parts}
