"""Contribution tables, per-profile exercise overrides and unmapped records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from scimuscle.models.taxonomy import ScientificMuscle, parse_muscle

# Fraction of a full working set credited to each muscle (weights in [0, 1]).
ContributionTable = Mapping[ScientificMuscle, float]


def contribution_table(raw: Mapping[Any, Any]) -> dict[ScientificMuscle, float]:
    """
    Build a contribution table from muscle display names and weights.

    :param raw: Mapping of muscle names (or members) to weights.
    :returns: Table keyed by :class:`ScientificMuscle`.
    :raises ValueError: On an unknown muscle or a weight outside ``[0, 1]``.
    """
    table: dict[ScientificMuscle, float] = {}
    for name, weight in raw.items():
        muscle = parse_muscle(name)
        value = float(weight)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Contribution for {muscle.value} out of range: {value}")
        table[muscle] = value
    return table


# ---------------------------------------------------------------------------
# Resolution modes (exactly one per user mapping)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CustomMuscleValues:
    """Use ``values`` verbatim as the exercise's contribution table."""

    values: ContributionTable


@dataclass(frozen=True, slots=True)
class CanonicalRedirect:
    """Borrow the contribution table of a canonical exercise."""

    canonical_exercise_id: str


@dataclass(frozen=True, slots=True)
class Ignored:
    """The exercise contributes no volume at all."""


Resolution = Union[CustomMuscleValues, CanonicalRedirect, Ignored]


@dataclass(frozen=True, slots=True)
class UserExerciseMapping:
    """
    Per-profile override for an imported exercise name.

    :param profile_id: Owning profile.
    :type profile_id: str
    :param original_pattern: Normalized exercise ID the override applies to.
    :type original_pattern: str
    :param resolution: Active resolution mode.
    :type resolution: Resolution
    :param created_at: Creation timestamp, when known.
    :type created_at: datetime | None
    """

    profile_id: str
    original_pattern: str
    resolution: Resolution
    created_at: datetime | None = None

    @classmethod
    def from_fields(
        cls,
        profile_id: str,
        original_pattern: str,
        *,
        custom_muscle_values: Mapping[Any, Any] | None = None,
        canonical_exercise_id: str | None = None,
        is_ignored: bool = False,
        created_at: datetime | None = None,
    ) -> UserExerciseMapping:
        """
        Build a mapping from the stored nullable-field encoding.

        The ignore flag wins over custom values, which win over a canonical
        redirect. A record with none of them set is rejected.

        :raises ValueError: When no resolution mode is set.
        """
        resolution: Resolution
        if is_ignored:
            resolution = Ignored()
        elif custom_muscle_values is not None:
            resolution = CustomMuscleValues(contribution_table(custom_muscle_values))
        elif canonical_exercise_id:
            resolution = CanonicalRedirect(canonical_exercise_id)
        else:
            raise ValueError(f"Mapping for {original_pattern!r} has no resolution")
        return cls(
            profile_id=profile_id,
            original_pattern=original_pattern,
            resolution=resolution,
            created_at=created_at,
        )

    @property
    def is_ignored(self) -> bool:
        return isinstance(self.resolution, Ignored)


@dataclass(frozen=True, slots=True)
class UnmappedExercise:
    """
    An imported exercise name with no resolution yet.

    :param profile_id: Owning profile.
    :type profile_id: str
    :param original_name: Name exactly as it appeared in the import.
    :type original_name: str
    :param normalized_name: Kebab-case key (see ``normalize_id``).
    :type normalized_name: str
    :param first_seen_at: When the name was first imported.
    :type first_seen_at: datetime | None
    :param occurrence_count: Number of imported sets referencing the name.
    :type occurrence_count: int
    """

    profile_id: str
    original_name: str
    normalized_name: str
    first_seen_at: datetime | None = None
    occurrence_count: int = 1
