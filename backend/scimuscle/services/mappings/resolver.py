"""
Effective contribution tables with per-profile overrides applied.

The volume calculator knows nothing about user mappings; every distinct
exercise ID is resolved here once, beforehand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from scimuscle.models.mapping import (
    CanonicalRedirect,
    ContributionTable,
    CustomMuscleValues,
    Ignored,
    UserExerciseMapping,
)
from scimuscle.models.taxonomy import (
    DEFAULT_SCIENTIFIC_TO_FUNCTIONAL,
    FunctionalGroup,
    ScientificMuscle,
)
from scimuscle.services._shared.base import BaseService
from scimuscle.services.catalog.index import canonical_mapping_table

log = logging.getLogger(__name__)


def resolve_exercise_mapping(
    exercise_id: str,
    user_mapping: UserExerciseMapping | None,
    canonical_table: Mapping[str, ContributionTable],
) -> ContributionTable | None:
    """
    Resolve the contribution table for one exercise.

    Precedence
    ----------
    1. ignored override: no contribution
    2. custom values: used verbatim
    3. canonical redirect: the target's table (``None`` if unknown)
    4. no override: the canonical table for ``exercise_id`` itself

    :returns: Contribution table, or ``None`` when the exercise contributes
        nothing.
    """
    if user_mapping is None:
        return canonical_table.get(exercise_id)

    resolution = user_mapping.resolution
    if isinstance(resolution, Ignored):
        return None
    if isinstance(resolution, CustomMuscleValues):
        return resolution.values
    if isinstance(resolution, CanonicalRedirect):
        return canonical_table.get(resolution.canonical_exercise_id)
    raise TypeError(f"Unsupported resolution: {resolution!r}")


def index_user_mappings(
    user_mappings: Iterable[UserExerciseMapping],
) -> dict[str, UserExerciseMapping]:
    """Key overrides by pattern; a later record replaces an earlier one."""
    return {m.original_pattern: m for m in user_mappings}


def resolve_exercise_mappings(
    exercise_ids: Iterable[str],
    user_mappings: Iterable[UserExerciseMapping] = (),
    canonical_table: Mapping[str, ContributionTable] | None = None,
) -> dict[str, ContributionTable]:
    """
    Resolve every distinct exercise ID once.

    :param exercise_ids: IDs referenced by the sets being analysed.
    :param user_mappings: The profile's overrides.
    :param canonical_table: Defaults to the bundled catalog.
    :returns: Mapping consumed by ``calculate_muscle_volume``; ignored and
        unresolvable IDs are absent.
    """
    table = canonical_mapping_table() if canonical_table is None else canonical_table
    overrides = index_user_mappings(user_mappings)
    resolved: dict[str, ContributionTable] = {}
    for exercise_id in dict.fromkeys(exercise_ids):
        if not exercise_id:
            continue
        contributions = resolve_exercise_mapping(exercise_id, overrides.get(exercise_id), table)
        if contributions is not None:
            resolved[exercise_id] = contributions
    return resolved


def effective_functional_mapping(
    customization: Mapping[ScientificMuscle, FunctionalGroup] | None = None,
) -> dict[ScientificMuscle, FunctionalGroup]:
    """Profile muscle-to-group overrides merged over the default table."""
    merged = dict(DEFAULT_SCIENTIFIC_TO_FUNCTIONAL)
    if customization:
        merged.update(customization)
    return merged


class MappingResolverService(BaseService):
    """Resolve contribution tables for a profile."""

    def __init__(self, *, user_mappings: Iterable[UserExerciseMapping] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self.user_mappings = list(user_mappings)

    def resolve(self, exercise_ids: Iterable[str]) -> dict[str, ContributionTable]:
        ids = list(exercise_ids)
        resolved = resolve_exercise_mappings(ids, self.user_mappings)
        log.debug(
            "mappings.resolved",
            extra={"count": len(resolved), "profile_id": self.ctx.profile_id},
        )
        return resolved

    def known_ids(self) -> set[str]:
        """IDs that already resolve (canonical or user-mapped)."""
        return set(canonical_mapping_table()) | {m.original_pattern for m in self.user_mappings}
