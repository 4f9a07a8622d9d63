from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date

from scimuscle.models.mapping import ContributionTable
from scimuscle.models.taxonomy import (
    FUNCTIONAL_GROUPS,
    SCIENTIFIC_MUSCLES,
    FunctionalGroup,
    ScientificMuscle,
)
from scimuscle.models.workout import WorkoutSet
from scimuscle.services._shared.base import BaseService
from scimuscle.services.imports.dto import ParsedWorkout
from scimuscle.services.mappings.resolver import effective_functional_mapping
from scimuscle.services.volume.calculator import (
    aggregate_to_functional_groups,
    calculate_muscle_volume,
)
from scimuscle.services.volume.daily import activity_range, daily_activity
from scimuscle.services.volume.dto import (
    DEFAULT_MUSCLE_GOAL,
    DEFAULT_TOTAL_GOAL,
    ActivityWindow,
    DailyActivity,
    VolumeStatItem,
    VolumeSummary,
)


def _stat(name: str, volume: float, goal: float) -> VolumeStatItem:
    percentage = (volume / goal) * 100 if goal > 0 else 0.0
    return VolumeStatItem(name=name, volume=volume, goal=goal, percentage=percentage)


class VolumeStatsService(BaseService):
    """
    Build per-muscle and per-group volume statistics.

    :param goals: Per-muscle goal overrides; others use ``DEFAULT_MUSCLE_GOAL``.
    :param customization: Per-muscle functional group overrides.
    :param total_goal: Overall set target reported with the summary.
    """

    def __init__(
        self,
        *,
        goals: Mapping[ScientificMuscle, float] | None = None,
        customization: Mapping[ScientificMuscle, FunctionalGroup] | None = None,
        total_goal: float | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.goals = dict(goals or {})
        self.muscle_mapping = effective_functional_mapping(customization)
        self.total_goal = DEFAULT_TOTAL_GOAL if total_goal is None else total_goal

    def goal_for(self, muscle: ScientificMuscle) -> float:
        return self.goals.get(muscle, DEFAULT_MUSCLE_GOAL)

    # ---- Statistics ----

    def muscle_stats(
        self,
        sets: Sequence[WorkoutSet],
        exercise_mappings: Mapping[str, ContributionTable],
    ) -> list[VolumeStatItem]:
        volume = calculate_muscle_volume(sets, exercise_mappings)
        return [
            _stat(muscle.value, volume.get(muscle, 0.0), self.goal_for(muscle))
            for muscle in SCIENTIFIC_MUSCLES
        ]

    def group_stats(
        self,
        sets: Sequence[WorkoutSet],
        exercise_mappings: Mapping[str, ContributionTable],
    ) -> list[VolumeStatItem]:
        """One item per functional group; a group's goal sums its muscles' goals."""
        volume = aggregate_to_functional_groups(
            calculate_muscle_volume(sets, exercise_mappings), self.muscle_mapping
        )
        group_goals: dict[FunctionalGroup, float] = {}
        for muscle in SCIENTIFIC_MUSCLES:
            group = self.muscle_mapping[muscle]
            group_goals[group] = group_goals.get(group, 0) + self.goal_for(muscle)
        return [
            _stat(group.value, volume.get(group, 0.0), group_goals.get(group, DEFAULT_MUSCLE_GOAL))
            for group in FUNCTIONAL_GROUPS
        ]

    def group_breakdown(
        self,
        group: FunctionalGroup,
        sets: Sequence[WorkoutSet],
        exercise_mappings: Mapping[str, ContributionTable],
    ) -> list[VolumeStatItem]:
        """Per-muscle items for the muscles currently mapped to ``group``."""
        return [
            item
            for item in self.muscle_stats(sets, exercise_mappings)
            if self.muscle_mapping[ScientificMuscle(item.name)] is group
        ]

    def summary(
        self,
        sets: Sequence[WorkoutSet],
        exercise_mappings: Mapping[str, ContributionTable],
    ) -> VolumeSummary:
        result = VolumeSummary(
            muscles=self.muscle_stats(sets, exercise_mappings),
            groups=self.group_stats(sets, exercise_mappings),
            total_sets=len(sets),
            total_goal=self.total_goal,
        )
        self.log.debug(
            "volume.summary",
            extra={"count": result.total_sets, "profile_id": self.ctx.profile_id},
        )
        return result

    def daily(
        self,
        workouts: Sequence[ParsedWorkout],
        exercise_mappings: Mapping[str, ContributionTable],
        *,
        today: date,
        window: ActivityWindow = ActivityWindow.CALENDAR_WEEK,
    ) -> list[DailyActivity]:
        """Day-by-day breakdown of the window containing ``today``."""
        start, end = activity_range(today, window)
        days = daily_activity(workouts, start, end, exercise_mappings, self.muscle_mapping)
        self.log.debug(
            "volume.daily",
            extra={"count": sum(d.total_sets for d in days), "profile_id": self.ctx.profile_id},
        )
        return days
