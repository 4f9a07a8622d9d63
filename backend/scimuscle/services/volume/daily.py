"""Per-day activity breakdown for the weekly chart."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, timedelta

from scimuscle.models.mapping import ContributionTable
from scimuscle.models.taxonomy import (
    DEFAULT_SCIENTIFIC_TO_FUNCTIONAL,
    FUNCTIONAL_GROUPS,
    FunctionalGroup,
    ScientificMuscle,
)
from scimuscle.services.catalog.index import canonical_mapping_table
from scimuscle.services.imports.dto import ParsedWorkout
from scimuscle.services.volume.dto import (
    ActivityWindow,
    DailyActivity,
    DailyExercise,
    DailyWorkout,
)

DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def activity_range(today: date, window: ActivityWindow) -> tuple[date, date]:
    """
    First and last day (inclusive) of the chart window containing ``today``.

    ``CALENDAR_WEEK`` runs Monday to Sunday; ``LAST_7_DAYS`` ends on ``today``.
    """
    if window is ActivityWindow.LAST_7_DAYS:
        return today - timedelta(days=6), today
    monday = today - timedelta(days=today.weekday())
    return monday, monday + timedelta(days=6)


def exercise_groups(
    contributions: ContributionTable | None,
    muscle_mapping: Mapping[ScientificMuscle, FunctionalGroup],
) -> tuple[FunctionalGroup, ...]:
    """Functional groups with a positive contribution, in taxonomy order."""
    if not contributions:
        return ()
    worked = {
        muscle_mapping[muscle]
        for muscle, weight in contributions.items()
        if weight > 0 and muscle in muscle_mapping
    }
    return tuple(group for group in FUNCTIONAL_GROUPS if group in worked)


def _summarize_workout(
    workout: ParsedWorkout,
    exercise_mappings: Mapping[str, ContributionTable],
    muscle_mapping: Mapping[ScientificMuscle, FunctionalGroup],
) -> DailyWorkout:
    names: dict[str, str] = {}
    counts: dict[str, int] = defaultdict(int)
    for s in workout.sets:
        names.setdefault(s.exercise_id, s.original_name)
        counts[s.exercise_id] += 1
    exercises = tuple(
        DailyExercise(
            name=name,
            sets=counts[exercise_id],
            groups=exercise_groups(exercise_mappings.get(exercise_id), muscle_mapping),
        )
        for exercise_id, name in names.items()
    )
    return DailyWorkout(id=workout.id, title=workout.title, exercises=exercises)


def daily_activity(
    workouts: Iterable[ParsedWorkout],
    start: date,
    end: date,
    exercise_mappings: Mapping[str, ContributionTable] | None = None,
    muscle_mapping: Mapping[ScientificMuscle, FunctionalGroup] | None = None,
) -> list[DailyActivity]:
    """
    One entry per day from ``start`` to ``end`` inclusive.

    Workouts are bucketed by the calendar date of their ``date``; those
    outside the range are ignored. Days without workouts are still
    listed with ``total_sets == 0``. Every logged set is counted, warmups
    included.

    :param exercise_mappings: Resolved contribution tables; exercises
        missing here list no groups.
    :param muscle_mapping: Muscle to group table, defaults to the
        standard one.
    """
    if exercise_mappings is None:
        exercise_mappings = canonical_mapping_table()
    mapping = DEFAULT_SCIENTIFIC_TO_FUNCTIONAL if muscle_mapping is None else muscle_mapping

    by_day: dict[date, list[ParsedWorkout]] = defaultdict(list)
    for workout in workouts:
        day = workout.date.date()
        if start <= day <= end:
            by_day[day].append(workout)

    days: list[DailyActivity] = []
    current = start
    while current <= end:
        summaries = tuple(
            _summarize_workout(w, exercise_mappings, mapping)
            for w in sorted(by_day.get(current, ()), key=lambda w: w.date)
        )
        days.append(
            DailyActivity(
                date=current,
                day_label=DAY_LABELS[current.weekday()],
                total_sets=sum(ex.sets for w in summaries for ex in w.exercises),
                workouts=summaries,
            )
        )
        current += timedelta(days=1)
    return days


__all__ = ["DAY_LABELS", "activity_range", "daily_activity", "exercise_groups"]
