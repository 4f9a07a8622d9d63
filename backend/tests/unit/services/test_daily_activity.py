"""Unit tests for the per-day activity breakdown."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from scimuscle.models.taxonomy import (
    DEFAULT_SCIENTIFIC_TO_FUNCTIONAL,
    FunctionalGroup,
    ScientificMuscle,
)
from scimuscle.models.workout import SetType
from scimuscle.services.volume.daily import activity_range, daily_activity, exercise_groups
from scimuscle.services.volume.dto import ActivityWindow
from scimuscle.services.volume.service import VolumeStatsService
from tests.factories.workout import ParsedSetFactory, ParsedWorkoutFactory

G = FunctionalGroup
M = ScientificMuscle

# Monday 15 Dec 2025 .. Sunday 21 Dec 2025
MONDAY = date(2025, 12, 15)
SUNDAY = date(2025, 12, 21)


class TestActivityRange:
    @pytest.mark.parametrize("today", [MONDAY, date(2025, 12, 18), SUNDAY])
    def test_calendar_week_runs_monday_to_sunday(self, today):
        assert activity_range(today, ActivityWindow.CALENDAR_WEEK) == (MONDAY, SUNDAY)

    def test_last_seven_days_ends_today(self):
        today = date(2025, 12, 18)
        assert activity_range(today, ActivityWindow.LAST_7_DAYS) == (date(2025, 12, 12), today)


class TestExerciseGroups:
    def test_groups_in_taxonomy_order(self, canonical):
        bench = next(ex for ex in canonical if ex.id == "bench-press")
        groups = exercise_groups(bench.contributions, DEFAULT_SCIENTIFIC_TO_FUNCTIONAL)
        assert groups == (G.CHEST, G.UPPER_CHEST, G.FRONT_DELTS, G.TRICEPS)

    def test_zero_weights_and_unknown_tables(self):
        table = {M.LATERAL_DELTOID: 1.0, M.UPPER_TRAPEZIUS: 0.0}
        assert exercise_groups(table, DEFAULT_SCIENTIFIC_TO_FUNCTIONAL) == (G.SIDE_DELTS,)
        assert exercise_groups(None, DEFAULT_SCIENTIFIC_TO_FUNCTIONAL) == ()


class TestDailyActivity:
    def test_one_entry_per_day_with_labels(self):
        days = daily_activity([], MONDAY, SUNDAY)
        assert (days[0].date, days[-1].date) == (MONDAY, SUNDAY)
        assert [d.day_label for d in days] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert all(d.total_sets == 0 and d.workouts == () for d in days)

    def test_sets_are_counted_per_exercise(self):
        workout = ParsedWorkoutFactory(
            title="Push Day",
            sets=(
                ParsedSetFactory(original_name="Bench Press (Barbell)", exercise_id="bench-press"),
                ParsedSetFactory(
                    original_name="Bench Press (Barbell)",
                    exercise_id="bench-press",
                    set_type=SetType.WARMUP,
                ),
                ParsedSetFactory(original_name="Lateral raise Domar"),
            ),
        )
        days = daily_activity([workout], MONDAY, SUNDAY)
        sunday = days[-1]
        assert sunday.total_sets == 3
        (summary,) = sunday.workouts
        assert summary.id == workout.id
        assert summary.title == "Push Day"
        bench, lateral = summary.exercises
        assert (bench.name, bench.sets) == ("Bench Press (Barbell)", 2)
        assert bench.groups == (G.CHEST, G.UPPER_CHEST, G.FRONT_DELTS, G.TRICEPS)
        assert (lateral.name, lateral.sets, lateral.groups) == ("Lateral raise Domar", 1, ())
        assert sum(d.total_sets for d in days[:-1]) == 0

    def test_workouts_outside_the_range_are_ignored(self):
        inside = ParsedWorkoutFactory(date=datetime(2025, 12, 15, 0, 0))
        before = ParsedWorkoutFactory(date=datetime(2025, 12, 14, 23, 59))
        after = ParsedWorkoutFactory(date=datetime(2025, 12, 22, 6, 0))
        days = daily_activity([before, inside, after], MONDAY, SUNDAY)
        assert days[0].total_sets == 2
        assert sum(d.total_sets for d in days) == 2

    def test_same_day_workouts_in_time_order(self):
        evening = ParsedWorkoutFactory(date=datetime(2025, 12, 17, 19, 0), title="Evening")
        morning = ParsedWorkoutFactory(date=datetime(2025, 12, 17, 7, 0), title="Morning")
        wednesday = daily_activity([evening, morning], MONDAY, SUNDAY)[2]
        assert [w.title for w in wednesday.workouts] == ["Morning", "Evening"]
        assert wednesday.total_sets == 4

    def test_resolved_mappings_and_customization_are_used(self):
        workout = ParsedWorkoutFactory(sets=(ParsedSetFactory(original_name="My Raise"),))
        mappings = {"my-raise": {M.LATERAL_DELTOID: 1.0}}
        custom = {**DEFAULT_SCIENTIFIC_TO_FUNCTIONAL, M.LATERAL_DELTOID: G.FRONT_DELTS}
        sunday = daily_activity([workout], MONDAY, SUNDAY, mappings, custom)[-1]
        (exercise,) = sunday.workouts[0].exercises
        assert exercise.groups == (G.FRONT_DELTS,)


class TestServiceDaily:
    def test_calendar_week_around_today(self):
        workout = ParsedWorkoutFactory(date=datetime(2025, 12, 19, 9, 0))
        service = VolumeStatsService(customization={M.TRICEPS_LONG_HEAD: G.BICEPS})
        days = service.daily(
            [workout],
            {"bench-press": {M.TRICEPS_LONG_HEAD: 1.0}},
            today=date(2025, 12, 17),
        )
        assert (days[0].date, days[-1].date) == (MONDAY, SUNDAY)
        friday = days[4]
        assert friday.day_label == "Fri"
        assert friday.workouts[0].exercises[0].groups == (G.BICEPS,)

    def test_last_seven_days(self):
        days = VolumeStatsService().daily([], {}, today=SUNDAY, window=ActivityWindow.LAST_7_DAYS)
        assert (days[0].date, days[-1].date) == (MONDAY, SUNDAY)
