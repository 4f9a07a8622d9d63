"""Factories for logged and imported sets."""

from __future__ import annotations

from datetime import datetime

import factory

from scimuscle.models.workout import SetType, WorkoutSet
from scimuscle.services._shared.normalization import normalize_id
from scimuscle.services.imports.csv_parser import workout_id_for
from scimuscle.services.imports.dto import ParsedSet, ParsedWorkout

from . import DataclassFactory, faker


class WorkoutSetFactory(DataclassFactory):
    """Build :class:`WorkoutSet` instances (normal bench press sets by default)."""

    class Meta:
        model = WorkoutSet

    exercise_id = "bench-press"
    set_type = SetType.NORMAL
    weight = factory.LazyFunction(lambda: float(faker.random_int(min=20, max=140)))
    reps = factory.LazyFunction(lambda: faker.random_int(min=3, max=15))
    rpe = None


class ParsedSetFactory(DataclassFactory):
    """Build :class:`ParsedSet` instances from a display name."""

    class Meta:
        model = ParsedSet

    original_name = "Lateral Raise Domar"
    exercise_id = factory.LazyAttribute(lambda o: normalize_id(o.original_name))
    set_type = SetType.NORMAL
    weight = 10.0
    reps = 12


class ParsedWorkoutFactory(DataclassFactory):
    """Build :class:`ParsedWorkout` instances with two bench press sets."""

    class Meta:
        model = ParsedWorkout

    date = datetime(2025, 12, 21, 14, 29)
    id = factory.LazyAttribute(lambda o: workout_id_for(o.date))
    title = factory.LazyFunction(lambda: faker.word().title())
    sets = factory.LazyFunction(
        lambda: (
            ParsedSetFactory(original_name="Bench Press (Barbell)", exercise_id="bench-press"),
            ParsedSetFactory(original_name="Bench Press (Barbell)", exercise_id="bench-press"),
        )
    )
