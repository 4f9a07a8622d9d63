# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from scimuscle.models.mapping import UnmappedExercise
from scimuscle.models.workout import SetType, WorkoutSet
from scimuscle.services.automatch.dto import AutoMatchSuggestion

CsvFormat = Literal["hevy", "strong", "unknown"]


@dataclass(frozen=True, slots=True)
class ParsedSet:
    """
    One CSV row turned into a set.

    :param exercise_id: ``normalize_id`` of the exercise title.
    :type exercise_id: str
    :param original_name: Exercise title as exported.
    :type original_name: str
    """

    exercise_id: str
    original_name: str
    set_type: SetType = SetType.NORMAL
    weight: float = 0.0
    reps: int = 0
    rpe: float | None = None

    def to_workout_set(self) -> WorkoutSet:
        return WorkoutSet(
            exercise_id=self.exercise_id,
            set_type=self.set_type,
            weight=self.weight,
            reps=self.reps,
            rpe=self.rpe,
        )


@dataclass(frozen=True, slots=True)
class ParsedWorkout:
    id: str
    date: datetime
    title: str
    sets: tuple[ParsedSet, ...] = ()


@dataclass(frozen=True, slots=True)
class ParseCsvResult:
    workouts: list[ParsedWorkout]
    format: CsvFormat


@dataclass(frozen=True, slots=True)
class ImportSummary:
    """
    Outcome of importing one CSV export for a profile.

    :param format: Detected export format.
    :type format: CsvFormat
    :param workouts: Parsed workouts, newest first.
    :type workouts: list[ParsedWorkout]
    :param unmapped: The profile's updated unmapped records.
    :type unmapped: list[UnmappedExercise]
    :param suggestions: Auto-match suggestions for ``unmapped``.
    :type suggestions: list[AutoMatchSuggestion]
    """

    format: CsvFormat
    workouts: list[ParsedWorkout]
    unmapped: list[UnmappedExercise] = field(default_factory=list)
    suggestions: list[AutoMatchSuggestion] = field(default_factory=list)

    @property
    def set_count(self) -> int:
        return sum(len(w.sets) for w in self.workouts)
