"""Logged workout sets as consumed by the volume calculator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SetType(str, Enum):
    NORMAL = "normal"
    WARMUP = "warmup"
    FAILURE = "failure"
    DROP = "drop"


@dataclass(frozen=True, slots=True)
class WorkoutSet:
    """
    A single logged set.

    :param exercise_id: Normalized exercise identifier (kebab-case).
    :type exercise_id: str
    :param set_type: Kind of set; warmups never count towards volume.
    :type set_type: SetType
    :param weight: Load in kilograms.
    :type weight: float
    :param reps: Repetitions performed.
    :type reps: int
    :param rpe: Optional rate of perceived exertion.
    :type rpe: float | None
    """

    exercise_id: str
    set_type: SetType = SetType.NORMAL
    weight: float = 0.0
    reps: int = 0
    rpe: float | None = None

    @property
    def is_warmup(self) -> bool:
        return self.set_type is SetType.WARMUP
