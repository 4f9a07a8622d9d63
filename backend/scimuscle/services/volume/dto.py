# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from scimuscle.models.taxonomy import FunctionalGroup

DEFAULT_MUSCLE_GOAL = 20
DEFAULT_TOTAL_GOAL = 150


@dataclass(frozen=True, slots=True)
class VolumeStatItem:
    """
    Volume of one muscle or group against its weekly goal.

    :param name: Muscle or functional group display name.
    :type name: str
    :param volume: Fractional set volume.
    :type volume: float
    :param goal: Target set volume.
    :type goal: float
    :param percentage: ``volume / goal * 100`` (``0`` for a zero goal).
    :type percentage: float
    """

    name: str
    volume: float
    goal: float
    percentage: float


@dataclass(frozen=True, slots=True)
class VolumeSummary:
    """
    Dashboard statistics for one batch of sets.

    :param muscles: One item per scientific muscle.
    :type muscles: list[VolumeStatItem]
    :param groups: One item per functional group.
    :type groups: list[VolumeStatItem]
    :param total_sets: Number of sets supplied, warmups included.
    :type total_sets: int
    :param total_goal: Overall weekly set target.
    :type total_goal: float
    """

    muscles: list[VolumeStatItem]
    groups: list[VolumeStatItem]
    total_sets: int
    total_goal: float


class ActivityWindow(str, Enum):
    """Seven-day range shown by the daily activity chart."""

    CALENDAR_WEEK = "calendar_week"
    LAST_7_DAYS = "last_7_days"


@dataclass(frozen=True, slots=True)
class DailyExercise:
    name: str
    sets: int
    groups: tuple[FunctionalGroup, ...] = ()


@dataclass(frozen=True, slots=True)
class DailyWorkout:
    id: str
    title: str
    exercises: tuple[DailyExercise, ...] = ()


@dataclass(frozen=True, slots=True)
class DailyActivity:
    """
    Everything logged on one calendar day.

    :param date: The day.
    :type date: datetime.date
    :param day_label: Short weekday name (``Mon`` .. ``Sun``).
    :type day_label: str
    :param total_sets: Sets logged that day, warmups included.
    :type total_sets: int
    :param workouts: Workouts of the day with per-exercise set counts.
    :type workouts: tuple[DailyWorkout, ...]
    """

    date: date
    day_label: str
    total_sets: int
    workouts: tuple[DailyWorkout, ...] = ()
