"""Immutable muscle-group configuration types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True, slots=True)
class CustomMuscleGroup:
    """
    A named, ordered group of muscles.

    Muscles are kept as display-name strings so that configurations loaded
    from storage can carry unknown values until validated.
    """

    id: str
    name: str
    muscles: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class MuscleGroupConfig:
    """
    Partition of every muscle into groups plus the ungrouped/hidden buckets.

    :param groups: Ordered custom groups.
    :type groups: tuple[CustomMuscleGroup, ...]
    :param ungrouped: Muscles shown outside any group.
    :type ungrouped: tuple[str, ...]
    :param hidden: Muscles excluded from display.
    :type hidden: tuple[str, ...]
    """

    groups: tuple[CustomMuscleGroup, ...] = ()
    ungrouped: tuple[str, ...] = ()
    hidden: tuple[str, ...] = ()

    def group_ids(self) -> list[str]:
        return [g.id for g in self.groups]

    def all_muscles(self) -> list[str]:
        """Every muscle entry in display order, duplicates included."""
        out: list[str] = []
        for group in self.groups:
            out.extend(group.muscles)
        out.extend(self.ungrouped)
        out.extend(self.hidden)
        return out


class Bucket(str, Enum):
    UNGROUPED = "ungrouped"
    HIDDEN = "hidden"


UNGROUPED = Bucket.UNGROUPED
HIDDEN = Bucket.HIDDEN


@dataclass(frozen=True, slots=True)
class GroupTarget:
    """Move target naming an existing custom group."""

    group_id: str


MuscleTarget = Union[GroupTarget, Bucket]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
