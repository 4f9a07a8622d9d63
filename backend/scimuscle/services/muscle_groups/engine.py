"""
Muscle group configuration engine.

A configuration partitions every scientific muscle into up to
:data:`MAX_GROUPS` named groups plus the ``ungrouped`` and ``hidden``
buckets. All operations return new configurations; inputs are never
modified. :func:`move_muscle` is the only primitive that changes muscle
membership.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from uuid import uuid4

from scimuscle.models.muscle_group import (
    Bucket,
    CustomMuscleGroup,
    GroupTarget,
    MuscleGroupConfig,
    MuscleTarget,
    ValidationResult,
)
from scimuscle.models.taxonomy import SCIENTIFIC_MUSCLES, ScientificMuscle, coerce_muscle
from scimuscle.services._shared.errors import (
    GroupLimitError,
    GroupNotFoundError,
    InvalidConfigError,
    ServiceValidationError,
)

log = logging.getLogger(__name__)

MAX_GROUPS = 8

_M = ScientificMuscle

DEFAULT_MUSCLE_GROUP_CONFIG = MuscleGroupConfig(
    groups=(
        CustomMuscleGroup(
            id="default-push",
            name="Push",
            muscles=(
                _M.PECTORALIS_MAJOR_STERNAL,
                _M.PECTORALIS_MAJOR_CLAVICULAR,
                _M.ANTERIOR_DELTOID,
                _M.LATERAL_DELTOID,
                _M.TRICEPS_LATERAL_MEDIAL,
                _M.TRICEPS_LONG_HEAD,
            ),
        ),
        CustomMuscleGroup(
            id="default-pull",
            name="Pull",
            muscles=(
                _M.LATISSIMUS_DORSI,
                _M.UPPER_TRAPEZIUS,
                _M.MIDDLE_TRAPEZIUS,
                _M.LOWER_TRAPEZIUS,
                _M.POSTERIOR_DELTOID,
                _M.BICEPS_BRACHII,
                _M.ERECTOR_SPINAE,
                _M.FOREARM_FLEXORS,
                _M.FOREARM_EXTENSORS,
            ),
        ),
        CustomMuscleGroup(
            id="default-legs",
            name="Legs",
            muscles=(
                _M.QUADRICEPS_VASTI,
                _M.QUADRICEPS_RF,
                _M.GLUTEUS_MAXIMUS,
                _M.GLUTEUS_MEDIUS,
                _M.HAMSTRINGS,
                _M.ADDUCTORS,
                _M.GASTROCNEMIUS,
                _M.SOLEUS,
            ),
        ),
        CustomMuscleGroup(
            id="default-core",
            name="Core",
            muscles=(_M.RECTUS_ABDOMINIS, _M.OBLIQUES, _M.HIP_FLEXORS),
        ),
    ),
)


def _label(muscle: str) -> str:
    return muscle.value if isinstance(muscle, Enum) else str(muscle)


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_muscle_group_config(config: MuscleGroupConfig) -> ValidationResult:
    """
    Check the partition invariant without raising.

    Every violation is reported: group count above :data:`MAX_GROUPS`,
    duplicated muscles, missing muscles and unknown muscle values.
    """
    errors: list[str] = []

    if len(config.groups) > MAX_GROUPS:
        errors.append(f"Too many groups: {len(config.groups)} (max {MAX_GROUPS})")

    labels = [_label(m) for m in config.all_muscles()]

    seen: set[str] = set()
    duplicates: list[str] = []
    for label in labels:
        if label in seen:
            duplicates.append(label)
        seen.add(label)
    if duplicates:
        errors.append(f"Duplicate muscles found: {', '.join(_unique(duplicates))}")

    missing = [m.value for m in SCIENTIFIC_MUSCLES if m.value not in seen]
    if missing:
        errors.append(f"Missing muscles: {', '.join(missing)}")

    known = {m.value for m in SCIENTIFIC_MUSCLES}
    invalid = [label for label in labels if label not in known]
    if invalid:
        errors.append(f"Invalid muscles: {', '.join(invalid)}")

    return ValidationResult(valid=not errors, errors=tuple(errors))


def ensure_valid(config: MuscleGroupConfig) -> MuscleGroupConfig:
    """
    Return ``config`` unchanged when valid.

    :raises InvalidConfigError: Carrying every validation error.
    """
    result = validate_muscle_group_config(config)
    if not result.valid:
        log.warning("muscle_groups.invalid", extra={"errors": list(result.errors)})
        raise InvalidConfigError(list(result.errors))
    return config


def effective_config(stored: MuscleGroupConfig | None) -> MuscleGroupConfig:
    """The stored configuration, or the default one when nothing is stored."""
    return DEFAULT_MUSCLE_GROUP_CONFIG if stored is None else stored


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def _find_group(config: MuscleGroupConfig, group_id: str) -> int:
    for index, group in enumerate(config.groups):
        if group.id == group_id:
            return index
    raise GroupNotFoundError(group_id)


def move_muscle(
    config: MuscleGroupConfig,
    muscle: ScientificMuscle | str,
    target: MuscleTarget,
) -> MuscleGroupConfig:
    """
    Relocate ``muscle`` to the end of ``target``.

    The muscle is first removed from every group and bucket it appears in,
    so a valid configuration stays valid.

    :param config: Current configuration (not modified).
    :param muscle: Muscle to move.
    :param target: ``GroupTarget(group_id)``, ``UNGROUPED`` or ``HIDDEN``.
    :returns: New configuration.
    :raises GroupNotFoundError: When the target group does not exist.
    """
    label = _label(muscle)

    def without(values: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(m for m in values if _label(m) != label)

    groups = [replace(g, muscles=without(g.muscles)) for g in config.groups]
    ungrouped = without(config.ungrouped)
    hidden = without(config.hidden)
    entry = coerce_muscle(label)

    if isinstance(target, GroupTarget):
        index = _find_group(config, target.group_id)
        groups[index] = replace(groups[index], muscles=groups[index].muscles + (entry,))
    elif target is Bucket.UNGROUPED:
        ungrouped = ungrouped + (entry,)
    elif target is Bucket.HIDDEN:
        hidden = hidden + (entry,)
    else:
        raise ValueError(f"Unsupported move target: {target!r}")

    return MuscleGroupConfig(groups=tuple(groups), ungrouped=ungrouped, hidden=hidden)


def add_group(
    config: MuscleGroupConfig, name: str, group_id: str | None = None
) -> MuscleGroupConfig:
    """
    Append an empty group.

    :raises GroupLimitError: When the configuration already has
        :data:`MAX_GROUPS` groups.
    :raises ServiceValidationError: On a blank name or a duplicate ID.
    """
    if len(config.groups) >= MAX_GROUPS:
        raise GroupLimitError(MAX_GROUPS)
    name = (name or "").strip()
    if not name:
        raise ServiceValidationError("Group name must not be blank", errors=["name"])
    group_id = group_id or str(uuid4())
    if group_id in config.group_ids():
        raise ServiceValidationError(f"Duplicate group ID: {group_id}", errors=["id"])
    group = CustomMuscleGroup(id=group_id, name=name)
    return replace(config, groups=config.groups + (group,))


def rename_group(config: MuscleGroupConfig, group_id: str, name: str) -> MuscleGroupConfig:
    name = (name or "").strip()
    if not name:
        raise ServiceValidationError("Group name must not be blank", errors=["name"])
    index = _find_group(config, group_id)
    groups = list(config.groups)
    groups[index] = replace(groups[index], name=name)
    return replace(config, groups=tuple(groups))


def delete_group(config: MuscleGroupConfig, group_id: str) -> MuscleGroupConfig:
    """Remove a group; its muscles are moved, in order, to ``ungrouped``."""
    index = _find_group(config, group_id)
    for muscle in config.groups[index].muscles:
        config = move_muscle(config, muscle, Bucket.UNGROUPED)
    groups = config.groups[:index] + config.groups[index + 1 :]
    return replace(config, groups=groups)


def reorder_groups(config: MuscleGroupConfig, group_id: str, new_index: int) -> MuscleGroupConfig:
    """Move a group to ``new_index`` (clamped to the valid range)."""
    index = _find_group(config, group_id)
    groups = list(config.groups)
    group = groups.pop(index)
    new_index = max(0, min(int(new_index), len(groups)))
    groups.insert(new_index, group)
    return replace(config, groups=tuple(groups))


__all__ = [
    "MAX_GROUPS",
    "DEFAULT_MUSCLE_GROUP_CONFIG",
    "validate_muscle_group_config",
    "ensure_valid",
    "effective_config",
    "move_muscle",
    "add_group",
    "rename_group",
    "delete_group",
    "reorder_groups",
]
