"""Unit tests for the muscle group configuration engine."""

from __future__ import annotations

import random
from dataclasses import replace

import pytest

from scimuscle.models.muscle_group import (
    HIDDEN,
    UNGROUPED,
    CustomMuscleGroup,
    GroupTarget,
    MuscleGroupConfig,
)
from scimuscle.models.taxonomy import SCIENTIFIC_MUSCLES, ScientificMuscle
from scimuscle.services._shared.errors import (
    GroupLimitError,
    GroupNotFoundError,
    InvalidConfigError,
    NotFoundError,
    ServiceValidationError,
)
from scimuscle.services.muscle_groups.engine import (
    DEFAULT_MUSCLE_GROUP_CONFIG,
    MAX_GROUPS,
    add_group,
    delete_group,
    effective_config,
    ensure_valid,
    move_muscle,
    rename_group,
    reorder_groups,
    validate_muscle_group_config,
)
from scimuscle.services.muscle_groups.service import MuscleGroupService

M = ScientificMuscle
DEFAULT = DEFAULT_MUSCLE_GROUP_CONFIG


def _with_groups(count: int) -> MuscleGroupConfig:
    extra = tuple(CustomMuscleGroup(id=f"extra-{i}", name=f"Extra {i}") for i in range(count - 4))
    return replace(DEFAULT, groups=DEFAULT.groups + extra)


class TestValidation:
    """The partition invariant."""

    def test_default_is_valid(self):
        result = validate_muscle_group_config(DEFAULT)
        assert result.valid
        assert result.errors == ()
        assert sorted(DEFAULT.all_muscles()) == sorted(SCIENTIFIC_MUSCLES)

    def test_default_layout(self):
        assert [g.name for g in DEFAULT.groups] == ["Push", "Pull", "Legs", "Core"]
        assert DEFAULT.ungrouped == ()
        assert DEFAULT.hidden == ()

    def test_too_many_groups(self):
        result = validate_muscle_group_config(_with_groups(9))
        assert result.errors == ("Too many groups: 9 (max 8)",)

    def test_every_violation_is_reported(self):
        push = DEFAULT.groups[0]
        config = replace(
            DEFAULT,
            groups=(replace(push, muscles=push.muscles[1:] + ("Neck",)),) + DEFAULT.groups[1:],
            hidden=(M.SOLEUS,),
        )
        result = validate_muscle_group_config(config)
        assert not result.valid
        assert result.errors == (
            "Duplicate muscles found: Soleus",
            "Missing muscles: Pectoralis Major (Sternal)",
            "Invalid muscles: Neck",
        )

    def test_ensure_valid_raises_with_errors(self):
        config = replace(DEFAULT, groups=DEFAULT.groups[:-1])
        with pytest.raises(InvalidConfigError) as exc_info:
            ensure_valid(config)
        assert exc_info.value.errors == [
            "Missing muscles: Rectus Abdominis, Obliques, Hip Flexors"
        ]

    def test_effective_config(self):
        assert effective_config(None) is DEFAULT
        stored = _with_groups(5)
        assert effective_config(stored) is stored


class TestMoveMuscle:
    def test_move_to_hidden(self):
        config = move_muscle(DEFAULT, M.HIP_FLEXORS, HIDDEN)
        assert config.hidden == (M.HIP_FLEXORS,)
        assert M.HIP_FLEXORS not in config.groups[3].muscles
        assert validate_muscle_group_config(config).valid

    def test_move_appends_to_group(self):
        config = move_muscle(DEFAULT, M.OBLIQUES, GroupTarget("default-push"))
        assert config.groups[0].muscles[-1] is M.OBLIQUES
        assert config.groups[3].muscles == (M.RECTUS_ABDOMINIS, M.HIP_FLEXORS)

    def test_move_by_display_name(self):
        config = move_muscle(DEFAULT, "Soleus", UNGROUPED)
        assert config.ungrouped == (M.SOLEUS,)

    def test_move_to_missing_group(self):
        snapshot = DEFAULT.all_muscles()
        with pytest.raises(GroupNotFoundError) as exc_info:
            move_muscle(DEFAULT, M.SOLEUS, GroupTarget("nope"))
        assert isinstance(exc_info.value, NotFoundError)
        assert str(exc_info.value) == 'Group with ID "nope" not found'
        assert DEFAULT.all_muscles() == snapshot

    def test_random_moves_keep_partition(self):
        """Any sequence of valid moves preserves validity."""
        rng = random.Random(42)
        config = _with_groups(6)
        targets = [GroupTarget(gid) for gid in config.group_ids()] + [UNGROUPED, HIDDEN]
        for _ in range(200):
            config = move_muscle(config, rng.choice(SCIENTIFIC_MUSCLES), rng.choice(targets))
            assert validate_muscle_group_config(config).valid

    def test_invalid_target(self):
        with pytest.raises(ValueError):
            move_muscle(DEFAULT, M.SOLEUS, "sideways")  # type: ignore[arg-type]


class TestGroupOperations:
    def test_add_group(self):
        config = add_group(DEFAULT, "  Arms  ")
        assert len(config.groups) == 5
        assert config.groups[-1].name == "Arms"
        assert config.groups[-1].muscles == ()
        assert config.groups[-1].id not in DEFAULT.group_ids()
        assert validate_muscle_group_config(config).valid

    def test_add_group_with_id(self):
        config = add_group(DEFAULT, "Arms", "arms")
        assert config.group_ids()[-1] == "arms"
        with pytest.raises(ServiceValidationError):
            add_group(config, "Arms again", "arms")

    def test_add_group_limit(self):
        config = _with_groups(MAX_GROUPS)
        with pytest.raises(GroupLimitError) as exc_info:
            add_group(config, "One too many")
        assert str(exc_info.value) == "Cannot have more than 8 muscle groups"

    def test_blank_name_rejected(self):
        with pytest.raises(ServiceValidationError):
            add_group(DEFAULT, "   ")
        with pytest.raises(ServiceValidationError):
            rename_group(DEFAULT, "default-push", "")

    def test_rename(self):
        config = rename_group(DEFAULT, "default-core", "Abs")
        assert config.groups[3].name == "Abs"
        assert config.groups[3].muscles == DEFAULT.groups[3].muscles

    def test_delete_moves_muscles_to_ungrouped(self):
        config = delete_group(DEFAULT, "default-core")
        assert config.group_ids() == ["default-push", "default-pull", "default-legs"]
        assert config.ungrouped == (M.RECTUS_ABDOMINIS, M.OBLIQUES, M.HIP_FLEXORS)
        assert validate_muscle_group_config(config).valid

    def test_delete_missing_group(self):
        with pytest.raises(GroupNotFoundError):
            delete_group(DEFAULT, "nope")

    @pytest.mark.parametrize(
        ("index", "expected"),
        [
            (0, ["default-core", "default-push", "default-pull", "default-legs"]),
            (2, ["default-push", "default-pull", "default-core", "default-legs"]),
            (99, ["default-push", "default-pull", "default-legs", "default-core"]),
        ],
    )
    def test_reorder(self, index, expected):
        assert reorder_groups(DEFAULT, "default-core", index).group_ids() == expected


class TestMuscleGroupService:
    """Service mutations always return validated configurations."""

    @pytest.fixture()
    def service(self) -> MuscleGroupService:
        return MuscleGroupService()

    def test_validate_does_not_raise(self, service):
        result = service.validate(MuscleGroupConfig())
        assert not result.valid

    def test_mutation_on_invalid_input_raises(self, service):
        broken = replace(DEFAULT, hidden=("Neck",))
        with pytest.raises(InvalidConfigError):
            service.move(broken, M.SOLEUS, HIDDEN)

    def test_round_trip(self, service):
        config = service.add_group(service.default(), "Arms", group_id="arms")
        config = service.move(config, M.BICEPS_BRACHII, GroupTarget("arms"))
        config = service.rename_group(config, "arms", "Guns")
        config = service.reorder_groups(config, "arms", 0)
        config = service.delete_group(config, "arms")
        assert config.ungrouped == (M.BICEPS_BRACHII,)
        assert service.validate(config).valid
