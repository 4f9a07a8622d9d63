from __future__ import annotations

from scimuscle.models.muscle_group import MuscleGroupConfig, MuscleTarget, ValidationResult
from scimuscle.models.taxonomy import ScientificMuscle
from scimuscle.services._shared.base import BaseService
from scimuscle.services.muscle_groups import engine


class MuscleGroupService(BaseService):
    """
    Settings-editor operations over a profile's muscle group configuration.

    Every mutation returns a new configuration that has passed validation;
    callers persist only what this service returns.
    """

    def default(self) -> MuscleGroupConfig:
        return engine.DEFAULT_MUSCLE_GROUP_CONFIG

    def validate(self, config: MuscleGroupConfig) -> ValidationResult:
        result = engine.validate_muscle_group_config(config)
        if not result.valid:
            self.log.info(
                "muscle_groups.validation_failed",
                extra={"errors": list(result.errors), "profile_id": self.ctx.profile_id},
            )
        return result

    def move(
        self,
        config: MuscleGroupConfig,
        muscle: ScientificMuscle,
        target: MuscleTarget,
    ) -> MuscleGroupConfig:
        updated = engine.ensure_valid(engine.move_muscle(config, muscle, target))
        self.log.debug("muscle_groups.moved", extra={"muscle": muscle.value})
        return updated

    def add_group(
        self, config: MuscleGroupConfig, name: str, *, group_id: str | None = None
    ) -> MuscleGroupConfig:
        updated = engine.ensure_valid(engine.add_group(config, name, group_id))
        self.log.info("muscle_groups.added", extra={"group_id": updated.groups[-1].id})
        return updated

    def rename_group(self, config: MuscleGroupConfig, group_id: str, name: str) -> MuscleGroupConfig:
        return engine.ensure_valid(engine.rename_group(config, group_id, name))

    def delete_group(self, config: MuscleGroupConfig, group_id: str) -> MuscleGroupConfig:
        updated = engine.ensure_valid(engine.delete_group(config, group_id))
        self.log.info("muscle_groups.deleted", extra={"group_id": group_id})
        return updated

    def reorder_groups(
        self, config: MuscleGroupConfig, group_id: str, new_index: int
    ) -> MuscleGroupConfig:
        return engine.ensure_valid(engine.reorder_groups(config, group_id, new_index))
