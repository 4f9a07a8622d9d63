"""Framework-agnostic domain types."""

from scimuscle.models.mapping import (
    CanonicalRedirect,
    ContributionTable,
    CustomMuscleValues,
    Ignored,
    UnmappedExercise,
    UserExerciseMapping,
    contribution_table,
)
from scimuscle.models.muscle_group import (
    HIDDEN,
    UNGROUPED,
    Bucket,
    CustomMuscleGroup,
    GroupTarget,
    MuscleGroupConfig,
    ValidationResult,
)
from scimuscle.models.taxonomy import (
    DEFAULT_SCIENTIFIC_TO_FUNCTIONAL,
    FUNCTIONAL_GROUPS,
    SCIENTIFIC_MUSCLES,
    UI_MUSCLE_GROUPS,
    FunctionalGroup,
    ScientificMuscle,
    parse_muscle,
)
from scimuscle.models.workout import SetType, WorkoutSet

__all__ = [
    "Bucket",
    "CanonicalRedirect",
    "ContributionTable",
    "CustomMuscleGroup",
    "CustomMuscleValues",
    "DEFAULT_SCIENTIFIC_TO_FUNCTIONAL",
    "FUNCTIONAL_GROUPS",
    "FunctionalGroup",
    "GroupTarget",
    "HIDDEN",
    "Ignored",
    "MuscleGroupConfig",
    "SCIENTIFIC_MUSCLES",
    "ScientificMuscle",
    "SetType",
    "UI_MUSCLE_GROUPS",
    "UNGROUPED",
    "UnmappedExercise",
    "UserExerciseMapping",
    "ValidationResult",
    "WorkoutSet",
    "contribution_table",
    "parse_muscle",
]
