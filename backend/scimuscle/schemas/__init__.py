"""Convenience exports for application schemas."""

from __future__ import annotations

from .common import ProfileQuerySchema
from .exercise import CanonicalExerciseSchema, ExerciseSearchQuerySchema
from .imports import ImportSummarySchema
from .mapping import (
    AutoMatchRequestSchema,
    AutoMatchSuggestionSchema,
    ResolveRequestSchema,
    UnmappedExerciseSchema,
    UserExerciseMappingSchema,
)
from .muscle_group import (
    AddGroupRequestSchema,
    ConfigRequestSchema,
    MoveRequestSchema,
    MuscleGroupConfigSchema,
    RenameGroupRequestSchema,
    ReorderRequestSchema,
    ValidationResultSchema,
)
from .volume import (
    DailyActivityRequestSchema,
    DailyActivitySchema,
    VolumeRequestSchema,
    VolumeStatItemSchema,
    VolumeSummarySchema,
    WorkoutSetSchema,
)

__all__ = [
    "AddGroupRequestSchema",
    "AutoMatchRequestSchema",
    "AutoMatchSuggestionSchema",
    "CanonicalExerciseSchema",
    "ConfigRequestSchema",
    "DailyActivityRequestSchema",
    "DailyActivitySchema",
    "ExerciseSearchQuerySchema",
    "ImportSummarySchema",
    "MoveRequestSchema",
    "MuscleGroupConfigSchema",
    "ProfileQuerySchema",
    "RenameGroupRequestSchema",
    "ReorderRequestSchema",
    "ResolveRequestSchema",
    "UnmappedExerciseSchema",
    "UserExerciseMappingSchema",
    "ValidationResultSchema",
    "VolumeRequestSchema",
    "VolumeStatItemSchema",
    "VolumeSummarySchema",
    "WorkoutSetSchema",
]
