from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from scimuscle.models.mapping import UnmappedExercise, UserExerciseMapping
from scimuscle.services._shared.base import BaseService
from scimuscle.services._shared.errors import ServiceValidationError
from scimuscle.services.automatch.matcher import generate_auto_match_suggestions
from scimuscle.services.imports.csv_parser import parse_csv
from scimuscle.services.imports.dto import ImportSummary
from scimuscle.services.mappings.resolver import MappingResolverService
from scimuscle.services.mappings.tracker import prune_resolved, track_unmapped_exercises


class CsvImportService(BaseService):
    """
    Import a workout export for one profile.

    The service parses the CSV, records every exercise name that neither the
    catalog nor the profile's mappings resolve, and proposes auto-matches
    for the resulting unmapped list. Nothing is persisted here.
    """

    def __init__(self, *, user_mappings: Iterable[UserExerciseMapping] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self.user_mappings = list(user_mappings)

    def import_csv(
        self,
        text: str,
        *,
        existing_unmapped: Iterable[UnmappedExercise] = (),
        now: datetime | None = None,
    ) -> ImportSummary:
        """
        :raises ServiceValidationError: When the export format is not supported.
        """
        result = parse_csv(text)
        if result.format != "hevy":
            raise ServiceValidationError(
                "Unsupported CSV format", errors=[f"format={result.format}"]
            )

        profile_id = self.ctx.profile_id or ""
        resolver = MappingResolverService(user_mappings=self.user_mappings, ctx=self.ctx)
        sets = [s for w in result.workouts for s in w.sets]
        unmapped = track_unmapped_exercises(
            prune_resolved(existing_unmapped, self.user_mappings),
            sets,
            resolver.known_ids(),
            profile_id,
            now,
        )
        suggestions = generate_auto_match_suggestions(unmapped)

        self.log.info(
            "imports.csv",
            extra={
                "format": result.format,
                "count": len(result.workouts),
                "suggestions": len(suggestions),
                "profile_id": self.ctx.profile_id,
            },
        )
        return ImportSummary(
            format=result.format,
            workouts=result.workouts,
            unmapped=unmapped,
            suggestions=suggestions,
        )
