from __future__ import annotations

from collections.abc import Iterable

from scimuscle.models.mapping import UnmappedExercise
from scimuscle.services._shared.base import BaseService
from scimuscle.services.automatch.dto import AutoMatchSuggestion
from scimuscle.services.automatch.matcher import generate_auto_match_suggestions


class AutoMatchService(BaseService):
    """Suggest canonical exercises for a profile's unmapped names."""

    def suggest(self, unmapped: Iterable[UnmappedExercise]) -> list[AutoMatchSuggestion]:
        records = list(unmapped)
        suggestions = generate_auto_match_suggestions(records)
        self.log.info(
            "automatch.suggested",
            extra={
                "count": len(records),
                "suggestions": len(suggestions),
                "profile_id": self.ctx.profile_id,
            },
        )
        return suggestions
