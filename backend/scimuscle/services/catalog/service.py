from __future__ import annotations

from scimuscle.services._shared.base import BaseService
from scimuscle.services.catalog.dto import CanonicalExercise
from scimuscle.services.catalog.index import get_all_canonical_exercises, search_exercises


class ExerciseCatalogService(BaseService):
    """Read-only access to the canonical exercise list."""

    def __init__(self, *, max_limit: int | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.max_limit = max_limit

    def list_exercises(self) -> list[CanonicalExercise]:
        return list(get_all_canonical_exercises())

    def search(self, query: str, *, limit: int = 10) -> list[CanonicalExercise]:
        """
        Search canonical exercises.

        :param query: Free-text query; blank queries return no results.
        :param limit: Maximum number of results (>= 1).
        :raises ServiceValidationError: When ``limit`` is below 1.
        """
        limit = self.ensure_limit(limit, maximum=self.max_limit)
        results = search_exercises(query, limit=limit)
        self.log.debug(
            "catalog.search", extra={"count": len(results), "profile_id": self.ctx.profile_id}
        )
        return results
