# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass, field

from scimuscle.models.mapping import ContributionTable


@dataclass(frozen=True, slots=True)
class CanonicalExercise:
    """
    Entry of the bundled canonical exercise list.

    :param id: Normalized ID (kebab-case).
    :type id: str
    :param name: Display name as written in the asset.
    :type name: str
    :param score: Match score; ``1.0`` outside of search results.
    :type score: float
    :param contributions: Muscle contribution table.
    :type contributions: ContributionTable
    """

    id: str
    name: str
    score: float = 1.0
    contributions: ContributionTable = field(default_factory=dict, compare=False)
