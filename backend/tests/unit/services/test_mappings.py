"""Unit tests for user-mapping resolution and unmapped tracking."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from scimuscle.models.mapping import (
    CanonicalRedirect,
    CustomMuscleValues,
    Ignored,
    UserExerciseMapping,
)
from scimuscle.models.taxonomy import (
    DEFAULT_SCIENTIFIC_TO_FUNCTIONAL,
    FunctionalGroup,
    ScientificMuscle,
)
from scimuscle.services.catalog.index import canonical_mapping_table
from scimuscle.services.mappings.resolver import (
    MappingResolverService,
    effective_functional_mapping,
    resolve_exercise_mapping,
    resolve_exercise_mappings,
)
from scimuscle.services.mappings.tracker import (
    prune_resolved,
    sort_unmapped,
    track_unmapped_exercises,
)
from tests.factories.mapping import UnmappedExerciseFactory, UserExerciseMappingFactory
from tests.factories.workout import ParsedSetFactory

M = ScientificMuscle


class TestUserExerciseMapping:
    """Building mappings from the nullable-field encoding."""

    def test_ignored_wins(self):
        mapping = UserExerciseMapping.from_fields(
            "p1",
            "curl-thing",
            custom_muscle_values={"Biceps Brachii": 1.0},
            canonical_exercise_id="bicep-curl",
            is_ignored=True,
        )
        assert mapping.resolution == Ignored()
        assert mapping.is_ignored

    def test_custom_beats_redirect(self):
        mapping = UserExerciseMapping.from_fields(
            "p1",
            "curl-thing",
            custom_muscle_values={"Biceps Brachii": 1.0},
            canonical_exercise_id="bicep-curl",
        )
        assert mapping.resolution == CustomMuscleValues({M.BICEPS_BRACHII: 1.0})

    def test_redirect(self):
        mapping = UserExerciseMapping.from_fields("p1", "curl-thing", canonical_exercise_id="bicep-curl")
        assert mapping.resolution == CanonicalRedirect("bicep-curl")
        assert not mapping.is_ignored

    def test_no_mode_is_rejected(self):
        with pytest.raises(ValueError):
            UserExerciseMapping.from_fields("p1", "curl-thing")

    @pytest.mark.parametrize("values", [{"Neck": 1.0}, {"Biceps Brachii": 1.5}])
    def test_invalid_custom_values(self, values):
        with pytest.raises(ValueError):
            UserExerciseMapping.from_fields("p1", "curl-thing", custom_muscle_values=values)


class TestResolver:
    """Effective contribution tables."""

    @pytest.fixture()
    def table(self):
        return canonical_mapping_table()

    def test_without_override_uses_own_table(self, table):
        assert resolve_exercise_mapping("bench-press", None, table) == table["bench-press"]
        assert resolve_exercise_mapping("mystery", None, table) is None

    def test_ignored(self, table):
        mapping = UserExerciseMappingFactory(original_pattern="bench-press", resolution=Ignored())
        assert resolve_exercise_mapping("bench-press", mapping, table) is None

    def test_custom_values_are_verbatim(self, table):
        values = {M.HAMSTRINGS: 0.4}
        mapping = UserExerciseMappingFactory(resolution=CustomMuscleValues(values))
        assert resolve_exercise_mapping("lateral-raise-domar", mapping, table) == values

    def test_redirect(self, table):
        mapping = UserExerciseMappingFactory()
        resolved = resolve_exercise_mapping("lateral-raise-domar", mapping, table)
        assert resolved == table["lateral-raise"]

    def test_redirect_to_unknown_target(self, table):
        mapping = UserExerciseMappingFactory(resolution=CanonicalRedirect("nope"))
        assert resolve_exercise_mapping("lateral-raise-domar", mapping, table) is None

    def test_resolve_many(self, table):
        mappings = [
            UserExerciseMappingFactory(original_pattern="my-row", resolution=CanonicalRedirect("barbell-row")),
            UserExerciseMappingFactory(original_pattern="skip-me", resolution=Ignored()),
        ]
        resolved = resolve_exercise_mappings(
            ["bench-press", "my-row", "skip-me", "unknown", "", "bench-press"], mappings
        )
        assert set(resolved) == {"bench-press", "my-row"}
        assert resolved["my-row"] == table["barbell-row"]

    def test_override_applies_to_canonical_ids(self):
        mappings = [UserExerciseMappingFactory(original_pattern="bench-press", resolution=Ignored())]
        assert resolve_exercise_mappings(["bench-press"], mappings) == {}

    def test_later_mapping_wins(self, table):
        mappings = [
            UserExerciseMappingFactory(original_pattern="x", resolution=Ignored()),
            UserExerciseMappingFactory(original_pattern="x", resolution=CanonicalRedirect("squat")),
        ]
        assert resolve_exercise_mappings(["x"], mappings) == {"x": table["squat"]}

    def test_service_known_ids(self):
        service = MappingResolverService(user_mappings=[UserExerciseMappingFactory()])
        known = service.known_ids()
        assert "lateral-raise-domar" in known
        assert "bench-press" in known
        assert "mystery" not in known


def test_effective_functional_mapping():
    assert effective_functional_mapping() == dict(DEFAULT_SCIENTIFIC_TO_FUNCTIONAL)
    merged = effective_functional_mapping({M.HIP_FLEXORS: FunctionalGroup.QUADS})
    assert merged[M.HIP_FLEXORS] is FunctionalGroup.QUADS
    assert merged[M.OBLIQUES] is FunctionalGroup.CORE
    assert DEFAULT_SCIENTIFIC_TO_FUNCTIONAL[M.HIP_FLEXORS] is FunctionalGroup.CORE


class TestUnmappedTracker:
    """Folding imported sets into unmapped records."""

    KNOWN = frozenset({"bench-press"})

    def test_new_names_are_recorded(self, freeze_time):
        sets = [
            ParsedSetFactory(),
            ParsedSetFactory(original_name="lateral raise domar"),
            ParsedSetFactory(original_name="Bench Press (Barbell)"),
        ]
        with freeze_time("2025-03-01 12:00:00"):
            records = track_unmapped_exercises([], sets, self.KNOWN, "p1")

        (record,) = records
        assert record.normalized_name == "lateral-raise-domar"
        assert record.original_name == "Lateral Raise Domar"
        assert record.occurrence_count == 2
        assert record.profile_id == "p1"
        assert record.first_seen_at == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_existing_records_are_incremented(self):
        first_seen = datetime(2024, 5, 1, tzinfo=timezone.utc)
        existing = [UnmappedExerciseFactory(first_seen_at=first_seen, occurrence_count=3)]
        records = track_unmapped_exercises(existing, [ParsedSetFactory()], self.KNOWN, "p1")

        assert records[0].occurrence_count == 4
        assert records[0].first_seen_at == first_seen
        assert existing[0].occurrence_count == 3

    def test_empty_ids_are_skipped(self):
        sets = [ParsedSetFactory(original_name="(Machine)")]
        assert track_unmapped_exercises([], sets, self.KNOWN, "p1") == []

    def test_sorted_by_count_then_name(self):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        sets = [
            ParsedSetFactory(original_name="Zottman Curl"),
            ParsedSetFactory(original_name="Arnold Press"),
            ParsedSetFactory(original_name="Zottman Curl"),
            ParsedSetFactory(original_name="Cossack Squat"),
        ]
        records = track_unmapped_exercises([], sets, self.KNOWN, "p1", now=now)
        assert [r.normalized_name for r in records] == ["zottman-curl", "arnold-press", "cossack-squat"]

    def test_sort_unmapped(self):
        records = [
            UnmappedExerciseFactory(original_name="B", occurrence_count=1),
            UnmappedExerciseFactory(original_name="A", occurrence_count=1),
            UnmappedExerciseFactory(original_name="C", occurrence_count=5),
        ]
        assert [r.normalized_name for r in sort_unmapped(records)] == ["c", "a", "b"]

    def test_prune_resolved(self):
        records = [
            UnmappedExerciseFactory(),
            UnmappedExerciseFactory(original_name="Arnold Press"),
        ]
        remaining = prune_resolved(records, [UserExerciseMappingFactory()])
        assert [r.normalized_name for r in remaining] == ["arnold-press"]
