"""
Unit tests for backend/core/muscle_groups.py
"""
import pytest

from backend.core.muscle_groups import UNKNOWN_MUSCLE_GROUP, normalize_muscle_group


@pytest.mark.unit
class TestNormalizeMuscleGroup:
    @pytest.mark.parametrize("raw,expected", [
        (["Chest", "Triceps"], "chest"),
        (("Back",), "back"),
        (["", "  Legs "], "legs"),
        ('["Shoulders", "Arms"]', "shoulders"),
        ('"Glutes"', "glutes"),
        ("{Chest,Triceps}", "chest"),
        ('{"Upper Back",Lats}', "upper back"),
        ("Hamstrings", "hamstrings"),
        ("  CORE  ", "core"),
    ])
    def test_supported_shapes(self, raw, expected):
        assert normalize_muscle_group(raw) == expected

    @pytest.mark.parametrize("raw", [
        None,
        "",
        "   ",
        [],
        "[]",
        "{}",
        42,
        "42",
        '{"primary": "chest"}',
        [None, 3],
    ])
    def test_unknown_values_fall_back(self, raw):
        assert normalize_muscle_group(raw) == UNKNOWN_MUSCLE_GROUP

    def test_fallback_label(self):
        assert UNKNOWN_MUSCLE_GROUP == "NA"
