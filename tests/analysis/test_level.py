"""Tests for performance level classification."""

import pytest

from hyrox_analyzer.analysis.level import determine_level
from hyrox_analyzer.models.race import Gender, PerformanceLevel


class TestDetermineLevel:
    """Tests for determine_level."""

    @pytest.mark.parametrize("total_time,expected", [
        (3000, PerformanceLevel.ELITE),
        (3560, PerformanceLevel.ELITE),
        (3600, PerformanceLevel.ELITE),
        (3601, PerformanceLevel.INTERMEDIATE),
        (5100, PerformanceLevel.INTERMEDIATE),
        (5101, PerformanceLevel.BEGINNER),
        (6600, PerformanceLevel.BEGINNER),
        (99999, PerformanceLevel.BEGINNER),
    ])
    def test_male_boundaries(self, total_time, expected):
        """Ceilings are inclusive; slower than every ceiling is beginner."""
        assert determine_level(total_time, Gender.MALE) == expected

    @pytest.mark.parametrize("total_time,expected", [
        (3900, PerformanceLevel.ELITE),
        (3901, PerformanceLevel.INTERMEDIATE),
        (5700, PerformanceLevel.INTERMEDIATE),
        (5701, PerformanceLevel.BEGINNER),
    ])
    def test_female_boundaries(self, total_time, expected):
        assert determine_level(total_time, "female") == expected

    def test_same_time_can_differ_by_gender(self):
        assert determine_level(3800, "male") == PerformanceLevel.INTERMEDIATE
        assert determine_level(3800, "female") == PerformanceLevel.ELITE

    @pytest.mark.parametrize("gender", ["male", "female"])
    def test_monotonic_in_time(self, gender):
        """A slower time never gets a better level."""
        rank = {level: i for i, level in enumerate(PerformanceLevel)}
        previous = 0
        for total_time in range(3000, 8000, 37):
            current = rank[determine_level(total_time, gender)]
            assert current >= previous
            previous = current

    def test_unknown_gender_raises(self):
        with pytest.raises(ValueError):
            determine_level(3600, "unknown")
