"""Tests for the overall score."""

import pytest

from hyrox_analyzer.analysis.scoring import LEVEL_BASE_SCORES, calculate_overall_score
from hyrox_analyzer.models.race import PerformanceLevel


class TestCalculateOverallScore:
    """Tests for calculate_overall_score."""

    def test_base_scores(self):
        assert LEVEL_BASE_SCORES[PerformanceLevel.ELITE] == 90
        assert LEVEL_BASE_SCORES[PerformanceLevel.INTERMEDIATE] == 70
        assert LEVEL_BASE_SCORES[PerformanceLevel.BEGINNER] == 50

    def test_elite_with_excellent_consistency_caps_at_100(self):
        assert calculate_overall_score(PerformanceLevel.ELITE, 10) == 100

    def test_accepts_level_strings(self):
        assert calculate_overall_score("beginner", 5) == 55

    @pytest.mark.parametrize("bonus", [-5, 0, 5, 10])
    def test_tier_dominates_bonus(self, bonus):
        elite = calculate_overall_score(PerformanceLevel.ELITE, bonus)
        intermediate = calculate_overall_score(PerformanceLevel.INTERMEDIATE, bonus)
        assert elite >= 85
        assert intermediate <= 80

    def test_clamped_to_range(self):
        assert calculate_overall_score(PerformanceLevel.ELITE, 50) == 100
        assert calculate_overall_score(PerformanceLevel.BEGINNER, -80) == 0
