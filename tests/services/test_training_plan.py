"""Tests for training plan generation."""

from datetime import timedelta

import pytest

from hyrox_analyzer.exceptions import ErrorCode, PlanValidationError
from hyrox_analyzer.models.training import DayType, Intensity, PlanLevel, TrainingPhase
from hyrox_analyzer.services.training_plan import (
    PLAN_TEMPLATES,
    days_per_week,
    generate_training_plan,
    generate_week,
    phase_for_week,
)


class TestPhases:
    """Tests for periodization."""

    @pytest.mark.parametrize("week,expected", [
        (1, TrainingPhase.FOUNDATION),
        (2, TrainingPhase.BUILD),
        (3, TrainingPhase.BUILD),
        (4, TrainingPhase.INTENSIFY),
        (5, TrainingPhase.INTENSIFY),
        (6, TrainingPhase.PEAK),
        (7, TrainingPhase.PEAK),
        (8, TrainingPhase.TAPER),
    ])
    def test_eight_week_plan(self, week, expected):
        assert phase_for_week(week, 8) == expected

    def test_single_week_plan_is_taper(self):
        assert phase_for_week(1, 1) == TrainingPhase.TAPER

    @pytest.mark.parametrize("level,expected", [
        (PlanLevel.BEGINNER, 4),
        (PlanLevel.INTERMEDIATE, 5),
        (PlanLevel.ADVANCED, 6),
        (PlanLevel.ELITE, 6),
    ])
    def test_days_per_week(self, level, expected):
        assert days_per_week(level) == expected


class TestGenerateWeek:
    """Tests for generate_week."""

    def test_always_seven_days(self):
        for level in PlanLevel:
            week = generate_week(1, 8, level, [])
            assert len(week.days) == 7
            assert [d.day_number for d in week.days] == list(range(1, 8))

    def test_rotation_then_rest(self):
        week = generate_week(1, 8, PlanLevel.INTERMEDIATE, [])
        assert [d.type for d in week.days] == [
            DayType.ENDURANCE,
            DayType.STRENGTH,
            DayType.SKILL,
            DayType.COMBINED,
            DayType.ENDURANCE,
            DayType.REST,
            DayType.REST,
        ]

    def test_build_phase_targets_weakness(self):
        week = generate_week(3, 8, PlanLevel.BEGINNER, ["sledPush"])
        assert week.phase == TrainingPhase.BUILD
        assert week.focus == "Targeting Sled Push"

    def test_endurance_duration_grows_weekly(self):
        first = generate_week(1, 8, PlanLevel.BEGINNER, []).days[0]
        third = generate_week(3, 8, PlanLevel.BEGINNER, []).days[0]
        assert first.duration == 20 + 2 + 15
        assert third.duration == 20 + 6 + 15
        assert third.exercises[1].duration == 26 * 60

    def test_peak_weeks_are_high_intensity(self):
        week = generate_week(6, 8, PlanLevel.ADVANCED, [])
        assert week.days[0].intensity == Intensity.HIGH
        assert week.days[0].exercises[1].notes == "Race pace pace"

    def test_taper_mock_day_is_light(self):
        week = generate_week(8, 8, PlanLevel.ADVANCED, [])
        mock = week.days[5]
        assert mock.type == DayType.MOCK
        assert mock.title == "Light Practice"
        assert mock.intensity == Intensity.LOW
        assert mock.duration == 45

    def test_mock_scope_by_level(self):
        advanced = generate_week(1, 8, PlanLevel.ADVANCED, []).days[5]
        assert advanced.title == "Mock Race"
        assert advanced.exercises[1].notes == "Full HYROX simulation"


class TestDayContent:
    """Tests for weakness-driven day content."""

    def test_strength_day_without_weakness_has_both_drills(self):
        strength = generate_week(1, 8, PlanLevel.INTERMEDIATE, []).days[1]
        names = [e.name for e in strength.exercises]
        assert "Sled Push Practice" in names
        assert "Wall Balls" in names
        assert strength.title == "Functional Strength"
        assert strength.exercises[1].sets == 4

    def test_strength_day_for_other_weakness_skips_drills(self):
        strength = generate_week(1, 8, PlanLevel.INTERMEDIATE, ["rowing"]).days[1]
        names = [e.name for e in strength.exercises]
        assert "Sled Push Practice" not in names
        assert "Wall Balls" not in names
        assert strength.title == "Rowing Strength"

    def test_skill_day_drills_top_weakness(self):
        skill = generate_week(1, 8, PlanLevel.INTERMEDIATE, ["wallBalls"]).days[2]
        technique = [e.name for e in skill.exercises if e.name.endswith("Technique")]
        assert technique == ["Wall Balls Technique"]

    def test_skill_day_covers_all_stations_without_weakness(self):
        skill = generate_week(1, 8, PlanLevel.INTERMEDIATE, []).days[2]
        technique = [e.name for e in skill.exercises if e.name.endswith("Technique")]
        assert len(technique) == 7

    def test_combined_day_rounds(self):
        combined = generate_week(1, 8, PlanLevel.BEGINNER, []).days[3]
        assert combined.exercises[1].sets == 3
        assert combined.exercises[-2].notes == "Wall Balls + Run 400m (Skip if needed)"


class TestGenerateTrainingPlan:
    """Tests for generate_training_plan."""

    def test_plan_metadata(self):
        plan = generate_training_plan(
            level="intermediate",
            weaknesses=["sledPush", "wallBalls"],
            strengths=["rowing"],
            weeks=8,
        )
        assert plan.id.startswith("plan-")
        assert plan.name == "8-Week Intermediate Plan"
        assert plan.duration == 8
        assert plan.level == PlanLevel.INTERMEDIATE
        assert plan.goal == "Improve Sled Push and build overall HYROX fitness"
        assert len(plan.weeks) == 8

    def test_goal_without_weaknesses(self):
        plan = generate_training_plan(level="beginner", weaknesses=[], weeks=4)
        assert plan.goal == "Improve General Fitness and build overall HYROX fitness"

    def test_ids_are_unique(self):
        first = generate_training_plan(level="elite", weaknesses=[], weeks=1)
        second = generate_training_plan(level="elite", weaknesses=[], weeks=1)
        assert first.id != second.id

    @pytest.mark.parametrize("weeks", [0, 53, -1])
    def test_weeks_out_of_range(self, weeks):
        with pytest.raises(PlanValidationError) as exc_info:
            generate_training_plan(level="beginner", weaknesses=[], weeks=weeks)
        assert exc_info.value.code == ErrorCode.PLAN_VALIDATION_ERROR
        assert exc_info.value.details["field"] == "weeks"

    def test_unknown_level(self):
        with pytest.raises(PlanValidationError) as exc_info:
            generate_training_plan(level="pro", weaknesses=[])
        assert exc_info.value.details["field"] == "level"

    def test_created_at_is_utc(self):
        plan = generate_training_plan(level="beginner", weaknesses=[], weeks=1)
        assert plan.created_at.utcoffset() == timedelta(0)

    def test_serializes_camel_case(self):
        data = generate_training_plan(level="advanced", weaknesses=[], weeks=2).to_dict()
        assert "createdAt" in data
        assert data["weeks"][0]["weekNumber"] == 1
        assert data["weeks"][0]["days"][0]["dayNumber"] == 1


class TestTemplates:
    """Tests for the template catalog."""

    def test_three_templates(self):
        assert [t.id for t in PLAN_TEMPLATES] == [
            "beginner-foundation",
            "intermediate-improvement",
            "advanced-peak",
        ]
        assert all(t.duration == 8 for t in PLAN_TEMPLATES)
