"""
Training plan generation.

Builds a periodized week-by-week HYROX plan from the athlete's level and
weakest stations. Content is rule-based: phases follow progress through
the plan and each training day comes from a fixed rotation of session
types.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence, Union
import logging
import uuid

from ..exceptions import PlanValidationError
from ..models.race import STATION_KEYS, station_display_name
from ..models.training import (
    DayType,
    Exercise,
    Intensity,
    PlanLevel,
    PlanTemplate,
    TrainingDay,
    TrainingPhase,
    TrainingPlan,
    TrainingWeek,
)


logger = logging.getLogger(__name__)

MIN_WEEKS = 1
MAX_WEEKS = 52
DAYS_IN_WEEK = 7

# (exclusive progress ceiling, phase), checked in order; the rest is taper
PHASE_BOUNDARIES = (
    (0.25, TrainingPhase.FOUNDATION),
    (0.5, TrainingPhase.BUILD),
    (0.75, TrainingPhase.INTENSIFY),
    (0.9, TrainingPhase.PEAK),
)

DAY_ROTATION = (
    DayType.ENDURANCE,
    DayType.STRENGTH,
    DayType.SKILL,
    DayType.COMBINED,
    DayType.ENDURANCE,
    DayType.MOCK,
)


PLAN_TEMPLATES: List[PlanTemplate] = [
    PlanTemplate(
        id="beginner-foundation",
        name="Beginner Foundation (8 weeks)",
        description="Build base fitness and learn proper technique for all stations",
        duration=8,
        level=PlanLevel.BEGINNER,
        focus="Technique, Endurance, Basic Strength",
    ),
    PlanTemplate(
        id="intermediate-improvement",
        name="Intermediate Improvement (8 weeks)",
        description="Address weaknesses and build race-specific fitness",
        duration=8,
        level=PlanLevel.INTERMEDIATE,
        focus="Weakness Targeting, Pacing, Combined Work",
    ),
    PlanTemplate(
        id="advanced-peak",
        name="Advanced Peak (8 weeks)",
        description="Maximize performance for competition",
        duration=8,
        level=PlanLevel.ADVANCED,
        focus="High Intensity, Race Simulation, Recovery",
    ),
]


def _by_level(level: PlanLevel, beginner, intermediate, other):
    if level == PlanLevel.BEGINNER:
        return beginner
    if level == PlanLevel.INTERMEDIATE:
        return intermediate
    return other


def days_per_week(level: PlanLevel) -> int:
    """Training days per week: 4 / 5 / 6 for beginner / intermediate / others."""
    return _by_level(level, 4, 5, 6)


def phase_for_week(week_number: int, total_weeks: int) -> TrainingPhase:
    """Periodization phase from progress through the plan."""
    progress = week_number / total_weeks
    for ceiling, phase in PHASE_BOUNDARIES:
        if progress < ceiling:
            return phase
    return TrainingPhase.TAPER


def _week_focus(phase: TrainingPhase, weaknesses: Sequence[str]) -> str:
    if phase == TrainingPhase.FOUNDATION:
        return "Building base fitness and technique"
    if phase == TrainingPhase.BUILD:
        if weaknesses:
            return f"Targeting {station_display_name(weaknesses[0])}"
        return "Building strength and endurance"
    if phase == TrainingPhase.INTENSIFY:
        return "Combining stations and improving transitions"
    if phase == TrainingPhase.PEAK:
        return "Race-specific training and pacing"
    return "Recovery and race preparation"


def _work_intensity(phase: TrainingPhase) -> Intensity:
    return Intensity.HIGH if phase == TrainingPhase.PEAK else Intensity.MEDIUM


# ============================================================================
# Day generators
# ============================================================================

def _endurance_day(
    day_number: int,
    week_number: int,
    phase: TrainingPhase,
    level: PlanLevel,
    weaknesses: Sequence[str],
) -> TrainingDay:
    minutes = _by_level(level, 20, 30, 40) + week_number * 2
    intensity = _work_intensity(phase)
    pace = "Race pace" if intensity == Intensity.HIGH else "Comfortable but steady"

    return TrainingDay(
        day_number=day_number,
        type=DayType.ENDURANCE,
        title="Cardio Endurance",
        description="Build aerobic base with sustained effort",
        exercises=[
            Exercise(name="Warm-up jog", duration=600, notes="Easy pace"),
            Exercise(name="Main run", duration=minutes * 60, notes=f"{pace} pace"),
            Exercise(name="Cool down", duration=300, notes="Walk and stretch"),
        ],
        duration=minutes + 15,
        intensity=intensity,
    )


def _strength_day(
    day_number: int,
    week_number: int,
    phase: TrainingPhase,
    level: PlanLevel,
    weaknesses: Sequence[str],
) -> TrainingDay:
    sets = _by_level(level, 3, 4, 5)
    focus = weaknesses[0] if weaknesses else None

    exercises = [
        Exercise(name="Warm-up", duration=600, notes="Dynamic stretching and light cardio"),
    ]
    # Station drills only when that station is the focus, or there is no focus
    if focus in (None, "sledPush"):
        exercises.append(Exercise(
            name="Sled Push Practice", sets=sets, reps=4, rest=120,
            notes="Focus on low body position, powerful strides",
        ))
    if focus in (None, "wallBalls"):
        exercises.append(Exercise(
            name="Wall Balls", sets=sets, reps=15, rest=90,
            notes="Full hip extension, catch high",
        ))
    exercises += [
        Exercise(name="Goblet Squats", sets=sets, reps=12, rest=90),
        Exercise(name="Kettlebell Swings", sets=sets, reps=15, rest=90),
        Exercise(name="Farmers Carry", sets=3, duration=60, rest=120),
        Exercise(name="Cool down", duration=300, notes="Stretching"),
    ]

    if focus:
        name = station_display_name(focus)
        title = f"{name} Strength"
        description = f"Build strength for {name} and overall power"
    else:
        title = "Functional Strength"
        description = "Build full-body functional strength for all stations"

    return TrainingDay(
        day_number=day_number,
        type=DayType.STRENGTH,
        title=title,
        description=description,
        exercises=exercises,
        duration=60,
        intensity=_work_intensity(phase),
    )


def _skill_day(
    day_number: int,
    week_number: int,
    phase: TrainingPhase,
    level: PlanLevel,
    weaknesses: Sequence[str],
) -> TrainingDay:
    stations = [weaknesses[0]] if weaknesses else list(STATION_KEYS)

    exercises = [Exercise(name="Warm-up", duration=600, notes="Mobility work")]
    exercises += [
        Exercise(
            name=f"{station_display_name(station)} Technique",
            sets=3, reps=10, rest=60,
            notes="Focus on efficiency and form, not speed",
        )
        for station in stations
    ]
    exercises += [
        Exercise(
            name="Burpee Practice", sets=3, reps=10, rest=60,
            notes="Smooth, efficient movement",
        ),
        Exercise(
            name="Transition Practice", sets=5, duration=60, rest=120,
            notes="Run to station and back",
        ),
        Exercise(name="Cool down", duration=300),
    ]

    return TrainingDay(
        day_number=day_number,
        type=DayType.SKILL,
        title="Technique & Skill",
        description="Refine movement patterns and improve efficiency",
        exercises=exercises,
        duration=50,
        intensity=Intensity.MEDIUM,
    )


def _combined_day(
    day_number: int,
    week_number: int,
    phase: TrainingPhase,
    level: PlanLevel,
    weaknesses: Sequence[str],
) -> TrainingDay:
    rounds = _by_level(level, 3, 4, 5)
    final_round = (
        "Wall Balls + Run 400m (Skip if needed)"
        if level == PlanLevel.BEGINNER
        else "Wall Balls + Run 400m"
    )

    return TrainingDay(
        day_number=day_number,
        type=DayType.COMBINED,
        title="HYROX Simulation",
        description="Combine running with station work to simulate race conditions",
        exercises=[
            Exercise(name="Warm-up", duration=600, notes="Prepare for intensity"),
            Exercise(
                name="Main workout", sets=rounds,
                notes="Run 400m + 2 stations. Rest 3 min between rounds.",
            ),
            Exercise(name="Round 1", duration=600, notes="SkiErg + Sled Push"),
            Exercise(name="Rest", duration=180),
            Exercise(name="Round 2", duration=600, notes="Burpees + Rowing"),
            Exercise(name="Rest", duration=180),
            Exercise(name="Round 3", duration=600, notes="Farmers Carry + Lunges"),
            Exercise(name="Rest", duration=180),
            Exercise(name="Round 4", duration=600, notes=final_round),
            Exercise(name="Cool down", duration=600, notes="Walk and stretch"),
        ],
        duration=55,
        intensity=_work_intensity(phase),
    )


def _mock_day(
    day_number: int,
    week_number: int,
    phase: TrainingPhase,
    level: PlanLevel,
    weaknesses: Sequence[str],
) -> TrainingDay:
    if phase == TrainingPhase.TAPER:
        return TrainingDay(
            day_number=day_number,
            type=DayType.MOCK,
            title="Light Practice",
            description="Light practice of race transitions and movements",
            exercises=[
                Exercise(name="Warm-up", duration=900, notes="Thorough preparation"),
                Exercise(
                    name="Practice Session", duration=1800,
                    notes="Practice 2-3 stations with transitions",
                ),
                Exercise(name="Cool down", duration=600, notes="Stretch and recover"),
            ],
            duration=45,
            intensity=Intensity.LOW,
        )

    scope = _by_level(
        level,
        "Complete 4 stations + runs",
        "Complete 6 stations + runs",
        "Full HYROX simulation",
    )
    return TrainingDay(
        day_number=day_number,
        type=DayType.MOCK,
        title="Mock Race",
        description="Full or partial HYROX simulation to test fitness",
        exercises=[
            Exercise(name="Warm-up", duration=900, notes="Thorough preparation"),
            Exercise(name="Mock Race", duration=5400, notes=scope),
            Exercise(name="Cool down", duration=600, notes="Stretch and recover"),
        ],
        duration=90,
        intensity=Intensity.HIGH,
    )


def _rest_day(day_number: int) -> TrainingDay:
    return TrainingDay(
        day_number=day_number,
        type=DayType.REST,
        title="Rest Day",
        description="Active recovery or complete rest",
        exercises=[],
        duration=0,
        intensity=Intensity.LOW,
    )


DayGenerator = Callable[[int, int, TrainingPhase, PlanLevel, Sequence[str]], TrainingDay]

DAY_GENERATORS: Dict[DayType, DayGenerator] = {
    DayType.ENDURANCE: _endurance_day,
    DayType.STRENGTH: _strength_day,
    DayType.SKILL: _skill_day,
    DayType.COMBINED: _combined_day,
    DayType.MOCK: _mock_day,
}


def generate_week(
    week_number: int,
    total_weeks: int,
    level: PlanLevel,
    weaknesses: Sequence[str],
) -> TrainingWeek:
    """Build one 7-day week: training days from the rotation, then rest."""
    phase = phase_for_week(week_number, total_weeks)
    training_days = days_per_week(level)

    days = []
    for day_number in range(1, training_days + 1):
        day_type = DAY_ROTATION[(day_number - 1) % len(DAY_ROTATION)]
        days.append(
            DAY_GENERATORS[day_type](day_number, week_number, phase, level, weaknesses)
        )
    while len(days) < DAYS_IN_WEEK:
        days.append(_rest_day(len(days) + 1))

    return TrainingWeek(
        week_number=week_number,
        phase=phase,
        focus=_week_focus(phase, weaknesses),
        days=days,
    )


def generate_training_plan(
    level: Union[PlanLevel, str],
    weaknesses: Sequence[str],
    strengths: Optional[Sequence[str]] = None,
    weeks: int = 8,
    focus_areas: Optional[Sequence[str]] = None,
) -> TrainingPlan:
    """
    Generate a periodized training plan.

    Args:
        level: beginner, intermediate, advanced or elite
        weaknesses: Station keys, worst first; the first one drives the plan
        strengths: Station keys the athlete is strong on (informational)
        weeks: Plan length, 1-52
        focus_areas: Free-form focus areas (informational)

    Returns:
        TrainingPlan with one TrainingWeek per week

    Raises:
        PlanValidationError: On an unknown level or out-of-range weeks
    """
    try:
        plan_level = PlanLevel(level)
    except ValueError:
        raise PlanValidationError(
            message=f"Invalid level: {level}",
            field="level",
        )
    valid_weeks = isinstance(weeks, int) and not isinstance(weeks, bool)
    if not valid_weeks or not MIN_WEEKS <= weeks <= MAX_WEEKS:
        raise PlanValidationError(
            message=f"weeks must be between {MIN_WEEKS} and {MAX_WEEKS}",
            field="weeks",
        )

    weaknesses = list(weaknesses)
    plan_weeks = [
        generate_week(week_number, weeks, plan_level, weaknesses)
        for week_number in range(1, weeks + 1)
    ]

    primary = station_display_name(weaknesses[0]) if weaknesses else "General Fitness"
    logger.debug(
        f"Generated {weeks}-week {plan_level.value} plan "
        f"(weakness={primary}, strengths={len(strengths or [])}, "
        f"focus_areas={len(focus_areas or [])})"
    )

    return TrainingPlan(
        id=f"plan-{uuid.uuid4().hex}",
        name=f"{weeks}-Week {plan_level.value.capitalize()} Plan",
        duration=weeks,
        level=plan_level,
        goal=f"Improve {primary} and build overall HYROX fitness",
        weeks=plan_weeks,
        created_at=datetime.now(timezone.utc),
    )
