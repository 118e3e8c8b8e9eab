"""Training plan models."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class PlanLevel(str, Enum):
    """Athlete level a plan is built for."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class TrainingPhase(str, Enum):
    FOUNDATION = "foundation"
    BUILD = "build"
    INTENSIFY = "intensify"
    PEAK = "peak"
    TAPER = "taper"


class DayType(str, Enum):
    REST = "rest"
    SKILL = "skill"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    COMBINED = "combined"
    MOCK = "mock"


class Intensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Exercise(CamelModel):
    name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration: Optional[int] = Field(None, description="Seconds")
    rest: Optional[int] = Field(None, description="Rest between sets in seconds")
    notes: Optional[str] = None


class TrainingDay(CamelModel):
    day_number: int = Field(..., ge=1, le=7)
    type: DayType
    title: str
    description: str
    exercises: List[Exercise] = Field(default_factory=list)
    duration: int = Field(..., description="Planned minutes")
    intensity: Intensity


class TrainingWeek(CamelModel):
    week_number: int
    phase: TrainingPhase
    focus: str
    days: List[TrainingDay] = Field(..., min_length=7, max_length=7)


class TrainingPlan(CamelModel):
    id: str
    name: str
    duration: int = Field(..., description="Number of weeks")
    level: PlanLevel
    goal: str
    weeks: List[TrainingWeek]
    created_at: datetime


class TrainingPlanRequest(CamelModel):
    """Request body for plan generation."""
    level: PlanLevel
    weaknesses: List[str]
    strengths: List[str] = Field(default_factory=list)
    weeks: int = Field(default=8, ge=1, le=52)
    focus_areas: List[str] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "level": "intermediate",
                "weaknesses": ["sledPush", "wallBalls"],
                "strengths": ["rowing"],
                "weeks": 8,
            }
        }
    }


class PlanTemplate(CamelModel):
    id: str
    name: str
    description: str
    duration: int
    level: PlanLevel
    focus: str
