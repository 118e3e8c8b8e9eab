"""Race input models: splits and athlete information."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from .base import CamelModel, to_camel


class Gender(str, Enum):
    """Benchmark division."""
    MALE = "male"
    FEMALE = "female"


class PerformanceLevel(str, Enum):
    """Performance tiers, fastest first."""
    ELITE = "elite"
    INTERMEDIATE = "intermediate"
    BEGINNER = "beginner"


# Station keys in race order
STATION_KEYS = (
    "skiErg",
    "sledPush",
    "burpeeBroadJump",
    "rowing",
    "farmersCarry",
    "sandbagLunges",
    "wallBalls",
)

RUN_KEYS = tuple(f"run{i}" for i in range(1, 9))

# Full race order: run1, skiErg, run2, sledPush, ..., run8
SPLIT_KEYS = tuple(
    key
    for pair in zip(RUN_KEYS, STATION_KEYS + ("",))
    for key in pair
    if key
)

STATION_DISPLAY_NAMES: Dict[str, str] = {
    "skiErg": "SkiErg",
    "sledPush": "Sled Push",
    "burpeeBroadJump": "Burpee Broad Jump",
    "rowing": "Rowing",
    "farmersCarry": "Farmer's Carry",
    "sandbagLunges": "Sandbag Lunges",
    "wallBalls": "Wall Balls",
}


def station_display_name(station: str) -> str:
    """Human-readable station name, falling back to the key itself."""
    return STATION_DISPLAY_NAMES.get(station, station)


class Splits(CamelModel):
    """
    The 15 timed segments of a HYROX race, in whole seconds.

    Python attributes are snake_case; the wire format uses the camelCase
    keys in SPLIT_KEYS.
    """

    run1: int = Field(..., ge=0)
    ski_erg: int = Field(..., ge=0)
    run2: int = Field(..., ge=0)
    sled_push: int = Field(..., ge=0)
    run3: int = Field(..., ge=0)
    burpee_broad_jump: int = Field(..., ge=0)
    run4: int = Field(..., ge=0)
    rowing: int = Field(..., ge=0)
    run5: int = Field(..., ge=0)
    farmers_carry: int = Field(..., ge=0)
    run6: int = Field(..., ge=0)
    sandbag_lunges: int = Field(..., ge=0)
    run7: int = Field(..., ge=0)
    wall_balls: int = Field(..., ge=0)
    run8: int = Field(..., ge=0)

    def get(self, key: str) -> int:
        """Look up a split by its camelCase key."""
        return getattr(self, _FIELD_BY_KEY[key])

    @property
    def run_times(self) -> List[int]:
        """The 8 run splits in order."""
        return [self.get(key) for key in RUN_KEYS]

    @property
    def station_times(self) -> Dict[str, int]:
        """Station key -> seconds, in race order."""
        return {key: self.get(key) for key in STATION_KEYS}

    @property
    def total_time(self) -> int:
        """Sum of all 15 splits."""
        return sum(self.get(key) for key in SPLIT_KEYS)


_FIELD_BY_KEY = {to_camel(name): name for name in Splits.model_fields}


class AthleteInfo(CamelModel):
    """Athlete details. Only gender affects the benchmark lookup."""

    gender: Gender
    name: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    weight: Optional[int] = Field(None, ge=0, description="Body weight in kg")
    experience: Optional[str] = None
