"""HYROX benchmark data for comparison and analysis.

Reference ranges per gender and performance level, all in seconds.
Tables are built once at import and are read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .models.race import Gender, PerformanceLevel, STATION_KEYS


@dataclass(frozen=True)
class BenchmarkRange:
    """A min/max time range in seconds."""
    min: int
    max: int

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2

    def to_dict(self) -> Dict[str, int]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class LevelBenchmarks:
    """Total-time and per-station ranges for one level."""
    total_time: BenchmarkRange
    stations: Mapping[str, BenchmarkRange]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalTime": self.total_time.to_dict(),
            "stations": {key: r.to_dict() for key, r in self.stations.items()},
        }


def _range(min_m: int, min_s: int, max_m: int, max_s: int) -> BenchmarkRange:
    return BenchmarkRange(min=min_m * 60 + min_s, max=max_m * 60 + max_s)


def _level(total: BenchmarkRange, **stations: BenchmarkRange) -> LevelBenchmarks:
    # Preserve race order regardless of keyword order
    ordered = {key: stations[key] for key in STATION_KEYS if key in stations}
    return LevelBenchmarks(total_time=total, stations=MappingProxyType(ordered))


MALE_BENCHMARKS: Mapping[PerformanceLevel, LevelBenchmarks] = MappingProxyType({
    PerformanceLevel.ELITE: _level(
        _range(55, 0, 60, 0),
        skiErg=_range(3, 0, 3, 30),
        sledPush=_range(2, 30, 3, 0),
        burpeeBroadJump=_range(2, 30, 3, 0),
        rowing=_range(3, 0, 3, 30),
        farmersCarry=_range(2, 30, 3, 0),
        sandbagLunges=_range(3, 0, 3, 30),
        wallBalls=_range(3, 0, 3, 30),
    ),
    PerformanceLevel.INTERMEDIATE: _level(
        _range(75, 0, 85, 0),
        skiErg=_range(4, 0, 5, 0),
        sledPush=_range(3, 0, 4, 0),
        burpeeBroadJump=_range(3, 0, 4, 0),
        rowing=_range(4, 0, 5, 0),
        farmersCarry=_range(3, 0, 4, 0),
        sandbagLunges=_range(4, 0, 5, 0),
        wallBalls=_range(4, 0, 5, 0),
    ),
    PerformanceLevel.BEGINNER: _level(
        _range(90, 0, 110, 0),
        skiErg=_range(5, 0, 6, 0),
        sledPush=_range(4, 0, 5, 30),
        burpeeBroadJump=_range(4, 0, 5, 30),
        rowing=_range(5, 0, 6, 0),
        farmersCarry=_range(4, 0, 5, 30),
        sandbagLunges=_range(5, 0, 6, 30),
        wallBalls=_range(5, 0, 6, 30),
    ),
})

# Women's ranges are shifted for physiological differences
FEMALE_BENCHMARKS: Mapping[PerformanceLevel, LevelBenchmarks] = MappingProxyType({
    PerformanceLevel.ELITE: _level(
        _range(60, 0, 65, 0),
        skiErg=_range(3, 15, 3, 45),
        sledPush=_range(2, 45, 3, 15),
        burpeeBroadJump=_range(2, 45, 3, 15),
        rowing=_range(3, 15, 3, 45),
        farmersCarry=_range(2, 45, 3, 15),
        sandbagLunges=_range(3, 15, 3, 45),
        wallBalls=_range(3, 15, 3, 45),
    ),
    PerformanceLevel.INTERMEDIATE: _level(
        _range(80, 0, 95, 0),
        skiErg=_range(4, 30, 5, 30),
        sledPush=_range(3, 30, 4, 30),
        burpeeBroadJump=_range(3, 30, 4, 30),
        rowing=_range(4, 30, 5, 30),
        farmersCarry=_range(3, 30, 4, 30),
        sandbagLunges=_range(4, 30, 5, 30),
        wallBalls=_range(4, 30, 5, 30),
    ),
    PerformanceLevel.BEGINNER: _level(
        _range(100, 0, 120, 0),
        skiErg=_range(6, 0, 7, 0),
        sledPush=_range(5, 0, 6, 30),
        burpeeBroadJump=_range(5, 0, 6, 30),
        rowing=_range(6, 0, 7, 0),
        farmersCarry=_range(5, 0, 6, 30),
        sandbagLunges=_range(6, 0, 7, 30),
        wallBalls=_range(6, 0, 7, 30),
    ),
})

# 1 km run reference ranges (not gender specific)
RUN_BENCHMARKS: Mapping[PerformanceLevel, BenchmarkRange] = MappingProxyType({
    PerformanceLevel.ELITE: _range(3, 30, 4, 0),
    PerformanceLevel.INTERMEDIATE: _range(4, 30, 5, 0),
    PerformanceLevel.BEGINNER: _range(5, 30, 7, 0),
})

# Fastest to slowest; classification walks this order
LEVEL_ORDER = (
    PerformanceLevel.ELITE,
    PerformanceLevel.INTERMEDIATE,
    PerformanceLevel.BEGINNER,
)

_BENCHMARKS_BY_GENDER = MappingProxyType({
    Gender.MALE: MALE_BENCHMARKS,
    Gender.FEMALE: FEMALE_BENCHMARKS,
})


def get_benchmarks(gender: Union[Gender, str]) -> Mapping[PerformanceLevel, LevelBenchmarks]:
    """Get the benchmark table for a gender.

    Raises:
        ValueError: If gender is not "male" or "female"
    """
    return _BENCHMARKS_BY_GENDER[Gender(gender)]


def get_station_benchmark(
    gender: Union[Gender, str],
    level: Union[PerformanceLevel, str],
    station: str,
) -> Optional[BenchmarkRange]:
    """Station range for a gender and level, or None if the table has no entry."""
    return get_benchmarks(gender)[PerformanceLevel(level)].stations.get(station)


def benchmarks_to_dict(gender: Union[Gender, str]) -> Dict[str, Any]:
    """Serialize a gender's table with level names as keys."""
    table = get_benchmarks(gender)
    result: Dict[str, Any] = {
        level.value: table[level].to_dict() for level in LEVEL_ORDER
    }
    result["runs"] = {level.value: RUN_BENCHMARKS[level].to_dict() for level in LEVEL_ORDER}
    return result
