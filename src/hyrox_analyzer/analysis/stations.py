"""
Station gap analysis.

Compares each station time against the midpoint of the benchmark range
for the athlete's own level, then ranks stations into weaknesses and
strengths.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Mapping, Union

from ..benchmarks import get_station_benchmark
from ..models.analysis import StationStrength, StationWeakness
from ..models.race import Gender, PerformanceLevel, STATION_KEYS, station_display_name
from ..utils.time_format import format_time


logger = logging.getLogger(__name__)

MAX_WEAKNESSES = 3
MAX_STRENGTHS = 2


@dataclass(frozen=True)
class StationObservation:
    """A station time and its signed gap to the benchmark midpoint."""
    station: str
    display_name: str
    time: int
    benchmark: float
    gap: float  # positive = slower than benchmark

    @property
    def is_weakness(self) -> bool:
        return self.gap > 0


@dataclass(frozen=True)
class StationRanking:
    weaknesses: List[StationWeakness]
    strengths: List[StationStrength]
    observations: List[StationObservation]  # all benchmarked stations, worst gap first


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def observe_stations(
    station_times: Mapping[str, int],
    gender: Union[Gender, str],
    level: Union[PerformanceLevel, str],
) -> List[StationObservation]:
    """Compute gaps for every station that has a benchmark at this level.

    Stations without a benchmark entry are skipped. Order follows
    STATION_KEYS for known stations.
    """
    observations = []
    ordered = [k for k in STATION_KEYS if k in station_times]
    ordered += [k for k in station_times if k not in STATION_KEYS]

    for station in ordered:
        benchmark = get_station_benchmark(gender, level, station)
        if benchmark is None:
            logger.debug(f"No {level} benchmark for station {station}, skipping")
            continue

        time = station_times[station]
        observations.append(StationObservation(
            station=station,
            display_name=station_display_name(station),
            time=time,
            benchmark=benchmark.midpoint,
            gap=time - benchmark.midpoint,
        ))
    return observations


def rank_stations(
    station_times: Mapping[str, int],
    gender: Union[Gender, str],
    level: Union[PerformanceLevel, str],
) -> StationRanking:
    """
    Rank stations into weaknesses and strengths.

    Stations are sorted once by gap, largest first. Weaknesses are the
    first (up to 3) with a positive gap, i.e. worst first. Strengths are
    taken from the same ordering, so they appear closest-to-benchmark
    first rather than best first.

    Args:
        station_times: Station key -> seconds
        gender: Benchmark division
        level: The athlete's classified level

    Returns:
        StationRanking with weaknesses, strengths and all observations
    """
    observations = sorted(
        observe_stations(station_times, gender, level),
        key=lambda o: o.gap,
        reverse=True,
    )

    weaknesses = [
        StationWeakness(
            station=o.station,
            display_name=o.display_name,
            time=o.time,
            formatted_time=format_time(o.time),
            gap=o.gap,
            gap_percent=round_half_up(o.gap / o.time * 100) if o.time else 0,
        )
        for o in observations
        if o.is_weakness
    ][:MAX_WEAKNESSES]

    strengths = [
        StationStrength(
            station=o.station,
            display_name=o.display_name,
            time=o.time,
            formatted_time=format_time(o.time),
            advantage=abs(o.gap),
        )
        for o in observations
        if not o.is_weakness
    ][:MAX_STRENGTHS]

    return StationRanking(
        weaknesses=weaknesses,
        strengths=strengths,
        observations=observations,
    )
