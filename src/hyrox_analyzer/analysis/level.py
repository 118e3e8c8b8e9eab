"""Performance level classification from total race time."""

from typing import Union

from ..benchmarks import LEVEL_ORDER, get_benchmarks
from ..models.race import Gender, PerformanceLevel


def determine_level(total_time: int, gender: Union[Gender, str]) -> PerformanceLevel:
    """
    Classify a finish time into a performance level.

    Walks the levels fastest to slowest and returns the first whose
    total-time ceiling is not exceeded. Times slower than every ceiling
    saturate at beginner.

    Args:
        total_time: Sum of all splits in seconds
        gender: Benchmark division

    Returns:
        The matching PerformanceLevel
    """
    benchmarks = get_benchmarks(gender)
    for level in LEVEL_ORDER:
        if total_time <= benchmarks[level].total_time.max:
            return level
    return LEVEL_ORDER[-1]
