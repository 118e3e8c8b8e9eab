"""Shared fixtures for HYROX Analyzer tests."""

from typing import Dict, List, Optional

import pytest

from hyrox_analyzer.llm.providers import reset_llm_client
from hyrox_analyzer.models.race import (
    AthleteInfo,
    Gender,
    RUN_KEYS,
    STATION_KEYS,
    Splits,
)


def make_split_payload(
    runs: List[int],
    stations: Optional[Dict[str, int]] = None,
    station_time: int = 200,
) -> Dict[str, int]:
    """Build a camelCase splits dict from run times and station overrides."""
    payload = {key: time for key, time in zip(RUN_KEYS, runs)}
    for key in STATION_KEYS:
        payload[key] = (stations or {}).get(key, station_time)
    return payload


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def _reset_llm_singleton():
    """Never leak an LLM client between tests."""
    reset_llm_client()
    yield
    reset_llm_client()


@pytest.fixture
def male_athlete():
    return AthleteInfo(gender=Gender.MALE, age=32, weight=80, experience="2 races")


@pytest.fixture
def female_athlete():
    return AthleteInfo(gender=Gender.FEMALE)


@pytest.fixture
def elite_split_payload():
    """Runs 4:30, stations 3:20: 59:20 total, perfectly even pacing."""
    return make_split_payload([270] * 8, station_time=200)


@pytest.fixture
def elite_splits(elite_split_payload):
    return Splits.model_validate(elite_split_payload)


@pytest.fixture
def intermediate_split_payload():
    """
    Male intermediate race (70:50) with clear station outliers.

    Gaps vs intermediate midpoints: sledPush +70, wallBalls +60,
    sandbagLunges +30, burpeeBroadJump +20, rowing -10, farmersCarry -10,
    skiErg -20.
    """
    return make_split_payload(
        [300] * 8,
        stations={
            "skiErg": 250,
            "sledPush": 280,
            "burpeeBroadJump": 230,
            "rowing": 260,
            "farmersCarry": 200,
            "sandbagLunges": 300,
            "wallBalls": 330,
        },
    )


@pytest.fixture
def intermediate_splits(intermediate_split_payload):
    return Splits.model_validate(intermediate_split_payload)


@pytest.fixture
def fading_runs():
    """Each run 20 seconds slower than the one before."""
    return [270, 290, 310, 330, 350, 370, 390, 410]


@pytest.fixture
def analysis_request(elite_split_payload):
    """A complete request body for the analysis endpoints."""
    return {
        "splits": elite_split_payload,
        "athleteInfo": {"gender": "male", "age": 32},
    }


@pytest.fixture
def split_payload():
    """Factory for camelCase split payloads."""
    return make_split_payload
