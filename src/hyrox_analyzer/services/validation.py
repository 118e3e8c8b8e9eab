"""
Input validation for race analysis requests.

Everything here runs before any computation, so an invalid request never
produces a partial report.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import SplitsValidationError, ValidationError
from ..models.race import AthleteInfo, Gender, SPLIT_KEYS, Splits
from ..utils.time_format import parse_time


VALID_GENDERS = tuple(g.value for g in Gender)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_splits(raw: Any) -> Splits:
    """
    Validate the 15 race splits.

    Every missing key is reported, in race order, not just the first one.

    Args:
        raw: The "splits" object of a request

    Returns:
        Validated Splits

    Raises:
        SplitsValidationError: On missing, null, non-numeric or negative values
    """
    if not isinstance(raw, Mapping):
        raise SplitsValidationError(missing=list(SPLIT_KEYS))

    missing: List[str] = []
    invalid: List[str] = []
    values: Dict[str, int] = {}

    for key in SPLIT_KEYS:
        value = raw.get(key)
        if value is None:
            missing.append(key)
        elif not _is_number(value) or value < 0:
            invalid.append(key)
        else:
            values[key] = int(value)

    if missing or invalid:
        raise SplitsValidationError(missing=missing, invalid=invalid)

    return Splits.model_validate(values)


def validate_athlete_info(raw: Any) -> AthleteInfo:
    """
    Validate athlete information.

    Raises:
        ValidationError: If gender is missing or not male/female, or another
            field has the wrong type
    """
    if not isinstance(raw, Mapping):
        raise ValidationError(
            message="athleteInfo is required",
            field="athleteInfo",
        )

    gender = raw.get("gender")
    if gender not in VALID_GENDERS:
        raise ValidationError(
            message=f"Invalid gender: {gender}. Must be 'male' or 'female'",
            field="athleteInfo.gender",
        )

    try:
        return AthleteInfo.model_validate(dict(raw))
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(
            message=f"Invalid athleteInfo: {first.get('msg', 'invalid value')}",
            field=f"athleteInfo.{location}" if location else "athleteInfo",
        )


def validate_analysis_payload(payload: Any) -> Tuple[Splits, AthleteInfo]:
    """
    Validate a full analysis request body.

    Args:
        payload: Decoded JSON body with "splits" and "athleteInfo"

    Returns:
        (splits, athlete_info)

    Raises:
        ValidationError: If anything is missing or malformed
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(message="Request body must be a JSON object")

    splits = validate_splits(payload.get("splits"))
    athlete_info = validate_athlete_info(payload.get("athleteInfo"))
    return splits, athlete_info


def normalize_split_entries(entries: Mapping[str, Any]) -> Dict[str, Optional[int]]:
    """
    Turn hand-entered split values into seconds.

    Values may be integer seconds or "M:SS" / "H:MM:SS" strings. Anything
    that parses to zero or does not parse at all becomes None, so the
    validator reports it as missing.

    Example:
        >>> normalize_split_entries({"run1": "4:30", "skiErg": ""})["run1"]
        270
    """
    normalized: Dict[str, Optional[int]] = {}
    for key in SPLIT_KEYS:
        seconds = parse_time(entries.get(key))
        normalized[key] = seconds if seconds > 0 else None
    return normalized
