"""Race analysis API routes."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query

from ..deps import get_analysis_service
from ...benchmarks import benchmarks_to_dict
from ...exceptions import ValidationError
from ...services.analysis_service import AnalysisService
from ...services.validation import validate_analysis_payload


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def analyze_race(
    payload: Dict[str, Any] = Body(..., description="{splits, athleteInfo}"),
    service: AnalysisService = Depends(get_analysis_service),
) -> Dict[str, Any]:
    """
    Analyze a full race.

    Returns the level, score, station weaknesses and strengths, pacing,
    three training recommendations and a summary. The summary and
    recommendations are AI-generated when enrichment is available.
    """
    splits, athlete_info = validate_analysis_payload(payload)
    result = await service.analyze(splits, athlete_info)
    logger.info(
        f"Analyzed race: {result.formatted_total_time} "
        f"({result.level.value}, score {result.overall_score})"
    )
    return {"success": True, "data": result.to_dict()}


@router.post("/quick")
async def quick_analysis(
    payload: Dict[str, Any] = Body(...),
    service: AnalysisService = Depends(get_analysis_service),
) -> Dict[str, Any]:
    """Numbers-only analysis: level, station gaps and run drift."""
    splits, athlete_info = validate_analysis_payload(payload)
    result = service.quick_analysis(splits, athlete_info)
    return {"success": True, "data": result.to_dict()}


@router.get("/benchmarks")
async def get_benchmarks(
    gender: str = Query("male", description="male or female"),
) -> Dict[str, Any]:
    """Benchmark ranges per level for the given gender."""
    try:
        data = benchmarks_to_dict(gender)
    except ValueError:
        raise ValidationError(
            message=f"Invalid gender: {gender}. Must be 'male' or 'female'",
            field="gender",
        )
    return {"success": True, "data": data}
