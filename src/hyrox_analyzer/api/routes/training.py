"""Training plan API routes."""

from typing import Any, Dict

from fastapi import APIRouter

from ...models.training import TrainingPlanRequest
from ...services.training_plan import PLAN_TEMPLATES, generate_training_plan


router = APIRouter()


@router.post("")
async def create_training_plan(request: TrainingPlanRequest) -> Dict[str, Any]:
    """Generate a periodized training plan targeting the given weaknesses."""
    plan = generate_training_plan(
        level=request.level,
        weaknesses=request.weaknesses,
        strengths=request.strengths,
        weeks=request.weeks,
        focus_areas=request.focus_areas,
    )
    return {"success": True, "data": plan.to_dict()}


@router.get("/templates")
async def list_templates() -> Dict[str, Any]:
    """Available plan templates."""
    return {
        "success": True,
        "data": [template.to_dict() for template in PLAN_TEMPLATES],
    }
