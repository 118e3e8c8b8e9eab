"""
Race Enrichment Agent using LangGraph.

This agent asks the LLM for a coaching narrative on top of an already
computed race analysis. It can only propose overrides for the
recommendations, the summary and the predicted improvement; level,
score, weaknesses, strengths and pacing are never touched.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, TypedDict

from langgraph.graph import StateGraph, END
from pydantic import ValidationError as PydanticValidationError

from ..llm.providers import get_llm_client, ModelType
from ..llm.prompts import RACE_ANALYSIS_SYSTEM, RACE_ANALYSIS_USER
from ..models.analysis import (
    EnrichmentOverrides,
    Recommendation,
    StationStrength,
    StationWeakness,
)
from ..models.race import (
    AthleteInfo,
    PerformanceLevel,
    SPLIT_KEYS,
    Splits,
    station_display_name,
)
from ..utils.time_format import format_time


logger = logging.getLogger(__name__)


# ============================================================================
# Enrichment contract
# ============================================================================

@dataclass(frozen=True)
class EnrichmentContext:
    """Everything the deterministic pipeline computed for one race."""
    splits: Splits
    athlete_info: AthleteInfo
    level: PerformanceLevel
    total_time: int
    weaknesses: Sequence[StationWeakness]
    strengths: Sequence[StationStrength]
    pacing_summary: str


class RaceEnricher(Protocol):
    """Anything that can turn an EnrichmentContext into overrides."""

    async def enrich(self, context: EnrichmentContext) -> Optional[EnrichmentOverrides]:
        ...


# ============================================================================
# Prompt formatting
# ============================================================================

def _format_athlete(athlete: AthleteInfo) -> str:
    return "\n".join([
        f"- Gender: {athlete.gender.value}",
        f"- Age: {athlete.age if athlete.age else 'Not specified'}",
        f"- Weight: {f'{athlete.weight}kg' if athlete.weight else 'Not specified'}",
        f"- Experience: {athlete.experience or 'Not specified'}",
    ])


def _format_splits(splits: Splits) -> str:
    lines = []
    station_number = 0
    for key in SPLIT_KEYS:
        time_text = format_time(splits.get(key))
        if key.startswith("run"):
            lines.append(f"- Run {key[3:]}: {time_text}")
        else:
            station_number += 1
            lines.append(
                f"- Station {station_number} ({station_display_name(key)}): {time_text}"
            )
    return "\n".join(lines)


def _format_weaknesses(weaknesses: Sequence[StationWeakness]) -> str:
    if not weaknesses:
        return "None - every station at or under benchmark"
    return "\n".join(
        f"{i}. {w.display_name}: {w.formatted_time} "
        f"(+{format_time(round(w.gap))} vs benchmark)"
        for i, w in enumerate(weaknesses, start=1)
    )


def _format_strengths(strengths: Sequence[StationStrength]) -> str:
    if not strengths:
        return "None"
    return "\n".join(
        f"{i}. {s.display_name}: {s.formatted_time} "
        f"({format_time(round(s.advantage))} faster)"
        for i, s in enumerate(strengths, start=1)
    )


def build_user_prompt(context: EnrichmentContext) -> str:
    """Render the race context into the user prompt."""
    return RACE_ANALYSIS_USER.format(
        athlete_info=_format_athlete(context.athlete_info),
        total_time=format_time(context.total_time),
        level=context.level.value,
        splits=_format_splits(context.splits),
        weaknesses=_format_weaknesses(context.weaknesses),
        strengths=_format_strengths(context.strengths),
        pacing_summary=context.pacing_summary,
    )


# ============================================================================
# Response validation
# ============================================================================

def _non_empty_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _parse_recommendations(raw: Any) -> Optional[List[Recommendation]]:
    """
    Accept exactly three well-formed recommendations with priorities 1-3.

    Anything else returns None so the deterministic list is kept.
    """
    if not isinstance(raw, list) or len(raw) != 3:
        return None

    parsed = []
    for item in raw:
        if not isinstance(item, dict):
            return None
        if not all(
            _non_empty_text(item.get(field))
            for field in ("area", "suggestion", "expectedImprovement")
        ):
            return None
        try:
            parsed.append(Recommendation.model_validate(item))
        except PydanticValidationError:
            return None

    if sorted(rec.priority for rec in parsed) != [1, 2, 3]:
        return None
    return sorted(parsed, key=lambda rec: rec.priority)


def overrides_from_response(payload: Dict[str, Any]) -> EnrichmentOverrides:
    """Keep only the valid, overridable fields of an LLM response."""
    return EnrichmentOverrides(
        recommendations=_parse_recommendations(payload.get("recommendations")),
        ai_summary=_non_empty_text(payload.get("summary")),
        predicted_improvement=_non_empty_text(payload.get("predictedImprovement")),
    )


# ============================================================================
# State Definition
# ============================================================================

class EnrichmentState(TypedDict):
    """State for the enrichment workflow."""
    # Input
    race_context: EnrichmentContext

    # Processing state
    enrichment_id: str
    status: str
    error: Optional[str]

    # Prompts and LLM output
    user_prompt: Optional[str]
    raw_response: Optional[Dict[str, Any]]

    # Final result
    overrides: Optional[EnrichmentOverrides]


# ============================================================================
# Enrichment Agent
# ============================================================================

class RaceEnrichmentAgent:
    """
    LangGraph-based race enrichment agent.

    This agent:
    1. Renders the computed race context into a prompt
    2. Requests a JSON completion
    3. Validates the response field by field
    4. Returns EnrichmentOverrides, or None when nothing usable came back
    """

    def __init__(self, llm_client=None, model: ModelType = ModelType.SMART):
        """
        Initialize the enrichment agent.

        Args:
            llm_client: Optional LLM client (uses default if not provided)
            model: Model type used for the completion
        """
        self._llm_client = llm_client
        self.model = model
        self._graph = self._build_graph()

    @property
    def llm_client(self):
        """Lazy-load LLM client."""
        if self._llm_client is None:
            self._llm_client = get_llm_client()
        return self._llm_client

    def _build_graph(self) -> StateGraph:
        workflow = StateGraph(EnrichmentState)

        workflow.add_node("prepare_prompt", self._prepare_prompt)
        workflow.add_node("generate", self._generate)
        workflow.add_node("parse_response", self._parse_response)
        workflow.add_node("handle_error", self._handle_error)

        workflow.set_entry_point("prepare_prompt")
        workflow.add_conditional_edges(
            "prepare_prompt",
            self._check_success,
            {
                "success": "generate",
                "error": "handle_error",
            }
        )
        workflow.add_conditional_edges(
            "generate",
            self._check_success,
            {
                "success": "parse_response",
                "error": "handle_error",
            }
        )
        workflow.add_conditional_edges(
            "parse_response",
            self._check_success,
            {
                "success": END,
                "error": "handle_error",
            }
        )
        workflow.add_edge("handle_error", END)

        return workflow.compile()

    def _check_success(self, state: EnrichmentState) -> str:
        return "error" if state.get("error") else "success"

    async def _prepare_prompt(self, state: EnrichmentState) -> Dict[str, Any]:
        try:
            return {
                **state,
                "user_prompt": build_user_prompt(state["race_context"]),
                "status": "prepared",
            }
        except Exception as e:
            return {
                **state,
                "error": f"Failed to build prompt: {e}",
                "status": "failed",
            }

    async def _generate(self, state: EnrichmentState) -> Dict[str, Any]:
        """Request the JSON completion."""
        try:
            response = await self.llm_client.completion_json(
                system=RACE_ANALYSIS_SYSTEM,
                user=state["user_prompt"],
                model=self.model,
            )
            return {
                **state,
                "raw_response": response,
                "status": "generated",
            }
        except Exception as e:
            return {
                **state,
                "error": f"Failed to generate enrichment: {e}",
                "status": "failed",
            }

    async def _parse_response(self, state: EnrichmentState) -> Dict[str, Any]:
        raw = state.get("raw_response")
        if not isinstance(raw, dict):
            return {
                **state,
                "error": "LLM response is not a JSON object",
                "status": "failed",
            }

        overrides = overrides_from_response(raw)
        if overrides.is_empty:
            return {
                **state,
                "error": "LLM response contained no usable fields",
                "status": "failed",
            }
        if overrides.recommendations is None and raw.get("recommendations") is not None:
            logger.info(
                f"[{state['enrichment_id']}] Ignoring malformed recommendations from LLM"
            )

        return {
            **state,
            "overrides": overrides,
            "status": "completed",
        }

    async def _handle_error(self, state: EnrichmentState) -> Dict[str, Any]:
        logger.warning(
            f"[{state['enrichment_id']}] Enrichment failed: {state.get('error', 'Unknown error')}"
        )
        return {
            **state,
            "overrides": None,
            "status": "failed",
        }

    async def enrich(self, context: EnrichmentContext) -> Optional[EnrichmentOverrides]:
        """
        Produce overrides for one analyzed race.

        Args:
            context: The computed race context

        Returns:
            EnrichmentOverrides, or None if the LLM gave nothing usable
        """
        initial_state: EnrichmentState = {
            "race_context": context,
            "enrichment_id": uuid.uuid4().hex[:8],
            "status": "initialized",
            "error": None,
            "user_prompt": None,
            "raw_response": None,
            "overrides": None,
        }

        final_state = await self._graph.ainvoke(initial_state)
        return final_state.get("overrides")
