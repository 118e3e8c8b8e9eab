"""
Analysis service for HYROX race reports.

Handles:
- Deterministic report generation (level, stations, pacing, score)
- Optional AI enrichment under a hard timeout
- Quick numeric snapshots without recommendations
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import asyncio
import logging

from .base import BaseService
from .validation import validate_analysis_payload
from ..agents.enrichment_agent import EnrichmentContext, RaceEnricher, RaceEnrichmentAgent
from ..analysis import (
    PacingReport,
    StationRanking,
    analyze_pacing,
    calculate_overall_score,
    determine_level,
    rank_stations,
)
from ..config import Settings, get_settings
from ..exceptions import AnalysisError, HyroxAnalyzerError, LLMError
from ..models.analysis import (
    AnalysisResult,
    EnrichmentOverrides,
    QuickAnalysisResult,
    QuickRun,
    RunSummary,
    StationComparison,
)
from ..models.race import AthleteInfo, PerformanceLevel, Splits
from ..recommendations import (
    DEFAULT_PREDICTED_IMPROVEMENT,
    explain_race,
    generate_recommendations,
)
from ..utils.time_format import format_time


@dataclass(frozen=True)
class RaceComputation:
    """Intermediate results shared by the full and quick analyses."""
    total_time: int
    level: PerformanceLevel
    ranking: StationRanking
    pacing: PacingReport


class AnalysisService(BaseService):
    """
    Service for race analysis operations.

    The deterministic pipeline always runs to completion. Enrichment, when
    configured, may only replace recommendations, the summary and the
    predicted improvement, and any failure falls back to the deterministic
    values.
    """

    DEFAULT_ENRICHMENT_TIMEOUT_SECONDS = 8.0

    def __init__(
        self,
        enricher: Optional[RaceEnricher] = None,
        enrichment_timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(logger=logger)
        self._enricher = enricher
        self._enrichment_timeout = (
            enrichment_timeout
            if enrichment_timeout is not None
            else self.DEFAULT_ENRICHMENT_TIMEOUT_SECONDS
        )

    @property
    def enrichment_enabled(self) -> bool:
        return self._enricher is not None

    # ------------------------------------------------------------------
    # Deterministic pipeline
    # ------------------------------------------------------------------

    def _compute(self, splits: Splits, athlete_info: AthleteInfo) -> RaceComputation:
        try:
            total_time = splits.total_time
            level = determine_level(total_time, athlete_info.gender)
            return RaceComputation(
                total_time=total_time,
                level=level,
                ranking=rank_stations(splits.station_times, athlete_info.gender, level),
                pacing=analyze_pacing(splits.run_times),
            )
        except HyroxAnalyzerError:
            raise
        except Exception as e:
            self.logger.exception(f"Race computation failed: {e}")
            raise AnalysisError()

    def _assemble(self, computation: RaceComputation) -> AnalysisResult:
        ranking = computation.ranking
        pacing = computation.pacing
        return AnalysisResult(
            level=computation.level,
            overall_score=calculate_overall_score(
                computation.level, pacing.consistency_bonus
            ),
            total_time=computation.total_time,
            formatted_total_time=format_time(computation.total_time),
            weaknesses=ranking.weaknesses,
            strengths=ranking.strengths,
            pacing_analysis=pacing.analysis,
            recommendations=generate_recommendations(ranking.weaknesses),
            ai_summary=explain_race(
                computation.level, ranking.weaknesses, pacing.analysis.summary
            ),
            predicted_improvement=DEFAULT_PREDICTED_IMPROVEMENT,
        )

    def build_report(self, splits: Splits, athlete_info: AthleteInfo) -> AnalysisResult:
        """
        Build the deterministic race report.

        Args:
            splits: Validated race splits
            athlete_info: Validated athlete information

        Returns:
            AnalysisResult with templated summary and catalog recommendations
        """
        return self._assemble(self._compute(splits, athlete_info))

    # ------------------------------------------------------------------
    # Enrichment
    # ------------------------------------------------------------------

    async def _fetch_overrides(
        self,
        context: EnrichmentContext,
    ) -> Optional[EnrichmentOverrides]:
        """Call the enricher once, never letting a failure escape."""
        try:
            return await asyncio.wait_for(
                self._enricher.enrich(context),
                timeout=self._enrichment_timeout,
            )
        except asyncio.TimeoutError:
            self.logger.warning(
                f"Enrichment timed out after {self._enrichment_timeout}s, "
                "using deterministic report"
            )
        except LLMError as e:
            self.logger.warning(
                f"Enrichment unavailable ({e.code.value}): {e.message}, "
                "using deterministic report"
            )
        except Exception as e:
            self.logger.warning(
                f"Enrichment failed: {e}, using deterministic report",
                exc_info=True,
            )
        return None

    def _apply_overrides(
        self,
        report: AnalysisResult,
        overrides: Optional[EnrichmentOverrides],
    ) -> AnalysisResult:
        if overrides is None:
            return report
        if not isinstance(overrides, EnrichmentOverrides):
            self.logger.warning(
                f"Ignoring enrichment result of type {type(overrides).__name__}"
            )
            return report

        update: Dict[str, Any] = {}
        recommendations = overrides.recommendations
        if recommendations is not None:
            if len(recommendations) == 3:
                update["recommendations"] = list(recommendations)
            else:
                self.logger.warning(
                    f"Ignoring {len(recommendations)} enrichment recommendations, expected 3"
                )
        if overrides.ai_summary:
            update["ai_summary"] = overrides.ai_summary
        if overrides.predicted_improvement:
            update["predicted_improvement"] = overrides.predicted_improvement

        return report.model_copy(update=update) if update else report

    async def analyze(self, splits: Splits, athlete_info: AthleteInfo) -> AnalysisResult:
        """
        Analyze a race, enriching the narrative when an enricher is set.

        Args:
            splits: Validated race splits
            athlete_info: Validated athlete information

        Returns:
            AnalysisResult

        Raises:
            AnalysisError: If the deterministic pipeline fails
        """
        computation = self._compute(splits, athlete_info)
        report = self._assemble(computation)

        if self._enricher is None:
            return report

        context = EnrichmentContext(
            splits=splits,
            athlete_info=athlete_info,
            level=computation.level,
            total_time=computation.total_time,
            weaknesses=computation.ranking.weaknesses,
            strengths=computation.ranking.strengths,
            pacing_summary=computation.pacing.analysis.summary,
        )
        overrides = await self._fetch_overrides(context)
        return self._apply_overrides(report, overrides)

    async def analyze_payload(self, payload: Any) -> AnalysisResult:
        """Validate a raw request body, then analyze it."""
        splits, athlete_info = validate_analysis_payload(payload)
        return await self.analyze(splits, athlete_info)

    # ------------------------------------------------------------------
    # Quick analysis
    # ------------------------------------------------------------------

    def quick_analysis(self, splits: Splits, athlete_info: AthleteInfo) -> QuickAnalysisResult:
        """
        Numbers-only snapshot: level, station gaps and run drift.

        Stations are listed fastest time first.
        """
        computation = self._compute(splits, athlete_info)

        stations = [
            StationComparison(
                station=o.station,
                display_name=o.display_name,
                time=o.time,
                formatted_time=format_time(o.time),
                benchmark=o.benchmark,
                gap=o.gap,
            )
            for o in sorted(computation.ranking.observations, key=lambda o: o.time)
        ]

        runs = splits.run_times
        pacing = computation.pacing
        run_analysis = RunSummary(
            runs=[
                QuickRun(
                    run_number=point.run_number,
                    time=point.time,
                    formatted_time=point.formatted_time,
                    vs_first_run=point.vs_first_run,
                )
                for point in pacing.analysis.runs
            ],
            first_run=runs[0],
            last_run=runs[-1],
            degradation=pacing.degradation,
            average=pacing.average_run,
        )

        return QuickAnalysisResult(
            total_time=computation.total_time,
            formatted_total_time=format_time(computation.total_time),
            level=computation.level,
            stations=stations,
            run_analysis=run_analysis,
        )


def create_analysis_service(settings: Optional[Settings] = None) -> AnalysisService:
    """
    Build an AnalysisService from settings.

    Enrichment is wired in only when it is enabled and an OpenAI key is
    configured.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(__name__)

    enricher: Optional[RaceEnricher] = None
    if settings.enrichment_enabled and settings.openai_api_key:
        enricher = RaceEnrichmentAgent()
    elif settings.enrichment_enabled:
        logger.info("OPENAI_API_KEY not set, race reports will not be AI-enriched")

    return AnalysisService(
        enricher=enricher,
        enrichment_timeout=settings.enrichment_timeout_seconds,
    )
