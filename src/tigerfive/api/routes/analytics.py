"""Analytics API endpoints.

GET /api/analytics/summary    - Full dashboard payload
GET /api/analytics/trends     - Recent vs previous window per category
GET /api/analytics/frequency  - Mistake totals per category
GET /api/analytics/chart      - Chronological Tiger Five series
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from tigerfive.aggregation import mistakes
from tigerfive.aggregation.summary import frequency_items, summarize_rounds, summarize_trends
from tigerfive.api.app import get_app_state
from tigerfive.models.types import (
    AnalyticsSummary,
    ChartPoint,
    MistakeFrequencyItem,
    TrendSummary,
)
from tigerfive.state import AppState

router = APIRouter(prefix="/analytics")


@router.get("/summary", response_model=AnalyticsSummary)
def get_summary(state: AppState = Depends(get_app_state)) -> AnalyticsSummary:
    """Analytics dashboard for all logged rounds."""
    return summarize_rounds(state.records.list())


@router.get("/trends", response_model=TrendSummary)
def get_trends(
    window: int = Query(default=mistakes.DEFAULT_TREND_WINDOW, ge=1),
    state: AppState = Depends(get_app_state),
) -> TrendSummary:
    """Percent change per Tiger Five category.

    ``trends`` is null when there is not enough history to compare.
    """
    return summarize_trends(state.records.list(), window)


@router.get("/frequency", response_model=list[MistakeFrequencyItem])
def get_frequency(state: AppState = Depends(get_app_state)) -> list[MistakeFrequencyItem]:
    return frequency_items(state.records.list())


@router.get("/chart", response_model=list[ChartPoint])
def get_chart(
    limit: int = Query(default=mistakes.DEFAULT_CHART_LIMIT, ge=1),
    state: AppState = Depends(get_app_state),
) -> list[ChartPoint]:
    return mistakes.chart_series(state.records.list(), limit)
