"""Rounds API endpoints.

GET  /api/rounds          - List rounds, most recent first
POST /api/rounds          - Log a round
POST /api/rounds/preview  - Live Tiger Five total for an unsaved entry
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tigerfive.aggregation.summary import round_to_detail
from tigerfive.api.app import get_app_state
from tigerfive.core.errors import RoundValidationError
from tigerfive.entry.form import form_from_submission, preview
from tigerfive.models.types import (
    RoundCreatedResponse,
    RoundDetail,
    RoundSubmission,
    TigerFivePreview,
)
from tigerfive.state import AppState

router = APIRouter()


@router.get("/rounds", response_model=list[RoundDetail])
def list_rounds(
    limit: int | None = Query(default=None, ge=1),
    state: AppState = Depends(get_app_state),
) -> list[RoundDetail]:
    """List logged rounds.

    Args:
        limit: Optional maximum number of rounds.
        state: Application state (injected).

    Returns:
        Rounds ordered by date, most recent first.
    """
    rounds = state.records.list()
    if limit is not None:
        rounds = rounds[:limit]
    return [round_to_detail(r) for r in rounds]


@router.post("/rounds", response_model=RoundCreatedResponse, status_code=201)
def create_round(
    submission: RoundSubmission,
    state: AppState = Depends(get_app_state),
) -> RoundCreatedResponse:
    """Log a round.

    The round is stored locally first; the remote mirror runs in the
    background and its outcome only shows up in the mirror log.

    Raises:
        HTTPException: 400 if course or total score is missing, or the
            date is not YYYY-MM-DD.
    """
    form = form_from_submission(submission)

    try:
        result = state.submit(form)
    except RoundValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "missing": e.missing, "invalid": e.invalid},
        ) from e

    return RoundCreatedResponse(
        round=round_to_detail(result.round),
        persisted=result.persisted,
        warning=str(result.warning) if result.warning else None,
        message="Round logged successfully!",
    )


@router.post("/rounds/preview", response_model=TigerFivePreview)
def preview_round(submission: RoundSubmission) -> TigerFivePreview:
    """Tiger Five total and goal status before submitting."""
    result = preview(form_from_submission(submission))
    return TigerFivePreview(
        tigerFive=result.tiger_five,
        goal=result.goal,
        within_goal=result.within_goal,
    )
