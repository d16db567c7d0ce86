"""Remote mirror API endpoints.

GET    /api/mirror/raw   - Show raw remote data (inspection only)
DELETE /api/mirror       - Delete the remote collection
GET    /api/mirror/logs  - Recent remote calls, newest first

Remote failures are reported in the outcome body, never as HTTP errors:
the mirror is not authoritative.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from tigerfive.api.app import get_app_state
from tigerfive.models.types import MirrorOutcome, OperationLogItem
from tigerfive.state import AppState

router = APIRouter(prefix="/mirror")


@router.get("/raw", response_model=MirrorOutcome)
def show_raw_data(state: AppState = Depends(get_app_state)) -> MirrorOutcome:
    """Fetch the remote collection as raw text. Local rounds are unchanged."""
    return state.mirror.fetch_raw()


@router.delete("", response_model=MirrorOutcome)
def delete_remote_data(state: AppState = Depends(get_app_state)) -> MirrorOutcome:
    """Delete every remotely mirrored round. Local rounds are unchanged."""
    return state.mirror.clear()


@router.get("/logs", response_model=list[OperationLogItem])
def get_logs(state: AppState = Depends(get_app_state)) -> list[OperationLogItem]:
    return [OperationLogItem(**asdict(entry)) for entry in state.operation_log.entries()]
