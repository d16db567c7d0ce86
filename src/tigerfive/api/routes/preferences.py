"""Display preference endpoints.

GET  /api/preferences                    - Current preferences
PUT  /api/preferences                    - Replace preferences
POST /api/preferences/dark-mode/toggle   - Flip dark mode
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tigerfive.api.app import get_app_state
from tigerfive.models.types import Preferences
from tigerfive.state import AppState

router = APIRouter(prefix="/preferences")


@router.get("", response_model=Preferences)
def get_preferences(state: AppState = Depends(get_app_state)) -> Preferences:
    return Preferences(dark_mode=state.preferences.dark_mode)


@router.put("", response_model=Preferences)
def put_preferences(
    preferences: Preferences,
    state: AppState = Depends(get_app_state),
) -> Preferences:
    return Preferences(dark_mode=state.preferences.set_dark_mode(preferences.dark_mode))


@router.post("/dark-mode/toggle", response_model=Preferences)
def toggle_dark_mode(state: AppState = Depends(get_app_state)) -> Preferences:
    return Preferences(dark_mode=state.preferences.toggle_dark_mode())
