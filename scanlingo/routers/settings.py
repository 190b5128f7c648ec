"""
ScanLingo — Settings Router
=============================
    GET     /api/v1/settings   current preferences (defaults if none saved)
    PUT     /api/v1/settings   replace preferences
    DELETE  /api/v1/settings   reset to defaults
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from scanlingo.dependencies import get_settings_store
from scanlingo.settings_store import SettingsStore, UserPreferences

router = APIRouter(prefix="/api/v1/settings", tags=["Settings"])


@router.get("", response_model=UserPreferences, summary="Load preferences")
def read_settings(store: SettingsStore = Depends(get_settings_store)) -> UserPreferences:
    return store.get()


@router.put("", response_model=UserPreferences, summary="Save preferences")
def save_settings(
    preferences: UserPreferences,
    store: SettingsStore = Depends(get_settings_store),
) -> UserPreferences:
    try:
        store.set(preferences)
    except Exception as e:
        logger.error(f"[SettingsRouter] Save failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Could not save preferences: {e}",
        )
    return preferences


@router.delete("", response_model=UserPreferences, summary="Reset preferences")
def reset_settings(store: SettingsStore = Depends(get_settings_store)) -> UserPreferences:
    try:
        return store.reset()
    except Exception as e:
        logger.error(f"[SettingsRouter] Reset failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Could not reset preferences: {e}",
        )
