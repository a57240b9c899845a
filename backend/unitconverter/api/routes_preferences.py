"""Display preference endpoints for dark mode and font size."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from unitconverter.models.schemas import PreferencesUpdate
from unitconverter.core.preferences.preferences_store import (
    InvalidPreferencesError,
    PreferencesStore,
)
from unitconverter.core.display.shell import DisplayShell

logger = logging.getLogger(__name__)

router = APIRouter(tags=["preferences"])


def _store(request: Request) -> PreferencesStore:
    return request.app.state.preferences_store


def _shell(request: Request) -> DisplayShell:
    return request.app.state.display_shell


@router.get("/preferences")
async def get_preferences(request: Request):
    """Return the preferences currently applied by the display shell."""
    return _shell(request).config.as_dict()


@router.put("/preferences")
async def update_preferences(req: PreferencesUpdate, request: Request):
    """Store any provided preference and re-apply the display scale."""
    store = _store(request)
    shell = _shell(request)
    # Start from what the shell shows, not from disk: the file may be corrupt.
    prefs = shell.config.preferences
    try:
        if req.font_size is not None:
            prefs = store.set_font_size(req.font_size, base=prefs)
        if req.dark_mode is not None:
            prefs = store.set_dark_mode(req.dark_mode, base=prefs)
    except InvalidPreferencesError as exc:
        raise HTTPException(422, detail=str(exc))

    shell.apply_preferences(prefs)
    return shell.config.as_dict()


@router.post("/preferences/toggle-dark-mode")
async def toggle_dark_mode(request: Request):
    shell = _shell(request)
    prefs = _store(request).toggle_dark_mode(base=shell.config.preferences)
    shell.apply_preferences(prefs)
    logger.info("Switched to %s mode", "dark" if prefs.dark_mode else "light")
    return shell.config.as_dict()
