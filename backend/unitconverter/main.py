"""Length Unit Converter — FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitconverter.config import Settings, settings as default_settings
from unitconverter.api.routes_convert import router as convert_router
from unitconverter.api.routes_formulas import router as formulas_router
from unitconverter.api.routes_preferences import router as preferences_router
from unitconverter.api.routes_panel import router as panel_router
from unitconverter.core.display.panels import ConversionPanel, FormulaPanel
from unitconverter.core.display.shell import DisplayConfig, DisplayShell
from unitconverter.core.preferences.preferences_store import (
    DisplayPreferences,
    FontSize,
    InvalidPreferencesError,
    PreferencesStore,
)

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _load_preferences(store: PreferencesStore) -> DisplayPreferences:
    try:
        return store.load()
    except InvalidPreferencesError as exc:
        logger.warning("%s; using defaults", exc)
        return DisplayPreferences()


def build_shell(cfg: Settings, store: PreferencesStore) -> DisplayShell:
    """Load preferences once and wire both panels into a new display shell."""
    config = DisplayConfig(
        preferences=_load_preferences(store),
        text_sizes={
            FontSize.SMALL: cfg.text_size_small,
            FontSize.MEDIUM: cfg.text_size_medium,
            FontSize.LARGE: cfg.text_size_large,
        },
    )
    return DisplayShell(config)


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or default_settings
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=cfg.app_name,
        version=VERSION,
        description="Convert lengths between metres, millimetres, miles and feet.",
        debug=cfg.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = PreferencesStore(cfg.preferences_path)
    shell = build_shell(cfg, store)
    app.state.preferences_store = store
    app.state.display_shell = shell
    app.state.conversion_panel = shell.register(ConversionPanel(
        input_value=cfg.default_input,
        from_unit=cfg.default_from_unit,
        to_unit=cfg.default_to_unit,
    ))
    app.state.formula_panel = shell.register(FormulaPanel())

    app.include_router(convert_router, prefix="/api")
    app.include_router(formulas_router, prefix="/api")
    app.include_router(preferences_router, prefix="/api")
    app.include_router(panel_router, prefix="/api")

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": VERSION}

    logger.info("%s ready (preferences at %s)", cfg.app_name, store.path)
    return app


app = create_app()
