from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Length Unit Converter"
    debug: bool = True
    log_level: str = "INFO"
    cors_origins: list[str] = []  # no bundled frontend; set UNITCONV_CORS_ORIGINS for one
    preferences_path: Path = Path.home() / ".unitconverter" / "preferences.json"
    default_input: str = "1"
    default_from_unit: str = "Metre"
    default_to_unit: str = "Mile"
    text_size_small: float = 14.0  # sp
    text_size_medium: float = 16.0  # sp
    text_size_large: float = 20.0  # sp

    class Config:
        env_prefix = "UNITCONV_"


settings = Settings()
