"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno `SOLID_*` (pydantic-settings) para que la
  CLI y el catálogo de ejemplos lean los mismos valores validados.
- El `.env` de usuario vive en el directorio de la app que resuelve Typer.
"""

from __future__ import annotations

import random
from pathlib import Path

import typer
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "solid-playground"


def get_user_env_file() -> Path:
    """`.env` en el directorio de configuración por usuario (XDG, APPDATA, ...)."""

    return Path(typer.get_app_dir(APP_NAME)) / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Values come from `SOLID_*` environment variables, then the project `.env`,
    then the user-level `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    seed: int | None = Field(
        default=None,
        description="Seed for the random source behind loyalty coin flips.",
    )
    show_problems: bool = Field(
        default=True,
        description="Print the violating implementation before the corrected one.",
    )
    loyalty_discount_percent: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Premium discount granted to loyal insurance customers.",
    )
    in_house_discount_multiplier: float = Field(
        default=1.5,
        gt=0,
        description="Factor applied to the base discount of in-house products.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Default directory for exported transcripts.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log level: {value}")
        return level

    def build_random(self) -> random.Random:
        """Random source for the examples; reproducible when `seed` is set."""

        return random.Random(self.seed)

    def resolve_report_path(self, path: Path) -> Path:
        """Relative export paths land under `reports_dir`; absolute ones are kept."""

        if path.is_absolute():
            return path
        return self.reports_dir / path
