"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los adaptadores (Gemini/Wikipedia) reciben `AppSettings` explícitamente en su
  constructor; nada lee el entorno de forma global.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "landmark-lens"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "landmark-lens"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "landmark-lens"
    return Path.home() / ".config" / "landmark-lens"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        # Claves sin valor ("KEY" a secas) se descartan.
        existing = {k: v for k, v in dotenv_values(env_path, encoding="utf-8").items() if v is not None}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Landmark Lens user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters, fácil de construir
      a mano en tests apuntando a endpoints stub.
    """

    model_config = SettingsConfigDict(
        env_prefix="LANDMARK_LENS_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "LANDMARK_LENS_GEMINI_API_KEY", "GEMINI_API_KEY"),
        description="API key de Google Generative Language (se envía como ?key=).",
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com",
        min_length=8,
        description="Base URL del endpoint generateContent.",
    )
    gemini_api_version: str = Field(
        default="v1",
        min_length=1,
        description="Versión de la API de Gemini (v1, v1beta).",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash",
        min_length=1,
        description="Modelo usado para texto, visión e itinerarios.",
    )

    wikipedia_summary_url: str = Field(
        default="https://en.wikipedia.org/api/rest_v1/page/summary",
        min_length=8,
        description="Endpoint REST de resúmenes; el nombre se añade como segmento de path.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin límite.",
    )
    user_agent: str = Field(
        default="landmark-lens/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones salientes (Wikipedia lo exige).",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel mínimo de log (DEBUG incluye las respuestas crudas del modelo).",
    )

    def generate_content_url(self) -> str:
        base = self.gemini_base_url.rstrip("/")
        return f"{base}/{self.gemini_api_version}/models/{self.gemini_model}:generateContent"
