"""Render de prompts (Jinja2).

Por qué plantillas en adapters:
- El texto de los prompts es un detalle de integración con el modelo, no lógica
  del Core; se edita sin tocar Python.
- Mismo render para mismas entradas: los prompts son deterministas.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    # Texto plano: sin autoescape (el prompt HTML lleva <b>/<br> literales).
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
        undefined=StrictUndefined,
    )


def render_prompt(template_name: str, **context: Any) -> str:
    """Renderiza `templates/<template_name>` y recorta espacios extremos."""

    template = _get_env().get_template(template_name)
    return template.render(**context).strip()
