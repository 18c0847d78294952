"""Contratos de los servicios externos y de los prompts de itinerario."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import PromptPayload


@runtime_checkable
class TextGenerator(Protocol):
    """Modelo generativo (texto o multimodal).

    - `request` es la variante estricta: lanza `UpstreamError` y devuelve None
      cuando la respuesta no trae candidatos.
    - `generate` es la variante degradada: siempre devuelve texto.
    """

    async def request(self, payload: PromptPayload) -> str | None:
        ...

    async def generate(self, payload: PromptPayload) -> str:
        ...


@runtime_checkable
class KnowledgeSource(Protocol):
    """Fuente de resúmenes enciclopédicos; nunca lanza, devuelve placeholders."""

    async def lookup(self, name: str) -> str:
        ...


@runtime_checkable
class ItineraryPromptStrategy(Protocol):
    """Forma de prompt para itinerarios (texto plano vs marcado HTML)."""

    name: str

    def build(self, destination: str, days: int) -> str:
        ...
