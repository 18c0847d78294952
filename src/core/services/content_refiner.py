"""Reformateo del extracto de Wikipedia a Markdown estructurado."""

from __future__ import annotations

from loguru import logger

from adapters.prompt_renderer import render_prompt
from core.domain.errors import UpstreamError
from core.domain.messages import REFINE_EMPTY, REFINE_ERROR
from core.domain.models import TextPrompt
from core.interfaces.generation import TextGenerator


def build_refine_prompt(name: str, summary: str) -> str:
    return render_prompt("refine.j2", name=name, summary=summary)


class ContentRefiner:
    """Pide al modelo que reescriba `summary` con encabezados y sin negritas.

    Degrada: si el modelo falla devuelve "Error refining Wikipedia data.".
    """

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def refine(self, name: str, summary: str) -> str:
        logger.info("Sending Wikipedia data to Gemini for reformatting...")
        prompt = TextPrompt(text=build_refine_prompt(name, summary))
        try:
            text = await self._generator.request(prompt)
        except UpstreamError as exc:
            logger.error("Gemini refinement error: {}", exc)
            return REFINE_ERROR
        return text or REFINE_EMPTY
