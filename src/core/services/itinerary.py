"""Generación de itinerarios día a día.

Dos formas de prompt, elegidas explícitamente por el punto de entrada:
- `PlainItineraryPrompt`: texto libre con bloques mañana/tarde/noche.
- `HtmlItineraryPrompt`: exige `<b>`/`<br>`; es la que usa la entrada pública.

A diferencia del resto de generadores, este NO degrada: cualquier fallo
upstream se registra y se relanza como `GenerationError`.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger
from pydantic import ValidationError

from adapters.prompt_renderer import render_prompt
from core.domain.errors import GenerationError, InvalidInputError, UpstreamError
from core.domain.messages import ITINERARY_EMPTY, ITINERARY_FAILED
from core.domain.models import ItineraryRequest, TextPrompt
from core.interfaces.generation import ItineraryPromptStrategy, TextGenerator


@dataclass(frozen=True)
class DayBlock:
    label: str
    hours: str
    meal: str


DAY_BLOCKS: tuple[DayBlock, ...] = (
    DayBlock(label="Morning", hours="9:00 AM - 12:00 PM", meal="Breakfast"),
    DayBlock(label="Afternoon", hours="12:00 PM - 5:00 PM", meal="Lunch"),
    DayBlock(label="Evening", hours="5:00 PM - 9:00 PM", meal="Dinner"),
)


class PlainItineraryPrompt:
    """Prompt de texto plano; un modelo sin candidatos cuenta como fallo."""

    name = "plain"
    empty_fallback: str | None = None

    def build(self, destination: str, days: int) -> str:
        return render_prompt("itinerary_plain.j2", destination=destination, days=days)


class HtmlItineraryPrompt:
    """Prompt con marcado HTML explícito (negritas y saltos de línea)."""

    name = "html"
    empty_fallback: str | None = ITINERARY_EMPTY

    def build(self, destination: str, days: int) -> str:
        return render_prompt("itinerary_html.j2", destination=destination, days=days, blocks=DAY_BLOCKS)


ITINERARY_STRATEGIES: dict[str, ItineraryPromptStrategy] = {
    PlainItineraryPrompt.name: PlainItineraryPrompt(),
    HtmlItineraryPrompt.name: HtmlItineraryPrompt(),
}


def get_itinerary_strategy(name: str) -> ItineraryPromptStrategy:
    try:
        return ITINERARY_STRATEGIES[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown itinerary format {name!r} (expected one of: {', '.join(sorted(ITINERARY_STRATEGIES))})"
        ) from None


class ItineraryGenerator:
    def __init__(self, generator: TextGenerator, default_strategy: ItineraryPromptStrategy | None = None) -> None:
        self._generator = generator
        self._default_strategy = default_strategy or ITINERARY_STRATEGIES["plain"]

    async def build_itinerary(
        self,
        destination: str,
        days: int,
        strategy: ItineraryPromptStrategy | None = None,
    ) -> str:
        try:
            request = ItineraryRequest(destination=destination, days=days)
        except ValidationError as exc:
            raise InvalidInputError(f"invalid itinerary request: {exc.errors()[0]['msg']}") from exc

        strategy = strategy or self._default_strategy
        # No se envía "role" en los prompts de itinerario.
        prompt = TextPrompt(text=strategy.build(request.destination, request.days), role=None)
        logger.info("Generating {}-day {} itinerary for {}", request.days, strategy.name, request.destination)

        try:
            text = await self._generator.request(prompt)
            if not text:
                fallback = getattr(strategy, "empty_fallback", None)
                if fallback is None:
                    raise UpstreamError("Malformed response: no candidates in itinerary response.")
                return fallback
            return text
        except UpstreamError as exc:
            logger.error("Error generating holiday plan: {}", exc)
            raise GenerationError(ITINERARY_FAILED) from exc
