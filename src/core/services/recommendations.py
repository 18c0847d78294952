"""Recomendaciones de viaje en 13 categorías fijas."""

from __future__ import annotations

from loguru import logger

from adapters.prompt_renderer import render_prompt
from core.domain.errors import InvalidInputError, UpstreamError
from core.domain.messages import (
    CATEGORY_EMPTY,
    CATEGORY_ERROR,
    RECOMMENDATIONS_EMPTY,
    RECOMMENDATIONS_ERROR,
)
from core.domain.models import TextPrompt
from core.interfaces.generation import TextGenerator

# El orden importa: `category_info` se indexa 1..13 sobre esta tupla.
TRAVEL_CATEGORIES: tuple[str, ...] = (
    "Best Time to Visit",
    "How to Get There",
    "What to See and Do",
    "Local Tips and Advice",
    "Weather in the Area",
    "Best Restaurants and Cafes",
    "Best Hotels and Accommodations",
    "Best Activities and Attractions",
    "Best Shopping and Markets",
    "Best Nightlife and Entertainment",
    "Best Day Trips and Excursions",
    "Best Local Transportation and Getting Around",
    "Packing List and Essentials",
)


def build_recommendations_prompt(name: str) -> str:
    return render_prompt("recommendations.j2", name=name, categories=TRAVEL_CATEGORIES)


def category_for_number(category_number: int) -> str:
    """Nombre de la categoría 1..13; fuera de rango es `InvalidInputError`."""

    if isinstance(category_number, bool) or not isinstance(category_number, int):
        raise InvalidInputError("category number must be an integer")
    if not 1 <= category_number <= len(TRAVEL_CATEGORIES):
        raise InvalidInputError(
            f"category number must be between 1 and {len(TRAVEL_CATEGORIES)}, got {category_number}"
        )
    return TRAVEL_CATEGORIES[category_number - 1]


def build_category_prompt(name: str, category_number: int) -> str:
    return render_prompt("category.j2", name=name, category=category_for_number(category_number))


class RecommendationGenerator:
    """Genera la guía de viaje; nunca falla hacia fuera."""

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def recommend(self, name: str) -> str:
        logger.info("Fetching travel recommendations for {}", name)
        prompt = TextPrompt(text=build_recommendations_prompt(name))
        try:
            text = await self._generator.request(prompt)
        except UpstreamError as exc:
            logger.error("Travel recommendations error: {}", exc)
            return RECOMMENDATIONS_ERROR
        return text or RECOMMENDATIONS_EMPTY

    async def category_info(self, name: str, category_number: int) -> str:
        # Valida antes de cualquier llamada de red.
        prompt = TextPrompt(text=build_category_prompt(name, category_number))
        logger.info("Fetching category {} for {}", category_number, name)
        try:
            text = await self._generator.request(prompt)
        except UpstreamError as exc:
            logger.error("Category info error: {}", exc)
            return CATEGORY_ERROR
        return text or CATEGORY_EMPTY
