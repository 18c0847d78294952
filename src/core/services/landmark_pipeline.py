"""Orquestación del pipeline de landmarks.

Encadena servicios externos independientes (modelo generativo + Wikipedia) en
una única respuesta:

    texto:      Gemini
    nombre:     Wikipedia -> refinado (Gemini) -> recomendaciones (Gemini)
    imagen:     validar data URI -> visión (Gemini) -> extractor -> [nombre]
    itinerario: prompt HTML -> Gemini

Las etapas se ejecutan en secuencia, sin fan-out. Cada etapa de la ruta de
conocimiento degrada por su cuenta, así que estas entradas siempre devuelven
texto. La ruta de itinerario es la excepción: falla en voz alta con
`GenerationError`.

La instancia no guarda estado por request; solo colaboradores inmutables y
(opcionalmente) un `httpx.AsyncClient` compartido.
"""

from __future__ import annotations

from types import TracebackType

import httpx
from loguru import logger

from adapters.gemini_client import GeminiClient
from adapters.http_client import build_async_client
from adapters.wikipedia import WikipediaKnowledgeService
from core.config import AppSettings
from core.domain.errors import GenerationError, InvalidInputError, NoResultError, UpstreamError
from core.domain.messages import (
    IMAGE_ERROR_PREFIX,
    INVALID_IMAGE_FORMAT,
    ITINERARY_FAILED,
    KNOWLEDGE_ERROR,
    NO_AI_RESPONSE,
    NO_LANDMARK_DETECTED,
)
from core.domain.models import (
    ImageQuery,
    InlineDataPrompt,
    KnowledgeAnswer,
    LandmarkRecognition,
    TextQuery,
)
from core.interfaces.extraction import NameExtractionStrategy
from core.interfaces.generation import ItineraryPromptStrategy, KnowledgeSource, TextGenerator
from core.services.content_refiner import ContentRefiner
from core.services.itinerary import HtmlItineraryPrompt, ItineraryGenerator, PlainItineraryPrompt
from core.services.landmark_extractor import DeterminerPhraseExtractor
from core.services.recommendations import RecommendationGenerator


class LandmarkPipeline:
    """Punto de entrada único para la aplicación que lo rodea (CLI/UI)."""

    def __init__(
        self,
        *,
        generator: TextGenerator,
        knowledge: KnowledgeSource,
        extractor: NameExtractionStrategy | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._generator = generator
        self._knowledge = knowledge
        self._extractor = extractor or DeterminerPhraseExtractor()
        self._refiner = ContentRefiner(generator)
        self._recommender = RecommendationGenerator(generator)
        self._itineraries = ItineraryGenerator(generator)
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        extractor: NameExtractionStrategy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "LandmarkPipeline":
        """Construye Gemini + Wikipedia sobre un cliente HTTP compartido.

        Usar como `async with LandmarkPipeline.from_settings(s) as pipeline:`
        para cerrar el pool de conexiones al terminar.
        """

        client = build_async_client(settings, transport=transport)
        return cls(
            generator=GeminiClient(settings, client=client),
            knowledge=WikipediaKnowledgeService(settings, client=client),
            extractor=extractor,
            http_client=client,
        )

    async def __aenter__(self) -> "LandmarkPipeline":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    # -- sendText ---------------------------------------------------------

    async def handle_text_query(self, text: str) -> str:
        logger.info("Sending text query: {!r}", text)
        try:
            return await self._generator.generate(TextQuery(value=text).to_prompt())
        except Exception as exc:
            logger.exception("Unexpected error in text query")
            return f"Error: {exc}"

    # -- fetchKnowledge ---------------------------------------------------

    async def build_knowledge_answer(self, name: str) -> KnowledgeAnswer:
        """Wikipedia -> refinado -> recomendaciones, en secuencia.

        Cada etapa degrada internamente; un fallo nunca corta la cadena.
        """

        summary = await self._knowledge.lookup(name)
        refined = await self._refiner.refine(name, summary)
        recommendations = await self._recommender.recommend(name)
        return KnowledgeAnswer(
            subject=name,
            summary=summary,
            refined=refined,
            recommendations=recommendations,
        )

    async def handle_knowledge_request(self, name: str) -> str:
        try:
            answer = await self.build_knowledge_answer(name)
        except Exception:
            logger.exception("Error fetching knowledge for {!r}", name)
            return KNOWLEDGE_ERROR
        return answer.render()

    # -- sendImage --------------------------------------------------------

    async def _identify(self, query: ImageQuery) -> LandmarkRecognition:
        logger.info("Sending image data ({}) to Gemini...", query.mime_type)
        description = await self._generator.request(InlineDataPrompt.from_query(query))
        description = description or NO_AI_RESPONSE
        logger.info("Gemini identified: {!r}", description[:200])

        name = self._extractor.extract(description).strip()
        if not name:
            raise NoResultError("No recognizable landmark detected")
        return LandmarkRecognition(landmark_name=name, description=description)

    async def recognize_landmark(self, data_uri: str) -> LandmarkRecognition:
        """Variante fail-fast: lanza `InvalidInputError`, `UpstreamError` o `NoResultError`."""

        query = ImageQuery.from_data_uri(data_uri)
        return await self._identify(query)

    async def handle_image_query(self, data_uri: str) -> str:
        try:
            query = ImageQuery.from_data_uri(data_uri)
        except InvalidInputError as exc:
            logger.warning("Invalid image format: {}", exc)
            return INVALID_IMAGE_FORMAT

        try:
            recognition = await self._identify(query)
            answer = await self.build_knowledge_answer(recognition.landmark_name)
        except NoResultError:
            return NO_LANDMARK_DETECTED
        except UpstreamError as exc:
            logger.error("Error processing image: {}", exc)
            return f"{IMAGE_ERROR_PREFIX} {exc}"
        except Exception as exc:
            logger.exception("Unexpected error processing image")
            return f"{IMAGE_ERROR_PREFIX} {exc}"
        return answer.render()

    # -- getCategoryInfo --------------------------------------------------

    async def category_info(self, name: str, category_number: int) -> str:
        return await self._recommender.category_info(name, category_number)

    # -- generateItinerary ------------------------------------------------

    async def _itinerary(self, destination: str, days: int, strategy: ItineraryPromptStrategy) -> str:
        try:
            return await self._itineraries.build_itinerary(destination, days, strategy=strategy)
        except (GenerationError, InvalidInputError):
            raise
        except Exception as exc:
            logger.exception("Error generating holiday plan")
            raise GenerationError(ITINERARY_FAILED) from exc

    async def handle_itinerary_request(self, destination: str, days: int) -> str:
        return await self._itinerary(destination, days, HtmlItineraryPrompt())

    async def plain_itinerary(self, destination: str, days: int) -> str:
        """Itinerario en texto plano (sin marcado HTML); mismo contrato fail-fast."""

        return await self._itinerary(destination, days, PlainItineraryPrompt())
