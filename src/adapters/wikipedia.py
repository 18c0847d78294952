"""Fuente de conocimiento: Wikipedia REST (`page/summary`).

La ausencia de conocimiento es un resultado válido: cualquier error (404,
red, JSON inválido) se convierte en un texto fijo y el pipeline continúa.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from loguru import logger

from adapters.http_client import build_async_client, describe_http_error
from core.config import AppSettings
from core.domain.messages import WIKIPEDIA_ERROR, WIKIPEDIA_NO_DETAILS


def summary_url(base_url: str, name: str) -> str:
    """URL del resumen con el nombre codificado como un único segmento de path."""

    return f"{base_url.rstrip('/')}/{quote(name, safe='')}"


class WikipediaKnowledgeService:
    """Busca el extracto de un artículo por nombre."""

    def __init__(self, settings: AppSettings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client

    async def lookup(self, name: str) -> str:
        url = summary_url(self._settings.wikipedia_summary_url, name)
        logger.info("Fetching Wikipedia data for: {}", name)

        client = self._client or build_async_client(self._settings)
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Wikipedia API error for {!r}: {}", name, describe_http_error(exc))
            return WIKIPEDIA_ERROR
        finally:
            if self._client is None:
                await client.aclose()

        extract = data.get("extract") if isinstance(data, dict) else None
        if not isinstance(extract, str) or not extract.strip():
            return WIKIPEDIA_NO_DETAILS
        return extract
