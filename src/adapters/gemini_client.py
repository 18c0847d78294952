"""Adaptador para el modelo generativo (Gemini REST `generateContent`).

Responsabilidad:
- Serializar un `PromptPayload` (texto o imagen inline) al cuerpo JSON de Gemini.
- Autenticar con la API key en el query string.
- Devolver el texto del primer candidato.

Dos variantes:
- `request`: estricta. Lanza `UpstreamError`; devuelve None si no hay candidatos.
  La usan las etapas que necesitan decidir su propio placeholder o fallar.
- `generate`: degradada. Nunca lanza; devuelve "No response from AI." o
  "Error: <mensaje>".
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from adapters.http_client import build_async_client, describe_http_error
from core.config import AppSettings
from core.domain.errors import UpstreamError
from core.domain.messages import NO_AI_RESPONSE
from core.domain.models import PromptPayload, build_generate_body


def first_candidate_text(data: Any) -> str | None:
    """`candidates[0].content.parts[0].text` o None si falta cualquier nivel."""

    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        return None
    part = parts[0]
    text = part.get("text") if isinstance(part, dict) else None
    if not isinstance(text, str) or not text:
        return None
    return text


def _describe_payload(payload: PromptPayload) -> str:
    text = getattr(payload, "text", None)
    if isinstance(text, str):
        preview = text.strip().splitlines()[0] if text.strip() else ""
        return f"text[{len(text)} chars] {preview[:60]!r}"
    return f"inline_data[{getattr(payload, 'mime_type', '?')}]"


class GeminiClient:
    """Cliente mínimo de `generateContent`.

    No guarda estado por request: varias corrutinas pueden usar la misma
    instancia (y su pool de conexiones) sin contaminarse.
    """

    def __init__(self, settings: AppSettings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        # Sin cliente inyectado se abre uno efímero por llamada.
        self._client = client

    @property
    def endpoint(self) -> str:
        return self._settings.generate_content_url()

    async def request(self, payload: PromptPayload) -> str | None:
        body = build_generate_body(payload)
        params = {"key": self._settings.gemini_api_key or ""}
        logger.info("Gemini request: {}", _describe_payload(payload))

        client = self._client or build_async_client(self._settings)
        try:
            resp = await client.post(self.endpoint, params=params, json=body)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as exc:
            message = describe_http_error(exc)
            logger.error("Gemini API error: {}", message)
            status = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
            raise UpstreamError(message, status_code=status) from exc
        except ValueError as exc:
            logger.error("Gemini API returned a non-JSON body: {}", exc)
            raise UpstreamError("Malformed response from the generative model.") from exc
        finally:
            if self._client is None:
                await client.aclose()

        logger.debug("Gemini raw response: {}", json.dumps(data, indent=2, ensure_ascii=False))
        return first_candidate_text(data)

    async def generate(self, payload: PromptPayload) -> str:
        try:
            text = await self.request(payload)
        except UpstreamError as exc:
            return f"Error: {exc}"
        return text or NO_AI_RESPONSE
