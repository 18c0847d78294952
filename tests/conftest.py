import json
from typing import Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.errors import UpstreamError
from core.domain.models import InlineDataPrompt, TextPrompt

# 1x1 transparent PNG
PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
PNG_DATA_URI = f"data:image/png;base64,{PNG_B64}"


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        gemini_api_key="test-key",
        gemini_base_url="https://gemini.test",
        gemini_api_version="v1",
        gemini_model="gemini-1.5-flash",
        wikipedia_summary_url="https://wiki.test/api/rest_v1/page/summary",
    )


class StubGenerator:
    """Generador determinista: responde según el tipo/contenido del prompt."""

    def __init__(
        self,
        respond: Callable[[object], str | None] | None = None,
        *,
        fail_on: Callable[[object], bool] | None = None,
    ) -> None:
        self._respond = respond or self._default
        self._fail_on = fail_on or (lambda payload: False)
        self.calls: list[object] = []

    @staticmethod
    def _default(payload: object) -> str | None:
        if isinstance(payload, InlineDataPrompt):
            return "This is a photo of the Eiffel Tower in Paris, France."
        text = payload.text
        if text.startswith("Rewrite the following information"):
            return "## Refined\n\nRefined body."
        if "travel recommendations" in text:
            return "- Go in spring."
        return f"echo: {text}"

    async def request(self, payload: object) -> str | None:
        self.calls.append(payload)
        if self._fail_on(payload):
            raise UpstreamError("upstream exploded")
        return self._respond(payload)

    async def generate(self, payload: object) -> str:
        try:
            text = await self.request(payload)
        except UpstreamError as exc:
            return f"Error: {exc}"
        return text or "No response from AI."


class StubKnowledge:
    def __init__(self, extract: str = "The Eiffel Tower is a wrought-iron lattice tower.") -> None:
        self.extract = extract
        self.calls: list[str] = []

    async def lookup(self, name: str) -> str:
        self.calls.append(name)
        return self.extract


@pytest.fixture
def stub_generator() -> StubGenerator:
    return StubGenerator()


@pytest.fixture
def stub_knowledge() -> StubKnowledge:
    return StubKnowledge()


def is_refine_prompt(payload: object) -> bool:
    return isinstance(payload, TextPrompt) and payload.text.startswith("Rewrite the following information")


def json_response(status_code: int, payload: object) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode(), headers={"content-type": "application/json"})
