import asyncio
import json

import httpx
import pytest

from adapters.gemini_client import GeminiClient, first_candidate_text
from conftest import gemini_body, json_response
from core.domain.errors import UpstreamError
from core.domain.models import InlineDataPrompt, TextPrompt


def _client(settings, handler):
    return GeminiClient(settings, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


def test_request_posts_body_and_key(settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        return json_response(200, gemini_body("Bonjour"))

    text = asyncio.run(_client(settings, handler).request(TextPrompt(text="Hi")))

    assert text == "Bonjour"
    assert seen["url"].path == "/v1/models/gemini-1.5-flash:generateContent"
    assert seen["url"].params["key"] == "test-key"
    assert seen["body"] == {"contents": [{"role": "user", "parts": [{"text": "Hi"}]}]}


def test_request_inline_data(settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return json_response(200, gemini_body("the Eiffel Tower"))

    prompt = InlineDataPrompt(mime_type="image/jpeg", data="AAAA")
    asyncio.run(_client(settings, handler).request(prompt))

    part = seen["body"]["contents"][0]["parts"][0]
    assert part == {"inline_data": {"mime_type": "image/jpeg", "data": "AAAA"}}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": [{}]}}]},
        ["not", "a", "dict"],
    ],
)
def test_missing_candidates(settings, payload):
    assert first_candidate_text(payload) is None

    client = _client(settings, lambda request: json_response(200, payload))
    assert asyncio.run(client.request(TextPrompt(text="Hi"))) is None
    assert asyncio.run(client.generate(TextPrompt(text="Hi"))) == "No response from AI."


def test_http_error_uses_api_message(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return json_response(400, {"error": {"code": 400, "message": "API key not valid."}})

    client = _client(settings, handler)
    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(client.request(TextPrompt(text="Hi")))
    assert str(excinfo.value) == "API key not valid."
    assert excinfo.value.status_code == 400

    assert asyncio.run(client.generate(TextPrompt(text="Hi"))) == "Error: API key not valid."


def test_transport_error_degrades(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = asyncio.run(_client(settings, handler).generate(TextPrompt(text="Hi")))
    assert result == "Error: connection refused"


def test_non_json_body_is_upstream_error(settings):
    client = _client(settings, lambda request: httpx.Response(200, content=b"<html>oops</html>"))
    with pytest.raises(UpstreamError):
        asyncio.run(client.request(TextPrompt(text="Hi")))
