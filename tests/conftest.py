import json

import httpx
import pytest
from fastapi.testclient import TestClient

from scamcheck.config import Settings, get_settings
from scamcheck.dependencies import get_client_factory
from scamcheck.main import app
from scamcheck.services.openai_client import build_openai_client


def completion_body(content) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-4.1-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeOpenAI:
    """Stands in for api.openai.com behind an httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: dict | None = completion_body("{}")
        self.text_body: str | None = None
        self.error: Exception | None = None

    def reply_with_content(self, content) -> None:
        self.status_code = 200
        self.json_body = completion_body(content)
        self.text_body = None

    def reply_with_status(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.json_body = None
        self.text_body = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, text=self.text_body)

    @property
    def sent_payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, openai_api_key="sk-test")


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def client(settings, fake_openai):
    def client_factory(s: Settings):
        transport = httpx.MockTransport(fake_openai.handler)
        return build_openai_client(s, http_client=httpx.AsyncClient(transport=transport))

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_client_factory] = lambda: client_factory
    yield TestClient(app)
    app.dependency_overrides.clear()
