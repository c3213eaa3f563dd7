"""Pytest configuration and fixtures."""

from io import BytesIO
from types import SimpleNamespace
from typing import Any, Dict, Generator, List, Optional

import fitz
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from newsdigest.config import Settings, load_settings


class FakeOpenAI:
    """Stands in for ``openai.OpenAI``; records every chat completion request."""

    def __init__(self, replies: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.replies = list(replies if replies is not None else ["A short summary."])
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def __enter__(self) -> "FakeOpenAI":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.closed = True

    def _create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        content = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=7),
        )


class CountingFactory:
    def __init__(self, client: FakeOpenAI):
        self.client = client
        self.builds = 0

    def __call__(self, settings: Settings) -> FakeOpenAI:
        self.builds += 1
        return self.client


@pytest.fixture
def settings() -> Settings:
    return load_settings(openai_api_key="sk-test", _env_file=None)


@pytest.fixture
def settings_without_key() -> Settings:
    return load_settings(openai_api_key="", _env_file=None)


@pytest.fixture
def fake_client() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def client_factory(fake_client: FakeOpenAI) -> CountingFactory:
    return CountingFactory(fake_client)


@pytest.fixture
def make_app_client(client_factory: CountingFactory):
    """Build a TestClient around an app wired to the fake backend."""
    from newsdigest.main import create_app

    def _make(app_settings: Settings) -> TestClient:
        return TestClient(create_app(app_settings, client_factory=client_factory))

    return _make


@pytest.fixture
def app_client(make_app_client, settings: Settings) -> Generator[TestClient, None, None]:
    with make_app_client(settings) as client:
        yield client


@pytest.fixture
def png_bytes() -> bytes:
    buf = BytesIO()
    Image.new("RGB", (8, 8), color="white").save(buf, format="PNG")
    return buf.getvalue()


def make_pdf(text: str = "") -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_pdf("City council approves new budget")
