"""Shared test fixtures."""

import base64
from dataclasses import dataclass, field

import pytest

from style_atelier.config import Settings
from style_atelier.containers import AppContainer
from style_atelier.services.history import HistoryStore
from style_atelier.services.sessions import StyleSession
from style_atelier.services.styling import StyleClient, StyleService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"original"
EDITED_BASE64 = base64.b64encode(b"edited-image").decode("utf-8")


@dataclass
class FakeStyleClient(StyleClient):
    """Fake image client returning a fixed payload and recording calls."""

    result: str | None = EDITED_BASE64
    error: Exception | None = None
    calls: list[dict[str, str]] = field(default_factory=list)

    async def generate_image(
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "image_base64": image_base64,
                "mime_type": mime_type,
                "prompt": prompt,
            }
        )
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class FakeUpload:
    """Minimal stand-in for an uploaded file."""

    content: bytes = PNG_BYTES
    content_type: str | None = "image/png"
    filename: str | None = "photo.png"
    error: Exception | None = None

    async def read(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.content


@dataclass
class StepClock:
    """Clock returning a fixed sequence of millisecond timestamps."""

    values: list[int] = field(default_factory=lambda: [1_700_000_000_000])

    def __call__(self) -> int:
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key")


@pytest.fixture
def style_client() -> FakeStyleClient:
    return FakeStyleClient()


@pytest.fixture
def session(style_client: FakeStyleClient) -> StyleSession:
    return StyleSession(
        style_service=StyleService(client=style_client, model="test-model"),
        error_message="Something went wrong.",
        clock=StepClock(),
    )


@pytest.fixture
def container(settings: Settings, style_client: FakeStyleClient) -> AppContainer:
    style_service = StyleService(client=style_client, model=settings.gemini_model)
    history_store = HistoryStore()
    session = StyleSession(
        style_service=style_service,
        history=history_store,
        error_message=settings.generation_error_message,
        upload_error_message=settings.upload_error_message,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        style_client=style_client,
        style_service=style_service,
        history_store=history_store,
        session=session,
        close_resources=close_resources,
    )
