"""Tests for container wiring."""

import asyncio

from style_atelier.adapters.gemini_client import HttpxGeminiClient
from style_atelier.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert isinstance(container.style_client, HttpxGeminiClient)
    assert container.session.history is container.history_store
    assert container.session.error_message == settings.generation_error_message
    assert container.style_service.model == settings.gemini_model
    asyncio.run(container.close_resources())
