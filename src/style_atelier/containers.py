"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from style_atelier.adapters.gemini_client import HttpxGeminiClient
from style_atelier.config import Settings
from style_atelier.services.history import HistoryStore
from style_atelier.services.sessions import StyleSession
from style_atelier.services.styling import StyleClient, StyleService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    style_client: StyleClient
    style_service: StyleService
    history_store: HistoryStore
    session: StyleSession
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gemini_client = HttpxGeminiClient.create(
        api_key=resolved_settings.gemini_api_key,
        base_url=resolved_settings.gemini_base_url,
        timeout=resolved_settings.gemini_timeout_seconds,
    )
    style_service = StyleService(
        client=gemini_client,
        model=resolved_settings.gemini_model,
    )
    history_store = HistoryStore()
    session = StyleSession(
        style_service=style_service,
        history=history_store,
        error_message=resolved_settings.generation_error_message,
        upload_error_message=resolved_settings.upload_error_message,
        default_mime_type=resolved_settings.default_mime_type,
    )

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        style_client=gemini_client,
        style_service=style_service,
        history_store=history_store,
        session=session,
        close_resources=close_resources,
    )
