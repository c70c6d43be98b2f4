"""Pydantic models for the session HTTP API."""

from pydantic import BaseModel

from style_atelier.domain.models import AppStatus, StyledImage
from style_atelier.services.sessions import StyleSession


class PromptUpdate(BaseModel):
    """Request body for replacing the styling request."""

    prompt: str


class HistoryEntry(BaseModel):
    """History entry payload."""

    id: str
    url: str
    prompt: str
    timestamp: int

    @classmethod
    def from_domain(cls, entry: StyledImage) -> "HistoryEntry":
        return cls(
            id=entry.id, url=entry.url, prompt=entry.prompt, timestamp=entry.timestamp
        )


class SessionSnapshot(BaseModel):
    """Everything the display surface needs to render the session."""

    status: AppStatus
    original_image: str | None
    result_image: str | None
    prompt: str
    error_message: str | None
    can_generate: bool
    history: list[HistoryEntry]

    @classmethod
    def from_session(cls, session: StyleSession) -> "SessionSnapshot":
        state = session.state
        return cls(
            status=state.status,
            original_image=state.original_image,
            result_image=state.result_image,
            prompt=state.prompt,
            error_message=state.error_message,
            can_generate=session.can_generate,
            history=[HistoryEntry.from_domain(e) for e in session.history.entries()],
        )
