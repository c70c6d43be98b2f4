"""Session state machine for upload, generate, display and history."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from style_atelier.domain.models import AppStatus, StyledImage
from style_atelier.domain.sessions import SessionState
from style_atelier.services.encoder import DEFAULT_MIME_TYPE, FileSource, to_data_url
from style_atelier.services.history import HistoryStore
from style_atelier.services.styling import StyleGenerationError, StyleService

logger = logging.getLogger(__name__)

_SUBMITTABLE = {AppStatus.IDLE, AppStatus.ERROR}


def _now_millis() -> int:
    return int(datetime.now(tz=UTC).timestamp() * 1000)


@dataclass
class StyleSession:
    """Single-writer owner of the editing session.

    Every mutation of ``state`` and ``history`` goes through the methods
    below. Uploads and resets bump ``revision``; an asynchronous completion
    that started under an older revision is discarded instead of applied,
    so a new upload or a reset supersedes an in-flight generation.
    """

    style_service: StyleService
    history: HistoryStore = field(default_factory=HistoryStore)
    state: SessionState = field(default_factory=SessionState)
    error_message: str = "Request failed. Please try again."
    upload_error_message: str = "Could not read the selected file."
    default_mime_type: str = DEFAULT_MIME_TYPE
    clock: Callable[[], int] = _now_millis
    revision: int = field(default=0, init=False)
    _last_id: int = field(default=0, init=False, repr=False)

    @property
    def can_generate(self) -> bool:
        """Return whether a submission would be attempted right now."""
        return (
            self.state.status in _SUBMITTABLE
            and bool(self.state.original_image)
            and bool(self.state.prompt.strip())
        )

    async def handle_file_upload(self, source: FileSource | None) -> bool:
        """Read a selected file and start a fresh edit on it."""
        if source is None:
            return False
        self.revision += 1
        revision = self.revision
        self.state.status = AppStatus.UPLOADING
        try:
            content = await source.read()
        except Exception:
            logger.exception("Failed to read uploaded file %s", source.filename)
            content = b""
        if revision != self.revision:
            return False
        if not content:
            self.state.error_message = self.upload_error_message
            self.state.status = AppStatus.ERROR
            return False
        self.state.original_image = to_data_url(
            content, source.content_type, default=self.default_mime_type
        )
        self.state.result_image = None
        self.state.error_message = None
        self.state.status = AppStatus.IDLE
        logger.info("Loaded image %s (%d bytes)", source.filename, len(content))
        return True

    def set_prompt(self, text: str) -> None:
        """Replace the styling request text."""
        self.state.prompt = text

    async def handle_generate(self) -> bool:
        """Submit the current image and prompt; return whether a request was made."""
        if not self.can_generate:
            return False
        image = self.state.original_image
        prompt = self.state.prompt
        revision = self.revision
        self.state.status = AppStatus.GENERATING
        self.state.error_message = None
        try:
            result = await self.style_service.generate(image, prompt)
        except (StyleGenerationError, ValueError):
            logger.exception("Style generation failed")
            if revision == self.revision:
                self.state.error_message = self.error_message
                self.state.status = AppStatus.ERROR
            return True
        if revision != self.revision:
            logger.info("Discarding result of a generation started before reset")
            return True
        entry = self._new_entry(result, prompt)
        self.state.result_image = result
        self.history.record(entry)
        self.state.status = AppStatus.IDLE
        logger.info("Generated styled image %s", entry.id)
        return True

    def reset(self) -> None:
        """Return the session to an empty, idle state."""
        self.revision += 1
        self.state.original_image = None
        self.state.result_image = None
        self.state.prompt = ""
        self.state.error_message = None
        self.state.status = AppStatus.IDLE

    def select_history(self, entry_id: str) -> StyledImage | None:
        """Display a past result without touching history or status."""
        entry = self.history.get(entry_id)
        if entry is None:
            return None
        self.state.result_image = entry.url
        return entry

    def _new_entry(self, url: str, prompt: str) -> StyledImage:
        timestamp = self.clock()
        # ids stay time-derived but strictly increase within the session
        id_value = max(timestamp, self._last_id + 1)
        self._last_id = id_value
        return StyledImage(id=str(id_value), url=url, prompt=prompt, timestamp=timestamp)
