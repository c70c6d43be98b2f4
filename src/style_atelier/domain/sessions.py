"""Domain model for the editing session state."""

from dataclasses import dataclass

from style_atelier.domain.models import AppStatus


@dataclass
class SessionState:
    """Mutable state of the single editing session."""

    status: AppStatus = AppStatus.IDLE
    original_image: str | None = None
    result_image: str | None = None
    prompt: str = ""
    error_message: str | None = None
