"""Domain models for the styling studio."""

from dataclasses import dataclass
from enum import StrEnum


class AppStatus(StrEnum):
    """Lifecycle status of the editing session."""

    IDLE = "IDLE"
    UPLOADING = "UPLOADING"
    GENERATING = "GENERATING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class StyledImage:
    """Represents one successful generation kept in the session history."""

    id: str
    url: str
    prompt: str
    timestamp: int
