"""In-memory history of styled images for the current session."""

from collections import deque
from dataclasses import dataclass, field

from style_atelier.domain.models import StyledImage


@dataclass
class HistoryStore:
    """Newest-first, insertion-only list of past results."""

    _entries: deque[StyledImage] = field(default_factory=deque)

    def record(self, entry: StyledImage) -> None:
        """Prepend an entry to the history."""
        self._entries.appendleft(entry)

    def entries(self) -> list[StyledImage]:
        """Return all entries, newest first."""
        return list(self._entries)

    def get(self, entry_id: str) -> StyledImage | None:
        """Return the entry with the given id, if present."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)
