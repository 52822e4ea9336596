"""
Shared in-memory state for chat features.

Keeps each user's recent conversation and the text of the last document
they uploaded, so both the upload and chat endpoints see the same data.
Nothing here survives a restart or is shared between processes.
"""
import asyncio
from typing import Dict, List, Optional

from core.config import settings


class ConversationStore:
    """Bounded per-user history plus a single document slot per user."""

    def __init__(self, max_history: int = 5):
        self.max_history = max_history
        self._histories: Dict[str, List[dict]] = {}
        self._documents: Dict[str, str] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def record_exchange(self, user_id: str, role: str, content: str) -> None:
        history = self._histories.setdefault(user_id, [])
        history.append({"role": role, "content": content})

        # Only the oldest message goes, one per append
        if len(history) > self.max_history:
            history.pop(0)

    def get_history(self, user_id: str) -> List[dict]:
        return [dict(entry) for entry in self._histories.get(user_id, [])]

    def set_document(self, user_id: str, text: str) -> None:
        self._documents[user_id] = text

    def get_document(self, user_id: str) -> Optional[str]:
        return self._documents.get(user_id)

    def lock_for(self, user_id: str) -> asyncio.Lock:
        """Lock serialising read-generate-write cycles of one user."""
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

    def reset(self) -> None:
        self._histories.clear()
        self._documents.clear()
        self._locks.clear()


conversation_store = ConversationStore(max_history=settings.MAX_HISTORY_MESSAGES)
