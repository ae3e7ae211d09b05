"""Abstract interface for chat completions."""

from abc import ABC, abstractmethod
from typing import Any


class ChatService(ABC):
    """Abstract base class for chat-completion backends."""

    @abstractmethod
    async def complete(self, params: dict[str, Any]) -> dict[str, Any]:
        """Creates a chat completion from raw request parameters."""
        pass
