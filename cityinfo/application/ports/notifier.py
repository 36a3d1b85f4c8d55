"""Notifier interface for outbound messages (SOLID-friendly).

Implementations can be swapped without changing application logic.
"""
from typing import Protocol


class Notifier(Protocol):
    async def notify(self, subject: str, body: str) -> None:
        """Send a message. Fire-and-forget from the caller's point of view."""
