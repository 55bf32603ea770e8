# src/zentask/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage/audio/desktop notifications/LLM providers swappable and
lets the timer, scheduler and dispatcher run in tests without a display,
an audio device or a network.
"""

from typing import Iterable, Protocol

from .models import SoundType

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """Streaming chat completion client (OpenAI/OpenRouter-compatible)."""
    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]: ...


class KeyValueRepo(Protocol):
    """Synchronous string -> string storage. Writes are whole-value overwrites."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class HostCapabilities(Protocol):
    """
    Host-side capabilities (audio output + OS notifications).

    Implementations must be best-effort: missing devices or permissions
    degrade into no-ops, never exceptions.
    """

    def can_notify(self) -> bool: ...
    def notify(self, title: str, message: str) -> None: ...
    def play_tone(self, kind: SoundType) -> None: ...


class Notifier(Protocol):
    """What timer/scheduler/tracker call to surface a message to the user."""
    def notify(self, message: str) -> None: ...
