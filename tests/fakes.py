# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from zentask.core.models import SoundType
from zentask.core.ports import ChatMessage


class FakeClock:
    """Manually advanced clock; returns seconds (float) or milliseconds via ms()."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def ms(self) -> int:
        return int(self.now * 1000)

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass(slots=True)
class RecordingHost:
    """
    HostCapabilities fake: records tones and OS notifications.

    `permission` mimics the OS notification permission state.
    """

    permission: bool = True
    tones: list[SoundType] = field(default_factory=list)
    os_messages: list[tuple[str, str]] = field(default_factory=list)

    def can_notify(self) -> bool:
        return self.permission

    def notify(self, title: str, message: str) -> None:
        self.os_messages.append((title, message))

    def play_tone(self, kind: SoundType) -> None:
        self.tones.append(kind)


class BrokenHost:
    """Every capability blows up; the dispatcher must swallow it."""

    def can_notify(self) -> bool:
        raise OSError("no notification service")

    def notify(self, title: str, message: str) -> None:
        raise OSError("no notification service")

    def play_tone(self, kind: SoundType) -> None:
        raise OSError("no audio device")


@dataclass(slots=True)
class RecordingNotifier:
    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakeLLMClient:
    """
    Deterministic LLM client for unit tests.

    - Captures calls for assertions
    - Yields a predefined text as a single chunk
    """

    def __init__(self, next_text: str = "ok") -> None:
        self.next_text = next_text
        self.calls: list[tuple[list[ChatMessage], str]] = []

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        self.calls.append((messages, system_prompt))
        yield self.next_text


class FailingLLMClient:
    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        raise RuntimeError("All LLM models failed.")


class MemoryKeyValueStore:
    """Dict-backed KeyValueRepo; `keys()` lets tests assert that nothing was written."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)
