# src/zentask/llm/offline.py

from __future__ import annotations

from collections.abc import Iterable

from ..core.ports import ChatMessage


class OfflineLLMClient:
    """
    Stand-in client used when no external API is configured.

    It never produces content; instead it raises the same "not configured"
    RuntimeError the real client raises, so callers take their normal
    fallback path.
    """

    configured = False

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        raise RuntimeError("LLM API key is not set. Set ZEN_LLM_API_KEY in your .env.")
