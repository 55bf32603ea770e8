# src/zentask/llm/client.py

from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Iterable, List, Optional

import httpx
import openai
from openai import OpenAI

from ..core.ports import ChatMessage

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _timeouts_from_env() -> dict[str, float]:
    """
    Timeouts are configurable via env so a slow model cannot hang /summary.

    Defaults:
    - connect timeout: 5s
    - read timeout: 25s (no data from server)
    - first token timeout: 20s (no content tokens)
    """
    first_token = _env_float("ZEN_LLM_FIRST_TOKEN_TIMEOUT_SECONDS", 20.0)
    read_timeout = _env_float("ZEN_LLM_READ_TIMEOUT_SECONDS", 25.0)
    connect_timeout = _env_float("ZEN_LLM_CONNECT_TIMEOUT_SECONDS", 5.0)

    # keep read >= first_token as a sane baseline
    read_timeout = max(read_timeout, first_token)

    return {
        "first_token": first_token,
        "read": read_timeout,
        "connect": connect_timeout,
    }


def _is_auth_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return True
    return exc.__class__.__name__ in {"UnauthorizedError"}


def _is_rate_limit_error(exc: Exception) -> bool:
    return isinstance(exc, openai.RateLimitError)


def _is_connection_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.APIConnectionError, openai.APITimeoutError, httpx.TimeoutException)):
        return True
    return isinstance(exc, TimeoutError)


def _is_not_found_error(exc: Exception) -> bool:
    return isinstance(exc, openai.NotFoundError)


def _close_stream(stream: Any) -> None:
    """Best-effort close for streaming responses."""
    close = getattr(stream, "close", None)
    if callable(close):
        try:
            close()
        except Exception:
            logger.debug("Stream close failed.", exc_info=True)


class OpenAICompatibleClient:
    """
    Streaming chat client for any OpenAI-compatible endpoint (OpenRouter by default).

    Behavior:
    - Tries models in the configured order.
    - No first content token within the first-token timeout -> next model.
    - 404 (model not available) -> remembered for an hour, next model.
    - Rate limit / network issues -> next model.
    - Auth issues -> fail fast (no retries across models).
    - Failure after content was streamed -> fail (no fallback, no mixed output).
    All failures surface as RuntimeError with a short human-readable message.
    """

    def __init__(self, settings: Any) -> None:
        api_key = getattr(settings, "llm_api_key", None)
        base_url = str(getattr(settings, "llm_base_url", "") or "")

        if not api_key or not str(api_key).strip():
            raise RuntimeError("LLM API key is not set. Set ZEN_LLM_API_KEY in your .env.")
        if not base_url.strip():
            raise RuntimeError("LLM base URL is not set. Set ZEN_LLM_BASE_URL in your .env.")

        self._models: List[str] = [m.strip() for m in (getattr(settings, "llm_models", []) or []) if m.strip()]
        self._headers: Dict[str, str] = dict(getattr(settings, "extra_headers", {}) or {})
        self._bad_models: dict[str, float] = {}  # model -> retry_at (monotonic)

        self._timeouts = _timeouts_from_env()
        self._timeout = httpx.Timeout(
            connect=self._timeouts["connect"],
            read=self._timeouts["read"],
            write=10.0,
            pool=self._timeouts["connect"],
        )
        # Automatic retries are disabled to allow quick fallback across models.
        self._client = OpenAI(
            base_url=base_url,
            api_key=str(api_key),
            timeout=self._timeout,
            max_retries=0,
        )

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        if not self._models:
            raise RuntimeError("LLM model list is empty. Set ZEN_LLM_MODELS in your .env.")

        first_token_timeout = float(self._timeouts["first_token"])
        last_error: Optional[Exception] = None
        now = time.monotonic()

        for model in self._models:
            retry_at = self._bad_models.get(model)
            if retry_at is not None and retry_at > now:
                continue

            logger.info("LLM: trying model=%s (first_token_timeout=%.1fs)", model, first_token_timeout)
            t0 = time.monotonic()
            deadline = t0 + first_token_timeout
            stream = None
            used_any = False

            try:
                stream = self._client.chat.completions.create(
                    model=model,
                    stream=True,
                    extra_headers=self._headers or None,
                    messages=[{"role": "system", "content": system_prompt}, *messages],
                    timeout=self._timeout,
                )

                for chunk in stream:
                    if not used_any and time.monotonic() > deadline:
                        last_error = TimeoutError(f"First token timeout on model: {model}")
                        logger.info("LLM: first token timeout on model=%s -> trying next", model)
                        break

                    content = None
                    if chunk.choices:
                        delta = getattr(chunk.choices[0], "delta", None)
                        content = getattr(delta, "content", None) if delta is not None else None

                    if content:
                        if not used_any:
                            logger.info("LLM: first token from model=%s (%.2fs)", model, time.monotonic() - t0)
                        used_any = True
                        yield content

                if used_any:
                    return

                if last_error is None:
                    last_error = RuntimeError(f"Model returned no content: {model}")

            except Exception as e:
                last_error = e

                if _is_auth_error(e):
                    raise RuntimeError("LLM authentication failed. Check ZEN_LLM_API_KEY.") from e

                # Partial output was already yielded; never continue on another model.
                if used_any:
                    logger.info("LLM: model=%s failed mid-stream (%s)", model, e.__class__.__name__)
                    raise RuntimeError(f"LLM stream interrupted on model: {model}") from e

                if _is_not_found_error(e):
                    self._bad_models[model] = time.monotonic() + 3600.0
                    logger.info("LLM: model not available (404): %s", model)
                elif _is_rate_limit_error(e):
                    logger.info("LLM: rate-limited on model=%s, trying next", model)
                elif _is_connection_error(e):
                    logger.info("LLM: network/timeout error on model=%s, trying next", model)
                else:
                    logger.info("LLM: error on model=%s (%s), trying next", model, e.__class__.__name__)

            finally:
                if stream is not None:
                    _close_stream(stream)

        if last_error is not None:
            if _is_rate_limit_error(last_error):
                raise RuntimeError("LLM is rate-limited. Try again later.") from last_error
            if _is_connection_error(last_error):
                raise RuntimeError("LLM network/timeout error. Try again later or change models.") from last_error
            raise RuntimeError("All LLM models failed.") from last_error

        raise RuntimeError("All LLM models failed.")
