# tests/test_summary.py

from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai

from zentask.core.i18n import t
from zentask.core.models import Language
from zentask.llm.client import OpenAICompatibleClient
from zentask.llm.offline import OfflineLLMClient
from zentask.llm.summary import MAX_SUMMARY_CHARS, SUMMARY_SYSTEM_PROMPT, generate_daily_summary

from .fakes import FailingLLMClient, FakeLLMClient


def test_empty_list_returns_canned_text_without_calling_client() -> None:
    llm = FakeLLMClient("should not be used")
    assert generate_daily_summary(llm, [], Language.EN) == t(Language.EN, "summary_empty")
    assert generate_daily_summary(llm, ["  "], Language.ZH) == t(Language.ZH, "summary_empty")
    assert llm.calls == []


def test_success_sends_tasks_and_system_prompt() -> None:
    llm = FakeLLMClient("  Great job today! 🎉  ")
    out = generate_daily_summary(llm, ["Write report", "Gym"], Language.EN)

    assert out == "Great job today! 🎉"
    messages, system_prompt = llm.calls[0]
    assert system_prompt == SUMMARY_SYSTEM_PROMPT
    assert "- Write report\n- Gym" in messages[0]["content"]
    assert "CHINESE" not in messages[0]["content"]


def test_chinese_requests_chinese_reply() -> None:
    llm = FakeLLMClient("干得好")
    generate_daily_summary(llm, ["写报告"], Language.ZH)
    assert "CHINESE" in llm.calls[0][0][0]["content"]


def test_failure_returns_localized_apology() -> None:
    out = generate_daily_summary(FailingLLMClient(), ["Write report"], Language.ZH)
    assert out == t(Language.ZH, "summary_failed")


def test_unconfigured_client_and_blank_reply() -> None:
    assert generate_daily_summary(OfflineLLMClient(), ["x"], Language.EN) == t(Language.EN, "summary_not_configured")
    assert generate_daily_summary(None, ["x"], Language.EN) == t(Language.EN, "summary_not_configured")
    assert generate_daily_summary(FakeLLMClient("   "), ["x"], Language.EN) == t(Language.EN, "summary_no_content")


def test_long_reply_is_truncated() -> None:
    out = generate_daily_summary(FakeLLMClient("a" * 5000), ["x"], Language.EN)
    assert len(out) == MAX_SUMMARY_CHARS + 1


class _Chunk:
    def __init__(self, text: str) -> None:
        self.choices = [SimpleNamespace(delta=SimpleNamespace(content=text))]


class _ScriptedCompletions:
    """Per-model scripted streams: a list of texts, optionally ending in an exception."""

    def __init__(self, scripts: dict[str, list]) -> None:
        self.scripts = scripts
        self.models: list[str] = []

    def create(self, *, model: str, **_kwargs):
        self.models.append(model)

        def gen():
            for item in self.scripts[model]:
                if isinstance(item, Exception):
                    raise item
                yield _Chunk(item)

        return gen()


def _client_with(scripts: dict[str, list]) -> tuple[OpenAICompatibleClient, _ScriptedCompletions]:
    settings = SimpleNamespace(
        llm_api_key="sk-test",
        llm_base_url="https://example.invalid/v1",
        llm_models=list(scripts),
        extra_headers={},
    )
    client = OpenAICompatibleClient(settings)
    completions = _ScriptedCompletions(scripts)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


def _timeout_error() -> Exception:
    return openai.APITimeoutError(request=httpx.Request("POST", "https://example.invalid/v1/chat/completions"))


def test_error_before_first_token_falls_back_to_next_model() -> None:
    client, completions = _client_with({"a": [_timeout_error()], "b": ["Full answer from B."]})

    out = generate_daily_summary(client, ["Write report"], Language.EN)

    assert out == "Full answer from B."
    assert completions.models == ["a", "b"]


def test_error_after_partial_output_is_not_mixed_with_next_model() -> None:
    client, completions = _client_with(
        {"a": ["PARTIAL-FROM-A ", _timeout_error()], "b": ["Full answer from B."]}
    )

    out = generate_daily_summary(client, ["Write report"], Language.EN)

    assert out == t(Language.EN, "summary_failed")
    assert completions.models == ["a"]
