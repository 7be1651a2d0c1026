"""Shared pytest fixtures for the promptsite test suite.

Provides reusable fixtures for:
- Sample prompts and pre-parsed intents
- A configuration with the artificial generation delays switched off
- Mocked httpx clients for the LLM and copywriting services
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from promptsite.config import ApiKeysConfig, Config, GenerationConfig
from promptsite.parser import Intent, parse_prompt

PROBFIXORA_PROMPT = (
    "Create a professional landing page for 'ProbFixora Labs' — AI developer tools, "
    "color #0B74DE, include hero, features (3), pricing, contact form, "
    "tone: confident, theme: amazon-like"
)


# ---------------------------------------------------------------------------
# Prompts & intents
# ---------------------------------------------------------------------------

@pytest.fixture
def probfixora_prompt() -> str:
    """The end-to-end reference prompt."""
    return PROBFIXORA_PROMPT


@pytest.fixture
def probfixora_intent() -> Intent:
    """Parsed intent for the reference prompt (tech, dark, all core sections)."""
    return parse_prompt(PROBFIXORA_PROMPT)


@pytest.fixture
def minimal_intent() -> Intent:
    """Default intent: nav, hero, cta, footer with a light theme."""
    return Intent()


@pytest.fixture
def light_intent() -> Intent:
    """A light-themed bakery site with features and contact, no pricing."""
    return parse_prompt(
        "Build a friendly website for 'Sunny Bakery' with features, a gallery and a contact form"
    )


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def fast_config(tmp_path) -> Config:
    """Config with zero pacing delays and an isolated output directory."""
    return Config(
        output_dir=tmp_path / "output",
        generation=GenerationConfig(delay_scale=0),
    )


@pytest.fixture
def keyed_config(tmp_path) -> Config:
    """Config with fake keys for every third-party service."""
    return Config(
        output_dir=tmp_path / "output",
        api_keys=ApiKeysConfig(
            openai="sk-test",
            gemini="gm-test",
            huggingface="hf-test",
        ),
        generation=GenerationConfig(delay_scale=0),
    )


# ---------------------------------------------------------------------------
# Mock HTTP
# ---------------------------------------------------------------------------

class FakeStreamResponse:
    """Minimal stand-in for the response yielded by ``httpx.AsyncClient.stream``."""

    def __init__(
        self,
        lines: list[str],
        status_code: int = 200,
        body: Any = None,
    ) -> None:
        self.lines = lines
        self.status_code = status_code
        self.body = body

    async def __aenter__(self) -> "FakeStreamResponse":
        return self

    async def __aexit__(self, *exc: Any) -> bool:
        return False

    async def aiter_lines(self):
        for line in self.lines:
            yield line

    async def aread(self) -> bytes:
        return b""

    def json(self) -> Any:
        return self.body


def make_json_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Build a mocked non-streaming httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


def make_mock_client(
    post: Any = None,
    stream: FakeStreamResponse | None = None,
) -> AsyncMock:
    """Build an ``AsyncClient`` mock usable as an async context manager.

    Args:
        post: Return value for ``post`` or an exception to raise from it.
        stream: Response returned by ``stream(...)``.
    """
    client = AsyncMock()
    if isinstance(post, BaseException):
        client.post = AsyncMock(side_effect=post)
    else:
        client.post = AsyncMock(return_value=post)
    if stream is not None:
        client.stream = MagicMock(return_value=stream)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


@pytest.fixture
def patch_async_client():
    """Return a helper that patches ``httpx.AsyncClient`` with a given mock.

    Usage:
        def test_x(patch_async_client):
            client = make_mock_client(post=...)
            with patch_async_client(client):
                ...
    """

    def _patch(client: AsyncMock):
        return patch("httpx.AsyncClient", return_value=client)

    return _patch
