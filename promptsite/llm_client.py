"""Async clients for LLM-backed HTML generation.

This is the alternate path: instead of parsing the prompt and scaffolding a
project, the prompt is sent to a hosted model that returns one finished HTML
document. Two providers are supported over their REST APIs:

* OpenAI chat completions (``gpt-4o-mini`` by default), streamed as SSE.
* Google Gemini ``streamGenerateContent`` (``gemini-1.5-flash`` by default).

No method raises for missing keys or network trouble. Failures come back as
``LLMResult``/``EnhanceResult`` values with ``success=False`` and a
human-readable ``error``.

Typical usage::

    client = create_html_client(Config.from_env())
    if client is not None:
        result = await client.generate("A landing page for a bakery", on_token=print)
        if result.success:
            HtmlCache(config.cache_path).set(result.html, prompt)
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from promptsite.config import Config, LLMConfig

TokenCallback = Callable[[str], None]

SYSTEM_PROMPT = """You are an elite web developer and UI/UX designer creating STUNNING, PREMIUM websites.

DESIGN PHILOSOPHY:
- Create designs that WOW users instantly - like Apple, Vercel, Linear, or Stripe websites
- Use bold typography, striking gradients, and smooth animations
- Every element should feel intentional and premium
- Dark themes with vibrant accents are preferred unless specified otherwise

VISUAL REQUIREMENTS:
1. TYPOGRAPHY: Use elegant font stacks (Inter, SF Pro, system-ui). Large headlines (4xl-7xl), generous letter-spacing
2. COLORS: Use rich gradients (purple to blue, cyan to pink, orange to red), glassmorphism effects, subtle glows
3. SPACING: Generous whitespace, section padding (py-24 or more), breathing room
4. ANIMATIONS: Smooth transitions (transition-all duration-500), hover transforms, fade-ins
5. EFFECTS: Backdrop blur, box shadows, gradient borders, animated backgrounds

SECTIONS TO INCLUDE (based on prompt):
- HERO: Full-screen with animated gradient background, large headline, glowing CTA buttons
- FEATURES: Icon cards with hover effects, gradient icons, clean grid layout
- TESTIMONIALS: Quote cards with avatars, star ratings, subtle animations
- PRICING: 3-tier cards, highlighted popular plan, feature checkmarks
- CTA: Bold gradient background, compelling copy
- FOOTER: Clean, organized links, social icons

TECHNICAL REQUIREMENTS:
1. Single HTML file with embedded React and Tailwind via CDN
2. Use <script type="text/babel"> for React JSX
3. Include all CDN links: React 18, ReactDOM, Babel, Tailwind CSS
4. Mobile-responsive design (use md:, lg: breakpoints)
5. Use Heroicons or Lucide icons via CDN or inline SVGs
6. Add realistic, engaging placeholder content

OUTPUT: Return ONLY the complete HTML code starting with <!DOCTYPE html>. No markdown blocks or explanations."""

ENHANCE_PROMPT_SYSTEM = """You are an expert prompt engineer for AI website generation.

Your job is to take a simple website request and transform it into a detailed, specific prompt that will generate an AMAZING, STUNNING website.

RULES:
1. Keep the user's core idea but add rich details
2. Suggest specific color schemes (use modern palettes like purple/cyan, blue/pink)
3. Specify design style (glassmorphism, neumorphism, minimalist, bold)
4. Add specific sections (hero, features, testimonials, pricing, footer)
5. Include animations and interactions
6. Suggest a compelling tagline or headline
7. Keep the enhanced prompt under 200 words
8. Make it specific and actionable

OUTPUT: Return ONLY the enhanced prompt text. No explanations or markdown."""

ENHANCE_MAX_TOKENS = 500
ENHANCE_TEMPERATURE = 0.8


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class LLMResult(BaseModel):
    """Structured result of an HTML generation call."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    html: str = Field(default="", description="Generated HTML with code fences removed")
    error: str | None = Field(default=None, description="Error message on failure")
    tokens_used: int | None = Field(default=None, description="Total tokens, when reported")
    model: str = Field(default="", description="Model that produced the response")


class EnhanceResult(BaseModel):
    """Structured result of a prompt-enhancement call.

    On failure ``enhanced_prompt`` holds the original prompt unchanged.
    """

    success: bool = Field(default=True)
    enhanced_prompt: str = Field(default="")
    error: str | None = Field(default=None)


def clean_html_output(text: str) -> str:
    """Strip a surrounding markdown code fence (```html ... ```) from *text*."""
    cleaned = text.strip()
    if cleaned.startswith("```html"):
        cleaned = cleaned[len("```html"):]
    if cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


# ---------------------------------------------------------------------------
# Shared client behaviour
# ---------------------------------------------------------------------------


class BaseHTMLClient:
    """Common plumbing for the provider clients.

    Subclasses implement the provider-specific request/response shapes; this
    class handles availability, HTTP client construction and the mapping of
    transport errors to human-readable messages.
    """

    provider: str = ""
    display_name: str = ""
    key_env_var: str = ""

    def __init__(self, api_key: str | None, settings: LLMConfig | None = None) -> None:
        self.api_key = api_key.strip() if api_key else None
        self.settings = settings or LLMConfig()

    @property
    def model(self) -> str:
        raise NotImplementedError

    @property
    def is_available(self) -> bool:
        """``True`` when an API key is configured."""
        return bool(self.api_key)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our timeout."""
        return httpx.AsyncClient(timeout=httpx.Timeout(self.settings.timeout, connect=10.0))

    def _missing_key_result(self) -> LLMResult:
        return LLMResult(
            success=False,
            model=self.model,
            error=(
                f"{self.display_name} API key not configured. "
                f"Please set {self.key_env_var} in your environment."
            ),
        )

    def _describe_error(self, exc: Exception) -> str:
        """Turn a transport exception into a message for the user."""
        if isinstance(exc, httpx.ConnectError):
            return f"Cannot connect to the {self.display_name} API. Check your network connection."
        if isinstance(exc, httpx.TimeoutException):
            return f"Request to {self.display_name} timed out after {self.settings.timeout}s."
        if isinstance(exc, httpx.HTTPStatusError):
            return _api_error_message(exc.response)
        return f"Unexpected error during {self.display_name} request: {exc}"

    @staticmethod
    async def _iter_sse_data(response: httpx.Response) -> AsyncIterator[str]:
        """Yield the payload of every ``data:`` line of a server-sent event stream."""
        async for line in response.aiter_lines():
            line = line.strip()
            if not line.startswith("data:"):
                continue
            data = line[len("data:"):].strip()
            if data and data != "[DONE]":
                yield data

    # ------------------------------------------------------------------
    # Public API (implemented by subclasses)
    # ------------------------------------------------------------------

    async def generate(self, prompt: str, on_token: TokenCallback | None = None) -> LLMResult:
        raise NotImplementedError

    async def generate_simple(self, prompt: str) -> LLMResult:
        raise NotImplementedError

    async def enhance_prompt(self, prompt: str) -> EnhanceResult:
        raise NotImplementedError


def _api_error_message(response: httpx.Response) -> str:
    """Pull ``error.message`` out of an error body, falling back to the status code."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"API error: {response.status_code}"


# ---------------------------------------------------------------------------
# OpenAI
# ---------------------------------------------------------------------------


class OpenAIHTMLClient(BaseHTMLClient):
    """Chat-completions client that asks for a single HTML document."""

    provider = "openai"
    display_name = "OpenAI"
    key_env_var = "OPENAI_API_KEY"

    @property
    def model(self) -> str:
        return self.settings.openai_model

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _payload(self, prompt: str, stream: bool) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Create a website: {prompt}"},
            ],
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
        }
        if stream:
            payload["stream"] = True
            payload["stream_options"] = {"include_usage": True}
        return payload

    async def generate(self, prompt: str, on_token: TokenCallback | None = None) -> LLMResult:
        """Stream a website for *prompt*, calling *on_token* for each content delta.

        Args:
            prompt: The user's website description.
            on_token: Optional callback receiving each text delta in arrival order.

        Returns:
            An ``LLMResult`` with the cleaned HTML or an error.
        """
        if not self.is_available:
            return self._missing_key_result()

        chunks: list[str] = []
        tokens_used: int | None = None
        try:
            async with self._client() as client:
                async with client.stream(
                    "POST",
                    self.settings.openai_url,
                    headers=self._headers(),
                    json=self._payload(prompt, stream=True),
                ) as response:
                    if response.status_code >= 400:
                        await response.aread()
                        return LLMResult(
                            success=False,
                            model=self.model,
                            error=_api_error_message(response),
                        )

                    async for data in self._iter_sse_data(response):
                        try:
                            event = json.loads(data)
                        except json.JSONDecodeError:
                            continue
                        content = _openai_delta(event)
                        if content:
                            chunks.append(content)
                            if on_token is not None:
                                on_token(content)
                        usage = event.get("usage") or {}
                        if usage.get("total_tokens"):
                            tokens_used = int(usage["total_tokens"])
        except Exception as exc:  # noqa: BLE001
            return LLMResult(success=False, model=self.model, error=self._describe_error(exc))

        return LLMResult(
            html=clean_html_output("".join(chunks)),
            tokens_used=tokens_used,
            model=self.model,
        )

    async def generate_simple(self, prompt: str) -> LLMResult:
        """Generate a website without streaming."""
        if not self.is_available:
            return self._missing_key_result()

        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.openai_url,
                    headers=self._headers(),
                    json=self._payload(prompt, stream=False),
                )
                response.raise_for_status()
                data = response.json()
        except Exception as exc:  # noqa: BLE001
            return LLMResult(success=False, model=self.model, error=self._describe_error(exc))

        usage = data.get("usage") or {}
        return LLMResult(
            html=clean_html_output(_openai_message(data)),
            tokens_used=usage.get("total_tokens"),
            model=data.get("model", self.model),
        )

    async def enhance_prompt(self, prompt: str) -> EnhanceResult:
        """Rewrite *prompt* into a richer website brief."""
        if not self.is_available:
            return EnhanceResult(success=False, enhanced_prompt=prompt, error="OpenAI not available")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": ENHANCE_PROMPT_SYSTEM},
                {"role": "user", "content": f'Enhance this website request: "{prompt}"'},
            ],
            "max_tokens": ENHANCE_MAX_TOKENS,
            "temperature": ENHANCE_TEMPERATURE,
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.openai_url, headers=self._headers(), json=payload
                )
                response.raise_for_status()
                data = response.json()
        except Exception as exc:  # noqa: BLE001
            return EnhanceResult(
                success=False, enhanced_prompt=prompt, error=self._describe_error(exc)
            )

        return EnhanceResult(enhanced_prompt=_openai_message(data).strip() or prompt)


def _openai_delta(event: dict[str, Any]) -> str:
    choices = event.get("choices") or []
    if not choices:
        return ""
    return (choices[0].get("delta") or {}).get("content") or ""


def _openai_message(data: dict[str, Any]) -> str:
    choices = data.get("choices") or []
    if not choices:
        return ""
    return (choices[0].get("message") or {}).get("content") or ""


# ---------------------------------------------------------------------------
# Gemini
# ---------------------------------------------------------------------------


class GeminiHTMLClient(BaseHTMLClient):
    """Gemini REST client that asks for a single HTML document."""

    provider = "gemini"
    display_name = "Gemini"
    key_env_var = "GEMINI_API_KEY"

    @property
    def model(self) -> str:
        return self.settings.gemini_model

    def _url(self, method: str) -> str:
        base = self.settings.gemini_url.rstrip("/")
        return f"{base}/models/{self.model}:{method}"

    def _headers(self) -> dict[str, str]:
        return {"x-goog-api-key": self.api_key or "", "Content-Type": "application/json"}

    def _payload(self, system: str, text: str, max_tokens: int, temperature: float) -> dict[str, Any]:
        return {
            "systemInstruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": text}]}],
            "generationConfig": {"maxOutputTokens": max_tokens, "temperature": temperature},
        }

    def _generation_payload(self, prompt: str) -> dict[str, Any]:
        return self._payload(
            SYSTEM_PROMPT,
            f"Create a website: {prompt}",
            self.settings.max_tokens,
            self.settings.temperature,
        )

    async def generate(self, prompt: str, on_token: TokenCallback | None = None) -> LLMResult:
        """Stream a website for *prompt*, calling *on_token* for each text chunk."""
        if not self.is_available:
            return self._missing_key_result()

        chunks: list[str] = []
        tokens_used: int | None = None
        try:
            async with self._client() as client:
                async with client.stream(
                    "POST",
                    self._url("streamGenerateContent"),
                    params={"alt": "sse"},
                    headers=self._headers(),
                    json=self._generation_payload(prompt),
                ) as response:
                    if response.status_code >= 400:
                        await response.aread()
                        return LLMResult(
                            success=False,
                            model=self.model,
                            error=_api_error_message(response),
                        )

                    async for data in self._iter_sse_data(response):
                        try:
                            event = json.loads(data)
                        except json.JSONDecodeError:
                            continue
                        content = _gemini_text(event)
                        if content:
                            chunks.append(content)
                            if on_token is not None:
                                on_token(content)
                        usage = event.get("usageMetadata") or {}
                        if usage.get("totalTokenCount"):
                            tokens_used = int(usage["totalTokenCount"])
        except Exception as exc:  # noqa: BLE001
            return LLMResult(success=False, model=self.model, error=self._describe_error(exc))

        return LLMResult(
            html=clean_html_output("".join(chunks)),
            tokens_used=tokens_used,
            model=self.model,
        )

    async def generate_simple(self, prompt: str) -> LLMResult:
        """Generate a website without streaming."""
        if not self.is_available:
            return self._missing_key_result()

        try:
            async with self._client() as client:
                response = await client.post(
                    self._url("generateContent"),
                    headers=self._headers(),
                    json=self._generation_payload(prompt),
                )
                response.raise_for_status()
                data = response.json()
        except Exception as exc:  # noqa: BLE001
            return LLMResult(success=False, model=self.model, error=self._describe_error(exc))

        usage = data.get("usageMetadata") or {}
        return LLMResult(
            html=clean_html_output(_gemini_text(data)),
            tokens_used=usage.get("totalTokenCount"),
            model=self.model,
        )

    async def enhance_prompt(self, prompt: str) -> EnhanceResult:
        """Rewrite *prompt* into a richer website brief."""
        if not self.is_available:
            return EnhanceResult(
                success=False, enhanced_prompt=prompt, error="Gemini API not available"
            )

        payload = self._payload(
            ENHANCE_PROMPT_SYSTEM,
            f'User request: "{prompt}"',
            ENHANCE_MAX_TOKENS,
            ENHANCE_TEMPERATURE,
        )
        try:
            async with self._client() as client:
                response = await client.post(
                    self._url("generateContent"), headers=self._headers(), json=payload
                )
                response.raise_for_status()
                data = response.json()
        except Exception as exc:  # noqa: BLE001
            return EnhanceResult(
                success=False, enhanced_prompt=prompt, error=self._describe_error(exc)
            )

        return EnhanceResult(enhanced_prompt=_gemini_text(data).strip() or prompt)


def _gemini_text(data: dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_PROVIDERS: dict[str, type[BaseHTMLClient]] = {
    "openai": OpenAIHTMLClient,
    "gemini": GeminiHTMLClient,
}


def create_html_client(config: Config, provider: str | None = None) -> Optional[BaseHTMLClient]:
    """Build an HTML client from *config*.

    Args:
        config: Source of API keys and LLM settings.
        provider: ``"openai"`` or ``"gemini"`` to force a provider (the client
            is returned even without a key, and reports the missing key on
            use). ``None`` picks the first configured provider.

    Returns:
        A client, or ``None`` when no provider was forced and none is configured.

    Raises:
        ValueError: If *provider* is not a known provider name.
    """
    if provider is not None:
        if provider not in _PROVIDERS:
            raise ValueError(f"Unknown provider '{provider}'. Choose from: {', '.join(_PROVIDERS)}")
        return _PROVIDERS[provider](config.api_keys.get(provider), config.llm)

    for name, client_cls in _PROVIDERS.items():
        key = config.api_keys.get(name)
        if key:
            return client_cls(key, config.llm)
    return None


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class CachedHtml(BaseModel):
    """The single HTML document kept on disk between runs."""

    html: str
    prompt: str = ""
    saved_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class HtmlCache:
    """One cached LLM-generated HTML document, stored as a small JSON file.

    A cache file that is missing or cannot be decoded is treated as an
    empty cache.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> CachedHtml | None:
        """Return the cached entry with its metadata, or ``None``."""
        if not self.path.is_file():
            return None
        try:
            return CachedHtml.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError):
            return None

    def get(self) -> str | None:
        """Return the cached HTML, or ``None``."""
        entry = self.load()
        return entry.html if entry is not None else None

    def set(self, html: str, prompt: str = "") -> Path:
        """Replace the cached document with *html*.

        Raises:
            OSError: If the cache file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        entry = CachedHtml(html=html, prompt=prompt)
        self.path.write_text(entry.model_dump_json(indent=2), encoding="utf-8")
        return self.path

    def clear(self) -> None:
        """Delete the cache file if it exists."""
        self.path.unlink(missing_ok=True)
