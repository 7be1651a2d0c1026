"""promptsite configuration.

Centralised, typed configuration for the generator and its optional
third-party collaborators. All settings use Pydantic v2 models so they can be
validated at construction time and built from environment variables
without boiler-plate.

API keys are resolved once, at the entry point, and then handed to the
components that need them. Nothing below the CLI reads ``os.environ``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

# Service name -> variable consumed by the generated images helper and contact form.
VITE_ENV_VARS: dict[str, str] = {
    "unsplash": "VITE_UNSPLASH_ACCESS_KEY",
    "pexels": "VITE_PEXELS_API_KEY",
    "formspree": "VITE_FORMSPREE_FORM_ID",
}


class ApiKeysConfig(BaseModel):
    """Credentials for optional third-party services.

    Every key is optional. A service whose key is ``None`` (or empty) is
    treated as not configured and the code path that uses it falls back to
    its deterministic behaviour.
    """

    openai: str | None = Field(default=None, description="OpenAI chat completions key")
    gemini: str | None = Field(default=None, description="Google Generative Language key")
    huggingface: str | None = Field(default=None, description="Hugging Face inference key")
    unsplash: str | None = Field(default=None, description="Unsplash access key")
    pexels: str | None = Field(default=None, description="Pexels API key")
    formspree: str | None = Field(default=None, description="Formspree form id")

    def get(self, service: str) -> str | None:
        """Return the key for *service*, or ``None`` when it is unset or blank."""
        value = getattr(self, service, None)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    def enabled(self) -> dict[str, str]:
        """Return a ``{service: key}`` mapping of every configured service."""
        result: dict[str, str] = {}
        for name in type(self).model_fields:
            key = self.get(name)
            if key is not None:
                result[name] = key
        return result

    def vite_env(self) -> dict[str, str]:
        """Return the ``VITE_*`` variables the generated project reads.

        Only the browser-side services (images and the contact form) are
        included; LLM keys never leave the generator.
        """
        result: dict[str, str] = {}
        for service, variable in VITE_ENV_VARS.items():
            key = self.get(service)
            if key is not None:
                result[variable] = key
        return result


class LLMConfig(BaseModel):
    """Settings for the LLM-backed HTML generation path."""

    openai_url: str = Field(default="https://api.openai.com/v1/chat/completions")
    openai_model: str = Field(default="gpt-4o-mini")
    gemini_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_model: str = Field(default="gemini-1.5-flash")
    huggingface_url: str = Field(default="https://api-inference.huggingface.co/models/")
    max_tokens: int = Field(default=8000, ge=1)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    timeout: int = Field(default=120, ge=5, description="Per-request timeout in seconds")


class GenerationConfig(BaseModel):
    """Pacing knobs for the staged project generator.

    The delays exist only so a human can watch progress move. They have no
    effect on the generated output; ``delay_scale=0`` removes them.
    """

    delay_scale: float = Field(default=1.0, ge=0.0)
    phase_delays_ms: dict[str, int] = Field(
        default_factory=lambda: {
            "parse": 300,
            "config": 400,
            "components": 500,
            "utilities": 300,
            "docs": 200,
            "finalize": 200,
        }
    )

    def delay_for(self, phase: str) -> float:
        """Return the pause (in seconds) that follows *phase*."""
        return self.phase_delays_ms.get(phase, 0) * self.delay_scale / 1000.0


class Config(BaseModel):
    """Global promptsite configuration.

    Instances are typically created once by the CLI (see :meth:`from_env`)
    and then passed to the generator, LLM clients and copywriter.
    """

    output_dir: Path = Field(default=Path("./output"))
    cache_file: str = Field(default=".promptsite-cache.json")
    api_keys: ApiKeysConfig = Field(default_factory=ApiKeysConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def cache_path(self) -> Path:
        """Location of the single cached LLM HTML document."""
        return self.output_dir / self.cache_file

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROMPTSITE_OUTPUT_DIR, PROMPTSITE_DELAY_SCALE, PROMPTSITE_LLM_TIMEOUT,
            PROMPTSITE_OPENAI_MODEL, PROMPTSITE_GEMINI_MODEL,
            OPENAI_API_KEY, GEMINI_API_KEY, HUGGINGFACE_API_KEY,
            UNSPLASH_ACCESS_KEY, PEXELS_API_KEY, FORMSPREE_FORM_ID.

        Args:
            environ: Mapping to read instead of ``os.environ`` (handy in tests).
        """
        env = os.environ if environ is None else environ

        api_keys = ApiKeysConfig(
            openai=env.get("OPENAI_API_KEY") or None,
            gemini=env.get("GEMINI_API_KEY") or None,
            huggingface=env.get("HUGGINGFACE_API_KEY") or None,
            unsplash=env.get("UNSPLASH_ACCESS_KEY") or None,
            pexels=env.get("PEXELS_API_KEY") or None,
            formspree=env.get("FORMSPREE_FORM_ID") or None,
        )

        llm_kwargs: dict[str, Any] = {}
        if env.get("PROMPTSITE_LLM_TIMEOUT"):
            llm_kwargs["timeout"] = int(env["PROMPTSITE_LLM_TIMEOUT"])
        if env.get("PROMPTSITE_OPENAI_MODEL"):
            llm_kwargs["openai_model"] = env["PROMPTSITE_OPENAI_MODEL"]
        if env.get("PROMPTSITE_GEMINI_MODEL"):
            llm_kwargs["gemini_model"] = env["PROMPTSITE_GEMINI_MODEL"]

        generation_kwargs: dict[str, Any] = {}
        if env.get("PROMPTSITE_DELAY_SCALE"):
            generation_kwargs["delay_scale"] = float(env["PROMPTSITE_DELAY_SCALE"])

        return cls(
            output_dir=Path(env.get("PROMPTSITE_OUTPUT_DIR", "./output")),
            api_keys=api_keys,
            llm=LLMConfig(**llm_kwargs),
            generation=GenerationConfig(**generation_kwargs),
        )
