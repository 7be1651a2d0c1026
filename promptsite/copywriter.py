"""Marketing copy helpers backed by the Hugging Face inference API.

Each helper asks ``google/flan-t5-base`` for a short piece of copy when an
API key is configured and falls back to fixed tables otherwise, or when the
request fails for any reason. Callers always get a usable string back.
"""

from __future__ import annotations

import random
from typing import Any

import httpx

from promptsite.config import LLMConfig

TEXT_TO_TEXT_MODEL = "google/flan-t5-base"

TAGLINE_FALLBACKS: dict[str, list[str]] = {
    "professional": [
        "Excellence in every detail",
        "Your success, our mission",
        "Trusted solutions for modern businesses",
    ],
    "casual": [
        "Making life easier, one click at a time",
        "Simple solutions for everyday challenges",
        "Welcome to something awesome",
    ],
    "playful": [
        "Let's build something amazing together!",
        "Where creativity meets innovation",
        "The fun way to get things done",
    ],
    "confident": [
        "The future starts here",
        "Leading the way forward",
        "Bold solutions for bold ideas",
    ],
    "formal": [
        "Setting the standard for excellence",
        "Precision and professionalism",
        "Your trusted partner in success",
    ],
    "friendly": [
        "We're here to help you succeed",
        "Together, we achieve more",
        "Your journey to success starts here",
    ],
}

FEATURE_DESCRIPTION_FALLBACKS: dict[str, str] = {
    "Lightning Fast": "Built for speed with modern architecture and optimized performance.",
    "Secure & Reliable": "Enterprise-grade security with 99.9% uptime guarantee.",
    "Easy Integration": "Connect seamlessly with your existing tools and workflows.",
    "24/7 Support": "Our dedicated team is always here when you need help.",
    "Analytics Dashboard": "Real-time insights and metrics at your fingertips.",
    "Cloud Native": "Scale effortlessly as your business grows.",
    "Premium Quality": "Uncompromising quality in everything we deliver.",
    "Expert Team": "Skilled professionals dedicated to your success.",
    "Fast Delivery": "Quick turnaround without sacrificing quality.",
    "Best Value": "Premium features at competitive pricing.",
    "Custom Solutions": "Tailored specifically to your unique needs.",
    "Ongoing Support": "Long-term partnership and continuous improvement.",
}
DEFAULT_FEATURE_DESCRIPTION = "Designed to help you achieve your goals faster and more efficiently."

PRIMARY_CTA_FALLBACKS: dict[str, str] = {
    "professional": "Get Started Today",
    "casual": "Get Started",
    "playful": "Let's Go! \U0001F680",
    "confident": "Start Now",
    "formal": "Begin Your Journey",
    "friendly": "Join Us Today",
}

SECONDARY_CTA_FALLBACKS: dict[str, str] = {
    "professional": "Learn More",
    "casual": "See How It Works",
    "playful": "Explore More ✨",
    "confident": "Discover More",
    "formal": "Request Information",
    "friendly": "Find Out More",
}


class Copywriter:
    """Generates taglines, feature blurbs and CTA labels."""

    def __init__(
        self,
        api_key: str | None = None,
        settings: LLMConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.api_key = api_key.strip() if api_key else None
        self.settings = settings or LLMConfig()
        self._rng = rng or random.Random()

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(30.0, connect=10.0))

    # ------------------------------------------------------------------
    # Raw generation
    # ------------------------------------------------------------------

    async def generate(
        self, prompt: str, max_length: int = 150, temperature: float = 0.7
    ) -> str | None:
        """Run *prompt* through the text-to-text model.

        Returns:
            The generated text, or ``None`` when no key is configured, the
            request fails, or the response carries no text.
        """
        if not self.is_available:
            return None

        url = f"{self.settings.huggingface_url}{TEXT_TO_TEXT_MODEL}"
        payload = {
            "inputs": prompt,
            "parameters": {
                "max_length": max_length,
                "temperature": temperature,
                "do_sample": True,
            },
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    url,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=payload,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError):
            return None

        return _extract_text(data)

    # ------------------------------------------------------------------
    # Copy helpers
    # ------------------------------------------------------------------

    async def generate_tagline(self, site_name: str, industry: str, tone: str) -> str:
        """Return a short tagline; a random per-tone fallback when offline."""
        prompt = (
            f"Generate a short, catchy tagline for a {tone} {industry} website called "
            f'"{site_name}". The tagline should be under 10 words.'
        )
        result = await self.generate(prompt, max_length=50)
        if result and result.strip():
            return result.strip()

        choices = TAGLINE_FALLBACKS.get(tone, TAGLINE_FALLBACKS["professional"])
        return self._rng.choice(choices)

    async def generate_feature_description(
        self, feature_title: str, site_name: str, industry: str
    ) -> str:
        """Return a one-sentence description of *feature_title*."""
        prompt = (
            f"Write a one-sentence description for a {industry} product feature called "
            f'"{feature_title}". Keep it under 20 words.'
        )
        result = await self.generate(prompt, max_length=80)
        if result and result.strip():
            return result.strip()
        return FEATURE_DESCRIPTION_FALLBACKS.get(feature_title, DEFAULT_FEATURE_DESCRIPTION)

    async def generate_cta_text(self, site_name: str, tone: str, is_primary: bool) -> str:
        """Return a button label for the primary or secondary call to action.

        Without a key the per-tone tables are used. With a key, a failed
        request yields the generic "Get Started" / "Learn More".
        """
        if not self.is_available:
            if is_primary:
                return PRIMARY_CTA_FALLBACKS.get(tone, "Get Started")
            return SECONDARY_CTA_FALLBACKS.get(tone, "Learn More")

        kind = "primary call-to-action button" if is_primary else "secondary call-to-action link"
        result = await self.generate(
            f"Generate a short {kind} text for a {tone} website. Maximum 3 words.",
            max_length=20,
        )
        if result and result.strip():
            return result.strip()
        return "Get Started" if is_primary else "Learn More"


def _extract_text(data: Any) -> str | None:
    """Pull generated text out of the shapes the inference API returns."""
    first = data[0] if isinstance(data, list) and data else data
    if not isinstance(first, dict):
        return None
    for key in ("generated_text", "summary_text"):
        value = first.get(key)
        if isinstance(value, str) and value:
            return value
    return None
