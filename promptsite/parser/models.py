"""Pydantic v2 models for the promptsite prompt parser.

Defines the ``Intent`` record produced by :func:`promptsite.parser.parse_prompt`
and the smaller value objects it is built from. An ``Intent`` is frozen: it is
created once per prompt and only ever read afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Tone(str, Enum):
    """Voice used for generated copy."""
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    PLAYFUL = "playful"
    CONFIDENT = "confident"
    FORMAL = "formal"
    FRIENDLY = "friendly"


class Theme(str, Enum):
    """Visual palette for the generated site."""
    LIGHT = "light"
    DARK = "dark"
    AMAZON = "amazon"
    CORPORATE = "corporate"

    @property
    def is_dark(self) -> bool:
        """Dark and amazon-style sites share the dark component palette."""
        return self in (Theme.DARK, Theme.AMAZON)


class SectionType(str, Enum):
    """A named page region that a prompt can ask for."""
    NAV = "nav"
    HERO = "hero"
    FEATURES = "features"
    PRICING = "pricing"
    GALLERY = "gallery"
    TESTIMONIALS = "testimonials"
    CONTACT = "contact"
    ABOUT = "about"
    CTA = "cta"
    FAQ = "faq"
    TEAM = "team"
    STATS = "stats"
    FOOTER = "footer"


# ---------------------------------------------------------------------------
# Content models
# ---------------------------------------------------------------------------

class FeatureItem(BaseModel):
    """One card in the features grid."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="1-based position, as a string")
    title: str = Field(..., description="Short feature headline")
    description: str = Field(default="", description="One-line feature description")
    icon: str = Field(default="StarIcon", description="Heroicons-style icon name")


class PricingTier(BaseModel):
    """One column of the pricing table."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable tier identifier, e.g. 'pro'")
    name: str = Field(..., description="Display name")
    price: int = Field(..., ge=0, description="Price in whole dollars; 0 renders as 'Free'")
    period: Literal["monthly", "yearly", "one-time"] = Field(default="monthly")
    description: str = Field(default="")
    features: list[str] = Field(default_factory=list)
    highlighted: bool = Field(default=False, description="Rendered as 'Most Popular'")
    cta: str = Field(default="Get Started")


class CallToAction(BaseModel):
    """Button labels shared by the nav, hero and CTA sections."""
    model_config = ConfigDict(frozen=True)

    primary: str = Field(default="Get Started Today")
    secondary: str = Field(default="Learn More")


class ColorPalette(BaseModel):
    """Colours derived from a single primary hex value."""
    model_config = ConfigDict(frozen=True)

    primary: str = Field(..., pattern=HEX_COLOR_PATTERN)
    primary_light: str = Field(..., pattern=HEX_COLOR_PATTERN)
    primary_dark: str = Field(..., pattern=HEX_COLOR_PATTERN)
    secondary: str = Field(..., pattern=HEX_COLOR_PATTERN)
    accent: str = Field(..., pattern=HEX_COLOR_PATTERN)


# ---------------------------------------------------------------------------
# Intent
# ---------------------------------------------------------------------------

class Intent(BaseModel):
    """Structured description of the site a prompt asks for.

    Invariants (checked on construction):

    * ``sections`` starts with ``nav``, ends with ``footer`` and has no duplicates.
    * ``features`` is present iff ``features`` is a section, with 1-8 items.
    * ``pricing_tiers`` is present iff ``pricing`` is a section, with exactly 3 tiers.
    """
    model_config = ConfigDict(frozen=True)

    site_name: str = Field(default="My Website", min_length=1)
    title: str = Field(default="", description="Page title; defaults to the site name")
    tone: Tone = Field(default=Tone.PROFESSIONAL)
    theme: Theme = Field(default=Theme.LIGHT)
    primary_color: str = Field(default="#0B74DE", pattern=HEX_COLOR_PATTERN)
    secondary_color: str = Field(default="#cb7520", pattern=HEX_COLOR_PATTERN)
    sections: list[SectionType] = Field(
        default_factory=lambda: [
            SectionType.NAV,
            SectionType.HERO,
            SectionType.CTA,
            SectionType.FOOTER,
        ]
    )
    pages: list[str] = Field(default_factory=lambda: ["Home"])
    keywords: list[str] = Field(default_factory=list, max_length=10)
    industry: Optional[str] = Field(default=None)
    features: Optional[list[FeatureItem]] = Field(default=None)
    pricing_tiers: Optional[list[PricingTier]] = Field(default=None)
    cta: CallToAction = Field(default_factory=CallToAction)

    @model_validator(mode="before")
    @classmethod
    def _default_title(cls, data):
        if isinstance(data, dict) and not data.get("title"):
            data = {**data, "title": data.get("site_name") or "My Website"}
        return data

    @model_validator(mode="after")
    def _check_invariants(self) -> "Intent":
        sections = self.sections
        if not sections or sections[0] != SectionType.NAV:
            raise ValueError("sections must start with 'nav'")
        if sections[-1] != SectionType.FOOTER:
            raise ValueError("sections must end with 'footer'")
        if len(set(sections)) != len(sections):
            raise ValueError("sections must not contain duplicates")

        wants_features = SectionType.FEATURES in sections
        if wants_features != (self.features is not None):
            raise ValueError("features must be present iff the features section is")
        if self.features is not None and not 1 <= len(self.features) <= 8:
            raise ValueError("features must contain between 1 and 8 items")

        wants_pricing = SectionType.PRICING in sections
        if wants_pricing != (self.pricing_tiers is not None):
            raise ValueError("pricing_tiers must be present iff the pricing section is")
        if self.pricing_tiers is not None and len(self.pricing_tiers) != 3:
            raise ValueError("pricing_tiers must contain exactly 3 tiers")
        if self.pricing_tiers is not None and not self.pricing_tiers[1].highlighted:
            raise ValueError("the middle pricing tier must be highlighted")
        return self

    def has_section(self, section: SectionType | str) -> bool:
        """Return ``True`` if *section* was requested."""
        return SectionType(section) in self.sections
