"""Rule-based prompt extraction.

Turns a free-text prompt into an :class:`~promptsite.parser.models.Intent`
with ordered keyword tables and a handful of regular expressions. There is
no model inference here: every extractor is a pure, total function that
falls back to a fixed default instead of raising.

Keyword tables are scanned in declaration order and matched as plain
substrings of the lowercased prompt. When several entries match, the first
entry in the table wins, regardless of where the words appear in the prompt.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .models import (
    CallToAction,
    FeatureItem,
    Intent,
    PricingTier,
    SectionType,
    Theme,
    Tone,
)
from .palette import generate_color_palette, normalize_hex

DEFAULT_SITE_NAME = "My Website"
DEFAULT_COLOR = "#0B74DE"
DEFAULT_FEATURE_COUNT = 3
MIN_FEATURES = 1
MAX_FEATURES = 8
MAX_KEYWORDS = 10

# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

_QUOTED_NAME = re.compile(r"""['"]([^'"]+)['"]""")
_FOR_NAME = re.compile(r"for\s+([A-Z][A-Za-z0-9\s]+?)(?:\s*[-—–]|\s*,|\s*$)")
_HEX_COLOR = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})\b")

COLOR_NAMES: dict[str, str] = {
    "blue": "#0B74DE",
    "red": "#DC2626",
    "green": "#10B981",
    "purple": "#8B5CF6",
    "orange": "#F59E0B",
    "pink": "#EC4899",
    "teal": "#14B8A6",
    "indigo": "#6366F1",
    "cyan": "#06B6D4",
    "yellow": "#EAB308",
}

# nav and footer are forced, so they have no keywords here.
SECTION_KEYWORDS: dict[SectionType, list[str]] = {
    SectionType.HERO: ["hero", "banner", "landing", "headline", "main section"],
    SectionType.FEATURES: ["feature", "features", "benefits", "services", "offerings"],
    SectionType.PRICING: ["pricing", "price", "plans", "tiers", "subscription"],
    SectionType.GALLERY: ["gallery", "portfolio", "projects", "showcase", "work", "products"],
    SectionType.TESTIMONIALS: ["testimonial", "testimonials", "reviews", "feedback", "clients"],
    SectionType.CONTACT: ["contact", "contact form", "get in touch", "reach out", "email"],
    SectionType.ABOUT: ["about", "about us", "who we are", "story", "mission"],
    SectionType.CTA: ["cta", "call to action", "signup", "get started", "newsletter"],
    SectionType.FAQ: ["faq", "faqs", "questions", "frequently asked"],
    SectionType.TEAM: ["team", "members", "people", "staff", "employees"],
    SectionType.STATS: ["stats", "statistics", "numbers", "metrics", "achievements"],
}

DEFAULT_SECTIONS: list[SectionType] = [SectionType.HERO, SectionType.FEATURES, SectionType.CTA]

TONE_KEYWORDS: dict[Tone, list[str]] = {
    Tone.PROFESSIONAL: ["professional", "business", "enterprise", "corporate"],
    Tone.CASUAL: ["casual", "relaxed", "friendly", "approachable"],
    Tone.PLAYFUL: ["playful", "fun", "creative", "quirky", "colorful"],
    Tone.CONFIDENT: ["confident", "bold", "strong", "assertive"],
    Tone.FORMAL: ["formal", "serious", "traditional", "classic"],
    Tone.FRIENDLY: ["friendly", "warm", "welcoming", "inviting"],
}

THEME_KEYWORDS: dict[Theme, list[str]] = {
    Theme.LIGHT: ["light", "bright", "white", "clean"],
    Theme.DARK: ["dark", "night", "black"],
    Theme.AMAZON: ["amazon", "amazon-like", "e-commerce", "shopping"],
    Theme.CORPORATE: ["corporate", "enterprise", "business"],
}

INDUSTRY_KEYWORDS: dict[str, list[str]] = {
    "tech": ["software", "saas", "ai", "tech", "developer", "api", "cloud", "app"],
    "ecommerce": ["shop", "store", "products", "ecommerce", "e-commerce", "buy", "sell"],
    "agency": ["agency", "design", "creative", "marketing", "digital"],
    "healthcare": ["health", "medical", "healthcare", "doctor", "clinic"],
    "finance": ["finance", "financial", "banking", "investment", "trading"],
    "education": ["education", "learning", "course", "school", "training"],
    "realestate": ["real estate", "property", "homes", "apartments", "realty"],
}

_FEATURE_COUNT_PATTERNS = [
    re.compile(r"(\d+)\s*features?", re.IGNORECASE),
    re.compile(r"features?\s*\((\d+)\)", re.IGNORECASE),
    re.compile(r"features?\s*:?\s*(\d+)", re.IGNORECASE),
]

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "for", "with", "to", "of", "in", "on",
        "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might",
        "create", "build", "make", "include", "use", "add", "want", "need",
        "page", "website", "site", "landing", "section", "color", "theme", "tone",
    }
)

_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")

_TECH_FEATURES: list[tuple[str, str, str]] = [
    ("Lightning Fast", "Built for speed with modern architecture", "BoltIcon"),
    ("Secure & Reliable", "Enterprise-grade security built-in", "ShieldCheckIcon"),
    ("Easy Integration", "Connect with your favorite tools", "PuzzlePieceIcon"),
    ("24/7 Support", "Always here when you need us", "ChatBubbleLeftRightIcon"),
    ("Analytics Dashboard", "Real-time insights at your fingertips", "ChartBarIcon"),
    ("Cloud Native", "Scale effortlessly as you grow", "CloudIcon"),
    ("Developer API", "Automate everything with a clean REST API", "CodeBracketIcon"),
    ("Automatic Backups", "Your data is safe and always recoverable", "ArrowPathIcon"),
]

_DEFAULT_FEATURES: list[tuple[str, str, str]] = [
    ("Premium Quality", "Uncompromising quality in everything we do", "StarIcon"),
    ("Expert Team", "Professionals dedicated to your success", "UserGroupIcon"),
    ("Fast Delivery", "Quick turnaround without sacrificing quality", "RocketLaunchIcon"),
    ("Best Value", "Competitive pricing for premium services", "CurrencyDollarIcon"),
    ("Custom Solutions", "Tailored to your unique needs", "WrenchScrewdriverIcon"),
    ("Ongoing Support", "Long-term partnership and support", "LifebuoyIcon"),
    ("Trusted Partner", "Relied on by customers around the world", "HandThumbUpIcon"),
    ("Proven Results", "A track record you can measure", "TrophyIcon"),
]

_TONE_CTA: dict[Tone, str] = {
    Tone.CASUAL: "Get Started",
    Tone.PLAYFUL: "Let's Go!",
    Tone.CONFIDENT: "Start Now",
}


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------

def extract_site_name(prompt: str) -> str:
    """Return the site name mentioned in *prompt*.

    Tries the first quoted substring, then ``for <Capitalized words>`` up to a
    dash, comma or the end of the prompt, then ``"My Website"``.
    """
    quoted = _QUOTED_NAME.search(prompt)
    if quoted and quoted.group(1).strip():
        return quoted.group(1).strip()

    named = _FOR_NAME.search(prompt)
    if named and named.group(1).strip():
        return named.group(1).strip()

    return DEFAULT_SITE_NAME


def extract_color(prompt: str) -> str:
    """Return the primary colour as ``#RRGGBB``.

    A literal hex value wins; ``#RGB`` is expanded to six digits. Otherwise a
    ``"color <name>"`` or ``"<name> color"`` phrase is looked up in
    :data:`COLOR_NAMES`.
    """
    match = _HEX_COLOR.search(prompt)
    if match:
        normalized = normalize_hex(match.group(0))
        if normalized is not None:
            return normalized

    lower = prompt.lower()
    for name, value in COLOR_NAMES.items():
        if f"color {name}" in lower or f"{name} color" in lower:
            return value

    return DEFAULT_COLOR


def _directive(lower: str, label: str, table: dict) -> Optional[Enum]:
    """Resolve an explicit ``<label>: <word>`` directive against *table*."""
    match = re.search(rf"\b{label}\s*[:=]\s*([a-z-]+)", lower)
    if not match:
        return None
    word = match.group(1)
    for value, keywords in table.items():
        if word == value.value or word in keywords:
            return value
    return None


def _first_hit(lower: str, table: dict):
    for value, keywords in table.items():
        if any(keyword in lower for keyword in keywords):
            return value
    return None


def extract_tone(prompt: str) -> Tone:
    """Return the requested :class:`Tone` (default ``professional``).

    An explicit ``tone: <word>`` directive is honoured first; otherwise the
    first tone in :data:`TONE_KEYWORDS` with a keyword hit wins.
    """
    lower = prompt.lower()
    return _directive(lower, "tone", TONE_KEYWORDS) or _first_hit(lower, TONE_KEYWORDS) or Tone.PROFESSIONAL


def extract_theme(prompt: str) -> Theme:
    """Return the requested :class:`Theme` (default ``light``).

    Same resolution rules as :func:`extract_tone`, using ``theme: <word>``.
    """
    lower = prompt.lower()
    return _directive(lower, "theme", THEME_KEYWORDS) or _first_hit(lower, THEME_KEYWORDS) or Theme.LIGHT


def extract_sections(prompt: str) -> list[SectionType]:
    """Return the ordered, de-duplicated section list.

    ``nav`` is always first and ``footer`` always last. When nothing else
    matched (exactly two entries), ``hero``, ``features`` and ``cta`` are
    inserted after ``nav``.
    """
    lower = prompt.lower()
    found: list[SectionType] = [SectionType.NAV]

    for section, keywords in SECTION_KEYWORDS.items():
        if any(keyword in lower for keyword in keywords):
            found.append(section)

    found.append(SectionType.FOOTER)

    if len(found) == 2:
        found[1:1] = DEFAULT_SECTIONS

    return list(dict.fromkeys(found))


def extract_feature_count(prompt: str) -> int:
    """Return the requested number of features, clamped to ``[1, 8]`` (default 3)."""
    for pattern in _FEATURE_COUNT_PATTERNS:
        match = pattern.search(prompt)
        if match:
            return min(max(int(match.group(1)), MIN_FEATURES), MAX_FEATURES)
    return DEFAULT_FEATURE_COUNT


def detect_industry(prompt: str) -> Optional[str]:
    """Return the first industry in :data:`INDUSTRY_KEYWORDS` with a hit, or ``None``."""
    return _first_hit(prompt.lower(), INDUSTRY_KEYWORDS)


def extract_keywords(prompt: str) -> list[str]:
    """Return up to 10 distinct content words from *prompt*, in order of appearance."""
    words = _NON_WORD.sub(" ", prompt.lower()).split()
    kept = [word for word in words if len(word) > 3 and word not in STOP_WORDS]
    return list(dict.fromkeys(kept))[:MAX_KEYWORDS]


# ---------------------------------------------------------------------------
# Default content
# ---------------------------------------------------------------------------

def generate_default_features(count: int, industry: Optional[str] = None) -> list[FeatureItem]:
    """Return the first *count* stock features, with ids renumbered from ``"1"``.

    The tech list is used for the ``tech`` industry, the generic list otherwise.
    """
    source = _TECH_FEATURES if (industry or "").lower() == "tech" else _DEFAULT_FEATURES
    return [
        FeatureItem(id=str(index), title=title, description=description, icon=icon)
        for index, (title, description, icon) in enumerate(source[:count], start=1)
    ]


def generate_default_pricing() -> list[PricingTier]:
    """Return the Starter / Professional / Enterprise tiers; the middle one is highlighted."""
    return [
        PricingTier(
            id="starter",
            name="Starter",
            price=0,
            period="monthly",
            description="Perfect for getting started",
            features=["Up to 3 projects", "Basic analytics", "Community support", "1GB storage"],
            cta="Get Started Free",
        ),
        PricingTier(
            id="pro",
            name="Professional",
            price=29,
            period="monthly",
            description="For growing teams",
            features=[
                "Unlimited projects",
                "Advanced analytics",
                "Priority support",
                "10GB storage",
                "Team collaboration",
                "Custom integrations",
            ],
            highlighted=True,
            cta="Start Pro Trial",
        ),
        PricingTier(
            id="enterprise",
            name="Enterprise",
            price=99,
            period="monthly",
            description="For large organizations",
            features=[
                "Everything in Pro",
                "Unlimited storage",
                "Dedicated support",
                "Custom contracts",
                "SLA guarantee",
                "White-label options",
            ],
            cta="Contact Sales",
        ),
    ]


def cta_for_tone(tone: Tone) -> CallToAction:
    """Return the button labels for *tone*. The secondary label never varies."""
    return CallToAction(primary=_TONE_CTA.get(tone, "Get Started Today"), secondary="Learn More")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def parse_prompt(prompt: str) -> Intent:
    """Parse a free-text prompt into an :class:`Intent`.

    Never raises for string input: every field degrades to its default.

    Args:
        prompt: Arbitrary user text.

    Returns:
        A frozen ``Intent``. ``features`` and ``pricing_tiers`` are filled in
        only when the matching section was requested.
    """
    site_name = extract_site_name(prompt)
    palette = generate_color_palette(extract_color(prompt))
    sections = extract_sections(prompt)
    industry = detect_industry(prompt)
    tone = extract_tone(prompt)

    features = None
    if SectionType.FEATURES in sections:
        features = generate_default_features(extract_feature_count(prompt), industry)

    pricing_tiers = None
    if SectionType.PRICING in sections:
        pricing_tiers = generate_default_pricing()

    return Intent(
        site_name=site_name,
        title=site_name,
        tone=tone,
        theme=extract_theme(prompt),
        primary_color=palette.primary,
        secondary_color=palette.secondary,
        sections=sections,
        pages=["Home"],
        keywords=extract_keywords(prompt),
        industry=industry,
        features=features,
        pricing_tiers=pricing_tiers,
        cta=cta_for_tone(tone),
    )
