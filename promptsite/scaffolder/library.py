"""Template library for generated site files.

Every file the generator can emit is produced by a *template function*: a
pure ``(Intent) -> str`` callable registered under a template id with the
:func:`register` decorator. Template functions live next to the phase that
uses them (``config_gen``, ``component_gen``, ``utility_gen``, ``docs_gen``)
and mostly delegate to :func:`render_template`, which renders one ``.j2``
file with the shared context from :func:`build_context`.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Any, Callable

from ..parser.models import Intent, SectionType, Tone
from ..parser.palette import generate_color_palette, generate_shade_scale
from ..utils import compact_name, slugify
from .templates import TemplateRenderer

TemplateFunc = Callable[[Intent], str]

# Template id -> template function. Filled in by @register at import time.
TEMPLATES: dict[str, TemplateFunc] = {}


# ---------------------------------------------------------------------------
# Copy tables
# ---------------------------------------------------------------------------

# Heroicons names used in FeatureItem.icon -> lucide-react component names.
ICON_MAP: dict[str, str] = {
    "BoltIcon": "Zap",
    "ShieldCheckIcon": "Shield",
    "PuzzlePieceIcon": "Puzzle",
    "ChatBubbleLeftRightIcon": "MessageSquare",
    "ChartBarIcon": "BarChart3",
    "CloudIcon": "Cloud",
    "CodeBracketIcon": "Code",
    "ArrowPathIcon": "RefreshCw",
    "StarIcon": "Star",
    "UserGroupIcon": "Users",
    "RocketLaunchIcon": "Rocket",
    "CurrencyDollarIcon": "DollarSign",
    "WrenchScrewdriverIcon": "Wrench",
    "LifebuoyIcon": "LifeBuoy",
    "HandThumbUpIcon": "ThumbsUp",
    "TrophyIcon": "Trophy",
}

HERO_COPY: dict[Tone, tuple[str, str]] = {
    Tone.PROFESSIONAL: ("Professional Solutions for Modern Businesses", "Trusted by industry leaders worldwide"),
    Tone.CASUAL: ("Hey there! Let's build something awesome", "Join thousands of happy customers"),
    Tone.PLAYFUL: ("Ready to have some fun? \U0001F680", "The most exciting way to get things done"),
    Tone.CONFIDENT: ("The Future Starts Here", "Be part of the revolution"),
    Tone.FORMAL: ("Excellence in Every Detail", "Setting the standard for quality"),
    Tone.FRIENDLY: ("Welcome! We're glad you're here", "Let's accomplish great things together"),
}

# Sections that get an anchor in the navigation bar, in display order.
_NAV_ANCHORS: list[tuple[SectionType, str]] = [
    (SectionType.FEATURES, "Features"),
    (SectionType.PRICING, "Pricing"),
    (SectionType.CONTACT, "Contact"),
]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def register(template_id: str) -> Callable[[TemplateFunc], TemplateFunc]:
    """Register a template function under *template_id*.

    Raises:
        ValueError: If *template_id* is already registered.
    """

    def decorator(func: TemplateFunc) -> TemplateFunc:
        if template_id in TEMPLATES:
            raise ValueError(f"Template '{template_id}' is already registered")
        TEMPLATES[template_id] = func
        return func

    return decorator


def get_template(template_id: str) -> TemplateFunc:
    """Look up a registered template function.

    Raises:
        KeyError: With the list of known ids when *template_id* is unknown.
    """
    try:
        return TEMPLATES[template_id]
    except KeyError:
        known = ", ".join(sorted(TEMPLATES))
        raise KeyError(f"Unknown template '{template_id}'. Known templates: {known}") from None


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Return the shared renderer for the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

def build_context(intent: Intent) -> dict[str, Any]:
    """Flatten an ``Intent`` into the variables every template can use."""
    palette = generate_color_palette(intent.primary_color)
    headline, subheadline = HERO_COPY.get(intent.tone, HERO_COPY[Tone.PROFESSIONAL])

    features = [
        {
            "title": item.title,
            "description": item.description,
            "icon": ICON_MAP.get(item.icon, "Star"),
        }
        for item in intent.features or []
    ]
    feature_icons = list(dict.fromkeys(item["icon"] for item in features))

    nav_links = [{"label": "Home", "href": "#"}]
    nav_links += [
        {"label": label, "href": f"#{section.value}"}
        for section, label in _NAV_ANCHORS
        if section in intent.sections
    ]

    return {
        "site_name": intent.site_name,
        "title": intent.title,
        "site_initial": intent.site_name[:1].upper(),
        "slug": slugify(intent.site_name),
        "email_domain": compact_name(intent.site_name),
        "tone": intent.tone.value,
        "theme": intent.theme.value,
        "is_dark": intent.theme.is_dark,
        "primary_color": intent.primary_color,
        "secondary_color": intent.secondary_color,
        "palette": palette.model_dump(),
        "shades": generate_shade_scale(intent.primary_color),
        "sections": [section.value for section in intent.sections],
        "keywords": list(intent.keywords),
        "industry": intent.industry,
        "features": features,
        "feature_icons": feature_icons,
        "pricing_tiers": [tier.model_dump() for tier in intent.pricing_tiers or []],
        "cta_primary": intent.cta.primary,
        "cta_secondary": intent.cta.secondary,
        "hero_headline": headline,
        "hero_subheadline": subheadline,
        "nav_links": nav_links,
        "year": date.today().year,
    }


def render_template(template_path: str, intent: Intent, **extra: Any) -> str:
    """Render *template_path* with the context for *intent* plus *extra*."""
    context = build_context(intent)
    context.update(extra)
    return get_renderer().render(template_path, context)


# ---------------------------------------------------------------------------
# Phase generator base
# ---------------------------------------------------------------------------

class PhaseGenerator:
    """Base class for one generation phase.

    Subclasses list the files they own in ``_FILES`` (output path ->
    template id). Phases own disjoint paths, so their outputs can be merged
    without overwriting each other.
    """

    name: str = "phase"

    # Output path -> template id
    _FILES: dict[str, str] = {}

    def paths_for(self, intent: Intent) -> dict[str, str]:
        """Return the ``{path: template_id}`` entries this phase emits for *intent*."""
        return dict(self._FILES)

    def generate(self, intent: Intent) -> dict[str, str]:
        """Render every file of this phase.

        Returns:
            A path -> content slice of the final file tree.
        """
        return {
            path: get_template(template_id)(intent)
            for path, template_id in self.paths_for(intent).items()
        }
