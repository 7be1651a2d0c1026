"""Prompt-to-Intent parser."""

from .extractor import (
    cta_for_tone,
    detect_industry,
    extract_color,
    extract_feature_count,
    extract_keywords,
    extract_sections,
    extract_site_name,
    extract_theme,
    extract_tone,
    generate_default_features,
    generate_default_pricing,
    parse_prompt,
)
from .models import (
    CallToAction,
    ColorPalette,
    FeatureItem,
    Intent,
    PricingTier,
    SectionType,
    Theme,
    Tone,
)
from .palette import generate_color_palette, generate_shade_scale, hex_to_hsl, hsl_to_hex

__all__ = [
    "CallToAction",
    "ColorPalette",
    "FeatureItem",
    "Intent",
    "PricingTier",
    "SectionType",
    "Theme",
    "Tone",
    "cta_for_tone",
    "detect_industry",
    "extract_color",
    "extract_feature_count",
    "extract_keywords",
    "extract_sections",
    "extract_site_name",
    "extract_theme",
    "extract_tone",
    "generate_color_palette",
    "generate_default_features",
    "generate_default_pricing",
    "generate_shade_scale",
    "hex_to_hsl",
    "hsl_to_hex",
    "parse_prompt",
]
