"""Tests for the prompt parser (extractor module).

Covers:
- Site name, colour, tone, theme, section, feature-count extraction
- Industry detection and keyword extraction, including table-order tie-breaks
- Default features, pricing and call-to-action tables
- parse_prompt end-to-end, totality and idempotence
"""

from __future__ import annotations

import re

import pytest

from promptsite.parser import (
    Intent,
    SectionType,
    Theme,
    Tone,
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

pytestmark = pytest.mark.unit

ODD_PROMPTS = [
    "",
    "   ",
    "!!!",
    "\U0001F680\U0001F680\U0001F680",
    "#",
    "features (999)",
    "x" * 10_000,
    "for",
    "'",
    "theme: tone: color",
]


# ---------------------------------------------------------------------------
# Site name
# ---------------------------------------------------------------------------


class TestExtractSiteName:
    def test_single_quoted(self):
        assert extract_site_name("Create a website for 'My Awesome Company'") == "My Awesome Company"

    def test_double_quoted(self):
        assert extract_site_name('Landing page called "Acme"') == "Acme"

    def test_quoted_wins_over_for_phrase(self):
        assert extract_site_name("Site for Globex named 'Initech'") == "Initech"

    def test_for_phrase_stops_at_comma(self):
        assert extract_site_name("Build a site for Acme Corp, with pricing") == "Acme Corp"

    def test_for_phrase_stops_at_dash(self):
        assert extract_site_name("Landing page for Acme Corp - modern and clean") == "Acme Corp"

    def test_for_phrase_at_end(self):
        assert extract_site_name("A landing page for Zenith") == "Zenith"

    def test_lowercase_after_for_is_ignored(self):
        assert extract_site_name("a website for my bakery") == "My Website"

    def test_blank_quotes_fall_through(self):
        assert extract_site_name("Site named '   ' for Nimbus") == "Nimbus"

    def test_default(self):
        assert extract_site_name("") == "My Website"


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------


class TestExtractColor:
    def test_hex_case_preserved(self):
        assert extract_color("Use #0B74DE as primary color") == "#0B74DE"

    def test_lowercase_hex(self):
        assert extract_color("accent #ff5500 please") == "#ff5500"

    def test_short_hex_expanded(self):
        assert extract_color("brand #abc") == "#aabbcc"

    def test_first_hex_wins(self):
        assert extract_color("#111111 then #222222") == "#111111"

    def test_hex_beats_named_color(self):
        assert extract_color("color blue but really #ff0000") == "#ff0000"

    def test_color_name_prefix_form(self):
        assert extract_color("brand color purple") == "#8B5CF6"

    def test_color_name_suffix_form(self):
        assert extract_color("a green color scheme") == "#10B981"

    def test_bare_color_word_is_ignored(self):
        assert extract_color("a red and yellow site") == "#0B74DE"

    def test_five_digit_hex_is_not_a_color(self):
        assert extract_color("code #12345") == "#0B74DE"

    def test_default(self):
        assert extract_color("") == "#0B74DE"


# ---------------------------------------------------------------------------
# Tone & theme
# ---------------------------------------------------------------------------


class TestExtractTone:
    def test_default(self):
        assert extract_tone("") == Tone.PROFESSIONAL

    def test_keyword(self):
        assert extract_tone("warm and welcoming bakery") == Tone.FRIENDLY

    def test_table_order_wins_over_prompt_order(self):
        # "bold" appears first, but playful is declared before confident.
        assert extract_tone("bold yet fun") == Tone.PLAYFUL

    def test_friendly_keyword_resolves_to_casual(self):
        # "friendly" is listed under casual, which comes first in the table.
        assert extract_tone("a friendly site") == Tone.CASUAL

    def test_directive_overrides_keywords(self):
        assert extract_tone("a professional page, tone: confident") == Tone.CONFIDENT

    def test_directive_accepts_keyword(self):
        assert extract_tone("tone = bold") == Tone.CONFIDENT

    def test_unknown_directive_falls_back(self):
        assert extract_tone("tone: cheerful") == Tone.PROFESSIONAL


class TestExtractTheme:
    def test_default(self):
        assert extract_theme("") == Theme.LIGHT

    def test_dark(self):
        assert extract_theme("dark mode portfolio") == Theme.DARK

    def test_corporate(self):
        assert extract_theme("Corporate enterprise theme") == Theme.CORPORATE

    def test_table_order_tie_break(self):
        assert extract_theme("a dark theme with white text") == Theme.LIGHT

    def test_directive_amazon_like(self):
        assert extract_theme("professional page, theme: amazon-like") == Theme.AMAZON

    def test_directive_overrides_keywords(self):
        assert extract_theme("white text, theme=dark") == Theme.DARK

    def test_is_dark(self):
        assert Theme.DARK.is_dark
        assert Theme.AMAZON.is_dark
        assert not Theme.LIGHT.is_dark
        assert not Theme.CORPORATE.is_dark


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class TestExtractSections:
    def test_defaults_when_nothing_matches(self):
        assert extract_sections("") == [
            SectionType.NAV,
            SectionType.HERO,
            SectionType.FEATURES,
            SectionType.CTA,
            SectionType.FOOTER,
        ]

    def test_single_section_skips_defaults(self):
        assert extract_sections("Add pricing plans") == [
            SectionType.NAV,
            SectionType.PRICING,
            SectionType.FOOTER,
        ]

    def test_table_order_not_prompt_order(self):
        assert extract_sections("contact form then a hero") == [
            SectionType.NAV,
            SectionType.HERO,
            SectionType.CONTACT,
            SectionType.FOOTER,
        ]

    def test_nav_and_footer_words_do_not_count(self):
        sections = extract_sections("just a footer and nav")
        assert sections == [
            SectionType.NAV,
            SectionType.HERO,
            SectionType.FEATURES,
            SectionType.CTA,
            SectionType.FOOTER,
        ]

    def test_many_sections(self):
        sections = extract_sections(
            "hero, features, pricing, gallery, testimonials, contact, about, faq, team, stats, newsletter"
        )
        assert sections[0] == SectionType.NAV
        assert sections[-1] == SectionType.FOOTER
        assert len(sections) == len(set(sections)) == 13

    @pytest.mark.parametrize("prompt", ODD_PROMPTS)
    def test_nav_first_footer_last_no_duplicates(self, prompt: str):
        sections = extract_sections(prompt)
        assert sections[0] == SectionType.NAV
        assert sections[-1] == SectionType.FOOTER
        assert len(sections) == len(set(sections))


# ---------------------------------------------------------------------------
# Feature count
# ---------------------------------------------------------------------------


class TestExtractFeatureCount:
    def test_number_before_features(self):
        assert extract_feature_count("Include 5 features") == 5

    def test_parenthesised(self):
        assert extract_feature_count("features (4)") == 4

    def test_colon(self):
        assert extract_feature_count("features: 6") == 6

    def test_singular(self):
        assert extract_feature_count("Include 2 feature cards") == 2

    def test_clamped_high(self):
        assert extract_feature_count("Include 20 features") == 8

    def test_clamped_low(self):
        assert extract_feature_count("0 features") == 1

    def test_default(self):
        assert extract_feature_count("Include features section") == 3


# ---------------------------------------------------------------------------
# Industry & keywords
# ---------------------------------------------------------------------------


class TestDetectIndustry:
    @pytest.mark.parametrize(
        "prompt, industry",
        [
            ("AI developer tools", "tech"),
            ("online shop selling shoes", "ecommerce"),
            ("Design agency portfolio", "agency"),
            ("a pediatric clinic", "healthcare"),
            ("investment advice", "finance"),
            ("an online course platform", "education"),
            ("real estate listings", "realestate"),
        ],
    )
    def test_detects(self, prompt: str, industry: str):
        assert detect_industry(prompt) == industry

    def test_table_order_tie_break(self):
        assert detect_industry("a saas store") == "tech"

    def test_none(self):
        assert detect_industry("hello world") is None


class TestExtractKeywords:
    def test_filters_short_and_stop_words(self):
        assert extract_keywords("Create a modern website for Bakery, with fresh bread!") == [
            "modern",
            "bakery",
            "fresh",
            "bread",
        ]

    def test_deduplicates_preserving_order(self):
        assert extract_keywords("coffee beans coffee roastery beans") == [
            "coffee",
            "beans",
            "roastery",
        ]

    def test_truncates_to_ten(self):
        words = " ".join(f"word{i:02d}" for i in range(15))
        assert len(extract_keywords(words)) == 10

    def test_punctuation_splits_words(self):
        assert extract_keywords("amazon-like") == ["amazon", "like"]

    def test_empty(self):
        assert extract_keywords("") == []


# ---------------------------------------------------------------------------
# Default content
# ---------------------------------------------------------------------------


class TestDefaultContent:
    def test_tech_features(self):
        features = generate_default_features(3, "tech")
        assert [f.title for f in features] == ["Lightning Fast", "Secure & Reliable", "Easy Integration"]
        assert [f.id for f in features] == ["1", "2", "3"]

    def test_generic_features(self):
        features = generate_default_features(2, None)
        assert [f.title for f in features] == ["Premium Quality", "Expert Team"]

    def test_eight_features_available(self):
        assert len(generate_default_features(8, "tech")) == 8
        assert len(generate_default_features(8, "agency")) == 8

    def test_pricing(self):
        tiers = generate_default_pricing()
        assert [t.name for t in tiers] == ["Starter", "Professional", "Enterprise"]
        assert [t.price for t in tiers] == [0, 29, 99]
        assert [t.highlighted for t in tiers] == [False, True, False]

    @pytest.mark.parametrize(
        "tone, primary",
        [
            (Tone.CASUAL, "Get Started"),
            (Tone.PLAYFUL, "Let's Go!"),
            (Tone.CONFIDENT, "Start Now"),
            (Tone.PROFESSIONAL, "Get Started Today"),
            (Tone.FORMAL, "Get Started Today"),
            (Tone.FRIENDLY, "Get Started Today"),
        ],
    )
    def test_cta_for_tone(self, tone: Tone, primary: str):
        cta = cta_for_tone(tone)
        assert cta.primary == primary
        assert cta.secondary == "Learn More"


# ---------------------------------------------------------------------------
# parse_prompt
# ---------------------------------------------------------------------------


class TestParsePrompt:
    def test_defaults_for_empty_prompt(self):
        intent = parse_prompt("")
        assert intent.site_name == "My Website"
        assert intent.title == "My Website"
        assert intent.primary_color == "#0B74DE"
        assert intent.tone == Tone.PROFESSIONAL
        assert intent.theme == Theme.LIGHT
        assert intent.industry is None
        assert intent.pages == ["Home"]
        assert intent.features is not None and len(intent.features) == 3
        assert intent.pricing_tiers is None

    def test_site_name(self):
        assert parse_prompt("Create a website for 'My Awesome Company'").site_name == "My Awesome Company"

    def test_primary_color(self):
        assert parse_prompt("Use #0B74DE as primary color").primary_color == "#0B74DE"

    def test_secondary_color_from_palette(self):
        assert parse_prompt("Use #0B74DE as primary color").secondary_color == "#cb7520"

    def test_feature_count_clamped(self):
        intent = parse_prompt("Include 20 features")
        assert intent.features is not None
        assert len(intent.features) == 8

    def test_feature_count_default(self):
        intent = parse_prompt("Include features section")
        assert intent.features is not None
        assert len(intent.features) == 3

    def test_pricing(self):
        intent = parse_prompt("Add pricing plans")
        assert intent.pricing_tiers is not None
        assert len(intent.pricing_tiers) == 3
        assert intent.pricing_tiers[1].highlighted is True

    def test_no_features_without_section(self):
        intent = parse_prompt("Add pricing plans")
        assert intent.features is None

    def test_cta_follows_tone(self):
        assert parse_prompt("a playful toy store").cta.primary == "Let's Go!"

    def test_reference_scenario(self, probfixora_prompt: str):
        intent = parse_prompt(probfixora_prompt)
        assert intent.site_name == "ProbFixora Labs"
        assert intent.primary_color == "#0B74DE"
        assert intent.tone == Tone.CONFIDENT
        assert intent.theme == Theme.AMAZON
        assert {
            SectionType.HERO,
            SectionType.FEATURES,
            SectionType.PRICING,
            SectionType.CONTACT,
        } <= set(intent.sections)
        assert intent.features is not None and len(intent.features) == 3
        assert intent.industry == "tech"
        assert intent.cta.primary == "Start Now"

    @pytest.mark.parametrize("prompt", ODD_PROMPTS)
    def test_total_on_odd_input(self, prompt: str):
        intent = parse_prompt(prompt)
        assert isinstance(intent, Intent)
        assert re.fullmatch(r"#[0-9A-Fa-f]{6}", intent.primary_color)
        assert intent.sections[0] == SectionType.NAV
        assert intent.sections[-1] == SectionType.FOOTER

    @pytest.mark.parametrize(
        "prompt",
        ["", "Add pricing plans", "dark portfolio for 'Nova' with 5 features and a contact form"],
    )
    def test_idempotent(self, prompt: str):
        assert parse_prompt(prompt) == parse_prompt(prompt)
