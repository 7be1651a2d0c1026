"""Tests for the staged project generator.

Covers:
- Progress milestones and ordering
- File tree completeness per requested section
- GeneratedOutput metadata (template label, notes, commands, checklist)
- GenerationError wrapping and all-or-nothing failure
- Pacing delays driven by GenerationConfig
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from promptsite.config import Config, GenerationConfig
from promptsite.parser import Intent, SectionType, Theme, generate_default_features, generate_default_pricing
from promptsite.scaffolder import (
    Commands,
    GeneratedOutput,
    GenerationError,
    ProjectGenerator,
    detect_template,
    generate_website,
    generation_notes,
)
from promptsite.scaffolder.generator import FORMSPREE_NOTE, IMAGES_NOTE, QA_CHECKLIST, _merge

pytestmark = pytest.mark.unit

REQUIRED_FILES = ["package.json", "src/App.tsx", "src/components/Footer.tsx", "README.md"]

SECTION_COMPONENTS = {
    SectionType.HERO: "src/components/Hero.tsx",
    SectionType.FEATURES: "src/components/Features.tsx",
    SectionType.PRICING: "src/components/Pricing.tsx",
    SectionType.CONTACT: "src/components/Contact.tsx",
    SectionType.CTA: "src/components/CTA.tsx",
}


def _intent(*sections: SectionType, theme: Theme = Theme.LIGHT) -> Intent:
    full = [SectionType.NAV, *sections, SectionType.FOOTER]
    return Intent(
        sections=full,
        theme=theme,
        features=generate_default_features(3) if SectionType.FEATURES in full else None,
        pricing_tiers=generate_default_pricing() if SectionType.PRICING in full else None,
    )


# ---------------------------------------------------------------------------
# detect_template / notes
# ---------------------------------------------------------------------------


class TestDetectTemplate:
    def test_saas_landing(self):
        assert detect_template(_intent(SectionType.FEATURES, SectionType.PRICING)) == "saas-landing"

    def test_portfolio(self):
        assert detect_template(_intent(SectionType.GALLERY)) == "portfolio"

    def test_ecommerce(self):
        assert detect_template(_intent(SectionType.HERO, theme=Theme.AMAZON)) == "ecommerce"

    def test_priority_saas_over_portfolio(self):
        intent = _intent(SectionType.FEATURES, SectionType.PRICING, SectionType.GALLERY)
        assert detect_template(intent) == "saas-landing"

    def test_priority_portfolio_over_ecommerce(self):
        assert detect_template(_intent(SectionType.GALLERY, theme=Theme.AMAZON)) == "portfolio"

    def test_landing_page(self):
        assert detect_template(Intent()) == "landing-page"

    def test_pricing_alone_is_not_saas(self):
        assert detect_template(_intent(SectionType.PRICING)) == "landing-page"


class TestGenerationNotes:
    def test_contact_adds_formspree_note(self):
        notes = generation_notes(_intent(SectionType.CONTACT))
        assert notes == f"{FORMSPREE_NOTE} {IMAGES_NOTE}"

    def test_without_contact(self):
        assert generation_notes(Intent()) == IMAGES_NOTE


class TestMerge:
    def test_rejects_overwrite(self):
        tree = {"a.txt": "1"}
        with pytest.raises(RuntimeError, match="a.txt"):
            _merge(tree, {"a.txt": "2"}, "docs")
        assert tree == {"a.txt": "1"}

    def test_adds_new_paths(self):
        tree = {"a.txt": "1"}
        _merge(tree, {"b.txt": "2"}, "docs")
        assert tree == {"a.txt": "1", "b.txt": "2"}


# ---------------------------------------------------------------------------
# ProjectGenerator
# ---------------------------------------------------------------------------


class TestProjectGenerator:
    @pytest.mark.asyncio
    async def test_progress_milestones(self, fast_config: Config):
        events: list[tuple[int, str]] = []
        await ProjectGenerator(fast_config).generate("a site", lambda p, label: events.append((p, label)))

        assert [p for p, _ in events] == [10, 25, 50, 70, 85, 95, 100]
        assert events[0][1] == "Parsing your prompt..."
        assert events[-1][1] == "Complete!"

    @pytest.mark.asyncio
    async def test_accepts_prompt_or_intent(self, fast_config: Config, probfixora_prompt: str, probfixora_intent: Intent):
        gen = ProjectGenerator(fast_config)
        from_prompt = await gen.generate(probfixora_prompt)
        from_intent = await gen.generate(probfixora_intent)
        assert from_prompt.parsed_intent == from_intent.parsed_intent
        assert from_prompt.file_tree == from_intent.file_tree

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "sections",
        [
            (),
            (SectionType.HERO,),
            (SectionType.FEATURES, SectionType.PRICING),
            (SectionType.HERO, SectionType.FEATURES, SectionType.PRICING, SectionType.CONTACT, SectionType.CTA),
            (SectionType.GALLERY, SectionType.FAQ),
        ],
    )
    async def test_file_tree_matches_sections(self, fast_config: Config, sections):
        intent = _intent(*sections)
        output = await ProjectGenerator(fast_config).generate(intent)

        for path in REQUIRED_FILES:
            assert path in output.file_tree
        for section, path in SECTION_COMPONENTS.items():
            assert (path in output.file_tree) == (section in intent.sections)

    @pytest.mark.asyncio
    async def test_file_count(self, fast_config: Config, minimal_intent: Intent):
        output = await ProjectGenerator(fast_config).generate(minimal_intent)
        # 12 config + 4 components + 3 utilities + 5 docs
        assert len(output.file_tree) == 24

    @pytest.mark.asyncio
    async def test_output_metadata(self, fast_config: Config, probfixora_intent: Intent):
        output = await ProjectGenerator(fast_config).generate(probfixora_intent)

        assert isinstance(output, GeneratedOutput)
        assert output.status == "success"
        assert output.site_name == "ProbFixora Labs"
        assert output.template_used == "saas-landing"
        assert output.commands == Commands()
        assert output.commands.dev == "npm install && npm run dev"
        assert output.qa_checklist == QA_CHECKLIST
        assert output.download_url is None
        assert FORMSPREE_NOTE in output.notes
        assert output.generated_at

    @pytest.mark.asyncio
    async def test_error_is_wrapped(self, fast_config: Config):
        events: list[int] = []
        with patch(
            "promptsite.scaffolder.generator.ComponentGenerator.generate",
            side_effect=ValueError("boom"),
        ):
            gen = ProjectGenerator(fast_config)
            with pytest.raises(GenerationError, match="Generation failed: boom") as exc_info:
                await gen.generate("a site", lambda p, _: events.append(p))

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert events == [10, 25, 50]

    @pytest.mark.asyncio
    async def test_error_without_message_uses_type_name(self, fast_config: Config):
        with patch(
            "promptsite.scaffolder.generator.parse_prompt",
            side_effect=KeyError(),
        ):
            with pytest.raises(GenerationError, match="KeyError"):
                await ProjectGenerator(fast_config).generate("a site")

    @pytest.mark.asyncio
    async def test_pauses_between_phases(self):
        config = Config(generation=GenerationConfig(delay_scale=1.0))
        with patch("promptsite.scaffolder.generator.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await ProjectGenerator(config).generate(Intent())

        delays = [call.args[0] for call in sleep.call_args_list]
        assert delays == pytest.approx([0.3, 0.4, 0.5, 0.3, 0.2, 0.2])

    @pytest.mark.asyncio
    async def test_no_pauses_when_disabled(self, fast_config: Config):
        with patch("promptsite.scaffolder.generator.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await ProjectGenerator(fast_config).generate(Intent())
        sleep.assert_not_called()


class TestGenerateWebsite:
    @pytest.mark.asyncio
    async def test_convenience_wrapper(self, fast_config: Config):
        output = await generate_website("Add pricing plans", config=fast_config)
        assert "src/components/Pricing.tsx" in output.file_tree
        assert output.parsed_intent.pricing_tiers is not None
