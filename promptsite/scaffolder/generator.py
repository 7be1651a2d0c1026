"""Main scaffolding orchestrator.

Takes a prompt (or an already-parsed ``Intent``) and expands it into a
complete Vite + React + TypeScript + Tailwind project, held in memory as a
flat ``{relative_path: content}`` file tree. Generation runs in fixed phases
(configuration, components, utilities, documentation); each phase owns a
disjoint set of paths and the slices are merged into a single tree.

Progress is reported through an optional ``(percentage, label)`` callback at
fixed milestones. The short pause after each milestone exists only so a human
can watch the progress bar move and is configurable down to zero.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Callable, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..config import Config
from ..parser import Intent, SectionType, Theme, parse_prompt
from .component_gen import ComponentGenerator
from .config_gen import ConfigFileGenerator
from .docs_gen import DocsGenerator
from .library import PhaseGenerator
from .utility_gen import UtilityGenerator

ProgressCallback = Callable[[int, str], None]
FileTree = dict[str, str]

QA_CHECKLIST: list[str] = [
    "Verify all sections render correctly",
    "Test responsive design on mobile",
    "Check color contrast for accessibility",
    "Validate contact form functionality",
    "Test dark mode toggle",
    "Verify all links work",
]

DEPLOYMENT_HINTS = (
    "To deploy your site:\n"
    "1. Push to GitHub\n"
    "2. Connect to Vercel/Netlify\n"
    "3. Set environment variables if using APIs\n"
    "4. Deploy!"
)

FORMSPREE_NOTE = (
    "Contact form uses Formspree. Add VITE_FORMSPREE_FORM_ID to .env.local for email "
    "delivery, otherwise submissions are logged to console."
)
IMAGES_NOTE = (
    "Images use placeholder gradients by default. Add VITE_UNSPLASH_ACCESS_KEY for real "
    "images from Unsplash."
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a generation run fails. No partial file tree is returned."""


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------


class Commands(BaseModel):
    """Shell commands shown to the user. They are never executed here."""

    dev: str = Field(default="npm install && npm run dev")
    build: str = Field(default="npm run build")
    export_zip: str = Field(default="node scripts/export-zip.js")


class GeneratedOutput(BaseModel):
    """Everything a generation run produces."""

    status: Literal["success", "error", "partial"] = Field(default="success")
    site_name: str
    template_used: str = Field(..., description="Cosmetic label from detect_template()")
    parsed_intent: Intent
    file_tree: dict[str, str] = Field(..., description="Relative POSIX path -> file content")
    commands: Commands = Field(default_factory=Commands)
    download_url: Optional[str] = Field(default=None)
    deployment_hints: str = Field(default=DEPLOYMENT_HINTS)
    qa_checklist: list[str] = Field(default_factory=lambda: list(QA_CHECKLIST))
    notes: str = Field(default="")
    generated_at: str = Field(..., description="ISO-8601 UTC timestamp")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def detect_template(intent: Intent) -> str:
    """Classify *intent* into a coarse template label (first rule wins)."""
    if SectionType.PRICING in intent.sections and SectionType.FEATURES in intent.sections:
        return "saas-landing"
    if SectionType.GALLERY in intent.sections:
        return "portfolio"
    if intent.theme == Theme.AMAZON:
        return "ecommerce"
    return "landing-page"


def generation_notes(intent: Intent) -> str:
    """Return the setup notes that apply to *intent*, as one paragraph."""
    notes: list[str] = []
    if SectionType.CONTACT in intent.sections:
        notes.append(FORMSPREE_NOTE)
    notes.append(IMAGES_NOTE)
    return " ".join(notes)


def _merge(tree: FileTree, slice_: FileTree, phase: str) -> None:
    """Add *slice_* to *tree*; a path may only be written once."""
    duplicates = sorted(set(tree) & set(slice_))
    if duplicates:
        raise RuntimeError(
            f"Phase '{phase}' tried to overwrite existing files: {', '.join(duplicates)}"
        )
    tree.update(slice_)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Staged project generator.

    Runs the parse step and the four file phases in order, reporting
    progress after each one:

    ==========  ====================================
    Percentage  Label
    ==========  ====================================
    10          Parsing your prompt...
    25          Generating project configuration...
    50          Building React components...
    70          Creating utilities and helpers...
    85          Generating documentation...
    95          Finalizing project structure...
    100         Complete!
    ==========  ====================================
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.phases: list[tuple[int, str, PhaseGenerator]] = [
            (25, "Generating project configuration...", ConfigFileGenerator()),
            (50, "Building React components...", ComponentGenerator()),
            (70, "Creating utilities and helpers...", UtilityGenerator()),
            (85, "Generating documentation...", DocsGenerator()),
        ]

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        prompt_or_intent: Union[str, Intent],
        on_progress: ProgressCallback | None = None,
    ) -> GeneratedOutput:
        """Generate the complete project for a prompt or a parsed ``Intent``.

        Args:
            prompt_or_intent: Free-text prompt, or an ``Intent`` to skip parsing.
            on_progress: Optional ``(percentage, label)`` callback. Called with
                non-decreasing percentages, ending at 100 on success, and
                never again once a failure has occurred.

        Returns:
            The ``GeneratedOutput`` with the full file tree.

        Raises:
            GenerationError: If anything goes wrong. The original exception
                is chained as ``__cause__``.
        """

        def report(percentage: int, label: str) -> None:
            if on_progress is not None:
                on_progress(percentage, label)

        try:
            report(10, "Parsing your prompt...")
            await self._pause("parse")
            if isinstance(prompt_or_intent, Intent):
                intent = prompt_or_intent
            else:
                intent = parse_prompt(prompt_or_intent)

            file_tree: FileTree = {}
            for percentage, label, phase in self.phases:
                report(percentage, label)
                await self._pause(phase.name)
                _merge(file_tree, phase.generate(intent), phase.name)

            report(95, "Finalizing project structure...")
            await self._pause("finalize")

            output = GeneratedOutput(
                site_name=intent.site_name,
                template_used=detect_template(intent),
                parsed_intent=intent,
                file_tree=file_tree,
                notes=generation_notes(intent),
                generated_at=datetime.now(timezone.utc).isoformat(),
            )

            report(100, "Complete!")
            return output
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            raise GenerationError(f"Generation failed: {message}") from exc

    # -- Internal helpers ----------------------------------------------------

    async def _pause(self, phase: str) -> None:
        delay = self.config.generation.delay_for(phase)
        if delay > 0:
            await asyncio.sleep(delay)


async def generate_website(
    prompt_or_intent: Union[str, Intent],
    on_progress: ProgressCallback | None = None,
    config: Config | None = None,
) -> GeneratedOutput:
    """Convenience wrapper around :meth:`ProjectGenerator.generate`."""
    return await ProjectGenerator(config).generate(prompt_or_intent, on_progress)
