"""Documentation, licensing, CI and export-script files."""

from __future__ import annotations

from ..parser.models import Intent
from .library import PhaseGenerator, register, render_template


@register("docs.readme")
def readme(intent: Intent) -> str:
    """README listing the included sections, the theme and the primary colour."""
    return render_template("docs/README.md.j2", intent)


@register("docs.license")
def license_file(intent: Intent) -> str:
    return render_template("docs/LICENSE.j2", intent)


@register("docs.code_of_conduct")
def code_of_conduct(intent: Intent) -> str:
    return render_template("docs/CODE_OF_CONDUCT.md.j2", intent)


@register("docs.ci_workflow")
def ci_workflow(intent: Intent) -> str:
    return render_template("docs/ci.yml.j2", intent)


@register("docs.export_script")
def export_script(intent: Intent) -> str:
    return render_template("docs/export-zip.js.j2", intent)


class DocsGenerator(PhaseGenerator):
    """Generates the README, LICENSE, code of conduct, CI workflow and export script."""

    name = "docs"

    _FILES: dict[str, str] = {
        "README.md": "docs.readme",
        "LICENSE": "docs.license",
        "CODE_OF_CONDUCT.md": "docs.code_of_conduct",
        ".github/workflows/ci.yml": "docs.ci_workflow",
        "scripts/export-zip.js": "docs.export_script",
    }
