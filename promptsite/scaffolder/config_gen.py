"""Build and tooling files for the generated Vite + React + Tailwind project.

Covers the package manifest, bundler/TypeScript/Tailwind/PostCSS config, the
HTML entry point, the React root and the global stylesheet. Only
``package.json``, ``tailwind.config.js``, ``index.html``, ``src/index.css``
and ``src/App.tsx`` vary with the ``Intent``; the rest are fixed boiler-plate.
"""

from __future__ import annotations

from ..parser.models import Intent, SectionType
from .library import PhaseGenerator, register, render_template

# Components mounted by App.tsx, in page order. Nav and Footer are implicit.
APP_SECTIONS: list[tuple[SectionType, str]] = [
    (SectionType.HERO, "Hero"),
    (SectionType.FEATURES, "Features"),
    (SectionType.PRICING, "Pricing"),
    (SectionType.CTA, "CTA"),
    (SectionType.CONTACT, "Contact"),
]


@register("config.package_json")
def package_json(intent: Intent) -> str:
    return render_template("config/package.json.j2", intent)


@register("config.vite_config")
def vite_config(intent: Intent) -> str:
    return render_template("config/vite.config.ts.j2", intent)


@register("config.tailwind_config")
def tailwind_config(intent: Intent) -> str:
    return render_template("config/tailwind.config.js.j2", intent)


@register("config.postcss_config")
def postcss_config(intent: Intent) -> str:
    return render_template("config/postcss.config.js.j2", intent)


@register("config.tsconfig")
def tsconfig(intent: Intent) -> str:
    return render_template("config/tsconfig.json.j2", intent)


@register("config.tsconfig_node")
def tsconfig_node(intent: Intent) -> str:
    return render_template("config/tsconfig.node.json.j2", intent)


@register("config.env_example")
def env_example(intent: Intent) -> str:
    return render_template("config/env.example.j2", intent)


@register("config.gitignore")
def gitignore(intent: Intent) -> str:
    return render_template("config/gitignore.j2", intent)


@register("config.index_html")
def index_html(intent: Intent) -> str:
    return render_template("config/index.html.j2", intent)


@register("config.main_tsx")
def main_tsx(intent: Intent) -> str:
    return render_template("config/main.tsx.j2", intent)


@register("config.index_css")
def index_css(intent: Intent) -> str:
    return render_template("config/index.css.j2", intent)


@register("config.app_tsx")
def app_tsx(intent: Intent) -> str:
    """Root component that mounts one component per requested section."""
    components = [name for section, name in APP_SECTIONS if section in intent.sections]
    return render_template("config/App.tsx.j2", intent, app_components=components)


class ConfigFileGenerator(PhaseGenerator):
    """Generates the project's build, tooling and entry-point files."""

    name = "config"

    _FILES: dict[str, str] = {
        "package.json": "config.package_json",
        "vite.config.ts": "config.vite_config",
        "tailwind.config.js": "config.tailwind_config",
        "postcss.config.js": "config.postcss_config",
        "tsconfig.json": "config.tsconfig",
        "tsconfig.node.json": "config.tsconfig_node",
        ".env.example": "config.env_example",
        ".gitignore": "config.gitignore",
        "index.html": "config.index_html",
        "src/main.tsx": "config.main_tsx",
        "src/index.css": "config.index_css",
        "src/App.tsx": "config.app_tsx",
    }
