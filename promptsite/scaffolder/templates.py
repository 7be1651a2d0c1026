"""Jinja2 template rendering for generated projects.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``promptsite/scaffolder/templates/`` directory and renders them to strings.
Nothing here touches the filesystem beyond reading templates: rendered
content is collected into an in-memory file tree by the phase generators.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated site files.

    The renderer discovers ``.j2`` template files under a configurable
    template directory. Templates are rendered with a context dictionary
    built from an ``Intent`` (see :func:`promptsite.scaffolder.library.build_context`).
    Undefined variables raise instead of rendering as empty strings.

    Output is never HTML-escaped automatically: most generated files are
    TypeScript, JSON or YAML, so each template escapes explicitly with the
    filter that fits its target language (``| e``, ``| jsx_text``, ``| js_string``).
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["capitalize_first"] = _capitalize_first_filter
        self.env.filters["pretty_json"] = _pretty_json_filter
        self.env.filters["js_string"] = _js_string_filter
        self.env.filters["jsx_text"] = _jsx_text_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"components/Nav.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _capitalize_first_filter(value: str) -> str:
    """Upper-case the first character only (``"faq"`` -> ``"Faq"``)."""
    return value[:1].upper() + value[1:]


def _pretty_json_filter(value: Any, indent: int = 2) -> str:
    """Serialise *value* as indented JSON for embedding in JS/TS sources."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def _js_string_filter(value: str) -> str:
    """Quote *value* as a JSON string literal, which is also a valid JS literal."""
    return json.dumps(value, ensure_ascii=False)


def _jsx_text_filter(value: str) -> str:
    """Make *value* safe as literal JSX text.

    ``<``, ``>`` and ``&`` become entities; braces are wrapped as string
    expressions so they are not parsed as JSX expressions.
    """
    escaped = value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return re.sub(r"([{}])", r"{'\1'}", escaped)
