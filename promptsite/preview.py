"""Standalone HTML preview of a parsed ``Intent``.

The preview approximates the generated React site with plain HTML and inline
CSS so it can be shown without installing or building anything (e.g. in a
sandboxed iframe or straight from disk). It reads the ``Intent`` directly and
does not look at the generated file tree.
"""

from __future__ import annotations

from promptsite.parser import Intent
from promptsite.scaffolder.library import build_context, get_renderer

PREVIEW_TEMPLATE = "preview/index.html.j2"


def generate_preview_html(intent: Intent) -> str:
    """Render the preview document for *intent*.

    Sections appear in a fixed order (hero, features, pricing, CTA, contact)
    when requested; the nav bar and footer are always present. Dark and
    amazon themes use the dark palette. All user-supplied text is
    HTML-escaped.
    """
    return get_renderer().render(PREVIEW_TEMPLATE, build_context(intent))
