"""React section components.

One self-contained ``.tsx`` file per requested section. ``Nav`` and
``Footer`` are always generated; the others only when their section is in
``Intent.sections``. Each file bakes in its own light or dark styling.
"""

from __future__ import annotations

from ..parser.models import Intent, SectionType
from .library import PhaseGenerator, register, render_template


@register("component.nav")
def nav_component(intent: Intent) -> str:
    return render_template("components/Nav.tsx.j2", intent)


@register("component.hero")
def hero_component(intent: Intent) -> str:
    return render_template("components/Hero.tsx.j2", intent)


@register("component.features")
def features_component(intent: Intent) -> str:
    return render_template("components/Features.tsx.j2", intent)


@register("component.pricing")
def pricing_component(intent: Intent) -> str:
    return render_template("components/Pricing.tsx.j2", intent)


@register("component.contact")
def contact_component(intent: Intent) -> str:
    return render_template("components/Contact.tsx.j2", intent)


@register("component.cta")
def cta_component(intent: Intent) -> str:
    return render_template("components/CTA.tsx.j2", intent)


@register("component.footer")
def footer_component(intent: Intent) -> str:
    return render_template("components/Footer.tsx.j2", intent)


class ComponentGenerator(PhaseGenerator):
    """Generates ``src/components/*.tsx`` for the requested sections."""

    name = "components"

    _FILES: dict[str, str] = {
        "src/components/Nav.tsx": "component.nav",
        "src/components/Hero.tsx": "component.hero",
        "src/components/Features.tsx": "component.features",
        "src/components/Pricing.tsx": "component.pricing",
        "src/components/Contact.tsx": "component.contact",
        "src/components/CTA.tsx": "component.cta",
        "src/components/Footer.tsx": "component.footer",
    }

    # Path -> section that must be requested for the file to be emitted.
    # Paths not listed here are always emitted.
    _REQUIRES: dict[str, SectionType] = {
        "src/components/Hero.tsx": SectionType.HERO,
        "src/components/Features.tsx": SectionType.FEATURES,
        "src/components/Pricing.tsx": SectionType.PRICING,
        "src/components/Contact.tsx": SectionType.CONTACT,
        "src/components/CTA.tsx": SectionType.CTA,
    }

    def paths_for(self, intent: Intent) -> dict[str, str]:
        return {
            path: template_id
            for path, template_id in self._FILES.items()
            if path not in self._REQUIRES or self._REQUIRES[path] in intent.sections
        }
