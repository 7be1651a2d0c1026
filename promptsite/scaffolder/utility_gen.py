"""Small helper modules shared by the generated components."""

from __future__ import annotations

from ..parser.models import Intent
from .library import PhaseGenerator, register, render_template


@register("utility.cn")
def cn_util(intent: Intent) -> str:
    return render_template("utils/cn.ts.j2", intent)


@register("utility.images")
def images_util(intent: Intent) -> str:
    return render_template("utils/images.ts.j2", intent)


@register("utility.use_theme")
def use_theme_hook(intent: Intent) -> str:
    return render_template("utils/useTheme.ts.j2", intent)


class UtilityGenerator(PhaseGenerator):
    """Generates the class-name joiner, image helper and theme hook."""

    name = "utilities"

    _FILES: dict[str, str] = {
        "src/utils/cn.ts": "utility.cn",
        "src/utils/images.ts": "utility.images",
        "src/hooks/useTheme.ts": "utility.use_theme",
    }
