"""Colour helpers for the prompt parser.

Converts between hex and HSL and derives the small palette every generated
site uses. All rounding is half away from zero (inputs are never negative,
so this equals "half up"), which keeps the output bit-identical to the
browser-side preview that performs the same arithmetic.
"""

from __future__ import annotations

import math
import re

from .models import ColorPalette

_HEX6_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_HEX3_PATTERN = re.compile(r"^#?([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE)

# Returned for anything that is not a hex colour.
FALLBACK_HSL: tuple[int, int, int] = (210, 100, 50)

# Tailwind shade -> target lightness. 500 is always the primary itself.
_SHADE_LIGHTNESS: dict[int, int] = {
    50: 97,
    100: 93,
    200: 85,
    300: 75,
    400: 63,
    600: -8,
    700: -16,
    800: -24,
    900: -32,
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize_hex(value: str) -> str | None:
    """Return *value* as a ``#RRGGBB`` string, or ``None`` if it is not hex.

    Three-digit shorthand is expanded (``#0af`` -> ``#00aaff``). Letter case
    is preserved.
    """
    match = _HEX6_PATTERN.match(value.strip())
    if match:
        return "#" + "".join(match.groups())
    match = _HEX3_PATTERN.match(value.strip())
    if match:
        return "#" + "".join(ch * 2 for ch in match.groups())
    return None


def hex_to_hsl(value: str) -> tuple[int, int, int]:
    """Convert a hex colour to integer ``(hue, saturation%, lightness%)``.

    Unparseable input yields :data:`FALLBACK_HSL`.
    """
    normalized = normalize_hex(value)
    if normalized is None:
        return FALLBACK_HSL

    r = int(normalized[1:3], 16) / 255
    g = int(normalized[3:5], 16) / 255
    b = int(normalized[5:7], 16) / 255

    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if l > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return (_round_half_up(h * 360), _round_half_up(s * 100), _round_half_up(l * 100))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert ``(hue, saturation%, lightness%)`` to a lowercase ``#rrggbb`` string."""
    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        return format(_round_half_up(255 * color), "02x")

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def generate_color_palette(primary_hex: str) -> ColorPalette:
    """Derive the site palette from a primary colour.

    * ``primary_light`` / ``primary_dark``: lightness +20 / -20, clamped to 95 / 10.
    * ``secondary``: complementary hue (+180 degrees) at 80% of the saturation.
    * ``accent``: hue +45 degrees, same saturation and lightness.

    Args:
        primary_hex: ``#RRGGBB`` or ``#RGB``; anything else uses the fallback hue.

    Returns:
        A :class:`ColorPalette`. ``primary`` echoes the (normalised) input.
    """
    primary = normalize_hex(primary_hex) or hsl_to_hex(*FALLBACK_HSL)
    h, s, l = hex_to_hsl(primary)

    return ColorPalette(
        primary=primary,
        primary_light=hsl_to_hex(h, s, min(l + 20, 95)),
        primary_dark=hsl_to_hex(h, s, max(l - 20, 10)),
        secondary=hsl_to_hex((h + 180) % 360, s * 0.8, l),
        accent=hsl_to_hex((h + 45) % 360, s, l),
    )


def generate_shade_scale(primary_hex: str) -> dict[str, str]:
    """Build a Tailwind ``50``-``900`` shade map around *primary_hex*.

    Lighter shades use fixed lightness targets; darker shades step down from
    the primary's own lightness (floored at 5%). ``500`` is the primary.
    """
    primary = normalize_hex(primary_hex) or hsl_to_hex(*FALLBACK_HSL)
    h, s, l = hex_to_hsl(primary)

    scale: dict[str, str] = {}
    for shade, target in _SHADE_LIGHTNESS.items():
        if shade < 500:
            lightness = max(target, l)
        else:
            lightness = max(l + target, 5)
        scale[str(shade)] = hsl_to_hex(h, s, lightness)
    scale["500"] = primary
    return dict(sorted(scale.items(), key=lambda item: int(item[0])))
