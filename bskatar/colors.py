"""
Hex colour helpers and the colours derived at generation time.

Derived colours (nose from head, eyebrows from hair) are computed every time
a feature is generated and are never stored on the configuration.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .taxonomy import DEFAULTS

HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Fixed accents, independent of any user-selected colour
MOUTH_COLOR = "#333333"
TONGUE_COLOR = "#ff6b6b"
HAIR_TIE_COLOR = "#ff6b6b"
BLUSH_COLOR = "#ffaaaa"
WHITE = "#ffffff"

NOSE_DARKEN = 0.9


def parse_hex(value: str) -> Optional[Tuple[float, float, float]]:
    """Parse ``#rgb`` / ``#rrggbb`` into 0..1 channels, or None."""
    if not isinstance(value, str):
        return None
    m = HEX_RE.match(value.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return (
        int(digits[0:2], 16) / 255.0,
        int(digits[2:4], 16) / 255.0,
        int(digits[4:6], 16) / 255.0,
    )


def to_hex(rgb: Tuple[float, float, float]) -> str:
    channels = []
    for c in rgb:
        c = min(1.0, max(0.0, c))
        channels.append(int(round(c * 255)))
    return "#{:02x}{:02x}{:02x}".format(*channels)


def normalize(value: str, fallback: str) -> str:
    """Canonical ``#rrggbb`` form of ``value``; ``fallback`` when unparsable."""
    rgb = parse_hex(value)
    if rgb is None:
        rgb = parse_hex(fallback)
    return to_hex(rgb)


def scale(value: str, factor: float, fallback: str) -> str:
    """Multiply every channel by ``factor`` (clamped to 0..1)."""
    rgb = parse_hex(value)
    if rgb is None:
        rgb = parse_hex(fallback)
    return to_hex((rgb[0] * factor, rgb[1] * factor, rgb[2] * factor))


def nose_color(head_color: str) -> str:
    return scale(head_color, NOSE_DARKEN, DEFAULTS["headColor"])


def eyebrow_color(hair_color: str) -> str:
    return normalize(hair_color, DEFAULTS["hairColor"])
