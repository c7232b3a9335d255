"""
Eyebrow generator.  Brows take the hair colour; there is no separate field.
"""

from __future__ import annotations

from .. import colors
from ..geometry import Node, group, mesh, primitives
from ..taxonomy import resolve
from .base import SIDES, lambert, mirrored

BROW_SPACING = 0.35
BROW_Y = 0.4
BROW_Z = 0.82

# style -> (width, height, depth, left tilt); the right brow mirrors the tilt
BROWS = {
    "normal": (0.2, 0.04, 0.05, 0.0),
    "angry": (0.22, 0.05, 0.05, 0.4),
    "worried": (0.22, 0.05, 0.05, -0.35),
    "thick": (0.25, 0.08, 0.06, 0.0),
}


def generate(style: str, hair_color: str) -> Node:
    root = group("eyebrows")
    style = resolve("eyebrowStyle", style)
    if style == "none":
        return root

    w, h, d, tilt = BROWS.get(style, BROWS["normal"])
    tone = colors.eyebrow_color(hair_color)
    material = lambert(tone, tone)
    for side in SIDES:
        root.add(mesh(
            f"brow.{side}",
            primitives.box(w, h, d, 1, 1, 1),
            material,
            position=(mirrored(BROW_SPACING, side), BROW_Y, BROW_Z),
            rotation=(0.0, 0.0, tilt if side == "left" else -tilt),
        ))
    return root
