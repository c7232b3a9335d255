"""
Nose generator.  The nose is always the head colour darkened by 10%.
"""

from __future__ import annotations

import math

from .. import colors
from ..geometry import Geometry, Node, group, mesh, primitives
from ..taxonomy import resolve
from .base import lambert

NOSE_Y = -0.05
NOSE_Z = 0.95


def generate(style: str, head_color: str) -> Node:
    root = group("nose")
    style = resolve("noseStyle", style)
    if style == "none":
        return root

    z = NOSE_Z
    geom: Geometry
    if style == "round":
        geom = primitives.sphere(0.1, 6, 4).scale(1, 0.8, 0.7)
    elif style == "pointed":
        geom = primitives.cone(0.06, 0.15, 4).rotate_x(-math.pi / 2)
        z += 0.05
    else:
        geom = primitives.sphere(0.06, 6, 4)

    tone = colors.nose_color(head_color)
    root.add(mesh("tip", geom, lambert(tone, tone), position=(0.0, NOSE_Y, z)))
    return root
