"""
Eye generator.

Always a symmetric pair.  wide and sparkle put a white sphere behind the
pupil; sparkle adds a small highlight; sleepy squashes a sideways capsule.
"""

from __future__ import annotations

import math

from .. import colors
from ..geometry import Node, group, mesh, primitives
from ..taxonomy import DEFAULTS, resolve
from .base import SIDES, lambert, mirrored

EYE_SPACING = 0.35
EYE_Y = 0.15
EYE_Z = 0.85


def _dots(root: Node, side: str, x: float, iris) -> None:
    root.add(mesh(f"eye.{side}", primitives.sphere(0.08, 8, 6), iris, position=(x, EYE_Y, EYE_Z)))


def _wide(root: Node, side: str, x: float, iris, white) -> None:
    root.add(
        mesh(f"sclera.{side}", primitives.sphere(0.15, 8, 6), white, position=(x, EYE_Y, EYE_Z - 0.05)),
        mesh(f"pupil.{side}", primitives.sphere(0.08, 8, 6), iris, position=(x, EYE_Y, EYE_Z + 0.08)),
    )


def _sleepy(root: Node, side: str, x: float, iris) -> None:
    lid = primitives.capsule(0.04, 0.12, 4, 8).rotate_z(math.pi / 2)
    root.add(mesh(f"lid.{side}", lid, iris, position=(x, EYE_Y, EYE_Z), scale=(1.0, 0.5, 1.0)))


def _sparkle(root: Node, side: str, x: float, iris, white) -> None:
    root.add(
        mesh(f"sclera.{side}", primitives.sphere(0.16, 8, 6), white, position=(x, EYE_Y, EYE_Z - 0.05)),
        mesh(f"pupil.{side}", primitives.sphere(0.1, 8, 6), iris, position=(x, EYE_Y, EYE_Z + 0.06)),
        mesh(
            f"shine.{side}",
            primitives.sphere(0.04, 6, 4),
            white,
            position=(x + 0.05, EYE_Y + 0.05, EYE_Z + 0.12),
        ),
    )


def generate(style: str, color: str) -> Node:
    root = group("eyes")
    style = resolve("eyeStyle", style)
    iris = lambert(color, DEFAULTS["eyeColor"])
    white = lambert(colors.WHITE, colors.WHITE)

    for side in SIDES:
        x = mirrored(EYE_SPACING, side)
        if style == "wide":
            _wide(root, side, x, iris, white)
        elif style == "sleepy":
            _sleepy(root, side, x, iris)
        elif style == "sparkle":
            _sparkle(root, side, x, iris, white)
        else:
            _dots(root, side, x, iris)
    return root
