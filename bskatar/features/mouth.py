"""
Mouth generator.  The mouth ignores every user colour and is drawn near-black.
"""

from __future__ import annotations

import math

from .. import colors
from ..geometry import Node, group, mesh, primitives
from ..taxonomy import resolve
from .base import lambert

MOUTH_Y = -0.25
MOUTH_Z = 0.9


def _smile(root: Node, ink) -> None:
    arc = primitives.torus(0.15, 0.025, 8, 12, math.pi).rotate_x(math.pi).rotate_z(math.pi)
    root.add(mesh("smile", arc, ink, position=(0.0, MOUTH_Y, MOUTH_Z)))


def _neutral(root: Node, ink) -> None:
    line = primitives.capsule(0.02, 0.2, 4, 8).rotate_z(math.pi / 2)
    root.add(mesh("line", line, ink, position=(0.0, MOUTH_Y, MOUTH_Z)))


def _open(root: Node, ink) -> None:
    hole = primitives.sphere(0.12, 8, 6).scale(1.3, 0.8, 0.5)
    tongue = primitives.sphere(0.06, 6, 4).scale(1, 0.6, 0.5)
    root.add(
        mesh("opening", hole, ink, position=(0.0, MOUTH_Y, MOUTH_Z)),
        mesh(
            "tongue",
            tongue,
            lambert(colors.TONGUE_COLOR, colors.TONGUE_COLOR),
            position=(0.0, MOUTH_Y - 0.05, MOUTH_Z + 0.02),
        ),
    )


def _cat(root: Node, ink) -> None:
    # two half rings meeting in the middle, like a sideways "3"
    for side, x, turn in (("left", -0.06, 0.75), ("right", 0.06, 0.25)):
        arc = primitives.torus(0.08, 0.02, 6, 8, math.pi).rotate_x(math.pi).rotate_z(math.pi * turn)
        root.add(mesh(f"lip.{side}", arc, ink, position=(x, MOUTH_Y - 0.02, MOUTH_Z)))


def _surprised(root: Node, ink) -> None:
    ring = primitives.torus(0.1, 0.03, 8, 12)
    root.add(mesh("ring", ring, ink, position=(0.0, MOUTH_Y, MOUTH_Z)))


def generate(style: str) -> Node:
    root = group("mouth")
    style = resolve("mouthStyle", style)
    ink = lambert(colors.MOUTH_COLOR, colors.MOUTH_COLOR)

    if style == "neutral":
        _neutral(root, ink)
    elif style == "open":
        _open(root, ink)
    elif style == "cat":
        _cat(root, ink)
    elif style == "surprised":
        _surprised(root, ink)
    else:
        _smile(root, ink)
    return root
