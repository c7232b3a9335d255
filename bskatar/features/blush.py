"""Blush generator: two fixed, semi-transparent cheek discs."""

from __future__ import annotations

from .. import colors
from ..geometry import Node, group, mesh, primitives
from .base import SIDES, lambert, mirrored

BLUSH_OPACITY = 0.6


def generate() -> Node:
    root = group("blush")
    material = lambert(colors.BLUSH_COLOR, colors.BLUSH_COLOR, opacity=BLUSH_OPACITY)
    for side in SIDES:
        root.add(mesh(
            f"cheek.{side}",
            primitives.circle(0.1, 6),
            material,
            position=(mirrored(0.55, side), -0.05, 0.75),
            rotation=(0.0, mirrored(0.4, side), 0.0),
        ))
    return root
