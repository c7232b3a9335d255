"""
Shared helpers for the feature generators.

Every generator returns a group node named after its feature.  A style that
draws nothing ("none") returns that group with no children.
"""

from __future__ import annotations

from .. import colors
from ..geometry import Material


def lambert(color: str, fallback: str, opacity: float = 1.0) -> Material:
    """Flat-shaded material; an unparsable ``color`` falls back to ``fallback``."""
    return Material(
        color=colors.normalize(color, fallback),
        flat_shading=True,
        transparent=opacity < 1.0,
        opacity=opacity,
    )


def mirrored(x: float, side: str) -> float:
    """``x`` placed on the given side of the face (left is negative X)."""
    return -x if side == "left" else x


SIDES = ("left", "right")
