"""
Head generator.

round and oval share a geodesic sphere; square is a subdivided box pulled
towards the unit sphere so the silhouette reads as a rounded cube.
"""

from __future__ import annotations

from ..geometry import Geometry, Node, group, mesh, primitives
from ..taxonomy import DEFAULTS, resolve
from .base import lambert

OVAL_SCALE = (0.85, 1.1, 0.9)
SQUARE_SIZE = (1.6, 1.8, 1.5)
SQUARE_SEGMENTS = 2
SQUARE_INFLATE = 0.15


def head_geometry(shape: str) -> Geometry:
    shape = resolve("headShape", shape)
    if shape == "oval":
        return primitives.icosahedron(1, 1).scale(*OVAL_SCALE)
    elif shape == "square":
        w, h, d = SQUARE_SIZE
        geom = primitives.box(w, h, d, SQUARE_SEGMENTS, SQUARE_SEGMENTS, SQUARE_SEGMENTS)
        return primitives.inflate(geom, SQUARE_INFLATE)
    else:
        return primitives.icosahedron(1, 1)


def generate(shape: str, color: str) -> Node:
    root = group("head")
    root.add(mesh("skull", head_geometry(shape), lambert(color, DEFAULTS["headColor"])))
    return root
