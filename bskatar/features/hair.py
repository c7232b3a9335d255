"""
Hair generator.

Each style is a hand-placed composition of caps, cones, capsules and boxes.
The offsets are tuned against a head of radius 1 centred on the origin.
"""

from __future__ import annotations

import math

from .. import colors
from ..geometry import Node, group, mesh, primitives
from ..taxonomy import DEFAULTS, resolve
from .base import lambert

# (x, y, z, rot_x, rot_z)
SPIKES = [
    (0.0, 1.1, 0.0, 0.0, 0.0),
    (0.3, 1.0, 0.1, 0.2, -0.3),
    (-0.3, 1.0, 0.1, 0.2, 0.3),
    (0.15, 1.05, -0.2, -0.2, -0.15),
    (-0.15, 1.05, -0.2, -0.2, 0.15),
    (0.0, 0.95, 0.35, 0.5, 0.0),
    (0.4, 0.85, 0.2, 0.3, -0.5),
    (-0.4, 0.85, 0.2, 0.3, 0.5),
]


def _cap(theta_length: float, y: float, material) -> Node:
    geom = primitives.sphere(1.05, 8, 6, 0, math.pi * 2, 0, theta_length)
    return mesh("cap", geom, material, position=(0.0, y, 0.0))


def _bangs(width: float, height: float, depth: float, position, tilt: float, material) -> Node:
    geom = primitives.box(width, height, depth, 2, 1, 1)
    return mesh("bangs", geom, material, position=position, rotation=(tilt, 0.0, 0.0))


def _short(root: Node, material) -> None:
    root.add(
        _cap(math.pi * 0.45, 0.15, material),
        _bangs(0.8, 0.15, 0.3, (0.0, 0.75, 0.7), 0.3, material),
    )


def _spiky(root: Node, material) -> None:
    for i, (x, y, z, rx, rz) in enumerate(SPIKES):
        root.add(mesh(
            f"spike.{i}",
            primitives.cone(0.15, 0.5, 4),
            material,
            position=(x, y, z),
            rotation=(rx, 0.0, rz),
        ))


def _bob(root: Node, material) -> None:
    shell = primitives.sphere(1.1, 8, 6).scale(1, 0.9, 0.95)
    root.add(mesh("shell", shell, material, position=(0.0, 0.2, 0.0)))
    for side, x, tilt in (("left", -0.85, 0.15), ("right", 0.85, -0.15)):
        root.add(mesh(
            f"side.{side}",
            primitives.capsule(0.25, 0.4, 4, 8),
            material,
            position=(x, -0.1, 0.2),
            rotation=(0.0, 0.0, tilt),
        ))
    root.add(_bangs(0.9, 0.2, 0.25, (0.0, 0.7, 0.75), 0.4, material))


def _ponytail(root: Node, material) -> None:
    root.add(_cap(math.pi * 0.5, 0.1, material))
    root.add(mesh(
        "tail",
        primitives.capsule(0.2, 0.7, 4, 8),
        material,
        position=(0.0, 0.3, -0.9),
        rotation=(0.6, 0.0, 0.0),
    ))
    root.add(mesh(
        "tie",
        primitives.torus(0.15, 0.05, 6, 8),
        lambert(colors.HAIR_TIE_COLOR, colors.HAIR_TIE_COLOR),
        position=(0.0, 0.6, -0.85),
        rotation=(math.pi / 2 + 0.3, 0.0, 0.0),
    ))
    root.add(_bangs(0.7, 0.15, 0.25, (0.0, 0.75, 0.7), 0.3, material))


def generate(style: str, color: str) -> Node:
    root = group("hair")
    style = resolve("hairStyle", style)
    if style == "none":
        return root

    material = lambert(color, DEFAULTS["hairColor"])
    if style == "spiky":
        _spiky(root, material)
    elif style == "bob":
        _bob(root, material)
    elif style == "ponytail":
        _ponytail(root, material)
    else:
        _short(root, material)
    return root
