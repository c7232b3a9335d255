"""
Avatar assembler — composes the feature generators into one hierarchy.

The hierarchy is rebuilt from scratch on every change.  A few dozen
primitives is cheap to regenerate, and no node from a previous build is
ever reused.
"""

from __future__ import annotations

import logging
from typing import List

from .features import blush, eyebrows, eyes, hair, head, mouth, nose
from .features.base import lambert
from .geometry import Node, group, mesh, primitives
from .models import AvatarConfig
from .taxonomy import DEFAULTS

logger = logging.getLogger("bskatar.assembler")

ROOT_NAME = "avatar"

# Player body in the explorable world
PLAYER_HEAD_HEIGHT = 1.2
PLAYER_SCALE = 0.6
PLAYER_BODY_Y = -1.4


def feature_parts(config: AvatarConfig) -> List[Node]:
    """
    Generate every sub-assembly in sibling order.

    Order: head, hair, nose, eyes, eyebrows, mouth, then blush when enabled.
    Parts with nothing to draw are dropped.
    """
    parts = [
        head.generate(config.head_shape, config.head_color),
        hair.generate(config.hair_style, config.hair_color),
        nose.generate(config.nose_style, config.head_color),
        eyes.generate(config.eye_style, config.eye_color),
        eyebrows.generate(config.eyebrow_style, config.hair_color),
        mouth.generate(config.mouth_style),
    ]
    if config.has_blush:
        parts.append(blush.generate())
    return [p for p in parts if not p.is_empty]


def assemble(root: Node, config: AvatarConfig) -> Node:
    """Replace every child of ``root`` with a fresh build of ``config``."""
    removed = root.clear()
    parts = feature_parts(config)
    root.add(*parts)
    logger.debug(
        "Assembled %s: removed %d parts, added %d (%d meshes)",
        root.name, removed, len(parts), len(root.meshes()),
    )
    return root


def build_avatar(config: AvatarConfig) -> Node:
    return assemble(group(ROOT_NAME), config)


def assemble_player(root: Node, config: AvatarConfig) -> Node:
    """
    World variant: the same face, shrunk and lifted onto a capsule body.

    ``root`` receives a single ``avatar`` group positioned at head height.
    """
    root.clear()
    avatar = group(ROOT_NAME, position=(0.0, PLAYER_HEAD_HEIGHT, 0.0))
    avatar.scale = (PLAYER_SCALE, PLAYER_SCALE, PLAYER_SCALE)
    assemble(avatar, config)
    avatar.add(mesh(
        "body",
        primitives.capsule(0.4, 0.8, 4, 8),
        lambert(config.head_color, DEFAULTS["headColor"]),
        position=(0.0, PLAYER_BODY_Y, 0.0),
    ))
    root.add(avatar)
    return root


def build_player(config: AvatarConfig) -> Node:
    return assemble_player(group("player"), config)
