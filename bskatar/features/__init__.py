"""
Feature generators — one pure function per facial feature.

Each ``generate`` takes a style (and colour where the feature has one) and
returns a fresh group node.  Unknown styles fall through to the taxonomy
default, so generation never fails.
"""

from . import blush, eyebrows, eyes, hair, head, mouth, nose

__all__ = ["blush", "eyebrows", "eyes", "hair", "head", "mouth", "nose"]
