"""
bskatar — procedural low-poly avatars stored as AT Protocol records.

The engine maps a ten-field ``AvatarConfig`` to a hierarchy of coloured
primitive meshes.  The same hierarchy feeds the standalone editor and the
player body in the explorable world.
"""

__version__ = "0.1.0"
