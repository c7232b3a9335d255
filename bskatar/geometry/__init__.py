"""Scene graph and primitive builders for the avatar engine."""

from .scene import Geometry, Material, Node, Vec3, group, mesh

__all__ = ["Geometry", "Material", "Node", "Vec3", "group", "mesh"]
