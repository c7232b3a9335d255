"""
Scene graph used by the avatar engine.

A ``Node`` is either a group (children only) or a mesh (``geometry`` plus
``material``).  The tree is handed to the rendering collaborator through
``Node.to_dict()``; the engine itself never renders.

Vertex buffers are ``(N, 3)`` NumPy arrays; all vertex math is vectorised.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

Vec3 = Tuple[float, float, float]


@dataclass(eq=False)
class Geometry:
    """
    Vertex buffer of one primitive.

    Attributes:
        kind: Primitive name (``icosahedron``, ``box``, ``sphere`` ...)
        params: Construction parameters, kept for the renderer and for debugging
        vertices: ``(N, 3)`` float64 vertex positions in local space
        indices: Flat triangle list, three indices per face
    """
    kind: str
    params: Dict[str, float]
    vertices: NDArray[np.float64]
    indices: NDArray[np.uint32] = field(default_factory=lambda: np.zeros(0, dtype=np.uint32))

    def __post_init__(self) -> None:
        self.vertices = np.asarray(self.vertices, dtype=np.float64).reshape(-1, 3)
        self.indices = np.asarray(self.indices, dtype=np.uint32).ravel()

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def transform(self, matrix: NDArray[np.float64]) -> "Geometry":
        """Apply a 3x3 linear map to every vertex in place."""
        self.vertices = self.vertices @ np.asarray(matrix, dtype=np.float64).T
        return self

    def scale(self, sx: float, sy: float, sz: float) -> "Geometry":
        self.vertices = self.vertices * np.array([sx, sy, sz], dtype=np.float64)
        return self

    def rotate_x(self, angle: float) -> "Geometry":
        c, s = math.cos(angle), math.sin(angle)
        return self.transform([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])

    def rotate_z(self, angle: float) -> "Geometry":
        c, s = math.cos(angle), math.sin(angle)
        return self.transform([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "params": dict(self.params),
            "vertices": self.vertices.tolist(),
            "indices": self.indices.tolist(),
        }


@dataclass
class Material:
    """Flat-shaded Lambert-style material."""
    color: str
    flat_shading: bool = True
    transparent: bool = False
    opacity: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "flat_shading": self.flat_shading,
            "transparent": self.transparent,
            "opacity": self.opacity,
        }


@dataclass
class Node:
    """
    One node of the avatar hierarchy.

    Transforms are local to the parent: ``position``, Euler XYZ ``rotation``
    in radians and per-axis ``scale``.
    """
    name: str
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    geometry: Optional[Geometry] = None
    material: Optional[Material] = None
    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False, compare=False)

    @property
    def is_mesh(self) -> bool:
        return self.geometry is not None

    @property
    def is_empty(self) -> bool:
        """A group with nothing to draw."""
        return self.geometry is None and not self.children

    def add(self, *nodes: "Node") -> "Node":
        for node in nodes:
            if node.parent is not None:
                node.parent.remove(node)
            node.parent = self
            self.children.append(node)
        return self

    def remove(self, node: "Node") -> None:
        self.children.remove(node)
        node.parent = None

    def clear(self) -> int:
        """Detach every child; returns how many were removed."""
        removed = 0
        while self.children:
            self.remove(self.children[0])
            removed += 1
        return removed

    def walk(self) -> Iterator["Node"]:
        """Depth-first, pre-order, including ``self``."""
        yield self
        for child in self.children:
            yield from child.walk()

    def meshes(self) -> List["Node"]:
        return [n for n in self.walk() if n.is_mesh]

    def find(self, name: str) -> Optional["Node"]:
        for n in self.walk():
            if n.name == name:
                return n
        return None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "scale": list(self.scale),
            "children": [c.to_dict() for c in self.children],
        }
        if self.geometry is not None:
            out["geometry"] = self.geometry.to_dict()
        if self.material is not None:
            out["material"] = self.material.to_dict()
        return out


def group(name: str, position: Vec3 = (0.0, 0.0, 0.0)) -> Node:
    return Node(name=name, position=position)


def mesh(
    name: str,
    geometry: Geometry,
    material: Material,
    position: Vec3 = (0.0, 0.0, 0.0),
    rotation: Vec3 = (0.0, 0.0, 0.0),
    scale: Vec3 = (1.0, 1.0, 1.0),
) -> Node:
    return Node(
        name=name,
        position=position,
        rotation=rotation,
        scale=scale,
        geometry=geometry,
        material=material,
    )
