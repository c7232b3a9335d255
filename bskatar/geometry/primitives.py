"""
Primitive solid builders.

Each builder returns a fresh ``Geometry`` centred on the origin.  Vertex
layouts follow the usual low-poly conventions (Y up, +Z towards the viewer)
so the literal offsets in the feature generators place parts on the face.
"""

from __future__ import annotations

import math
from typing import List

import numpy as np
from numpy.typing import NDArray

from .scene import Geometry

TAU = math.pi * 2

_PHI = (1 + math.sqrt(5)) / 2

_ICO_VERTICES = np.array([
    (-1, _PHI, 0), (1, _PHI, 0), (-1, -_PHI, 0), (1, -_PHI, 0),
    (0, -1, _PHI), (0, 1, _PHI), (0, -1, -_PHI), (0, 1, -_PHI),
    (_PHI, 0, -1), (_PHI, 0, 1), (-_PHI, 0, -1), (-_PHI, 0, 1),
], dtype=np.float64)

_ICO_FACES = np.array([
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
])


def _steps(count: int, span: float, start: float = 0.0) -> NDArray[np.float64]:
    """``count + 1`` evenly spaced values from ``start`` to ``start + span``."""
    return start + (np.arange(count + 1) / count) * span


def _grid_indices(cols: int, rows: int, skip_first: bool, skip_last: bool) -> NDArray[np.uint32]:
    """Two triangles per cell of a row-major vertex grid; pole rows collapse to one."""
    stride = cols + 1
    iy, ix = np.mgrid[0:rows, 0:cols]
    b = ix + stride * iy
    a = b + 1
    c = b + stride
    d = c + 1

    tris = np.stack([np.stack([a, b, d], axis=-1), np.stack([b, c, d], axis=-1)], axis=2)
    keep = np.ones((rows, cols, 2), dtype=bool)
    if skip_first:
        keep[0, :, 0] = False
    if skip_last:
        keep[-1, :, 1] = False
    return tris[keep].ravel().astype(np.uint32)


def icosahedron(radius: float = 1.0, detail: int = 0) -> Geometry:
    """Geodesic sphere: an icosahedron whose faces are split ``detail`` times."""
    cols = detail + 1
    corners: List[NDArray[np.float64]] = []

    for a, b, c in _ICO_VERTICES[_ICO_FACES]:
        rows = []
        for i in range(cols + 1):
            aj = a + (c - a) * (i / cols)
            bj = b + (c - b) * (i / cols)
            span = cols - i
            if span == 0:
                rows.append([aj])
            else:
                rows.append([aj + (bj - aj) * (j / span) for j in range(span + 1)])

        for i in range(cols):
            for j in range(2 * (cols - i) - 1):
                k = j // 2
                if j % 2 == 0:
                    corners.extend((rows[i][k + 1], rows[i + 1][k], rows[i][k]))
                else:
                    corners.extend((rows[i][k + 1], rows[i + 1][k + 1], rows[i + 1][k]))

    vertices = np.array(corners)
    vertices = vertices / np.linalg.norm(vertices, axis=1, keepdims=True) * radius

    return Geometry(
        kind="icosahedron",
        params={"radius": radius, "detail": detail},
        vertices=vertices,
        indices=np.arange(len(vertices)),
    )


def box(
    width: float = 1.0,
    height: float = 1.0,
    depth: float = 1.0,
    width_segments: int = 1,
    height_segments: int = 1,
    depth_segments: int = 1,
) -> Geometry:
    """Axis-aligned box built from six subdivided planes."""
    blocks = []
    faces = []
    start = 0

    # (u, v, w axes, u dir, v dir, plane width, plane height, offset along w, grid x, grid y)
    planes = [
        (2, 1, 0, -1, -1, depth, height, width, depth_segments, height_segments),
        (2, 1, 0, 1, -1, depth, height, -width, depth_segments, height_segments),
        (0, 2, 1, 1, 1, width, depth, height, width_segments, depth_segments),
        (0, 2, 1, 1, -1, width, depth, -height, width_segments, depth_segments),
        (0, 1, 2, 1, -1, width, height, depth, width_segments, height_segments),
        (0, 1, 2, -1, -1, width, height, -depth, width_segments, height_segments),
    ]

    for u, v, w, udir, vdir, pw, ph, pd, gx, gy in planes:
        xs, ys = np.meshgrid(_steps(gx, pw, -pw / 2), _steps(gy, ph, -ph / 2))
        plane = np.zeros(((gx + 1) * (gy + 1), 3))
        plane[:, u] = xs.ravel() * udir
        plane[:, v] = ys.ravel() * vdir
        plane[:, w] = pd / 2
        blocks.append(plane)

        iy, ix = np.mgrid[0:gy, 0:gx]
        a = start + ix + (gx + 1) * iy
        b = start + ix + (gx + 1) * (iy + 1)
        c = b + 1
        d = a + 1
        faces.append(np.stack([a, b, d, b, c, d], axis=-1).ravel())
        start += len(plane)

    return Geometry(
        kind="box",
        params={
            "width": width,
            "height": height,
            "depth": depth,
            "width_segments": width_segments,
            "height_segments": height_segments,
            "depth_segments": depth_segments,
        },
        vertices=np.concatenate(blocks),
        indices=np.concatenate(faces),
    )


def sphere(
    radius: float = 1.0,
    width_segments: int = 8,
    height_segments: int = 6,
    phi_start: float = 0.0,
    phi_length: float = TAU,
    theta_start: float = 0.0,
    theta_length: float = math.pi,
) -> Geometry:
    """UV sphere; partial ranges of phi/theta give caps and domes."""
    theta, phi = np.meshgrid(
        _steps(height_segments, theta_length, theta_start),
        _steps(width_segments, phi_length, phi_start),
        indexing="ij",
    )
    vertices = np.stack([
        -radius * np.cos(phi) * np.sin(theta),
        radius * np.cos(theta),
        radius * np.sin(phi) * np.sin(theta),
    ], axis=-1).reshape(-1, 3)

    theta_end = min(theta_start + theta_length, math.pi)
    indices = _grid_indices(
        width_segments,
        height_segments,
        skip_first=theta_start <= 0,
        skip_last=theta_end >= math.pi,
    )
    return Geometry(
        kind="sphere",
        params={
            "radius": radius,
            "width_segments": width_segments,
            "height_segments": height_segments,
            "phi_start": phi_start,
            "phi_length": phi_length,
            "theta_start": theta_start,
            "theta_length": theta_length,
        },
        vertices=vertices,
        indices=indices,
    )


def cone(radius: float = 1.0, height: float = 1.0, radial_segments: int = 8) -> Geometry:
    """Cone with its apex on +Y and a closed base."""
    half = height / 2
    theta = _steps(radial_segments, TAU)

    # apex and rim vertices alternate: apex x at 2x, rim x at 2x + 1
    side = np.zeros((2 * (radial_segments + 1), 3))
    side[0::2, 1] = half
    side[1::2, 0] = radius * np.sin(theta)
    side[1::2, 1] = -half
    side[1::2, 2] = radius * np.cos(theta)
    vertices = np.vstack([side, [(0.0, -half, 0.0)]])
    centre = len(vertices) - 1

    x = np.arange(radial_segments)
    apex, rim, rim_next = 2 * x, 2 * x + 1, 2 * x + 3
    indices = np.concatenate([
        np.stack([apex, rim, rim_next], axis=-1).ravel(),
        np.stack([np.full_like(x, centre), rim_next, rim], axis=-1).ravel(),
    ])

    return Geometry(
        kind="cone",
        params={"radius": radius, "height": height, "radial_segments": radial_segments},
        vertices=vertices,
        indices=indices,
    )


def capsule(
    radius: float = 1.0,
    length: float = 1.0,
    cap_segments: int = 4,
    radial_segments: int = 8,
) -> Geometry:
    """Cylinder of ``length`` along Y closed by two hemispheres of ``radius``."""
    half = length / 2
    top = _steps(cap_segments, math.pi / 2)
    bottom = _steps(cap_segments, math.pi / 2, math.pi / 2)
    ring_r = radius * np.sin(np.concatenate([top, bottom]))
    ring_y = np.concatenate([half + radius * np.cos(top), -half + radius * np.cos(bottom)])

    theta = _steps(radial_segments, TAU)
    vertices = np.stack([
        np.outer(ring_r, np.sin(theta)),
        np.repeat(ring_y[:, None], len(theta), axis=1),
        np.outer(ring_r, np.cos(theta)),
    ], axis=-1).reshape(-1, 3)

    return Geometry(
        kind="capsule",
        params={
            "radius": radius,
            "length": length,
            "cap_segments": cap_segments,
            "radial_segments": radial_segments,
        },
        vertices=vertices,
        indices=_grid_indices(radial_segments, len(ring_r) - 1, skip_first=True, skip_last=True),
    )


def torus(
    radius: float = 1.0,
    tube: float = 0.4,
    radial_segments: int = 8,
    tubular_segments: int = 12,
    arc: float = TAU,
) -> Geometry:
    """Ring in the XY plane; ``arc`` below a full turn yields an open arc."""
    v, u = np.meshgrid(_steps(radial_segments, TAU), _steps(tubular_segments, arc), indexing="ij")
    ring = radius + tube * np.cos(v)
    vertices = np.stack([ring * np.cos(u), ring * np.sin(u), tube * np.sin(v)], axis=-1).reshape(-1, 3)

    stride = tubular_segments + 1
    jj, ii = np.mgrid[0:radial_segments, 0:tubular_segments]
    b = stride * jj + ii
    a = b + stride
    c = b + 1
    d = a + 1

    return Geometry(
        kind="torus",
        params={
            "radius": radius,
            "tube": tube,
            "radial_segments": radial_segments,
            "tubular_segments": tubular_segments,
            "arc": arc,
        },
        vertices=vertices,
        indices=np.stack([a, b, d, b, c, d], axis=-1).ravel(),
    )


def circle(radius: float = 1.0, segments: int = 8) -> Geometry:
    """Flat disc in the XY plane, facing +Z."""
    theta = _steps(segments, TAU)
    rim = np.stack([radius * np.cos(theta), radius * np.sin(theta), np.zeros_like(theta)], axis=-1)
    i = np.arange(1, segments + 1)
    return Geometry(
        kind="circle",
        params={"radius": radius, "segments": segments},
        vertices=np.vstack([np.zeros((1, 3)), rim]),
        indices=np.stack([i, i + 1, np.zeros_like(i)], axis=-1).ravel(),
    )


def inflate(geometry: Geometry, factor: float) -> Geometry:
    """
    Pull every vertex ``factor`` of the way towards the unit sphere.

    Each vertex ``v`` of length ``L`` becomes ``v + (v / L - v) * factor``, so
    its new length is ``L + (1 - L) * factor``.  Vertices far from the
    centre (box corners) move the most, which rounds the silhouette.  A vertex
    at the origin has no direction and is left where it is.
    """
    v = geometry.vertices
    n = np.linalg.norm(v, axis=1, keepdims=True)
    pushed = v + (v / np.where(n == 0, 1.0, n) - v) * factor
    geometry.vertices = np.where(n == 0, v, pushed)
    geometry.params = {**geometry.params, "inflate": factor}
    return geometry
