from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .entities import Vertex

MATCH_TOL = 1e-9

# Plane name -> coordinate indices kept by project_points.
PROJECTION_AXES = {
    "xy": (0, 1),
    "xz": (0, 2),
    "yz": (1, 2),
}


def fuzzy_eq(a: float, b: float, tol: float = MATCH_TOL) -> bool:
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b or abs(a - b) <= tol * max(1.0, abs(a), abs(b))


def vertices_match(v1: Vertex, v2: Vertex, tol: float = MATCH_TOL) -> bool:
    if v1.vtype != v2.vtype or len(v1.coords) != len(v2.coords):
        return False
    return all(fuzzy_eq(a, b, tol) for a, b in zip(v1.coords, v2.coords))


def bounding_box(vertices: Sequence[Vertex]) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
    """Axis-aligned (min, max) corners over the first three coordinates."""

    if not vertices:
        raise ValueError("Unable to compute bounds for an empty vertex list.")
    mins: List[float] = [math.inf] * 3
    maxs: List[float] = [-math.inf] * 3
    for vertex in vertices:
        for axis, value in enumerate(vertex.coords[:3]):
            mins[axis] = min(mins[axis], value)
            maxs[axis] = max(maxs[axis], value)
    return (mins[0], mins[1], mins[2]), (maxs[0], maxs[1], maxs[2])


def vertex_array(vertices: Sequence[Vertex]) -> np.ndarray:
    """
    Stack vertex coordinates into an ``(n, k)`` float64 array where ``k`` is
    the longest coordinate tuple. Shorter rows are padded with NaN.
    """

    if not vertices:
        return np.zeros((0, 0), dtype=np.float64)
    width = max(len(v.coords) for v in vertices)
    out = np.full((len(vertices), width), np.nan, dtype=np.float64)
    for row, vertex in enumerate(vertices):
        out[row, : len(vertex.coords)] = vertex.coords
    return out


def project_points(vertices: Sequence[Vertex], plane: str = "xy") -> List[Tuple[float, float]]:
    try:
        a, b = PROJECTION_AXES[plane]
    except KeyError:
        raise ValueError(f"Unknown projection plane {plane!r}") from None
    return [(v.coords[a], v.coords[b]) for v in vertices]
