"""
Sutherland-Hodgman clipping of one planar triangle against another.

Both triangles are expected in the 2D frame built by the coplanar solver
(z ~ 0) and wound counter-clockwise, so "inside" an edge means "not to the
right of it".
"""

from __future__ import annotations

from typing import List

from ..tritri_types import Orientation, Triangle
from ..mathutils.vec3 import Vec3
from ..mathutils.tritri_math import POINT_MERGE_TOLERANCE, distance, intersect_lines_2d
from ..mathutils.tritri_predicates import orient_2d


def clip_triangle(clip: Triangle, subject: Triangle) -> List[Vec3]:
    """Clip `subject` by the three edges of `clip`.

    Clip edges are taken in the order (c, a), (a, b), (b, c). Points lying on
    a clip edge count as inside. Near-coincident output points are merged.

    Returns:
        Vertices of the convex overlap polygon (possibly 1 or 2 points when the
        triangles only touch), in 2D frame coordinates.
    """
    clip_points = (clip.a, clip.b, clip.c)
    output = [subject.a, subject.b, subject.c]

    for i in range(3):
        edge_start = clip_points[(i + 2) % 3]
        edge_end = clip_points[i]
        polygon = output
        output = []

        orients = [orient_2d(edge_start, edge_end, p) for p in polygon]

        for j in range(len(polygon)):
            j_prev = (j - 1) % len(polygon)
            inside = orients[j] is not Orientation.NEGATIVE
            prev_inside = orients[j_prev] is not Orientation.NEGATIVE

            # A change of side guarantees the subject edge is not parallel to the clip edge
            if inside:
                if not prev_inside:
                    output.append(intersect_lines_2d(edge_start, edge_end, polygon[j_prev], polygon[j]))
                output.append(polygon[j].copy())
            elif prev_inside:
                output.append(intersect_lines_2d(edge_start, edge_end, polygon[j_prev], polygon[j]))

    return merge_points(output)


def merge_points(points: List[Vec3], tolerance: float = POINT_MERGE_TOLERANCE) -> List[Vec3]:
    """Drop every point within `tolerance` of a point already kept. Order is preserved."""
    kept: List[Vec3] = []
    for point in points:
        if not any(distance(point, other) <= tolerance for other in kept):
            kept.append(point)
    return kept
