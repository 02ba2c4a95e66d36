"""
Triangle-triangle intersection entry point.

Pipeline:
1. Reject degenerate triangles (warning + None)
2. Orient t1's vertices against t2's plane
3. CoplanarSolver when all three are ZERO, CrossSolver otherwise

Usage:
    from tritri import triangles_intersect, Intersection

    points = []
    kind = triangles_intersect(t1, t2, points)
    if kind is Intersection.CROSS:
        ...  # points holds a point or a segment
"""

from __future__ import annotations

import warnings
from typing import Any, List, Optional

from .tritri_types import DegenerateTriangleWarning, Intersection, Orientation, Triangle
from .mathutils.vec3 import Vec3
from .mathutils.tritri_predicates import is_tri_degenerated, orient_3d
from .solvers import CoplanarSolver, CrossSolver


def triangles_intersect(t1: Any, t2: Any, target: Optional[List[Vec3]] = None) -> Optional[Intersection]:
    """
    Tell whether t1 and t2 cross each other, overlap in a common plane, or miss.

    Args:
        t1, t2: Triangles (Triangle instances or any 3x3 sequence/array of
            vertex coordinates). They are copied and never modified.
        target: Optional list. When given it is always emptied, and on a hit
            it receives the intersection geometry: one point (touch), two
            points (segment) or three or more points (convex polygon,
            coplanar case only).

    Returns:
        Intersection.CROSS, Intersection.COPLANAR, or None when the triangles
        do not intersect or one of them is degenerate.

    Raises:
        ValueError: If t1 or t2 cannot be read as three 3D points.
    """
    if target is not None:
        target.clear()

    t1 = Triangle.of(t1)
    t2 = Triangle.of(t2)

    t1_degenerated = is_tri_degenerated(t1)
    t2_degenerated = is_tri_degenerated(t2)
    if t1_degenerated or t2_degenerated:
        which = "both triangles" if t1_degenerated and t2_degenerated else ("t1" if t1_degenerated else "t2")
        warnings.warn(f"Degenerated triangles provided ({which}), skipping.", DegenerateTriangleWarning, stacklevel=2)
        return None

    # Relative position of t1's vertices against t2's plane
    o1a = orient_3d(t2.a, t2.b, t2.c, t1.a)
    o1b = orient_3d(t2.a, t2.b, t2.c, t1.b)
    o1c = orient_3d(t2.a, t2.b, t2.c, t1.c)

    if o1a is Orientation.ZERO and o1b is Orientation.ZERO and o1c is Orientation.ZERO:
        if CoplanarSolver.solve(t1, t2, target):
            return Intersection.COPLANAR
        return None

    if CrossSolver.solve(t1, t2, o1a, o1b, o1c, target):
        return Intersection.CROSS

    return None


# Short alias matching the documented contract name
intersect = triangles_intersect
