"""
Orientation predicates.

Sign-of-determinant tests in 2D and 3D. Both predicates compare the raw
determinant against the single tolerance EPSILON: a value with magnitude at
most EPSILON is ZERO, so ties always resolve to ZERO.
"""

from __future__ import annotations

from ..tritri_types import Orientation, Triangle
from .tritri_math import EPSILON, cross3, determinant, determinant3, sub3


def _sign(det: float) -> Orientation:
    if det < -EPSILON:
        return Orientation.NEGATIVE
    elif det > EPSILON:
        return Orientation.POSITIVE
    else:
        return Orientation.ZERO


def orient_3d(a, b, c, d) -> Orientation:
    """Orientation of d relative to the plane through a, b, c.

    Sign of the determinant of the 4x4 matrix whose rows are the homogenized
    points [x, y, z, 1]. That determinant equals -((b - a) x (c - a)) . (d - a),
    i.e. six times the signed volume of the tetrahedron (a, b, c, d) taken with
    the opposite sign: POSITIVE when d lies on the side the right-hand normal of
    (a, b, c) points away from, NEGATIVE on the side it points to.
    """
    det = determinant((
        (a[0], a[1], a[2], 1.0),
        (b[0], b[1], b[2], 1.0),
        (c[0], c[1], c[2], 1.0),
        (d[0], d[1], d[2], 1.0),
    ))
    return _sign(det)


def orient_2d(a, b, c) -> Orientation:
    """Orientation of c relative to the directed line a -> b (z is ignored).

    POSITIVE when (a, b, c) turns counter-clockwise, NEGATIVE when it turns
    clockwise, ZERO when the three points are collinear within EPSILON.
    """
    det = determinant3((
        (a[0], a[1], 1.0),
        (b[0], b[1], 1.0),
        (c[0], c[1], 1.0),
    ))
    return _sign(det)


def is_tri_degenerated(tri: Triangle) -> bool:
    """True when the triangle has (near) zero area.

    The edges (a - b) and (a - c) are crossed; the triangle is degenerate when
    every component of that cross product is within EPSILON of zero.
    """
    n = cross3(sub3(tri.a, tri.b), sub3(tri.a, tri.c))
    return abs(n.x) <= EPSILON and abs(n.y) <= EPSILON and abs(n.z) <= EPSILON
