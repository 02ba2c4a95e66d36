"""
Cross-intersection solver - triangles lying in different planes.

Implements the non-coplanar half of the Guigue-Devillers triangle-triangle
test ("Fast and Robust Triangle-Triangle Overlap Test Using Orientation
Predicates", 2003, https://hal.inria.fr/inria-00072100/document).

Core Concepts:
    Isolated vertex:
        Each triangle is relabelled so that its vertex `a` is alone on its
        side of the other triangle's plane. Edges a->b and a->c are then the
        two edges that pierce (or touch) the other plane.

    Interval test:
        The two triangles cut the line L shared by both planes in two
        intervals [i, j] (t1) and [k, l] (t2). After canonicalization two
        orient_3d tests tell whether these intervals overlap.

    Segment extraction:
        Two more orient_3d tests give the order of the four interval ends
        along L; the two inner ones are the intersection segment. Each end is
        computed as an edge/plane intersection.

Main API:
    CrossSolver.solve(t1, t2, o1a, o1b, o1c, target) -> bool
"""

from __future__ import annotations

from typing import List, Optional

from ..tritri_types import Orientation, Triangle
from ..mathutils.vec3 import Vec3
from ..mathutils.tritri_math import EPSILON, distance, intersect_line_with_plane, triangle_normal
from ..mathutils.tritri_predicates import orient_3d
from ..mathutils.tritri_canonicalize import permute_left, permute_right, swap_bc


class CrossSolver:
    """
    Classifies and measures the intersection of two non-coplanar triangles.

    All methods are static and keep no state between calls.
    """

    @staticmethod
    def _make_a_vertex_alone(tri: Triangle, oa: Orientation, ob: Orientation, oc: Orientation) -> Triangle:
        """Relabel tri so that `a` is the vertex alone on its side of the other plane."""
        if oa == ob:
            # c is alone
            return permute_right(tri)
        elif oa == oc:
            # b is alone
            return permute_left(tri)
        elif ob != oc:
            # All three differ (one of them is ZERO): put the positive one in a
            if ob is Orientation.POSITIVE:
                return permute_left(tri)
            elif oc is Orientation.POSITIVE:
                return permute_right(tri)
        return tri

    @staticmethod
    def _make_a_vertex_positive(tri: Triangle, other: Triangle) -> Triangle:
        """Flip `other` so that tri.a does not lie on its negative side."""
        if orient_3d(other.a, other.b, other.c, tri.a) is Orientation.NEGATIVE:
            return swap_bc(other)
        return other

    @staticmethod
    def _intersect_plane(p0: Vec3, p1: Vec3, plane_point: Vec3, plane_normal: Vec3) -> Vec3:
        """Point where edge p0->p1 meets the plane."""
        point = intersect_line_with_plane(p0, p1, plane_point, plane_normal)
        if point is None:
            # Edge lies in a plane parallel to the other one; p0 is on it
            return p0.copy()
        return point

    @staticmethod
    def _compute_segment(t1: Triangle, t2: Triangle, target: List[Vec3]) -> None:
        """Fill target with the ends of the intersection segment."""
        n1 = triangle_normal(t1.a, t1.b, t1.c)
        n2 = triangle_normal(t2.a, t2.b, t2.c)

        o1 = orient_3d(t1.a, t1.c, t2.b, t2.a)
        o2 = orient_3d(t1.a, t1.b, t2.c, t2.a)

        intersect = CrossSolver._intersect_plane
        if o1 is Orientation.POSITIVE:
            if o2 is Orientation.POSITIVE:
                # Order along L: k i l j
                i1 = intersect(t1.a, t1.c, t2.a, n2)  # i
                i2 = intersect(t2.a, t2.c, t1.a, n1)  # l
            else:
                # Order along L: k i j l
                i1 = intersect(t1.a, t1.c, t2.a, n2)  # i
                i2 = intersect(t1.a, t1.b, t2.a, n2)  # j
        else:
            if o2 is Orientation.POSITIVE:
                # Order along L: i k l j
                i1 = intersect(t2.a, t2.b, t1.a, n1)  # k
                i2 = intersect(t2.a, t2.c, t1.a, n1)  # l
            else:
                # Order along L: i k j l
                i1 = intersect(t2.a, t2.b, t1.a, n1)  # k
                i2 = intersect(t1.a, t1.b, t2.a, n2)  # j

        target.clear()
        target.append(i1)
        if distance(i1, i2) >= EPSILON:
            target.append(i2)

    @staticmethod
    def solve(t1: Triangle, t2: Triangle,
              o1a: Orientation, o1b: Orientation, o1c: Orientation,
              target: Optional[List[Vec3]] = None) -> bool:
        """
        Test two non-coplanar triangles for intersection.

        Args:
            t1, t2: Working copies of the triangles (never the caller's objects).
            o1a, o1b, o1c: Orientation of t1's vertices against t2's plane,
                as already computed by the dispatcher.
            target: Optional list that receives the intersection points
                (one point for a touch, two for a segment).

        Returns:
            True when the triangles intersect (touching counts).
        """
        o2a = orient_3d(t1.a, t1.b, t1.c, t2.a)
        o2b = orient_3d(t1.a, t1.b, t1.c, t2.b)
        o2c = orient_3d(t1.a, t1.b, t1.c, t2.c)

        # One triangle entirely on one side of the other's plane
        if o2a == o2b and o2a == o2c:
            return False
        if o1a == o1b and o1a == o1c:
            return False

        t1 = CrossSolver._make_a_vertex_alone(t1, o1a, o1b, o1c)
        t2 = CrossSolver._make_a_vertex_alone(t2, o2a, o2b, o2c)

        t1 = CrossSolver._make_a_vertex_positive(t2, t1)
        t2 = CrossSolver._make_a_vertex_positive(t1, t2)

        o1 = orient_3d(t1.a, t1.b, t2.a, t2.b)
        o2 = orient_3d(t1.a, t1.c, t2.c, t2.a)

        if o1 is not Orientation.POSITIVE and o2 is not Orientation.POSITIVE:
            if target is not None:
                CrossSolver._compute_segment(t1, t2, target)
            return True

        return False
