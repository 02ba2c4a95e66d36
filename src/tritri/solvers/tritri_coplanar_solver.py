"""
Coplanar-intersection solver - triangles lying in the same plane.

Implements the coplanar half of the Guigue-Devillers triangle-triangle test
(https://hal.inria.fr/inria-00072100/document, figures 6, 9 and 10).

Pipeline:
    1. Project both triangles into an orthonormal frame of t1's plane
       (origin t1.a, axes u, v in the plane, n along the normal).
    2. Wind both counter-clockwise.
    3. Locate p1 = t1.a against the three edges of t2. Inside t2 means
       overlap. Otherwise p1 lies beyond one edge (region R1) or beyond two
       edges around a vertex (region R2); t2 is relabelled so that edge is
       r2p2, or that vertex is r2, and the matching decision tree runs.
    4. On overlap, clip t2 by t1 and map the polygon back to world space.

The R1/R2 trees are the ones of the authors' reference code
(INTERSECTION_TEST_EDGE and INTERSECTION_TEST_VERTEX), branch for branch.
Every test is closed, so triangles that only touch overlap.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..tritri_types import Orientation, Triangle
from ..mathutils.vec3 import Vec3
from ..mathutils import tritri_math as TriTriMath
from ..mathutils.tritri_predicates import orient_2d
from ..mathutils.tritri_canonicalize import make_counter_clockwise, permute_left, permute_right
from .tritri_polygon_clipper import clip_triangle

logger = logging.getLogger(__name__)

NEGATIVE = Orientation.NEGATIVE
POSITIVE = Orientation.POSITIVE


class CoplanarSolver:
    """
    Classifies and measures the overlap of two coplanar triangles.

    All methods are static and keep no state between calls.
    """

    @staticmethod
    def _plane_frame(t1: Triangle):
        """Return (world_to_plane, plane_to_world) matrices for t1's plane."""
        n = TriTriMath.triangle_normal(t1.a, t1.b, t1.c)
        u = TriTriMath.normalize(TriTriMath.sub3(t1.a, t1.b))
        v = TriTriMath.cross3(n, u)

        plane_to_world = TriTriMath.frame_matrix(t1.a, u, v, n)
        world_to_plane = TriTriMath.invert(plane_to_world)
        return world_to_plane, plane_to_world

    @staticmethod
    def _transform(tri: Triangle, matrix) -> Triangle:
        return Triangle(
            TriTriMath.transform_point(tri.a, matrix),
            TriTriMath.transform_point(tri.b, matrix),
            TriTriMath.transform_point(tri.c, matrix),
        )

    @staticmethod
    def _intersection_type_r1(t1: Triangle, t2: Triangle) -> bool:
        """p1 beyond edge r2p2 only: the triangles meet iff t1 meets that edge."""
        # Paper's naming
        p1, q1, r1 = t1.a, t1.b, t1.c
        p2, r2 = t2.a, t2.c

        if orient_2d(r2, p2, q1) is not NEGATIVE:
            if orient_2d(p1, p2, q1) is not NEGATIVE:
                return orient_2d(p1, q1, r2) is not NEGATIVE
            if orient_2d(q1, r1, p2) is not NEGATIVE:
                return orient_2d(r1, p1, p2) is not NEGATIVE
            return False

        if orient_2d(r2, p2, r1) is NEGATIVE:
            # t1 entirely beyond the edge line
            return False
        if orient_2d(p1, p2, r1) is NEGATIVE:
            return False
        if orient_2d(p1, r1, r2) is not NEGATIVE:
            return True
        return orient_2d(q1, r1, r2) is not NEGATIVE

    @staticmethod
    def _intersection_type_r2(t1: Triangle, t2: Triangle) -> bool:
        """p1 beyond vertex r2: the triangles meet iff t1 meets edge r2p2 or q2r2."""
        p1, q1, r1 = t1.a, t1.b, t1.c
        p2, q2, r2 = t2.a, t2.b, t2.c

        if orient_2d(r2, p2, q1) is not NEGATIVE:
            if orient_2d(q2, r2, q1) is not NEGATIVE:
                # q1 inside the angle of t2 at r2
                if orient_2d(p1, p2, q1) is POSITIVE:
                    return orient_2d(p1, q2, q1) is not POSITIVE
                if orient_2d(p1, p2, r1) is not NEGATIVE:
                    return orient_2d(q1, r1, p2) is not NEGATIVE
                return False
            if orient_2d(p1, q2, q1) is not POSITIVE:
                if orient_2d(q2, r2, r1) is not NEGATIVE:
                    return orient_2d(q1, r1, q2) is not NEGATIVE
            return False

        if orient_2d(r2, p2, r1) is NEGATIVE:
            return False
        if orient_2d(q1, r1, r2) is not NEGATIVE:
            return orient_2d(p1, p2, r1) is not NEGATIVE
        if orient_2d(q1, r1, q2) is not NEGATIVE:
            return orient_2d(q2, r2, r1) is not NEGATIVE
        return False

    @staticmethod
    def solve(t1: Triangle, t2: Triangle, target: Optional[List[Vec3]] = None) -> bool:
        """
        Test two coplanar triangles for overlap.

        Args:
            t1, t2: Working copies of two triangles already known to be coplanar.
            target: Optional list that receives the overlap geometry in world
                space (a point, a segment or a convex polygon).

        Returns:
            True when the triangles overlap (touching counts).
        """
        world_to_plane, plane_to_world = CoplanarSolver._plane_frame(t1)

        t1 = make_counter_clockwise(CoplanarSolver._transform(t1, world_to_plane))
        t2 = make_counter_clockwise(CoplanarSolver._transform(t2, world_to_plane))

        p1 = t1.a
        p2, q2, r2 = t2.a, t2.b, t2.c

        o_p2q2 = orient_2d(p2, q2, p1)
        o_q2r2 = orient_2d(q2, r2, p1)
        o_r2p2 = orient_2d(r2, p2, p1)

        # Paper's figure 6: which region of t2's edges p1 falls in
        if o_p2q2 is not NEGATIVE:
            if o_q2r2 is not NEGATIVE:
                if o_r2p2 is not NEGATIVE:
                    # + + +
                    intersecting = True
                else:
                    # + + -
                    intersecting = CoplanarSolver._intersection_type_r1(t1, t2)
            else:
                if o_r2p2 is not NEGATIVE:
                    # + - +
                    t2 = permute_right(t2)
                    intersecting = CoplanarSolver._intersection_type_r1(t1, t2)
                else:
                    # + - -
                    intersecting = CoplanarSolver._intersection_type_r2(t1, t2)
        else:
            if o_q2r2 is not NEGATIVE:
                if o_r2p2 is not NEGATIVE:
                    # - + +
                    t2 = permute_left(t2)
                    intersecting = CoplanarSolver._intersection_type_r1(t1, t2)
                else:
                    # - + -
                    t2 = permute_left(t2)
                    intersecting = CoplanarSolver._intersection_type_r2(t1, t2)
            else:
                if o_r2p2 is not NEGATIVE:
                    # - - +
                    t2 = permute_right(t2)
                    intersecting = CoplanarSolver._intersection_type_r2(t1, t2)
                else:
                    # - - -: p1 right of all three edges of a CCW triangle
                    logger.error("Unreachable coplanar configuration, triangles should not be flat: %s %s", t1, t2)
                    return False

        if intersecting and target is not None:
            polygon = clip_triangle(t1, t2)
            target.clear()
            target.extend(TriTriMath.transform_point(p, plane_to_world) for p in polygon)

        return intersecting
