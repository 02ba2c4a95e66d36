"""
TriTri - Fast and robust triangle-triangle intersection in 3D.

Tells whether two triangles cross each other, overlap in a common plane, or
miss, and computes the intersection geometry (a point, a segment or a convex
polygon). Based on the Guigue-Devillers orientation-predicate test.

Usage:
    from tritri import triangles_intersect, Intersection

    points = []
    result = triangles_intersect(
        [(0, 0, 0), (4, 0, 0), (0, 4, 0)],
        [(1, 1, -1), (1, 1, 1), (3, 1, 0)],
        points,
    )
    # result is Intersection.CROSS, points holds the segment ends
"""

import logging

from .mathutils.vec3 import Vec3
from .tritri_types import (
    DegenerateTriangleWarning,
    GeometryKind,
    Intersection,
    Orientation,
    Triangle,
)
from .mathutils.tritri_predicates import is_tri_degenerated, orient_2d, orient_3d
from .mathutils.tritri_canonicalize import make_counter_clockwise, permute_left, permute_right
from .tritri_intersect import intersect, triangles_intersect
from .tritri_engine import TriTriConfig, TriTriResult, run
from .tritri_parsing_utils import format_point, format_triangle, parse_triangle
from .tritri_logging import configure_logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Vec3',
    'Triangle',
    'Orientation',
    'Intersection',
    'GeometryKind',
    'DegenerateTriangleWarning',
    'triangles_intersect',
    'intersect',
    'orient_3d',
    'orient_2d',
    'is_tri_degenerated',
    'permute_left',
    'permute_right',
    'make_counter_clockwise',
    'run',
    'TriTriConfig',
    'TriTriResult',
    'parse_triangle',
    'format_point',
    'format_triangle',
    'configure_logging',
]
