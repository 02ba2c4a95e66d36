"""
Canonicalization helpers.

Relabel a triangle's vertices so that later predicates can assume a fixed
role for vertex `a` or a fixed winding. Every helper returns a new Triangle;
the input is left untouched.
"""

from __future__ import annotations

from ..tritri_types import Orientation, Triangle
from .tritri_predicates import orient_2d


def permute_left(tri: Triangle) -> Triangle:
    """(a, b, c) -> (b, c, a). Winding is preserved."""
    return Triangle(tri.b, tri.c, tri.a)


def permute_right(tri: Triangle) -> Triangle:
    """(a, b, c) -> (c, a, b). Winding is preserved."""
    return Triangle(tri.c, tri.a, tri.b)


def swap_bc(tri: Triangle) -> Triangle:
    """(a, b, c) -> (a, c, b). Reverses the winding."""
    return Triangle(tri.a, tri.c, tri.b)


def make_counter_clockwise(tri: Triangle) -> Triangle:
    """Return the triangle wound counter-clockwise in the XY plane.

    Only a clockwise triangle (NEGATIVE orient_2d) gets b and c swapped, so
    applying it twice changes nothing.
    """
    if orient_2d(tri.a, tri.b, tri.c) is Orientation.NEGATIVE:
        return swap_bc(tri)
    return tri
