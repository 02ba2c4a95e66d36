"""
Provides helper methods for reading and writing triangles as text.
The text form is the one used by the demo page: "(x,y,z),(x,y,z),(x,y,z)".
"""

import re

from .tritri_types import Triangle

_POINT_PATTERN = re.compile(r"\(([^()]*)\)")


def parse_point(point_str):
    """Parse "x,y,z" (with or without surrounding parentheses) into a 3-tuple of floats."""
    tokens = point_str.strip().strip("()").split(",")
    if len(tokens) != 3:
        raise ValueError(f"Invalid point string: '{point_str}', expected 3 coordinates")
    try:
        return tuple(float(t) for t in tokens)
    except ValueError:
        raise ValueError(f"Invalid point string: '{point_str}', coordinates must be numbers") from None


def parse_triangle(triangle_str):
    """Parse "(x,y,z),(x,y,z),(x,y,z)" into a Triangle.

    Whitespace anywhere in the string is ignored.

    Raises:
        ValueError: Unless the string holds exactly 3 points of 3 numbers each.
    """
    compact = "".join(triangle_str.split())
    points = _POINT_PATTERN.findall(compact)
    # Anything outside the parenthesized groups must be the separating commas
    leftover = _POINT_PATTERN.sub("", compact)
    if len(points) != 3 or leftover != ",,":
        raise ValueError(f"Invalid triangle string: '{triangle_str}', expected '(x,y,z),(x,y,z),(x,y,z)'")
    return Triangle(*(parse_point(p) for p in points))


def format_point(point, precision=3):
    """Format a point as "(x,y,z)" with a fixed number of decimals.

    Values that round to zero are printed without a minus sign.
    """
    coords = (round(float(point[i]), precision) + 0.0 for i in range(3))
    return "(" + ",".join(f"{c:.{precision}f}" for c in coords) + ")"


def format_triangle(tri, precision=3):
    return ",".join(format_point(p, precision) for p in Triangle.of(tri))
