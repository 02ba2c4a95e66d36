"""
Intersect two triangles given on the command line.

Usage:
    python -m tritri "<t1>" "<t2>"
    python -m tritri "<t1>" "<t2>" --no-points
    python -m tritri "<t1>" "<t2>" --precision 6 --log-level DEBUG

Examples:
    python -m tritri "(0,0,0),(4,0,0),(0,4,0)" "(1,1,-1),(1,1,1),(3,1,0)"
    python -m tritri "(0,0,0),(1,2,0),(0,4,0)" "(1,2,0),(3,0,0),(3,4,0)"
"""

import argparse
import sys

from .tritri_engine import run
from .tritri_logging import configure_logging
from .tritri_parsing_utils import format_point, parse_triangle


def _triangle_arg(value):
    try:
        return parse_triangle(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="python -m tritri",
        description="Intersect two triangles in 3D space",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Triangles are written as "(x,y,z),(x,y,z),(x,y,z)".
Output is the intersection type (Cross, Coplanar or None) followed by the
intersection points.
        """
    )
    parser.add_argument("t1", type=_triangle_arg, help="First triangle")
    parser.add_argument("t2", type=_triangle_arg, help="Second triangle")
    parser.add_argument("--no-points", action="store_true", help="Only classify, do not compute points")
    parser.add_argument("-p", "--precision", type=int, default=3, help="Decimals printed per coordinate (default: 3)")
    parser.add_argument("--log-level", default="WARNING", help="Log level for the tritri loggers (default: WARNING)")

    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    result = run(args.t1, args.t2, compute_points=not args.no_points)

    intersection = result.intersection.value if result.intersection is not None else "None"
    print(f"Intersection: {intersection}")

    if not args.no_points and result.is_intersecting:
        print(f"Geometry: {result.kind.name.lower()}")
        for i, point in enumerate(result.points, start=1):
            print(f"p{i}: {format_point(point, args.precision)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
