"""
Small linear-algebra toolbox for the intersection kernel.

Matrices are 4x4 tuple-of-tuples in row-vector convention: a point p is
transformed as [x, y, z, 1] @ M, so the translation lives in the bottom row.
Everything here is pure Python; no scratch objects are kept at module level,
so every function is safe to call from several threads at once.
"""
import math
from .vec3 import Vec3


# ============================================================================
# CONSTANTS
# ============================================================================

# Absolute tolerance on determinant values. Any determinant whose magnitude is
# at most EPSILON is treated as exactly zero by every predicate.
EPSILON = 1e-10

# Two output points closer than this (Euclidean distance) are the same point.
POINT_MERGE_TOLERANCE = 1e-10


# ============================================================================
# VECTORS
# ============================================================================

def sub3(a, b):
    """Subtract two 3D vectors. Returns Vec3."""
    return Vec3(a[0] - b[0], a[1] - b[1], a[2] - b[2])

def cross3(a, b):
    """Fast 3D cross product. Returns Vec3."""
    return Vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0]
    )

def length(vector):
    """Length of a vector."""
    return math.sqrt(vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2])

def distance(p1, p2):
    """Distance between two points."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    dz = p2[2] - p1[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)

def normalize(vector):
    """Normalize a vector. Returns Vec3."""
    mag = length(vector)
    if mag == 0.0:
        raise ValueError("Cannot normalize a zero vector")
    inv_mag = 1.0 / mag
    return Vec3(vector[0] * inv_mag, vector[1] * inv_mag, vector[2] * inv_mag)

def triangle_normal(a, b, c):
    """Unit normal of the triangle (a, b, c), right-handed: (c - b) x (a - b)."""
    return normalize(cross3(sub3(c, b), sub3(a, b)))


# ============================================================================
# DETERMINANTS
# ============================================================================

def det3(a, b, c, d, e, f, g, h, i):
    """3x3 determinant using rule of Sarrus"""
    return a*(e*i - f*h) - b*(d*i - f*g) + c*(d*h - e*g)

def determinant3(matrix):
    """Determinant of a 3x3 matrix given as rows."""
    m = matrix
    return det3(m[0][0], m[0][1], m[0][2],
                m[1][0], m[1][1], m[1][2],
                m[2][0], m[2][1], m[2][2])

def determinant(matrix):
    """Compute determinant of 4x4 matrix using pure Python."""
    # Using cofactor expansion along first row
    # For a 4x4 matrix, det = sum of a[0][j] * cofactor(0,j) for j=0..3
    m = matrix

    # Cofactors for first row
    cof0 = det3(m[1][1], m[1][2], m[1][3],
                m[2][1], m[2][2], m[2][3],
                m[3][1], m[3][2], m[3][3])
    cof1 = det3(m[1][0], m[1][2], m[1][3],
                m[2][0], m[2][2], m[2][3],
                m[3][0], m[3][2], m[3][3])
    cof2 = det3(m[1][0], m[1][1], m[1][3],
                m[2][0], m[2][1], m[2][3],
                m[3][0], m[3][1], m[3][3])
    cof3 = det3(m[1][0], m[1][1], m[1][2],
                m[2][0], m[2][1], m[2][2],
                m[3][0], m[3][1], m[3][2])

    return m[0][0] * cof0 - m[0][1] * cof1 + m[0][2] * cof2 - m[0][3] * cof3


# ============================================================================
# MATRICES
# ============================================================================

def invert(matrix):
    """Invert a 4x4 matrix.

    Raises:
        ValueError: If the matrix is singular.
    """
    # Pure Python 4x4 matrix inversion using adjugate method
    m = matrix

    # Calculate cofactors
    cof = [[0.0] * 4 for _ in range(4)]
    for i in range(4):
        for j in range(4):
            # Minor matrix (3x3) excluding row i and col j
            minor = [[m[r][c] for c in range(4) if c != j] for r in range(4) if r != i]
            sign = -1.0 if (i + j) % 2 else 1.0
            cof[i][j] = sign * determinant3(minor)

    # Determinant from first row
    det = sum(m[0][j] * cof[0][j] for j in range(4))
    if det == 0.0:
        raise ValueError("Cannot invert a singular matrix")

    # Adjugate (transpose of cofactor matrix) divided by determinant
    inv_det = 1.0 / det
    result = [[cof[j][i] * inv_det for j in range(4)] for i in range(4)]
    return tuple(tuple(row) for row in result)

def transform_point(point, matrix):
    """Transform a 3D point by a 4x4 row-vector matrix. Returns Vec3."""
    x, y, z = point[0], point[1], point[2]
    m = matrix
    w = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
    inv_w = 1.0 / w
    return Vec3(
        (x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0]) * inv_w,
        (x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1]) * inv_w,
        (x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2]) * inv_w
    )

def frame_matrix(origin, x_axis, y_axis, z_axis):
    """Build the matrix mapping local frame coordinates to world space.

    The local point (x', y', z') lands on origin + x'*x_axis + y'*y_axis + z'*z_axis.
    Invert it to go from world space into the frame.
    """
    return (
        (x_axis[0], x_axis[1], x_axis[2], 0.0),
        (y_axis[0], y_axis[1], y_axis[2], 0.0),
        (z_axis[0], z_axis[1], z_axis[2], 0.0),
        (origin[0], origin[1], origin[2], 1.0)
    )


# ============================================================================
# INTERSECTIONS
# ============================================================================

def intersect_line_with_plane(p0, p1, plane_point, plane_normal):
    """Intersect the line through p0 and p1 with a plane.

    Solves p0 + t * (p1 - p0) for the t that puts the point on the plane.

    Args:
        p0, p1: Two points of the line (typically a triangle edge).
        plane_point: Any point of the plane.
        plane_normal: Plane normal (need not be unit length).

    Returns:
        The intersection point as Vec3, or None when the line is exactly
        parallel to the plane.
    """
    ux, uy, uz = p1[0] - p0[0], p1[1] - p0[1], p1[2] - p0[2]
    vx, vy, vz = p0[0] - plane_point[0], p0[1] - plane_point[1], p0[2] - plane_point[2]
    nx, ny, nz = plane_normal[0], plane_normal[1], plane_normal[2]

    denom = nx * ux + ny * uy + nz * uz
    if denom == 0.0:
        return None

    t = -(nx * vx + ny * vy + nz * vz) / denom
    return Vec3(p0[0] + t * ux, p0[1] + t * uy, p0[2] + t * uz)

def intersect_lines_2d(a1, b1, a2, b2):
    """
    Find intersection of two infinite lines in the XY plane (z is ignored).

    Uses Cramer's rule with the determinant of the two direction vectors as
    denominator. The lines must not be parallel: there is no guard against a
    zero denominator, the caller is responsible for only passing line pairs
    that are known to cross.

    Args:
        a1, b1: Two points defining the first line
        a2, b2: Two points defining the second line

    Returns:
        Intersection point as Vec3 with z = 0
    """
    dx1 = a1[0] - b1[0]
    dx2 = a2[0] - b2[0]
    dy1 = a1[1] - b1[1]
    dy2 = a2[1] - b2[1]

    denom = dx1 * dy2 - dx2 * dy1

    n1 = a1[0] * b1[1] - a1[1] * b1[0]
    n2 = a2[0] * b2[1] - a2[1] * b2[0]

    return Vec3((n1 * dx2 - n2 * dx1) / denom, (n1 * dy2 - n2 * dy1) / denom, 0.0)
