"""
Solvers for the two triangle-triangle intersection cases.

Pipeline (driven by tritri_intersect.triangles_intersect):
1. CrossSolver - triangles in different planes
2. CoplanarSolver - triangles in the same plane, with polygon clipping
"""

from .tritri_cross_solver import CrossSolver
from .tritri_coplanar_solver import CoplanarSolver
from .tritri_polygon_clipper import clip_triangle, merge_points

__all__ = [
    'CrossSolver',
    'CoplanarSolver',
    'clip_triangle',
    'merge_points',
]
