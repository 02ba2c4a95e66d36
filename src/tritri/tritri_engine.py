"""
TriTri Engine - convenience front end over triangles_intersect.

Wraps the raw kernel call in a configuration object and a result object, in
the same way the rest of the pipeline hands data to a viewer.

Usage:
    from tritri import run, TriTriConfig

    # Simple usage with defaults
    result = run(t1, t2)
    if result.is_intersecting:
        print(result.intersection, result.kind, result.points)

    # Classification only
    result = run(t1, t2, compute_points=False)

    # With configuration
    config = TriTriConfig(compute_points=True)
    result = run(t1, t2, config=config)
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from .tritri_types import GeometryKind, Intersection
from .tritri_intersect import triangles_intersect
from .mathutils.vec3 import Vec3


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class TriTriConfig:
    """
    Configuration options for a triangle-triangle query.

    Attributes:
        compute_points: Also extract the intersection geometry. When False
            only the classification is computed, which skips the segment
            extraction and the polygon clipping.
    """
    compute_points: bool = True


@dataclass
class TriTriResult:
    """
    Result from running a triangle-triangle query.

    Attributes:
        intersection: Intersection.CROSS, Intersection.COPLANAR or None.
        points: Intersection geometry in world space. Empty on a miss or when
            points were not requested.
    """
    intersection: Optional[Intersection]
    points: List[Vec3] = field(default_factory=list)

    @property
    def is_intersecting(self) -> bool:
        return self.intersection is not None

    @property
    def kind(self) -> GeometryKind:
        """Point, segment or polygon, from the number of points."""
        return GeometryKind.of(self.points)

    def points_array(self) -> np.ndarray:
        """Intersection points as an (n, 3) float64 array."""
        if not self.points:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([p.to_tuple() for p in self.points], dtype=np.float64)


# =============================================================================
# Main API
# =============================================================================

def run(
    t1: Any,
    t2: Any,
    config: Optional[TriTriConfig] = None,
    *,
    # Convenience kwargs that override config
    compute_points: Optional[bool] = None,
) -> TriTriResult:
    """
    Intersect two triangles and package the answer.

    Args:
        t1, t2: Triangles (Triangle or any 3x3 sequence/array).
        config: Configuration options (TriTriConfig instance).
        compute_points: Override config.compute_points.

    Returns:
        TriTriResult with the classification and, if requested, the geometry.
    """
    if config is None:
        config = TriTriConfig()

    want_points = config.compute_points if compute_points is None else compute_points

    points: List[Vec3] = []
    intersection = triangles_intersect(t1, t2, points if want_points else None)

    return TriTriResult(intersection=intersection, points=points)
