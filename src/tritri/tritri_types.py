"""
    Provides the value types shared by the predicates, solvers and dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

import numpy as np

from .mathutils.vec3 import Vec3


class Orientation(Enum):
    """Tri-state result of an orientation predicate."""
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


class Intersection(Enum):
    """How two triangles intersect. A miss is reported as None."""
    CROSS = "Cross"
    COPLANAR = "Coplanar"


class GeometryKind(Enum):
    """Shape of an intersection point list, derived from its size."""
    EMPTY = 0
    POINT = 1
    SEGMENT = 2
    POLYGON = 3

    @staticmethod
    def of(points) -> "GeometryKind":
        count = len(points)
        if count == 0:
            return GeometryKind.EMPTY
        if count == 1:
            return GeometryKind.POINT
        if count == 2:
            return GeometryKind.SEGMENT
        return GeometryKind.POLYGON


class DegenerateTriangleWarning(UserWarning):
    """Issued when a triangle with (near) zero area is given to the kernel."""


@dataclass(frozen=True)
class Triangle:
    """
    An ordered triple of points. The order encodes the winding.

    Any 3-sequence (tuple, list, numpy row, Vec3) is accepted for a vertex and
    copied into a fresh Vec3, so a Triangle never aliases caller data.
    Triangles are immutable: the canonicalization helpers return new ones.
    """
    a: Vec3
    b: Vec3
    c: Vec3

    def __post_init__(self):
        object.__setattr__(self, 'a', Vec3(self.a))
        object.__setattr__(self, 'b', Vec3(self.b))
        object.__setattr__(self, 'c', Vec3(self.c))

    @classmethod
    def of(cls, value: Any) -> "Triangle":
        """Build a working copy from a Triangle or any 3x3 sequence/array.

        Raises:
            ValueError: If the value does not hold exactly 3 points of 3 coordinates.
        """
        if isinstance(value, Triangle):
            return cls(value.a, value.b, value.c)
        if len(value) != 3:
            raise ValueError(f"A triangle needs 3 points, got {len(value)}")
        return cls(value[0], value[1], value[2])

    @classmethod
    def from_array(cls, array) -> "Triangle":
        """Build a triangle from a (3, 3) array-like of vertex rows."""
        arr = np.asarray(array, dtype=np.float64)
        if arr.shape != (3, 3):
            raise ValueError(f"Expected array of shape (3, 3), got {arr.shape}")
        return cls(arr[0], arr[1], arr[2])

    def to_array(self) -> np.ndarray:
        """Vertices as a (3, 3) float64 array, one row per vertex."""
        return np.array([self.a.to_tuple(), self.b.to_tuple(), self.c.to_tuple()], dtype=np.float64)

    def __iter__(self) -> Iterator[Vec3]:
        yield self.a
        yield self.b
        yield self.c

    def __getitem__(self, index: int) -> Vec3:
        if index == 0:
            return self.a
        elif index == 1:
            return self.b
        elif index == 2:
            return self.c
        else:
            raise IndexError("Index out of range")

    def __len__(self):
        return 3
