"""
Pure Python 3D point type - no numpy dependency for hot paths.

This module provides Vec3, the point/vector type used throughout the
intersection kernel. For 3-element vectors, pure Python is much faster than
numpy arrays due to avoiding array creation overhead, and every predicate in
the kernel works on a handful of points at a time.

Vec3 supports indexing and iteration, so anything indexable with three floats
(tuples, lists, numpy rows) can be mixed in. The arithmetic lives in
tritri_math as free functions.
"""


class Vec3:
    """
    A lightweight 3D point type.

    Stores components directly as attributes for fast access.
    Supports indexing like a tuple/list for compatibility.
    The kernel never mutates a Vec3 it was handed.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        # Fast path: check if x is a simple number
        # Using try/except is faster than isinstance checks for the common case
        try:
            self.x = float(x)
            self.y = float(y)
            self.z = float(z)
        except TypeError:
            # x is a sequence (tuple, list, array, Vec3)
            if len(x) != 3:
                raise ValueError(f"Vec3 expects 3 coordinates, got {len(x)}")
            self.x = float(x[0])
            self.y = float(x[1])
            self.z = float(x[2])

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        if i == 2: return self.z
        raise IndexError(f"Vec3 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __repr__(self):
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other):
        try:
            return self.x == other[0] and self.y == other[1] and self.z == other[2]
        except (TypeError, IndexError):
            return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def copy(self):
        return Vec3(self.x, self.y, self.z)

    def to_tuple(self):
        """Convert to tuple."""
        return (self.x, self.y, self.z)

