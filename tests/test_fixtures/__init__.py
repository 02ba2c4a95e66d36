"""Test fixtures and utilities for tritri testing.

- assertions: Custom assertion functions (assert_point_equal, assert_point_sets_equal)
"""

from .assertions import assert_point_equal, assert_point_sets_equal

__all__ = [
    'assert_point_equal',
    'assert_point_sets_equal',
]
