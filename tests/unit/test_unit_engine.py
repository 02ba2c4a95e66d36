"""
Unit tests for the run() front end and its config/result objects.
"""

import dataclasses
import unittest
import numpy as np
from tritri import GeometryKind, Intersection, TriTriConfig, TriTriResult, run
from tests.test_fixtures.assertions import assert_point_sets_equal

T1 = [(0, 0, 0), (0, 0, 5), (5, 0, 0)]
T2 = [(1, -1, 1), (1, -1, -1), (1, 1, 1)]


class TriTriEngineTests(unittest.TestCase):
    """Tests for run()"""

    def testDefaultsComputePoints(self):
        """With no config the geometry is computed"""
        result = run(T1, T2)
        self.assertIsInstance(result, TriTriResult)
        self.assertIs(result.intersection, Intersection.CROSS)
        self.assertTrue(result.is_intersecting)
        self.assertIs(result.kind, GeometryKind.SEGMENT)
        assert_point_sets_equal(self, result.points, [(1, 0, 0), (1, 0, 1)])

    def testConfigDisablesPoints(self):
        """compute_points=False only classifies"""
        result = run(T1, T2, config=TriTriConfig(compute_points=False))
        self.assertIs(result.intersection, Intersection.CROSS)
        self.assertEqual(result.points, [])
        self.assertIs(result.kind, GeometryKind.EMPTY)

    def testKwargOverridesConfig(self):
        """Keyword arguments win over the config"""
        result = run(T1, T2, config=TriTriConfig(compute_points=False), compute_points=True)
        self.assertEqual(len(result.points), 2)

        result = run(T1, T2, config=TriTriConfig(compute_points=True), compute_points=False)
        self.assertEqual(result.points, [])

    def testMiss(self):
        """A miss has no intersection and no points"""
        result = run([(1, 0, 0), (0, 0, 1), (0, 1, 0)], [(2, 0, 0), (0, 0, 2), (0, 2, 0)])
        self.assertIsNone(result.intersection)
        self.assertFalse(result.is_intersecting)
        self.assertEqual(result.points_array().shape, (0, 3))

    def testCoplanarPolygon(self):
        """Coplanar overlap is reported as a polygon"""
        result = run([(0, 0, 0), (2, 2, 0), (0, 4, 0)], [(1, 2, 0), (3, 0, 0), (3, 4, 0)])
        self.assertIs(result.intersection, Intersection.COPLANAR)
        self.assertIs(result.kind, GeometryKind.POLYGON)

    def testPointsArray(self):
        """points_array gives an (n, 3) float array"""
        result = run(T1, T2)
        arr = result.points_array()
        self.assertEqual(arr.shape, (2, 3))
        self.assertEqual(arr.dtype, np.float64)
        self.assertTrue(np.allclose(sorted(map(tuple, arr)), [(1, 0, 0), (1, 0, 1)]))

    def testConfigFields(self):
        """The config only carries switches that run() reads"""
        self.assertEqual([f.name for f in dataclasses.fields(TriTriConfig)], ['compute_points'])


if __name__ == '__main__':
    unittest.main()
