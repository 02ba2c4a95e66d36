"""
Unit tests for the vector and matrix helpers.

Tests cover Vec3 construction and its sequence protocol, vector operations
(normalization, cross product, triangle normals), determinants,
matrix inversion and point transforms, and the two line intersections
used by the solvers.
"""

import unittest
import numpy as np
from tritri.mathutils.vec3 import Vec3
import tritri.mathutils.tritri_math as TriTriMath


class Vec3Tests(unittest.TestCase):
    """Tests for the Vec3 point type"""

    def testConstructFromNumbers(self):
        """Components are stored as floats"""
        v = Vec3(1, 2, 3)
        self.assertEqual((v.x, v.y, v.z), (1.0, 2.0, 3.0))
        self.assertIsInstance(v.x, float)

    def testConstructFromSequence(self):
        """Tuples, lists, numpy rows and Vec3 are accepted"""
        for value in ((1, 2, 3), [1, 2, 3], np.array([1.0, 2.0, 3.0]), Vec3(1, 2, 3)):
            self.assertEqual(Vec3(value), Vec3(1, 2, 3))

    def testConstructFromWrongLength(self):
        """A sequence that is not 3 long is rejected"""
        with self.assertRaises(ValueError):
            Vec3((1, 2))

    def testCopyIsIndependent(self):
        """Constructing from a Vec3 copies it"""
        original = Vec3(1, 2, 3)
        copy = Vec3(original)
        copy.x = 5.0
        self.assertEqual(original.x, 1.0)
        self.assertIsNot(original.copy(), original)

    def testArithmeticGoesThroughFreeFunctions(self):
        """Vec3 has no operators; tritri_math does the arithmetic and returns Vec3"""
        a = Vec3(1, 2, 3)
        b = Vec3(4, 5, 6)
        with self.assertRaises(TypeError):
            a + b
        with self.assertRaises(TypeError):
            b - a
        self.assertEqual(TriTriMath.sub3(b, a), Vec3(3, 3, 3))
        self.assertIsInstance(TriTriMath.sub3(b, a), Vec3)
        self.assertEqual(TriTriMath.cross3(Vec3(1, 0, 0), Vec3(0, 1, 0)), Vec3(0, 0, 1))

    def testSequenceProtocol(self):
        """Indexing, iteration, equality with tuples and hashing"""
        v = Vec3(1, 2, 3)
        self.assertEqual(len(v), 3)
        self.assertEqual(list(v), [1.0, 2.0, 3.0])
        self.assertEqual(v[2], 3.0)
        self.assertEqual(v, (1, 2, 3))
        self.assertEqual(len({Vec3(1, 2, 3), Vec3(1, 2, 3)}), 1)
        with self.assertRaises(IndexError):
            v[3]


class TriTriMathVectorTests(unittest.TestCase):
    """Tests for vector operations"""

    def testNormalize(self):
        """Test vector normalization"""
        normalized = TriTriMath.normalize((3, 0, 4))
        self.assertTrue(np.allclose(normalized.to_tuple(), (0.6, 0.0, 0.8)),
                        "Normalized vector should have unit length")

    def testNormalizeZeroVector(self):
        """A zero vector cannot be normalized"""
        with self.assertRaises(ValueError):
            TriTriMath.normalize((0, 0, 0))

    def testCrossProduct(self):
        """Test cross product calculation"""
        result = TriTriMath.cross3((1, 2, 3), (4, 5, 6))
        self.assertTrue(np.allclose(result.to_tuple(), np.cross((1, 2, 3), (4, 5, 6))),
                        "Cross product should match numpy")

    def testTriangleNormal(self):
        """Counter-clockwise triangles in the XY plane point up"""
        normal = TriTriMath.triangle_normal((0, 0, 0), (1, 0, 0), (0, 1, 0))
        self.assertTrue(np.allclose(normal.to_tuple(), (0, 0, 1)))

        normal = TriTriMath.triangle_normal((0, 0, 0), (0, 1, 0), (1, 0, 0))
        self.assertTrue(np.allclose(normal.to_tuple(), (0, 0, -1)))

    def testDistance(self):
        """Test point distance"""
        self.assertAlmostEqual(TriTriMath.distance((0, 0, 0), (1, 2, 2)), 3.0)


class TriTriMathMatrixTests(unittest.TestCase):
    """Tests for determinants, inversion and transforms"""

    MATRIX = (
        (2.0, 0.0, 1.0, 0.0),
        (1.0, 3.0, 0.0, 0.0),
        (0.0, 1.0, 4.0, 0.0),
        (5.0, -2.0, 7.0, 1.0),
    )

    def testDeterminant3(self):
        """3x3 determinant matches numpy"""
        m = ((1, 2, 3), (0, 1, 4), (5, 6, 0))
        self.assertAlmostEqual(TriTriMath.determinant3(m), np.linalg.det(np.array(m, dtype=float)))

    def testDeterminant(self):
        """4x4 determinant matches numpy"""
        self.assertAlmostEqual(TriTriMath.determinant(self.MATRIX),
                               np.linalg.det(np.array(self.MATRIX)))

    def testDeterminantOfRepeatedRows(self):
        """Equal last two rows give exactly zero"""
        m = ((1.5, 2.25, -3.0, 1.0), (4.0, 5.0, 6.0, 1.0), (0.1, 0.2, 0.3, 1.0), (0.1, 0.2, 0.3, 1.0))
        self.assertEqual(TriTriMath.determinant(m), 0.0)

    def testInvert(self):
        """Test matrix inversion"""
        inverse = TriTriMath.invert(self.MATRIX)
        product = np.array(self.MATRIX) @ np.array(inverse)
        self.assertTrue(np.allclose(product, np.identity(4)),
                        "Matrix times its inverse should be identity")

    def testInvertSingular(self):
        """A singular matrix cannot be inverted"""
        singular = ((1, 2, 3, 0), (2, 4, 6, 0), (0, 0, 1, 0), (0, 0, 0, 1))
        with self.assertRaises(ValueError):
            TriTriMath.invert(singular)

    def testTransformPoint(self):
        """Translation lives in the bottom row"""
        translate = (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (5.0, 9.0, 7.0, 1.0),
        )
        result = TriTriMath.transform_point((1, 2, 3), translate)
        self.assertTrue(np.allclose(result.to_tuple(), (6, 11, 10)))

    def testFrameMatrixRoundTrip(self):
        """Points go into a frame and back unchanged"""
        origin = (1.0, 2.0, 3.0)
        u = TriTriMath.normalize((1, 1, 0))
        n = TriTriMath.normalize((0, 0, 1))
        v = TriTriMath.cross3(n, u)

        to_world = TriTriMath.frame_matrix(origin, u, v, n)
        to_frame = TriTriMath.invert(to_world)

        self.assertTrue(np.allclose(TriTriMath.transform_point(origin, to_frame).to_tuple(), (0, 0, 0)))

        local = TriTriMath.transform_point((1 + 2 ** 0.5, 2 + 2 ** 0.5, 3), to_frame)
        self.assertTrue(np.allclose(local.to_tuple(), (2, 0, 0)))

        back = TriTriMath.transform_point(local, to_world)
        self.assertTrue(np.allclose(back.to_tuple(), (1 + 2 ** 0.5, 2 + 2 ** 0.5, 3)))


class TriTriMathIntersectionTests(unittest.TestCase):
    """Tests for line/plane and line/line intersections"""

    def testLineWithPlane(self):
        """Edge crossing the XY plane"""
        point = TriTriMath.intersect_line_with_plane((1, 1, -1), (1, 1, 3), (0, 0, 0), (0, 0, 1))
        self.assertTrue(np.allclose(point.to_tuple(), (1, 1, 0)))

    def testLineWithPlaneOutsideSegment(self):
        """The line is infinite, the crossing may lie past p1"""
        point = TriTriMath.intersect_line_with_plane((0, 0, 1), (0, 1, 2), (0, 0, 0), (0, 0, 5))
        self.assertTrue(np.allclose(point.to_tuple(), (0, -1, 0)))

    def testLineParallelToPlane(self):
        """A parallel line has no intersection"""
        self.assertIsNone(TriTriMath.intersect_line_with_plane((0, 0, 1), (1, 0, 1), (0, 0, 0), (0, 0, 1)))

    def testLines2D(self):
        """Diagonals of a square cross in the middle"""
        point = TriTriMath.intersect_lines_2d((0, 0, 0), (2, 2, 0), (0, 2, 0), (2, 0, 0))
        self.assertTrue(np.allclose(point.to_tuple(), (1, 1, 0)))

    def testLines2DIgnoresZ(self):
        """z coordinates are ignored and the result has z = 0"""
        point = TriTriMath.intersect_lines_2d((4, 0, 3), (0, 4, 3), (3, 2, -1), (3, 0, 8))
        self.assertTrue(np.allclose(point.to_tuple(), (3, 1, 0)))


if __name__ == '__main__':
    unittest.main()
