import io
import random
import unittest

from bowyer import triangulate
from bowyer.delaunay import Point, Triangle, output_triangles, \
    output_vertices
from bowyer.delaunay.helpers import random_circle_vertices
from bowyer.delaunay.infinite import super_triangle
from bowyer.delaunay.insert_bw import Triangulation, BowyerWatsonInserter, \
    without_super_triangle, as_point


def is_delaunay(triangles, points):
    """No point is inside the circumcircle of any triangle"""
    points = [Point(*pt) for pt in points]
    for t in triangles:
        circle = t.circumcircle()
        for p in points:
            if circle.contains(p):
                return False
    return True


class TestCollinear(unittest.TestCase):

    def test_horizontal_line(self):
        pts = [(0.0, 1.0), (0.5, 1.0), (1.5, 1.0)]
        self.assertEqual(len(triangulate(pts)), 0)

    def test_vertical_line(self):
        pts = [(0.0, -5.0), (0.0, 0.0), (0.0, 10.0)]
        self.assertEqual(len(triangulate(pts)), 0)

    def test_nearly_collinear(self):
        cases = [
            [(0.0422123, 0.608088),
             (0.0326503, -0.388441),
             (-0.0545815, 0.166688)],
            [(0.286269, -0.615398),
             (0.262937, -0.6643),
             (0.56914, -0.0624119)],
            [(0.25, 0.25),
             (0.35, 0.35),
             (0.45, 0.45005)],
        ]
        for pts in cases:
            self.assertEqual(len(triangulate(pts)), 1)


class TestSmall(unittest.TestCase):

    def test_too_few_points(self):
        self.assertEqual(triangulate([]), [])
        self.assertEqual(triangulate([(0, 0)]), [])
        self.assertEqual(triangulate([(0, 0), (3, 4)]), [])

    def test_one_triangle(self):
        result = triangulate([(0, 0), (1, 0), (0, 1)])
        self.assertEqual(len(result), 1)
        assert result[0] == Triangle(Point(0.0, 0.0),
                                     Point(1.0, 0.0),
                                     Point(0.0, 1.0))

    def test_points_as_objects(self):
        pts = [Point(0.0, 0.0), Point(1.0, 0.0), [0.0, 1.0]]
        self.assertEqual(len(triangulate(pts)), 1)

    def test_duplicate(self):
        pts = [(0, 0), (1, 0), (0, 1), (0, 0), (1, 0)]
        self.assertEqual(len(triangulate(pts)), 1)

    def test_infinite_point(self):
        with self.assertRaises(ValueError):
            triangulate([(0, 0), (1, 0), (float("inf"), 1)])
        with self.assertRaises(ValueError):
            as_point((0.0, float("-inf")))

    def test_logging(self):
        with self.assertLogs(level="DEBUG") as cm:
            triangulate([(0, 0), (1, 0), (0, 1)])
        assert any("triangulating 3 points" in line for line in cm.output)


class TestInserter(unittest.TestCase):

    def test_step_by_step(self):
        large = super_triangle()
        dt = Triangulation()
        incremental = BowyerWatsonInserter(dt)
        incremental.initialize(large)
        self.assertEqual(len(dt.triangles), 1)

        # the super triangle is split in 3
        incremental.append(Point(0.0, 0.0))
        self.assertEqual(len(dt.triangles), 3)
        self.assertEqual(incremental.created, 3)
        self.assertEqual(incremental.removed, 1)

        incremental.append(Point(1.0, 0.0))
        self.assertEqual(len(dt.triangles), 5)
        self.assertEqual(incremental.created, 7)
        self.assertEqual(incremental.removed, 3)

        incremental.append(Point(0.0, 1.0))
        self.assertEqual(len(dt.triangles), 7)

        result = without_super_triangle(dt.triangles, large)
        self.assertEqual(len(result), 1)
        assert result[0] == Triangle(Point(0.0, 0.0),
                                     Point(1.0, 0.0),
                                     Point(0.0, 1.0))

    def test_boundary_of_single_triangle(self):
        t = Triangle(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
        incremental = BowyerWatsonInserter(Triangulation())
        self.assertEqual(len(incremental.boundary([t])), 3)
        self.assertEqual(incremental.boundary([]), [])


class TestRandom(unittest.TestCase):

    def setUp(self):
        random.seed(20210303)

    def check(self, n, radius):
        pts = random_circle_vertices(n, radius)
        result = triangulate(pts)
        assert len(result) > 0
        assert is_delaunay(result, pts)
        return pts, result

    def test_delaunay(self):
        for n, radius in [(25, 10), (50, 10), (100, 25)]:
            self.check(n, radius)

    def test_delaunay_large(self):
        self.check(1000, 100)

    def test_vertex_closure(self):
        pts, result = self.check(200, 50)
        inputs = [Point(*pt) for pt in pts]
        for t in result:
            assert t.is_finite
            for v in t.vertices:
                assert v in inputs

    def test_count(self):
        pts, result = self.check(150, 10)
        n = len(pts)
        assert len(result) <= 2 * n - 5
        again = triangulate(pts)
        self.assertEqual(len(again), len(result))
        for t0, t1 in zip(result, again):
            assert t0 == t1


class TestOutput(unittest.TestCase):

    def test_output_triangles(self):
        result = triangulate([(0, 0), (1, 0), (0, 1)])
        fh = io.StringIO()
        output_triangles(result, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;finite;valid")
        self.assertEqual(
            lines[1],
            "0;POLYGON((0.0 0.0, 1.0 0.0, 0.0 1.0, 0.0 0.0));True;True")

    def test_output_vertices(self):
        fh = io.StringIO()
        output_vertices(super_triangle().vertices, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[2], "1;POINT(0.0 inf);False")


if __name__ == "__main__":
    unittest.main()
