'''
Created on Mar 2, 2021

@author: martijn
'''
import logging
import sys

from bowyer.delaunay.preds import area
# ------------------------------------------------------------------------------
# Geometric primitives
#

EPSILON = sys.float_info.epsilon
INF = float("inf")


def slope(a, b):
    """Slope of the line through a and b

    Returns +inf for a vertical line (a.x == b.x), callers have to deal with
    this sentinel themselves.
    """
    if a.x - b.x == 0.0:
        return INF
    return (a.y - b.y) / (a.x - b.x)


def midpoint(a, b):
    """Point halfway a and b"""
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


class Point(object):
    """A point in the plane.

    Coordinates may be +/- infinity, in which case the point is one of the
    symbolic vertices of the super triangle.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Point({0!r}, {1!r})".format(self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        if self.x == other.x and self.y == other.y:
            return True
        # absorbs round-off of the circumcenter computation
        return abs(self.x - other.x) <= EPSILON and \
            abs(self.y - other.y) <= EPSILON

    # equality is tolerant, so hashing would not be consistent with it
    __hash__ = None

    def distance2(self, other):
        """Cartesian distance *squared* to other point """
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    @property
    def is_finite(self):
        return abs(self.x) != INF and abs(self.y) != INF


class Edge(object):
    """Undirected edge between two points"""
    __slots__ = ('a', 'b')

    def __init__(self, a, b):
        self.a = a
        self.b = b

    def __repr__(self):
        return "Edge({0!r}, {1!r})".format(self.a, self.b)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or \
            (self.a == other.b and self.b == other.a)


class Circle(object):
    """Circle with its radius stored *squared*.

    An infinite radius encodes a degenerate circumcircle: the triangle is
    collinear or touches a symbolic vertex.
    """
    __slots__ = ('center', 'radius')

    def __init__(self, center, radius):
        self.center = center
        self.radius = radius

    def __repr__(self):
        return "Circle({0!r}, {1!r})".format(self.center, self.radius)

    def contains(self, p):
        """Is p strictly inside the circle"""
        dx = p.x - self.center.x
        dy = p.y - self.center.y
        return dx * dx + dy * dy < self.radius

    @property
    def is_infinite(self):
        return self.radius == INF


class Triangle(object):
    """Triangle with three corner points.

    Triangles are not changed after construction, so the circumcircle is
    computed once, on first use.
    """

    __slots__ = ('vertices', '_circle')

    def __init__(self, a, b, c):
        self.vertices = (a, b, c)
        self._circle = None

    def __str__(self):
        """Conversion to WKT string"""
        ring = list(self.vertices) + [self.vertices[0]]
        return "POLYGON(({0}))".format(", ".join(str(v) for v in ring))

    def __repr__(self):
        return "Triangle({0!r}, {1!r}, {2!r})".format(*self.vertices)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.a == other.a and self.b == other.b and self.c == other.c

    @property
    def a(self):
        return self.vertices[0]

    @property
    def b(self):
        return self.vertices[1]

    @property
    def c(self):
        return self.vertices[2]

    @property
    def is_finite(self):
        return all(v.is_finite for v in self.vertices)

    @property
    def is_valid(self):
        """Whether the triangle is non-degenerate

        A triangle with a symbolic (infinite) corner, or with (nearly)
        collinear corners, is not valid and has no proper circumcircle.
        """
        if not self.is_finite:
            return False
        return abs(area(self.a, self.b, self.c)) > EPSILON

    def edges(self):
        a, b, c = self.vertices
        return [Edge(a, b), Edge(b, c), Edge(a, c)]

    def has_edge(self, edge):
        return any(e == edge for e in self.edges())

    def has_vertex(self, p):
        return any(v == p for v in self.vertices)

    def circumcircle(self):
        if self._circle is None:
            self._circle = self._compute_circumcircle()
        return self._circle

    def _compute_circumcircle(self):
        """Circumcircle as intersection of two perpendicular bisectors.

        The radius is the *smallest* squared distance from the computed
        center to the three corners. Round-off in the center would otherwise
        let a corner on the circumference test as inside the circle.
        """
        if not self.is_valid:
            return Circle(Point(0.0, 0.0), INF)
        a, b, c = self.vertices

        mid1, slope1 = midpoint(a, b), slope(a, b)
        mid2, slope2 = midpoint(b, c), slope(b, c)
        # a horizontal edge has a vertical bisector, take edge ac instead
        if slope1 == 0.0:
            mid1, slope1 = midpoint(a, c), slope(a, c)
        elif slope2 == 0.0:
            mid2, slope2 = midpoint(a, c), slope(a, c)

        # slopes of the bisectors, a vertical edge gives -1/inf = -0.0
        m1 = -1.0 / slope1
        m2 = -1.0 / slope2
        b1 = mid1.y - m1 * mid1.x
        b2 = mid2.y - m2 * mid2.x

        # m1 * x + b1 = m2 * x + b2  =>  x = (b2 - b1) / (m1 - m2)
        if m1 == m2:
            logging.debug("parallel bisectors for {}, "
                          "no circumcenter".format(self))
            return Circle(Point(0.0, 0.0), INF)
        x = (b2 - b1) / (m1 - m2)
        y = m1 * x + b1
        center = Point(x, y)

        radius = min(a.distance2(center),
                     b.distance2(center),
                     c.distance2(center))
        return Circle(center, radius)
