'''
Created on Mar 3, 2021

@author: martijn
'''

import logging
import time

from bowyer.delaunay.tds import Point, Triangle
from bowyer.delaunay.infinite import super_triangle, in_circumcircle


class Triangulation(object):
    """Triangulation data structure"""

    def __init__(self):
        self.triangles = []


def as_point(pt):
    """Converts an indexable with 2 elements to a Point

    Raises ValueError for points with an infinite coordinate, as these
    would be taken for a corner of the super triangle.
    """
    p = Point(float(pt[0]), float(pt[1]))
    if not p.is_finite:
        raise ValueError(
            "Non-finite point {} cannot be triangulated".format(p))
    return p


class BowyerWatsonInserter(object):
    """Class to insert points into a Triangulation.

    Every point is inserted by removing the triangles whose circumcircle
    contains the point (Bowyer-Watson algorithm) and filling the polygonal
    hole that is left with triangles that share the new point.

    Reference: https://en.wikipedia.org/wiki/Bowyer-Watson_algorithm
    """

    __slots__ = ('triangulation', 'created', 'removed')

    def __init__(self, triangulation):
        self.triangulation = triangulation
        self.created = 0
        self.removed = 0

    def initialize(self, large):
        """Seed the triangulation with one triangle containing all points"""
        self.triangulation.triangles = [large]

    def insert(self, points):
        """Insert a list of points into the triangulation, in the order given.
        """
        for j, p in enumerate(points):
            logging.debug(" - inserting {}".format(p))
            self.append(p)
            if (j % 1000) == 0:
                logging.debug(" {} triangles after {} points".format(
                    len(self.triangulation.triangles), j + 1))

    def append(self, p):
        """Appends one point to the triangulation.

        A point that leaves no hole (e.g. a duplicate) adds no triangles.
        """
        triangles = self.triangulation.triangles
        bad = [t for t in triangles if in_circumcircle(t, p)]
        polygon = self.boundary(bad)
        # -- remove the bad triangles
        bad_ids = set(id(t) for t in bad)
        triangles[:] = [t for t in triangles if id(t) not in bad_ids]
        self.removed += len(bad)
        # -- connect the edges of the hole to the new point
        for edge in polygon:
            triangles.append(Triangle(edge.a, edge.b, p))
        self.created += len(polygon)

    def boundary(self, bad):
        """Edges of the bad triangles that are not shared among them,
        these form the boundary of the polygonal hole
        """
        polygon = []
        for i, t in enumerate(bad):
            for edge in t.edges():
                shared = False
                for j, other in enumerate(bad):
                    if i != j and other.has_edge(edge):
                        shared = True
                        break
                if not shared:
                    polygon.append(edge)
        return polygon


def without_super_triangle(triangles, large):
    """Returns the triangles that have none of the corners of *large*"""
    return [t for t in triangles
            if not any(t.has_vertex(v) for v in large.vertices)]


def triangulate(pts):
    """Delaunay triangulation of a list of points

    Points can be given as Point objects or as (x, y) tuples. Returns a list
    of Triangles; this list is empty when there are less than 3 points or
    when all points are collinear.
    """
    start = time.perf_counter()
    points = [as_point(pt) for pt in pts]
    logging.debug("")
    logging.debug("triangulating {} points".format(len(points)))

    large = super_triangle()
    dt = Triangulation()
    incremental = BowyerWatsonInserter(dt)
    incremental.initialize(large)
    incremental.insert(points)
    result = without_super_triangle(dt.triangles, large)
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(result)))
    logging.debug("{} triangles removed with super triangle".format(
        len(dt.triangles) - len(result)))
    logging.debug("{} created".format(incremental.created))
    logging.debug("{} removed".format(incremental.removed))
    return result
