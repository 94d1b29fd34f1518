"""Bowyer - Delaunay Triangulation with a symbolic super triangle
"""

from bowyer.delaunay.insert_bw import triangulate
from bowyer.delaunay.tds import Point, Edge, Circle, Triangle
from bowyer.delaunay.infinite import super_triangle, halfplane_contains
from bowyer.delaunay.inout import output_triangles, output_vertices


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'
__all__ = ("triangulate", "Point", "Edge", "Circle", "Triangle",
           "super_triangle", "halfplane_contains",
           "output_triangles", "output_vertices")

