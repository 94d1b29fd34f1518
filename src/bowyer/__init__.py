"""Bowyer - Delaunay Triangulation with a symbolic super triangle
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'

from bowyer.delaunay import triangulate, Point, Triangle

__all__ = ["triangulate", "Point", "Triangle"]
