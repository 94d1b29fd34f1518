import logging

from bowyer.delaunay import triangulate
from bowyer.delaunay.helpers import random_circle_vertices


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    pts = random_circle_vertices(1500, 100.0)
    triangulate(pts)
