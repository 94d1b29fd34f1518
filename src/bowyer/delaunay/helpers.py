'''
Created on Mar 4, 2021

@author: martijn
'''
from math import sqrt, pi, cos, sin
from random import random
# ------------------------------------------------------------------------------
# Generate randomized point sets (for testing purposes)
#


def random_circle_vertices(n=10, radius=1.0, cx=0, cy=0):
    """Returns a list with n random vertices in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    vertices = []
    for _ in range(n):
        r = radius * sqrt(random())
        t = 2 * pi * random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x + cx, y + cy))
    return vertices
