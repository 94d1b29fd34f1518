'''
Created on Mar 3, 2021

@author: martijn
'''
from bowyer.delaunay.tds import INF, Point, Triangle, slope

# -----------------------------------------------------------------------------
# Symbolic super triangle
#
#     A super triangle with large, but finite, coordinates may fail to
#     contain the circumcircle of three (nearly) collinear points. Instead
#     the corners are put at infinity:
#
#         (-inf, -inf), (0, +inf), (+inf, 0)
#
#     Such a triangle has no circumcircle; a triangle with one or two of
#     these corners has a circumcircle with infinite radius that locally is
#     a straight line. Whether a point lies inside it is decided by the side
#     of this line (half plane) the point is on.
#
#     See: https://math.stackexchange.com/questions/4001660


def super_triangle():
    """Triangle with symbolic corners that contains every finite point"""
    return Triangle(Point(-INF, -INF), Point(0.0, INF), Point(INF, 0.0))


def halfplane_contains(t, p):
    """Tests whether p lies inside the (infinite) circumcircle of t

    Decided on the number of finite corners of t:

    - 0: t is the super triangle, it contains the whole plane
    - 1: the two symbolic corners fix the direction of a line through the
      finite corner
    - 2: the edge between the finite corners is tangent to the circle,
      the symbolic corner tells which side is inside
    - 3: a collinear triangle, its circle contains nothing
    """
    finite_ct = sum(1 for v in t.vertices if v.is_finite)

    if finite_ct == 0:
        return True

    elif finite_ct == 1:
        if t.a.is_finite:
            f, v1, v2 = t.a, t.b, t.c
        elif t.b.is_finite:
            f, v1, v2 = t.b, t.a, t.c
        else:
            f, v1, v2 = t.c, t.a, t.b
        if v1.y == INF or v2.y == INF:
            if v1.x == INF or v2.x == INF:
                # { (0, inf), (inf, 0) }: y = -x + b
                b = f.y + f.x
                return p.y + p.x > b
            else:
                # { (0, inf), (-inf, -inf) }: y = 3x + b
                b = f.y - 3.0 * f.x
                return p.y - 3.0 * p.x > b
        else:
            # { (-inf, -inf), (inf, 0) }: y = x/3 + b
            b = f.y - f.x / 3.0
            return p.y - p.x / 3.0 < b

    elif finite_ct == 2:
        if not t.a.is_finite:
            f, v1, v2 = t.a, t.b, t.c
        elif not t.b.is_finite:
            f, v1, v2 = t.b, t.a, t.c
        else:
            f, v1, v2 = t.c, t.b, t.a
        m = slope(v1, v2)
        b = v1.y - m * v1.x
        s = p.y - m * p.x
        if f.y == INF:
            # (0, inf): inside is above the tangent
            return s > b
        elif f.x == INF:
            # (inf, 0)
            if m >= 0.0:
                return s < b
            return s > b
        else:
            # (-inf, -inf)
            if m >= 1.0:
                return s > b
            return s < b

    return False


def in_circumcircle(t, p):
    """Is p strictly inside the circumcircle of t

    Falls back on the half plane test when the circumcircle of t is
    infinite.
    """
    circle = t.circumcircle()
    if circle.is_infinite:
        return halfplane_contains(t, p)
    return circle.contains(p)
