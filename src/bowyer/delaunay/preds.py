'''
Created on Mar 2, 2021

@author: martijn
'''

from geompreds import orient2d


def area(pa, pb, pc):
    """Signed area of the triangle pa, pb, pc

    positive: ccw
    zero:     collinear
    negative: cw

    orient2d gives twice the signed area, i.e. the determinant

        | pb.x - pa.x  pc.x - pa.x |
        | pb.y - pa.y  pc.y - pa.y |

    Evaluated robustly, so exactly collinear points always give exactly 0.
    """
    return orient2d(pa, pb, pc) / 2.0
