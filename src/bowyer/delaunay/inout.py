'''
Created on Mar 4, 2021

@author: martijn
'''


def output_vertices(V, fh):
    """Output list of points as WKT to text file (for QGIS)"""
    fh.write("id;wkt;finite\n")
    for i, v in enumerate(V):
        fh.write("{0};POINT({1});{2}\n".format(i, v, v.is_finite))


def output_triangles(T, fh):
    """Output list of triangles as WKT to text file (for QGIS)"""
    fh.write("id;wkt;finite;valid\n")
    for i, t in enumerate(T):
        fh.write("{0};{1};{2};{3}\n".format(
            i, t, t.is_finite, t.is_valid))
