"""Check convexity of polygons in the plane.

Mostly these are convenient wrappers for some of scipy's QHull
wrappers (which can be kind of inconvenient).

"""

from collections import defaultdict

import numpy as np
from scipy.spatial import ConvexHull

from penrose_tools import utils

# polygons with area below this (relative to the square of their
# diameter) count as degenerate
AREA_THRESHOLD = 1e-10

def make_cycle(simplices):
    """Get cyclically ordered indices representing the boundary of a
    convex polygon.

    Simplices is a sequence of index pairs. Each index represents a
    vertex in the boundary of a convex polygon, and each simplex is an
    edge in the boundary.

    Return: a sequence of indices corresponding to the cyclic order
    determined by the simplices (or the reverse).

    """
    if len(simplices) == 0:
        return
    neighbors = defaultdict(list)
    for simplex in simplices:
        neighbors[simplex[0]].append(simplex[1])
        neighbors[simplex[1]].append(simplex[0])

    indices = []
    prev_point = None
    current_point = simplices[0][0]
    first_point = current_point
    cycle_complete = False
    while not cycle_complete:
        indices.append(int(current_point))
        n1, n2 = tuple(neighbors[current_point])
        if n1 != prev_point:
            prev_point = current_point
            current_point = n1
        else:
            prev_point = current_point
            current_point = n2

        if current_point == first_point:
            cycle_complete = True
    return indices

def is_convex_polygon(vertices):
    """Determine whether a polygon is simple, strictly convex, and
    non-degenerate.

    Parameters
    ----------
    vertices : ndarray
        array of shape (n, 2), the vertices of the polygon in order.

    Returns
    -------
    bool
        `True` if every vertex is an extreme point of the convex hull
        and the vertices are given in the cyclic order of the hull
        boundary (in either direction).

    """
    vertices = np.asarray(vertices, dtype=float)
    num_vertices = len(vertices)

    diameter = np.max(np.linalg.norm(
        vertices[:, np.newaxis, :] - vertices[np.newaxis, :, :], axis=-1
    ))
    if abs(utils.signed_area(vertices)) <= AREA_THRESHOLD * diameter**2:
        return False

    hull = ConvexHull(vertices)
    if len(hull.vertices) != num_vertices:
        return False

    cycle = make_cycle(hull.simplices)
    start = cycle.index(0)
    cycle = cycle[start:] + cycle[:start]

    forward = list(range(num_vertices))
    backward = [0] + forward[:0:-1]

    return cycle == forward or cycle == backward
