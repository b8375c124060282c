r"""Apply the Robinson triangle substitution rule.

Let \(\psi = (\sqrt{5} - 1)/2\) and \(\psi_2 = 1 - \psi\). A triangle
(a, b, c) is replaced by

- LARGE: with d = psi2*a + psi*c and e = psi2*a + psi*b, the triangles
  (d, e, a, LARGE), (e, d, b, SMALL), (c, d, b, LARGE);

- SMALL: with d = psi*a + psi2*b, the triangles (d, c, a, SMALL),
  (c, d, b, LARGE).

The children of a triangle always cover it exactly. Every new vertex
splits some edge (u, v) of a parent at the point psi2*u + psi*v, so
it is identified by the *ordered* pair of identifiers of u and v. Two
triangles on either side of an edge split that edge at the same point
(this is what the matching rules of the tiling guarantee), so the new
vertex gets a single identifier and a single set of coordinates, no
matter how many parents produce it.

"""

import logging

import numpy as np

from penrose_tools.points import combination
from penrose_tools.tiles import RobinsonTriangle, Kind, vertex_table
from penrose_tools.utils.numerical import PSI, PSI2

logger = logging.getLogger(__name__)

SMALL = RobinsonTriangle.kind_types.index(Kind.SMALL)
LARGE = RobinsonTriangle.kind_types.index(Kind.LARGE)

def subdivide(triangles):
    """Apply the substitution rule to every triangle in a collection.

    Parameters
    ----------
    triangles : RobinsonTriangle
        a single triangle or a composite collection of triangles. If
        its vertex identifiers are not consistent with its
        coordinates, they are recomputed from the coordinates.

    Returns
    -------
    RobinsonTriangle
        flat collection of the children, in the order of their
        parents (children of the first triangle first).

    """
    triangles = RobinsonTriangle(triangles).flatten_to_unit()
    if len(triangles) == 0:
        return triangles

    if not triangles.links_consistent():
        logger.debug("vertex identifiers disagree with coordinates, "
                     "recomputing them for %d triangles", len(triangles))
        triangles = RobinsonTriangle(triangles.vertex_data,
                                     triangles.kind_data)

    links = triangles.link_data
    large = triangles.kind_data == LARGE
    small = ~large

    ia, ib, ic = links[:, 0], links[:, 1], links[:, 2]

    # ordered edges (u, v) to split at psi2*u + psi*v
    edges = np.concatenate([
        np.stack([ia[large], ic[large]], axis=-1),
        np.stack([ia[large], ib[large]], axis=-1),
        np.stack([ib[small], ia[small]], axis=-1),
    ])
    split_edges, inverse = np.unique(edges, axis=0, return_inverse=True)

    table = vertex_table(triangles)
    new_vertices = combination(PSI2, table[split_edges[:, 0]],
                               PSI, table[split_edges[:, 1]])

    new_links = len(table) + inverse.reshape(-1)
    num_large = np.count_nonzero(large)
    large_d, large_e, small_d = np.split(new_links,
                                         [num_large, 2 * num_large])

    table = np.concatenate([table, new_vertices.coords()])

    num_children = np.where(large, 3, 2)
    start = np.cumsum(num_children) - num_children

    child_links = np.empty((np.sum(num_children), 3), dtype=np.int64)
    child_kinds = np.empty(np.sum(num_children), dtype=np.int8)

    first = start[large]
    child_links[first] = np.stack([large_d, large_e, ia[large]], axis=-1)
    child_links[first + 1] = np.stack([large_e, large_d, ib[large]], axis=-1)
    child_links[first + 2] = np.stack([ic[large], large_d, ib[large]], axis=-1)
    child_kinds[first] = LARGE
    child_kinds[first + 1] = SMALL
    child_kinds[first + 2] = LARGE

    first = start[small]
    child_links[first] = np.stack([small_d, ic[small], ia[small]], axis=-1)
    child_links[first + 1] = np.stack([ic[small], small_d, ib[small]], axis=-1)
    child_kinds[first] = SMALL
    child_kinds[first + 1] = LARGE

    return RobinsonTriangle(table[child_links], child_kinds,
                            links=child_links)
