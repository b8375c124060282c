"""Fuse pairs of Robinson triangles into Penrose rhombi.

Each rhombus of the tiling is represented by two Robinson triangles
split along their common a-c diagonal. `pair_triangles` finds these
pairs and returns the rhombi they make up. Triangles near the boundary
of a finite patch have no partner, and are dropped.

"""

import logging
from collections import defaultdict, deque

import numpy as np

from penrose_tools.tiles import RobinsonTriangle, Rhombus

logger = logging.getLogger(__name__)

MATCH_STRATEGIES = ("links", "coordinates", "tolerance")

# grid size for the "tolerance" match strategy
DEFAULT_TOLERANCE = 1e-9

def diagonal_keys(triangles, match="links", tolerance=DEFAULT_TOLERANCE):
    """Get a hashable key for the a-c diagonal of each triangle.

    Parameters
    ----------
    triangles : RobinsonTriangle
        flat collection of triangles.

    match : str
        how to identify diagonals. "links" compares vertex
        identifiers, "coordinates" compares vertex coordinates
        exactly, and "tolerance" compares vertex coordinates rounded
        to a grid of size `tolerance`.

    tolerance : float
        grid size, used only if `match` is "tolerance".

    Returns
    -------
    list of tuples

    """
    ends = [0, 2]
    num_triangles = len(triangles)

    if match == "links":
        keys = triangles.link_data[:, ends]
    elif match == "coordinates":
        keys = triangles.vertex_data[:, ends].reshape(num_triangles, 4)
    elif match == "tolerance":
        if tolerance <= 0:
            raise ValueError("tolerance must be positive")
        # grid indices stay floats, since they can exceed the int64 range
        keys = np.rint(
            triangles.vertex_data[:, ends].reshape(num_triangles, 4) / tolerance
        )
        if not np.all(np.isfinite(keys)):
            raise ValueError(
                "tolerance {} is too small for the coordinates".format(tolerance)
            )
    else:
        raise ValueError(
            "Unknown match strategy '{}'. Expected one of: {}".format(
                match, ", ".join(MATCH_STRATEGIES))
        )

    return [tuple(key) for key in keys.tolist()]

def pair_triangles(triangles, match="links", tolerance=DEFAULT_TOLERANCE,
                   with_unmatched=False):
    """Collapse a collection of Robinson triangles into rhombi.

    The triangles are treated as a working set: the last remaining
    triangle x is removed, and the first remaining triangle y with the
    same a-c diagonal (if any) is removed with it, giving the rhombus
    (x.a, x.b, x.c, y.b) of the kind of x. This is repeated until the
    set is empty. Triangles are looked up by diagonal, so the cost is
    linear in the number of triangles.

    Parameters
    ----------
    triangles : RobinsonTriangle
        triangles to pair.

    match : str
        how to decide that two triangles share a diagonal; see
        `diagonal_keys`.

    tolerance : float
        grid size for the "tolerance" match strategy.

    with_unmatched : bool
        if `True`, also return the triangles which did not find a
        partner.

    Returns
    -------
    Rhombus or tuple
        flat collection of rhombi, or a pair `(rhombi, unmatched)` if
        `with_unmatched` is `True`.

    """
    triangles = RobinsonTriangle(triangles).flatten_to_unit()
    keys = diagonal_keys(triangles, match=match, tolerance=tolerance)

    remaining = defaultdict(deque)
    for index, key in enumerate(keys):
        remaining[key].append(index)

    pairs = []
    unmatched = []
    for index in range(len(keys) - 1, -1, -1):
        candidates = remaining[keys[index]]
        if not candidates or candidates[-1] != index:
            # already taken as a partner
            continue

        candidates.pop()
        if candidates:
            pairs.append((index, candidates.popleft()))
        else:
            unmatched.append(index)

    pairs = np.array(pairs, dtype=np.int64).reshape(-1, 2)
    unmatched = np.array(unmatched, dtype=np.int64)

    first, second = pairs[:, 0], pairs[:, 1]
    vertex_data = np.concatenate([
        triangles.vertex_data[first],
        triangles.vertex_data[second, 1:2]
    ], axis=-2)
    link_data = np.concatenate([
        triangles.link_data[first],
        triangles.link_data[second, 1:2]
    ], axis=-1)

    # SMALL/LARGE and THIN/FAT share their codes
    rhombi = Rhombus(vertex_data, triangles.kind_data[first],
                     links=link_data)

    logger.debug("paired %d triangles into %d rhombi (%d unmatched, match=%s)",
                 len(triangles), len(rhombi), len(unmatched), match)

    if with_unmatched:
        return rhombi, triangles[unmatched]

    return rhombi
