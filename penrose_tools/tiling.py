"""Generate finite patches of the Penrose rhombus (P3) tiling.

A decagonal "sun" of ten SMALL Robinson triangles around the origin is
subdivided a given number of times, and the resulting triangles are
fused in pairs into rhombi.

```python
from penrose_tools import tiling

rhombi = tiling.generate(10.0, 5)
rhombi.count("fat"), rhombi.count("thin")
```

"""

import logging

import numpy as np

from penrose_tools.pairing import pair_triangles, DEFAULT_TOLERANCE
from penrose_tools.points import Point
from penrose_tools.subdivision import subdivide
from penrose_tools.tiles import RobinsonTriangle, Kind, concatenate

logger = logging.getLogger(__name__)

SEED_ROTATION = np.pi / 5

# vertex identifiers of the seed: 0 is the origin, 1-6 are the
# points a1, c1, a2, c3, a4, c5 of the upper fan. a1 and c5 lie on the
# horizontal axis and are shared by the lower fan, whose other
# vertices get identifiers 7-10.
SEED_LINKS = np.array([
    [1, 0, 2],
    [3, 0, 2],
    [3, 0, 4],
    [5, 0, 4],
    [5, 0, 6],
])
MIRROR_LINKS = np.array([0, 1, 7, 8, 9, 10, 6])

def _check_arguments(scale, generations):
    if not np.isfinite(scale):
        raise ValueError("scale must be finite, got {}".format(scale))

    if not np.isfinite(generations) or int(generations) != generations:
        raise ValueError(
            "generations must be an integer, got {}".format(generations)
        )

    if generations < 0:
        raise ValueError(
            "generations must be non-negative, got {}".format(generations)
        )

def seed(scale):
    """Get the ten SMALL triangles making up the initial decagon.

    Parameters
    ----------
    scale : float
        distance from the origin to the vertices of the decagon. Zero
        gives a degenerate (but combinatorially complete) seed.

    Returns
    -------
    RobinsonTriangle
        collection of 10 triangles: five obtained by successive
        rotations by pi/5, followed by their reflections across the
        horizontal axis.

    """
    origin = Point([0., 0.])
    a1 = Point([scale, 0.])
    c1 = a1.rotate(SEED_ROTATION)
    a2 = c1.rotate(SEED_ROTATION)
    c3 = a2.rotate(SEED_ROTATION)
    a4 = c3.rotate(SEED_ROTATION)
    c5 = -a1

    fan = Point([origin, a1, c1, a2, c3, a4, c5])

    upper = RobinsonTriangle(fan.coords()[SEED_LINKS], Kind.SMALL,
                             links=SEED_LINKS)
    lower = RobinsonTriangle(fan.reflect().coords()[SEED_LINKS], Kind.SMALL,
                             links=MIRROR_LINKS[SEED_LINKS])

    return concatenate([upper, lower])

def generate_triangles(scale, generations):
    """Get the triangles of the tiling after some number of
    subdivisions of the seed.

    Parameters
    ----------
    scale : float
        size of the seed decagon.

    generations : int
        number of rounds of subdivision to apply. Must be
        non-negative.

    Raises
    ------
    ValueError
        if `generations` is negative or not an integer, or `scale`
        is not finite.

    Returns
    -------
    RobinsonTriangle

    """
    _check_arguments(scale, generations)

    triangles = seed(scale)
    for generation in range(int(generations)):
        triangles = subdivide(triangles)
        logger.debug("generation %d: %d large, %d small triangles",
                     generation + 1, triangles.count(Kind.LARGE),
                     triangles.count(Kind.SMALL))

    return triangles

def generate(scale, generations, match="links",
             tolerance=DEFAULT_TOLERANCE, with_unmatched=False):
    """Generate a patch of the Penrose rhombus tiling.

    Parameters
    ----------
    scale : float
        size of the seed decagon.

    generations : int
        number of rounds of subdivision.

    match : str
        strategy used to find triangles sharing a diagonal; see
        `penrose_tools.pairing.diagonal_keys`.

    tolerance : float
        grid size for the "tolerance" match strategy.

    with_unmatched : bool
        if `True`, also return the boundary triangles which could not
        be paired.

    Returns
    -------
    Rhombus or tuple
        flat collection of rhombi, or `(rhombi, unmatched)` if
        `with_unmatched` is `True`.

    """
    triangles = generate_triangles(scale, generations)
    return pair_triangles(triangles, match=match, tolerance=tolerance,
                          with_unmatched=with_unmatched)
