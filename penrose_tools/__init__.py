r"""
penrose_tools
=============

`penrose_tools` is a small Python package for generating finite patches of the Penrose rhombus (P3) tiling.

The package is built on top of [numpy](https://numpy.org), and provides modules to:

- work with points and polygonal tiles in the plane, either one at a time or as whole arrays of them

- apply the Robinson triangle substitution rule to a collection of triangles

- grow a decagonal seed into a large patch of triangles, and fuse the triangles into thin and fat rhombi

- draw the resulting tilings with [matplotlib](https://matplotlib.org)

The tilings are computed in floating point. Vertices shared between tiles are tracked by integer identifiers, so that triangles are paired up combinatorially rather than by comparing coordinates.

## Example usage

To draw a patch of the tiling obtained after five subdivisions:

```python
from penrose_tools import tiling, drawtools

rhombi = tiling.generate(10.0, 5)

figure = drawtools.TilingDrawing()
figure.draw_rhombi(rhombi)

figure.show()
```
"""

from penrose_tools.base import GeometryError
from penrose_tools.pairing import pair_triangles
from penrose_tools.subdivision import subdivide
from penrose_tools.tiling import generate, generate_triangles, seed
