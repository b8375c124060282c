"""This submodule provides an interface between the tiles of
`penrose_tools` and [matplotlib](https://matplotlib.org/).

The central class in this module is `TilingDrawing`. To create a
matplotlib figure, instantiate it and use the provided methods to add
tiles to the drawing.

```python
from penrose_tools import drawtools, tiling

drawing = drawtools.TilingDrawing()
drawing.draw_rhombi(tiling.generate(1.0, 5))

drawing.show()
```

    """

import numpy as np

import matplotlib.pyplot as plt
from matplotlib.collections import PolyCollection

from penrose_tools.tiles import Rhombus, RobinsonTriangle, RhombusKind

#the default amount of "room" we leave around the tiles, as a
#fraction of the width/height of the drawn region
DRAW_NEIGHBORHOOD = 0.05

DEFAULT_COLORS = {
    RhombusKind.FAT: "royalblue",
    RhombusKind.THIN: "lightsteelblue",
}

def _kind_color(kind, colors):
    for key, color in colors.items():
        if kind == key:
            return color
    return "none"

class TilingDrawing:
    def __init__(self, figsize=8,
                 ax=None,
                 fig=None,
                 xlim=None,
                 ylim=None,
                 facecolor=None):

        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(figsize, figsize))

        self.ax, self.fig = ax, fig
        self.xlim, self.ylim = xlim, ylim

        plt.tight_layout()
        self.ax.axis("off")
        self.ax.set_aspect("equal")

        if facecolor is not None:
            self.fig.set_facecolor(facecolor)

        self._set_limits()

    def _set_limits(self):
        if self.xlim is not None:
            self.ax.set_xlim(self.xlim)
        if self.ylim is not None:
            self.ax.set_ylim(self.ylim)

    def _fit_limits(self, vertex_data):
        """Set the axis limits which were not given explicitly to fit
        the given vertices."""
        points = vertex_data.reshape(-1, 2)
        lower = np.min(points, axis=0)
        upper = np.max(points, axis=0)
        margin = np.max(upper - lower) * DRAW_NEIGHBORHOOD

        if self.xlim is None:
            self.ax.set_xlim((lower[0] - margin, upper[0] + margin))
        if self.ylim is None:
            self.ax.set_ylim((lower[1] - margin, upper[1] + margin))

    def draw_rhombi(self, rhombi, colors=None, **kwargs):
        """Draw a collection of rhombi, filled according to their kind.

        Parameters
        ----------
        rhombi : Rhombus
            rhombi to draw.

        colors : dict
            map from `RhombusKind` (or kind name) to a matplotlib
            color. Defaults to `DEFAULT_COLORS`.

        Any other keyword arguments are passed to
        `matplotlib.collections.PolyCollection`.

        """
        rhombi = Rhombus(rhombi).flatten_to_unit()
        if len(rhombi) == 0:
            return

        if colors is None:
            colors = DEFAULT_COLORS

        default_kwargs = {
            "edgecolor": "black",
            "linewidth": 0.5,
            "facecolors": [_kind_color(kind, colors)
                           for kind in rhombi.kinds()]
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        self.ax.add_collection(PolyCollection(rhombi.vertex_data,
                                              **default_kwargs))
        self._fit_limits(rhombi.vertex_data)

    def draw_triangles(self, triangles, **kwargs):
        """Draw the outlines of a collection of Robinson triangles.

        Keyword arguments are passed to
        `matplotlib.collections.PolyCollection`.

        """
        triangles = RobinsonTriangle(triangles).flatten_to_unit()
        if len(triangles) == 0:
            return

        default_kwargs = {
            "edgecolor": "black",
            "facecolor": "none",
            "linewidth": 0.5
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        self.ax.add_collection(PolyCollection(triangles.vertex_data,
                                              **default_kwargs))
        self._fit_limits(triangles.vertex_data)

    def show(self):
        plt.show()

    def save(self, filename, **kwargs):
        self.fig.savefig(filename, **kwargs)
