import logging

from penrose_tools import tiling, drawtools
from penrose_tools.logging_config import setup_logging

setup_logging(logging.DEBUG)

# generate the tiling after five subdivisions of a decagon of radius 10
rhombi, boundary = tiling.generate(10.0, 5, with_unmatched=True)

# draw the rhombi, and outline the triangles left over at the boundary
fig = drawtools.TilingDrawing(facecolor=(20/255, 20/255, 20/255))
fig.draw_rhombi(rhombi, edgecolor="none")
fig.draw_triangles(boundary, edgecolor="gray")

fig.show()
