import matplotlib
matplotlib.use("Agg")

import pytest
import matplotlib.pyplot as plt

from penrose_tools import generate, generate_triangles, drawtools
from penrose_tools import GeometryError
from penrose_tools.tiles import RhombusKind


@pytest.fixture
def figure():
    drawing = drawtools.TilingDrawing()
    yield drawing
    plt.close(drawing.fig)

@pytest.fixture
def rhombi():
    return generate(1.0, 3)

def test_draw_rhombi(figure, rhombi):
    figure.draw_rhombi(rhombi)
    collection = figure.ax.collections[-1]
    assert len(collection.get_paths()) == len(rhombi)

def test_draw_rhombi_limits(figure, rhombi):
    figure.draw_rhombi(rhombi)
    xmin, xmax = figure.ax.get_xlim()
    assert xmin < rhombi.vertex_data[..., 0].min()
    assert xmax > rhombi.vertex_data[..., 0].max()

def test_fixed_limits(rhombi):
    drawing = drawtools.TilingDrawing(xlim=(-5., 5.), ylim=(-5., 5.))
    drawing.draw_rhombi(rhombi)
    assert drawing.ax.get_xlim() == (-5., 5.)
    plt.close(drawing.fig)

def test_draw_rhombi_colors(figure, rhombi):
    figure.draw_rhombi(rhombi, colors={"fat": "red", RhombusKind.THIN: "blue"})
    facecolors = figure.ax.collections[-1].get_facecolors()
    assert len(facecolors) == len(rhombi)

def test_draw_nothing(figure):
    rhombi = generate(1.0, 0)
    figure.draw_rhombi(rhombi)
    assert len(figure.ax.collections) == 0

def test_draw_triangles(figure):
    figure.draw_triangles(generate_triangles(1.0, 2))
    assert len(figure.ax.collections) == 1

def test_wrong_tile_type(figure):
    with pytest.raises(GeometryError):
        figure.draw_rhombi(generate_triangles(1.0, 2))

def test_save(figure, rhombi, tmp_path):
    filename = tmp_path / "tiling.png"
    figure.draw_rhombi(rhombi)
    figure.save(filename)
    assert filename.exists()
