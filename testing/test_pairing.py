import pytest
import numpy as np

from penrose_tools import generate, generate_triangles, pair_triangles
from penrose_tools.pairing import diagonal_keys
from penrose_tools.tiles import Kind, RhombusKind, Rhombus, RobinsonTriangle
from penrose_tools.points import Point

from penrose_tools.utils.testing import *

@pytest.fixture
def rhombi():
    return generate(1.0, 4)

@pytest.fixture
def shared_diagonal():
    # three triangles on the diagonal (0, 0)-(2, 0)
    return RobinsonTriangle(
        np.array([[[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]],
                  [[0.0, 0.0], [1.0, 2.0], [2.0, 0.0]],
                  [[0.0, 0.0], [1.0, -1.0], [2.0, 0.0]]]),
        kinds=[Kind.SMALL, Kind.LARGE, Kind.LARGE]
    )

def test_seed_does_not_pair():
    rhombi, unmatched = generate(10.0, 0, with_unmatched=True)
    assert len(rhombi) == 0
    assert len(unmatched) == 10

def test_first_generation_pairs_completely():
    rhombi, unmatched = generate(10.0, 1, with_unmatched=True)
    assert len(rhombi) == 10
    assert len(unmatched) == 0
    assert rhombi.count(RhombusKind.FAT) == 5
    assert rhombi.count(RhombusKind.THIN) == 5

@pytest.mark.parametrize("generations", [1, 2, 3, 4, 5])
def test_every_triangle_accounted_for(generations):
    triangles = generate_triangles(1.0, generations)
    rhombi, unmatched = pair_triangles(triangles, with_unmatched=True)

    assert 2 * len(rhombi) + len(unmatched) == len(triangles)
    assert len(rhombi) <= len(triangles) // 2

@pytest.mark.parametrize("generations", [2, 4])
def test_match_strategies_agree(generations):
    by_links = generate(1.0, generations, match="links")
    by_coords = generate(1.0, generations, match="coordinates")
    by_tolerance = generate(1.0, generations, match="tolerance")

    assert_tiles_identical(by_links, by_coords)
    assert_tiles_identical(by_links, by_tolerance)

def test_unknown_match_strategy():
    with pytest.raises(ValueError):
        generate(1.0, 2, match="nearest")

def test_bad_tolerance():
    with pytest.raises(ValueError):
        generate(1.0, 2, match="tolerance", tolerance=0.0)

def test_rhombi_well_formed(rhombi):
    assert len(rhombi) > 0
    assert np.all(rhombi.is_well_formed())

def test_rhombus_sides_equal(rhombi):
    vertices = rhombi.vertex_data
    sides = np.linalg.norm(np.roll(vertices, -1, axis=-2) - vertices, axis=-1)
    assert np.allclose(sides, sides[:, :1])

def test_rhombus_angles(rhombi):
    thin = np.array([kind == RhombusKind.THIN for kind in rhombi.kinds()])
    smallest = np.min(rhombi.angles(), axis=-1)

    assert np.allclose(smallest[thin], np.pi / 5)
    assert np.allclose(smallest[~thin], 2 * np.pi / 5)

def test_rhombus_kind_from_triangles():
    triangles = generate_triangles(1.0, 3)
    rhombi, unmatched = pair_triangles(triangles, with_unmatched=True)

    paired_large = triangles.count(Kind.LARGE) - unmatched.count(Kind.LARGE)
    paired_small = triangles.count(Kind.SMALL) - unmatched.count(Kind.SMALL)
    assert 2 * rhombi.count(RhombusKind.FAT) == paired_large
    assert 2 * rhombi.count(RhombusKind.THIN) == paired_small

def test_single_rhombus(rhombi):
    rhombus = rhombi[0]
    assert isinstance(rhombus, Rhombus)
    assert isinstance(rhombus.d, Point)
    assert rhombus.kind in (RhombusKind.FAT, RhombusKind.THIN)
    assert rhombus.vertex_data.shape == (4, 2)

def test_pairing_order(shared_diagonal):
    rhombi, unmatched = pair_triangles(shared_diagonal, with_unmatched=True)

    # the last triangle is fused with the first one; the middle one is left over
    assert len(rhombi) == 1
    assert rhombi[0].kind is RhombusKind.FAT
    assert np.array_equal(
        rhombi.vertex_data[0],
        np.array([[0.0, 0.0], [1.0, -1.0], [2.0, 0.0], [1.0, 1.0]])
    )
    assert np.array_equal(unmatched.vertex_data, shared_diagonal.vertex_data[1:2])

def test_rhombus_links(shared_diagonal):
    rhombi = pair_triangles(shared_diagonal)
    links = shared_diagonal.link_data
    assert np.array_equal(rhombi.link_data[0],
                          [links[2, 0], links[2, 1], links[2, 2], links[0, 1]])

def test_diagonal_keys(shared_diagonal):
    for match in ("links", "coordinates", "tolerance"):
        keys = diagonal_keys(shared_diagonal, match=match)
        assert len(keys) == 3
        assert keys[0] == keys[1] == keys[2]

def test_tolerance_matching():
    nudged = RobinsonTriangle(
        np.array([[[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]],
                  [[1e-12, 0.0], [1.0, -1.0], [2.0, 0.0]]]),
        kinds=Kind.SMALL
    )
    assert len(pair_triangles(nudged, match="coordinates")) == 0
    assert len(pair_triangles(nudged, match="tolerance", tolerance=1e-9)) == 1

def test_zero_scale_pairs_by_links():
    degenerate = generate(0.0, 4)
    assert len(degenerate) == len(generate(1.0, 4))
    assert not np.any(degenerate.is_well_formed())

def test_tolerance_matching_large_scale():
    assert_tiles_identical(generate(1e10, 3, match="tolerance"),
                           generate(1e10, 3))

def test_tolerance_too_small():
    with pytest.raises(ValueError):
        generate(1.0, 2, match="tolerance", tolerance=1e-320)
