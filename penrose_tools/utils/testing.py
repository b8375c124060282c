import numpy as np

def assert_tiles_identical(tiles1, tiles2):
    assert tiles1.__class__ == tiles2.__class__
    assert tiles1.vertex_data.shape == tiles2.vertex_data.shape
    assert tiles1.vertex_data.dtype == tiles2.vertex_data.dtype

    assert np.array_equal(tiles1.vertex_data, tiles2.vertex_data)
    assert np.array_equal(tiles1.kind_data, tiles2.kind_data)
    assert np.array_equal(tiles1.link_data, tiles2.link_data)

def assert_tiles_close(tiles1, tiles2):
    assert tiles1.vertex_data.shape == tiles2.vertex_data.shape
    assert np.array_equal(tiles1.kind_data, tiles2.kind_data)

    assert np.allclose(
        tiles1.vertex_data,
        tiles2.vertex_data
    )

def kind_counts(triangles):
    """Return the number of (LARGE, SMALL) triangles in a collection."""
    return (triangles.count("large"), triangles.count("small"))
