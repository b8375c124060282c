import numpy as np

from penrose_tools import convexity

def test_make_cycle():
    simplices = [(0, 1), (2, 3), (1, 2), (3, 0)]
    cycle = convexity.make_cycle(simplices)
    assert cycle in ([0, 1, 2, 3], [0, 3, 2, 1])

def test_convex_quadrilateral():
    kite = np.array([[0.0, 0.0], [2.0, -1.0], [3.0, 0.0], [2.0, 1.0]])
    assert convexity.is_convex_polygon(kite)
    assert convexity.is_convex_polygon(kite[::-1])

def test_reflex_vertex():
    dart = np.array([[0.0, 0.0], [2.0, -1.0], [1.0, 0.0], [2.0, 1.0]])
    assert not convexity.is_convex_polygon(dart)

def test_self_intersecting():
    bowtie = np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 1.0], [2.0, 2.0]])
    assert not convexity.is_convex_polygon(bowtie)

def test_degenerate():
    segment = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [3.0, 3.0]])
    assert not convexity.is_convex_polygon(segment)
    assert not convexity.is_convex_polygon(np.zeros((4, 2)))
