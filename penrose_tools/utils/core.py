import numpy as np

def rotation_matrix(angle):
    """Get a 2x2 rotation matrix rotating counterclockwise by the
    specified angle.

    """
    return np.array([[np.cos(angle), -1*np.sin(angle)],
                     [np.sin(angle), np.cos(angle)]])

def signed_area(polygons):
    """Get the signed area of an array of polygons.

    Parameters:
    -----------
    polygons: ndarray of shape (..., n, 2), giving the x,y coordinates
    of the vertices of some polygons, in order.

    Return:
    --------
    ndarray of shape (...), positive for counterclockwise polygons.

    """
    xs = polygons[..., 0]
    ys = polygons[..., 1]

    return 0.5 * np.sum(xs * np.roll(ys, -1, axis=-1) -
                        np.roll(xs, -1, axis=-1) * ys, axis=-1)

def vertex_angles(polygons):
    """Get the interior angle at each vertex of an array of polygons.

    Parameters:
    -----------
    polygons: ndarray of shape (..., n, 2)

    Return:
    --------
    ndarray of shape (..., n), in radians. Entry i is the angle
    between the edges joining vertex i to vertices i-1 and i+1.

    """
    previous = np.roll(polygons, 1, axis=-2) - polygons
    following = np.roll(polygons, -1, axis=-2) - polygons

    dots = np.sum(previous * following, axis=-1)
    norms = (np.linalg.norm(previous, axis=-1) *
             np.linalg.norm(following, axis=-1))

    return np.arccos(np.clip(dots / norms, -1., 1.))
