"""Work with points in the Euclidean plane.

A `Point` object wraps an ndarray of shape `(..., 2)`. The last
dimension holds x,y coordinates; any leading dimensions index a
collection of points, so a single `Point` object can stand for a whole
array of points and be rotated or reflected all at once.

```python
from numpy import pi
from penrose_tools.points import Point

pts = Point([[1.0, 0.0], [0.0, 2.0]])
pts.rotate(pi / 2).coords()
```
    array([[ 6.123234e-17,  1.000000e+00],
           [-2.000000e+00,  1.224647e-16]])

Points are immutable: every operation returns a new `Point`.

"""

import numpy as np

from penrose_tools import utils
from penrose_tools.base import GeometryError


class Point:
    """A point (or collection of points) in the plane.
    """
    def __init__(self, point):
        """Parameters
        ----------
        point : ndarray or Point or iterable
            Data to use to construct a Point object. If `point` is an
            array-like, its last dimension must have length 2. If
            `point` is a `Point`, or an iterable of `Point` objects,
            build a (composite) point out of their coordinates.

        """
        try:
            self._construct_from_object(point)
            return
        except TypeError:
            pass

        self.set(point)

    def _construct_from_object(self, point):
        try:
            self.set(point.coord_data)
            return
        except AttributeError:
            pass

        try:
            unrolled = list(point)
            if len(unrolled) == 0:
                raise IndexError

            self.set(np.array([pt.coord_data for pt in unrolled]))
            return
        except (TypeError, AttributeError, IndexError):
            pass

        raise TypeError

    def _assert_geometry_valid(self, coord_data):
        if coord_data.ndim < 1 or coord_data.shape[-1] != 2:
            raise GeometryError(
                ("{} expects an array with last dimension 2, got array of shape {}"
                ).format(self.__class__.__name__, coord_data.shape)
            )

    def set(self, coord_data):
        """Set the underlying coordinates of this point.

        The data is copied and frozen, so nothing outside this object
        can modify it afterwards.

        """
        coord_data = np.array(coord_data, dtype=float)
        self._assert_geometry_valid(coord_data)
        coord_data.flags.writeable = False

        self.coord_data = coord_data

    def coords(self):
        """Get the x,y coordinates of this point.

        Returns
        -------
        ndarray
            read-only array of shape `(..., 2)`.

        """
        return self.coord_data

    @property
    def x(self):
        return self.coord_data[..., 0]

    @property
    def y(self):
        return self.coord_data[..., 1]

    def rotate(self, angle):
        """Rotate counterclockwise about the origin.

        Parameters
        ----------
        angle : float
            rotation angle, in radians.

        Returns
        -------
        Point
            the rotated point(s).

        """
        return Point(self.coord_data @ utils.rotation_matrix(angle).T)

    def reflect(self):
        """Reflect across the horizontal axis (i.e. negate y)."""
        return Point(self.coord_data * np.array([1., -1.]))

    def __add__(self, other):
        return Point(self.coord_data + Point(other).coord_data)

    def __sub__(self, other):
        return Point(self.coord_data - Point(other).coord_data)

    def __neg__(self):
        return Point(-1 * self.coord_data)

    def __mul__(self, scalar):
        return Point(scalar * self.coord_data)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __eq__(self, other):
        try:
            return np.array_equal(self.coord_data, other.coord_data)
        except AttributeError:
            return NotImplemented

    __hash__ = None

    def __len__(self):
        if self.coord_data.ndim == 1:
            raise TypeError("a single Point has no len()")
        return len(self.coord_data)

    def __getitem__(self, item):
        return Point(self.coord_data[item])

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __repr__(self):
        return "({}, {})".format(
            self.__class__,
            self.coord_data.__repr__()
        )

    def __str__(self):
        return "{} with data:\n{}".format(
            self.__class__.__name__, self.coord_data.__str__()
        )

def combination(s, p, t, q):
    """Get the linear combination s*p + t*q of two (composite) points.

    Parameters
    ----------
    s, t : float
        coefficients
    p, q : Point or ndarray
        points to combine. Their shapes are broadcast against each
        other.

    Returns
    -------
    Point

    """
    return Point(s * Point(p).coord_data + t * Point(q).coord_data)
