"""Model the tiles making up a Penrose rhombus tiling.

The two classes provided here are `RobinsonTriangle` (the atomic unit
of the substitution rule) and `Rhombus` (the output of the tiling
generator). Both follow the same conventions as `Point`: a tile object
wraps an ndarray of vertex coordinates, the last two dimensions of
which describe a *single* tile. Any leading dimension indexes a
collection of tiles, so that a whole generation of the tiling is held
by one object.

Alongside its coordinates, every tile carries

- kind data: an integer code per tile, indexing into the class
  attribute `kind_types`, and

- link data: an integer identifier per vertex. Identifiers are shared
  between all of the tiles of a tiling which meet at a vertex, so two
  tiles can be compared combinatorially without comparing floating
  point coordinates.

```python
from penrose_tools import tiles

triangle = tiles.RobinsonTriangle([[1., 0.], [0., 0.], [0.809, 0.588]],
                                  kinds="small")
triangle.kind
```
    <Kind.SMALL: 'small'>

"""

from enum import Enum

import numpy as np

from penrose_tools import utils
from penrose_tools.base import GeometryError
from penrose_tools.convexity import is_convex_polygon
from penrose_tools.points import Point


class TileKind(Enum):
    """Base class for enumerations of tile kinds.

    Kinds can be compared to strings with the == operator, which
    returns `True` if the string matches any alias name (case
    insensitive).

    """
    def aliases(self):
        """List all of the different accepted names for this kind."""
        return [name for name, member in self.__class__.__members__.items()
                if member is self]

    def __eq__(self, other):
        if self is other:
            return True

        try:
            if other.upper() in self.aliases():
                return True
        except AttributeError:
            pass

        return False

    __hash__ = Enum.__hash__

class Kind(TileKind):
    """Enumerate the two kinds of Robinson triangle."""
    LARGE = "large"
    L = "large"
    SMALL = "small"
    S = "small"

class RhombusKind(TileKind):
    """Enumerate the two kinds of Penrose rhombus."""
    FAT = "fat"
    THIN = "thin"


class Tile:
    """Model an abstract polygonal tile (possibly a composite array of
    tiles) with a fixed number of vertices.

    Subclasses set `num_vertices` and `kind_types`.

    """
    num_vertices = None
    kind_types = ()

    def __init__(self, vertices, kinds=None, links=None):
        """Parameters
        ----------
        vertices : ndarray or Tile or iterable of Tiles
            vertex coordinates, an array of shape
            `(..., num_vertices, 2)`. If `vertices` is a tile (or an
            iterable of tiles) then the new object is built out of
            their data, and `kinds` and `links` are ignored. The
            link data of the given tiles is kept if it is consistent
            (one set of coordinates per identifier), and recomputed
            from coordinates otherwise.

        kinds : Kind, str, iterable or ndarray of ints
            kind of each tile. A single kind is broadcast to every
            tile. An integer array is read as kind codes.

        links : ndarray of ints
            vertex identifiers, an array of shape
            `(..., num_vertices)`. If `None`, identifiers are computed
            from exact equality of vertex coordinates.

        """
        try:
            self._construct_from_object(vertices)
            return
        except TypeError:
            pass

        self.set(vertices, kinds, links)

    def _construct_from_object(self, tiles):
        try:
            self.set(tiles.vertex_data, tiles.kind_data, tiles.link_data)
            return
        except AttributeError:
            pass

        try:
            unrolled = list(tiles)

            if len(unrolled) == 0:
                raise IndexError

            vertex_data = np.array([tile.vertex_data for tile in unrolled])
            kind_data = np.array([tile.kind_data for tile in unrolled])

            self.set(vertex_data, kind_data,
                     np.array([tile.link_data for tile in unrolled]))
            if not self.links_consistent():
                self.set(vertex_data, kind_data)
            return

        except (TypeError, AttributeError, IndexError):
            pass

        raise TypeError

    def _assert_geometry_valid(self, vertex_data):
        if (vertex_data.ndim < 2 or
            vertex_data.shape[-2:] != (self.num_vertices, 2)):
            raise GeometryError(
                ("{} expects an array of shape (..., {}, 2), got array of shape {}"
                ).format(self.__class__.__name__, self.num_vertices,
                         vertex_data.shape)
            )

    def _kind_code(self, kind):
        for code, kind_type in enumerate(self.kind_types):
            if kind_type == kind:
                return code

        raise GeometryError(
            "Unknown kind for {}: {}".format(self.__class__.__name__, kind)
        )

    def _compute_kind_data(self, kinds, shape):
        if kinds is None:
            raise GeometryError(
                "{} requires kind data".format(self.__class__.__name__)
            )

        if (isinstance(kinds, (np.ndarray, np.integer)) and
            np.issubdtype(np.asarray(kinds).dtype, np.integer)):
            kind_data = np.asarray(kinds)
        else:
            kind_array = np.empty(np.shape(kinds) if not isinstance(kinds, str)
                                  else (), dtype=object)
            kind_array[...] = kinds
            kind_data = np.vectorize(self._kind_code, otypes=[np.int8])(
                kind_array
            )

        if np.any((kind_data < 0) | (kind_data >= len(self.kind_types))):
            raise GeometryError(
                "Invalid kind code for {}".format(self.__class__.__name__)
            )

        try:
            return np.broadcast_to(kind_data, shape).astype(np.int8)
        except ValueError:
            raise GeometryError(
                "Kind data of shape {} does not match {} tiles".format(
                    np.shape(kind_data), shape)
            )

    def _compute_link_data(self, vertex_data):
        identifiers = {}
        links = [identifiers.setdefault(tuple(coords), len(identifiers))
                 for coords in vertex_data.reshape(-1, 2).tolist()]

        return np.array(links, dtype=np.int64).reshape(vertex_data.shape[:-1])

    def set(self, vertex_data, kind_data=None, link_data=None):
        """Set the underlying data of this tile.

        Parameters
        ----------
        vertex_data : ndarray
            vertex coordinates of shape `(..., num_vertices, 2)`.

        kind_data : Kind, str, iterable or ndarray of ints
            kind(s) of the tile(s).

        link_data : ndarray
            vertex identifiers of shape `(..., num_vertices)`. If
            `None`, compute identifiers from vertex coordinates.

        """
        vertex_data = np.array(vertex_data, dtype=float)
        self._assert_geometry_valid(vertex_data)

        kind_data = self._compute_kind_data(kind_data, vertex_data.shape[:-2])

        if link_data is None:
            link_data = self._compute_link_data(vertex_data)
        link_data = np.array(link_data, dtype=np.int64)

        if np.any(link_data < 0):
            raise GeometryError("Vertex identifiers must be non-negative")

        if link_data.shape != vertex_data.shape[:-1]:
            raise GeometryError(
                "Link data of shape {} does not match vertex data of shape {}".format(
                    link_data.shape, vertex_data.shape)
            )

        for data in (vertex_data, kind_data, link_data):
            data.flags.writeable = False

        self.vertex_data = vertex_data
        self.kind_data = kind_data
        self.link_data = link_data

    def links_consistent(self):
        """Check that every vertex identifier names a single point.

        Identifiers are consistent when all of the vertices sharing
        an identifier have identical coordinates.

        """
        if self.link_data.size == 0:
            return True

        return np.array_equal(vertex_table(self)[self.link_data],
                              self.vertex_data)

    def obj_shape(self):
        """Get the shape of the array of single tiles this object
        represents.

        """
        return self.kind_data.shape

    def flatten_to_unit(self):
        """Get a flat collection of tiles.

        A tile object whose vertex data has shape `(4, 5, 3, 2)` is
        returned as a collection of shape `(20, 3, 2)`; a single tile
        becomes a collection of length 1.

        """
        return self.__class__(
            self.vertex_data.reshape((-1, self.num_vertices, 2)),
            self.kind_data.reshape(-1),
            self.link_data.reshape((-1, self.num_vertices))
        )

    def vertex(self, index):
        """Get one vertex of each tile, as a (composite) Point."""
        return Point(self.vertex_data[..., index, :])

    def get_vertices(self):
        """Get every vertex of every tile, as a composite Point."""
        return Point(self.vertex_data)

    @property
    def kind(self):
        if self.kind_data.ndim != 0:
            raise GeometryError(
                "A composite {} has no single kind; use kinds() instead".format(
                    self.__class__.__name__)
            )
        return self.kind_types[int(self.kind_data)]

    def kinds(self):
        """Get the kind of every tile, as a flat list."""
        return [self.kind_types[code] for code in self.kind_data.reshape(-1)]

    def count(self, kind):
        """Count the tiles of the given kind."""
        return int(np.count_nonzero(self.kind_data == self._kind_code(kind)))

    def center(self):
        """Get the centroid of the vertices of each tile."""
        return Point(np.mean(self.vertex_data, axis=-2))

    def area(self):
        """Get the (unsigned) area of each tile."""
        return np.abs(utils.signed_area(self.vertex_data))

    def angles(self):
        """Get the interior angle at each vertex of each tile, in radians."""
        return utils.vertex_angles(self.vertex_data)

    def __len__(self):
        if self.kind_data.ndim == 0:
            raise TypeError(
                "a single {} has no len()".format(self.__class__.__name__)
            )
        return len(self.kind_data)

    def __getitem__(self, item):
        return self.__class__(self.vertex_data[item],
                              self.kind_data[item],
                              self.link_data[item])

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __repr__(self):
        return "({}, {})".format(
            self.__class__,
            self.vertex_data.__repr__()
        )

    def __str__(self):
        return "{} with data:\n{}".format(
            self.__class__.__name__, self.vertex_data.__str__()
        )

class RobinsonTriangle(Tile):
    """A Robinson triangle (or a collection of them), with vertices
    (a, b, c).

    Vertex b is the apex, and the base a-c is the diagonal along which
    two triangles are fused into a rhombus. A SMALL triangle has a
    36 degree apex, a LARGE triangle a 108 degree apex.

    """
    num_vertices = 3
    kind_types = (Kind.SMALL, Kind.LARGE)

    @property
    def a(self):
        return self.vertex(0)

    @property
    def b(self):
        return self.vertex(1)

    @property
    def c(self):
        return self.vertex(2)

    def apex_angle(self):
        """Get the angle at vertex b of each triangle, in radians."""
        return self.angles()[..., 1]

class Rhombus(Tile):
    """A Penrose rhombus (or a collection of them), with vertices
    (a, b, c, d) in cyclic order.

    A rhombus is built from two Robinson triangles sharing their a-c
    diagonal: THIN rhombi come from SMALL triangles and FAT rhombi
    from LARGE ones.

    """
    num_vertices = 4
    kind_types = (RhombusKind.THIN, RhombusKind.FAT)

    @property
    def a(self):
        return self.vertex(0)

    @property
    def b(self):
        return self.vertex(1)

    @property
    def c(self):
        return self.vertex(2)

    @property
    def d(self):
        return self.vertex(3)

    def is_well_formed(self):
        """Check that each rhombus has four distinct vertices and is a
        simple convex quadrilateral.

        Returns
        -------
        ndarray of bools
            one entry per rhombus (a 0-dimensional array for a single
            rhombus).

        """
        flat = self.vertex_data.reshape((-1, 4, 2))
        result = np.array([
            len({tuple(vertex) for vertex in vertices.tolist()}) == 4 and
            is_convex_polygon(vertices)
            for vertices in flat
        ], dtype=bool)

        return result.reshape(self.obj_shape())

def concatenate(tiles):
    """Join several collections of tiles of the same class into one
    flat collection.

    Link data is concatenated as-is when the collections use a common
    set of vertex identifiers. If they don't, identifiers for the
    joined collection are recomputed from vertex coordinates.

    """
    flat = [tile.flatten_to_unit() for tile in tiles]
    tile_class = flat[0].__class__

    vertex_data = np.concatenate([tile.vertex_data for tile in flat])
    kind_data = np.concatenate([tile.kind_data for tile in flat])

    joined = tile_class(vertex_data, kind_data,
                        np.concatenate([tile.link_data for tile in flat]))
    if not joined.links_consistent():
        return tile_class(vertex_data, kind_data)

    return joined

def vertex_table(tiles):
    """Get an array of vertex coordinates indexed by vertex identifier.

    Identifiers which are not used by any tile get the coordinates
    (0, 0). If an identifier is used for several different points,
    the last one wins.

    """
    links = tiles.link_data.reshape(-1)
    table = np.zeros((links.max() + 1, 2))
    table[links] = tiles.vertex_data.reshape(-1, 2)

    return table
