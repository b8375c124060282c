class GeometryError(Exception):
    """Thrown if there's an attempt to construct a tile or point with
    numerical data that doesn't make sense for that type of object.

    """
    pass
