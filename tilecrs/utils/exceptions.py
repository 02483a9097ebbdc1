class TileCRSException(Exception):
    """
    Base class for all errors raised by tilecrs.
    """


class ProjectionNotFoundError(TileCRSException):
    """
    Raised when a projection code has no known definition.

    The lookup has already tried the shortened form of URN style codes
    (e.g. ``urn:ogc:def:crs:EPSG::3857`` -> ``EPSG:3857``) before this is raised.

    Attributes:
        code: The code exactly as the caller supplied it
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No projection definition for code {code}")


class ProjectionDefinitionError(TileCRSException):
    """
    Raised when a projection definition string cannot be parsed into a CRS.
    """
