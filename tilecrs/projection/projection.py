from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from typing import Any, NamedTuple, Optional, Sequence, Tuple, Union

from pyproj import CRS, Transformer
from shapely.geometry import Point

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.lat_lng import LatLng
from tilecrs.projection.registry import DEFAULT_REGISTRY, DefinitionRegistry

log = logging.getLogger(__name__)


class ProjectionCapability(metaclass=ABCMeta):
    """
    Abstract base class for a forward/inverse map projection.

    Any object with matching `forward` and `inverse` methods can be handed to the CRS
    through a ReadyProjection; subclassing this is not required.
    """

    @abstractmethod
    def forward(self, lon_lat: Sequence[float]) -> Tuple[float, float]:
        """
        Project a (longitude, latitude) pair into planar (x, y).
        """

    @abstractmethod
    def inverse(self, xy: Sequence[float]) -> Tuple[float, float]:
        """
        Unproject a planar (x, y) pair into (longitude, latitude).
        """


class PyprojProjection(ProjectionCapability):
    """
    A projection backed by a pyproj CRS.

    Geodetic coordinates are taken in the datum of the CRS itself (its geodetic_crs),
    so a projection built from a plain geographic CRS such as EPSG:4326 is the identity.

    Args:
        crs: The projected (or geographic) CRS

    Raises:
        ValueError: If the CRS has no geodetic datum to project from

    Examples:
        >>> from pyproj import CRS
        >>> mercator = PyprojProjection(CRS("EPSG:3857"))
        >>> x, y = mercator.forward((180, 0))
        >>> print(f"{x:.2f}")
        20037508.34
    """

    def __init__(self, crs: CRS):
        geodetic = crs.geodetic_crs
        if geodetic is None:
            raise ValueError(f"{crs.name} has no geodetic crs to project from")

        self.crs = crs
        self._forward = Transformer.from_crs(geodetic, crs, always_xy=True)
        self._inverse = Transformer.from_crs(crs, geodetic, always_xy=True)

    def __repr__(self):
        return f"PyprojProjection({self.crs.to_string()})"

    def forward(self, lon_lat: Sequence[float]) -> Tuple[float, float]:
        x, y = self._forward.transform(lon_lat[0], lon_lat[1])
        return x, y

    def inverse(self, xy: Sequence[float]) -> Tuple[float, float]:
        lon, lat = self._inverse.transform(xy[0], xy[1])
        return lon, lat


class ProjectionCode(NamedTuple):
    """
    A projection identified by its code, optionally with the definition to register for it.

    Attributes:
        code: The projection code, e.g. "EPSG:3857" or "urn:ogc:def:crs:EPSG::3857"
        definition: A proj string or WKT; empty means the code must already be known
    """

    code: str
    definition: str = ""


class ReadyProjection(NamedTuple):
    """
    An already constructed projection object.

    Attributes:
        projection: Any object with `forward(lon_lat)` and `inverse(xy)` methods
        code: An optional code to report for the projection
    """

    projection: Any
    code: Optional[str] = None


ProjectionSource = Union[ProjectionCode, ReadyProjection]


class Projection:
    """
    Adapts a forward/inverse projection to the point types used by the CRS.

    Use `Projection.create` to build one from either a ProjectionCode or a
    ReadyProjection.

    Attributes:
        code: The projection code, if known
        definition: The definition string the projection was built from, if any
        bounds: The planar bounds of the projection or None if unbounded
    """

    def __init__(
        self,
        capability: Any,
        code: Optional[str] = None,
        definition: str = "",
        bounds: Optional[Bounds] = None,
    ):
        self._proj = capability
        self.code = code
        self.definition = definition
        self.bounds = bounds

    def __repr__(self):
        return f"Projection(code={self.code}, bounds={self.bounds})"

    @property
    def capability(self) -> Any:
        return self._proj

    @classmethod
    def create(
        cls,
        source: ProjectionSource,
        bounds: Any = None,
        registry: Optional[DefinitionRegistry] = None,
    ) -> Projection:
        """
        Build a projection from a code or wrap a ready projection object.

        A ProjectionCode with a definition registers the definition under the code first.
        A ProjectionCode without one must resolve through the registry; URN style codes
        are retried once in their short AUTHORITY:CODE form.

        Args:
            source: A ProjectionCode or a ReadyProjection
            bounds: Optional planar bounds, in any form Bounds.from_input accepts
            registry: The definition registry to use; defaults to DEFAULT_REGISTRY

        Returns:
            A new Projection

        Raises:
            ProjectionNotFoundError: If the code cannot be resolved
            ProjectionDefinitionError: If the definition cannot be parsed
            TypeError: If the source is neither a ProjectionCode nor a ReadyProjection

        Examples:
            >>> merc = Projection.create(ProjectionCode("EPSG:3857"))
            >>> merc.project(LatLng(0, 0))
            <POINT (0 0)>
        """
        if bounds is not None:
            bounds = Bounds.from_input(bounds)

        if isinstance(source, ReadyProjection):
            return cls(source.projection, code=source.code, bounds=bounds)

        if not isinstance(source, ProjectionCode):
            raise TypeError(
                f"projection source must be a ProjectionCode or ReadyProjection, got {type(source).__name__}"
            )

        if registry is None:
            registry = DEFAULT_REGISTRY

        if source.definition:
            registry.define(source.code, source.definition)

        crs = registry.resolve(source.code)

        return cls(
            PyprojProjection(crs),
            code=source.code,
            definition=source.definition,
            bounds=bounds,
        )

    def project(self, lat_lng: LatLng) -> Point:
        """
        Project a geodetic point into planar coordinates.

        No range checks are done; whatever the projection returns for out of domain
        input (including inf or nan) is passed through.
        """
        x, y = self._proj.forward([lat_lng.lng, lat_lng.lat])
        return Point(x, y)

    def unproject(self, point: Point, unbounded: bool = False) -> LatLng:
        lon, lat = self._proj.inverse([point.x, point.y])
        return LatLng(lat, lon, unbounded)
