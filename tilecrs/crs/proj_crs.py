from __future__ import annotations

import logging
from typing import Any, Optional

from shapely.geometry import Point

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.lat_lng import LatLng
from tilecrs.constructs.transformation import Transformation
from tilecrs.crs.options import CRSOptions
from tilecrs.crs.scale_table import ScaleTable
from tilecrs.projection.projection import (
    Projection,
    ProjectionCode,
    ProjectionSource,
    ReadyProjection,
)
from tilecrs.projection.registry import DefinitionRegistry
from tilecrs.utils import earth
from tilecrs.utils.constants import EARTH_RADIUS

log = logging.getLogger(__name__)


def build_scale_table(options: CRSOptions, bounds: Optional[Bounds]) -> ScaleTable:
    """
    Pick the scale table source from the options.

    Explicit scales win over scale denominators, which win over resolutions. Bounds are
    only used when none of those are given, and without bounds the table is empty.
    """
    if options.scales is not None:
        return ScaleTable.from_scales(options.scales)
    elif options.scale_denominators is not None:
        return ScaleTable.from_scale_denominators(options.scale_denominators)
    elif options.resolutions is not None:
        return ScaleTable.from_resolutions(options.resolutions)
    elif bounds is not None:
        return ScaleTable.from_bounds(bounds)

    log.debug("no scales, resolutions or bounds given; the scale table is empty")
    return ScaleTable()


class ProjCRS:
    """
    A coordinate reference system for a tiled map built on an arbitrary projection.

    ProjCRS pairs a projection with a table of map scales per zoom level and the affine
    transformation from projected to pixel coordinates. It answers the questions a map
    renderer asks: where a lat/lon ends up in pixels at a zoom level, which scale a
    (fractional) zoom level has and which zoom level a scale corresponds to.

    Everything is computed at construction time; the object is never modified afterwards.

    Args:
        source: A ProjectionCode or a ReadyProjection
        options: The CRS configuration; defaults to CRSOptions()
        registry: The projection definition registry; defaults to the shared registry

    Attributes:
        code: The projection code, if known
        projection: The projection adapter
        transformation: The projected -> pixel transformation
        scales: The scale table
        infinite: True when no bounds were given, whatever the scale source
        R: The earth radius used by `distance`

    Raises:
        ProjectionNotFoundError: If the projection code cannot be resolved

    Examples:
        >>> crs = ProjCRS.from_code(
        ...     "EPSG:4326",
        ...     origin=[-180, 90],
        ...     scale_denominators=[2000, 1000, 500, 200, 100, 50, 20, 10],
        ... )
        >>> crs.zoom(crs.scale(3))
        3
    """

    R = EARTH_RADIUS

    def __init__(
        self,
        source: ProjectionSource,
        options: Optional[CRSOptions] = None,
        registry: Optional[DefinitionRegistry] = None,
    ):
        if options is None:
            options = CRSOptions()

        self.options = options
        self.projection = Projection.create(source, options.bounds, registry=registry)
        self.code = self.projection.code

        if options.origin is not None:
            self.transformation = Transformation.from_origin(options.origin)
        else:
            self.transformation = options.transformation

        self.scales = build_scale_table(options, self.projection.bounds)

        self.infinite = options.bounds is None

    def __repr__(self):
        return f"ProjCRS(code={self.code}, levels={len(self.scales)}, infinite={self.infinite})"

    @classmethod
    def from_code(
        cls,
        code: str,
        definition: str = "",
        registry: Optional[DefinitionRegistry] = None,
        **options: Any,
    ) -> ProjCRS:
        """
        Create a CRS from a projection code and an optional definition.

        Args:
            code: The projection code, e.g. "EPSG:3857"
            definition: A proj string or WKT to register for the code
            registry: The projection definition registry
            **options: Any CRSOptions field

        Returns:
            A new ProjCRS
        """
        return cls(ProjectionCode(code, definition), CRSOptions(**options), registry)

    @classmethod
    def from_projection(
        cls, projection: Any, code: Optional[str] = None, **options: Any
    ) -> ProjCRS:
        """
        Create a CRS around an existing projection object with `forward` and `inverse` methods.
        """
        return cls(ReadyProjection(projection, code), CRSOptions(**options))

    @property
    def bounds(self) -> Optional[Bounds]:
        return self.projection.bounds

    def project(self, lat_lng: LatLng) -> Point:
        return self.projection.project(lat_lng)

    def unproject(self, point: Point, unbounded: bool = False) -> LatLng:
        return self.projection.unproject(point, unbounded)

    def scale(self, zoom: float) -> float:
        """
        Get the map scale at a zoom level; see ScaleTable.scale.
        """
        return self.scales.scale(zoom)

    def zoom(self, scale: float) -> float:
        """
        Get the zoom level for a map scale; see ScaleTable.zoom.
        """
        return self.scales.zoom(scale)

    def distance(self, a: LatLng, b: LatLng) -> float:
        """
        Great-circle distance in meters between two points on a spherical earth.
        """
        return earth.distance(a, b)

    def lat_lng_to_point(self, lat_lng: LatLng, zoom: float) -> Point:
        """
        Convert a geodetic point to pixel coordinates at a zoom level.
        """
        projected = self.project(lat_lng)
        return self.transformation.transform(projected, self.scale(zoom))

    def point_to_lat_lng(self, point: Point, zoom: float) -> LatLng:
        """
        Convert pixel coordinates at a zoom level back to a geodetic point.
        """
        projected = self.transformation.untransform(point, self.scale(zoom))
        return self.unproject(projected)

    def projected_bounds(self, zoom: float) -> Optional[Bounds]:
        """
        Get the projection bounds in pixel coordinates at a zoom level.

        Returns:
            The pixel bounds, or None if the CRS is infinite
        """
        if self.infinite:
            return None

        b = self.bounds
        s = self.scale(zoom)
        min_point = self.transformation.transform(Point(b.min_x, b.min_y), s)
        max_point = self.transformation.transform(Point(b.max_x, b.max_y), s)

        return Bounds.from_points(
            (min_point.x, min_point.y), (max_point.x, max_point.y)
        )
