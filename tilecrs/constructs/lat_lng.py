from __future__ import annotations

from typing import NamedTuple


class LatLng(NamedTuple):
    """
    A geodetic point in decimal degrees.

    Note the field order: latitude first, longitude second. Projections work in
    (longitude, latitude) order, so the adapter swaps the axes at the boundary.

    Attributes:
        lat: The latitude in decimal degrees
        lng: The longitude in decimal degrees
        unbounded: Whether the point may lie outside the usual lat/lon ranges; this is
            carried along for the renderer and never used in any calculation

    Examples:
        >>> p = LatLng(40.7128, -74.0060)
        >>> p.to_lon_lat()
        (-74.006, 40.7128)
    """

    lat: float
    lng: float
    unbounded: bool = False

    @classmethod
    def from_lon_lat(cls, lon: float, lat: float, unbounded: bool = False) -> LatLng:
        return cls(lat=lat, lng=lon, unbounded=unbounded)

    def to_lon_lat(self) -> tuple:
        return (self.lng, self.lat)
