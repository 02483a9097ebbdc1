from pyproj import Geod

from tilecrs.constructs.lat_lng import LatLng
from tilecrs.utils.constants import EARTH_RADIUS

# a sphere; flattening of zero
SPHERE = Geod(a=EARTH_RADIUS, f=0)


def distance(a: LatLng, b: LatLng) -> float:
    """
    Calculate the great-circle distance between two geodetic points.

    The earth is modeled as a sphere with a radius of EARTH_RADIUS meters, which is
    the model map viewers use for measuring tools and scale bars.

    Args:
        a: The first point
        b: The second point

    Returns:
        The distance in meters

    Examples:
        >>> from tilecrs.constructs.lat_lng import LatLng
        >>> d = distance(LatLng(0, 0), LatLng(0, 1))
        >>> print(f"{d:.0f} m")
        111195 m
    """
    _, _, dist = SPHERE.inv(a.lng, a.lat, b.lng, b.lat)

    return dist
