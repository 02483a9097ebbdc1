"""
# Scale Table Example

An example of building a ProjCRS for a tiled map served in a custom projection
"""


def main():
    from tilecrs import ProjCRS

    """
    First, we build a CRS from a projection code and a list of scale denominators.
    Tile services usually publish their zoom levels this way: zoom 0 is drawn at 1:2000, zoom 1 at 1:1000 and so on.
    
    The origin is the projected coordinate of the top left corner of the tile grid.
    For a lat/lon map covering the whole world that's longitude -180, latitude 90:
    """

    crs = ProjCRS.from_code(
        "EPSG:4326",
        origin=[-180, 90],
        scale_denominators=[2000, 1000, 500, 200, 100, 50, 20, 10],
    )

    """
    Each denominator is turned into a map scale in pixels per map unit, assuming a 96 dpi screen.
    Fractional zoom levels are interpolated between the neighboring levels, which is what a renderer asks for while zooming smoothly:
    """

    for zoom in (0, 1, 1.5, 2):
        print(f"zoom {zoom}: scale {crs.scale(zoom):.2f}")

    """
    The inverse lookup finds the zoom level for a scale.
    A scale finer than the last level has no zoom level and comes back as infinity:
    """

    print(crs.zoom(crs.scale(1.5)))
    print(crs.zoom(1e9))

    """
    Now, let's place a point on the screen.
    `lat_lng_to_point` projects the point and applies the origin transformation at the scale of the zoom level:
    """

    from tilecrs import LatLng

    zurich = LatLng(47.3769, 8.5417)
    pixel = crs.lat_lng_to_point(zurich, 3)
    print(pixel)
    print(crs.point_to_lat_lng(pixel, 3))

    """
    Projections that pyproj does not know about can be registered with their proj string.
    Here we also pass bounds instead of scales, in which case 23 zoom levels are synthesized so that the bounds fill one 256 pixel tile at zoom 0:
    """

    merc = ProjCRS.from_code(
        "SM:900913",
        "+proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 +lon_0=0.0 +x_0=0.0 +y_0=0 +k=1.0 +units=m +nadgrids=@null +no_defs",
        origin=[-20037508.34, 20037508.34],
        bounds=[-20037508.34, -20037508.34, 20037508.34, 20037508.34],
    )

    print(merc.projected_bounds(0))
    print(f"{merc.distance(zurich, LatLng(48.1372, 11.5756)) / 1000:.1f} km")


if __name__ == "__main__":
    main()
