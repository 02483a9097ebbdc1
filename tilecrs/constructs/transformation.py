from __future__ import annotations

from typing import NamedTuple, Sequence, Union

from shapely.geometry import Point


class Transformation(NamedTuple):
    """
    An affine transform between projected coordinates and pixel coordinates.

    A projected point (x, y) at a given map scale maps to the pixel point::

        (scale * (a * x + b), scale * (c * y + d))

    The default transformation (1, 0, -1, 0) keeps x and flips y, since pixel rows grow
    downwards while northings grow upwards.

    Attributes:
        a: The x multiplier
        b: The x offset
        c: The y multiplier
        d: The y offset
    """

    a: float = 1
    b: float = 0
    c: float = -1
    d: float = 0

    @classmethod
    def from_origin(cls, origin: Union[Point, Sequence[float]]) -> Transformation:
        """
        Build the transformation that puts pixel (0, 0) on a projected origin.

        Args:
            origin: The projected top-left corner of the tile grid, as a shapely Point or an (x, y) pair

        Returns:
            The transformation (1, -origin_x, -1, origin_y)
        """
        x, y = normalize_origin(origin)
        return cls(1, -x, -1, y)

    def transform(self, point: Point, scale: float = 1) -> Point:
        return Point(
            scale * (self.a * point.x + self.b),
            scale * (self.c * point.y + self.d),
        )

    def untransform(self, point: Point, scale: float = 1) -> Point:
        return Point(
            (point.x / scale - self.b) / self.a,
            (point.y / scale - self.d) / self.c,
        )


def normalize_origin(origin: Union[Point, Sequence[float]]) -> tuple:
    """
    Convert an origin given as a shapely Point or a sequence into an (x, y) tuple.

    Raises:
        ValueError: If the origin does not have exactly two coordinates
    """
    if isinstance(origin, Point):
        return (origin.x, origin.y)

    values = tuple(origin)
    if len(values) != 2:
        raise ValueError(f"origin must have exactly two coordinates, got {origin!r}")

    return (float(values[0]), float(values[1]))
