from __future__ import annotations

from typing import Any, NamedTuple, Sequence, Union

from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry


class Bounds(NamedTuple):
    """
    An axis-aligned rectangle in planar (projected) units.

    Attributes:
        min_x: The western edge
        min_y: The southern edge
        max_x: The eastern edge
        max_y: The northern edge

    Examples:
        >>> b = Bounds.from_input([[-180, -90], [180, 90]])
        >>> b.width, b.height
        (360.0, 180.0)
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, a: Sequence[float], b: Sequence[float]) -> Bounds:
        """
        Build the smallest bounds containing two corner points, in any order.
        """
        return cls(
            min_x=min(a[0], b[0]),
            min_y=min(a[1], b[1]),
            max_x=max(a[0], b[0]),
            max_y=max(a[1], b[1]),
        )

    @classmethod
    def from_input(cls, bounds: Any) -> Bounds:
        """
        Normalize the accepted bounds representations into a Bounds.

        Args:
            bounds: One of
                - a Bounds
                - a shapely geometry (its envelope is used)
                - a flat sequence (min_x, min_y, max_x, max_y)
                - a pair of corner points [[x1, y1], [x2, y2]]

        Returns:
            A new Bounds instance

        Raises:
            ValueError: If the input is none of the supported shapes
        """
        if isinstance(bounds, Bounds):
            return bounds
        if isinstance(bounds, BaseGeometry):
            return cls(*bounds.bounds)

        try:
            items = list(bounds)
        except TypeError as e:
            raise ValueError(f"Could not interpret bounds: {bounds!r}") from e

        if len(items) == 4:
            return cls(*(float(v) for v in items))
        if len(items) == 2:
            a, b = (_as_xy(p) for p in items)
            return cls.from_points(a, b)

        raise ValueError(f"Could not interpret bounds: {bounds!r}")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def extent(self) -> float:
        """The longest side of the rectangle."""
        return max(self.width, self.height)


def _as_xy(p: Union[Point, Sequence[float]]) -> tuple:
    if isinstance(p, Point):
        return (p.x, p.y)
    try:
        x, y = p
    except (TypeError, ValueError) as e:
        raise ValueError(f"Expected an (x, y) pair but got {p!r}") from e
    return (float(x), float(y))
