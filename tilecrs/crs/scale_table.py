from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from tilecrs.constructs.bounds import Bounds
from tilecrs.utils.constants import (
    DEFAULT_ZOOM_LEVELS,
    DEVICE_SCALE_FACTOR,
    TILE_SIZE,
)

log = logging.getLogger(__name__)


def to_device_scale(scale: float) -> float:
    """
    Convert a unitless map scale (e.g. 1/500) into pixels per meter on a 96 dpi screen.
    """
    return DEVICE_SCALE_FACTOR * scale


class ScaleTable:
    """
    Map scale for each integer zoom level.

    Index i holds the scale at zoom level i. Slots may be empty (None), meaning that no
    scale is defined at that level. Values are not required to be sorted, though real
    configurations grow with zoom.

    Lookups never raise for levels or scales outside the table. A missing value behaves
    like NaN and spreads through the arithmetic, and a scale beyond the last level maps to
    an infinite zoom. Renderers rely on these sentinels.

    Use one of the from_* constructors rather than building the table directly.

    Args:
        values: The scale per zoom level; None marks an empty slot

    Examples:
        >>> table = ScaleTable.from_scales([1, 2, 4])
        >>> round(table.scale(0.5), 1)
        5669.3
        >>> table.zoom(table.scale(1))
        1
    """

    def __init__(self, values: Iterable[Optional[float]] = ()):
        slots = list(values)
        # the table ends at the last defined level
        while slots and slots[-1] is None:
            slots.pop()
        self._values: Tuple[Optional[float], ...] = tuple(slots)

    def __repr__(self):
        return f"ScaleTable({list(self._values)})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if not isinstance(other, ScaleTable):
            return NotImplemented
        return self._values == other._values

    def __hash__(self):
        return hash(self._values)

    @property
    def values(self) -> Tuple[Optional[float], ...]:
        return self._values

    @classmethod
    def from_scales(cls, scales: Sequence[float]) -> ScaleTable:
        """
        Build a table from unitless map scales, e.g. [1/4000, 1/2000, 1/1000].

        Each scale is converted to pixels per meter at 96 dpi.
        """
        table = cls(to_device_scale(s) for s in scales)
        log.debug(f"built scale table with {len(table)} levels from scales")
        return table

    @classmethod
    def from_scale_denominators(cls, denominators: Sequence[float]) -> ScaleTable:
        """
        Build a table from scale denominators, e.g. [4000, 2000, 1000].

        A denominator D is the same as the scale 1/D.
        """
        table = cls(to_device_scale(1 / d) for d in denominators)
        log.debug(f"built scale table with {len(table)} levels from scale denominators")
        return table

    @classmethod
    def from_resolutions(cls, resolutions: Sequence[Optional[float]]) -> ScaleTable:
        """
        Build a table from ground resolutions (map units per pixel).

        The scale is the plain inverse of the resolution with no dpi conversion.
        Empty, zero or NaN resolutions leave their level undefined.
        """
        slots: List[Optional[float]] = [None] * len(resolutions)
        for i in range(len(resolutions) - 1, -1, -1):
            resolution = resolutions[i]
            if resolution and not math.isnan(resolution):
                slots[i] = 1 / resolution

        table = cls(slots)
        log.debug(f"built scale table with {len(table)} levels from resolutions")
        return table

    @classmethod
    def from_bounds(
        cls, bounds: Bounds, levels: int = DEFAULT_ZOOM_LEVELS
    ) -> ScaleTable:
        """
        Synthesize a table in which the bounds fit one tile at zoom 0 and each level doubles the scale.

        Args:
            bounds: The planar bounds of the map
            levels: The number of zoom levels to build

        Returns:
            A table where level i holds 2**i / (extent / TILE_SIZE)
        """
        resolution = bounds.extent / TILE_SIZE
        table = cls(math.pow(2, i) / resolution for i in range(levels))
        log.debug(f"built scale table with {len(table)} levels from bounds {bounds}")
        return table

    def scale_at(self, level: int) -> float:
        """
        Get the scale stored for an integer level, or NaN if the level is empty or outside the table.
        """
        if 0 <= level < len(self._values):
            value = self._values[level]
            if value is not None:
                return value
        return math.nan

    def is_defined(self, level: int) -> bool:
        return not math.isnan(self.scale_at(level))

    def scale(self, zoom: float) -> float:
        """
        Get the scale for a zoom level, interpolating linearly between integer levels.

        Args:
            zoom: The zoom level; may be fractional

        Returns:
            The scale at the zoom level. NaN if either neighboring level is undefined or if
            the zoom is not finite. There is no extrapolation past the last level.
        """
        if not math.isfinite(zoom):
            return math.nan

        i_zoom = math.floor(zoom)
        if zoom == i_zoom:
            return self.scale_at(i_zoom)

        base_scale = self.scale_at(i_zoom)
        next_scale = self.scale_at(i_zoom + 1)
        return base_scale + (next_scale - base_scale) * (zoom - i_zoom)

    def closest_below(self, scale: float) -> Optional[float]:
        """
        Find the largest value in the table that is not greater than the given scale.

        The table is walked once from the last level to the first. Empty slots are skipped.

        Returns:
            The value, or None when every value is greater than the scale
        """
        low = None
        for i in range(len(self._values) - 1, -1, -1):
            value = self._values[i]
            if value is None:
                continue
            if value <= scale and (low is None or low < value):
                low = value
        return low

    def zoom(self, scale: float) -> float:
        """
        Get the (fractional) zoom level for a scale; the inverse of `scale`.

        The nearest level at or below the scale is located and the result is interpolated
        towards the following level.

        Args:
            scale: The map scale

        Returns:
            The zoom level. An exact match returns the integer level. inf if the scale is
            beyond the last defined level. NaN if the scale is below every level.
        """
        down_scale = self.closest_below(scale)
        if down_scale is None:
            down_zoom = -1
            down_scale = math.nan
        else:
            down_zoom = self._values.index(down_scale)
            if scale == down_scale:
                return down_zoom

        next_zoom = down_zoom + 1
        if not self.is_defined(next_zoom):
            return math.inf

        next_scale = self.scale_at(next_zoom)
        return (scale - down_scale) / (next_scale - down_scale) + down_zoom
