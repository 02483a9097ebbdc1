from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional, Sequence, Union

from tilecrs.constructs.transformation import Transformation

# camelCase spellings used by map viewer configuration files
_OPTION_ALIASES = {
    "scaleDenominators": "scale_denominators",
}


class CRSOptions(NamedTuple):
    """
    Configuration for a ProjCRS.

    At most one of scales, scale_denominators and resolutions is used to build the scale
    table, in that order of priority. When none is given the table is synthesized from
    the bounds, if any.

    Attributes:
        origin: The projected point at pixel (0, 0), as a shapely Point or an (x, y) pair
        scales: Unitless map scales per zoom level, e.g. [1/4000, 1/2000]
        scale_denominators: Scale denominators per zoom level, e.g. [4000, 2000]
        resolutions: Map units per pixel per zoom level; empty or zero entries are skipped
        bounds: The planar bounds of the projection; without bounds the CRS is infinite
        transformation: The pixel transformation to use when no origin is given
    """

    origin: Optional[Any] = None
    scales: Optional[Sequence[float]] = None
    scale_denominators: Optional[Sequence[float]] = None
    resolutions: Optional[Sequence[Optional[float]]] = None
    bounds: Optional[Any] = None
    transformation: Transformation = Transformation()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> CRSOptions:
        """
        Build options from a dictionary.

        Keys may be written in snake_case or in the camelCase used by map viewer
        configurations (e.g. "scaleDenominators"). A transformation may be given as a
        sequence of its four coefficients.

        Raises:
            TypeError: If the dictionary has keys that are not options
        """
        kwargs = {_OPTION_ALIASES.get(k, k): v for k, v in d.items()}

        unknown = set(kwargs) - set(cls._fields)
        if unknown:
            raise TypeError(f"unknown crs options: {', '.join(sorted(unknown))}")

        transformation = kwargs.get("transformation")
        if transformation is None:
            kwargs.pop("transformation", None)
        elif not isinstance(transformation, Transformation):
            kwargs["transformation"] = Transformation(*transformation)

        return cls(**kwargs)

    @classmethod
    def from_json(cls, file: Union[Path, str]) -> CRSOptions:
        """
        Read options from a JSON file holding a single object.

        Raises:
            FileNotFoundError: If the file does not exist
            TypeError: If the file does not hold a JSON object or has unknown keys
        """
        filepath = Path(file)
        if not filepath.is_file():
            raise FileNotFoundError(file)

        with filepath.open() as f:
            d = json.load(f)

        if not isinstance(d, dict):
            raise TypeError(f"expected a json object in {file}")

        return cls.from_dict(d)
