from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.lat_lng import LatLng
from tilecrs.constructs.transformation import Transformation
from tilecrs.crs import CRSOptions, ProjCRS, ScaleTable
from tilecrs.projection import (
    DEFAULT_REGISTRY,
    DefinitionRegistry,
    ProjectionCode,
    ReadyProjection,
)
from tilecrs.utils.exceptions import (
    ProjectionDefinitionError,
    ProjectionNotFoundError,
    TileCRSException,
)

__all__ = [
    "Bounds",
    "CRSOptions",
    "DEFAULT_REGISTRY",
    "DefinitionRegistry",
    "LatLng",
    "ProjCRS",
    "ProjectionCode",
    "ProjectionDefinitionError",
    "ProjectionNotFoundError",
    "ReadyProjection",
    "ScaleTable",
    "TileCRSException",
    "Transformation",
]
