from tilecrs.projection.projection import (
    Projection,
    ProjectionCapability,
    ProjectionCode,
    PyprojProjection,
    ReadyProjection,
)
from tilecrs.projection.registry import DEFAULT_REGISTRY, DefinitionRegistry

__all__ = [
    "DEFAULT_REGISTRY",
    "DefinitionRegistry",
    "Projection",
    "ProjectionCapability",
    "ProjectionCode",
    "PyprojProjection",
    "ReadyProjection",
]
