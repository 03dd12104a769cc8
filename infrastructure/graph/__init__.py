"""Value-type resource graph for the earthquake trends API."""

from .builder import ObservabilitySettings, build_resource_graph
from .model import (
    ApiFacadeSpec,
    ArtifactRef,
    ComputeResourceSpec,
    Edge,
    EdgeKind,
    ObservabilityLayerRef,
    ResourceGraph,
)

__all__ = [
    "ApiFacadeSpec",
    "ArtifactRef",
    "ComputeResourceSpec",
    "Edge",
    "EdgeKind",
    "ObservabilityLayerRef",
    "ObservabilitySettings",
    "ResourceGraph",
    "build_resource_graph",
]
