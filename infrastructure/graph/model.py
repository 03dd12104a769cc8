"""Immutable node and edge types describing the resources to provision.

Nothing here touches CDK. A renderer (see
``infrastructure.constructs.rust_api_function``) consumes these values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class ArtifactRef:
    """Location of a pre-built native binary and its build descriptor."""

    manifest_path: str
    binary_name: str = "bootstrap"


@dataclass(frozen=True)
class ObservabilityLayerRef:
    """Reference to an externally published Lambda layer version."""

    region: str
    account: str
    name: str
    version: int

    @property
    def arn(self) -> str:
        return f"arn:aws:lambda:{self.region}:{self.account}:layer:{self.name}:{self.version}"

    @classmethod
    def from_arn(cls, arn: str) -> "ObservabilityLayerRef":
        """Parse ``arn:aws:lambda:<region>:<account>:layer:<name>:<version>``."""
        parts = str(arn or "").strip().split(":")
        if len(parts) != 8 or parts[:3] != ["arn", "aws", "lambda"] or parts[5] != "layer":
            raise ValueError(f"Invalid layer version ARN: {arn!r}")
        region, account, name, version = parts[3], parts[4], parts[6], parts[7]
        if not (region and account and name) or not version.isdigit():
            raise ValueError(f"Invalid layer version ARN: {arn!r}")
        return cls(region=region, account=account, name=name, version=int(version))


@dataclass(frozen=True)
class ComputeResourceSpec:
    construct_id: str
    function_name: str
    artifact: ArtifactRef
    architecture: str
    timeout_seconds: int
    variables: Tuple[Tuple[str, str], ...] = ()
    layers: Tuple[ObservabilityLayerRef, ...] = ()

    @property
    def environment(self) -> Mapping[str, str]:
        """Read-only view of the function environment variables."""
        return MappingProxyType(dict(self.variables))


@dataclass(frozen=True)
class ApiFacadeSpec:
    """Public REST API proxying every request to one compute resource."""

    construct_id: str
    rest_api_name: str
    handler: str
    proxy: bool = True


class EdgeKind(str, Enum):
    # source is created after target and destroyed before it
    INVOKES = "invokes"
    ATTACHES = "attaches"


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    kind: EdgeKind


@dataclass(frozen=True)
class ResourceGraph:
    """Compute resource, API facade and the edges wiring them together."""

    compute: ComputeResourceSpec
    api: ApiFacadeSpec
    edges: Tuple[Edge, ...] = ()

    @property
    def nodes(self) -> Tuple[object, ...]:
        return (self.compute, self.api)

    def dependencies_of(self, construct_id: str) -> list[str]:
        """Return ids the given node must be created after, in edge order."""
        return [edge.target for edge in self.edges if edge.source == construct_id]

    def edges_of_kind(self, kind: EdgeKind) -> list[Edge]:
        return [edge for edge in self.edges if edge.kind == kind]
