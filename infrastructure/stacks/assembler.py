"""Assemble a named, deployable stack definition from a branch name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from infrastructure.config.environments.production import production_config
from infrastructure.config.types import EnvironmentConfig
from infrastructure.core.logging_utils import get_logger
from infrastructure.graph import ArtifactRef, ObservabilitySettings, ResourceGraph, build_resource_graph

PROJECT_PREFIX = "earthquake-trends-"
FUNCTION_SUFFIX = "-lambda"


def project_name_for(branch_name: str) -> str:
    return f"{PROJECT_PREFIX}{branch_name}"


def function_name_for(project_name: str) -> str:
    return f"{project_name}{FUNCTION_SUFFIX}"


@dataclass(frozen=True)
class StackDefinition:
    """Everything needed to render one deployment into a CDK app."""

    stack_id: str
    project_name: str
    account: str
    region: str
    graph: ResourceGraph
    tags: Dict[str, str] = field(default_factory=dict)


def assemble_stack(
    branch_name: str,
    secret: str,
    account: str,
    region: str,
    *,
    config: Optional[EnvironmentConfig] = None,
) -> StackDefinition:
    """Derive resource names from ``branch_name`` and build the resource graph.

    ``account`` and ``region`` pass through unchanged. Nothing is validated
    here; provisioning-time naming rules are left to CloudFormation.
    """
    config = config if config is not None else production_config
    log = get_logger(__name__, deployment=branch_name)

    project_name = project_name_for(branch_name)
    function_name = function_name_for(project_name)
    log.info(f"Assembling stack {project_name} with function {function_name}")

    artifact = ArtifactRef(
        manifest_path=str(config.get("rust_manifest_path", production_config["rust_manifest_path"])),
        binary_name=str(config.get("rust_binary_name", production_config["rust_binary_name"])),
    )
    graph = build_resource_graph(
        function_name,
        secret,
        artifact,
        settings=ObservabilitySettings.from_config(config),
        timeout_seconds=int(config.get("lambda_timeout", production_config["lambda_timeout"])),
        architecture=str(config.get("lambda_architecture", production_config["lambda_architecture"])),
        api_name=str(config.get("api_name", production_config["api_name"])),
    )

    tags = dict(config.get("tags", {}) or {})
    tags["Branch"] = branch_name

    return StackDefinition(
        stack_id=project_name,
        project_name=project_name,
        account=account,
        region=region,
        graph=graph,
        tags=tags,
    )
