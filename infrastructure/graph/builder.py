"""Pure construction of the earthquake trends resource graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from infrastructure.config.environments.production import production_config
from infrastructure.config.types import EnvironmentConfig
from infrastructure.graph.model import (
    ApiFacadeSpec,
    ArtifactRef,
    ComputeResourceSpec,
    Edge,
    EdgeKind,
    ObservabilityLayerRef,
    ResourceGraph,
)

FUNCTION_CONSTRUCT_ID = "EarthquakeTrendsFunction"
API_CONSTRUCT_ID = "EarthquakeTrendsApi"

DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_ARCHITECTURE = "arm64"
DEFAULT_API_NAME = "Earthquake Trends API"


@dataclass(frozen=True)
class ObservabilitySettings:
    """Datadog wiring injected into the compute resource.

    ``ObservabilitySettings.default()`` returns the production profile; tests
    and other profiles pass their own instance instead of patching globals.
    """

    layer: ObservabilityLayerRef
    site: str
    env: str
    service: str
    exec_wrapper: str
    log_level: str
    app_environment: str

    @classmethod
    def from_config(cls, config: EnvironmentConfig) -> "ObservabilitySettings":
        defaults = production_config
        return cls(
            layer=ObservabilityLayerRef.from_arn(
                str(config.get("datadog_layer_arn", defaults["datadog_layer_arn"]))
            ),
            site=str(config.get("datadog_site", defaults["datadog_site"])),
            env=str(config.get("datadog_env", defaults["datadog_env"])),
            service=str(config.get("datadog_service", defaults["datadog_service"])),
            exec_wrapper=str(config.get("datadog_exec_wrapper", defaults["datadog_exec_wrapper"])),
            log_level=str(config.get("log_level", defaults["log_level"])),
            app_environment=str(config.get("app_environment", defaults["app_environment"])),
        )

    @classmethod
    def default(cls) -> "ObservabilitySettings":
        return cls.from_config(production_config)


def _function_environment(secret: str, settings: ObservabilitySettings) -> dict[str, str]:
    return {
        "LOG_LEVEL": settings.log_level,
        "APP_ENVIRONMENT": settings.app_environment,
        "DD_SITE": settings.site,
        "DD_API_KEY": secret,
        "DD_ENV": settings.env,
        "DD_SERVICE": settings.service,
        "AWS_LAMBDA_EXEC_WRAPPER": settings.exec_wrapper,
    }


def build_resource_graph(
    function_name: str,
    secret: str,
    artifact: ArtifactRef,
    *,
    settings: Optional[ObservabilitySettings] = None,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    architecture: str = DEFAULT_ARCHITECTURE,
    api_name: str = DEFAULT_API_NAME,
) -> ResourceGraph:
    """Describe the function, its Datadog layer and the proxying REST API.

    Inputs are not validated; empty names or secrets flow through unchanged.
    """
    settings = settings or ObservabilitySettings.default()

    compute = ComputeResourceSpec(
        construct_id=FUNCTION_CONSTRUCT_ID,
        function_name=function_name,
        artifact=artifact,
        architecture=architecture,
        timeout_seconds=timeout_seconds,
        variables=tuple(_function_environment(secret, settings).items()),
        layers=(settings.layer,),
    )
    api = ApiFacadeSpec(
        construct_id=API_CONSTRUCT_ID,
        rest_api_name=api_name,
        handler=compute.construct_id,
        proxy=True,
    )
    edges = (
        Edge(source=api.construct_id, target=compute.construct_id, kind=EdgeKind.INVOKES),
        Edge(source=compute.construct_id, target=settings.layer.arn, kind=EdgeKind.ATTACHES),
    )
    return ResourceGraph(compute=compute, api=api, edges=edges)
