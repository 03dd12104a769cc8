"""Render a ResourceGraph into a Rust Lambda function behind a REST API."""

from typing import Dict

from aws_cdk import (
    aws_apigateway as apigateway,
    aws_lambda as lambda_,
    Duration,
)
from cargo_lambda_cdk import RustFunction
from constructs import Construct

from infrastructure.graph.model import EdgeKind, ResourceGraph

_ARCHITECTURES = {
    "arm64": lambda_.Architecture.ARM_64,
    "x86_64": lambda_.Architecture.X86_64,
}


class RustApiFunctionConstruct(Construct):
    """Datadog-instrumented Rust function exposed through a proxying REST API."""

    def __init__(self, scope: Construct, construct_id: str, *, graph: ResourceGraph) -> None:
        super().__init__(scope, construct_id)

        self.graph = graph
        self._rendered: Dict[str, object] = {}

        self.layers = self._create_layers()
        self.lambda_function = self._create_function()
        self.api = self._create_api()

    def _create_layers(self) -> list[lambda_.ILayerVersion]:
        """Import the externally published observability layers."""
        layers: list[lambda_.ILayerVersion] = []
        for index, ref in enumerate(self.graph.compute.layers):
            layer_id = "DatadogLayer" if index == 0 else f"DatadogLayer{index}"
            layer = lambda_.LayerVersion.from_layer_version_arn(self, layer_id, ref.arn)
            self._rendered[ref.arn] = layer
            layers.append(layer)
        return layers

    def _create_function(self) -> lambda_.IFunction:
        spec = self.graph.compute
        architecture = _ARCHITECTURES.get(spec.architecture)
        if architecture is None:
            raise ValueError(f"Unsupported architecture: {spec.architecture}")

        attached = [
            self._rendered[target] for target in self.graph.dependencies_of(spec.construct_id) if target in self._rendered
        ]

        function = RustFunction(
            self,
            spec.construct_id,
            manifest_path=spec.artifact.manifest_path,
            binary_name=spec.artifact.binary_name,
            function_name=spec.function_name,
            timeout=Duration.seconds(spec.timeout_seconds),
            architecture=architecture,
            environment=dict(spec.environment),
            layers=attached,
        )
        self._rendered[spec.construct_id] = function
        return function

    def _create_api(self) -> apigateway.LambdaRestApi:
        spec = self.graph.api
        # The handler reference orders creation after the function
        invokes = [edge for edge in self.graph.edges_of_kind(EdgeKind.INVOKES) if edge.source == spec.construct_id]
        if len(invokes) != 1:
            raise ValueError(f"API {spec.construct_id} must invoke exactly one function, found {len(invokes)}")

        api = apigateway.LambdaRestApi(
            self,
            spec.construct_id,
            handler=self._rendered[invokes[0].target],
            rest_api_name=spec.rest_api_name,
            proxy=spec.proxy,
        )
        self._rendered[spec.construct_id] = api
        return api
