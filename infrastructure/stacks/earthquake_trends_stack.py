"""Earthquake trends API stack."""

from aws_cdk import (
    Stack,
    CfnOutput,
    Environment,
    Tags,
)
from constructs import Construct

from infrastructure.constructs.rust_api_function import RustApiFunctionConstruct
from infrastructure.stacks.assembler import StackDefinition


class EarthquakeTrendsStack(Stack):
    """Rust Lambda behind API Gateway with the Datadog extension attached."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        definition: StackDefinition,
        **kwargs,
    ) -> None:
        kwargs.setdefault("env", Environment(account=definition.account, region=definition.region))
        super().__init__(scope, construct_id, **kwargs)

        self.definition = definition

        self.service = RustApiFunctionConstruct(self, "EarthquakeTrendsLambda", graph=definition.graph)

        for key, value in definition.tags.items():
            Tags.of(self).add(key, value)

        self._create_outputs()

    def _create_outputs(self) -> None:
        CfnOutput(
            self,
            "FunctionName",
            value=self.service.lambda_function.function_name,
            description="Name of the earthquake trends Lambda function",
        )
        CfnOutput(
            self,
            "RestApiId",
            value=self.service.api.rest_api_id,
            description="ID of the earthquake trends REST API",
        )
