import pytest
from aws_cdk import App
from aws_cdk.assertions import Match, Template

from infrastructure.constructs import rust_api_function
from infrastructure.stacks.assembler import assemble_stack
from infrastructure.stacks.earthquake_trends_stack import EarthquakeTrendsStack

DATADOG_ARN = "arn:aws:lambda:eu-west-1:464622532012:layer:Datadog-Extension-ARM:55"


def _synth(branch: str = "main", secret: str = "abc123") -> tuple[EarthquakeTrendsStack, Template]:
    definition = assemble_stack(branch, secret, "111122223333", "eu-west-1")
    stack = EarthquakeTrendsStack(App(), definition.stack_id, definition=definition)
    return stack, Template.from_stack(stack)


def test_function_properties(fake_rust_function) -> None:
    """
    Given: main 브랜치 스택
    When: 템플릿 합성
    Then: 함수 이름/타임아웃/아키텍처/레이어/환경 변수 일치
    """
    fake_rust_function(rust_api_function)
    _, template = _synth()

    template.resource_count_is("AWS::Lambda::Function", 1)
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "FunctionName": "earthquake-trends-main-lambda",
            "Timeout": 10,
            "Architectures": ["arm64"],
            "Layers": [DATADOG_ARN],
            "Environment": {
                "Variables": {
                    "LOG_LEVEL": "info",
                    "APP_ENVIRONMENT": "production",
                    "DD_SITE": "datadoghq.eu",
                    "DD_API_KEY": "abc123",
                    "DD_ENV": "production",
                    "DD_SERVICE": "earthquake-trends-api",
                    "AWS_LAMBDA_EXEC_WRAPPER": "/opt/datadog_wrapper",
                }
            },
        },
    )


def test_rust_function_receives_artifact_reference(fake_rust_function) -> None:
    calls = fake_rust_function(rust_api_function)
    _synth()

    assert len(calls) == 1
    assert calls[0]["manifest_path"] == "rust_lambda/Cargo.toml"
    assert calls[0]["binary_name"] == "bootstrap"


def test_rest_api_proxies_all_requests(fake_rust_function) -> None:
    fake_rust_function(rust_api_function)
    _, template = _synth()

    template.resource_count_is("AWS::ApiGateway::RestApi", 1)
    template.has_resource_properties("AWS::ApiGateway::RestApi", {"Name": "Earthquake Trends API"})
    template.has_resource_properties("AWS::ApiGateway::Resource", {"PathPart": "{proxy+}"})

    methods = template.find_resources("AWS::ApiGateway::Method")
    assert methods, "proxy methods must exist"
    for method in methods.values():
        props = method["Properties"]
        assert props["HttpMethod"] == "ANY"
        assert props["Integration"]["Type"] == "AWS_PROXY"


def test_stack_environment_tags_and_outputs(fake_rust_function) -> None:
    fake_rust_function(rust_api_function)
    stack, template = _synth("dev")

    assert stack.stack_name == "earthquake-trends-dev"
    assert stack.account == "111122223333"
    assert stack.region == "eu-west-1"

    template.has_resource_properties(
        "AWS::Lambda::Function",
        {"Tags": Match.array_with([{"Key": "Branch", "Value": "dev"}])},
    )
    template.has_output("FunctionName", {})
    template.has_output("RestApiId", {})


def test_unknown_architecture_is_rejected(fake_rust_function) -> None:
    fake_rust_function(rust_api_function)
    definition = assemble_stack("main", "k", "111122223333", "eu-west-1", config={"lambda_architecture": "sparc"})

    with pytest.raises(ValueError, match="Unsupported architecture: sparc"):
        EarthquakeTrendsStack(App(), definition.stack_id, definition=definition)
