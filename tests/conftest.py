import sys
from pathlib import Path
from typing import Any, Callable, Iterator
import pytest


# Ensure project root is on sys.path so `app` and `infrastructure` import without install
_repo_root = Path(__file__).resolve().parents[1]
_repo_root_str = str(_repo_root)
if _repo_root_str not in sys.path:
    sys.path.insert(0, _repo_root_str)


@pytest.fixture(autouse=True)
def deployment_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear deployment variables so ambient shell state never leaks into tests."""
    for name in ("BRANCH_NAME", "CDK_DEFAULT_ACCOUNT", "CDK_DEFAULT_REGION", "DATADOG_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def load_module() -> Callable[[str], dict[str, Any]]:
    import runpy

    def _apply(path: str) -> dict[str, Any]:
        return runpy.run_path(path)

    return _apply


@pytest.fixture
def fake_rust_function(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Any], list[dict[str, Any]]]:
    """Replace RustFunction so synth does not need cargo-lambda.

    Returns the list of kwargs each fake invocation received.
    """
    from aws_cdk import Duration

    def _apply(target_module: Any) -> list[dict[str, Any]]:
        from aws_cdk import aws_lambda as lambda_

        calls: list[dict[str, Any]] = []

        def _fake(scope, id, **kwargs):
            calls.append(kwargs)
            return lambda_.Function(
                scope,
                id,
                runtime=lambda_.Runtime.PYTHON_3_12,
                handler="index.handler",
                code=lambda_.Code.from_inline("def handler(event, context): return {}"),
                function_name=kwargs.get("function_name"),
                timeout=kwargs.get("timeout", Duration.seconds(10)),
                architecture=kwargs.get("architecture"),
                layers=kwargs.get("layers", []),
                environment=kwargs.get("environment", {}),
            )

        monkeypatch.setattr(target_module, "RustFunction", _fake, raising=False)
        return calls

    return _apply


@pytest.fixture
def datadog_env() -> dict[str, str]:
    return {
        "BRANCH_NAME": "main",
        "CDK_DEFAULT_ACCOUNT": "111122223333",
        "CDK_DEFAULT_REGION": "eu-west-1",
        "DATADOG_API_KEY": "abc123",
    }
