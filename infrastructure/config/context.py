"""Process-level deployment context resolved once at the entry point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

BRANCH_NAME_VAR = "BRANCH_NAME"
ACCOUNT_VAR = "CDK_DEFAULT_ACCOUNT"
REGION_VAR = "CDK_DEFAULT_REGION"
DATADOG_API_KEY_VAR = "DATADOG_API_KEY"

DEFAULT_BRANCH_NAME = "main"
DEFAULT_ACCOUNT = "ACCOUNT_ID"
DEFAULT_REGION = "REGION"


class MissingConfigurationError(RuntimeError):
    """Raised when a required environment variable is absent."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"Missing required environment variable: {variable}")
        self.variable = variable


@dataclass(frozen=True)
class DeploymentContext:
    """Identity of one deployment instance plus the monitoring credential."""

    branch_name: str
    account: str
    region: str
    datadog_api_key: str = field(repr=False)


def _get_or_default(environ: Mapping[str, str], key: str, default: str) -> str:
    value = environ.get(key)
    return value if value else default


def resolve_deployment_context(environ: Mapping[str, str]) -> DeploymentContext:
    """Build a DeploymentContext from an environment mapping.

    Unset or empty optional variables fall back to their defaults. The Datadog
    API key has no default: an unset or empty value raises
    ``MissingConfigurationError`` before anything else is read.
    """
    datadog_api_key = environ.get(DATADOG_API_KEY_VAR)
    if not datadog_api_key:
        raise MissingConfigurationError(DATADOG_API_KEY_VAR)

    return DeploymentContext(
        branch_name=_get_or_default(environ, BRANCH_NAME_VAR, DEFAULT_BRANCH_NAME),
        account=_get_or_default(environ, ACCOUNT_VAR, DEFAULT_ACCOUNT),
        region=_get_or_default(environ, REGION_VAR, DEFAULT_REGION),
        datadog_api_key=datadog_api_key,
    )
