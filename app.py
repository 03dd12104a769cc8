#!/usr/bin/env python3
"""
Earthquake Trends CDK App
Rust Lambda exposed through API Gateway, instrumented with the Datadog extension.
"""

import os
import sys
from typing import Mapping, Optional

import aws_cdk as cdk

from infrastructure.config.context import MissingConfigurationError, resolve_deployment_context
from infrastructure.config.environments import get_environment_config
from infrastructure.core.logging_utils import get_logger
from infrastructure.stacks.assembler import assemble_stack
from infrastructure.stacks.earthquake_trends_stack import EarthquakeTrendsStack

logger = get_logger(__name__)


def main(environ: Optional[Mapping[str, str]] = None, app: Optional[cdk.App] = None) -> cdk.App:
    """Resolve configuration, build exactly one stack and synthesize it."""
    # Fails before any construct exists when the Datadog key is missing
    context = resolve_deployment_context(os.environ if environ is None else environ)

    app = app or cdk.App()
    environment = app.node.try_get_context("environment") or "production"
    config = get_environment_config(environment)

    log = get_logger(__name__, deployment=context.branch_name)
    log.info(f"Synthesizing {environment} deployment for account={context.account} region={context.region}")

    definition = assemble_stack(
        context.branch_name,
        context.datadog_api_key,
        context.account,
        context.region,
        config=config,
    )
    EarthquakeTrendsStack(app, definition.stack_id, definition=definition)

    app.synth()
    return app


if __name__ == "__main__":
    try:
        main()
    except MissingConfigurationError as exc:
        logger.error(str(exc))
        sys.exit(1)
