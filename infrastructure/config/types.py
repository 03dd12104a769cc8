"""Typed configuration contracts for environment-specific settings."""

from __future__ import annotations

from typing import Dict, TypedDict


class EnvironmentConfig(TypedDict, total=False):
    """Strongly-typed environment configuration contract."""

    log_level: str
    app_environment: str

    datadog_site: str
    datadog_env: str
    datadog_service: str
    datadog_layer_arn: str
    datadog_exec_wrapper: str

    lambda_timeout: int
    lambda_architecture: str

    api_name: str
    rust_manifest_path: str
    rust_binary_name: str

    tags: Dict[str, str]
