"""Production environment configuration."""

from infrastructure.config.types import EnvironmentConfig

production_config: EnvironmentConfig = {
    "log_level": "info",
    "app_environment": "production",
    # Datadog extension (pre-published layer, not owned by this app)
    "datadog_site": "datadoghq.eu",
    "datadog_env": "production",
    "datadog_service": "earthquake-trends-api",
    "datadog_layer_arn": "arn:aws:lambda:eu-west-1:464622532012:layer:Datadog-Extension-ARM:55",
    "datadog_exec_wrapper": "/opt/datadog_wrapper",
    "lambda_timeout": 10,
    "lambda_architecture": "arm64",
    "api_name": "Earthquake Trends API",
    # Relative to the directory cdk runs from (repo root, see cdk.json)
    "rust_manifest_path": "rust_lambda/Cargo.toml",
    "rust_binary_name": "bootstrap",
    "tags": {
        "Project": "earthquake-trends",
        "ManagedBy": "CDK",
    },
}
