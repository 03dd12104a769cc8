from .production import production_config


def get_environment_config(environment: str) -> dict:
    """Get configuration for the specified environment."""
    configs = {
        "production": production_config,
    }

    if environment not in configs:
        raise ValueError(f"Unknown environment: {environment}")

    return configs[environment]
