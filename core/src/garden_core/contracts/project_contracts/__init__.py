from .project_config import (
    EnvironmentConfig,
    EnvironmentDefaults,
    ProjectConfig,
    ProjectSource,
    ProviderConfigBase,
)

__all__ = [
    "EnvironmentConfig",
    "EnvironmentDefaults",
    "ProjectConfig",
    "ProjectSource",
    "ProviderConfigBase",
]
